"""Domain records held in the catalogs that the queries read."""

from __future__ import annotations

import statistics
from dataclasses import dataclass, field


@dataclass
class User:
    """A registered user with the flights and reservations tied to them."""

    id: str
    name: str
    sex: str = ""
    age: int = 0
    country_code: str = ""
    passport: str = ""
    account_status: str = "active"
    flights: list[str] = field(default_factory=list)
    reservations: list[str] = field(default_factory=list)
    total_spent: float = 0.0

    def is_active(self) -> bool:
        """True when the account status is "active", ignoring case."""
        return self.account_status.casefold() == "active"


@dataclass
class Flight:
    """A scheduled flight and the users travelling on it."""

    id: str
    airline: str = ""
    plane_model: str = ""
    origin: str = ""
    destination: str = ""
    schedule_departure_date: str = ""
    schedule_arrival_date: str = ""
    passengers: list[str] = field(default_factory=list)
    delay: int = 0

    def departure_day(self) -> str:
        """The date part of the scheduled departure, without the time."""
        return self.schedule_departure_date.partition(" ")[0]


@dataclass
class Reservation:
    """A hotel reservation made by a user."""

    id: str
    user_id: str = ""
    hotel_id: str = ""
    hotel_name: str = ""
    hotel_stars: str = ""
    begin_date: str = ""
    end_date: str = ""
    includes_breakfast: str = "False"
    price_per_night: int = 0
    rating: int = 0
    nights: int = 0
    total_price: float = 0.0


@dataclass
class Hotel:
    """A hotel with its average rating and the ids of its reservations."""

    id: str
    name: str = ""
    stars: str = ""
    rating: float = 0.0
    reservations: list[str] = field(default_factory=list)


@dataclass
class Airport:
    """An airport with its departing flights, delays and yearly passengers."""

    name: str
    flights: list[str] = field(default_factory=list)
    delays: list[int] = field(default_factory=list)
    yearly_passengers: dict[str, int] = field(default_factory=dict)

    def median_delay(self) -> float:
        """Median of the recorded departure delays, 0.0 when there are none."""
        if not self.delays:
            return 0.0
        return float(statistics.median(self.delays))

    def passengers_in(self, year) -> int:
        """Passengers on flights departing in the given year."""
        return self.yearly_passengers.get(str(year), 0)


@dataclass
class DayMetric:
    """Activity counted on one day."""

    users: int = 0
    flights: int = 0
    passengers: int = 0
    reservations: int = 0
    unique_passengers: set[str] = field(default_factory=set)


@dataclass
class MonthMetric:
    """Daily activity of one month, keyed by day number."""

    days: dict[int, DayMetric] = field(default_factory=dict)

    def unique_passengers(self) -> set[str]:
        """Distinct passengers that flew on any day of the month."""
        result: set[str] = set()
        for day in self.days.values():
            result |= day.unique_passengers
        return result


@dataclass
class YearMetric:
    """Monthly activity of one year, keyed by month number."""

    months: dict[int, MonthMetric] = field(default_factory=dict)

    def unique_passengers(self) -> set[str]:
        """Distinct passengers that flew in any month of the year."""
        result: set[str] = set()
        for month in self.months.values():
            result |= month.unique_passengers()
        return result


@dataclass
class Catalogs:
    """All loaded records, each keyed by its identifier."""

    users: dict[str, User] = field(default_factory=dict)
    flights: dict[str, Flight] = field(default_factory=dict)
    reservations: dict[str, Reservation] = field(default_factory=dict)
    hotels: dict[str, Hotel] = field(default_factory=dict)
    airports: dict[str, Airport] = field(default_factory=dict)
    metrics: dict[int, YearMetric] = field(default_factory=dict)