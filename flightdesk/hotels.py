"""Hotel queries: average rating, reservation listing and revenue."""

from __future__ import annotations

from flightdesk.entities import Catalogs, Reservation


def hotel_rating(catalogs: Catalogs, hotel_id: str, formatted: bool) -> str:
    """Average rating of a hotel; 0.000 when the hotel is unknown."""
    hotel = catalogs.hotels.get(hotel_id)
    rating = hotel.rating if hotel is not None else 0.0
    if formatted:
        return f"--- 1 ---\nrating: {rating:.3f}\n"
    return f"{rating:.3f}\n"


def _newest_first(reservation: Reservation):
    return reservation.begin_date, _Reversed(reservation.id)


class _Reversed:
    """Wraps a string so that sorting in reverse keeps it ascending."""

    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __lt__(self, other: "_Reversed") -> bool:
        return self.value > other.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Reversed) and self.value == other.value


def hotel_reservations(catalogs: Catalogs, hotel_id: str, formatted: bool) -> str:
    """Reservations of a hotel, most recent begin date first, ties by id."""
    hotel = catalogs.hotels.get(hotel_id)
    if hotel is None:
        return ""
    reservations = sorted(
        (catalogs.reservations[rid] for rid in hotel.reservations),
        key=_newest_first,
        reverse=True,
    )
    if formatted:
        blocks = [
            f"--- {number} ---\nid: {r.id}\nbegin_date: {r.begin_date}\n"
            f"end_date: {r.end_date}\nuser_id: {r.user_id}\nrating: {r.rating}\n"
            f"total_price: {r.total_price:.3f}\n"
            for number, r in enumerate(reservations, start=1)
        ]
        return "\n".join(blocks)
    return "".join(
        f"{r.id};{r.begin_date};{r.end_date};{r.user_id};{r.rating};{r.total_price:.3f}\n"
        for r in reservations
    )


def date_number(date: str) -> int:
    """Approximate day number of a YYYY/MM/DD date, used for night counts."""
    parts = date.split(" ")[0].split("/")
    if len(parts) < 3:
        raise ValueError(f"invalid date: {date!r}")
    year, month, day = (int(part) for part in parts[:3])
    return year * 365 + month * 30 + day


def reservation_revenue(reservation: Reservation, begin_date: str, end_date: str) -> int:
    """Revenue of the nights of a reservation that fall between two dates."""
    if begin_date > reservation.end_date or reservation.begin_date > end_date:
        return 0
    window_begin = date_number(begin_date)
    window_end = date_number(end_date)
    stay_begin = date_number(reservation.begin_date)
    stay_end = date_number(reservation.end_date)

    first = max(stay_begin, window_begin)
    last = stay_end if stay_end <= window_end else window_end + 1
    nights = max(last - first, 0)
    return reservation.price_per_night * nights


def hotel_revenue(catalogs: Catalogs, arguments: str, formatted: bool) -> str:
    """Total revenue of a hotel between two dates, inclusive.

    The arguments are "<hotel id> <begin date> <end date>".
    """
    parts = arguments.split(" ")
    if len(parts) < 3:
        raise ValueError("expected a hotel id, a begin date and an end date")
    hotel_id, begin_date, end_date = parts[:3]

    revenue = 0
    hotel = catalogs.hotels.get(hotel_id)
    if hotel is not None:
        revenue = sum(
            reservation_revenue(catalogs.reservations[rid], begin_date, end_date)
            for rid in hotel.reservations
        )
    if formatted:
        return f"--- 1 ---\nrevenue: {revenue}\n"
    return f"{revenue}\n"