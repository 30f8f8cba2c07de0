"""Summary of a single user, flight or reservation."""

from __future__ import annotations

from flightdesk.entities import Catalogs, Flight, Reservation, User


def is_flight_id(identifier: str) -> bool:
    """Flight ids are made of digits only."""
    return identifier.isdigit()


def is_reservation_id(identifier: str) -> bool:
    """Reservation ids start with "Book"."""
    return identifier.startswith("Book")


def _render(fields: list[tuple[str, str]], formatted: bool) -> str:
    if formatted:
        body = "".join(f"{name}: {value}\n" for name, value in fields)
        return "--- 1 ---\n" + body
    return ";".join(value for _, value in fields) + "\n"


def _user_summary(user: User, formatted: bool) -> str:
    if not user.is_active():
        return ""
    return _render([
        ("name", user.name),
        ("sex", user.sex),
        ("age", str(user.age)),
        ("country_code", user.country_code),
        ("passport", user.passport),
        ("number_of_flights", str(len(user.flights))),
        ("number_of_reservations", str(len(user.reservations))),
        ("total_spent", f"{user.total_spent:.3f}"),
    ], formatted)


def _reservation_summary(reservation: Reservation, formatted: bool) -> str:
    return _render([
        ("hotel_id", reservation.hotel_id),
        ("hotel_name", reservation.hotel_name),
        ("hotel_stars", reservation.hotel_stars),
        ("begin_date", reservation.begin_date),
        ("end_date", reservation.end_date),
        ("includes_breakfast", reservation.includes_breakfast),
        ("nights", str(reservation.nights)),
        ("total_price", f"{reservation.total_price:.3f}"),
    ], formatted)


def _flight_summary(flight: Flight, formatted: bool) -> str:
    return _render([
        ("airline", flight.airline),
        ("plane_model", flight.plane_model),
        ("origin", flight.origin),
        ("destination", flight.destination),
        ("schedule_departure_date", flight.schedule_departure_date),
        ("schedule_arrival_date", flight.schedule_arrival_date),
        ("passengers", str(len(flight.passengers))),
        ("delay", str(flight.delay)),
    ], formatted)


def query_one(catalogs: Catalogs, identifier: str, formatted: bool) -> str:
    """Summarise the user, flight or reservation with the given id.

    Unknown ids and inactive users give an empty result.
    """
    if is_flight_id(identifier):
        flight = catalogs.flights.get(identifier)
        return _flight_summary(flight, formatted) if flight else ""
    if is_reservation_id(identifier):
        reservation = catalogs.reservations.get(identifier)
        return _reservation_summary(reservation, formatted) if reservation else ""
    user = catalogs.users.get(identifier)
    return _user_summary(user, formatted) if user else ""