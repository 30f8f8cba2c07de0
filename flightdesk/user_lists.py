"""Flights and reservations of a user, most recent first."""

from __future__ import annotations

from dataclasses import dataclass

from flightdesk.entities import Catalogs, User


@dataclass(frozen=True)
class _Entry:
    id: str
    sort_date: str
    shown_date: str
    kind: str


def _newest_first(entries: list[_Entry]) -> list[_Entry]:
    # Two stable sorts: ids ascending, then dates descending.
    by_id = sorted(entries, key=lambda entry: entry.id)
    return sorted(by_id, key=lambda entry: entry.sort_date, reverse=True)


def _flight_entries(catalogs: Catalogs, user: User) -> list[_Entry]:
    entries = []
    for flight_id in user.flights:
        flight = catalogs.flights[flight_id]
        entries.append(_Entry(
            id=flight_id,
            sort_date=flight.schedule_departure_date,
            shown_date=flight.departure_day(),
            kind="flight",
        ))
    return entries


def _reservation_entries(catalogs: Catalogs, user: User) -> list[_Entry]:
    entries = []
    for reservation_id in user.reservations:
        reservation = catalogs.reservations[reservation_id]
        entries.append(_Entry(
            id=reservation_id,
            sort_date=f"{reservation.begin_date} 00:00:00",
            shown_date=reservation.begin_date,
            kind="reservation",
        ))
    return entries


def _render(entries: list[_Entry], formatted: bool, with_type: bool) -> str:
    if formatted:
        blocks = []
        for number, entry in enumerate(entries, start=1):
            block = f"--- {number} ---\nid: {entry.id}\ndate: {entry.shown_date}\n"
            if with_type:
                block += f"type: {entry.kind}\n"
            blocks.append(block)
        return "\n".join(blocks)
    if with_type:
        return "".join(f"{e.id};{e.shown_date};{e.kind}\n" for e in entries)
    return "".join(f"{e.id};{e.shown_date}\n" for e in entries)


def user_flights_reservations(catalogs: Catalogs, arguments: str, formatted: bool) -> str:
    """List a user's flights, reservations or both, most recent first.

    The arguments are "<user id> [flights|reservations]". Without the second
    argument both kinds are listed together with their type. Unknown and
    inactive users give an empty result; any other second argument raises
    ValueError.
    """
    parts = arguments.split(" ")
    user = catalogs.users.get(parts[0])
    if user is None or not user.is_active():
        return ""

    if len(parts) == 1:
        entries = _flight_entries(catalogs, user) + _reservation_entries(catalogs, user)
        return _render(_newest_first(entries), formatted, with_type=True)

    kind = parts[1]
    if kind == "flights":
        entries = _flight_entries(catalogs, user)
    elif kind == "reservations":
        entries = _reservation_entries(catalogs, user)
    else:
        raise ValueError(f"invalid second argument: {kind!r}")
    return _render(_newest_first(entries), formatted, with_type=False)