"""Airport queries: departures in a period, busiest airports, worst delays."""

from __future__ import annotations

import re

from flightdesk.entities import Airport, Catalogs, Flight

_PERIOD_ARGUMENTS = re.compile(r'\s*(\S{1,3})\s*"([^"]{1,19})"\s*"([^"]{1,19})"')


def _newest_first(flights: list[Flight]) -> list[Flight]:
    # Two stable sorts: ids ascending, then departure dates descending.
    by_id = sorted(flights, key=lambda flight: flight.id)
    return sorted(by_id, key=lambda flight: flight.schedule_departure_date, reverse=True)


def _numbered_blocks(blocks: list[str]) -> str:
    return "\n".join(
        f"--- {number} ---\n{block}" for number, block in enumerate(blocks, start=1)
    )


def flights_from_airport(catalogs: Catalogs, arguments: str, formatted: bool) -> str:
    """Flights leaving an airport between two dates, most recent first.

    The arguments are '<airport> "<begin date>" "<end date>"', both dates in
    "YYYY/MM/DD hh:mm:ss" form and inclusive. Ties are broken by flight id.
    """
    match = _PERIOD_ARGUMENTS.match(arguments)
    if match is None:
        raise ValueError(f"expected an airport and two quoted dates: {arguments!r}")
    airport_name, begin_date, end_date = match.groups()

    airport = catalogs.airports.get(airport_name)
    if airport is None:
        return ""

    flights = [
        flight
        for flight in _newest_first([catalogs.flights[fid] for fid in airport.flights])
        if begin_date <= flight.schedule_departure_date <= end_date
    ]
    if formatted:
        return _numbered_blocks([
            f"id: {f.id}\nschedule_departure_date: {f.schedule_departure_date}\n"
            f"destination: {f.destination}\nairline: {f.airline}\n"
            f"plane_model: {f.plane_model}\n"
            for f in flights
        ])
    return "".join(
        f"{f.id};{f.schedule_departure_date};{f.destination};{f.airline};{f.plane_model}\n"
        for f in flights
    )


def _parse_limit(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid number of airports: {text!r}") from None


def top_airports_by_passengers(catalogs: Catalogs, arguments: str, formatted: bool) -> str:
    """The N airports with most passengers in a year, ties broken by name.

    The arguments are "<year> <N>".
    """
    parts = arguments.split(" ")
    if len(parts) < 2:
        raise ValueError("expected a year and a number of airports")
    year, limit = parts[0], _parse_limit(parts[1])

    ranked: list[Airport] = sorted(
        catalogs.airports.values(),
        key=lambda airport: (-airport.passengers_in(year), airport.name),
    )[:max(limit, 0)]

    if formatted:
        return _numbered_blocks([
            f"name: {a.name}\npassengers: {a.passengers_in(year)}\n" for a in ranked
        ])
    return "".join(f"{a.name};{a.passengers_in(year)}\n" for a in ranked)


def top_airports_by_median(catalogs: Catalogs, arguments: str, formatted: bool) -> str:
    """The N airports with the largest median delay, ties broken by name.

    Airports without any recorded delay are left out.
    """
    limit = _parse_limit(arguments.strip())

    ranked: list[Airport] = sorted(
        (airport for airport in catalogs.airports.values() if airport.delays),
        key=lambda airport: (-airport.median_delay(), airport.name),
    )[:max(limit, 0)]

    if formatted:
        return _numbered_blocks([
            f"name: {a.name}\nmedian: {a.median_delay():.0f}\n" for a in ranked
        ])
    return "".join(f"{a.name};{a.median_delay():.0f}\n" for a in ranked)