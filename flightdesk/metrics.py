"""General activity metrics by year, by month or by day."""

from __future__ import annotations

import re
from collections.abc import Iterable

from flightdesk.entities import Catalogs, DayMetric, MonthMetric, YearMetric

AVIATION_START = 1903
CURRENT_YEAR = 2023

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Integer at the start of the text, 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _totals(days: Iterable[DayMetric]) -> tuple[int, int, int, int]:
    users = flights = passengers = reservations = 0
    for day in days:
        users += day.users
        flights += day.flights
        passengers += day.passengers
        reservations += day.reservations
    return users, flights, passengers, reservations


def _render(label: str, rows: list[tuple[int, int, int, int, int, int]], formatted: bool) -> str:
    if formatted:
        return "\n".join(
            f"--- {number} ---\n{label}: {key}\nusers: {users}\nflights: {flights}\n"
            f"passengers: {passengers}\nunique_passengers: {unique}\n"
            f"reservations: {reservations}\n"
            for number, (key, users, flights, passengers, unique, reservations)
            in enumerate(rows, start=1)
        )
    return "".join(";".join(str(value) for value in row) + "\n" for row in rows)


def _month_rows(month: MonthMetric):
    # Only days 1 to 30 are reported for a single month.
    for number in range(1, 31):
        day = month.days.get(number)
        if day is None:
            continue
        yield (number, day.users, day.flights, day.passengers,
               len(day.unique_passengers), day.reservations)


def _year_rows(year: YearMetric):
    for number in range(1, 13):
        month = year.months.get(number)
        if month is None:
            continue
        days = (month.days[d] for d in range(1, 32) if d in month.days)
        users, flights, passengers, reservations = _totals(days)
        yield (number, users, flights, passengers,
               len(month.unique_passengers()), reservations)


def _all_years_rows(metrics: dict[int, YearMetric]):
    for number in range(AVIATION_START, CURRENT_YEAR + 1):
        year = metrics.get(number)
        if year is None:
            continue
        days = (
            month.days[d]
            for m in range(1, 13) if (month := year.months.get(m)) is not None
            for d in range(1, 32) if d in month.days
        )
        users, flights, passengers, reservations = _totals(days)
        yield (number, users, flights, passengers,
               len(year.unique_passengers()), reservations)


def general_metrics(catalogs: Catalogs, arguments: str, formatted: bool) -> str:
    """Activity per year, per month of a year, or per day of a month.

    The arguments are "[year [month]]". Without a year every year from 1903
    to 2023 that has activity is listed.
    """
    parts = arguments.split(" ") if arguments else []
    year = _leading_int(parts[0]) if parts else 0
    month = _leading_int(parts[1]) if len(parts) > 1 else 0

    if year == 0:
        return _render("year", list(_all_years_rows(catalogs.metrics)), formatted)

    year_metric = catalogs.metrics.get(year)
    if year_metric is None:
        return ""
    if month == 0:
        return _render("month", list(_year_rows(year_metric)), formatted)

    month_metric = year_metric.months.get(month)
    if month_metric is None:
        return ""
    return _render("day", list(_month_rows(month_metric)), formatted)