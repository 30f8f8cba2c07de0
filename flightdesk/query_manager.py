"""Dispatch of query command lines and the files that hold their results."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from pathlib import Path

from flightdesk.airports import (
    flights_from_airport,
    top_airports_by_median,
    top_airports_by_passengers,
)
from flightdesk.entities import Catalogs
from flightdesk.hotels import hotel_rating, hotel_reservations, hotel_revenue
from flightdesk.metrics import general_metrics
from flightdesk.summary import query_one
from flightdesk.user_lists import user_flights_reservations
from flightdesk.users_search import users_by_prefix

_Query = Callable[[Catalogs, str, bool], str]

_QUERIES: dict[str, _Query] = {
    "1": query_one,
    "2": user_flights_reservations,
    "3": hotel_rating,
    "4": hotel_reservations,
    "5": flights_from_airport,
    "6": top_airports_by_passengers,
    "7": top_airports_by_median,
    "8": hotel_revenue,
    "9": users_by_prefix,
    "10": general_metrics,
}


def _output_path(output_dir: str | Path, number: int) -> Path:
    return Path(output_dir) / f"command{number}_output.txt"


def run_query(line: str, catalogs: Catalogs) -> str:
    """Run one command line such as "1F Book0000000001" and return its output.

    A trailing "F" on the query number selects the structured output. An
    unknown query gives an empty result.
    """
    command, _, arguments = line.partition(" ")
    formatted = command.endswith("F")
    query = _QUERIES.get(command.removesuffix("F") if formatted else command)
    if query is None:
        return ""
    return query(catalogs, arguments, formatted)


def process_line(line: str, number: int, catalogs: Catalogs, output_dir: str | Path) -> Path:
    """Run a command line and write its output to command<number>_output.txt.

    Arguments that a query rejects are reported on stderr and leave the
    output file empty. The path of the written file is returned.
    """
    try:
        result = run_query(line, catalogs)
    except ValueError as error:
        print(f"Error in command {number}: {error}", file=sys.stderr)
        result = ""
    path = _output_path(output_dir, number)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result, encoding="utf-8")
    return path


def run_queries(lines: Iterable[str], catalogs: Catalogs, output_dir: str | Path) -> list[Path]:
    """Run every command line in order, numbering the outputs from 1."""
    return [
        process_line(line.split("\n", 1)[0], number, catalogs, output_dir)
        for number, line in enumerate(lines, start=1)
    ]