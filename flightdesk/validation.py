"""Checks of query command lines typed in the interactive menu."""

from __future__ import annotations

import re
from itertools import takewhile

_DATE = re.compile(r"(\d{4})/(\d{2})/(\d{2})")
_DATE_TIME = re.compile(r"(\d{4})/(\d{2})/(\d{2}) (\d{2}):(\d{2}):(\d{2})")
_AIRPORT_CODE = re.compile(r"\s*(\S{1,3})")
_QUOTED = re.compile(r'\s*"([^"]{1,19})')


class InvalidInputError(ValueError):
    """A command line that does not fit its query.

    ``argument`` is the 1-based position of the offending argument (the
    query number itself is argument 1), or None when the number of
    arguments is wrong.
    """

    def __init__(self, argument: int | None):
        self.argument = argument
        if argument is None:
            message = "invalid number of arguments"
        else:
            message = f"argument {argument} is invalid"
        super().__init__(message)


def _date_in_range(year: str, month: str, day: str) -> bool:
    return 1 <= int(month) <= 12 and 1 <= int(day) <= 31 and int(year) > 0


def _is_valid_date(text: str) -> bool:
    match = _DATE.fullmatch(text)
    return match is not None and _date_in_range(*match.groups())


def _is_valid_date_with_time(text: str) -> bool:
    match = _DATE_TIME.fullmatch(text)
    if match is None:
        return False
    year, month, day, hours, minutes, seconds = match.groups()
    return (_date_in_range(year, month, day) and int(hours) <= 23
            and int(minutes) <= 59 and int(seconds) <= 59)


def _is_airport_name(text: str) -> bool:
    return len(text) == 3 and text.isascii() and text.isalpha()


def _scan_period(text: str) -> tuple[str, str, str]:
    """Read '<airport> "<date>" "<date>"' as far as it goes; missing parts are empty."""
    values = ["", "", ""]
    match = _AIRPORT_CODE.match(text)
    if match is None:
        return tuple(values)
    values[0] = match.group(1)
    position = match.end()
    for slot in (1, 2):
        match = _QUOTED.match(text, position)
        if match is None:
            break
        values[slot] = match.group(1)
        position = match.end()
        if not text.startswith('"', position):
            break
        position += 1
    return tuple(values)


def _year_out_of_range(word: str) -> bool:
    return word >= "9999" or word <= "1900"


def _check(query: int, index: int, word: str) -> int:
    """Error position for one word, 0 when it is acceptable, -1 for a count error."""
    present = word != ""
    if index == 0:
        if not present:
            return -1
        return 0 if word in (str(query), f"{query}F") else 1
    if query in (1, 3, 4, 7):
        if index == 1:
            return 0 if present else -1
        return -1 if present else 0
    if query == 2:
        if index == 1:
            return 0 if present else -1
        if index == 2:
            return 3 if present and word not in ("reservations", "flights") else 0
        return -1 if present else 0
    if query == 6:
        if index == 1:
            if not present:
                return -1
            return 2 if _year_out_of_range(word) else 0
        if index == 2:
            return 0 if present else -1
        return -1 if present else 0
    if query == 8:
        if index == 1:
            return 0 if present else -1
        if index in (2, 3):
            if not present:
                return -1
            return 0 if _is_valid_date(word) else index + 1
        return -1 if present else 0
    if query == 10:
        if index == 1:
            return 2 if present and _year_out_of_range(word) else 0
        if index == 2:
            return 3 if present and (word > "12" or word < "1") else 0
        return -1 if present else 0
    return 0


def validate_input(query: int, text: str) -> tuple[str, ...]:
    """Check a command line for the given query number and return its arguments.

    Raises InvalidInputError naming the first offending argument. Query
    numbers outside 1 to 10 are not checked.
    """
    if not 1 <= query <= 10:
        return ()
    parts = text.split(" ")
    code = 0
    for index in range(5):
        word = parts[index] if index < len(parts) else ""
        code = _check(query, index, word)
        if code or not word or (index == 0 and query in (5, 9)):
            break

    rest = text.partition(" ")[2]
    if query == 5:
        airport, begin, end = _scan_period(rest)
        if not _is_airport_name(airport):
            code = 2
        elif not _is_valid_date_with_time(begin):
            code = 3
        elif not _is_valid_date_with_time(end):
            code = 4

    if code:
        raise InvalidInputError(None if code == -1 else code)

    if query == 5:
        return _scan_period(rest)
    if query == 9:
        return (rest,) if rest else ()
    return tuple(takewhile(bool, parts[1:]))