"""Search for active users whose name starts with a prefix."""

from __future__ import annotations

from flightdesk.entities import Catalogs


def strip_quotes(text: str) -> str:
    """Remove every double quote from the text."""
    return text.replace('"', "")


def users_by_prefix(catalogs: Catalogs, arguments: str, formatted: bool) -> str:
    """Active users whose name starts with the prefix, ordered by name then id."""
    prefix = strip_quotes(arguments)
    matches = sorted(
        (user for user in catalogs.users.values()
         if user.is_active() and user.name.startswith(prefix)),
        key=lambda user: (user.name, user.id),
    )
    if formatted:
        blocks = [
            f"--- {number} ---\nid: {user.id}\nname: {user.name}\n"
            for number, user in enumerate(matches, start=1)
        ]
        return "\n".join(blocks)
    return "".join(f"{user.id};{user.name}\n" for user in matches)