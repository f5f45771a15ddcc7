"""
Username codec.

Usernames encode the operator role in a two-letter prefix followed by a
zero-padded number: AG001 (Agent), SP012 (Supervisor), AD100 (Admin).
"""

import re
from dataclasses import dataclass

from wallboard.domain.entities import AccountRole

USERNAME_PATTERN = re.compile(r"(AG|SP|AD)(00[1-9]|0[1-9][0-9]|[1-9][0-9]{2})")

PREFIX_ROLES = {
    "AG": AccountRole.agent,
    "SP": AccountRole.supervisor,
    "AD": AccountRole.admin,
}

ROLE_PREFIXES = {role: prefix for prefix, role in PREFIX_ROLES.items()}


class UsernameFormatError(ValueError):
    """Raised when a username or prefix cannot be decoded."""


@dataclass(frozen=True)
class ParsedUsername:
    prefix: str
    number: int


def parse_username(username: str) -> ParsedUsername:
    """
    Split a username into prefix and number.

    Raises:
        UsernameFormatError: if the username is not AGxxx, SPxxx or ADxxx
            with a number between 001 and 999
    """
    match = USERNAME_PATTERN.fullmatch(username or "")
    if match is None:
        raise UsernameFormatError(
            "Invalid username format. Use AGxxx, SPxxx, or ADxxx (001-999)"
        )
    return ParsedUsername(prefix=match.group(1), number=int(match.group(2)))


def role_for_prefix(prefix: str) -> AccountRole:
    try:
        return PREFIX_ROLES[prefix]
    except KeyError:
        raise UsernameFormatError(f"Unknown username prefix: {prefix!r}") from None


def role_for_username(username: str) -> AccountRole:
    """Derive the role from the first two characters, without a full format check."""
    return role_for_prefix((username or "")[:2])
