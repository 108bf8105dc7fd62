"""Constants and compiled regex patterns for identifier handling.

Shape patterns are matched against the raw (non-canonical) input with
``fullmatch``.
"""

import re

from isnkit.models.errors import InvalidIdentifierError
from isnkit.models.types import IdentifierType

ISSN_LENGTH = 8
ISBN10_LENGTH = 10
ISBN13_LENGTH = 13

# Pre-compiled shape patterns
ISSN_RE = re.compile(r"\d{4}-?\d{3}[0-9xX]", re.ASCII)
ISBN10_RE = re.compile(r"[\d-]{9,13}[0-9xX]", re.ASCII)
EAN13_RE = re.compile(r"97[789][\d-]{9,13}\d", re.ASCII)

ISSNEAN13_PREFIX = "977"
ISMN_PREFIX = "9790"
ISBN_PREFIXES = ("978", "979")
DEFAULT_ISBN_PREFIX = "978"

# Ordered most specific first: ISMN's 9790 refines the 979 ISBN family.
EAN13_PREFIX_TYPES: tuple[tuple[str, IdentifierType], ...] = (
    (ISSNEAN13_PREFIX, IdentifierType.ISSNEAN13),
    (ISMN_PREFIX, IdentifierType.ISMN),
    ("978", IdentifierType.ISBN13),
    ("979", IdentifierType.ISBN13),
)

# Target lengths for leading-zero recovery
PADDED_LENGTHS = {
    IdentifierType.ISSN: ISSN_LENGTH,
    IdentifierType.ISBN10: ISBN10_LENGTH,
}


def matches_any_shape(isn: str) -> bool:
    """Return True if raw input matches the ISSN, ISBN-10 or EAN13 shape."""
    return any(pattern.fullmatch(isn) for pattern in (ISSN_RE, ISBN10_RE, EAN13_RE))


def digit_value(char: str, isn: str) -> int:
    """Return the numeric value of a single ASCII digit.

    Parameters
    ----------
    char : str
        Character to convert.
    isn : str
        Identifier the character came from, for error reporting.

    Returns
    -------
    int
        Value 0-9.

    Raises
    ------
    InvalidIdentifierError
        If ``char`` is not an ASCII digit.
    """
    if len(char) != 1 or not "0" <= char <= "9":
        raise InvalidIdentifierError(f"Non-digit character {char!r} in {isn!r}", identifier=isn)
    return ord(char) - ord("0")


def check_value(char: str, isn: str) -> int:
    """Return the value of a modulo-11 check character ('X'/'x' counts 10)."""
    if char in ("X", "x"):
        return 10
    return digit_value(char, isn)
