"""Identifier type tag and per-identifier check report."""

from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any

__all__ = ["IdentifierType", "IdentifierReport"]


class IdentifierType(StrEnum):
    """Kinds of International Standard Number.

    Attributes
    ----------
    ISSN : str
        8-character serial number.
    ISBN10 : str
        10-character book number.
    ISBN13 : str
        13-digit book number with a 978/979 prefix.
    ISMN : str
        13-digit printed music number with a 9790 prefix.
    ISSNEAN13 : str
        ISSN carried inside a 977-prefixed EAN13.
    OTHER : str
        Valid EAN13 outside the bibliographic prefixes.
    """

    ISSN = "ISSN"
    ISBN10 = "ISBN10"
    ISBN13 = "ISBN13"
    ISMN = "ISMN"
    ISSNEAN13 = "ISSNEAN13"
    OTHER = "OTHER"


@dataclass(frozen=True)
class IdentifierReport:
    """Outcome of checking one raw identifier.

    Attributes
    ----------
    raw : str
        Identifier as supplied.
    canonical : str
        Identifier with hyphens and surrounding whitespace removed.
    valid : bool
        Whether shape and check digit are valid.
    identifier_type : IdentifierType | None
        Classification, only set for valid identifiers.
    check_digit : str | None
        Check digit computed from the body, when the length supports one.
    isbn13 : str | None
        ISBN-13 form of a valid ISBN-10 or ISBN-13.
    issn : str | None
        ISSN form of a valid ISSN or ISSN-EAN13.
    recovered : bool
        True when the identifier validates only after restoring leading zeroes.
    error : str | None
        Error message if the check raised.
    """

    raw: str
    canonical: str
    valid: bool
    identifier_type: IdentifierType | None = None
    check_digit: str | None = None
    isbn13: str | None = None
    issn: str | None = None
    recovered: bool = False
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data["identifier_type"] = (
            str(self.identifier_type) if self.identifier_type is not None else None
        )
        return data
