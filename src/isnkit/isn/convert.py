"""Conversions between related identifier representations."""

from isnkit.models.errors import InvalidIdentifierError
from isnkit.models.types import IdentifierType

from ._helpers import (
    DEFAULT_ISBN_PREFIX,
    EAN13_RE,
    ISBN10_LENGTH,
    ISBN13_LENGTH,
    ISSN_LENGTH,
    ISSNEAN13_PREFIX,
    PADDED_LENGTHS,
)
from .canonical import canonical_form, pad
from .checksum import generate_check, is_valid_identifier, validate_mod11


def _is_digits(value: str, length: int) -> bool:
    return len(value) == length and value.isascii() and value.isdigit()


def isbn10_to_13(isbn10: str, prefix: str = DEFAULT_ISBN_PREFIX) -> str:
    """Convert an ISBN-10 to its ISBN-13 form.

    The ISBN-10 check digit is not verified; validate first with
    :func:`is_valid_identifier` if the input is untrusted.

    Parameters
    ----------
    isbn10 : str
        ISBN-10, hyphens allowed.
    prefix : str, optional
        3-digit GS1 prefix, by default "978".

    Returns
    -------
    str
        Canonical 13-digit ISBN.

    Raises
    ------
    InvalidIdentifierError
        If the canonical ISBN-10 is shorter than 10 characters, the prefix is
        not 3 digits, or the body contains a non-digit.

    Examples
    --------
        >>> isbn10_to_13("0262510871")
        '9780262510875'
    """
    canon = canonical_form(isbn10)
    if len(canon) < ISBN10_LENGTH:
        raise InvalidIdentifierError(f"ISBN-10 too short: {isbn10!r}", identifier=isbn10)
    if not _is_digits(prefix, 3):
        raise InvalidIdentifierError(f"Prefix must be 3 digits, got {prefix!r}", identifier=isbn10)

    body = prefix + canon[: ISBN10_LENGTH - 1]
    return body + generate_check(body)


def isbn13_to_10(isbn13: str) -> str:
    """Convert a 978-prefixed ISBN-13 to ISBN-10.

    Raises
    ------
    InvalidIdentifierError
        If the input is not a 13-character identifier starting with 978.
        979 ISBNs have no ISBN-10 form.
    """
    canon = canonical_form(isbn13)
    if len(canon) != ISBN13_LENGTH or not canon.startswith(DEFAULT_ISBN_PREFIX):
        raise InvalidIdentifierError(
            f"Only 978-prefixed ISBN-13 have an ISBN-10 form: {isbn13!r}",
            identifier=isbn13,
        )

    body = canon[3 : ISBN13_LENGTH - 1]
    return body + generate_check(body)


def issn_from_ean13(ean: str) -> str:
    """Extract the ISSN carried by an EAN13.

    Input that neither matches the EAN13 shape nor starts with 977 is
    returned unchanged, as is input without seven digits at positions 3-9.

    Parameters
    ----------
    ean : str
        13-digit EAN, hyphens allowed.

    Returns
    -------
    str
        Canonical ISSN, or ``ean`` unchanged.

    Examples
    --------
        >>> issn_from_ean13("9772434561006")
        '2434561X'
    """
    if not (EAN13_RE.fullmatch(ean) or ean.startswith(ISSNEAN13_PREFIX)):
        return ean

    body = canonical_form(ean)[3:10]
    if not _is_digits(body, ISSN_LENGTH - 1):
        return ean
    return body + generate_check(body)


def issn_to_ean13(issn: str, sequence: str = "00") -> str:
    """Encode an ISSN as a 977-prefixed EAN13.

    Parameters
    ----------
    issn : str
        Valid ISSN, hyphen allowed.
    sequence : str, optional
        2-digit sequence variant, by default "00".

    Returns
    -------
    str
        13-digit EAN.

    Raises
    ------
    InvalidIdentifierError
        If the ISSN is invalid or ``sequence`` is not 2 digits.
    """
    canon = canonical_form(issn)
    if len(canon) != ISSN_LENGTH or not is_valid_identifier(canon):
        raise InvalidIdentifierError(f"Invalid ISSN: {issn!r}", identifier=issn)
    if not _is_digits(sequence, 2):
        raise InvalidIdentifierError(
            f"Sequence variant must be 2 digits, got {sequence!r}", identifier=issn
        )

    body = ISSNEAN13_PREFIX + canon[: ISSN_LENGTH - 1] + sequence
    return body + generate_check(body)


def hyphenate_issn(issn: str) -> str:
    """Format a valid ISSN as NNNN-NNNC with an uppercase check character."""
    canon = canonical_form(issn)
    if len(canon) != ISSN_LENGTH or not is_valid_identifier(canon):
        raise InvalidIdentifierError(f"Invalid ISSN: {issn!r}", identifier=issn)
    return f"{canon[:4]}-{canon[4:7]}{canon[7].upper()}"


def recover_leading_zeroes(isn: str, identifier_type: IdentifierType) -> bool:
    """Check whether an identifier validates once its leading zeroes are restored.

    Parameters
    ----------
    isn : str
        Identifier that may have lost leading zeroes (e.g. in a spreadsheet).
    identifier_type : IdentifierType
        ISSN (padded to 8) or ISBN10 (padded to 10).

    Returns
    -------
    bool
        True if the padded identifier passes the modulo-11 check. False for
        other types and for empty, overlong or non-digit input.

    Examples
    --------
        >>> recover_leading_zeroes("14664", IdentifierType.ISSN)
        True
    """
    length = PADDED_LENGTHS.get(identifier_type)
    if length is None:
        return False

    canon = canonical_form(isn)
    if not canon or len(canon) > length:
        return False

    try:
        return validate_mod11(pad(canon, length))
    except InvalidIdentifierError:
        return False
