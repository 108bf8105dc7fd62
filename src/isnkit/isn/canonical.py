"""Canonical form and zero padding."""

from isnkit.models.errors import InvalidIdentifierError

from ._helpers import ISBN10_LENGTH, ISSN_LENGTH


def canonical_form(isn: str) -> str:
    """Strip hyphens and surrounding whitespace.

    Internal whitespace is left as is, so ``"0262 510871"`` keeps its space
    and later fails length-based checks.

    Parameters
    ----------
    isn : str
        Identifier in any formatting.

    Returns
    -------
    str
        Canonical identifier.

    Examples
    --------
        >>> canonical_form("978-3-16-148410-0")
        '9783161484100'
    """
    return isn.replace("-", "").strip()


def pad(isn: str, length: int) -> str:
    """Left-pad an ISSN or ISBN-10 with zeroes to ``length``.

    Parameters
    ----------
    isn : str
        Identifier to pad.
    length : int
        Target length, 8 (ISSN) or 10 (ISBN-10).

    Returns
    -------
    str
        Padded identifier; unchanged if already at least ``length`` long.

    Raises
    ------
    InvalidIdentifierError
        If ``length`` is neither 8 nor 10.
    """
    if length not in (ISSN_LENGTH, ISBN10_LENGTH):
        raise InvalidIdentifierError(
            f"Pad length must be {ISSN_LENGTH} or {ISBN10_LENGTH}, got {length}",
            identifier=isn,
        )
    return isn.rjust(length, "0")
