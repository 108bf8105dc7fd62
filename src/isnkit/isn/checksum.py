"""Check digit generation and identifier validation.

Two check digit families are supported:

- Modulo 11 (ISBN-10, ISSN): weights descend from the target length to 2,
  a remainder of 10 is written as 'X'.
- Modulo 10 (ISBN-13, EAN13, ISMN): alternating weights 1 and 3 over the
  12-digit body, never 'X'.
"""

from isnkit.models.errors import InvalidIdentifierError

from ._helpers import (
    ISBN10_LENGTH,
    ISBN13_LENGTH,
    ISSN_LENGTH,
    check_value,
    digit_value,
    matches_any_shape,
)
from .canonical import canonical_form

_MOD10_LENGTHS = frozenset({ISBN13_LENGTH, ISBN13_LENGTH - 1})
_MOD11_LENGTHS = frozenset({ISBN10_LENGTH, ISBN10_LENGTH - 1, ISSN_LENGTH, ISSN_LENGTH - 1})


def generate_check(isn: str) -> str:
    """Compute the check digit for an identifier body.

    The input may be the body alone or the full identifier; an existing check
    digit is ignored.

    Parameters
    ----------
    isn : str
        Canonical identifier of length 7-10 (ISSN/ISBN-10) or 12-13 (ISBN-13).

    Returns
    -------
    str
        Check digit '0'-'9', or 'X' for the modulo-11 family.

    Raises
    ------
    InvalidIdentifierError
        If the length is unsupported or the body contains a non-digit.

    Examples
    --------
        >>> generate_check("978140885565")
        '2'
        >>> generate_check("2434561")
        'X'
    """
    length = len(isn)
    if length in _MOD10_LENGTHS:
        return _generate_check_mod10(isn)
    if length in _MOD11_LENGTHS:
        # 7 and 9 round up to the full ISSN/ISBN-10 length
        return _generate_check_mod11(isn, (length + 1) // 2 * 2)
    raise InvalidIdentifierError(
        f"Cannot generate a check digit for length {length}: {isn!r}",
        identifier=isn,
    )


def _generate_check_mod10(isn: str) -> str:
    body = [digit_value(c, isn) for c in isn[: ISBN13_LENGTH - 1]]
    total = 3 * sum(body[1::2]) + sum(body[0::2])
    return str((10 - total % 10) % 10)


def _generate_check_mod11(isn: str, length: int) -> str:
    total = 0
    for i in range(length - 1):
        total += digit_value(isn[i], isn) * (length - i)
    check = (11 - total % 11) % 11
    return "X" if check == 10 else str(check)


def validate_mod11(isn: str) -> bool:
    """Validate an ISSN or ISBN-10 check digit with a running accumulator.

    Equivalent to the weighted sum used by generation, but without
    multiplication: each pass adds the running digit total ``t`` to ``s``.

    Parameters
    ----------
    isn : str
        Canonical identifier of length 8 or 10.

    Returns
    -------
    bool
        True if the weighted sum is divisible by 11.

    Raises
    ------
    InvalidIdentifierError
        If the length is not 8 or 10 or the body contains a non-digit.
    """
    if len(isn) not in (ISSN_LENGTH, ISBN10_LENGTH):
        raise InvalidIdentifierError(
            f"Modulo-11 validation needs length {ISSN_LENGTH} or {ISBN10_LENGTH}: {isn!r}",
            identifier=isn,
        )

    s = t = 0
    for char in isn[:-1]:
        t += digit_value(char, isn)
        s += t
    t += check_value(isn[-1], isn)
    s += t
    return s % 11 == 0


def is_valid_identifier(isn: str) -> bool:
    """Check shape and check digit of an ISSN, ISBN-10, ISBN-13 or EAN13.

    The raw input must first match one of the known shapes; the canonical
    form is then checked with the algorithm for its length.

    Parameters
    ----------
    isn : str
        Raw identifier, hyphens allowed.

    Returns
    -------
    bool
        True for a well-formed identifier with a correct check digit.
    """
    if not matches_any_shape(isn):
        return False

    canon = canonical_form(isn)
    try:
        if len(canon) == ISBN13_LENGTH:
            return generate_check(canon) == canon[-1]
        if len(canon) in (ISBN10_LENGTH, ISSN_LENGTH):
            return validate_mod11(canon)
    except InvalidIdentifierError:
        return False
    return False
