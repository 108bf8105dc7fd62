"""Identifier classification by length and prefix."""

from isnkit.models.errors import InvalidIdentifierError
from isnkit.models.types import IdentifierType

from ._helpers import EAN13_PREFIX_TYPES, ISBN10_LENGTH, ISSN_LENGTH
from .canonical import canonical_form
from .checksum import is_valid_identifier


def classify(isn: str) -> IdentifierType:
    """Return the type of a valid identifier.

    Parameters
    ----------
    isn : str
        Raw identifier, hyphens allowed.

    Returns
    -------
    IdentifierType
        ISSN and ISBN10 by length; 13-digit identifiers by prefix, with
        OTHER for EAN13s outside the bibliographic prefixes.

    Raises
    ------
    InvalidIdentifierError
        If ``isn`` fails :func:`is_valid_identifier`.

    Examples
    --------
        >>> classify("9790260000438")
        <IdentifierType.ISMN: 'ISMN'>
    """
    if not is_valid_identifier(isn):
        raise InvalidIdentifierError(f"Invalid identifier: {isn!r}", identifier=isn)

    canon = canonical_form(isn)

    if len(canon) == ISSN_LENGTH:
        return IdentifierType.ISSN
    if len(canon) == ISBN10_LENGTH:
        return IdentifierType.ISBN10

    for prefix, identifier_type in EAN13_PREFIX_TYPES:
        if canon.startswith(prefix):
            return identifier_type
    return IdentifierType.OTHER
