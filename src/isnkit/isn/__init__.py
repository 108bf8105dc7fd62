"""Validation, classification and conversion of ISBN, ISSN and ISMN.

All functions are pure and operate on strings; none of them log or keep
state.
"""

from .canonical import canonical_form, pad
from .checksum import generate_check, is_valid_identifier, validate_mod11
from .classify import classify
from .convert import (
    hyphenate_issn,
    isbn10_to_13,
    isbn13_to_10,
    issn_from_ean13,
    issn_to_ean13,
    recover_leading_zeroes,
)

__all__ = [
    "canonical_form",
    "pad",
    "generate_check",
    "validate_mod11",
    "is_valid_identifier",
    "classify",
    "isbn10_to_13",
    "isbn13_to_10",
    "issn_from_ean13",
    "issn_to_ean13",
    "hyphenate_issn",
    "recover_leading_zeroes",
]
