"""Validation, classification and conversion of bibliographic identifiers.

This package provides:
- Data models (isnkit.models): identifier types, reports, errors
- Identifier core (isnkit.isn): canonical form, check digits, classification
  and conversion for ISBN-10, ISBN-13, ISSN, ISMN and ISSN-EAN13
- Batch (isnkit.batch): checking files of identifiers
- Audit (isnkit.audit): JSONL event logging for batch runs
- CLI (isnkit.cli): command-line interface
- Public API (isnkit.api): high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from isnkit.api import check_batch, check_file, write_jsonl
from isnkit.isn import (
    canonical_form,
    classify,
    generate_check,
    hyphenate_issn,
    is_valid_identifier,
    isbn10_to_13,
    isbn13_to_10,
    issn_from_ean13,
    issn_to_ean13,
    pad,
    recover_leading_zeroes,
)
from isnkit.models import IdentifierReport, IdentifierType, InvalidIdentifierError

__all__ = [
    "__version__",
    "__license__",
    "IdentifierType",
    "IdentifierReport",
    "InvalidIdentifierError",
    "canonical_form",
    "pad",
    "is_valid_identifier",
    "generate_check",
    "classify",
    "isbn10_to_13",
    "isbn13_to_10",
    "issn_from_ean13",
    "issn_to_ean13",
    "hyphenate_issn",
    "recover_leading_zeroes",
    "check_file",
    "check_batch",
    "write_jsonl",
]
