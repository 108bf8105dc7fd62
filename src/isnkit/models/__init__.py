"""Shared data types for isnkit.

This package contains the identifier type tag, the per-identifier report
and the exception type consumed across the package.
"""

from isnkit.models.errors import InvalidIdentifierError
from isnkit.models.types import IdentifierReport, IdentifierType

__all__ = [
    "IdentifierType",
    "IdentifierReport",
    "InvalidIdentifierError",
]
