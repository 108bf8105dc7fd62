"""Batch checking of identifier lists.

This package provides the entry point for checking a file of identifiers,
including configuration and result types.
"""

from isnkit.batch.config import BatchConfig, BatchResult
from isnkit.batch.runner import check_identifier, run_batch

__all__ = [
    "BatchConfig",
    "BatchResult",
    "check_identifier",
    "run_batch",
]
