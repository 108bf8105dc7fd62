"""Audit logging subsystem for isnkit batch runs.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope
- generate_run_id: run identifier factory
"""

from isnkit.audit.helpers import generate_run_id, get_package_version
from isnkit.audit.logger import AuditLogger
from isnkit.audit.models import LogEvent
from isnkit.utils import get_iso_timestamp

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
    "get_package_version",
    "get_iso_timestamp",
]
