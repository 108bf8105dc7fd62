"""Batch check configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from isnkit.isn._helpers import DEFAULT_ISBN_PREFIX, ISBN_PREFIXES


@dataclass
class BatchConfig:
    """Configuration for a batch identifier check.

    Attributes
    ----------
    isbn13_prefix : str
        Prefix used when converting ISBN-10 to ISBN-13 (default: "978").
    recover_leading_zeroes : bool
        Try restoring lost leading zeroes on invalid short identifiers.
    output_path : Path
        JSONL report file, one report per identifier.
    log_path : Path | None
        JSONL audit log. If None, no events are written.
    """

    isbn13_prefix: str = DEFAULT_ISBN_PREFIX
    recover_leading_zeroes: bool = True
    output_path: Path = Path("report.jsonl")
    log_path: Path | None = None

    def __post_init__(self) -> None:
        """Coerce paths and validate."""
        if self.isbn13_prefix not in ISBN_PREFIXES:
            raise ValueError(
                f"isbn13_prefix must be one of {', '.join(ISBN_PREFIXES)}, "
                f"got {self.isbn13_prefix!r}"
            )

        self.output_path = Path(self.output_path)
        if self.log_path is not None:
            self.log_path = Path(self.log_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["output_path"] = str(self.output_path)
        data["log_path"] = str(self.log_path) if self.log_path is not None else None
        return data


@dataclass
class BatchResult:
    """Results from a batch check.

    Attributes
    ----------
    total : int
        Identifiers read from the input.
    valid : int
        Identifiers that passed validation.
    invalid : int
        Identifiers that failed validation.
    recovered : int
        Invalid identifiers that validate once leading zeroes are restored.
    by_type : dict[str, int]
        Count of valid identifiers per IdentifierType.
    output_files : dict[str, str]
        Map of artifact type to file path.
    """

    total: int
    valid: int
    invalid: int
    recovered: int
    by_type: dict[str, int] = field(default_factory=dict)
    output_files: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def counters(self) -> dict[str, int]:
        """Return the flat counters logged with run_finished."""
        return {
            "total": self.total,
            "valid": self.valid,
            "invalid": self.invalid,
            "recovered": self.recovered,
        }
