"""Public API for checking identifier files.

This module provides the high-level convenience functions of isnkit:
- Checking a text file of identifiers into IdentifierReport objects
- Exporting reports to JSONL format
- Running a full batch check with audit logging
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from isnkit.models import IdentifierReport

if TYPE_CHECKING:
    from isnkit.batch.config import BatchResult

__all__ = [
    "check_file",
    "write_jsonl",
    "check_batch",
]


def check_file(
    path: str | Path,
    *,
    isbn13_prefix: str = "978",
    recover_leading_zeroes: bool = True,
) -> list[IdentifierReport]:
    """Check every identifier in a text file.

    Parameters
    ----------
    path : str | Path
        Text file with one identifier per line. Blank lines and lines
        starting with '#' are skipped.
    isbn13_prefix : str, optional
        Prefix for ISBN-10 to ISBN-13 conversion, by default "978".
    recover_leading_zeroes : bool, optional
        Try restoring lost leading zeroes on invalid identifiers,
        by default True.

    Returns
    -------
    list[IdentifierReport]
        One report per identifier, in file order.

    Raises
    ------
    FileNotFoundError
        If file does not exist.

    Examples
    --------
        >>> from isnkit import check_file
        >>> for report in check_file("isbns.txt"):
        ...     print(report.raw, report.valid)
    """
    from isnkit.batch import BatchConfig, check_identifier
    from isnkit.batch.runner import read_identifiers

    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    config = BatchConfig(
        isbn13_prefix=isbn13_prefix,
        recover_leading_zeroes=recover_leading_zeroes,
    )
    return [check_identifier(raw, config) for _, raw in read_identifiers(file_path)]


def write_jsonl(
    reports: Iterable[IdentifierReport],
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> None:
    """Write reports to JSONL file (one JSON object per line).

    Parameters
    ----------
    reports : Iterable[IdentifierReport]
        Reports to write.
    path : str | Path
        Output file path. Parent directories are created.
    sort_keys : bool, optional
        Whether to sort dictionary keys for deterministic output,
        by default True.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for report in reports:
            json_str = json.dumps(
                report.to_dict(),
                ensure_ascii=False,
                sort_keys=sort_keys,
            )
            f.write(json_str + "\n")


def check_batch(
    input_path: str | Path,
    *,
    output_path: str | Path = "report.jsonl",
    log_path: str | Path | None = None,
    isbn13_prefix: str = "978",
    recover_leading_zeroes: bool = True,
) -> BatchResult:
    """Check a file of identifiers and write a JSONL report.

    Parameters
    ----------
    input_path : str | Path
        Text file with one identifier per line.
    output_path : str | Path, optional
        JSONL report path, by default "report.jsonl".
    log_path : str | Path | None, optional
        JSONL audit log path. If None, no events are written.
    isbn13_prefix : str, optional
        Prefix for ISBN-10 to ISBN-13 conversion, by default "978".
    recover_leading_zeroes : bool, optional
        Try restoring lost leading zeroes, by default True.

    Returns
    -------
    BatchResult
        Counters and output file paths.

    Raises
    ------
    FileNotFoundError
        If input path does not exist.
    ValueError
        If ``isbn13_prefix`` is not 978 or 979.
    """
    from isnkit.batch import BatchConfig, run_batch

    config = BatchConfig(
        isbn13_prefix=isbn13_prefix,
        recover_leading_zeroes=recover_leading_zeroes,
        output_path=Path(output_path),
        log_path=Path(log_path) if log_path is not None else None,
    )
    return run_batch(Path(input_path), config=config)
