"""Batch identifier checking.

Reads one identifier per line, checks each one and writes a JSONL report.
Blank lines and lines starting with '#' are skipped.
"""

import sys
import time
from collections import Counter
from collections.abc import Iterator
from pathlib import Path

from isnkit.api import write_jsonl
from isnkit.audit import AuditLogger, generate_run_id, get_package_version
from isnkit.batch.config import BatchConfig, BatchResult
from isnkit.isn import (
    canonical_form,
    classify,
    generate_check,
    is_valid_identifier,
    isbn10_to_13,
    issn_from_ean13,
    pad,
    recover_leading_zeroes,
)
from isnkit.isn._helpers import PADDED_LENGTHS, matches_any_shape
from isnkit.models import IdentifierReport, IdentifierType, InvalidIdentifierError

__all__ = ["check_identifier", "read_identifiers", "run_batch"]

_CHECKABLE_LENGTHS = frozenset({7, 8, 9, 10, 12, 13})


def check_identifier(raw: str, config: BatchConfig | None = None) -> IdentifierReport:
    """Check a single identifier and collect its derived forms.

    Never raises for bad input: an InvalidIdentifierError is captured in
    ``IdentifierReport.error``.

    Parameters
    ----------
    raw : str
        Identifier as supplied.
    config : BatchConfig | None, optional
        Conversion and recovery settings. If None, uses defaults.

    Returns
    -------
    IdentifierReport
        Report for ``raw``. For an invalid identifier that validates once its
        leading zeroes are restored, ``recovered`` is True and
        ``identifier_type`` names the type it was recovered as and
        ``check_digit`` is that of the zero-padded form.

    Examples
    --------
        >>> check_identifier("0262510871").isbn13
        '9780262510875'
    """
    if config is None:
        config = BatchConfig()

    canon = canonical_form(raw)
    valid = is_valid_identifier(raw)
    identifier_type: IdentifierType | None = None
    check_digit = None
    isbn13 = None
    issn = None
    recovered = False

    try:
        if valid:
            identifier_type = classify(raw)
            if identifier_type is IdentifierType.ISBN10:
                isbn13 = isbn10_to_13(canon, prefix=config.isbn13_prefix)
            elif identifier_type is IdentifierType.ISBN13:
                isbn13 = canon
            elif identifier_type is IdentifierType.ISSN:
                issn = canon.upper()
            elif identifier_type is IdentifierType.ISSNEAN13:
                issn = issn_from_ean13(canon)
        elif config.recover_leading_zeroes:
            for candidate, length in PADDED_LENGTHS.items():
                if len(canon) < length and recover_leading_zeroes(canon, candidate):
                    identifier_type = candidate
                    recovered = True
                    break

        if recovered:
            check_digit = generate_check(pad(canon, PADDED_LENGTHS[identifier_type]))
        elif len(canon) in _CHECKABLE_LENGTHS:
            check_digit = generate_check(canon)
    except InvalidIdentifierError as e:
        return IdentifierReport(raw=raw, canonical=canon, valid=valid, error=str(e))

    return IdentifierReport(
        raw=raw,
        canonical=canon,
        valid=valid,
        identifier_type=identifier_type,
        check_digit=check_digit,
        isbn13=isbn13,
        issn=issn,
        recovered=recovered,
    )


def read_identifiers(input_path: Path) -> Iterator[tuple[int, str]]:
    """Yield (line number, identifier) pairs, skipping blanks and comments."""
    with input_path.open(encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            value = line.strip()
            if not value or value.startswith("#"):
                continue
            yield line_no, value


def _rejection_reason(report: IdentifierReport) -> str:
    if report.error is not None:
        return "error"
    if not matches_any_shape(report.raw):
        return "invalid_shape"
    return "invalid_check"


def run_batch(
    input_path: Path | str,
    config: BatchConfig | None = None,
    logger: AuditLogger | None = None,
) -> BatchResult:
    """Check every identifier in a text file.

    Parameters
    ----------
    input_path : Path | str
        Text file with one identifier per line.
    config : BatchConfig | None, optional
        Batch configuration. If None, uses defaults.
    logger : AuditLogger | None, optional
        Audit logger. If None, one is opened on ``config.log_path`` when set.

    Returns
    -------
    BatchResult
        Counters and output file paths.

    Raises
    ------
    FileNotFoundError
        If ``input_path`` does not exist.

    Examples
    --------
        >>> from isnkit.batch import BatchConfig, run_batch
        >>> result = run_batch("isbns.txt", BatchConfig(output_path=Path("out.jsonl")))
        >>> print(result.valid, result.invalid)
    """
    input_path = Path(input_path)
    if config is None:
        config = BatchConfig()

    if not input_path.is_file():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    owned_logger = None
    if logger is None and config.log_path is not None:
        logger = owned_logger = AuditLogger(run_id=generate_run_id(), log_path=config.log_path)

    start_time = time.perf_counter()
    try:
        if logger is not None:
            parameters = {**config.to_dict(), "package_version": get_package_version()}
            logger.run_started(command=sys.argv, parameters=parameters)
            logger.set_stage("check")

        result = _check_all(input_path, config, logger)

        if logger is not None:
            logger.set_stage(None)
            logger.run_finished(
                status="success",
                duration_seconds=time.perf_counter() - start_time,
                counters=result.counters(),
            )
        return result

    except Exception as e:
        if logger is not None:
            logger.error(exception_class=type(e).__name__, message=str(e))
            logger.run_finished(
                status="failed",
                duration_seconds=time.perf_counter() - start_time,
            )
        raise

    finally:
        if owned_logger is not None:
            owned_logger.close()


def _check_all(
    input_path: Path,
    config: BatchConfig,
    logger: AuditLogger | None,
) -> BatchResult:
    reports: list[IdentifierReport] = []
    by_type: Counter[str] = Counter()
    recovered = 0

    for line_no, raw in read_identifiers(input_path):
        report = check_identifier(raw, config)
        reports.append(report)

        if report.valid and report.identifier_type is not None:
            by_type[str(report.identifier_type)] += 1
            continue

        if report.recovered:
            recovered += 1
        if logger is None:
            continue
        if report.recovered and report.identifier_type is not None:
            logger.identifier_recovered(line_no, raw, str(report.identifier_type))
        else:
            logger.identifier_rejected(line_no, raw, _rejection_reason(report))

    write_jsonl(reports, config.output_path)
    if logger is not None:
        logger.artifact_written(
            path=str(config.output_path),
            record_count=len(reports),
            bytes_written=config.output_path.stat().st_size,
        )

    valid = sum(by_type.values())
    return BatchResult(
        total=len(reports),
        valid=valid,
        invalid=len(reports) - valid,
        recovered=recovered,
        by_type=dict(sorted(by_type.items())),
        output_files={"report": str(config.output_path)},
    )
