"""Pytest configuration and fixtures for test suite."""

import json
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"


@pytest.fixture
def identifiers_file() -> Path:
    """Mixed list of valid, invalid and recoverable identifiers."""
    return FIXTURES_DIR / "identifiers.txt"


@pytest.fixture
def read_jsonl():
    """Read all JSON objects from a JSONL file."""

    def _read(path: Path) -> list[dict]:
        with path.open(encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]

    return _read


@pytest.fixture(scope="session")
def event_schema() -> dict:
    """Load log event JSON schema."""
    with (SCHEMAS_DIR / "log_event.schema.json").open() as f:
        return json.load(f)


@pytest.fixture(scope="session")
def report_schema() -> dict:
    """Load identifier report JSON schema."""
    with (SCHEMAS_DIR / "identifier_report.schema.json").open() as f:
        return json.load(f)
