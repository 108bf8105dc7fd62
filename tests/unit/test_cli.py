"""Tests for CLI module."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from isnkit.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Provide Click test CLI runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Top-level CLI
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cli_version_flag(runner: CliRunner) -> None:
    """Test --version flag outputs version string."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "isnkit" in result.output


@pytest.mark.unit
def test_cli_help(runner: CliRunner) -> None:
    """Test --help output lists commands."""
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("validate", "classify", "check-digit", "convert", "batch"):
        assert command in result.output


@pytest.mark.unit
def test_cli_invalid_command(runner: CliRunner) -> None:
    """Test invalid command returns non-zero exit code."""
    result = runner.invoke(cli, ["invalid-command"])

    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# validate / classify / check-digit
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_validate_all_valid(runner: CliRunner) -> None:
    """Test validate exits 0 when every identifier is valid."""
    result = runner.invoke(cli, ["validate", "0805071660", "2434-561X"])

    assert result.exit_code == 0
    assert "0805071660\tvalid" in result.output
    assert "2434-561X\tvalid" in result.output


@pytest.mark.unit
def test_validate_any_invalid_exits_1(runner: CliRunner) -> None:
    """Test validate exits 1 when an identifier is invalid."""
    result = runner.invoke(cli, ["validate", "0805071660", "0805071661"])

    assert result.exit_code == 1
    assert "0805071661\tinvalid" in result.output


@pytest.mark.unit
def test_validate_requires_argument(runner: CliRunner) -> None:
    """Test validate without identifiers is a usage error."""
    result = runner.invoke(cli, ["validate"])

    assert result.exit_code == 2


@pytest.mark.unit
@pytest.mark.parametrize(
    ("isn", "expected"),
    [("9790260000438", "ISMN"), ("9772434561006", "ISSNEAN13"), ("00014664", "ISSN")],
)
def test_classify_command(runner: CliRunner, isn: str, expected: str) -> None:
    """Test classify prints the type name."""
    result = runner.invoke(cli, ["classify", isn])

    assert result.exit_code == 0
    assert result.output.strip() == expected


@pytest.mark.unit
def test_classify_invalid_exits_1(runner: CliRunner) -> None:
    """Test classify reports invalid identifiers as errors."""
    result = runner.invoke(cli, ["classify", "0805071661"])

    assert result.exit_code == 1
    assert "Invalid identifier" in result.output


@pytest.mark.unit
def test_check_digit_command(runner: CliRunner) -> None:
    """Test check-digit prints the generated digit."""
    result = runner.invoke(cli, ["check-digit", "2434561"])

    assert result.exit_code == 0
    assert result.output.strip() == "X"


@pytest.mark.unit
def test_check_digit_bad_length_exits_1(runner: CliRunner) -> None:
    """Test unsupported body length is reported."""
    result = runner.invoke(cli, ["check-digit", "12345"])

    assert result.exit_code == 1
    assert "Error" in result.output


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["0262510871", "--to", "isbn13"], "9780262510875"),
        (["0262510871", "--to", "isbn13", "--prefix", "979"], "9790262510874"),
        (["9780262510875", "--to", "isbn10"], "0262510871"),
        (["9772434561006", "--to", "issn"], "2434561X"),
        (["2434561X", "--to", "ean13"], "9772434561006"),
        (["1234567890123", "--to", "issn"], "1234567890123"),
    ],
)
def test_convert_command(runner: CliRunner, args: list[str], expected: str) -> None:
    """Test each conversion target."""
    result = runner.invoke(cli, ["convert", *args])

    assert result.exit_code == 0
    assert result.output.strip() == expected


@pytest.mark.unit
def test_convert_error_exits_1(runner: CliRunner) -> None:
    """Test conversion errors exit 1."""
    result = runner.invoke(cli, ["convert", "026251087", "--to", "isbn13"])

    assert result.exit_code == 1
    assert "Error" in result.output


@pytest.mark.unit
def test_convert_unknown_target(runner: CliRunner) -> None:
    """Test unknown --to value is a usage error."""
    result = runner.invoke(cli, ["convert", "0262510871", "--to", "ismn"])

    assert result.exit_code == 2


# ---------------------------------------------------------------------------
# batch command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_batch_help(runner: CliRunner) -> None:
    """Test batch command help."""
    result = runner.invoke(cli, ["batch", "--help"])

    assert result.exit_code == 0
    assert "input_path" in result.output.lower()


@pytest.mark.unit
def test_batch_nonexistent_file(runner: CliRunner, tmp_path: Path) -> None:
    """Test batch with nonexistent file."""
    result = runner.invoke(cli, ["batch", "nonexistent.txt", "-o", str(tmp_path / "r.jsonl")])

    assert result.exit_code != 0


@pytest.mark.integration
def test_batch_file(runner: CliRunner, identifiers_file: Path, tmp_path: Path) -> None:
    """Test batch command writes report and summary."""
    output = tmp_path / "report.jsonl"
    log = tmp_path / "events.jsonl"

    result = runner.invoke(
        cli,
        ["batch", str(identifiers_file), "-o", str(output), "--log", str(log), "-v"],
    )

    assert result.exit_code == 0
    assert output.exists()
    assert log.exists()
    assert "Checked 11 identifiers (8 valid, 3 invalid)" in result.output
