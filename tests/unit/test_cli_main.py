from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import patch

from dlconv.cli import EXIT_FATAL, EXIT_SUCCESS
from dlconv.cli import main as cli_main
from dlconv.models.conversion_result import ConversionResult


def test_cli_converts_and_prints_summary(temp_workdir: Path, dive_log_csv: Path, capsys):
    code = cli_main([str(dive_log_csv)])
    out = capsys.readouterr().out
    assert code == EXIT_SUCCESS
    assert f"INFO Converting dive log: {dive_log_csv}" in out
    assert "INFO extracted 3 dives" in out
    assert "SUMMARY dives=3 rows=70 output=dive-log.md" in out
    assert (temp_workdir / "dive-log.md").exists()


def test_cli_missing_input_argument(temp_workdir: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == EXIT_FATAL
    assert "ERROR input file not provided" in out
    assert not (temp_workdir / "dive-log.md").exists()


def test_cli_debug_mode(temp_workdir: Path, capsys):
    now = datetime.now(UTC)
    mock_result = ConversionResult(
        input_path=Path("log.csv"),
        output_path=Path("dive-log.md"),
        rows_scanned=0,
        dives=0,
        start_time=now,
        end_time=now,
        elapsed_seconds=0.0,
    )
    with patch('dlconv.cli.app.convert', return_value=mock_result) as mock_convert:
        code = cli_main(["--debug", "log.csv"])

    out = capsys.readouterr().out
    assert code == EXIT_SUCCESS
    assert "DEBUG debug mode enabled" in out
    assert "DEBUG config: title='Dive Log' output=dive-log.md" in out
    mock_convert.assert_called_once()
    assert mock_convert.call_args.args[0] == Path("log.csv")


def test_cli_uses_config_file(temp_workdir: Path, write_config: Path, dive_log_csv: Path, capsys):
    code = cli_main([str(dive_log_csv)])
    assert code == EXIT_SUCCESS
    text = (temp_workdir / "my-dives.md").read_text(encoding="utf-8")
    assert "title: My Dives\n" in text
    assert "tags: [diving, logbook]\n" in text
    assert not (temp_workdir / "dive-log.md").exists()


def test_cli_config_from_env_file(temp_workdir: Path, dive_log_csv: Path, monkeypatch, capsys):
    (temp_workdir / "other.yml").write_text("title: From Env\n", encoding="utf-8")
    (temp_workdir / ".env").write_text("DLCONV_CONFIG=other.yml\n", encoding="utf-8")
    # load_dotenv writes into os.environ directly; registering the variable
    # with monkeypatch first makes teardown remove it again
    monkeypatch.setenv("DLCONV_CONFIG", "unused.yml")
    code = cli_main([str(dive_log_csv)])
    assert code == EXIT_SUCCESS
    assert "title: From Env\n" in (temp_workdir / "dive-log.md").read_text(encoding="utf-8")
