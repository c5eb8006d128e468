from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from matrixlab import Matrix
from matrixlab_cli import cli
from matrixlab_cli.config import DemoSettings
from matrixlab_cli.demo import format_outcome, regression_cases, results_frame, run_cases


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_cli_regression(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["regression", "--precision", "3"])
    if result.exception:
        raise result.exception
    assert result.exit_code == 0
    assert "Regression fixtures" in result.output
    assert "5.295" in result.output
    assert "11.945" in result.output


def test_cli_regression_reports_requested_log_level(
    runner: CliRunner, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="matrixlab_cli.cli"):
        result = runner.invoke(cli.app, ["--log-level", "debug", "regression"])
    if result.exception:
        raise result.exception
    assert "precision=4 log_level=DEBUG" in caplog.text


def test_cli_magic(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["--log-level", "DEBUG", "magic", "--order", "3"])
    if result.exception:
        raise result.exception
    assert result.exit_code == 0
    assert "Magic constant: 15" in result.output
    assert "yes" in result.output


def test_cli_magic_rejects_order_two(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["magic", "--order", "2"])
    assert result.exit_code == 1
    assert "Cannot build magic square" in result.output


def test_cli_rejects_negative_precision(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["regression", "--precision", "-1"])
    assert result.exit_code == 1


def test_fixture_results_track_targets() -> None:
    results = run_cases(regression_cases())
    assert len(results) == 10
    frame = results_frame(results, precision=3)
    assert list(frame.columns) == ["section", "case", "target", "actual"]
    by_case = {(row.section, row.case): row.actual for row in frame.itertuples(index=False)}
    assert by_case[("Cost function", "A")] == "5.295"
    assert by_case[("Gradient descent", "A")] == "0.237; 0.565; 0.312;"
    assert by_case[("Normal equation", "A")] == "0.008; 0.568; 0.486;"
    assert by_case[("Feature normalization", "A")] == "-1.000; 0.000; 1.000;"


def test_format_outcome() -> None:
    assert format_outcome(1.23456, 2) == "1.23"
    assert format_outcome(Matrix.from_rows([[1, 2], [3, 4]]), 1) == "1.0 2.0; 3.0 4.0;"


def test_demo_settings() -> None:
    assert DemoSettings().describe() == "precision=4 log_level=WARNING"
    with pytest.raises(ValueError):
        DemoSettings(precision=-1)
