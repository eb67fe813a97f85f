"""Tests for the cssgradient CLI commands."""
from __future__ import annotations

import json
import logging

import pytest
from click.testing import CliRunner

from cssgradient import __version__
from cssgradient.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "validate" in result.output
        assert "inspect" in result.output
        assert "convert" in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid(self, runner) -> None:
        result = runner.invoke(cli, ["validate", "linear-gradient(to left, red, blue)"])
        assert result.exit_code == 0
        assert "OK: 1 gradient(s)" in result.output

    def test_invalid(self, runner) -> None:
        result = runner.invoke(cli, ["validate", "linear-gradient(red blue)"])
        assert result.exit_code == 1
        assert "Invalid" in result.output

    def test_no_gradient(self, runner) -> None:
        result = runner.invoke(cli, ["validate", "url(a.png)"])
        assert result.exit_code == 1
        assert "no gradient found" in result.output

    def test_vendor_prefixed_argument(self, runner) -> None:
        result = runner.invoke(cli, ["validate", "-webkit-linear-gradient(red, blue)"])
        assert result.exit_code == 0
        assert "OK: 1 gradient(s)" in result.output

    def test_uses_environment_prefixes(self, runner, monkeypatch) -> None:
        monkeypatch.setenv("CSSGRADIENT_VENDOR_PREFIXES", "-foo-")
        css = "-foo-linear-gradient(red, blue)"
        validated = runner.invoke(cli, ["validate", "--", css])
        converted = runner.invoke(cli, ["convert", "--", css])
        assert validated.exit_code == 0
        assert converted.exit_code == 0

    def test_bad_environment(self, runner, monkeypatch) -> None:
        monkeypatch.setenv("CSSGRADIENT_WIDTH", "wide")
        result = runner.invoke(cli, ["validate", "linear-gradient(red, blue)"])
        assert result.exit_code == 1
        assert "Invalid" in result.output

    def test_reads_stdin(self, runner) -> None:
        result = runner.invoke(cli, ["validate", "-"], input="radial-gradient(red, blue);\n")
        assert result.exit_code == 0
        assert "OK: 1 gradient(s)" in result.output


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_linear(self, runner) -> None:
        result = runner.invoke(cli, ["inspect", "linear-gradient(0.25turn, #fff 10px, 50%, red)"])
        assert result.exit_code == 0
        assert "Kind:     linear-gradient" in result.output
        assert "Angle:    90deg" in result.output
        assert "rgba(255, 255, 255, 1) 10px" in result.output
        assert "hint 50%" in result.output

    def test_radial(self, runner) -> None:
        result = runner.invoke(cli, ["inspect", "radial-gradient(5em circle at top left, yellow, blue)"])
        assert result.exit_code == 0
        assert "Shape:    circle 5em" in result.output
        assert "Position: top left" in result.output

    def test_vendor_prefixed_argument(self, runner) -> None:
        result = runner.invoke(cli, ["inspect", "-moz-radial-gradient(red, blue)"])
        assert result.exit_code == 0
        assert "Kind:     radial-gradient" in result.output

    def test_conic(self, runner) -> None:
        result = runner.invoke(cli, ["inspect", "conic-gradient(from 90deg, red 0deg 90deg, blue)"])
        assert result.exit_code == 0
        assert "From:     90deg" in result.output
        assert "rgba(255, 0, 0, 1) 0deg 90deg" in result.output


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------


class TestConvertCommand:
    def test_outputs_json(self, runner) -> None:
        result = runner.invoke(cli, ["convert", "linear-gradient(to right, red, blue)"])
        assert result.exit_code == 0
        [paint] = json.loads(result.output)
        assert paint["type"] == "GRADIENT_LINEAR"
        assert [s["position"] for s in paint["gradientStops"]] == [0.0, 1.0]

    def test_width_option(self, runner) -> None:
        result = runner.invoke(
            cli,
            ["convert", "--width", "200", "linear-gradient(to right, red 50px, blue)"],
        )
        assert result.exit_code == 0
        [paint] = json.loads(result.output)
        assert paint["gradientStops"][0]["position"] == 0.25

    def test_vendor_prefixed_argument(self, runner) -> None:
        result = runner.invoke(cli, ["convert", "-webkit-linear-gradient(to right, red, blue)"])
        assert result.exit_code == 0
        [paint] = json.loads(result.output)
        assert paint["type"] == "GRADIENT_LINEAR"

    def test_hints_only_is_invalid(self, runner) -> None:
        result = runner.invoke(cli, ["convert", "linear-gradient(50%)"])
        assert result.exit_code == 1
        assert "Invalid" in result.output

    def test_conic_is_invalid(self, runner) -> None:
        result = runner.invoke(cli, ["convert", "conic-gradient(red, blue)"])
        assert result.exit_code == 1
        assert "Invalid" in result.output

    def test_verbose_flag_configures_logging(self, runner, monkeypatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        result = runner.invoke(cli, ["-v", "convert", "radial-gradient(red, blue)"])
        assert result.exit_code == 0
        assert calls and calls[0]["level"] == logging.DEBUG


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


class TestServeCommand:
    def test_runs_app(self, runner, monkeypatch) -> None:
        from flask import Flask

        calls: list[tuple[Flask, dict]] = []
        monkeypatch.setattr(Flask, "run", lambda self, **kwargs: calls.append((self, kwargs)))
        monkeypatch.setenv("CSSGRADIENT_WIDTH", "300")
        result = runner.invoke(cli, ["serve", "--port", "8080"])
        assert result.exit_code == 0
        assert "Starting cssgradient on 127.0.0.1:8080" in result.output
        [(app, kwargs)] = calls
        assert kwargs == {"host": "127.0.0.1", "port": 8080, "debug": False}
        assert app.extensions["gradient_config"].width == 300.0

    def test_listed_in_help(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert "serve" in result.output
