from __future__ import annotations

import pytest
from typer.testing import CliRunner

import cli.main
from cli.main import app
from core.domain.errors import InvalidValueError

runner = CliRunner()


def test_linked_list_command_with_values():
    result = runner.invoke(app, ["--no-banner", "linked-list", "x", "y"])

    assert result.exit_code == 0, result.output
    assert "'y'" in result.output
    assert "get(2)" in result.output
    assert "size=2" in result.output


def test_linked_list_command_uses_sample_values(monkeypatch):
    monkeypatch.setenv("PROTOPLAY_SAMPLE_VALUES", '["only"]')

    result = runner.invoke(app, ["--no-banner", "linked-list"])

    assert result.exit_code == 0, result.output
    assert "'only'" in result.output


def test_blank_value_gets_default():
    result = runner.invoke(app, ["--no-banner", "linked-list", "x", " "])

    assert result.exit_code == 0, result.output
    assert "(empty)" in result.output


def test_records_command():
    result = runner.invoke(app, ["--no-banner", "records"])

    assert result.exit_code == 0, result.output
    assert "South Pole" in result.output
    assert "License after move" in result.output


def test_cards_command():
    result = runner.invoke(app, ["--no-banner", "cards"])

    assert result.exit_code == 0, result.output
    assert "contains(id=903000001)" in result.output


def test_demo_command_prints_banner():
    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0, result.output
    assert "PROTOCOL PLAYGROUND" in result.output
    assert "South Pole" in result.output


def test_domain_error_maps_to_exit_code(monkeypatch):
    def boom(*args, **kwargs):
        raise InvalidValueError()

    monkeypatch.setattr(cli.main, "run_linked_list_demo", boom)

    result = runner.invoke(app, ["--no-banner", "linked-list", "x"])

    assert result.exit_code == 1
    assert "INVALID_VALUE" in result.output


def test_invalid_setting_is_reported_without_traceback(monkeypatch):
    monkeypatch.setenv("PROTOPLAY_LOG_LEVEL", "chatty")

    result = runner.invoke(app, ["--no-banner", "records"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert "PROTOPLAY_LOG_LEVEL" in result.output
    assert "Traceback" not in result.output


def test_console_script_entry_point(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["protocol-playground", "--no-banner", "records"])

    with pytest.raises(SystemExit) as excinfo:
        cli.main.run()

    assert excinfo.value.code == 0
    assert "South Pole" in capsys.readouterr().out
