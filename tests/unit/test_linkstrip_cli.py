"""CLI tests driving the Typer app and the main entry point."""

import io
import json

import pytest
from typer.testing import CliRunner

from linkstrip.cli import main
from linkstrip.cli._create_app import _create_app

pytestmark = pytest.mark.cli

runner = CliRunner()


class TestStripText:
    def test_stdin_to_stdout(self, linkstrip_home):
        result = runner.invoke(_create_app(), ["strip", "text"], input="a [[b|c]] [d](e)\n")
        assert result.exit_code == 0
        assert result.stdout == "a c d\n"

    def test_toggle(self, linkstrip_home):
        result = runner.invoke(_create_app(), ["strip", "text", "--no-wikilinks"], input="[[b]] [d](e)")
        assert result.exit_code == 0
        assert result.stdout == "[[b]] d"

    def test_invalid_config(self, linkstrip_home):
        (linkstrip_home / "config.json").write_text("{", encoding="utf-8")
        result = runner.invoke(_create_app(), ["strip", "text"], input="x")
        assert result.exit_code == 1


class TestStripFile:
    def test_json_output(self, linkstrip_home, tmp_path):
        note = tmp_path / "note.md"
        note.write_text("[[Home]]", encoding="utf-8")
        result = runner.invoke(_create_app(), ["--display", "json", "strip", "file", str(note)])
        assert result.exit_code == 0
        assert '"changed": true' in result.stdout
        assert note.read_text(encoding="utf-8") == "Home"

    def test_dry_run_yaml(self, linkstrip_home, tmp_path):
        note = tmp_path / "note.md"
        note.write_text("[x](y)", encoding="utf-8")
        result = runner.invoke(_create_app(), ["strip", "file", str(note), "--dry-run"])
        assert result.exit_code == 0
        assert "dry_run: true" in result.stdout
        assert note.read_text(encoding="utf-8") == "[x](y)"

    def test_missing_file(self, linkstrip_home, tmp_path):
        result = runner.invoke(_create_app(), ["strip", "file", str(tmp_path / "missing.md")])
        assert result.exit_code == 1


class TestConfigCommands:
    def test_init_then_show(self, linkstrip_home):
        result = runner.invoke(_create_app(), ["config", "init"])
        assert result.exit_code == 0
        assert (linkstrip_home / "config.json").exists()

        result = runner.invoke(_create_app(), ["--display", "json", "config", "show", "wikilinks"])
        assert result.exit_code == 0
        assert '"keep_alias": true' in result.stdout

    def test_init_twice_fails(self, linkstrip_home_with_config):
        result = runner.invoke(_create_app(), ["config", "init"])
        assert result.exit_code == 1

    def test_show_unknown_section(self, linkstrip_home_with_config):
        result = runner.invoke(_create_app(), ["config", "show", "monitor"])
        assert result.exit_code == 1


def test_bad_display_format(linkstrip_home):
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "show"])
    assert result.exit_code == 1


class TestMain:
    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.startswith("linkstrip ")

    def test_strip_text(self, linkstrip_home, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("[[a|b]]"))
        assert main(["strip", "text"]) == 0
        assert capsys.readouterr().out == "b"

    def test_command_exit_code(self, linkstrip_home, capsys):
        assert main(["--display", "json", "config", "show", "nope"]) == 1
        output = json.loads(capsys.readouterr().out)
        assert output["errors"] == ["Unknown section: nope"]

    def test_usage_error(self, linkstrip_home, capsys):
        assert main(["strip", "--bogus"]) == 2
        assert "Usage error" in capsys.readouterr().err

    def test_broken_config_still_runs(self, linkstrip_home, capsys):
        (linkstrip_home / "config.json").write_text("[]", encoding="utf-8")
        assert main(["--display", "json", "config", "show"]) == 1
        output = json.loads(capsys.readouterr().out)
        assert "must be a JSON object" in output["errors"][0]

    def test_unreadable_config_still_runs(self, linkstrip_home, capsys):
        (linkstrip_home / "config.json").mkdir()
        assert main(["--display", "json", "config", "show"]) == 1
        output = json.loads(capsys.readouterr().out)
        assert "Cannot read config file" in output["errors"][0]
