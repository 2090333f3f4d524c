"""Unit tests for config cmd_init."""

import json

import pytest

from linkstrip.api.config.cmd_init import cmd_init
from tests.unit.conftest import minimal_config_dict, run_cmd

pytestmark = pytest.mark.config


def test_creates_default_config(linkstrip_home):
    result = run_cmd(cmd_init)
    assert result.success
    assert result.output["created"] is True
    config_path = linkstrip_home / "config.json"
    assert json.loads(config_path.read_text(encoding="utf-8")) == minimal_config_dict()


def test_refuses_to_overwrite(linkstrip_home):
    (linkstrip_home / "config.json").write_text('{"order": ["wikilinks"]}', encoding="utf-8")
    result = run_cmd(cmd_init)
    assert not result.success
    assert result.output["created"] is False
    assert "already exists" in result.output["errors"][0]
    assert "wikilinks" in (linkstrip_home / "config.json").read_text(encoding="utf-8")


def test_force_overwrites(linkstrip_home):
    (linkstrip_home / "config.json").write_text("{broken", encoding="utf-8")
    result = run_cmd(cmd_init, force=True)
    assert result.success
    assert json.loads((linkstrip_home / "config.json").read_text(encoding="utf-8"))["order"] == [
        "hyperlinks",
        "wikilinks",
    ]


def test_announce_before_work(linkstrip_home):
    result = cmd_init()
    assert result.announce == "Initializing configuration..."
    assert not (linkstrip_home / "config.json").exists()
