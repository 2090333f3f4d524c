"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker, description in (
        ("unit", "fast tests of a single module"),
        ("cli", "tests that drive the Typer application"),
        ("config", "configuration loading and saving"),
    ):
        config.addinivalue_line("markers", f"{marker}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Complete linkstrip configuration dict with default values."""
    return {
        "hyperlinks": {
            "enabled": True,
            "keep_text": True,
            "whitelist": [],
            "link_type": "both",
            "blacklist_mode": False,
            "blacklist": [],
        },
        "wikilinks": {
            "enabled": True,
            "keep_alias": True,
            "whitelist": [],
            "blacklist_mode": False,
            "blacklist": [],
        },
        "log": {"level": "WARNING"},
        "order": ["hyperlinks", "wikilinks"],
    }


def write_config(home: Path, config_dict: dict) -> Path:
    """Write config_dict as home/config.json and return its path."""
    config_path = home / "config.json"
    config_path.write_text(json.dumps(config_dict, indent=2), encoding="utf-8")
    return config_path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def linkstrip_home(tmp_path: Path, monkeypatch) -> Path:
    """Point LINKSTRIP_HOME at an empty temporary directory (no config file)."""
    home = tmp_path / ".linkstrip"
    home.mkdir()
    monkeypatch.setenv("LINKSTRIP_HOME", str(home))
    return home


@pytest.fixture
def linkstrip_home_with_config(linkstrip_home: Path, minimal_config_dict: dict) -> Path:
    """LINKSTRIP_HOME holding a config.json with default values."""
    write_config(linkstrip_home, minimal_config_dict)
    return linkstrip_home


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
