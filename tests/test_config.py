"""Tests for group directory resolution."""

from pathlib import Path

import pytest

from pacdef.config import group_dir
from pacdef.core.errors import ConfigError


def test_override_wins(monkeypatch):
    monkeypatch.setenv("PACDEF_GROUPS_DIR", "/srv/groups")
    monkeypatch.setenv("XDG_CONFIG_HOME", "/xdg")
    assert group_dir() == Path("/srv/groups")


def test_xdg_config_home(monkeypatch):
    monkeypatch.delenv("PACDEF_GROUPS_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", "/xdg")
    assert group_dir() == Path("/xdg/pacdef/groups")


def test_home_fallback(monkeypatch):
    monkeypatch.delenv("PACDEF_GROUPS_DIR", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", "/home/user")
    assert group_dir() == Path("/home/user/.config/pacdef/groups")


def test_no_home(monkeypatch):
    monkeypatch.delenv("PACDEF_GROUPS_DIR", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(ConfigError):
        group_dir()
