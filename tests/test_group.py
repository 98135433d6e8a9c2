"""Tests for group files and the group directory loader."""

import pytest

from pacdef.core.errors import GroupLoadError
from pacdef.core.group import Group
from pacdef.core.package import Package


def test_load_from_dir(tmp_path):
    (tmp_path / "desktop").write_text("[pacman]\nvim\nzsh\n")
    (tmp_path / "rust-tools").write_text("[rust]\nbat\n")

    result = Group.load_from_dir(tmp_path)

    assert result.errors == []
    assert [g.name for g in result.sorted()] == ["desktop", "rust-tools"]
    desktop = result.get("desktop")
    assert desktop.packages == {Package("vim"), Package("zsh")}
    assert desktop.content == "[pacman]\nvim\nzsh\n"


def test_package_set_is_independent_of_line_order(tmp_path):
    (tmp_path / "a").write_text("[pacman]\nvim\nzsh\ngit\n")
    (tmp_path / "b").write_text("[pacman]\ngit\nvim\nzsh\n")

    result = Group.load_from_dir(tmp_path)

    assert result.get("a").packages == result.get("b").packages


def test_bad_file_is_reported_and_others_still_load(tmp_path):
    (tmp_path / "good").write_text("[pacman]\nvim\n")
    (tmp_path / "bad").write_bytes(b"[pacman]\n\xff\xfe\n")

    result = Group.load_from_dir(tmp_path)

    assert [g.name for g in result.sorted()] == ["good"]
    assert len(result.errors) == 1
    assert result.errors[0].path == tmp_path / "bad"
    assert "bad" in str(result.errors[0])


def test_directories_and_broken_links_are_skipped(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "dangling").symlink_to(tmp_path / "nowhere")
    (tmp_path / "real").write_text("vim\n")

    result = Group.load_from_dir(tmp_path)

    assert [g.name for g in result.sorted()] == ["real"]
    assert result.errors == []


def test_symlinked_file_is_loaded(tmp_path):
    source = tmp_path / "elsewhere"
    source.mkdir()
    (source / "linked").write_text("[pacman]\ngit\n")
    groups = tmp_path / "groups"
    groups.mkdir()
    (groups / "linked").symlink_to(source / "linked")

    result = Group.load_from_dir(groups)

    assert result.get("linked").packages == {Package("git")}


def test_missing_directory_raises(tmp_path):
    with pytest.raises(GroupLoadError):
        Group.load_from_dir(tmp_path / "missing")


def test_equality_uses_name_and_packages_but_hash_and_order_use_name():
    a = Group("base", frozenset({Package("vim")}))
    b = Group("base", frozenset({Package("zsh")}))
    c = Group("base", frozenset({Package("vim")}))

    assert a != b
    assert a == c
    assert hash(a) == hash(b)
    assert not a < b and not b < a
    assert a <= b and a >= b
    assert Group("alpha") < Group("beta")
    assert Group("beta") > Group("alpha")


def test_hidden_files_are_skipped(tmp_path):
    (tmp_path / "base").write_text("[pacman]\nvim\n")
    (tmp_path / ".base.tmp").write_text("[pacman]\nleftover\n")

    result = Group.load_from_dir(tmp_path)

    assert [g.name for g in result.sorted()] == ["base"]
