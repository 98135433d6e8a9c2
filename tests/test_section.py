"""Tests for extracting and extending backend sections of group files."""

from pacdef.core.package import Package
from pacdef.core.section import add_to_section, extract_section


def _pkgs(*names):
    return {Package(n) for n in names}


CONTENT = "[X]\na\nb\n[Y]\nc\n"


def test_extract_isolates_blocks():
    assert extract_section(CONTENT, "X") == _pkgs("a", "b")
    assert extract_section(CONTENT, "Y") == _pkgs("c")


def test_extract_absent_header_is_empty():
    assert extract_section(CONTENT, "Z") == set()


def test_extract_is_idempotent():
    assert extract_section(CONTENT, "X") == extract_section(CONTENT, "X")


def test_extract_empty_section():
    assert extract_section("[X]\n[Y]\nc\n", "X") == set()


def test_headers_are_case_sensitive():
    assert extract_section("[pacman]\nvim\n", "Pacman") == set()


def test_extract_skips_comments_and_blank_lines():
    content = "# my desktop\n[pacman]\n\nvim # editor\n# git\nzsh\n\n[rust]\nbat\n"
    assert extract_section(content, "pacman") == _pkgs("vim", "zsh")
    assert extract_section(content, "rust") == _pkgs("bat")


def test_lines_before_first_header_are_ignored():
    assert extract_section("stray\n[X]\na\n", "X") == _pkgs("a")


def test_add_to_existing_section():
    out = add_to_section(CONTENT, "X", _pkgs("d"))
    assert out == "[X]\na\nb\nd\n[Y]\nc\n"


def test_add_keeps_blank_line_before_next_header():
    out = add_to_section("[X]\na\n\n[Y]\nc\n", "X", _pkgs("b"))
    assert out == "[X]\na\nb\n\n[Y]\nc\n"


def test_add_creates_missing_section():
    out = add_to_section("[X]\na\n", "Y", _pkgs("e", "d"))
    assert out == "[X]\na\n\n[Y]\nd\ne\n"


def test_add_to_empty_content():
    assert add_to_section("", "X", _pkgs("a")) == "[X]\na\n"


def test_add_skips_present_packages():
    assert add_to_section(CONTENT, "X", _pkgs("a")) == CONTENT


def test_repeated_header_continues_block():
    content = "[X]\na\n[X]\nb\n[Y]\nc\n"
    assert extract_section(content, "X") == _pkgs("a", "b")
    assert extract_section(content, "Y") == _pkgs("c")


def test_header_line_whitespace_is_ignored():
    content = "  [X]  \na\n [Y]\nc\n"
    assert extract_section(content, "X") == _pkgs("a")
    assert extract_section(content, "Y") == _pkgs("c")
