from __future__ import annotations

from typing import Iterable

from .package import Package


def header_for(section: str) -> str:
    return f"[{section}]"


def is_header(line: str) -> bool:
    return line.lstrip().startswith("[")


def _find_section(lines: list[str], section: str) -> tuple[int, int] | None:
    """
    Locate a section block.

    Returns (header_index, end_index) where end_index is the index of the
    next different header or len(lines). Headers are case sensitive.
    """
    header = header_for(section)
    start_idx = -1
    for i, ln in enumerate(lines):
        if ln.strip() == header:
            start_idx = i
            break
    if start_idx == -1:
        return None
    for j in range(start_idx + 1, len(lines)):
        # a repeated header continues the same block
        if is_header(lines[j]) and lines[j].strip() != header:
            return start_idx, j
    return start_idx, len(lines)


def extract_section(content: str, section: str) -> set[Package]:
    """Packages listed under ``[section]`` in the content of one group file."""
    lines = content.splitlines()
    rng = _find_section(lines, section)
    if rng is None:
        return set()
    i, j = rng
    return Package.from_lines(lines[i + 1 : j])


def add_to_section(content: str, section: str, packages: Iterable[Package]) -> str:
    """
    Return ``content`` with ``packages`` appended to the ``[section]`` block.

    Packages already listed in the block are not repeated. A missing block is
    appended at the end of the file.
    """
    existing = extract_section(content, section)
    new = [str(p) for p in sorted(set(packages)) if p not in existing]
    if not new:
        return content

    lines = content.splitlines()
    rng = _find_section(lines, section)
    if rng is None:
        if lines and lines[-1].strip():
            lines.append("")
        lines += [header_for(section), *new]
    else:
        i, j = rng
        # keep blank separator lines before the next header where they are
        insert_at = j
        while insert_at > i + 1 and not lines[insert_at - 1].strip():
            insert_at -= 1
        lines = lines[:insert_at] + new + lines[insert_at:]
    return "\n".join(lines) + "\n"
