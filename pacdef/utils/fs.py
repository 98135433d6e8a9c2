from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


def ensure_dir(path: Path, exist_ok: bool = True) -> None:
    path.mkdir(parents=True, exist_ok=exist_ok)


def atomic_write(path: Path, data: bytes, mode: Optional[int] = None) -> None:
    """
    Replace ``path`` with ``data``.

    The temporary file is hidden so a leftover from an interrupted write is
    never picked up as a group. With ``mode`` None the permissions of an
    existing file are kept.
    """
    tmp = path.with_name(f".{path.name}.tmp")
    tmp.write_bytes(data)
    if mode is None and path.exists():
        mode = path.stat().st_mode & 0o7777
    os.replace(tmp, path)
    if mode is not None:
        os.chmod(path, mode)


def read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
