from __future__ import annotations

from pathlib import Path
from typing import Sequence


class PacdefError(Exception):
    pass


class ConfigError(PacdefError):
    pass


class GroupLoadError(PacdefError):
    def __init__(self, path: str | Path, reason: object):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class GroupNotFoundError(PacdefError):
    def __init__(self, name: str):
        super().__init__(f"group not found: {name}")
        self.name = name


class BackendLaunchError(PacdefError):
    """The package manager binary could not be started at all."""

    def __init__(self, binary: str, reason: object):
        super().__init__(f"cannot launch {binary}: {reason}")
        self.binary = binary
        self.reason = reason


class BackendQueryError(PacdefError):
    def __init__(self, cmd: Sequence[str], returncode: int, output: str = ""):
        msg = f"`{' '.join(cmd)}` exited with status {returncode}"
        if output.strip():
            msg += f": {output.strip()}"
        super().__init__(msg)
        self.cmd = list(cmd)
        self.returncode = returncode
        self.output = output


class UnknownBackendError(PacdefError):
    def __init__(self, section: str):
        super().__init__(f"unknown backend section: {section}")
        self.section = section
