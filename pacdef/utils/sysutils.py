from __future__ import annotations

import shutil
import subprocess
from typing import Sequence

from ..config import SHELL_ENV
from ..core.errors import BackendLaunchError, BackendQueryError


def have(cmd: str) -> bool:
    return shutil.which(cmd) is not None


def run_capture(cmd: Sequence[str]) -> str:
    """Run a query command and return its stdout."""
    try:
        cp = subprocess.run(
            list(cmd), capture_output=True, text=True, env=SHELL_ENV, check=False
        )
    except OSError as e:
        raise BackendLaunchError(cmd[0], e) from e
    if cp.returncode != 0:
        raise BackendQueryError(cmd, cp.returncode, cp.stderr)
    return cp.stdout
