from __future__ import annotations

import os
from pathlib import Path

from .core.errors import ConfigError

# Binary used by the pacman backend. Any pacman-compatible AUR helper
# (paru, yay) accepts the same switches.
PACMAN_BINARY = os.environ.get("PACDEF_PACMAN_BINARY", "pacman")

# How install/remove invoke the package manager: "spawn" runs a child and
# reports its exit status, "replace" hands the process over via exec.
EXEC_MODE = os.environ.get("PACDEF_EXEC_MODE", "spawn")

EDITOR = os.environ.get("EDITOR", "vi")

# Command execution defaults
SHELL_ENV = os.environ.copy()


def home_dir() -> Path:
    home = os.environ.get("HOME")
    if not home:
        raise ConfigError("getting $HOME variable: not set")
    return Path(home)


def xdg_config_home() -> Path:
    config = os.environ.get("XDG_CONFIG_HOME")
    if config:
        return Path(config)
    try:
        return home_dir() / ".config"
    except ConfigError as e:
        raise ConfigError(f"falling back to $HOME/.config: {e}") from e


def base_dir() -> Path:
    return xdg_config_home() / "pacdef"


def group_dir() -> Path:
    """Directory holding one file per group.

    ``$PACDEF_GROUPS_DIR`` wins over the XDG location.
    """
    override = os.environ.get("PACDEF_GROUPS_DIR")
    if override:
        return Path(override).expanduser()
    return base_dir() / "groups"
