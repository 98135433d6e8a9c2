from __future__ import annotations

import os
import subprocess
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Set, assert_never

from ..config import EXEC_MODE, SHELL_ENV
from ..utils.sysutils import have
from .errors import BackendLaunchError, ConfigError
from .group import Group
from .package import Package
from .section import extract_section


class ExecMode(Enum):
    SPAWN = "spawn"
    REPLACE = "replace"

    @classmethod
    def parse(cls, value: str) -> ExecMode:
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ConfigError(
                f"invalid exec mode {value!r} (expected one of: {choices})"
            ) from None


class Backend(ABC):
    """
    One package manager.

    Subclasses describe how to invoke the manager and how to query it; the
    diff and install logic is shared.
    """

    def __init__(self, exec_mode: Optional[ExecMode] = None) -> None:
        self.exec_mode = exec_mode if exec_mode is not None else ExecMode.parse(EXEC_MODE)
        self.managed: Set[Package] = set()

    @property
    @abstractmethod
    def binary(self) -> str:
        ...

    @property
    @abstractmethod
    def section(self) -> str:
        """Name used in ``[section]`` headers of group files."""
        ...

    @property
    @abstractmethod
    def switches_install(self) -> Sequence[str]:
        ...

    @property
    @abstractmethod
    def switches_remove(self) -> Sequence[str]:
        ...

    @abstractmethod
    def get_all_installed_packages(self) -> Set[Package]:
        """Get all packages that are installed in the system."""
        ...

    @abstractmethod
    def get_explicitly_installed_packages(self) -> Set[Package]:
        """Get all packages that were installed in the system explicitly."""
        ...

    def describe(self) -> str:
        return self.section

    def is_available(self) -> bool:
        return have(self.binary)

    def get_managed_packages(self) -> Set[Package]:
        return self.managed

    def load(self, groups: Iterable[Group]) -> None:
        for group in groups:
            self.managed |= self.extract_packages_from_group_file_content(group.content)

    def add_packages(self, packages: Iterable[Package]) -> None:
        self.managed |= set(packages)

    def extract_packages_from_group_file_content(self, content: str) -> Set[Package]:
        return extract_section(content, self.section)

    def get_missing_packages_sorted(self) -> List[Package]:
        installed = self.get_all_installed_packages()
        return sorted(self.get_managed_packages() - installed)

    def get_unmanaged_packages_sorted(self) -> List[Package]:
        installed = self.get_explicitly_installed_packages()
        return sorted(installed - self.get_managed_packages())

    def install_packages(self, packages: Sequence[Package]) -> int:
        """Install the specified packages. Returns the manager's exit status."""
        return self._invoke(self.switches_install, packages)

    def remove_packages(self, packages: Sequence[Package]) -> int:
        """Remove the specified packages. Returns the manager's exit status."""
        return self._invoke(self.switches_remove, packages)

    def command(self, switches: Sequence[str], packages: Sequence[Package]) -> List[str]:
        return [self.binary, *switches, *(str(p) for p in packages)]

    def _invoke(self, switches: Sequence[str], packages: Sequence[Package]) -> int:
        if not packages:
            return 0
        cmd = self.command(switches, packages)
        match self.exec_mode:
            case ExecMode.REPLACE:
                try:
                    os.execvpe(cmd[0], cmd, SHELL_ENV)
                except OSError as e:
                    raise BackendLaunchError(cmd[0], e) from e
            case ExecMode.SPAWN:
                try:
                    cp = subprocess.run(cmd, env=SHELL_ENV, check=False)
                except OSError as e:
                    raise BackendLaunchError(cmd[0], e) from e
                return cp.returncode
            case _:
                assert_never(self.exec_mode)
