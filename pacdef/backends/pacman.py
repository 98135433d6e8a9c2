from __future__ import annotations

from typing import Optional, Sequence, Set

from ..config import PACMAN_BINARY
from ..core.backend import Backend, ExecMode
from ..core.package import Package
from ..utils.sysutils import run_capture


class Pacman(Backend):
    """
    Arch system packages.

    Installs go through ``binary``, which may be an AUR helper; queries always
    ask pacman itself since helpers share its local database.
    """

    def __init__(
        self, binary: Optional[str] = None, exec_mode: Optional[ExecMode] = None
    ) -> None:
        super().__init__(exec_mode)
        self._binary = binary or PACMAN_BINARY

    @property
    def binary(self) -> str:
        return self._binary

    @property
    def section(self) -> str:
        return "pacman"

    @property
    def switches_install(self) -> Sequence[str]:
        return ("-S", "--needed")

    @property
    def switches_remove(self) -> Sequence[str]:
        return ("-Rs",)

    def _query(self, flags: str) -> Set[Package]:
        out = run_capture(["pacman", flags])
        return Package.from_lines(out.splitlines())

    def get_all_installed_packages(self) -> Set[Package]:
        return self._query("-Qq")

    def get_explicitly_installed_packages(self) -> Set[Package]:
        return self._query("-Qqe")
