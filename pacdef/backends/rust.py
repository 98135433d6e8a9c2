from __future__ import annotations

from typing import Sequence, Set

from ..core.backend import Backend
from ..core.package import Package
from ..utils.sysutils import run_capture


def parse_install_list(output: str) -> Set[Package]:
    """
    Parse ``cargo install --list``.

    Crates are on unindented lines like ``ripgrep v14.1.0:`` or
    ``foo v0.1.0 (/src/foo):``; the installed binaries follow, indented.
    """
    result: Set[Package] = set()
    for ln in output.splitlines():
        if not ln.strip() or ln[0].isspace():
            continue
        pkg = Package.from_line(ln.split()[0].rstrip(":"))
        if pkg is not None:
            result.add(pkg)
    return result


class Rust(Backend):
    @property
    def binary(self) -> str:
        return "cargo"

    @property
    def section(self) -> str:
        return "rust"

    @property
    def switches_install(self) -> Sequence[str]:
        return ("install",)

    @property
    def switches_remove(self) -> Sequence[str]:
        return ("uninstall",)

    def get_all_installed_packages(self) -> Set[Package]:
        return parse_install_list(run_capture([self.binary, "install", "--list"]))

    # cargo has no notion of dependencies pulled in implicitly
    def get_explicitly_installed_packages(self) -> Set[Package]:
        return self.get_all_installed_packages()
