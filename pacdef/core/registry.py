from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional, assert_never

from ..backends.pacman import Pacman
from ..backends.rust import Rust
from .backend import Backend, ExecMode
from .errors import UnknownBackendError


class Backends(Enum):
    """Known backends, in the order they are processed."""

    PACMAN = "pacman"
    RUST = "rust"

    def create(self, exec_mode: Optional[ExecMode] = None) -> Backend:
        match self:
            case Backends.PACMAN:
                return Pacman(exec_mode=exec_mode)
            case Backends.RUST:
                return Rust(exec_mode)
            case _:
                assert_never(self)

    @classmethod
    def iter(cls, exec_mode: Optional[ExecMode] = None) -> Iterator[Backend]:
        """
        A fresh backend instance per variant, in declaration order.

        ``exec_mode`` None falls back to the configured default.
        """
        return (kind.create(exec_mode) for kind in cls)

    @classmethod
    def from_section(cls, section: str) -> Backends:
        try:
            return cls(section)
        except ValueError:
            raise UnknownBackendError(section) from None
