from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True, order=True, slots=True)
class Package:
    name: str

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise ValueError("Package.name must be non-empty str")

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_line(cls, line: str) -> Optional[Package]:
        """
        Parse one line of a group file.

        Returns None for blank lines, comments, section headers and anything
        that is not a single token.
        """
        token = line.split("#", 1)[0].strip()
        if not token or token.startswith("["):
            return None
        if len(token.split()) != 1:
            return None
        return cls(token)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> set[Package]:
        result: set[Package] = set()
        for line in lines:
            pkg = cls.from_line(line)
            if pkg is not None:
                result.add(pkg)
        return result
