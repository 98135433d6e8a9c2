from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Set

from .errors import GroupLoadError
from .package import Package


@dataclass(frozen=True, eq=False)
class Group:
    """
    One group file.

    Equality compares name and packages, while hashing and ordering use the
    name only. Groups with equal names therefore share a hash bucket; the
    loader keys groups by name so that never happens within one run.
    """

    name: str
    packages: frozenset[Package] = frozenset()
    content: str = field(default="", repr=False)

    @classmethod
    def from_content(cls, name: str, content: str) -> Group:
        return cls(name, frozenset(Package.from_lines(content.splitlines())), content)

    @classmethod
    def from_file(cls, path: Path) -> Group:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise GroupLoadError(path, e) from e
        return cls.from_content(path.name, content)

    @classmethod
    def load_from_dir(cls, path: str | Path) -> LoadResult:
        """
        Load every regular, non-hidden file in ``path`` as a group.

        An unreadable directory raises GroupLoadError. Unreadable files are
        collected in ``LoadResult.errors`` and the rest are still loaded.
        """
        path = Path(path)
        try:
            entries = sorted(path.iterdir())
        except OSError as e:
            raise GroupLoadError(path, e) from e

        by_name: dict[str, Group] = {}
        errors: List[GroupLoadError] = []
        for entry in entries:
            # hidden files are editor backups and interrupted writes
            if entry.name.startswith("."):
                continue
            try:
                if not entry.is_file():
                    continue
                group = cls.from_file(entry)
            except GroupLoadError as e:
                errors.append(e)
                continue
            except OSError as e:
                errors.append(GroupLoadError(entry, e))
                continue
            by_name[group.name] = group
        return LoadResult(set(by_name.values()), errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.name == other.name and self.packages == other.packages

    def __lt__(self, other: Group) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.name < other.name

    def __le__(self, other: Group) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.name <= other.name

    def __gt__(self, other: Group) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.name > other.name

    def __ge__(self, other: Group) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.name >= other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(slots=True)
class LoadResult:
    groups: Set[Group] = field(default_factory=set)
    errors: List[GroupLoadError] = field(default_factory=list)

    def sorted(self) -> List[Group]:
        return sorted(self.groups)

    def get(self, name: str) -> Group | None:
        for g in self.groups:
            if g.name == name:
                return g
        return None
