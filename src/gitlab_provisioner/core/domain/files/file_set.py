"""Path-indexed collections of FileEntry for one project branch."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from gitlab_provisioner.core.domain.files.value_objects.file_entry import FileEntry
from gitlab_provisioner.core.exceptions import DuplicateFilePathError


class FileSet:
    """Unordered set of FileEntry with at most one entry per path."""

    def __init__(self, entries: Iterable[FileEntry] = ()) -> None:
        self._by_path: dict[str, FileEntry] = {}
        for entry in entries:
            if entry.path in self._by_path:
                raise DuplicateFilePathError(entry.path)
            self._by_path[entry.path] = entry

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self._by_path.values())

    def __len__(self) -> int:
        return len(self._by_path)

    def __contains__(self, entry: object) -> bool:
        if not isinstance(entry, FileEntry):
            return False
        return self._by_path.get(entry.path) == entry

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileSet):
            return NotImplemented
        return self._by_path == other._by_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._by_path)!r})"

    def get(self, path: str) -> FileEntry | None:
        return self._by_path.get(path)

    def paths(self) -> list[str]:
        """Paths in lexicographic order."""
        return sorted(self._by_path)

    def is_empty(self) -> bool:
        return not self._by_path


class DesiredFileSet(FileSet):
    """Files declared by the caller. Duplicate paths are rejected on construction."""


class ObservedFileSet(FileSet):
    """Files found remotely for the queried paths. Absent paths are simply missing."""
