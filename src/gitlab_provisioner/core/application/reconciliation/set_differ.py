"""Classifies the difference between desired and observed files into commit actions.

Membership is keyed on the full (path, content) pair, so a changed file first
shows up as both a create and a delete. Those pairs are collapsed into a
single update by matching on path.
"""

from dataclasses import dataclass, field

from gitlab_provisioner.core.domain.files import (
    CommitAction,
    DesiredFileSet,
    FileEntry,
    ObservedFileSet,
)


@dataclass(frozen=True)
class FileChangeSet:
    to_create: tuple[FileEntry, ...] = field(default_factory=tuple)
    to_delete: tuple[FileEntry, ...] = field(default_factory=tuple)
    to_update: tuple[FileEntry, ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        return not (self.to_create or self.to_delete or self.to_update)

    def actions(self) -> list[CommitAction]:
        """Creates, then deletes, then updates; each group ordered by path."""
        return [
            *(CommitAction.create(entry.path, entry.content) for entry in self.to_create),
            *(CommitAction.delete(entry.path) for entry in self.to_delete),
            *(CommitAction.update(entry.path, entry.content) for entry in self.to_update),
        ]


def diff_file_sets(desired: DesiredFileSet, observed: ObservedFileSet) -> FileChangeSet:
    desired_entries = set(desired)
    observed_entries = set(observed)

    creates = desired_entries - observed_entries
    deletes_by_path = {entry.path: entry for entry in observed_entries - desired_entries}

    to_create: list[FileEntry] = []
    to_update: list[FileEntry] = []
    for entry in creates:
        if deletes_by_path.pop(entry.path, None) is not None:
            to_update.append(entry)
        else:
            to_create.append(entry)

    return FileChangeSet(
        to_create=_by_path(to_create),
        to_delete=_by_path(deletes_by_path.values()),
        to_update=_by_path(to_update),
    )


def classify_actions(desired: DesiredFileSet, observed: ObservedFileSet) -> list[CommitAction]:
    return diff_file_sets(desired, observed).actions()


def _by_path(entries) -> tuple[FileEntry, ...]:
    return tuple(sorted(entries, key=lambda entry: entry.path))
