from dataclasses import dataclass, field

from gitlab_provisioner.core.domain.files.value_objects.commit_action import (
    CommitAction,
    CommitActionKind,
)


@dataclass(frozen=True, kw_only=True)
class ReconciliationRequest:
    """One atomic commit carrying every action needed to converge a branch."""

    project: str
    branch: str
    commit_message: str
    actions: tuple[CommitAction, ...] = field(default_factory=tuple)
    start_branch: str | None = None
    author_name: str | None = None
    author_email: str | None = None

    def is_empty(self) -> bool:
        return len(self.actions) == 0

    def count(self, kind: CommitActionKind) -> int:
        return sum(1 for action in self.actions if action.kind is kind)
