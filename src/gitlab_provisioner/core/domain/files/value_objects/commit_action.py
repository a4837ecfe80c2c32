from dataclasses import dataclass
from enum import StrEnum


class CommitActionKind(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class CommitAction:
    kind: CommitActionKind
    path: str
    content: bytes | None = None

    def __post_init__(self):
        if self.kind is CommitActionKind.DELETE and self.content is not None:
            raise ValueError(f"Delete action for '{self.path}' must not carry content.")
        if self.kind is not CommitActionKind.DELETE and self.content is None:
            raise ValueError(f"{self.kind.value.capitalize()} action for '{self.path}' requires content.")

    @classmethod
    def create(cls, path: str, content: bytes) -> "CommitAction":
        return cls(CommitActionKind.CREATE, path, content)

    @classmethod
    def update(cls, path: str, content: bytes) -> "CommitAction":
        return cls(CommitActionKind.UPDATE, path, content)

    @classmethod
    def delete(cls, path: str) -> "CommitAction":
        return cls(CommitActionKind.DELETE, path)
