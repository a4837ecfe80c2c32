from dataclasses import dataclass


@dataclass(frozen=True)
class FileEntry:
    """A repository path and its exact content.

    Equality and hashing cover both fields: the same path with different
    content is a different entry.
    """

    path: str
    content: bytes

    def __post_init__(self):
        if not self.path:
            raise ValueError("File path cannot be empty")
        if not isinstance(self.content, bytes):
            raise TypeError(f"Content for '{self.path}' must be bytes, got {type(self.content).__name__}")

    @classmethod
    def from_text(cls, path: str, text: str) -> "FileEntry":
        return cls(path=path, content=text.encode("utf-8"))

    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")
