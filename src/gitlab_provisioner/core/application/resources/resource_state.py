from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResourceState:
    """What crosses the orchestrator boundary: an ID plus flat attributes.

    ``id`` is None when the remote object no longer exists and the orchestrator
    should drop it from its recorded state.
    """

    id: str | None
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def gone(cls) -> "ResourceState":
        return cls(id=None, attributes={})

    def exists(self) -> bool:
        return self.id is not None
