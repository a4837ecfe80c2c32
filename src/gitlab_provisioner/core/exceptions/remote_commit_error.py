from __future__ import annotations

from dataclasses import dataclass

from gitlab_provisioner.core.exceptions.provider_error import ProviderError

_CONFLICT_MARKERS = ("already exists", "a file with this name already exists")


@dataclass(frozen=False, eq=False)
class RemoteCommitError(ProviderError):
    """The atomic commit was rejected. Nothing from the request was applied."""

    def is_create_conflict(self) -> bool:
        """True when the remote refused a create because the path already exists."""
        if self.status_code == 409:
            return True
        if self.status_code != 400:
            return False
        lowered = self.message.lower()
        return any(marker in lowered for marker in _CONFLICT_MARKERS)
