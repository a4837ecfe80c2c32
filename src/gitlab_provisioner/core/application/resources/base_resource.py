from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from gitlab_provisioner.core.application.resources.resource_state import ResourceState


class BaseResource(ABC):
    """Lifecycle contract every resource kind exposes to the orchestrator."""

    resource_type: ClassVar[str]

    @abstractmethod
    def create(self, config: Mapping[str, Any]) -> ResourceState:
        """Create the remote object from a declared configuration."""

    @abstractmethod
    def read(self, state: ResourceState) -> ResourceState:
        """Refresh recorded state from the remote."""

    @abstractmethod
    def update(self, config: Mapping[str, Any], state: ResourceState) -> ResourceState:
        """Converge the remote object to the new configuration."""

    @abstractmethod
    def delete(self, state: ResourceState) -> None:
        """Remove the remote object."""

    @abstractmethod
    def import_state(self, resource_id: str) -> ResourceState:
        """Build a minimal state from an existing ID; a read fills in the rest."""
