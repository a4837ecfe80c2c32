from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from gitlab_provisioner.core.application.resources.base_resource import BaseResource
from gitlab_provisioner.core.application.resources.resource_state import ResourceState
from gitlab_provisioner.core.exceptions import UnknownResourceError


class ResourceOperation(StrEnum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    IMPORT = "import"


class ResourceRegistry:
    """Maps resource type names to their lifecycle handlers."""

    def __init__(self, resources: Iterable[BaseResource] = ()) -> None:
        self._resources: dict[str, BaseResource] = {}
        for resource in resources:
            self.register(resource)

    def register(self, resource: BaseResource) -> None:
        self._resources[resource.resource_type] = resource

    def get(self, resource_type: str) -> BaseResource:
        try:
            return self._resources[resource_type]
        except KeyError:
            raise UnknownResourceError(resource_type) from None

    def resource_types(self) -> list[str]:
        return sorted(self._resources)

    def dispatch(
        self,
        resource_type: str,
        operation: ResourceOperation,
        *,
        resource_id: str | None = None,
        config: Mapping[str, Any] | None = None,
        state: Mapping[str, Any] | None = None,
    ) -> ResourceState:
        """Run one lifecycle operation. Delete returns a gone state."""
        resource = self.get(resource_type)
        config = config or {}
        current = ResourceState(id=resource_id, attributes=dict(state or {}))

        match operation:
            case ResourceOperation.CREATE:
                return resource.create(config)
            case ResourceOperation.READ:
                return resource.read(current)
            case ResourceOperation.UPDATE:
                return resource.update(config, current)
            case ResourceOperation.DELETE:
                resource.delete(current)
                return ResourceState.gone()
            case ResourceOperation.IMPORT:
                return resource.import_state(resource_id or "")
        raise ValueError(f"Unsupported operation: {operation}")
