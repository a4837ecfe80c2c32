"""``gitlab_branch``: a branch created from a ref. Every field forces replacement."""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from gitlab_provisioner.core.application.ports import BranchPort
from gitlab_provisioner.core.application.resources.base_resource import BaseResource
from gitlab_provisioner.core.application.resources.resource_state import ResourceState
from gitlab_provisioner.core.domain.branches import BranchInfo
from gitlab_provisioner.core.domain.identity import BranchId
from gitlab_provisioner.core.exceptions import MissingRequiredFieldError

logger = logging.getLogger(__name__)


class BranchResource(BaseResource):
    resource_type: ClassVar[str] = "gitlab_branch"

    def __init__(self, branches: BranchPort) -> None:
        self._branches = branches

    def create(self, config: Mapping[str, Any]) -> ResourceState:
        branch_id = BranchId(project=self._required(config, "project"), name=self._required(config, "name"))
        ref = self._required(config, "ref")

        existing = self._branches.get_branch(branch_id.project, branch_id.name)
        if existing:
            logger.info("Branch '%s' already exists in project %s. Skipping creation.", branch_id.name, branch_id.project)
            info = existing
        else:
            info = self._branches.create_branch(branch_id.project, branch_id.name, ref)
        return self._to_state(branch_id, info, ref)

    def read(self, state: ResourceState) -> ResourceState:
        branch_id = BranchId.from_string(state.id or "")
        info = self._branches.get_branch(branch_id.project, branch_id.name)
        if info is None:
            logger.warning("Branch %s not found, removing from state", branch_id.name)
            return ResourceState.gone()
        return self._to_state(branch_id, info, state.attributes.get("ref"))

    def update(self, config: Mapping[str, Any], state: ResourceState) -> ResourceState:
        return self.read(state)

    def delete(self, state: ResourceState) -> None:
        branch_id = BranchId.from_string(state.id or "")
        self._branches.delete_branch(branch_id.project, branch_id.name)

    def import_state(self, resource_id: str) -> ResourceState:
        branch_id = BranchId.from_string(resource_id)
        return ResourceState(
            id=branch_id.to_string(),
            attributes={"project": branch_id.project, "name": branch_id.name},
        )

    @staticmethod
    def _to_state(branch_id: BranchId, info: BranchInfo, ref: str | None) -> ResourceState:
        attributes: dict[str, Any] = {
            "project": branch_id.project,
            "name": info.name,
            "web_url": info.web_url,
            "default": info.default,
            "can_push": info.can_push,
        }
        if ref:
            attributes["ref"] = ref
        return ResourceState(id=branch_id.to_string(), attributes=attributes)

    def _required(self, config: Mapping[str, Any], key: str) -> str:
        value = config.get(key)
        if value is None or value == "":
            raise MissingRequiredFieldError(key, self.resource_type)
        return str(value)
