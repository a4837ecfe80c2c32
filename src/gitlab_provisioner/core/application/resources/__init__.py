from gitlab_provisioner.core.application.resources.base_resource import BaseResource
from gitlab_provisioner.core.application.resources.branch_resource import BranchResource
from gitlab_provisioner.core.application.resources.repository_file_resource import (
    RepositoryFileResource,
)
from gitlab_provisioner.core.application.resources.repository_files_resource import (
    RepositoryFilesResource,
)
from gitlab_provisioner.core.application.resources.resource_registry import (
    ResourceOperation,
    ResourceRegistry,
)
from gitlab_provisioner.core.application.resources.resource_state import ResourceState

__all__ = [
    "BaseResource",
    "BranchResource",
    "RepositoryFileResource",
    "RepositoryFilesResource",
    "ResourceOperation",
    "ResourceRegistry",
    "ResourceState",
]
