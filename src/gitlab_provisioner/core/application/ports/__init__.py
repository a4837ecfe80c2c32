from gitlab_provisioner.core.application.ports.branch_port import BranchPort
from gitlab_provisioner.core.application.ports.file_store_port import FileStorePort

__all__ = ["BranchPort", "FileStorePort"]
