from gitlab_provisioner.core.exceptions.domain_error import DomainError


class InvalidFilePathError(DomainError):
    """Raised when a declared file path cannot be carried in a resource ID."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(f"File path '{file_path}' {reason}.")
        self.file_path = file_path
