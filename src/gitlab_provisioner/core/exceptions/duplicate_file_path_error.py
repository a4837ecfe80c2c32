from gitlab_provisioner.core.exceptions.domain_error import DomainError


class DuplicateFilePathError(DomainError):
    """Raised when a desired file set declares the same path more than once."""

    def __init__(self, file_path: str) -> None:
        super().__init__(f"File path '{file_path}' is declared more than once.")
        self.file_path = file_path
