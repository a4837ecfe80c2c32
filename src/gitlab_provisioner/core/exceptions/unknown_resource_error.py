from gitlab_provisioner.core.exceptions.domain_error import DomainError


class UnknownResourceError(DomainError):
    """Raised when the registry has no resource for the requested type."""

    def __init__(self, resource_type: str) -> None:
        super().__init__(f"Resource type '{resource_type}' is not registered.")
        self.resource_type = resource_type
