from gitlab_provisioner.core.exceptions.domain_error import DomainError


class MalformedIdentityError(DomainError):
    """Raised when a persisted resource ID does not decode into the expected components."""

    def __init__(self, resource_id: str, expected_format: str) -> None:
        super().__init__(f"Unexpected ID format ({resource_id!r}). Expected {expected_format}")
        self.resource_id = resource_id
        self.expected_format = expected_format
