from gitlab_provisioner.core.exceptions.domain_error import DomainError


class MissingRequiredFieldError(DomainError):
    """Raised when a desired-state record lacks a required attribute."""

    def __init__(self, field_name: str, resource_type: str | None = None) -> None:
        scope = f" for {resource_type}" if resource_type else ""
        super().__init__(f"Missing required field '{field_name}'{scope}.")
        self.field_name = field_name
        self.resource_type = resource_type
