from gitlab_provisioner.core.exceptions.domain_error import DomainError


class InvalidContentError(DomainError):
    """Raised when file content is not in the encoding the resource requires."""
