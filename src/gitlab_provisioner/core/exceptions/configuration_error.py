from gitlab_provisioner.core.exceptions.domain_error import DomainError


class ConfigurationError(DomainError):
    """Raised when configuration is invalid or incomplete."""
