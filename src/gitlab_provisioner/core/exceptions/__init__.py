from gitlab_provisioner.core.exceptions.configuration_error import ConfigurationError
from gitlab_provisioner.core.exceptions.domain_error import DomainError
from gitlab_provisioner.core.exceptions.duplicate_file_path_error import DuplicateFilePathError
from gitlab_provisioner.core.exceptions.invalid_content_error import InvalidContentError
from gitlab_provisioner.core.exceptions.invalid_file_path_error import InvalidFilePathError
from gitlab_provisioner.core.exceptions.malformed_identity_error import MalformedIdentityError
from gitlab_provisioner.core.exceptions.missing_required_field_error import (
    MissingRequiredFieldError,
)
from gitlab_provisioner.core.exceptions.provider_error import ProviderError
from gitlab_provisioner.core.exceptions.remote_commit_error import RemoteCommitError
from gitlab_provisioner.core.exceptions.unknown_resource_error import UnknownResourceError

__all__ = [
    "ConfigurationError",
    "DomainError",
    "DuplicateFilePathError",
    "InvalidContentError",
    "InvalidFilePathError",
    "MalformedIdentityError",
    "MissingRequiredFieldError",
    "ProviderError",
    "RemoteCommitError",
    "UnknownResourceError",
]
