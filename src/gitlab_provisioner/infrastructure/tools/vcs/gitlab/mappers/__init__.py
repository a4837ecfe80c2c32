from .gitlab_commit_payload_builder import GitLabCommitPayloadBuilder
from .gitlab_response_mapper import GitLabResponseMapper

__all__ = ["GitLabCommitPayloadBuilder", "GitLabResponseMapper"]
