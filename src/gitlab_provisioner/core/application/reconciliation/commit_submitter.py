import logging
from collections.abc import Iterable

from gitlab_provisioner.core.application.ports import FileStorePort
from gitlab_provisioner.core.application.reconciliation.desired_state_extractor import (
    DesiredRepositoryFiles,
)
from gitlab_provisioner.core.domain.files import (
    CommitAction,
    CommitActionKind,
    CommitResult,
    ReconciliationRequest,
)

logger = logging.getLogger(__name__)

DELETE_MESSAGE_PREFIX = "[DELETE]: "


class CommitActionBuilder:
    """Packs classified actions and commit metadata into one request."""

    def build(self, desired: DesiredRepositoryFiles, actions: Iterable[CommitAction]) -> ReconciliationRequest:
        return ReconciliationRequest(
            project=desired.project,
            branch=desired.branch,
            commit_message=desired.commit_message,
            actions=tuple(actions),
            start_branch=desired.start_branch,
            author_name=desired.author_name,
            author_email=desired.author_email,
        )

    def build_delete(self, desired: DesiredRepositoryFiles, paths: Iterable[str]) -> ReconciliationRequest:
        return ReconciliationRequest(
            project=desired.project,
            branch=desired.branch,
            commit_message=f"{DELETE_MESSAGE_PREFIX}{desired.commit_message}",
            actions=tuple(CommitAction.delete(path) for path in sorted(set(paths))),
            start_branch=desired.start_branch,
            author_name=desired.author_name,
            author_email=desired.author_email,
        )


class CommitSubmitter:
    def __init__(self, store: FileStorePort) -> None:
        self._store = store

    def submit(self, request: ReconciliationRequest) -> CommitResult | None:
        """Sends the request as one commit. An empty request sends nothing."""
        if request.is_empty():
            logger.info("No changes for branch '%s' (project %s). Skipping commit.", request.branch, request.project)
            return None

        logger.info(
            "Committing to '%s' (project %s): %d create, %d delete, %d update",
            request.branch,
            request.project,
            request.count(CommitActionKind.CREATE),
            request.count(CommitActionKind.DELETE),
            request.count(CommitActionKind.UPDATE),
        )
        return self._store.create_commit(request)
