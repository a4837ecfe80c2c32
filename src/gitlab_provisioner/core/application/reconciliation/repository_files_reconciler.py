"""Converges a branch to a declared file set with a single atomic commit."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from gitlab_provisioner.core.application.ports import FileStorePort
from gitlab_provisioner.core.application.reconciliation.commit_submitter import (
    CommitActionBuilder,
    CommitSubmitter,
)
from gitlab_provisioner.core.application.reconciliation.desired_state_extractor import (
    DesiredRepositoryFiles,
)
from gitlab_provisioner.core.application.reconciliation.drift_reader import DriftReader, DriftReport
from gitlab_provisioner.core.application.reconciliation.observed_state_fetcher import (
    ObservedStateFetcher,
)
from gitlab_provisioner.core.application.reconciliation.set_differ import (
    FileChangeSet,
    diff_file_sets,
)
from gitlab_provisioner.core.domain.files import CommitActionKind, CommitResult, ReconciliationRequest
from gitlab_provisioner.core.domain.identity import RepositoryFilesId
from gitlab_provisioner.core.exceptions import RemoteCommitError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconcileOutcome:
    resource_id: RepositoryFilesId
    changes: FileChangeSet
    commit: CommitResult | None
    drift: DriftReport

    @property
    def committed(self) -> bool:
        return self.commit is not None


class RepositoryFilesReconciler:
    def __init__(
        self,
        store: FileStorePort,
        conflict_fallback: bool = True,
        builder: CommitActionBuilder | None = None,
    ) -> None:
        self._fetcher = ObservedStateFetcher(store)
        self._drift_reader = DriftReader(self._fetcher)
        self._submitter = CommitSubmitter(store)
        self._builder = builder or CommitActionBuilder()
        self._conflict_fallback = conflict_fallback

    def reconcile(
        self, desired: DesiredRepositoryFiles, previous_paths: Iterable[str] = ()
    ) -> ReconcileOutcome:
        """Fetch, diff, commit, then re-read.

        ``previous_paths`` are paths managed before this call; the ones no longer
        declared are fetched too so they end up as deletes.
        """
        watched = set(desired.files.paths()) | set(previous_paths)
        changes, request = self._plan(desired, watched)

        changes, commit = self._submit(desired, watched, changes, request)

        resource_id = RepositoryFilesId(desired.project, desired.branch, tuple(desired.files.paths()))
        drift = self._drift_reader.read(desired.project, desired.branch, desired.files.paths())
        return ReconcileOutcome(resource_id=resource_id, changes=changes, commit=commit, drift=drift)

    def read(self, resource_id: RepositoryFilesId) -> DriftReport:
        return self._drift_reader.read(resource_id.project, resource_id.branch, resource_id.file_paths)

    def destroy(self, desired: DesiredRepositoryFiles, paths: Iterable[str]) -> CommitResult | None:
        """Deletes every given path that still exists, in one commit."""
        observed = self._fetcher.fetch(desired.project, desired.branch, paths)
        request = self._builder.build_delete(desired, observed.paths())
        return self._submitter.submit(request)

    # ── Internals ──

    def _plan(
        self, desired: DesiredRepositoryFiles, watched: Iterable[str]
    ) -> tuple[FileChangeSet, ReconciliationRequest]:
        observed = self._fetcher.fetch(desired.project, desired.branch, watched)
        changes = diff_file_sets(desired.files, observed)
        return changes, self._builder.build(desired, changes.actions())

    def _submit(
        self,
        desired: DesiredRepositoryFiles,
        watched: set[str],
        changes: FileChangeSet,
        request: ReconciliationRequest,
    ) -> tuple[FileChangeSet, CommitResult | None]:
        """Returns the change set actually committed, which differs from ``changes`` after a replan."""
        try:
            return changes, self._submitter.submit(request)
        except RemoteCommitError as exc:
            if not self._should_replan(exc, request):
                raise
            logger.warning(
                "Commit to '%s' (project %s) hit an existing path; re-reading and resubmitting once: %s",
                desired.branch,
                desired.project,
                exc.message,
            )
        replanned_changes, replanned = self._plan(desired, watched)
        return replanned_changes, self._submitter.submit(replanned)

    def _should_replan(self, error: RemoteCommitError, request: ReconciliationRequest) -> bool:
        return (
            self._conflict_fallback
            and error.is_create_conflict()
            and request.count(CommitActionKind.CREATE) > 0
        )
