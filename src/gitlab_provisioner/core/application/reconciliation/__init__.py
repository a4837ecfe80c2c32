from gitlab_provisioner.core.application.reconciliation.commit_submitter import (
    CommitActionBuilder,
    CommitSubmitter,
)
from gitlab_provisioner.core.application.reconciliation.desired_state_extractor import (
    DesiredRepositoryFiles,
    declared_file_paths,
    extract_desired_state,
)
from gitlab_provisioner.core.application.reconciliation.drift_reader import DriftReader, DriftReport
from gitlab_provisioner.core.application.reconciliation.observed_state_fetcher import (
    ObservedStateFetcher,
)
from gitlab_provisioner.core.application.reconciliation.repository_files_reconciler import (
    ReconcileOutcome,
    RepositoryFilesReconciler,
)
from gitlab_provisioner.core.application.reconciliation.set_differ import (
    FileChangeSet,
    classify_actions,
    diff_file_sets,
)

__all__ = [
    "CommitActionBuilder",
    "CommitSubmitter",
    "DesiredRepositoryFiles",
    "DriftReader",
    "DriftReport",
    "FileChangeSet",
    "ObservedStateFetcher",
    "ReconcileOutcome",
    "RepositoryFilesReconciler",
    "classify_actions",
    "declared_file_paths",
    "diff_file_sets",
    "extract_desired_state",
]
