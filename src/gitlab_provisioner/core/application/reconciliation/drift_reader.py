import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from gitlab_provisioner.core.application.reconciliation.observed_state_fetcher import (
    ObservedStateFetcher,
)
from gitlab_provisioner.core.domain.files import ObservedFileSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DriftReport:
    observed: ObservedFileSet
    missing_paths: tuple[str, ...] = field(default_factory=tuple)

    def has_drift(self) -> bool:
        return bool(self.missing_paths)


class DriftReader:
    """Re-reads managed paths so the orchestrator can diff against recorded state."""

    def __init__(self, fetcher: ObservedStateFetcher) -> None:
        self._fetcher = fetcher

    def read(self, project: str, branch: str, paths: Iterable[str]) -> DriftReport:
        wanted = sorted(set(paths))
        observed = self._fetcher.fetch(project, branch, wanted)
        missing = tuple(path for path in wanted if observed.get(path) is None)
        if missing:
            logger.warning(
                "Managed files missing from '%s' (project %s): %s", branch, project, ", ".join(missing)
            )
        return DriftReport(observed=observed, missing_paths=missing)
