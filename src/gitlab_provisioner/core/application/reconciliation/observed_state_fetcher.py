import logging
from collections.abc import Iterable

from gitlab_provisioner.core.application.ports import FileStorePort
from gitlab_provisioner.core.domain.files import ObservedFileSet

logger = logging.getLogger(__name__)


class ObservedStateFetcher:
    """Reads the current content of a known list of paths, one request at a time."""

    def __init__(self, store: FileStorePort) -> None:
        self._store = store

    def fetch(self, project: str, branch: str, paths: Iterable[str]) -> ObservedFileSet:
        entries = []
        for path in sorted(set(paths)):
            remote = self._store.get_file(project, path, ref=branch)
            if remote is None:
                logger.debug("Path '%s' not found on '%s' (project %s)", path, branch, project)
                continue
            entries.append(remote.to_entry())
        return ObservedFileSet(entries)
