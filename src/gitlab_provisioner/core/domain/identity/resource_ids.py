from dataclasses import dataclass, field

from gitlab_provisioner.core.domain.identity.composite_id import (
    build_two_part_id,
    decode_file_paths,
    decode_id,
    encode_file_paths,
    encode_id,
    parse_two_part_id,
)
from gitlab_provisioner.core.exceptions import MalformedIdentityError

_FILES_FORMAT = "project:branch:file_path1,file_path2,..."
_FILE_FORMAT = "project:branch:file_path"
_BRANCH_FORMAT = "project:branch"


@dataclass(frozen=True)
class RepositoryFilesId:
    """Identity of a multi-file resource: one branch and the set of managed paths."""

    project: str
    branch: str
    file_paths: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "file_paths", tuple(sorted(set(self.file_paths))))

    def to_string(self) -> str:
        return encode_id([self.project, self.branch, encode_file_paths(self.file_paths)])

    @classmethod
    def from_string(cls, resource_id: str) -> "RepositoryFilesId":
        project, branch, paths = decode_id(resource_id, 3, _FILES_FORMAT)
        if not project or not branch:
            raise MalformedIdentityError(resource_id, _FILES_FORMAT)
        return cls(project=project, branch=branch, file_paths=decode_file_paths(paths))

    def with_paths(self, file_paths) -> "RepositoryFilesId":
        return RepositoryFilesId(self.project, self.branch, tuple(file_paths))


@dataclass(frozen=True)
class RepositoryFileId:
    project: str
    branch: str
    file_path: str

    def to_string(self) -> str:
        return encode_id([self.project, self.branch, self.file_path])

    @classmethod
    def from_string(cls, resource_id: str) -> "RepositoryFileId":
        project, branch, file_path = decode_id(resource_id, 3, _FILE_FORMAT)
        if not project or not branch or not file_path:
            raise MalformedIdentityError(resource_id, _FILE_FORMAT)
        return cls(project=project, branch=branch, file_path=file_path)


@dataclass(frozen=True)
class BranchId:
    project: str
    name: str

    def to_string(self) -> str:
        return build_two_part_id(self.project, self.name)

    @classmethod
    def from_string(cls, resource_id: str) -> "BranchId":
        try:
            project, name = parse_two_part_id(resource_id)
        except MalformedIdentityError as exc:
            raise MalformedIdentityError(resource_id, _BRANCH_FORMAT) from exc
        if not project or not name:
            raise MalformedIdentityError(resource_id, _BRANCH_FORMAT)
        return cls(project=project, name=name)
