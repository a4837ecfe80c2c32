from gitlab_provisioner.core.domain.identity.composite_id import (
    build_two_part_id,
    decode_file_paths,
    decode_id,
    encode_file_paths,
    encode_id,
    parse_two_part_id,
)
from gitlab_provisioner.core.domain.identity.resource_ids import (
    BranchId,
    RepositoryFileId,
    RepositoryFilesId,
)

__all__ = [
    "BranchId",
    "RepositoryFileId",
    "RepositoryFilesId",
    "build_two_part_id",
    "decode_file_paths",
    "decode_id",
    "encode_file_paths",
    "encode_id",
    "parse_two_part_id",
]
