"""Delimiter-joined resource identities.

Persisted IDs are plain strings such as ``project:branch:a.txt,b.txt``. The
final component may itself contain the delimiter, so decoding splits only on
the first ``expected_parts - 1`` occurrences. Non-final components must not
contain the delimiter; this is not checked when encoding.
"""

from collections.abc import Iterable, Sequence

from gitlab_provisioner.core.exceptions import MalformedIdentityError

ID_DELIMITER = ":"
# File paths are joined unescaped, so a path may not contain the delimiter;
# declared paths are checked when the desired state is extracted.
PATH_LIST_DELIMITER = ","


def encode_id(parts: Sequence[str]) -> str:
    return ID_DELIMITER.join(parts)


def decode_id(resource_id: str, expected_parts: int, expected_format: str | None = None) -> list[str]:
    if expected_parts < 1:
        raise ValueError("expected_parts must be at least 1")
    parts = resource_id.split(ID_DELIMITER, expected_parts - 1)
    if len(parts) != expected_parts:
        fmt = expected_format or ID_DELIMITER.join(f"part{i + 1}" for i in range(expected_parts))
        raise MalformedIdentityError(resource_id, fmt)
    return parts


def encode_file_paths(paths: Iterable[str]) -> str:
    """Join paths in lexicographic order so the same set always yields the same ID."""
    return PATH_LIST_DELIMITER.join(sorted(paths))


def decode_file_paths(component: str) -> tuple[str, ...]:
    return tuple(path for path in component.split(PATH_LIST_DELIMITER) if path)


def build_two_part_id(a: str, b: str) -> str:
    return encode_id([a, b])


def parse_two_part_id(resource_id: str) -> tuple[str, str]:
    first, second = decode_id(resource_id, 2, "project:key")
    return first, second
