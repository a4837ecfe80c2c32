import base64

import pytest

from gitlab_provisioner.core.domain.files import CommitAction, FileWriteRequest, ReconciliationRequest
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.mappers import GitLabCommitPayloadBuilder


def _request(*actions, **extra):
    return ReconciliationRequest(project="42", branch="main", commit_message="sync", actions=actions, **extra)


def test_commit_payload_encodes_content_and_omits_it_for_deletes():
    payload = GitLabCommitPayloadBuilder().build_commit_payload(
        _request(CommitAction.create("bin/logo.png", b"\x89PNG"), CommitAction.delete("old.txt"))
    )

    assert payload["branch"] == "main"
    assert payload["commit_message"] == "sync"
    assert payload["actions"] == [
        {
            "action": "create",
            "file_path": "bin/logo.png",
            "encoding": "base64",
            "content": base64.b64encode(b"\x89PNG").decode(),
        },
        {"action": "delete", "file_path": "old.txt"},
    ]
    assert "start_branch" not in payload
    assert "author_name" not in payload


def test_optional_commit_fields_are_sent_when_set():
    payload = GitLabCommitPayloadBuilder().build_commit_payload(
        _request(CommitAction.update("a", b"1"), start_branch="develop", author_name="Bot", author_email="bot@x.io")
    )

    assert payload["start_branch"] == "develop"
    assert payload["author_name"] == "Bot"
    assert payload["author_email"] == "bot@x.io"


@pytest.mark.parametrize("bad_path", ["/etc/passwd", "../secret", "a/../../b", "win\\path.txt"])
def test_unsafe_paths_are_rejected(bad_path):
    with pytest.raises(ValueError):
        GitLabCommitPayloadBuilder().build_commit_payload(_request(CommitAction.create(bad_path, b"x")))


def test_dots_inside_a_name_are_allowed():
    payload = GitLabCommitPayloadBuilder().build_commit_payload(_request(CommitAction.create("v1..2.txt", b"x")))

    assert payload["actions"][0]["file_path"] == "v1..2.txt"


def test_file_payload_for_delete_has_no_content():
    request = FileWriteRequest(
        project="42", branch="main", file_path="a.txt", commit_message="[DELETE]: m", last_commit_id="abc"
    )

    payload = GitLabCommitPayloadBuilder().build_file_payload(request, include_content=False)

    assert payload == {"branch": "main", "commit_message": "[DELETE]: m", "last_commit_id": "abc"}
