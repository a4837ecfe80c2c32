import base64

import pytest

from gitlab_provisioner.core.application.resources import RepositoryFileResource, ResourceState
from gitlab_provisioner.core.exceptions import InvalidContentError, ProviderError

ENCODED = base64.b64encode(b"hello").decode()


@pytest.fixture
def file_config():
    return {
        "project": "42",
        "branch": "main",
        "file_path": "docs/readme.md",
        "content": ENCODED,
        "commit_message": "add readme",
    }


def test_create_writes_then_reads_back(make_store, file_config):
    store = make_store()
    store.create_file = lambda request: store.files.__setitem__(
        (request.branch, request.file_path), base64.b64decode(request.content)
    )

    state = RepositoryFileResource(store).create(file_config)

    assert state.id == "42:main:docs/readme.md"
    assert state.attributes["content"] == ENCODED
    assert state.attributes["encoding"] == "base64"
    assert state.attributes["commit_message"] == "add readme"


def test_create_rejects_non_base64_content(make_store, file_config):
    store = make_store()

    with pytest.raises(InvalidContentError):
        RepositoryFileResource(store).create({**file_config, "content": "not base64!"})

    assert store.single_file_calls == []


def test_read_missing_file_is_gone(make_store):
    state = RepositoryFileResource(make_store()).read(ResourceState(id="42:main:nope.txt"))

    assert state == ResourceState.gone()


def test_update_sends_last_commit_id(make_store, file_config):
    store = make_store({"docs/readme.md": b"old"})
    current = ResourceState(id="42:main:docs/readme.md", attributes=file_config)

    RepositoryFileResource(store).update(file_config, current)

    operation, request = store.single_file_calls[-1]
    assert operation == "update"
    assert request.last_commit_id == "sha-0"
    assert request.content == ENCODED


def test_update_of_missing_file_fails(make_store, file_config):
    current = ResourceState(id="42:main:docs/readme.md", attributes=file_config)

    with pytest.raises(ProviderError) as exc_info:
        RepositoryFileResource(make_store()).update(file_config, current)

    assert exc_info.value.status_code == 404


def test_delete_prefixes_commit_message(make_store, file_config):
    store = make_store({"docs/readme.md": b"old"})

    RepositoryFileResource(store).delete(ResourceState(id="42:main:docs/readme.md", attributes=file_config))

    operation, request = store.single_file_calls[-1]
    assert operation == "delete"
    assert request.commit_message == "[DELETE]: add readme"
    assert request.content is None


def test_import_splits_three_part_id(make_store):
    state = RepositoryFileResource(make_store()).import_state("group/app:main:a:b.txt")

    assert state.attributes == {"project": "group/app", "branch": "main", "file_path": "a:b.txt"}
