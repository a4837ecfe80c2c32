from unittest.mock import MagicMock

import pytest

from gitlab_provisioner.core.application.resources import (
    RepositoryFilesResource,
    ResourceOperation,
    ResourceRegistry,
    ResourceState,
)
from gitlab_provisioner.core.exceptions import UnknownResourceError


def test_dispatch_routes_to_resource(make_store, files_record):
    registry = ResourceRegistry([RepositoryFilesResource(make_store())])

    state = registry.dispatch("gitlab_repository_files", ResourceOperation.CREATE, config=files_record)

    assert state.id == "group/app:main:a.txt,b.txt"


def test_delete_returns_gone_state():
    resource = MagicMock(resource_type="fake")
    registry = ResourceRegistry([resource])

    state = registry.dispatch("fake", ResourceOperation.DELETE, resource_id="x", state={"k": "v"})

    assert state == ResourceState.gone()
    resource.delete.assert_called_once_with(ResourceState(id="x", attributes={"k": "v"}))


def test_update_passes_config_and_current_state():
    resource = MagicMock(resource_type="fake")
    resource.update.return_value = ResourceState(id="x")

    ResourceRegistry([resource]).dispatch("fake", ResourceOperation.UPDATE, resource_id="x", config={"a": 1})

    resource.update.assert_called_once_with({"a": 1}, ResourceState(id="x", attributes={}))


def test_unknown_resource_type():
    registry = ResourceRegistry()

    with pytest.raises(UnknownResourceError):
        registry.dispatch("gitlab_nope", ResourceOperation.READ)
    assert registry.resource_types() == []
