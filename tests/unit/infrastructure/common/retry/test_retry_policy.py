from unittest.mock import MagicMock

import pytest

from gitlab_provisioner.core.exceptions import ProviderError
from gitlab_provisioner.infrastructure.common.retry import RetryPolicy


def _error(retryable):
    return ProviderError(provider="GitLab", message="boom", retryable=retryable)


def test_default_policy_does_not_retry():
    fn = MagicMock(side_effect=_error(True))

    with pytest.raises(ProviderError):
        RetryPolicy().run(fn)

    assert fn.call_count == 1


def test_retryable_errors_are_retried_until_success():
    fn = MagicMock(side_effect=[_error(True), _error(True), "ok"])

    assert RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0).run(fn) == "ok"
    assert fn.call_count == 3


def test_non_retryable_errors_fail_immediately():
    fn = MagicMock(side_effect=_error(False))

    with pytest.raises(ProviderError):
        RetryPolicy(max_attempts=5, initial_wait=0, max_wait=0).run(fn)

    assert fn.call_count == 1
