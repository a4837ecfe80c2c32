from gitlab_provisioner.infrastructure.common.retry.retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
