"""Prometheus metrics declarations for the provisioner.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never project paths, branches or file names.
"""

from prometheus_client import Counter, Histogram

# ── GitLab API metrics ─────────────────────────────────────────────

GITLAB_CALLS_TOTAL = Counter(
    "provisioner_gitlab_calls_total",
    "Total GitLab REST calls",
    ["operation", "outcome"],
)

COMMIT_ACTIONS_TOTAL = Counter(
    "provisioner_commit_actions_total",
    "File actions submitted in atomic commits",
    ["action"],
)

# ── Resource lifecycle metrics ─────────────────────────────────────

RECONCILIATIONS_TOTAL = Counter(
    "provisioner_reconciliations_total",
    "Resource lifecycle operations handled",
    ["resource_type", "operation", "outcome"],
)

RECONCILE_DURATION_SECONDS = Histogram(
    "provisioner_reconcile_duration_seconds",
    "Duration of a resource lifecycle operation in seconds",
    ["resource_type", "operation"],
)
