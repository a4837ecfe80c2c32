"""Declarative reconciliation of GitLab repository files and branches."""
