import urllib.parse


def project_path(project: str) -> str:
    """Numeric IDs pass through; "group/name" paths are URL-encoded."""
    return f"api/v4/projects/{urllib.parse.quote(str(project), safe='')}"


def file_path(project: str, repo_file_path: str) -> str:
    encoded = urllib.parse.quote(repo_file_path, safe="")
    return f"{project_path(project)}/repository/files/{encoded}"


def branch_path(project: str, branch_name: str | None = None) -> str:
    base = f"{project_path(project)}/repository/branches"
    if branch_name is None:
        return base
    return f"{base}/{urllib.parse.quote(branch_name, safe='')}"
