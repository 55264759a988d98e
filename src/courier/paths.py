"""Resource name helpers."""


def topic_path(project_id: str, name: str) -> str:
    """Return the full topic path; full paths pass through unchanged."""
    if name.startswith("projects/"):
        return name
    return f"projects/{project_id}/topics/{name}"


def subscription_path(project_id: str, name: str) -> str:
    """Return the full subscription path; full paths pass through unchanged."""
    if name.startswith("projects/"):
        return name
    return f"projects/{project_id}/subscriptions/{name}"


def short_name(path: str) -> str:
    """``projects/p/topics/t`` -> ``t``"""
    return path.rsplit("/", 1)[-1]
