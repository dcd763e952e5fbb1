from __future__ import annotations


def build_target_url(base_url: str, path: str) -> str:
    """
    Join a base URL and a monitor path with exactly one slash.

    Args:
        base_url: Mock server base, with or without a trailing slash
        path: Endpoint path, with or without a leading slash

    Returns:
        Fully-qualified target URL
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def managed_prefix(base_url: str) -> str:
    """URL prefix shared by every monitor seeded against ``base_url``."""
    return f"{base_url.rstrip('/')}/"
