"""Project-level path helpers."""

import os
from pathlib import Path


def get_project_root() -> Path:
    """Return the project root used for logs and local data.

    The ``WEALTH_DASHBOARD_HOME`` environment variable takes precedence
    over the repository checkout directory.
    """
    override = os.getenv("WEALTH_DASHBOARD_HOME")
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parents[2]


__all__ = ["get_project_root"]
