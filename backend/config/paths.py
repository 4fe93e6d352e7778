"""
Centralized path configuration for backend data storage.

Responsibilities:
- Provide stable roots for the backend sources and the repository.
- Resolve the log directory (overridable via LOG_DIR).
"""

from __future__ import annotations

import os
from pathlib import Path


def backend_root() -> Path:
    """Backend source root (the 'backend' directory in the repo)."""
    # backend/config/paths.py -> backend/config -> backend
    return Path(__file__).resolve().parents[1]


def project_root() -> Path:
    """Repository root (parent of the backend directory)."""
    return backend_root().parent


def logs_root() -> Path:
    """
    Root for rotating log files.
    - LOG_DIR when set.
    - Otherwise <backend>/logs.
    """
    override = os.getenv("LOG_DIR")
    root = Path(override) if override else backend_root() / "logs"
    root.mkdir(parents=True, exist_ok=True)
    return root
