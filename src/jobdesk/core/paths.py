"""Filesystem locations: the checkout root (where ``.env`` lives) and logs."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

_MARKER = "pyproject.toml"


@lru_cache(maxsize=1)
def find_project_root() -> Path:
    """Closest ancestor of this file that holds ``pyproject.toml``.

    Installed copies have no such ancestor; they fall back to the directory
    above ``src/``.
    """
    here = Path(__file__).resolve()
    return next((p for p in here.parents if (p / _MARKER).is_file()), here.parents[3])


def get_log_dir() -> Path:
    """``$JOBDESK_LOG_DIR`` if set, else ``<root>/data/logs``."""
    override = os.environ.get("JOBDESK_LOG_DIR", "").strip()
    return Path(override) if override else find_project_root() / "data" / "logs"
