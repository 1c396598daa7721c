"""Backend configuration — loads Supabase settings from the environment.

All secrets live in ``.env`` (gitignored).  On import this module loads the
project's ``.env`` so keys set there are visible via ``os.environ``; values
already exported in the shell win.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from jobdesk.core.paths import find_project_root

logger = logging.getLogger(__name__)

_env_path = find_project_root() / ".env"
load_dotenv(_env_path, override=False)
logger.debug("Loaded .env from %s (exists=%s)", _env_path, _env_path.exists())

# The Next.js-era names are still accepted so an existing .env keeps working.
_URL_KEYS = ("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL")
_ANON_KEYS = ("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY")


@dataclass(frozen=True)
class SupabaseConfig:
    url: str
    anon_key: str


def _first_env(names: tuple[str, ...]) -> str:
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


def get_supabase_config() -> SupabaseConfig:
    """Load the managed backend config.  Raises RuntimeError on missing keys."""
    url = _first_env(_URL_KEYS)
    anon_key = _first_env(_ANON_KEYS)

    missing = []
    if not url:
        missing.append(_URL_KEYS[0])
    if not anon_key:
        missing.append(_ANON_KEYS[0])

    if missing:
        msg = (
            f"Supabase not configured, missing: {', '.join(missing)}. "
            f"Set them in your .env file ({_env_path})."
        )
        logger.error(msg)
        raise RuntimeError(msg)

    logger.debug("Supabase config loaded (url=%s)", url)
    return SupabaseConfig(url=url.rstrip("/"), anon_key=anon_key)


def env_status() -> dict[str, bool]:
    """Report which pieces of configuration are present, without revealing them."""
    return {
        "hasOpenAIKey": bool(os.environ.get("OPENAI_API_KEY", "").strip()),
        "hasSupabaseUrl": bool(_first_env(_URL_KEYS)),
        "hasSupabaseAnonKey": bool(_first_env(_ANON_KEYS)),
    }
