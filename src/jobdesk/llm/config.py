"""LLM configuration — OpenAI key and model name.

Importing :mod:`jobdesk.core.config` has already pulled ``.env`` into
``os.environ``; this module only reads from there.
"""

from __future__ import annotations

import logging
import os

import jobdesk.core.config  # noqa: F401  (loads .env)

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"
MODEL_ENV = "JOBDESK_MODEL"

# Every generation route uses the same small chat model.
DEFAULT_MODEL = "gpt-4o-mini"


def get_api_key() -> str:
    """Return the OpenAI API key, or raise ``RuntimeError`` naming the variable."""
    key = os.environ.get(API_KEY_ENV, "").strip()
    if not key:
        logger.debug("%s missing from environment", API_KEY_ENV)
        raise RuntimeError(
            f"{API_KEY_ENV} is not set. Add it to your .env file or export it in your shell."
        )
    return key


def get_default_model() -> str:
    """``JOBDESK_MODEL`` when set, else :data:`DEFAULT_MODEL`."""
    return os.environ.get(MODEL_ENV, "").strip() or DEFAULT_MODEL
