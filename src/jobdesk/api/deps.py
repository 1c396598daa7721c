"""FastAPI dependencies: bearer token, backend client, current user.

Tests swap :func:`get_backend_config`, :func:`get_backend_transport` and
:func:`get_llm_model` through ``app.dependency_overrides``.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from fastapi import Depends, Header
from pydantic_ai.models import Model

from jobdesk.core.config import SupabaseConfig, get_supabase_config
from jobdesk.core.errors import AuthenticationError
from jobdesk.core.models import AuthUser
from jobdesk.db.client import SupabaseClient

_BEARER_PREFIX = "Bearer "


def get_backend_config() -> SupabaseConfig:
    return get_supabase_config()


def get_backend_transport() -> httpx.AsyncBaseTransport | None:
    return None


def get_llm_model() -> Model | None:
    """``None`` means "build the configured model"; tests inject a TestModel."""
    return None


def parse_bearer(authorization: str | None) -> str | None:
    """The token from an ``Authorization: Bearer <token>`` header, else None."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        return None
    return authorization[len(_BEARER_PREFIX):].strip() or None


def bearer_token(authorization: str | None = Header(default=None)) -> str:
    token = parse_bearer(authorization)
    if token is None:
        raise AuthenticationError("Missing auth token")
    return token


async def backend_client(
    token: str = Depends(bearer_token),
    config: SupabaseConfig = Depends(get_backend_config),
    transport: httpx.AsyncBaseTransport | None = Depends(get_backend_transport),
) -> AsyncIterator[SupabaseClient]:
    async with SupabaseClient(config, token, transport=transport) as client:
        yield client


async def current_user(client: SupabaseClient = Depends(backend_client)) -> AuthUser:
    return await client.get_user()
