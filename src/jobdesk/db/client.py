"""Thin async client for the managed Supabase backend.

Talks to two REST surfaces with ``httpx``:

- GoTrue (``/auth/v1/user``) to resolve a bearer token to a user.
- PostgREST (``/rest/v1/<table>`` and ``/rest/v1/rpc/<fn>``) for rows.

Every request carries the project's anon key *and* the caller's access
token, so the database's row-level-security policies see the real user.
No retries and no timeout overrides beyond the default: a non-2xx response
is turned into an exception and surfaced to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from jobdesk.core.config import SupabaseConfig
from jobdesk.core.errors import AuthenticationError, BackendError
from jobdesk.core.models import AuthUser

logger = logging.getLogger(__name__)

_TIMEOUT = 30.0


def _error_message(resp: httpx.Response) -> str:
    """Pull the human-readable message out of a PostgREST/GoTrue error body."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(data, dict):
        for key in ("message", "msg", "error_description", "error"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return resp.text or f"HTTP {resp.status_code}"


def _eq_filters(filters: dict[str, Any] | None) -> dict[str, str]:
    return {col: f"eq.{val}" for col, val in (filters or {}).items()}


class SupabaseClient:
    """A per-request client scoped to one user's access token."""

    def __init__(
        self,
        config: SupabaseConfig,
        access_token: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._http = httpx.AsyncClient(
            base_url=config.url,
            headers={
                "apikey": config.anon_key,
                "Authorization": f"Bearer {access_token}",
            },
            timeout=_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> SupabaseClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # -- auth ---------------------------------------------------------------

    async def get_user(self) -> AuthUser:
        """Resolve the access token to a user, or raise ``AuthenticationError``."""
        resp = await self._http.get("/auth/v1/user")
        if resp.status_code >= 400:
            logger.info(
                "Token rejected by auth service: status=%d message=%s",
                resp.status_code,
                _error_message(resp),
            )
            raise AuthenticationError("Invalid session")
        data = resp.json()
        if not isinstance(data, dict) or not data.get("id"):
            raise AuthenticationError("Invalid session")
        return AuthUser.model_validate(data)

    # -- tables -------------------------------------------------------------

    async def select(
        self,
        table: str,
        columns: str = "*",
        *,
        filters: dict[str, Any] | None = None,
        order: str | None = None,
        descending: bool = True,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, str] = {"select": columns, **_eq_filters(filters)}
        if order:
            params["order"] = f"{order}.{'desc' if descending else 'asc'}"
        if limit is not None:
            params["limit"] = str(limit)
        resp = await self._http.get(f"/rest/v1/{table}", params=params)
        return self._rows(resp, f"select {table}")

    async def select_one(
        self,
        table: str,
        columns: str = "*",
        *,
        filters: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        rows = await self.select(table, columns, filters=filters, limit=1)
        return rows[0] if rows else None

    async def insert(
        self,
        table: str,
        row: dict[str, Any],
        *,
        returning: str = "*",
    ) -> dict[str, Any]:
        resp = await self._http.post(
            f"/rest/v1/{table}",
            params={"select": returning},
            json=row,
            headers={"Prefer": "return=representation"},
        )
        rows = self._rows(resp, f"insert {table}")
        if not rows:
            raise BackendError(f"Insert into {table} returned no row")
        return rows[0]

    async def delete(
        self,
        table: str,
        *,
        filters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        resp = await self._http.delete(
            f"/rest/v1/{table}",
            params=_eq_filters(filters),
            headers={"Prefer": "return=representation"},
        )
        return self._rows(resp, f"delete {table}")

    # -- remote procedures --------------------------------------------------

    async def rpc(self, function: str, params: dict[str, Any]) -> Any:
        """Call a stored procedure and return its decoded JSON result."""
        resp = await self._http.post(f"/rest/v1/rpc/{function}", json=params)
        if resp.status_code >= 400:
            message = _error_message(resp)
            logger.warning("RPC %s failed: status=%d message=%s", function, resp.status_code, message)
            raise BackendError(message, status_code=resp.status_code)
        if not resp.content:
            return None
        return resp.json()

    # -- helpers ------------------------------------------------------------

    @staticmethod
    def _rows(resp: httpx.Response, what: str) -> list[dict[str, Any]]:
        if resp.status_code >= 400:
            message = _error_message(resp)
            logger.warning("%s failed: status=%d message=%s", what, resp.status_code, message)
            # Rejections by the database (bad filter, policy, constraint) reach the
            # caller as 400; only server-side failures are 500.
            raise BackendError(message, status_code=400 if resp.status_code < 500 else 500)
        if not resp.content:
            return []
        data = resp.json()
        if isinstance(data, dict):
            return [data]
        return list(data)
