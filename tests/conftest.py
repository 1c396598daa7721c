"""Shared test fixtures, including an in-memory stand-in for the Supabase REST API."""

from __future__ import annotations

import itertools
import json
from datetime import datetime, timedelta
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient
from pydantic_ai.models.test import TestModel

from jobdesk.api.app import create_app
from jobdesk.api.deps import get_backend_config, get_backend_transport, get_llm_model
from jobdesk.core.config import SupabaseConfig
from jobdesk.db.client import SupabaseClient

ALICE_TOKEN = "tok-alice"
BOB_TOKEN = "tok-bob"
GENERATED_TEXT = "SUMMARY\nSeasoned engineer.\n\nSKILLS\nPython, SQL"

SAMPLE_RESUME = (
    "Alice Example\n"
    "Backend engineer with seven years of experience building REST APIs in Python.\n"
    "EXPERIENCE\n"
    "- Acme Corp, Senior Engineer (2020-2024): led the billing platform rewrite.\n"
    "- Globex, Engineer (2017-2020): built data pipelines processing 2M events/day.\n"
    "EDUCATION\nB.Sc. Computer Science\n"
)

_BASE_TIME = datetime(2025, 1, 15, 10, 0, 0)


class FakeBackend:
    """Just enough GoTrue + PostgREST to exercise the client.

    Rows in tables with a ``user_id`` column are only visible to, and only
    writable by, their owner (mirrors the row-level-security policies).
    ``consume_credits`` decrements atomically and refuses to go negative.
    """

    def __init__(self) -> None:
        self.users: dict[str, dict[str, Any]] = {}
        self.tables: dict[str, list[dict[str, Any]]] = {
            "profiles": [],
            "jobs": [],
            "documents": [],
        }
        self.requests: list[httpx.Request] = []
        self.rpc_calls: list[dict[str, Any]] = []
        self._seq = itertools.count(1)

    # -- seeding ------------------------------------------------------------

    def add_user(
        self,
        token: str,
        user_id: str,
        *,
        email: str | None = None,
        credits: int = 3,
        full_name: str | None = None,
    ) -> dict[str, Any]:
        user = {
            "id": user_id,
            "email": email,
            "user_metadata": {"full_name": full_name} if full_name else {},
        }
        self.users[token] = user
        self.tables["profiles"].append(
            {
                "user_id": user_id,
                "email": email,
                "credits_remaining": credits,
                "created_at": _BASE_TIME.isoformat(),
            }
        )
        return user

    def add_row(self, table: str, **fields: Any) -> dict[str, Any]:
        n = next(self._seq)
        row = {
            "id": f"{table}-{n}",
            "created_at": (_BASE_TIME + timedelta(minutes=n)).isoformat(),
            **fields,
        }
        self.tables[table].append(row)
        return row

    def credits(self, user_id: str) -> int:
        return next(p for p in self.tables["profiles"] if p["user_id"] == user_id)["credits_remaining"]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    # -- request handling ---------------------------------------------------

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        auth = request.headers.get("authorization", "")
        user = self.users.get(auth.removeprefix("Bearer "))
        path = request.url.path

        if request.headers.get("apikey") != "anon-key":
            return httpx.Response(401, json={"message": "Invalid API key"})

        if path == "/auth/v1/user":
            if user is None:
                return httpx.Response(401, json={"msg": "invalid JWT"})
            return httpx.Response(200, json=user)

        if user is None:
            return httpx.Response(401, json={"message": "JWT expired"})

        if path.startswith("/rest/v1/rpc/"):
            return self._rpc(path.rsplit("/", 1)[1], json.loads(request.content or b"{}"))

        table = path.removeprefix("/rest/v1/")
        if table not in self.tables:
            return httpx.Response(404, json={"message": f"relation \"{table}\" does not exist"})

        if request.method == "GET":
            return self._select(table, request, user)
        if request.method == "POST":
            return self._insert(table, json.loads(request.content), user)
        if request.method == "DELETE":
            return self._delete(table, request, user)
        return httpx.Response(405, json={"message": "method not allowed"})

    def _visible(self, table: str, request: httpx.Request, user: dict[str, Any]) -> list[dict[str, Any]]:
        rows = [r for r in self.tables[table] if r.get("user_id") == user["id"]]
        for key, value in request.url.params.multi_items():
            if key in ("select", "order", "limit"):
                continue
            op, _, expected = value.partition(".")
            assert op == "eq", f"unsupported filter {key}={value}"
            rows = [r for r in rows if str(r.get(key)) == expected]
        return rows

    def _select(self, table: str, request: httpx.Request, user: dict[str, Any]) -> httpx.Response:
        rows = self._visible(table, request, user)
        order = request.url.params.get("order")
        if order:
            col, _, direction = order.partition(".")
            rows = sorted(rows, key=lambda r: str(r.get(col)), reverse=direction == "desc")
        limit = request.url.params.get("limit")
        if limit:
            rows = rows[: int(limit)]
        return httpx.Response(200, json=rows)

    def _insert(self, table: str, payload: dict[str, Any], user: dict[str, Any]) -> httpx.Response:
        if payload.get("user_id") != user["id"]:
            return httpx.Response(
                403, json={"message": 'new row violates row-level security policy for table "%s"' % table}
            )
        row = self.add_row(table, **payload)
        return httpx.Response(201, json=[row])

    def _delete(self, table: str, request: httpx.Request, user: dict[str, Any]) -> httpx.Response:
        rows = self._visible(table, request, user)
        self.tables[table] = [r for r in self.tables[table] if r not in rows]
        return httpx.Response(200, json=rows)

    def _rpc(self, name: str, params: dict[str, Any]) -> httpx.Response:
        if name != "consume_credits":
            return httpx.Response(404, json={"message": f"function {name} does not exist"})
        self.rpc_calls.append(params)
        profile = next(
            (p for p in self.tables["profiles"] if p["user_id"] == params["p_user_id"]), None
        )
        if profile is None:
            return httpx.Response(400, json={"message": "PROFILE_NOT_FOUND", "code": "P0001"})
        if profile["credits_remaining"] < params["p_amount"]:
            return httpx.Response(400, json={"message": "INSUFFICIENT_CREDITS", "code": "P0001"})
        profile["credits_remaining"] -= params["p_amount"]
        return httpx.Response(200, json=profile["credits_remaining"])


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def backend() -> FakeBackend:
    b = FakeBackend()
    b.add_user(ALICE_TOKEN, "user-alice", email="alice@example.com", credits=3, full_name="Alice Example")
    b.add_user(BOB_TOKEN, "user-bob", email="bob@example.com", credits=0)
    return b


@pytest.fixture
def supabase_config() -> SupabaseConfig:
    return SupabaseConfig(url="https://test.supabase.co", anon_key="anon-key")


@pytest.fixture
async def client(backend: FakeBackend, supabase_config: SupabaseConfig):
    async with SupabaseClient(supabase_config, ALICE_TOKEN, transport=backend.transport) as c:
        yield c


@pytest.fixture
def sample_job(backend: FakeBackend) -> dict[str, Any]:
    return backend.add_row(
        "jobs",
        user_id="user-alice",
        company="Acme Corp",
        role="Backend Developer",
        job_description="Build REST APIs in Python and PostgreSQL.",
        location="Montreal",
        notes="Referral from Sam",
    )


@pytest.fixture
def api(backend: FakeBackend, supabase_config: SupabaseConfig):
    app = create_app()
    app.dependency_overrides[get_backend_config] = lambda: supabase_config
    app.dependency_overrides[get_backend_transport] = lambda: backend.transport
    app.dependency_overrides[get_llm_model] = lambda: TestModel(custom_output_text=GENERATED_TEXT)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def alice_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ALICE_TOKEN}"}


@pytest.fixture
def bob_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {BOB_TOKEN}"}


@pytest.fixture
def generated_text() -> str:
    return GENERATED_TEXT


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME
