"""Every route refuses requests without a usable bearer token."""

from __future__ import annotations

import pytest

ROUTES = [
    ("GET", "/api/profile"),
    ("GET", "/api/test-env"),
    ("GET", "/api/jobs"),
    ("POST", "/api/jobs"),
    ("POST", "/api/resume-upload"),
    ("GET", "/api/documents"),
    ("GET", "/api/documents/documents-1"),
    ("DELETE", "/api/documents/documents-1"),
    ("GET", "/api/documents/documents-1/export"),
    ("POST", "/api/generate-resume"),
    ("POST", "/api/cover-letter"),
    ("POST", "/api/tailor-resume"),
]


@pytest.mark.parametrize(("method", "path"), ROUTES)
def test_missing_token_is_401(api, backend, method, path):
    kwargs = {"json": {}} if method == "POST" and path != "/api/resume-upload" else {}
    resp = api.request(method, path, **kwargs)
    assert resp.status_code == 401
    assert resp.json() == {"error": "Missing auth token"}
    assert backend.requests == []


@pytest.mark.parametrize("header", ["tok-alice", "Basic tok-alice", "Bearer ", "Bearer    "])
def test_malformed_header_is_401(api, header):
    resp = api.get("/api/jobs", headers={"Authorization": header})
    assert resp.status_code == 401


def test_unknown_token_is_401(api):
    resp = api.get("/api/jobs", headers={"Authorization": "Bearer forged"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid session"}


def test_missing_token_wins_over_bad_body(api, backend):
    resp = api.post("/api/tailor-resume", json={"resumeText": 42})
    assert resp.status_code == 401
    assert backend.rpc_calls == []


def test_missing_token_wins_over_malformed_json(api, backend):
    resp = api.post(
        "/api/tailor-resume",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 401
    assert resp.json() == {"error": "Missing auth token"}
    assert backend.requests == []


def test_missing_token_wins_over_malformed_multipart(api, backend):
    resp = api.post(
        "/api/resume-upload",
        content=b"--xyz\r\ngarbage without headers",
        headers={"Content-Type": "multipart/form-data; boundary=xyz"},
    )
    assert resp.status_code == 401
    assert resp.json() == {"error": "Missing auth token"}


def test_malformed_json_with_token_is_400(api, alice_headers):
    resp = api.post(
        "/api/tailor-resume",
        content=b"{not json",
        headers={**alice_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400


def test_docs_stay_public(api):
    assert api.get("/openapi.json").status_code == 200
