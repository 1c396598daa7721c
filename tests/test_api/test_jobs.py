from __future__ import annotations

import pytest


class TestCreateJob:
    def test_creates_job(self, api, backend, alice_headers):
        resp = api.post(
            "/api/jobs",
            headers=alice_headers,
            json={
                "company": "Acme Corp",
                "role": "Backend Developer",
                "jobDescription": "Build APIs",
                "jobUrl": "https://acme.example/jobs/1",
                "location": "",
            },
        )
        assert resp.status_code == 201
        job = resp.json()["job"]
        assert job["company"] == "Acme Corp"
        assert job["job_url"] == "https://acme.example/jobs/1"
        assert "user_id" not in job
        assert backend.tables["jobs"][0]["user_id"] == "user-alice"
        assert "location" not in backend.tables["jobs"][0]

    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ({"role": "Dev", "jobDescription": "x"}, "Company is required"),
            ({"company": "Acme", "role": "  ", "jobDescription": "x"}, "Role is required"),
            ({"company": "Acme", "role": "Dev"}, "Job description is required"),
        ],
    )
    def test_required_fields(self, api, backend, alice_headers, body, message):
        resp = api.post("/api/jobs", headers=alice_headers, json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": message}
        assert backend.tables["jobs"] == []

    def test_wrong_field_type_is_400(self, api, alice_headers):
        resp = api.post("/api/jobs", headers=alice_headers, json={"company": ["Acme"]})
        assert resp.status_code == 400
        assert "company" in resp.json()["error"]


class TestListJobs:
    def test_lists_own_jobs_newest_first(self, api, backend, alice_headers):
        backend.add_row("jobs", user_id="user-alice", company="Old", role="r", job_description="d")
        backend.add_row("jobs", user_id="user-bob", company="Other", role="r", job_description="d")
        backend.add_row("jobs", user_id="user-alice", company="New", role="r", job_description="d")
        resp = api.get("/api/jobs", headers=alice_headers)
        assert resp.status_code == 200
        assert [j["company"] for j in resp.json()["jobs"]] == ["New", "Old"]

    def test_empty(self, api, bob_headers):
        assert api.get("/api/jobs", headers=bob_headers).json() == {"jobs": []}
