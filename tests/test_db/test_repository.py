"""Tests for jobdesk.db.repository."""

from __future__ import annotations

from jobdesk.core.models import DocumentType, JobCreate
from jobdesk.db import repository


class TestProfiles:
    async def test_get_profile(self, client):
        profile = await repository.get_profile(client, "user-alice")
        assert profile is not None
        assert profile.credits_remaining == 3
        assert profile.email == "alice@example.com"

    async def test_other_users_profile_is_hidden(self, client):
        assert await repository.get_profile(client, "user-bob") is None


class TestJobs:
    async def test_create_job_trims_and_skips_blank_optionals(self, backend, client):
        job = await repository.create_job(
            client,
            "user-alice",
            JobCreate(company="  Acme ", role="Dev", job_description="Build things", location="  ", notes="n"),
        )
        assert job.company == "Acme"
        stored = backend.tables["jobs"][0]
        assert "location" not in stored
        assert "job_url" not in stored
        assert stored["notes"] == "n"

    async def test_get_job_scoped_to_user(self, client, sample_job):
        job = await repository.get_job(client, sample_job["id"], "user-alice")
        assert job is not None
        assert job.company == "Acme Corp"
        assert await repository.get_job(client, sample_job["id"], "user-bob") is None

    async def test_list_jobs_newest_first(self, backend, client):
        backend.add_row("jobs", user_id="user-alice", company="First", role="r", job_description="d")
        backend.add_row("jobs", user_id="user-alice", company="Second", role="r", job_description="d")
        jobs = await repository.list_jobs(client, "user-alice")
        assert [j.company for j in jobs] == ["Second", "First"]


class TestDocuments:
    async def test_insert_and_get(self, client, sample_job):
        doc = await repository.insert_document(
            client,
            user_id="user-alice",
            doc_type=DocumentType.COVER_LETTER,
            title="Cover Letter - Acme",
            content_text="Dear Hiring Manager",
            job_id=sample_job["id"],
            content_json={"tone": "friendly"},
        )
        assert doc.type == "cover_letter"
        assert doc.job_id == sample_job["id"]

        fetched = await repository.get_document(client, doc.id, "user-alice")
        assert fetched is not None
        assert fetched.content_json == {"tone": "friendly"}

    async def test_list_only_returns_own_documents(self, backend, client):
        backend.add_row("documents", user_id="user-alice", type="resume", title="Mine")
        backend.add_row("documents", user_id="user-bob", type="resume", title="Theirs")
        docs = await repository.list_documents(client, "user-alice")
        assert [d.title for d in docs] == ["Mine"]

    async def test_delete_reports_whether_anything_matched(self, backend, client):
        row = backend.add_row("documents", user_id="user-alice", type="resume", title="x")
        assert await repository.delete_document(client, row["id"], "user-alice") is True
        assert await repository.delete_document(client, row["id"], "user-alice") is False
