"""
SheetsProjects API — /api/policy-docs endpoint tests
Google Docs and MongoDB are replaced by in-memory fakes.
Run: cd backend && pytest tests/test_policy_docs_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

import config
from routes import policy_docs as policy_docs_routes
from server import app
from services import event_logger
from tests.doc_builders import document, paragraph, table, text_run
from tests.fakes import FakeDB, FakeFetcher

DOC_IDS = {
    "privacy": "1AbCprivacy",
    "terms": "1AbCterms",
    "about": "YOUR_ABOUT_DOC_ID_HERE",
}

PRIVACY_DOC = document(
    paragraph(text_run("Privacy Policy"), style="HEADING_1"),
    paragraph(text_run("We ", italic=True), text_run("never", bold=True), text_run(" sell data.")),
    table(["Data", "Retention"]),
    title="Privacy Policy",
    revision="ALm37BW",
)


@pytest.fixture
def fetcher():
    return FakeFetcher({"1AbCprivacy": PRIVACY_DOC})


@pytest.fixture
def fake_db(monkeypatch):
    db = FakeDB()
    monkeypatch.setattr(event_logger, "db", db)
    monkeypatch.setattr(config, "EVENT_LOG_ENABLED", True)
    return db


@pytest.fixture
def api(monkeypatch, fetcher, fake_db):
    monkeypatch.setattr("services.policy_docs.POLICY_DOC_IDS", DOC_IDS)
    app.dependency_overrides[policy_docs_routes.get_document_fetcher] = lambda: fetcher
    yield TestClient(app)
    app.dependency_overrides.clear()


# ═══════════════════════════════════════════════════════════════
# 1. GET /api/policy-docs/{policy_type}
# ═══════════════════════════════════════════════════════════════

class TestGetPolicyDoc:

    def test_success(self, api):
        r = api.get("/api/policy-docs/privacy")
        assert r.status_code == 200

        body = r.json()
        assert body["success"] is True
        assert body["data"]["title"] == "Privacy Policy"
        assert body["data"]["lastModified"] == "ALm37BW"
        assert body["data"]["html"].startswith(
            "<h1>Privacy Policy</h1><p><em>We </em><strong>never</strong> sell data.</p><table"
        )
        assert ">Data</td>" in body["data"]["html"]

    def test_unknown_type(self, api, fetcher):
        r = api.get("/api/policy-docs/cookies")
        assert r.status_code == 404
        assert r.json() == {
            "success": False,
            "message": 'Policy type "cookies" not found',
            "error": "Invalid policy type",
        }
        assert fetcher.calls == []

    def test_not_configured(self, api):
        r = api.get("/api/policy-docs/about")
        assert r.status_code == 404
        body = r.json()
        assert body["success"] is False
        assert body["error"] == "Document not configured"
        assert "not yet configured" in body["message"]

    def test_upstream_failure(self, api):
        # terms is mapped but the fake has no such document
        r = api.get("/api/policy-docs/terms")
        assert r.status_code == 404
        assert r.json() == {
            "success": False,
            "message": "Failed to fetch document content",
            "error": "Requested entity was not found.",
        }

    def test_non_string_title_still_returns_the_envelope(self, api, fetcher):
        fetcher.documents["1AbCterms"] = document(paragraph(text_run("T")), title=42, revision=7)

        r = api.get("/api/policy-docs/terms")
        assert r.status_code == 200
        assert r.json() == {
            "success": True,
            "data": {"title": "Untitled Document", "html": "<p>T</p>", "lastModified": None},
        }

    def test_path_parameter_name(self, api):
        schema = api.get("/openapi.json").json()
        operation = schema["paths"]["/api/policy-docs/{policy_type}"]["get"]
        assert [p["name"] for p in operation["parameters"]] == ["policy_type"]

    def test_unexpected_error(self, api, monkeypatch):
        async def boom(*args, **kwargs):
            raise RuntimeError("kaboom")

        monkeypatch.setattr(policy_docs_routes, "fetch_policy_doc", boom)

        r = api.get("/api/policy-docs/privacy")
        assert r.status_code == 500
        assert r.json() == {
            "success": False,
            "message": "Server error while fetching policy document",
            "error": "kaboom",
        }


# ═══════════════════════════════════════════════════════════════
# 2. AUDIT TRAIL
# ═══════════════════════════════════════════════════════════════

class TestAuditTrail:

    def test_success_is_logged(self, api, fake_db):
        api.get("/api/policy-docs/privacy")
        [event] = fake_db.event_log.docs
        assert event["action"] == "policy_doc_fetch"
        assert event["entity_type"] == "policy_doc"
        assert event["entity_id"] == "privacy"
        assert event["details"] == {"title": "Privacy Policy", "revision": "ALm37BW"}

    def test_failure_is_logged(self, api, fake_db):
        api.get("/api/policy-docs/cookies")
        [event] = fake_db.event_log.docs
        assert event["action"] == "policy_doc_fetch_failed"
        assert event["details"] == {"error": "Invalid policy type"}

    def test_database_down_does_not_break_the_page(self, api, monkeypatch):
        monkeypatch.setattr(event_logger, "db", FakeDB(fail=True))
        r = api.get("/api/policy-docs/privacy")
        assert r.status_code == 200
        assert r.json()["success"] is True


# ═══════════════════════════════════════════════════════════════
# 3. LIST / APP LEVEL
# ═══════════════════════════════════════════════════════════════

class TestListAndApp:

    def test_list_types(self, api):
        r = api.get("/api/policy-docs")
        assert r.status_code == 200
        assert r.json() == {
            "success": True,
            "data": [
                {"type": "privacy", "configured": True},
                {"type": "terms", "configured": True},
                {"type": "about", "configured": False},
            ],
        }

    def test_root(self, api):
        r = api.get("/")
        assert r.status_code == 200
        assert r.json()["status"] == "running"

    def test_route_not_found(self, api):
        r = api.get("/api/does-not-exist")
        assert r.status_code == 404
        assert r.json() == {"success": False, "message": "Route not found"}
