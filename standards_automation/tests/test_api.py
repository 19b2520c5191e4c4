"""
Tests: HTTP surface — routes, camelCase wire format and status mapping.

Run with:
    pytest standards_automation/tests/test_api.py -v
"""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from standards_automation.api import create_app
from standards_automation.config import Settings
from standards_automation.ingestion.loader import build_corpus


E2E_DOC = {
    "directives": [
        {
            "directive_code": "SEC-05",
            "structured_sections": [
                {
                    "section_code": "4.3",
                    "content": "4.3.1 Fences must be 2m. 4.3.2 Gates must be locked.",
                }
            ],
        }
    ]
}


@pytest.fixture
def client(sample_corpus):
    return TestClient(create_app(corpus=sample_corpus, settings=Settings()))


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["recordsLoaded"] == 5
        assert "timestamp" in body


class TestSearchRequirements:
    def test_camel_case_filters_and_fields(self, client):
        response = client.post(
            "/standards/searchRequirements",
            json={"standard": "HCIS", "directiveCode": "SEC-05"},
        )
        assert response.status_code == 200
        results = response.json()["results"]
        assert len(results) == 1
        assert results[0]["directiveCode"] == "SEC-05"
        assert results[0]["clauseId"] == "4.3.2"
        assert results[0]["tags"] == []

    def test_no_filters_is_400(self, client):
        response = client.post("/standards/searchRequirements", json={})
        assert response.status_code == 400
        assert "At least one filter is required" in response.json()["error"]

    def test_invalid_limit_is_400(self, client):
        response = client.post("/standards/searchRequirements", json={"query": "x", "limit": 0})
        assert response.status_code == 400
        assert "error" in response.json()


class TestGetReference:
    def test_found(self, client):
        response = client.post("/standards/getReference", json={"reference": "SEC-01 4.4 4.4.2"})
        assert response.status_code == 200
        assert response.json()["clauseId"] == "4.4.2"

    def test_unknown_is_404(self, client):
        response = client.post("/standards/getReference", json={"reference": "unknown"})
        assert response.status_code == 404
        assert response.json() == {"error": "Reference not found", "reference": "unknown"}

    def test_missing_reference_is_400(self, client):
        response = client.post("/standards/getReference", json={})
        assert response.status_code == 400


class TestGenerateChecklist:
    def test_checklist_shape(self, client):
        response = client.post(
            "/standards/generateChecklist",
            json={"standards": ["SBC_801"], "facilityClass": "group a"},
        )
        assert response.status_code == 200
        checklist = response.json()["checklist"]
        assert len(checklist) == 1
        item = checklist[0]
        assert item["mandatory"] is True
        assert item["requirement"].startswith("An automatic sprinkler system")
        assert set(item) == {
            "standard",
            "directiveCode",
            "sectionCode",
            "clauseId",
            "domain",
            "requirement",
            "facilityClass",
            "mandatory",
            "reference",
        }

    def test_missing_standards_is_400(self, client):
        response = client.post("/standards/generateChecklist", json={"domains": ["fire"]})
        assert response.status_code == 400
        assert response.json()["error"] == "standards array is required and must not be empty"

    def test_standards_not_a_list_is_400(self, client):
        response = client.post("/standards/generateChecklist", json={"standards": "HCIS_SEC"})
        assert response.status_code == 400


class TestInternalError:
    def test_unexpected_fault_is_generic_500(self, client, monkeypatch):
        from standards_automation.services.standards_service import StandardsService

        def broken(self, request):
            raise RuntimeError("secret internal detail")

        monkeypatch.setattr(StandardsService, "search_requirements", broken)
        response = client.post("/standards/searchRequirements", json={"query": "x"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestEndToEnd:
    def test_directive_document_through_the_api(self):
        corpus = build_corpus([("STD.json", E2E_DOC)])
        client = TestClient(create_app(corpus=corpus, settings=Settings()))

        response = client.post("/standards/searchRequirements", json={"standard": "STD"})
        results = response.json()["results"]
        assert [r["clauseId"] for r in results] == ["4.3.1", "4.3.2"]
        assert [r["reference"] for r in results] == [
            "STD SEC-05 4.3 4.3.1",
            "STD SEC-05 4.3 4.3.2",
        ]

        response = client.post(
            "/standards/getReference", json={"reference": "std sec-05 4.3 4.3.2"}
        )
        assert response.status_code == 200
        assert response.json()["text"] == "4.3.2 Gates must be locked."

    def test_startup_ingests_data_directory(self, tmp_path):
        (tmp_path / "HCIS_SEC-05.json").write_text(json.dumps(E2E_DOC), encoding="utf-8")
        app = create_app(settings=Settings(data_dir=str(tmp_path)))
        with TestClient(app) as client:
            assert client.get("/health").json()["recordsLoaded"] == 2
            response = client.post(
                "/standards/getReference", json={"reference": "hcis sec sec-05 4.3 4.3.1"}
            )
            assert response.status_code == 200


class TestSampleData:
    def test_bundled_sample_documents(self):
        data_dir = Path(__file__).resolve().parents[2] / "data"
        if not data_dir.is_dir():
            pytest.skip("sample data not present")
        with TestClient(create_app(settings=Settings(data_dir=str(data_dir)))) as client:
            response = client.post("/standards/getReference", json={"reference": "HCIS SEC-01 4.4.1"})
            assert response.status_code == 200
            assert response.json()["facilityClass"] == "Class A"

            response = client.post(
                "/standards/generateChecklist",
                json={"standards": ["HCIS_SEC", "SBC_801", "SASO_FIRE_TR"]},
            )
            assert len(response.json()["checklist"]) > 0
