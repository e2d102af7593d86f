"""
Tests for the comment bank HTTP endpoints.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from commentbank.routes import router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


def test_batch_endpoint(client):
    response = client.post(
        "/comments/batch",
        params={"use_comment_bank": True},
        json={
            "term": "First Term",
            "class_name": "SS3 Diamond",
            "students": [
                {
                    "student_id": "2023002",
                    "subjects": [
                        {"subject": "Mathematics", "score": 68, "trend": "down",
                         "strength_tags": ["algebra"], "weakness_tags": ["word problems"]},
                        {"subject": "Chemistry", "score": 72, "trend": "up",
                         "strength_tags": ["practicals", "equations"]},
                        {"subject": "Biology", "score": 65, "trend": "flat"},
                    ],
                }
            ],
        },
    )
    assert response.status_code == 200
    data = response.json()
    items = data["results"][0]["items"]
    assert len(items) == 3
    assert len({item["subject_remark"] for item in items}) == 3
    assert data["total_subjects"] == 3


def test_batch_endpoint_rejects_bad_payload(client):
    response = client.post("/comments/batch", json={"students": [{"subjects": []}]})
    assert response.status_code == 422


def test_subject_endpoint(client):
    response = client.post("/comments/subject", json={"subject": "Physics", "score": 88, "reference_score": 70})
    assert response.status_code == 200
    data = response.json()
    assert data["band"] == "A"
    assert data["category"] == "Physics"
    assert data["trend"] == "up"


def test_validate_endpoint(client):
    response = client.post(
        "/comments/validate",
        json={"remark": "Very good work", "comment": "One sentence only."},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["remark_valid"] is False
    assert data["comment_valid"] is False
    assert len(data["errors"]) == 2


def test_overall_endpoint(client):
    response = client.post("/comments/overall", json={"student_name": "Ada", "average": 81, "position": 3, "class_size": 25})
    assert response.status_code == 200
    assert "3rd out of 25" in response.json()["comment"]


@pytest.mark.parametrize("average", ["NaN", "Infinity"])
def test_overall_endpoint_rejects_non_finite_average(client, average):
    response = client.post(
        "/comments/overall",
        content=f'{{"student_name": "Ada", "average": {average}}}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422


def test_corpus_stats_and_health(client):
    stats = client.get("/comments/corpus/stats").json()
    assert stats["total"] > 0
    assert "Mathematics" in stats["by_category"]

    assert client.get("/comments/health").json()["status"] == "ok"
