import pytest
from fastapi.testclient import TestClient

from assessment.main import app


CANDIDATE = {
    "name": "Dana Reyes",
    "email": "dana@example.com",
    "position": "Data Analyst",
    "experience": "3-5 years",
}


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def _start(client) -> str:
    response = client.post("/interview/start", json=CANDIDATE)
    assert response.status_code == 200
    return response.json()["session_id"]


def test_list_questions_hides_keywords(client):
    response = client.get("/questions")
    assert response.status_code == 200
    payload = response.json()
    assert len(payload) == 5
    assert payload[0]["category"] == "Foundation"
    assert "keywords" not in payload[0]


def test_start_rejects_blank_candidate_field(client):
    response = client.post("/interview/start", json={**CANDIDATE, "position": "  "})
    assert response.status_code == 400


def test_start_returns_first_question(client):
    response = client.post("/interview/start", json=CANDIDATE)
    payload = response.json()
    assert payload["question_count"] == 5
    assert payload["current_question"]["id"] == 1


def test_unknown_session_is_404(client):
    assert client.get("/interview/missing").status_code == 404
    assert client.post("/interview/missing/answer", json={"answer": "x"}).status_code == 404


def test_blank_answer_is_400_and_keeps_cursor(client):
    session_id = _start(client)
    response = client.post(f"/interview/{session_id}/answer", json={"answer": "   "})
    assert response.status_code == 400

    status = client.get(f"/interview/{session_id}").json()
    assert status["question_index"] == 0
    assert status["evaluation_state"] == "idle"


def test_full_interview_flow(client, rich_answer):
    session_id = _start(client)

    assert client.get(f"/interview/{session_id}/report").status_code == 409

    payload = None
    for index in range(5):
        response = client.post(f"/interview/{session_id}/answer", json={"answer": rich_answer})
        assert response.status_code == 200
        payload = response.json()
        assert payload["response"]["question_id"] == index + 1
        assert payload["response"]["evaluation"]["score"] == 94

    assert payload["complete"] is True
    assert payload["next_question"] is None
    assert payload["progress_percent"] == 100
    assert payload["report"]["recommendation"] == "Strong Hire"

    report = client.get(f"/interview/{session_id}/report").json()
    assert report["overall_score"] == 94
    assert len(report["responses"]) == 5
    assert report["difficulty_averages"] == {"Basic": 94, "Intermediate": 94, "Advanced": 94}

    extra = client.post(f"/interview/{session_id}/answer", json={"answer": rich_answer})
    assert extra.status_code == 409

    status = client.get(f"/interview/{session_id}").json()
    assert status["phase"] == "report"
    assert status["evaluation_state"] == "complete"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
