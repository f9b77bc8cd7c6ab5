import asyncio
import time

import httpx

from health_insight.gateway import AssessmentGateway
from health_insight.main import create_app

PREFIX = "/api/health-insight/v1"


def test_disclaimer(client):
    body = client.get(f"{PREFIX}/disclaimer").json()
    assert "NOT a medical diagnosis" in body["text"]


def test_list_symptoms(client):
    rows = client.get(f"{PREFIX}/symptoms").json()
    assert len(rows) == 27
    assert rows[0] == {"name": "Fever", "urgent": False}
    assert {"name": "Chest Pain/Pressure", "urgent": True} in rows


def test_list_conditions(client):
    rows = client.get(f"{PREFIX}/conditions").json()
    assert len(rows) == 16
    assert rows[0]["name"] == "Common Cold"


def test_evaluate(client):
    resp = client.post(
        f"{PREFIX}/evaluate",
        json={"symptoms": ["Loss of Taste/Smell"], "age": 30, "sex": "Female", "name": "Kim"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["suggestions"][0]["condition"] == "COVID-19"
    assert body["suggestions"][0]["score"] == 5
    assert body["urgent"] is False
    assert body["report"].startswith("Hello Kim, here are your personalized insights:")


def test_evaluate_requires_symptoms(client):
    resp = client.post(f"{PREFIX}/evaluate", json={"symptoms": [], "age": 30})
    assert resp.status_code == 422


def test_evaluate_rejects_unknown_symptom(client):
    resp = client.post(f"{PREFIX}/evaluate", json={"symptoms": ["Hiccups"], "age": 30})
    assert resp.status_code == 422
    assert "Hiccups" in resp.json()["detail"]


def test_evaluate_rejects_negative_age(client):
    resp = client.post(f"{PREFIX}/evaluate", json={"symptoms": ["Cough"], "age": -1})
    assert resp.status_code == 422


def test_save_then_history(client):
    first = client.post(
        f"{PREFIX}/assessments",
        json={"name": "Lee", "symptoms": ["Headache"], "age": 41, "sex": "Male"},
    )
    assert first.status_code == 201
    second = client.post(
        f"{PREFIX}/assessments",
        json={
            "name": "Lee",
            "symptoms": ["Chest Pain/Pressure", "Shortness of Breath"],
            "age": 41,
            "sex": "Male",
            "notes": "climbing stairs",
        },
    )
    assert second.status_code == 201
    assert second.json()["user_id"] == first.json()["user_id"]
    assert second.json()["urgent"] is True

    history = client.get(f"{PREFIX}/users/Lee/assessments").json()
    assert [r["id"] for r in history["records"]] == [
        second.json()["assessment_id"],
        first.json()["assessment_id"],
    ]
    assert history["records"][0]["symptoms"] == "Shortness of Breath, Chest Pain/Pressure"
    assert history["records"][1]["notes"] is None
    assert "Flag: URGENT" in history["report"]

    limited = client.get(f"{PREFIX}/users/Lee/assessments", params={"limit": 1}).json()
    assert len(limited["records"]) == 1


def test_save_requires_name(client):
    resp = client.post(f"{PREFIX}/assessments", json={"name": "  ", "symptoms": ["Cough"], "age": 30})
    assert resp.status_code == 422


def test_history_for_unknown_user(client):
    assert client.get(f"{PREFIX}/users/Ghost/assessments").status_code == 404


def test_scoring_still_works_without_database(offline_client):
    ok = offline_client.post(f"{PREFIX}/evaluate", json={"symptoms": ["Cough"], "age": 30})
    assert ok.status_code == 200

    save = offline_client.post(f"{PREFIX}/assessments", json={"name": "Lee", "symptoms": ["Cough"], "age": 30})
    assert save.status_code == 503

    history = offline_client.get(f"{PREFIX}/users/Lee/assessments")
    assert history.status_code == 503


def test_history_limit_is_bounded(client):
    for limit in (0, 101, 2**64):
        resp = client.get(f"{PREFIX}/users/Lee/assessments", params={"limit": limit})
        assert resp.status_code == 422


class _SlowGateway(AssessmentGateway):
    def find_user_id_by_name(self, name):
        time.sleep(0.5)
        return None


def test_history_requests_do_not_block_each_other(session_factory, engine, knowledge):
    app = create_app(gateway=_SlowGateway(session_factory, engine=engine), knowledge=knowledge)

    async def fire():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            return await asyncio.gather(
                *(c.get(f"{PREFIX}/users/Lee/assessments") for _ in range(4))
            )

    started = time.perf_counter()
    responses = asyncio.run(fire())
    elapsed = time.perf_counter() - started

    assert [r.status_code for r in responses] == [404] * 4
    assert elapsed < 1.0
