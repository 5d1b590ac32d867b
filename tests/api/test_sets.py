"""Tests for the workout set endpoints."""

import datetime

from app.core.config import settings
from app.models.user import User

URL = "/api/v1/sets"


def _log(client, headers, exercise_id, weight=135.0, reps=5, date=None):
    payload = { "exercise_id": exercise_id, "weight": weight, "reps": reps }
    if date is not None:
        payload["date"] = date
    response = client.post(URL, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateSet:
    def test_create(self, client, headers, system_catalog, user):
        bench = system_catalog[0]
        body = _log(client, headers, bench.id, weight=135, reps=5)
        assert body["user_id"] == user.id
        assert body["volume"] == 675.0
        assert body["exercise"] == { "id": bench.id, "name": "Bench Press (Barbell)", "category": "CHEST" }

    def test_explicit_date(self, client, headers, system_catalog):
        body = _log(client, headers, system_catalog[0].id, date="2024-06-10T18:30:00")
        assert body["date"].startswith("2024-06-10T18:30:00")

    def test_unknown_exercise(self, client, headers):
        response = client.post(URL, json={ "exercise_id": 404, "weight": 10, "reps": 1 }, headers=headers)
        assert response.status_code == 404

    def test_other_users_exercise(self, client, headers, session):
        stranger = User(external_id="auth0|stranger", email="stranger@liftiq.app")
        session.add(stranger)
        session.commit()
        created = client.post("/api/v1/exercises", json={ "name": "Secret Lift", "category": "OTHER" },
                              headers={ settings.IDENTITY_HEADER: stranger.external_id }).json()
        response = client.post(URL, json={ "exercise_id": created["id"], "weight": 10, "reps": 1 }, headers=headers)
        assert response.status_code == 404

    def test_negative_weight(self, client, headers, system_catalog):
        response = client.post(URL, json={ "exercise_id": system_catalog[0].id, "weight": -5, "reps": 5 },
                               headers=headers)
        assert response.status_code == 422

    def test_requires_identity(self, client, system_catalog):
        response = client.post(URL, json={ "exercise_id": system_catalog[0].id, "weight": 10, "reps": 1 })
        assert response.status_code == 401

    def test_unregistered_subject(self, client, system_catalog):
        response = client.post(URL, json={ "exercise_id": system_catalog[0].id, "weight": 10, "reps": 1 },
                               headers={ settings.IDENTITY_HEADER: "auth0|ghost" })
        assert response.status_code == 404


class TestDeleteSet:
    def test_delete(self, client, headers, system_catalog):
        created = _log(client, headers, system_catalog[0].id)
        assert client.delete(f"{URL}/{created['id']}", headers=headers).status_code == 204
        assert client.get(f"{URL}/recent", headers=headers).json() == []

    def test_unknown_set(self, client, headers):
        response = client.delete(f"{URL}/999", headers=headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Set not found"


class TestListSets:
    def test_recent_newest_first(self, client, headers, system_catalog):
        first = _log(client, headers, system_catalog[0].id)
        second = _log(client, headers, system_catalog[1].id, weight=225, reps=3)
        body = client.get(f"{URL}/recent", headers=headers).json()
        assert [s["id"] for s in body] == [second["id"], first["id"]]

    def test_today(self, client, headers, system_catalog):
        bench, deadlift = system_catalog
        yesterday = datetime.datetime.now() - datetime.timedelta(days=1)
        _log(client, headers, deadlift.id, date=yesterday.isoformat())
        _log(client, headers, bench.id)
        _log(client, headers, deadlift.id)

        body = client.get(f"{URL}/today", headers=headers).json()
        assert [s["exercise"]["name"] for s in body] == ["Bench Press (Barbell)", "Deadlift"]
