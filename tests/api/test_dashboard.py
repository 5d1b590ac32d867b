"""Tests for the dashboard endpoints."""

import pytest

from app.core.config import settings
from app.core.units import LBS_PER_KG
from app.models.user import User

URL = "/api/v1/dashboard"


@pytest.fixture
def logged_sets(client, headers, system_catalog):
    """Sets around 2024-06-15 (a Saturday)."""
    bench, deadlift = system_catalog
    for exercise, weight, reps, date in [
        (bench, 100, 5, "2024-06-10T18:00:00"),
        (bench, 50, 10, "2024-06-10T18:05:00"),
        (deadlift, 100, 5, "2024-06-03T07:00:00"),
    ]:
        response = client.post("/api/v1/sets",
                               json={ "exercise_id": exercise.id, "weight": weight, "reps": reps, "date": date },
                               headers=headers)
        assert response.status_code == 201


class TestVolumeTrend:
    def test_one_week(self, client, headers, logged_sets):
        response = client.get(f"{URL}/volume-trend", params={ "period": "1W", "as_of": "2024-06-15" },
                              headers=headers)
        assert response.status_code == 200
        body = response.json()
        assert body["period"] == "1W"
        assert body["granularity"] == "day"
        assert body["has_comparison"] is True
        assert body["current_start"] == "2024-06-08"
        assert body["current_end"] == "2024-06-16"
        assert len(body["points"]) == 8

        volumes = { p["date"]: p["volume"] for p in body["points"] }
        assert volumes["2024-06-10"] == 1000.0
        assert sum(volumes.values()) == 1000.0
        assert body["current_total"] == 1000.0
        assert body["previous_total"] == 500.0
        assert body["percentage_change"] == pytest.approx(100.0)

        # 2024-06-03 sits two days into the previous window
        previous = { p["date"]: p["previous_volume"] for p in body["points"] }
        assert previous["2024-06-10"] == 500.0

    def test_kilograms(self, client, headers, logged_sets):
        body = client.get(f"{URL}/volume-trend", params={ "period": "1W", "as_of": "2024-06-15", "unit": "kg" },
                          headers=headers).json()
        assert body["unit"] == "kg"
        assert body["current_total"] == pytest.approx(1000.0 / LBS_PER_KG)
        assert body["percentage_change"] == pytest.approx(100.0)

    def test_unknown_unit_rejected(self, client, headers):
        response = client.get(f"{URL}/volume-trend", params={ "unit": "stone" }, headers=headers)
        assert response.status_code == 422

    @pytest.mark.parametrize("period", ["2W", "", "weekly"])
    def test_unknown_period_falls_back_to_four_weeks(self, client, headers, period):
        body = client.get(f"{URL}/volume-trend", params={ "period": period, "as_of": "2024-06-15" },
                          headers=headers).json()
        assert body["period"] == "4W"
        assert len(body["points"]) == 29

    def test_default_period(self, client, headers):
        body = client.get(f"{URL}/volume-trend", params={ "as_of": "2024-06-15" }, headers=headers).json()
        assert body["period"] == "4W"

    def test_lowercase_period(self, client, headers):
        body = client.get(f"{URL}/volume-trend", params={ "period": "ytd", "as_of": "2024-06-15" },
                          headers=headers).json()
        assert body["period"] == "YTD"
        assert body["granularity"] == "month"
        assert [p["date"] for p in body["points"]][-1] == "2024-06-01"

    def test_all_without_sets(self, client, headers):
        body = client.get(f"{URL}/volume-trend", params={ "period": "ALL", "as_of": "2024-06-15" },
                          headers=headers).json()
        assert body["has_comparison"] is False
        assert len(body["points"]) == 1
        assert body["points"][0]["previous_volume"] is None
        assert body["current_total"] == 0.0
        assert body["percentage_change"] == 0.0

    def test_all_starts_at_first_set(self, client, headers, logged_sets):
        body = client.get(f"{URL}/volume-trend", params={ "period": "ALL", "as_of": "2024-06-15" },
                          headers=headers).json()
        assert body["current_start"] == "2024-06-03"
        assert body["current_total"] == 1500.0
        assert body["previous_total"] == 0.0

    def test_requires_identity(self, client):
        assert client.get(f"{URL}/volume-trend").status_code == 401


class TestStats:
    def test_stats(self, client, headers, system_catalog):
        bench, deadlift = system_catalog
        client.post("/api/v1/exercises", json={ "name": "Cable Fly", "category": "CHEST" }, headers=headers)
        for exercise, weight, reps, date in [
            (bench, 100, 5, "2024-06-15T09:00:00"),
            (bench, 100, 3, "2024-06-15T09:10:00"),
            (deadlift, 200, 5, "2024-06-13T07:00:00"),
            (deadlift, 200, 3, "2024-06-01T07:00:00"),
            (deadlift, 500, 1, "2024-04-01T07:00:00"),
        ]:
            client.post("/api/v1/sets",
                        json={ "exercise_id": exercise.id, "weight": weight, "reps": reps, "date": date },
                        headers=headers)

        response = client.get(f"{URL}/stats", params={ "as_of": "2024-06-15" }, headers=headers)
        assert response.status_code == 200
        body = response.json()
        assert body["todays_volume"] == 800.0
        assert body["todays_sets"] == 2
        assert body["todays_exercises"] == 1
        # Sunday 2024-06-09 onwards: the 13th and the 15th
        assert body["this_week_workouts"] == 2
        assert body["weekly_average"] == pytest.approx((1000.0 + 600.0) / 4)
        assert body["total_exercises"] == 1
        assert body["volume_trend"] == [
            { "date": "2024-06-01", "volume": 600.0 },
            { "date": "2024-06-13", "volume": 1000.0 },
            { "date": "2024-06-15", "volume": 800.0 },
        ]

    def test_stats_without_sets(self, client, headers):
        body = client.get(f"{URL}/stats", params={ "as_of": "2024-06-15" }, headers=headers).json()
        assert body["todays_volume"] == 0
        assert body["this_week_workouts"] == 0
        assert body["volume_trend"] == []


class TestUserIsolation:
    """Sets logged by another user never reach the caller's dashboard."""

    @pytest.fixture
    def stranger_sets(self, client, session, system_catalog):
        stranger = User(external_id="auth0|stranger", email="stranger@liftiq.app")
        session.add(stranger)
        session.commit()
        stranger_headers = { settings.IDENTITY_HEADER: stranger.external_id }
        bench = system_catalog[0]
        for weight, reps, date in [
            (300, 10, "2023-01-05T10:00:00"),
            (300, 10, "2024-06-03T10:00:00"),
            (300, 10, "2024-06-12T10:00:00"),
            (300, 10, "2024-06-15T10:00:00"),
        ]:
            response = client.post("/api/v1/sets",
                                   json={ "exercise_id": bench.id, "weight": weight, "reps": reps, "date": date },
                                   headers=stranger_headers)
            assert response.status_code == 201

    def test_volume_trend_excludes_other_users(self, client, headers, logged_sets, stranger_sets):
        body = client.get(f"{URL}/volume-trend", params={ "period": "1W", "as_of": "2024-06-15" },
                          headers=headers).json()
        assert body["current_total"] == 1000.0
        assert body["previous_total"] == 500.0
        volumes = { p["date"]: p["volume"] for p in body["points"] }
        assert volumes["2024-06-12"] == 0.0
        assert volumes["2024-06-15"] == 0.0

    def test_all_starts_at_own_first_set(self, client, headers, logged_sets, stranger_sets):
        body = client.get(f"{URL}/volume-trend", params={ "period": "ALL", "as_of": "2024-06-15" },
                          headers=headers).json()
        assert body["current_start"] == "2024-06-03"
        assert body["current_total"] == 1500.0

    def test_all_without_own_sets(self, client, headers, stranger_sets):
        body = client.get(f"{URL}/volume-trend", params={ "period": "ALL", "as_of": "2024-06-15" },
                          headers=headers).json()
        assert body["current_start"] == "2024-06-15"
        assert body["current_total"] == 0.0

    def test_stats_exclude_other_users(self, client, headers, logged_sets, stranger_sets):
        body = client.get(f"{URL}/stats", params={ "as_of": "2024-06-15" }, headers=headers).json()
        assert body["todays_volume"] == 0.0
        assert body["todays_sets"] == 0
        assert body["this_week_workouts"] == 1
        assert body["weekly_average"] == pytest.approx(1500.0 / 4)
        assert body["volume_trend"] == [
            { "date": "2024-06-03", "volume": 500.0 },
            { "date": "2024-06-10", "volume": 1000.0 },
        ]
