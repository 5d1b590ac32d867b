"""Tests for seeding the default exercise catalog."""

from scripts.seed_exercises import DEFAULT_EXERCISES, seed_default_exercises


class TestSeedDefaultExercises:
    def test_seed_is_idempotent(self, session):
        assert seed_default_exercises(session) == len(DEFAULT_EXERCISES)
        assert seed_default_exercises(session) == 0

    def test_catalog_visible_to_users(self, client, headers, session):
        seed_default_exercises(session)
        body = client.get("/api/v1/exercises", headers=headers).json()
        assert len(body) == len(DEFAULT_EXERCISES)
        assert not any(e["is_user_exercise"] for e in body)

    def test_catalog_names_unique(self):
        names = [name for name, _ in DEFAULT_EXERCISES]
        assert len(names) == len(set(names))
