"""
Tests for the HTTP routes.

Templates and the catalog file come from conftest fixtures pointing the
settings at temporary files.
"""


class TestParseWorkoutEndpoint:
    """Tests for POST /parse/workout"""

    def test_parse_with_inline_catalog(self, client, sample_plan_text, catalog_records):
        response = client.post("/parse/workout", json={"text": sample_plan_text, "catalog": catalog_records})

        assert response.status_code == 200
        data = response.json()
        assert [b["section"] for b in data["blocks"]] == ["Engine", "Armor", "Armor", "Core Work"]
        assert data["total_xp"] == 30 + 150 + 18 + 60
        assert data["warnings"] == []

        timer = data["blocks"][0]
        assert timer["type"] == "timer"
        assert timer["intervals"][1] == {
            "type": "interval",
            "seconds": 30,
            "zone": "Push Pace",
            "color": "bg-orange-500",
            "note": "incline 2%",
            "raw_text": "0:30 Push (incline 2%)",
        }

        deadlift = data["blocks"][2]
        assert deadlift["reps_list"] == [5, 3, 1]
        assert deadlift["tips"] == []

    def test_parse_uses_configured_catalog(self, client, catalog_file):
        response = client.post("/parse/workout", json={"text": "[ARMOR]\n1. Back Squat: 5 sets x 5 reps"})

        assert response.status_code == 200
        assert response.json()["blocks"][0]["xp_value"] == 150

    def test_missing_catalog_file_degrades_to_fallback(self, client, tmp_path, monkeypatch):
        from workout_plan_api.config import settings

        monkeypatch.setattr(settings, "CATALOG_PATH", tmp_path / "missing.json")
        response = client.post("/parse/workout", json={"text": "[ARMOR]\n1. Back Squat: 5 sets"})

        assert response.status_code == 200
        assert response.json()["blocks"][0]["xp_value"] == 25  # 5 * 10 * 0.5

    def test_superset_shape(self, client):
        text = "[STRENGTH]\nSuperset (Curl + Press): 3 Sets, Rest: 45 sec\nReps: 12/10"
        response = client.post("/parse/workout", json={"text": text, "catalog": []})

        block = response.json()["blocks"][0]
        assert block["type"] == "superset"
        assert block["rest_seconds"] == 45
        assert block["has_bullet_exercises"] is False
        assert block["exercises"] == [
            {"name": "Curl", "reps": "12", "sets": 3},
            {"name": "Press", "reps": "10", "sets": 3},
        ]

    def test_blank_text_rejected(self, client):
        response = client.post("/parse/workout", json={"text": "   "})
        assert response.status_code == 400

    def test_text_too_long_rejected(self, client):
        response = client.post("/parse/workout", json={"text": "x" * 50001})
        assert response.status_code == 422

    def test_untagged_text_returns_no_blocks(self, client):
        response = client.post("/parse/workout", json={"text": "Back Squat: 5 sets", "catalog": []})

        assert response.status_code == 200
        assert response.json() == {"blocks": [], "total_xp": 0, "warnings": []}


class TestTemplateEndpoints:
    """Tests for GET /workout and GET /workouts/schedule"""

    def test_workout_by_day_name(self, client, templates_dir, catalog_file):
        response = client.get("/workout", params={"date": "monday"})

        assert response.status_code == 200
        blocks = response.json()
        assert len(blocks) == 1
        assert blocks[0]["name"] == "1. Back Squat"
        assert blocks[0]["rest_seconds"] == 90

    def test_workout_by_iso_date(self, client, templates_dir, catalog_file):
        response = client.get("/workout", params={"date": "2026-02-25"})

        assert response.status_code == 200
        assert [b["section"] for b in response.json()] == ["Engine", "Armor"]

    def test_missing_template_returns_empty_list(self, client, templates_dir, catalog_file):
        response = client.get("/workout", params={"date": "saturday"})

        assert response.status_code == 200
        assert response.json() == []

    def test_schedule(self, client, templates_dir, catalog_file):
        response = client.get("/workouts/schedule")

        assert response.status_code == 200
        data = response.json()
        assert [d["day"] for d in data] == ["monday", "tuesday", "wednesday"]
        assert data[0] == {"day": "monday", "title": "Iron Monday", "order": 0, "xp": 150, "type": "Strength"}


class TestMiscEndpoints:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_catalog(self, client, catalog_file):
        response = client.get("/catalog")

        assert response.status_code == 200
        assert response.json()[0] == {"id": "back_squat", "name": "Back Squat", "category": "legs", "xp_factor": 3.0}

    def test_catalog_unavailable(self, client, tmp_path, monkeypatch):
        from workout_plan_api.config import settings

        monkeypatch.setattr(settings, "CATALOG_PATH", tmp_path / "missing.json")
        assert client.get("/catalog").status_code == 503
