"""API tests through FastAPI's TestClient."""

import datetime

import pytest


@pytest.fixture
def athlete(make_user, make_team):
    team = make_team("Varsity")
    return make_user(email="mai@example.com", name="Mai", role="athlete", team_id=team.id)


def _log(client, athlete_id, day, **fields):
    return client.post(f"/api/v1/athletes/{athlete_id}/training-records", json={"date": day, **fields})


class TestServiceEndpoints:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "healthy"


class TestTrainingRecords:
    def test_create_and_list(self, client, athlete):
        r = _log(client, athlete.id, "2025-01-10", rpe=6, duration_min=60)
        assert r.status_code == 201
        body = r.json()
        assert body["user_id"] == athlete.id
        assert body["load"] is None

        r = client.get(f"/api/v1/athletes/{athlete.id}/training-records",
                       params={"start": "2025-01-01", "end": "2025-01-31"})
        assert r.status_code == 200
        assert [rec["date"] for rec in r.json()] == ["2025-01-10"]

    def test_invalid_rpe_rejected(self, client, athlete):
        assert _log(client, athlete.id, "2025-01-10", rpe=11, duration_min=60).status_code == 422

    def test_invalid_date_rejected(self, client, athlete):
        assert _log(client, athlete.id, "10/01/2025", rpe=5).status_code == 422

    def test_unknown_athlete(self, client):
        assert _log(client, 999, "2025-01-10", rpe=5, duration_min=30).status_code == 404

    def test_staff_is_not_an_athlete(self, client, make_user):
        coach = make_user(email="coach@example.com", role="staff")
        assert _log(client, coach.id, "2025-01-10", rpe=5, duration_min=30).status_code == 404

    def test_delete(self, client, athlete):
        record_id = _log(client, athlete.id, "2025-01-10", load=100).json()["id"]
        assert client.delete(f"/api/v1/athletes/{athlete.id}/training-records/{record_id}").status_code == 204
        assert client.delete(f"/api/v1/athletes/{athlete.id}/training-records/{record_id}").status_code == 404


class TestWorkloadSeries:
    def test_series_and_latest(self, client, athlete):
        start = datetime.date(2025, 1, 1)
        for i in range(30):
            _log(client, athlete.id, (start + datetime.timedelta(days=i)).isoformat(), rpe=6, duration_min=60)

        r = client.get(f"/api/v1/athletes/{athlete.id}/acwr", params={"as_of": "2025-02-01T00:00:00Z"})
        assert r.status_code == 200
        body = r.json()
        assert body["as_of"] == "2025-02-01"
        assert len(body["points"]) == 30

        last = body["points"][-1]
        assert last["date"] == "2025-01-30"
        assert last["acute_load"] == 2520.0
        assert last["chronic_load"] == 2520.0
        assert last["ratio"] == 1.0
        assert last["has_enough_history"] is True
        assert last["days_since_last_training"] == 2

        assert body["latest"]["risk_level"] == "good"
        assert body["latest"]["athlete_name"] == "Mai"

    def test_empty_series(self, client, athlete):
        r = client.get(f"/api/v1/athletes/{athlete.id}/acwr")
        assert r.status_code == 200
        assert r.json()["points"] == []
        assert r.json()["latest"] is None

    def test_lookback_must_cover_chronic_window(self, client, athlete):
        r = client.get(f"/api/v1/athletes/{athlete.id}/acwr", params={"lookback_days": 7})
        assert r.status_code == 422


    def test_latest_reports_absence_beyond_lookback(self, client, athlete):
        _log(client, athlete.id, "2024-11-28", load=300)
        r = client.get(f"/api/v1/athletes/{athlete.id}/acwr", params={"as_of": "2025-02-01T00:00:00Z"})
        body = r.json()
        assert body["points"] == []
        assert body["latest"]["no_data"] is True
        assert body["latest"]["days_since_last_training"] == 65



class TestDailySummaryEndpoint:
    def test_run(self, client, make_user, make_team):
        coach = make_user(email="coach@example.com", name="Coach K", role="staff")
        team = make_team("Varsity", staff=[coach])
        athlete = make_user(name="Mai", role="athlete", team_id=team.id)
        start = datetime.date(2025, 1, 4)
        for i in range(28):
            _log(client, athlete.id, (start + datetime.timedelta(days=i)).isoformat(), load=300 if i < 21 else 600)

        r = client.post("/api/v1/alerts/daily-summary", params={"as_of": "2025-02-01T06:00:00Z"})
        assert r.status_code == 200
        body = r.json()
        assert body["status"] == "ok"
        assert body["date"] == "2025-02-01"
        assert body["summaries"][0]["high_risk_count"] == 1
        assert "Mai" in body["summaries"][0]["email"]["text"]
