import pytest
from fastapi.testclient import TestClient

from app.main import app
from tests.payloads import STATISTICS_RESPONSE, TEAMS_RESPONSE, envelope


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["ok"] is True


# ---------------- team grid ----------------

def test_home_renders_team_cards(client, fake_api):
    fake_api.queue(200, envelope(TEAMS_RESPONSE))
    r = client.get("/")
    assert r.status_code == 200
    html = r.text
    assert "Colombian League Teams" in html
    assert "Atletico Nacional" in html
    assert "Millonarios" in html
    assert "/team-stats/1137" in html
    assert "1947" in html
    # Millonarios has no founding year
    assert "Unknown" in html


def test_home_with_upstream_500_renders_empty_grid(client, fake_api):
    fake_api.queue(500, {"message": "boom"})
    r = client.get("/")
    assert r.status_code == 200
    assert "No teams available" in r.text


def test_api_teams_json(client, fake_api):
    fake_api.queue(200, envelope(TEAMS_RESPONSE))
    r = client.get("/api/teams")
    assert r.status_code == 200
    assert [t["id"] for t in r.json()] == [1137, 1135]


def test_api_teams_upstream_failure_is_empty_list(client, fake_api):
    fake_api.queue(502, None)
    r = client.get("/api/teams")
    assert r.status_code == 200
    assert r.json() == []


# ---------------- statistics dashboard ----------------

def test_team_stats_page(client, fake_api):
    fake_api.queue(200, envelope(STATISTICS_RESPONSE))
    r = client.get("/team-stats/1137")
    assert r.status_code == 200
    html = r.text
    assert "Atletico Nacional" in html
    assert "Primera A" in html
    assert html.count('class="form-badge ') == 5
    assert "form-badge draw" in html
    assert "GD: 12" in html
    assert "4-2-3-1" in html
    assert "0-15: 4 goals (13.33%)" in html
    # zero-count bucket omitted
    assert "16-30" not in html
    assert "31-45: 8 cards (25.81%)" in html
    assert "N/A" in html  # no biggest home loss


def test_team_stats_page_sparse_payload(client, fake_api):
    fake_api.queue(200, envelope({"team": {"name": "Junior"}}))
    r = client.get("/team-stats/1140")
    assert r.status_code == 200
    assert "Junior" in r.text
    assert "GD: 0" in r.text


@pytest.mark.parametrize("path", ["/team-stats", "/team-stats/"])
def test_team_stats_without_team(client, fake_api, path):
    r = client.get(path)
    assert r.status_code == 400
    assert "No team was specified" in r.text
    assert "Go back" in r.text
    assert fake_api.calls == []


def test_team_stats_ignores_team_id_in_query_string(client, fake_api):
    fake_api.queue(200, envelope(STATISTICS_RESPONSE))
    r = client.get("/team-stats?team_id=1137")
    assert r.status_code == 400
    assert "No team was specified" in r.text
    assert fake_api.calls == []


def test_team_stats_invalid_team(client, fake_api):
    r = client.get("/team-stats/abc")
    assert r.status_code == 400
    assert "Invalid team identifier" in r.text
    assert fake_api.calls == []


def test_team_stats_upstream_failure(client, fake_api):
    fake_api.queue(500, {"message": "boom"})
    r = client.get("/team-stats/1137")
    assert r.status_code == 502
    assert "Error Loading Statistics" in r.text
    assert "HTTP 500" in r.text


def test_api_team_statistics_json(client, fake_api):
    fake_api.queue(200, envelope(STATISTICS_RESPONSE))
    r = client.get("/api/teams/1137/statistics")
    assert r.status_code == 200
    body = r.json()
    assert body["goals"]["differential"] == 12
    assert [b["outcome_kind"] for b in body["form"]] == ["win", "win", "draw", "loss", "win"]
    assert body["fixtures"]["win_percentage"] == "50%"


def test_api_team_statistics_bad_id(client, fake_api):
    r = client.get("/api/teams/abc/statistics")
    assert r.status_code == 400
    assert fake_api.calls == []


def test_api_team_statistics_upstream_failure(client, fake_api):
    fake_api.queue(500, None)
    r = client.get("/api/teams/1137/statistics")
    assert r.status_code == 502
    assert "HTTP 500" in r.json()["detail"]
