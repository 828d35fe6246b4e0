import pytest
import requests

from app.services.api_football.client import ApiFootballError, api_football_get
from app.services.api_football.parsers import parse_team, parse_teams, response_list, response_object
from tests.payloads import TEAMS_RESPONSE, envelope


# ---------------- client ----------------

def test_get_sends_key_header_and_params(fake_api):
    fake_api.queue(200, envelope(TEAMS_RESPONSE))
    payload = api_football_get("/teams", {"league": 239, "season": 2023})

    assert payload["response"] == TEAMS_RESPONSE
    call = fake_api.calls[0]
    assert call["url"] == "https://api.test/teams"
    assert call["params"] == {"league": 239, "season": 2023}
    assert call["headers"]["x-apisports-key"] == "secret-key"


def test_get_without_key_sends_no_key_header(fake_api, monkeypatch):
    from app.core.config import settings
    monkeypatch.setattr(settings, "API_FOOTBALL_KEY", None)
    fake_api.queue(200, envelope([]))
    api_football_get("teams")
    assert "x-apisports-key" not in fake_api.calls[0]["headers"]
    assert fake_api.calls[0]["url"] == "https://api.test/teams"


def test_non_2xx_raises_with_status(fake_api):
    fake_api.queue(500, {"message": "boom"})
    with pytest.raises(ApiFootballError) as exc:
        api_football_get("/teams")
    assert exc.value.status_code == 500


def test_transport_error_is_wrapped(fake_api):
    fake_api.raise_error(requests.ConnectionError("connection refused"))
    with pytest.raises(ApiFootballError) as exc:
        api_football_get("/teams")
    assert exc.value.status_code is None


def test_invalid_json_raises(fake_api):
    fake_api.queue(200, invalid_json=True)
    with pytest.raises(ApiFootballError):
        api_football_get("/teams")


def test_api_reported_errors_raise(fake_api):
    fake_api.queue(200, envelope([], errors={"token": "Error/Missing application key"}))
    with pytest.raises(ApiFootballError, match="Missing application key"):
        api_football_get("/teams")


def test_missing_response_key_is_not_an_error(fake_api):
    fake_api.queue(200, {"errors": []})
    assert api_football_get("/teams") == {"errors": []}


# ---------------- parsers ----------------

def test_parse_teams_keeps_api_order():
    teams = parse_teams(envelope(TEAMS_RESPONSE))
    assert [t["id"] for t in teams] == [1137, 1135]
    assert teams[0] == {
        "id": 1137,
        "name": "Atletico Nacional",
        "country": "Colombia",
        "founded": 1947,
        "logo_url": "https://media.api-sports.io/football/teams/1137.png",
    }
    assert teams[1]["founded"] is None
    assert teams[1]["logo_url"] is None


def test_parse_teams_skips_malformed_items():
    payload = envelope([{"venue": {}}, {"team": {"name": "No id"}}, {"team": {"id": "17", "name": "Str id"}}, None])
    teams = parse_teams(payload)
    assert [t["id"] for t in teams] == [17]


@pytest.mark.parametrize("payload", [{}, {"response": None}, None, "oops"])
def test_parse_teams_without_response_is_empty(payload):
    assert parse_teams(payload) == []


def test_parse_team_name_fallback():
    assert parse_team({"team": {"id": 5, "name": "  "}})["name"] == "Team 5"


def test_response_object_shapes():
    assert response_object({"response": {"form": "W"}}) == {"form": "W"}
    assert response_object({"response": []}) == {}
    assert response_object({}) == {}
    assert response_list({"response": {"a": 1}}) == [{"a": 1}]
