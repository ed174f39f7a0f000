from datetime import date

import pytest

from football_platform.matches.models.match_model import Match, MatchTeam
from football_platform.player_stats.models.player_stat_model import PlayerStat
from football_platform.positions.services.position_service import PositionService


@pytest.fixture
def league(client, db_session):
    league_id = client.post("/api/leagues", json={"league_name": "Premier League", "country": "England"}).json()[0]["league_id"]
    season = client.post("/api/seasons", json={
        "league_id": league_id,
        "season_year": "2023/2024",
        "start_date": "2023-08-01",
        "end_date": "2024-05-31",
    }).json()
    teams = {
        name: client.post("/api/teams", json={"league_id": league_id, "team_name": name}).json()[0]["team_id"]
        for name in ("Arsenal", "Chelsea", "Everton")
    }
    PositionService(db_session).seed_positions()
    position_id = client.get("/api/positions").json()[0]["position_id"]
    players = {
        name: client.post("/api/players", json={
            "player_name": name, "default_position_id": position_id, "team_id": teams[team],
        }).json()[0]["player_id"]
        for name, team in (("Saka", "Arsenal"), ("Palmer", "Chelsea"))
    }
    return {"league_id": league_id, "season_id": season["season_id"], "teams": teams, "players": players}


def _record(client, league, home, away, home_goals, away_goals, match_date="2024-01-01"):
    response = client.post("/api/matches", json={
        "season_id": league["season_id"],
        "match_date": match_date,
        "teamA_id": league["teams"][home],
        "teamB_id": league["teams"][away],
        "teamA_goals": home_goals,
        "teamB_goals": away_goals,
    })
    assert response.status_code == 201
    return response.json()["match_id"]


def _stat(client, match_id, player_id, **counters):
    response = client.post("/api/player-stats", json={"match_id": match_id, "player_id": player_id, **counters})
    assert response.status_code == 201


def test_league_table_endpoint(client, league):
    _record(client, league, "Arsenal", "Chelsea", 3, 1)

    response = client.get(f"/api/leagues/{league['league_id']}/table")

    assert response.status_code == 200
    table = response.json()
    assert [row["team_name"] for row in table] == ["Arsenal", "Chelsea"]
    assert table[0]["points"] == 3
    assert table[0]["goal_diff"] == 2
    assert table[1]["losses"] == 1


def test_top_scorers_and_assists(client, league):
    first = _record(client, league, "Arsenal", "Chelsea", 2, 1)
    second = _record(client, league, "Chelsea", "Everton", 1, 1, match_date="2024-02-01")
    _stat(client, first, league["players"]["Saka"], goals=2, assists=0)
    _stat(client, first, league["players"]["Palmer"], goals=1, assists="")
    _stat(client, second, league["players"]["Palmer"], goals="1", assists=1)

    scorers = client.get(f"/api/leagues/{league['league_id']}/top-scorers").json()
    assists = client.get(f"/api/leagues/{league['league_id']}/top-assists").json()

    # equal totals fall back to player id order
    assert scorers == [
        {"player_id": league["players"]["Saka"], "player_name": "Saka", "total_goals": 2},
        {"player_id": league["players"]["Palmer"], "player_name": "Palmer", "total_goals": 2},
    ]
    assert assists[0] == {"player_id": league["players"]["Palmer"], "player_name": "Palmer", "total_assists": 1}


def test_incomplete_match_is_excluded_everywhere(client, league, db_session):
    # a match with only one side recorded
    match = Match(season_id=league["season_id"], match_date=date(2024, 3, 1))
    db_session.add(match)
    db_session.flush()
    db_session.add(MatchTeam(match_id=match.match_id, team_id=league["teams"]["Everton"], goals_scored=5))
    db_session.add(PlayerStat(match_id=match.match_id, player_id=league["players"]["Saka"], goals=5))
    db_session.commit()

    league_id = league["league_id"]
    assert client.get(f"/api/leagues/{league_id}/table").json() == []
    assert client.get(f"/api/leagues/{league_id}/top-scorers").json() == []


def test_league_without_matches_returns_empty_lists(client, league):
    league_id = league["league_id"]
    for path in ("table", "top-scorers", "top-assists"):
        response = client.get(f"/api/leagues/{league_id}/{path}")
        assert response.status_code == 200
        assert response.json() == []


def test_unknown_league_returns_empty_lists(client):
    assert client.get("/api/leagues/999/table").json() == []
    assert client.get("/api/leagues/999/top-scorers").json() == []


def test_matches_of_other_leagues_are_not_counted(client, league):
    _record(client, league, "Arsenal", "Chelsea", 1, 0)
    other = client.post("/api/leagues", json={"league_name": "La Liga", "country": "Spain"}).json()[0]["league_id"]
    client.post("/api/seasons", json={
        "league_id": other, "season_year": "2023/2024", "start_date": "2023-08-01", "end_date": "2024-05-31",
    })

    assert client.get(f"/api/leagues/{other}/table").json() == []


def test_orphaned_team_shows_as_unknown(client, league):
    _record(client, league, "Arsenal", "Everton", 0, 2)
    response = client.delete(f"/api/teams/{league['teams']['Everton']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Team deleted"}

    table = client.get(f"/api/leagues/{league['league_id']}/table").json()

    assert table[0]["team_name"] == "Unknown"
    assert table[0]["wins"] == 1


def test_deleted_player_shows_as_unknown_on_leaderboard(client, league):
    match_id = _record(client, league, "Arsenal", "Chelsea", 1, 0)
    _stat(client, match_id, league["players"]["Saka"], goals=1)

    response = client.delete(f"/api/players/{league['players']['Saka']}")
    assert response.status_code == 200

    scorers = client.get(f"/api/leagues/{league['league_id']}/top-scorers").json()
    assert scorers == [{"player_id": league["players"]["Saka"], "player_name": "Unknown", "total_goals": 1}]


def test_deleting_league_keeps_its_seasons_and_matches(client, league):
    _record(client, league, "Arsenal", "Chelsea", 2, 2)

    response = client.delete(f"/api/leagues/{league['league_id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "League deleted"}

    table = client.get(f"/api/leagues/{league['league_id']}/table").json()
    assert [(row["team_name"], row["draws"]) for row in table] == [("Arsenal", 1), ("Chelsea", 1)]


def test_deleting_season_orphans_its_matches(client, league):
    _record(client, league, "Arsenal", "Chelsea", 1, 0)

    response = client.delete(f"/api/seasons/{league['season_id']}")
    assert response.status_code == 200

    assert client.get(f"/api/leagues/{league['league_id']}/table").json() == []


def test_head_to_head_endpoint(client, league):
    _record(client, league, "Arsenal", "Chelsea", 2, 1, match_date="2023-10-01")
    _record(client, league, "Chelsea", "Arsenal", 0, 0, match_date="2024-03-01")
    _record(client, league, "Arsenal", "Everton", 5, 0, match_date="2024-04-01")
    arsenal, chelsea = league["teams"]["Arsenal"], league["teams"]["Chelsea"]

    response = client.get("/api/head-to-head", params={"teamA": arsenal, "teamB": chelsea})

    assert response.status_code == 200
    body = response.json()
    assert body["teamA"] == arsenal
    assert body["totalMatches"] == 2
    assert (body["teamAWins"], body["teamBWins"], body["draws"]) == (1, 0, 1)
    assert (body["teamAWinPct"], body["teamBWinPct"], body["drawPct"]) == (50, 0, 50)
    assert [m["match_date"] for m in body["recentMatches"]] == ["2024-03-01", "2023-10-01"]
    assert body["recentMatches"][1]["teamA_goals"] == 2


@pytest.mark.parametrize("params", [
    {"teamA": 1, "teamB": 1},
    {"teamA": 1},
    {},
    {"teamA": "x", "teamB": 2},
])
def test_head_to_head_rejects_invalid_pairs(client, params):
    response = client.get("/api/head-to-head", params=params)

    assert response.status_code == 400
    assert response.json() == {"error": "teamA and teamB must be different valid team IDs"}


def test_fetch_failure_returns_500(client, monkeypatch):
    from sqlalchemy.exc import OperationalError
    from football_platform.statistics.services.league_stats_service import LeagueStatsService

    def unavailable(self, league_id):
        raise OperationalError("SELECT 1", {}, Exception("database unavailable"))

    monkeypatch.setattr(LeagueStatsService, "league_table", unavailable)

    response = client.get("/api/leagues/1/table")

    assert response.status_code == 500
    assert "database unavailable" in response.json()["error"]
