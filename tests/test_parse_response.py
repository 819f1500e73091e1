from __future__ import annotations

import pytest

from lol_api_schema.apis import default_registry
from lol_api_schema.apis.league import LeagueDto
from lol_api_schema.core.text import standardize_summoner_name
from lol_api_schema.schema.errors import ResponseShapeError


def _league() -> dict[str, object]:
    return {
        "entries": [
            {
                "division": "I",
                "isFreshBlood": False,
                "isHotStreak": False,
                "isInactive": False,
                "isVeteran": True,
                "leaguePoints": 812,
                "losses": 120,
                "playerOrTeamId": "585897",
                "playerOrTeamName": "Top Player",
                "wins": 190,
            }
        ],
        "name": "Nidalee's Blades",
        "queue": "RANKED_SOLO_5x5",
        "tier": "CHALLENGER",
    }


def test_parse_keyed_map_of_lists() -> None:
    op = default_registry().operation("league", "get_leagues_by_summoner")

    value = op.parse_response({"585897": [_league()]})

    assert isinstance(value["585897"][0], LeagueDto)
    assert value["585897"][0].entries[0].league_points == 812
    assert op.dump_response(value) == {"585897": [_league()]}


def test_parse_scalar_results() -> None:
    registry = default_registry()

    assert registry.operation("championmastery", "get_mastery_score").parse_response(57) == 57
    assert registry.operation("match", "get_match_ids_by_tournament").parse_response([1, 2]) == [1, 2]
    assert registry.operation("summoner", "get_summoner_names").parse_response({"1": "x"}) == {
        "1": "x"
    }


def test_operation_without_result_returns_none() -> None:
    op = default_registry().operation("tournament-provider", "update_tournament_code")

    assert op.result is None
    assert op.parse_response({"ignored": True}) is None


def test_shape_mismatch_raises_with_context() -> None:
    op = default_registry().operation("league", "get_challenger_league")
    payload = _league()
    payload["tier"] = "IRON"

    with pytest.raises(ResponseShapeError) as excinfo:
        op.parse_response(payload)

    err = excinfo.value
    assert err.context is not None
    assert err.context["operation"] == "get_challenger_league"
    assert err.context["errors"]
    assert "LeagueDto" in str(err)
    assert "context=" in str(err)


def test_missing_required_field_is_a_shape_error() -> None:
    op = default_registry().operation("summoner", "get_summoners")

    with pytest.raises(ResponseShapeError):
        op.parse_response({"1": {"id": 1, "name": "x"}})


def test_summoners_by_name_are_keyed_by_standardized_name() -> None:
    op = default_registry().operation("summoner", "get_summoners_by_name")
    summoner = {
        "id": 585897,
        "name": "Some Name",
        "profileIconId": 7,
        "revisionDate": 1452000000000,
        "summonerLevel": 30,
    }

    by_name = op.parse_response({"somename": summoner})

    assert by_name[standardize_summoner_name("Some Name")].id == 585897
    assert "standardize_summoner_name" in op.description
