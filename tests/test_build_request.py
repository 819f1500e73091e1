from __future__ import annotations

import json

import pytest

from lol_api_schema.apis import default_registry
from lol_api_schema.apis.tournament_provider import TournamentCodeParameters
from lol_api_schema.core.config import Settings
from lol_api_schema.enums import MatchQueueType, PlatformId, RankedQueue, Region
from lol_api_schema.schema.errors import ParameterError


def test_path_and_region_host_are_filled() -> None:
    op = default_registry().operation("league", "get_challenger_league")

    request = op.build_request(region=Region.EUW, type=RankedQueue.RANKED_SOLO_5x5)

    assert request.method == "GET"
    assert request.url.host == "euw.api.pvp.net"
    assert request.url.path == "/api/lol/euw/v2.5/league/challenger"
    assert request.url.params["type"] == "RANKED_SOLO_5x5"


def test_string_arguments_are_coerced() -> None:
    op = default_registry().operation("champion", "get_champions")

    request = op.build_request(region="kr", free_to_play="true")

    assert str(request.url) == "https://kr.api.pvp.net/api/lol/kr/v1.2/champion?freeToPlay=true"


def test_id_lists_are_comma_joined() -> None:
    op = default_registry().operation("league", "get_league_entries_by_summoner")

    request = op.build_request(region="na", summoner_ids=[21, 22, 23])

    assert request.url.path == "/api/lol/na/v2.5/league/by-summoner/21,22,23/entry"


def test_id_list_longer_than_max_items_is_rejected() -> None:
    op = default_registry().operation("league", "get_leagues_by_summoner")

    op.build_request(region="na", summoner_ids=list(range(10)))
    with pytest.raises(ParameterError, match="at most 10"):
        op.build_request(region="na", summoner_ids=list(range(11)))


def test_summoner_lists_allow_forty() -> None:
    op = default_registry().operation("summoner", "get_summoners")

    op.build_request(region="na", summoner_ids=list(range(40)))
    with pytest.raises(ParameterError):
        op.build_request(region="na", summoner_ids=list(range(41)))


def test_empty_id_list_is_rejected() -> None:
    op = default_registry().operation("team", "get_teams")

    with pytest.raises(ParameterError, match="must not be empty"):
        op.build_request(region="na", team_ids=[])


def test_summoner_names_are_percent_encoded() -> None:
    op = default_registry().operation("summoner", "get_summoners_by_name")

    request = op.build_request(region="euw", summoner_names=["Some Name", "other"])

    assert request.url.path == "/api/lol/euw/v1.4/summoner/by-name/Some Name,other"
    assert b"Some%20Name,other" in request.url.raw_path


def test_missing_required_parameter() -> None:
    op = default_registry().operation("game", "get_recent_games")

    with pytest.raises(ParameterError, match="summoner_id"):
        op.build_request(region="na")


def test_unknown_parameter() -> None:
    op = default_registry().operation("game", "get_recent_games")

    with pytest.raises(ParameterError, match="summonerId"):
        op.build_request(region="na", summoner_id=1, summonerId=1)


def test_invalid_enum_value() -> None:
    op = default_registry().operation("game", "get_recent_games")

    with pytest.raises(ParameterError, match="region"):
        op.build_request(region="atlantis", summoner_id=1)


def test_platform_id_selects_regional_host() -> None:
    op = default_registry().operation("current-game", "get_spectator_game_info")

    request = op.build_request(platform_id=PlatformId.EUW1, summoner_id=24)

    assert str(request.url) == (
        "https://euw.api.pvp.net/observer-mode/rest/consumer/getSpectatorGameInfo/EUW1/24"
    )


def test_championmastery_platform_path() -> None:
    op = default_registry().operation("championmastery", "get_top_champion_masteries")

    request = op.build_request(platform_id="LA2", player_id=5, count=3)

    assert request.url.host == "las.api.pvp.net"
    assert request.url.path == "/championmastery/location/LA2/player/5/topchampions"
    assert request.url.params["count"] == "3"


def test_host_only_region_for_featured_games() -> None:
    op = default_registry().operation("featured-games", "get_featured_games")

    request = op.build_request(region="oce")

    assert str(request.url) == "https://oce.api.pvp.net/observer-mode/rest/featured"


def test_static_data_uses_global_host() -> None:
    op = default_registry().operation("lol-static-data", "get_champion")

    request = op.build_request(
        region="na", champion_id=103, locale="en_US", champ_data=["spells", "image"]
    )

    assert request.url.host == "global.api.pvp.net"
    assert request.url.path == "/api/lol/static-data/na/v1.2/champion/103"
    assert request.url.params["champData"] == "spells,image"
    assert request.url.params["locale"] == "en_US"


def test_status_uses_status_host_without_region() -> None:
    op = default_registry().operation("lol-status", "get_shards")

    request = op.build_request()

    assert str(request.url) == "http://status.leagueoflegends.com/shards"


def test_optional_list_filters() -> None:
    op = default_registry().operation("matchlist", "get_match_list")

    request = op.build_request(
        region="na",
        summoner_id=1,
        ranked_queues=[MatchQueueType.TEAM_BUILDER_RANKED_SOLO, "RANKED_FLEX_SR"],
        begin_index=0,
        end_index=20,
    )

    assert request.url.params["rankedQueues"] == "TEAM_BUILDER_RANKED_SOLO,RANKED_FLEX_SR"
    assert request.url.params["beginIndex"] == "0"
    assert "seasons" not in request.url.params


def test_tournament_code_body_and_count() -> None:
    op = default_registry().operation("tournament-provider", "create_tournament_codes")
    parameters = TournamentCodeParameters(
        map_type="SUMMONERS_RIFT",
        pick_type="TOURNAMENT_DRAFT",
        spectator_type="LOBBYONLY",
        team_size=5,
    )

    request = op.build_request(tournament_id=42, parameters=parameters, count=10)

    assert request.method == "POST"
    assert request.url.host == "global.api.pvp.net"
    assert request.url.path == "/tournament/public/v1/code"
    assert request.url.params["tournamentId"] == "42"
    assert request.url.params["count"] == "10"
    assert json.loads(request.content) == {
        "mapType": "SUMMONERS_RIFT",
        "pickType": "TOURNAMENT_DRAFT",
        "spectatorType": "LOBBYONLY",
        "teamSize": 5,
    }


def test_tournament_code_count_is_bounded() -> None:
    op = default_registry().operation("tournament-provider", "create_tournament_codes")
    parameters = {
        "mapType": "HOWLING_ABYSS",
        "pickType": "ALL_RANDOM",
        "spectatorType": "ALL",
        "teamSize": 5,
    }

    with pytest.raises(ParameterError, match="count"):
        op.build_request(tournament_id=42, parameters=parameters, count=1001)


def test_body_accepts_wire_dict() -> None:
    op = default_registry().operation("tournament-provider", "register_provider")

    request = op.build_request(parameters={"region": "EUW", "url": "https://example.com/callback"})

    assert request.method == "POST"
    assert json.loads(request.content) == {"region": "EUW", "url": "https://example.com/callback"}


def test_custom_hosts_from_settings() -> None:
    cfg = Settings(regional_host="http://localhost:8080/{region}")
    op = default_registry().operation("game", "get_recent_games")

    request = op.build_request(settings=cfg, region="tr", summoner_id=7)

    assert str(request.url) == "http://localhost:8080/tr/api/lol/tr/v1.3/game/by-summoner/7/recent"
