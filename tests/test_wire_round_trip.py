from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from lol_api_schema.apis.league import LeagueDto, LeagueEntryDto
from lol_api_schema.apis.static_data import ChampionSpellDto, SummonerSpellDto
from lol_api_schema.apis.tournament_provider import (
    TournamentCodeParameters,
    TournamentCodeUpdateParameters,
)
from lol_api_schema.enums import Division, MapType, PickType, SpectatorType, Tier


def _league_entry(**overrides: object) -> dict[str, object]:
    entry: dict[str, object] = {
        "division": "II",
        "isFreshBlood": False,
        "isHotStreak": True,
        "isInactive": False,
        "isVeteran": False,
        "leaguePoints": 100,
        "losses": 41,
        "playerOrTeamId": "19134540",
        "playerOrTeamName": "Some Summoner",
        "wins": 57,
    }
    entry.update(overrides)
    return entry


def test_league_entry_explicit_null_mini_series_stays_null() -> None:
    payload = _league_entry(miniSeries=None)

    entry = LeagueEntryDto.from_wire(payload)

    assert entry.mini_series is None
    assert entry.to_wire() == payload
    assert "miniSeries" in entry.to_wire()


def test_league_entry_absent_mini_series_stays_absent() -> None:
    payload = _league_entry()

    entry = LeagueEntryDto.from_wire(payload)

    assert entry.mini_series is None
    assert "miniSeries" not in entry.to_wire()
    assert entry.to_wire() == payload


def test_league_entry_mini_series_round_trips() -> None:
    payload = _league_entry(
        miniSeries={"losses": 1, "progress": "WLN", "target": 2, "wins": 1},
    )

    entry = LeagueEntryDto.from_wire(payload)

    assert entry.mini_series is not None
    assert entry.mini_series.progress == "WLN"
    assert entry.to_wire() == payload


def test_unknown_wire_fields_are_ignored() -> None:
    entry = LeagueEntryDto.from_wire(_league_entry(somethingNew=1))

    assert "somethingNew" not in entry.to_wire()


def _spell(**overrides: object) -> dict[str, object]:
    spell: dict[str, object] = {
        "cooldown": [9.0, 8.0, 7.0, 6.0, 5.0],
        "cooldownBurn": "9/8/7/6/5",
        "cost": [70, 75, 80, 85, 90],
        "costBurn": "70/75/80/85/90",
        "costType": "Mana",
        "description": "Fires an orb.",
        "effect": [None, [40.0, 65.0, 90.0, 115.0, 140.0], [0.5, 0.5, 0.5, 0.5, 0.5]],
        "effectBurn": [None, "40/65/90/115/140", "0.5"],
        "image": {
            "full": "AhriOrbofDeception.png",
            "group": "spell",
            "h": 48,
            "sprite": "spell0.png",
            "w": 48,
            "x": 0,
            "y": 0,
        },
        "key": "AhriOrbofDeception",
        "maxrank": 5,
        "name": "Orb of Deception",
        "range": [880, 880, 880, 880, 880],
        "rangeBurn": "880",
        "sanitizedDescription": "Fires an orb.",
        "sanitizedTooltip": "Fires an orb.",
        "tooltip": "Fires an orb.",
    }
    spell.update(overrides)
    return spell


def test_spell_effect_keeps_nesting_and_leading_null() -> None:
    payload = _spell()

    spell = ChampionSpellDto.from_wire(payload)

    assert spell.effect is not None
    assert spell.effect[0] is None
    assert spell.effect[1] == [40.0, 65.0, 90.0, 115.0, 140.0]
    assert spell.effect_burn[0] is None
    assert spell.to_wire() == payload


def test_spell_effect_keeps_integers_as_written() -> None:
    payload = {
        "id": 4,
        "key": "SummonerFlash",
        "name": "Flash",
        "effect": [None, [400], [0.5, 1]],
    }

    spell = SummonerSpellDto.from_wire(payload)

    assert spell.to_wire() == payload
    assert json.dumps(spell.to_wire()["effect"]) == "[null, [400], [0.5, 1]]"


def test_spell_range_accepts_self() -> None:
    spell = ChampionSpellDto.from_wire(_spell(range="self", rangeBurn="self"))

    assert spell.range == "self"
    assert spell.to_wire()["range"] == "self"


def test_spell_range_rejects_other_strings() -> None:
    with pytest.raises(ValidationError):
        ChampionSpellDto.from_wire(_spell(range="global"))


def test_enumerated_fields_dump_their_wire_value() -> None:
    league = LeagueDto.from_wire(
        {
            "entries": [_league_entry(division="IV")],
            "name": "Taric's Enforcers",
            "queue": "RANKED_SOLO_5x5",
            "tier": "GOLD",
        }
    )

    assert league.tier is Tier.GOLD
    assert league.entries[0].division is Division.IV
    assert league.to_wire()["tier"] == "GOLD"
    assert league.to_wire()["queue"] == "RANKED_SOLO_5x5"


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("tier", "WOOD"),
        ("queue", "NORMAL_5x5_BLIND"),
    ],
)
def test_enumerated_fields_reject_illegal_values(field: str, value: str) -> None:
    payload: dict[str, object] = {
        "entries": [],
        "name": "x",
        "queue": "RANKED_SOLO_5x5",
        "tier": "GOLD",
    }
    payload[field] = value

    with pytest.raises(ValidationError):
        LeagueDto.from_wire(payload)


def test_models_accept_python_names() -> None:
    params = TournamentCodeParameters(
        map_type="SUMMONERS_RIFT",
        pick_type="TOURNAMENT_DRAFT",
        spectator_type="ALL",
        team_size=5,
    )

    assert params.to_wire() == {
        "mapType": "SUMMONERS_RIFT",
        "pickType": "TOURNAMENT_DRAFT",
        "spectatorType": "ALL",
        "teamSize": 5,
    }


def test_team_size_is_bounded() -> None:
    with pytest.raises(ValidationError):
        TournamentCodeParameters(
            map_type="SUMMONERS_RIFT",
            pick_type="BLIND_PICK",
            spectator_type="NONE",
            team_size=6,
        )


def test_tournament_settings_use_shared_game_constants() -> None:
    params = TournamentCodeUpdateParameters.from_wire(
        {"mapType": "TWISTED_TREELINE", "pickType": "DRAFT_MODE", "spectatorType": "NONE"}
    )

    assert params.map_type is MapType.TWISTED_TREELINE
    assert params.pick_type is PickType.DRAFT_MODE
    assert params.spectator_type is SpectatorType.NONE
