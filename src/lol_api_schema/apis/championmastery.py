"""championmastery: per-player mastery of each champion."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.enums import PlatformId
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, Param, path, query
from lol_api_schema.schema.registry import ApiModule

_BASE = "/championmastery/location/{platformId}/player/{playerId}"


class ChampionMasteryDto(RiotModel):
    champion_id: int = Field(..., alias="championId")
    champion_level: int = Field(..., alias="championLevel")
    champion_points: int = Field(..., alias="championPoints")
    champion_points_since_last_level: int = Field(..., alias="championPointsSinceLastLevel")
    # 0 once the champion has reached max level
    champion_points_until_next_level: int = Field(..., alias="championPointsUntilNextLevel")
    chest_granted: bool = Field(..., alias="chestGranted")
    highest_grade: str | None = Field(None, alias="highestGrade")
    last_play_time: int = Field(..., alias="lastPlayTime", description="Epoch milliseconds.")
    player_id: int = Field(..., alias="playerId")


class ChampionMasteryApi(Protocol):
    def get_champion_mastery(
        self, platform_id: PlatformId, player_id: int, champion_id: int
    ) -> ChampionMasteryDto:
        """GET /championmastery/location/{platformId}/player/{playerId}/champion/{championId}"""
        ...

    def get_champion_masteries(
        self, platform_id: PlatformId, player_id: int
    ) -> list[ChampionMasteryDto]:
        """GET /championmastery/location/{platformId}/player/{playerId}/champions"""
        ...

    def get_mastery_score(self, platform_id: PlatformId, player_id: int) -> int:
        """GET /championmastery/location/{platformId}/player/{playerId}/score"""
        ...

    def get_top_champion_masteries(
        self, platform_id: PlatformId, player_id: int, count: int | None = None
    ) -> list[ChampionMasteryDto]:
        """GET /championmastery/location/{platformId}/player/{playerId}/topchampions"""
        ...


def _player_params() -> tuple[Param, ...]:
    return (
        path("platform_id", "platformId", PlatformId),
        path("player_id", "playerId", int, description="Summoner ID."),
    )


OPERATIONS = (
    Operation(
        name="get_champion_mastery",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/champion/{championId}",
        result=ChampionMasteryDto,
        params=(*_player_params(), path("champion_id", "championId", int)),
        description="Mastery of one champion for a player.",
    ),
    Operation(
        name="get_champion_masteries",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/champions",
        result=list[ChampionMasteryDto],
        params=_player_params(),
        description="All champion masteries for a player.",
    ),
    Operation(
        name="get_mastery_score",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/score",
        result=int,
        params=_player_params(),
        description="Sum of champion levels for a player.",
    ),
    Operation(
        name="get_top_champion_masteries",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/topchampions",
        result=list[ChampionMasteryDto],
        params=(
            *_player_params(),
            query("count", "count", int, description="Number of entries to retrieve, defaults to 3."),
        ),
        description="Highest mastery champions for a player.",
    ),
)

MODULE = ApiModule(
    name="championmastery",
    version="v1",
    description="Champion mastery per player.",
    entities=(ChampionMasteryDto,),
    operations=OPERATIONS,
    protocol=ChampionMasteryApi,
)
