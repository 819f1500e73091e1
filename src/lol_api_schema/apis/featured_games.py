"""featured-games-v1.0: games featured in the client's spectate tab."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.apis.spectator import BannedChampion, Observer
from lol_api_schema.enums import GameMode, GameType, Region
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, host_region
from lol_api_schema.schema.registry import ApiModule


class Participant(RiotModel):
    bot: bool
    champion_id: int = Field(..., alias="championId")
    profile_icon_id: int = Field(..., alias="profileIconId")
    spell1_id: int = Field(..., alias="spell1Id")
    spell2_id: int = Field(..., alias="spell2Id")
    summoner_name: str = Field(..., alias="summonerName")
    team_id: int = Field(..., alias="teamId")


class FeaturedGameInfo(RiotModel):
    banned_champions: list[BannedChampion] = Field(..., alias="bannedChampions")
    game_id: int = Field(..., alias="gameId")
    game_length: int = Field(..., alias="gameLength")
    game_mode: GameMode = Field(..., alias="gameMode")
    game_queue_config_id: int = Field(..., alias="gameQueueConfigId")
    game_start_time: int = Field(..., alias="gameStartTime")
    game_type: GameType = Field(..., alias="gameType")
    map_id: int = Field(..., alias="mapId")
    observers: Observer
    participants: list[Participant]
    platform_id: str = Field(..., alias="platformId")


class FeaturedGames(RiotModel):
    client_refresh_interval: int = Field(
        ...,
        alias="clientRefreshInterval",
        description="Suggested interval in seconds to wait before requesting the list again.",
    )
    game_list: list[FeaturedGameInfo] = Field(..., alias="gameList")


class FeaturedGamesApi(Protocol):
    def get_featured_games(self, region: Region) -> FeaturedGames:
        """GET /observer-mode/rest/featured"""
        ...


OPERATIONS = (
    Operation(
        name="get_featured_games",
        method="GET",
        host=HostKind.REGIONAL,
        path="/observer-mode/rest/featured",
        result=FeaturedGames,
        params=(host_region(),),
        description="List of featured games.",
    ),
)

MODULE = ApiModule(
    name="featured-games",
    version="v1.0",
    description="Featured games currently being spectated.",
    entities=(FeaturedGames, FeaturedGameInfo, Participant, BannedChampion, Observer),
    operations=OPERATIONS,
    protocol=FeaturedGamesApi,
)
