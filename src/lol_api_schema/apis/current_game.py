"""current-game-v1.0: the game a summoner is playing right now (spectator data)."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.apis.spectator import BannedChampion, Observer
from lol_api_schema.enums import GameMode, GameType, PlatformId
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, path
from lol_api_schema.schema.registry import ApiModule


class Mastery(RiotModel):
    mastery_id: int = Field(..., alias="masteryId")
    rank: int


class Rune(RiotModel):
    count: int
    rune_id: int = Field(..., alias="runeId")


class CurrentGameParticipant(RiotModel):
    bot: bool
    champion_id: int = Field(..., alias="championId")
    masteries: list[Mastery]
    profile_icon_id: int = Field(..., alias="profileIconId")
    runes: list[Rune]
    spell1_id: int = Field(..., alias="spell1Id")
    spell2_id: int = Field(..., alias="spell2Id")
    summoner_id: int = Field(..., alias="summonerId")
    summoner_name: str = Field(..., alias="summonerName")
    team_id: int = Field(..., alias="teamId")


class CurrentGameInfo(RiotModel):
    """
    Live game. Changes continuously until the game ends; `game_length` is the
    number of seconds since the game started.
    """

    banned_champions: list[BannedChampion] = Field(..., alias="bannedChampions")
    game_id: int = Field(..., alias="gameId")
    game_length: int = Field(..., alias="gameLength")
    game_mode: GameMode = Field(..., alias="gameMode")
    game_queue_config_id: int = Field(..., alias="gameQueueConfigId")
    game_start_time: int = Field(..., alias="gameStartTime", description="Epoch milliseconds.")
    game_type: GameType = Field(..., alias="gameType")
    map_id: int = Field(..., alias="mapId")
    observers: Observer
    participants: list[CurrentGameParticipant]
    platform_id: str = Field(..., alias="platformId")


class CurrentGameApi(Protocol):
    def get_spectator_game_info(self, platform_id: PlatformId, summoner_id: int) -> CurrentGameInfo:
        """GET /observer-mode/rest/consumer/getSpectatorGameInfo/{platformId}/{summonerId}"""
        ...


OPERATIONS = (
    Operation(
        name="get_spectator_game_info",
        method="GET",
        host=HostKind.REGIONAL,
        path="/observer-mode/rest/consumer/getSpectatorGameInfo/{platformId}/{summonerId}",
        result=CurrentGameInfo,
        params=(
            path("platform_id", "platformId", PlatformId),
            path("summoner_id", "summonerId", int),
        ),
        description="Current game information for the given summoner ID.",
    ),
)

MODULE = ApiModule(
    name="current-game",
    version="v1.0",
    description="Live game spectator information.",
    entities=(CurrentGameInfo, CurrentGameParticipant, Mastery, Rune, BannedChampion, Observer),
    operations=OPERATIONS,
    protocol=CurrentGameApi,
)
