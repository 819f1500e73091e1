"""league-v2.5: ranked leagues by summoner, by team, and the challenger/master tiers."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.enums import Division, RankedQueue, Region, Tier
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, path, query
from lol_api_schema.schema.registry import ApiModule

_BASE = "/api/lol/{region}/v2.5/league"


class MiniSeriesDto(RiotModel):
    losses: int
    # one character per game: W, L or N (not played yet)
    progress: str
    target: int = Field(..., description="Wins required for promotion.")
    wins: int


class LeagueEntryDto(RiotModel):
    division: Division
    is_fresh_blood: bool = Field(..., alias="isFreshBlood")
    is_hot_streak: bool = Field(..., alias="isHotStreak")
    is_inactive: bool = Field(..., alias="isInactive")
    is_veteran: bool = Field(..., alias="isVeteran")
    league_points: int = Field(..., alias="leaguePoints")
    losses: int
    mini_series: MiniSeriesDto | None = Field(
        None, alias="miniSeries", description="Only present while in a promotion series."
    )
    player_or_team_id: str = Field(..., alias="playerOrTeamId")
    player_or_team_name: str = Field(..., alias="playerOrTeamName")
    wins: int


class LeagueDto(RiotModel):
    entries: list[LeagueEntryDto]
    name: str
    participant_id: str | None = Field(
        None,
        alias="participantId",
        description="Summoner or team the league was requested for, absent for challenger/master lists.",
    )
    queue: RankedQueue
    tier: Tier


class LeagueApi(Protocol):
    def get_leagues_by_summoner(
        self, region: Region, summoner_ids: list[int]
    ) -> dict[str, list[LeagueDto]]:
        """GET /api/lol/{region}/v2.5/league/by-summoner/{summonerIds}"""
        ...

    def get_league_entries_by_summoner(
        self, region: Region, summoner_ids: list[int]
    ) -> dict[str, list[LeagueDto]]:
        """GET /api/lol/{region}/v2.5/league/by-summoner/{summonerIds}/entry"""
        ...

    def get_leagues_by_team(self, region: Region, team_ids: list[str]) -> dict[str, list[LeagueDto]]:
        """GET /api/lol/{region}/v2.5/league/by-team/{teamIds}"""
        ...

    def get_league_entries_by_team(
        self, region: Region, team_ids: list[str]
    ) -> dict[str, list[LeagueDto]]:
        """GET /api/lol/{region}/v2.5/league/by-team/{teamIds}/entry"""
        ...

    def get_challenger_league(self, region: Region, type: RankedQueue) -> LeagueDto:
        """GET /api/lol/{region}/v2.5/league/challenger"""
        ...

    def get_master_league(self, region: Region, type: RankedQueue) -> LeagueDto:
        """GET /api/lol/{region}/v2.5/league/master"""
        ...


def _by_ids(name: str, *, kind: str, id_type: type, suffix: str, description: str) -> Operation:
    return Operation(
        name=name,
        method="GET",
        host=HostKind.REGIONAL,
        path=f"{_BASE}/by-{kind}/{{{kind}Ids}}{suffix}",
        result=dict[str, list[LeagueDto]],
        params=(
            path("region", "region", Region),
            path(f"{kind}_ids", f"{kind}Ids", list[id_type], max_items=10),
        ),
        description=description,
    )


def _tier(name: str, tier: str) -> Operation:
    return Operation(
        name=name,
        method="GET",
        host=HostKind.REGIONAL,
        path=f"{_BASE}/{tier}",
        result=LeagueDto,
        params=(
            path("region", "region", Region),
            query("type", "type", RankedQueue, required=True, description="Game queue type."),
        ),
        description=f"The {tier} tier league for a queue.",
    )


OPERATIONS = (
    _by_ids(
        "get_leagues_by_summoner",
        kind="summoner",
        id_type=int,
        suffix="",
        description="Leagues mapped by summoner ID for a list of summoner IDs (max 10).",
    ),
    _by_ids(
        "get_league_entries_by_summoner",
        kind="summoner",
        id_type=int,
        suffix="/entry",
        description="League entries mapped by summoner ID for a list of summoner IDs (max 10).",
    ),
    _by_ids(
        "get_leagues_by_team",
        kind="team",
        id_type=str,
        suffix="",
        description="Leagues mapped by team ID for a list of team IDs (max 10).",
    ),
    _by_ids(
        "get_league_entries_by_team",
        kind="team",
        id_type=str,
        suffix="/entry",
        description="League entries mapped by team ID for a list of team IDs (max 10).",
    ),
    _tier("get_challenger_league", "challenger"),
    _tier("get_master_league", "master"),
)

MODULE = ApiModule(
    name="league",
    version="v2.5",
    description="Ranked leagues.",
    entities=(LeagueDto, LeagueEntryDto, MiniSeriesDto),
    operations=OPERATIONS,
    protocol=LeagueApi,
)
