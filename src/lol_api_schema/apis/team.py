"""team-v2.4: ranked teams."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.enums import GameMode, Region
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, path
from lol_api_schema.schema.registry import ApiModule

_BASE = "/api/lol/{region}/v2.4/team"


class MatchHistorySummaryDto(RiotModel):
    assists: int
    date: int = Field(..., description="Epoch milliseconds.")
    deaths: int
    game_id: int = Field(..., alias="gameId")
    game_mode: GameMode = Field(..., alias="gameMode")
    invalid: bool
    kills: int
    map_id: int = Field(..., alias="mapId")
    opposing_team_kills: int = Field(..., alias="opposingTeamKills")
    opposing_team_name: str = Field(..., alias="opposingTeamName")
    win: bool


class TeamMemberInfoDto(RiotModel):
    invite_date: int | None = Field(None, alias="inviteDate")
    join_date: int | None = Field(None, alias="joinDate")
    player_id: int = Field(..., alias="playerId")
    status: str


class RosterDto(RiotModel):
    member_list: list[TeamMemberInfoDto] = Field(..., alias="memberList")
    owner_id: int = Field(..., alias="ownerId")


class TeamStatDetailDto(RiotModel):
    average_games_played: int = Field(..., alias="averageGamesPlayed")
    losses: int
    team_stat_type: str = Field(..., alias="teamStatType")
    wins: int


class TeamDto(RiotModel):
    create_date: int = Field(..., alias="createDate")
    full_id: str = Field(..., alias="fullId")
    last_game_date: int | None = Field(None, alias="lastGameDate")
    last_join_date: int | None = Field(None, alias="lastJoinDate")
    last_joined_ranked_team_queue_date: int | None = Field(
        None, alias="lastJoinedRankedTeamQueueDate"
    )
    match_history: list[MatchHistorySummaryDto] | None = Field(None, alias="matchHistory")
    modify_date: int = Field(..., alias="modifyDate")
    name: str
    roster: RosterDto
    second_last_join_date: int | None = Field(None, alias="secondLastJoinDate")
    status: str
    tag: str
    team_stat_details: list[TeamStatDetailDto] | None = Field(None, alias="teamStatDetails")
    third_last_join_date: int | None = Field(None, alias="thirdLastJoinDate")


class TeamApi(Protocol):
    def get_teams_by_summoner(
        self, region: Region, summoner_ids: list[int]
    ) -> dict[str, list[TeamDto]]:
        """GET /api/lol/{region}/v2.4/team/by-summoner/{summonerIds}"""
        ...

    def get_teams(self, region: Region, team_ids: list[str]) -> dict[str, TeamDto]:
        """GET /api/lol/{region}/v2.4/team/{teamIds}"""
        ...


OPERATIONS = (
    Operation(
        name="get_teams_by_summoner",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/by-summoner/{summonerIds}",
        result=dict[str, list[TeamDto]],
        params=(
            path("region", "region", Region),
            path("summoner_ids", "summonerIds", list[int], max_items=10),
        ),
        description="Teams mapped by summoner ID for a list of summoner IDs (max 10).",
    ),
    Operation(
        name="get_teams",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/{teamIds}",
        result=dict[str, TeamDto],
        params=(
            path("region", "region", Region),
            path("team_ids", "teamIds", list[str], max_items=10),
        ),
        description="Teams mapped by team ID for a list of team IDs (max 10).",
    ),
)

MODULE = ApiModule(
    name="team",
    version="v2.4",
    description="Ranked teams.",
    entities=(TeamDto, MatchHistorySummaryDto, RosterDto, TeamMemberInfoDto, TeamStatDetailDto),
    operations=OPERATIONS,
    protocol=TeamApi,
)
