"""matchlist-v2.2: index of a summoner's ranked matches."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.enums import Lane, MatchQueueType, Region, Role, Season
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, path, query
from lol_api_schema.schema.registry import ApiModule


class MatchReference(RiotModel):
    champion: int
    lane: Lane
    match_id: int = Field(..., alias="matchId")
    platform_id: str = Field(..., alias="platformId")
    queue: MatchQueueType
    region: str
    role: Role
    season: Season
    timestamp: int = Field(..., description="Epoch milliseconds.")


class MatchList(RiotModel):
    end_index: int = Field(..., alias="endIndex")
    matches: list[MatchReference] | None = None
    start_index: int = Field(..., alias="startIndex")
    total_games: int = Field(..., alias="totalGames")


class MatchListApi(Protocol):
    def get_match_list(
        self,
        region: Region,
        summoner_id: int,
        champion_ids: list[int] | None = None,
        ranked_queues: list[MatchQueueType] | None = None,
        seasons: list[Season] | None = None,
        begin_time: int | None = None,
        end_time: int | None = None,
        begin_index: int | None = None,
        end_index: int | None = None,
    ) -> MatchList:
        """GET /api/lol/{region}/v2.2/matchlist/by-summoner/{summonerId}"""
        ...


OPERATIONS = (
    Operation(
        name="get_match_list",
        method="GET",
        host=HostKind.REGIONAL,
        path="/api/lol/{region}/v2.2/matchlist/by-summoner/{summonerId}",
        result=MatchList,
        params=(
            path("region", "region", Region),
            path("summoner_id", "summonerId", int),
            query("champion_ids", "championIds", list[int], description="Champion IDs to filter by."),
            query("ranked_queues", "rankedQueues", list[MatchQueueType], description="Queues to filter by."),
            query("seasons", "seasons", list[Season], description="Seasons to filter by."),
            query("begin_time", "beginTime", int, description="Epoch milliseconds, inclusive."),
            query("end_time", "endTime", int, description="Epoch milliseconds, inclusive."),
            query("begin_index", "beginIndex", int, description="Index of the first match, inclusive."),
            query("end_index", "endIndex", int, description="Index of the last match, exclusive."),
        ),
        description="Match list for a summoner, newest first.",
    ),
)

MODULE = ApiModule(
    name="matchlist",
    version="v2.2",
    description="Ranked match history index.",
    entities=(MatchList, MatchReference),
    operations=OPERATIONS,
    protocol=MatchListApi,
)
