"""champion-v1.2: champion availability (free rotation, ranked/bot flags)."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.enums import Region
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, path, query
from lol_api_schema.schema.registry import ApiModule


class ChampionDto(RiotModel):
    """Champion availability. Static information for the same id lives in lol-static-data."""

    active: bool
    bot_enabled: bool = Field(..., alias="botEnabled")  # custom games
    bot_mm_enabled: bool = Field(..., alias="botMmEnabled")  # Co-op vs. AI
    free_to_play: bool = Field(..., alias="freeToPlay")
    id: int
    ranked_play_enabled: bool = Field(..., alias="rankedPlayEnabled")


class ChampionListDto(RiotModel):
    champions: list[ChampionDto]


class ChampionApi(Protocol):
    def get_champions(self, region: Region, free_to_play: bool | None = None) -> ChampionListDto:
        """GET /api/lol/{region}/v1.2/champion"""
        ...

    def get_champion(self, region: Region, champion_id: int) -> ChampionDto:
        """GET /api/lol/{region}/v1.2/champion/{id}"""
        ...


OPERATIONS = (
    Operation(
        name="get_champions",
        method="GET",
        host=HostKind.REGIONAL,
        path="/api/lol/{region}/v1.2/champion",
        result=ChampionListDto,
        params=(
            path("region", "region", Region),
            query(
                "free_to_play",
                "freeToPlay",
                bool,
                description="Only return free to play champions.",
            ),
        ),
        description="Retrieve all champions.",
    ),
    Operation(
        name="get_champion",
        method="GET",
        host=HostKind.REGIONAL,
        path="/api/lol/{region}/v1.2/champion/{id}",
        result=ChampionDto,
        params=(
            path("region", "region", Region),
            path("champion_id", "id", int),
        ),
        description="Retrieve champion by ID.",
    ),
)

MODULE = ApiModule(
    name="champion",
    version="v1.2",
    description="Champion availability flags.",
    entities=(ChampionListDto, ChampionDto),
    operations=OPERATIONS,
    protocol=ChampionApi,
)
