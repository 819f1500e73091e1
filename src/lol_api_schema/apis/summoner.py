"""summoner-v1.4: summoner accounts, mastery pages and rune pages."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.enums import Region
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, Param, path
from lol_api_schema.schema.registry import ApiModule

_BASE = "/api/lol/{region}/v1.4/summoner"
MAX_SUMMONERS_PER_REQUEST = 40


class SummonerDto(RiotModel):
    id: int
    name: str
    profile_icon_id: int = Field(..., alias="profileIconId")
    revision_date: int = Field(
        ...,
        alias="revisionDate",
        description=(
            "Epoch milliseconds of the last change to the summoner: profile icon, name, "
            "level, mastery/rune pages, or a finished game."
        ),
    )
    summoner_level: int = Field(..., alias="summonerLevel")


class MasteryDto(RiotModel):
    id: int
    rank: int


class MasteryPageDto(RiotModel):
    current: bool
    id: int
    masteries: list[MasteryDto] | None = None
    name: str


class MasteryPagesDto(RiotModel):
    pages: list[MasteryPageDto]
    summoner_id: int = Field(..., alias="summonerId")


class RuneSlotDto(RiotModel):
    rune_id: int = Field(..., alias="runeId")
    rune_slot_id: int = Field(..., alias="runeSlotId")


class RunePageDto(RiotModel):
    current: bool
    id: int
    name: str
    slots: list[RuneSlotDto] | None = None


class RunePagesDto(RiotModel):
    pages: list[RunePageDto]
    summoner_id: int = Field(..., alias="summonerId")


class SummonerApi(Protocol):
    def get_summoners_by_name(
        self, region: Region, summoner_names: list[str]
    ) -> dict[str, SummonerDto]:
        """GET /api/lol/{region}/v1.4/summoner/by-name/{summonerNames}"""
        ...

    def get_summoners(self, region: Region, summoner_ids: list[int]) -> dict[str, SummonerDto]:
        """GET /api/lol/{region}/v1.4/summoner/{summonerIds}"""
        ...

    def get_mastery_pages(
        self, region: Region, summoner_ids: list[int]
    ) -> dict[str, MasteryPagesDto]:
        """GET /api/lol/{region}/v1.4/summoner/{summonerIds}/masteries"""
        ...

    def get_summoner_names(self, region: Region, summoner_ids: list[int]) -> dict[str, str]:
        """GET /api/lol/{region}/v1.4/summoner/{summonerIds}/name"""
        ...

    def get_rune_pages(self, region: Region, summoner_ids: list[int]) -> dict[str, RunePagesDto]:
        """GET /api/lol/{region}/v1.4/summoner/{summonerIds}/runes"""
        ...


def _by_ids() -> tuple[Param, ...]:
    return (
        path("region", "region", Region),
        path("summoner_ids", "summonerIds", list[int], max_items=MAX_SUMMONERS_PER_REQUEST),
    )


OPERATIONS = (
    Operation(
        name="get_summoners_by_name",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/by-name/{summonerNames}",
        result=dict[str, SummonerDto],
        params=(
            path("region", "region", Region),
            path(
                "summoner_names",
                "summonerNames",
                list[str],
                max_items=MAX_SUMMONERS_PER_REQUEST,
            ),
        ),
        description=(
            "Summoners mapped by standardized name (lowercase, no whitespace; "
            "see core.text.standardize_summoner_name) for a list of names (max 40)."
        ),
    ),
    Operation(
        name="get_summoners",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/{summonerIds}",
        result=dict[str, SummonerDto],
        params=_by_ids(),
        description="Summoners mapped by summoner ID for a list of IDs (max 40).",
    ),
    Operation(
        name="get_mastery_pages",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/{summonerIds}/masteries",
        result=dict[str, MasteryPagesDto],
        params=_by_ids(),
        description="Mastery pages mapped by summoner ID (max 40).",
    ),
    Operation(
        name="get_summoner_names",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/{summonerIds}/name",
        result=dict[str, str],
        params=_by_ids(),
        description="Summoner names mapped by summoner ID (max 40).",
    ),
    Operation(
        name="get_rune_pages",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/{summonerIds}/runes",
        result=dict[str, RunePagesDto],
        params=_by_ids(),
        description="Rune pages mapped by summoner ID (max 40).",
    ),
)

MODULE = ApiModule(
    name="summoner",
    version="v1.4",
    description="Summoner accounts and their mastery/rune pages.",
    entities=(
        SummonerDto,
        MasteryPagesDto,
        MasteryPageDto,
        MasteryDto,
        RunePagesDto,
        RunePageDto,
        RuneSlotDto,
    ),
    operations=OPERATIONS,
    protocol=SummonerApi,
)
