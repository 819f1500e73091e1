"""
tournament-provider-v1: provisioning of tournament codes.

A provider is registered once per region with a callback URL, tournaments are
registered under a provider, and codes are generated per tournament. Lobby
state transitions for a code are reported as lobby events.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Protocol

from annotated_types import Ge, Le
from pydantic import Field

from lol_api_schema.enums import MapType, PickType, SpectatorType
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, body, path, query
from lol_api_schema.schema.registry import ApiModule

_BASE = "/tournament/public/v1"

TeamSize = Annotated[int, Ge(1), Le(5)]
CodeCount = Annotated[int, Ge(1), Le(1000)]


class TournamentRegion(StrEnum):
    BR = "BR"
    EUNE = "EUNE"
    EUW = "EUW"
    JP = "JP"
    KR = "KR"
    LAN = "LAN"
    LAS = "LAS"
    NA = "NA"
    OCE = "OCE"
    PBE = "PBE"
    RU = "RU"
    TR = "TR"


class SummonerIdParams(RiotModel):
    participants: list[int]


class TournamentCodeParameters(RiotModel):
    allowed_summoner_ids: SummonerIdParams | None = Field(
        None,
        alias="allowedSummonerIds",
        description="Summoners allowed to join the lobby. Anyone may join when absent.",
    )
    map_type: MapType = Field(..., alias="mapType")
    metadata: str | None = Field(None, description="Returned in the game-end callback.")
    pick_type: PickType = Field(..., alias="pickType")
    spectator_type: SpectatorType = Field(..., alias="spectatorType")
    team_size: TeamSize = Field(..., alias="teamSize")


class TournamentCodeUpdateParameters(RiotModel):
    # comma-separated summoner ids
    allowed_participants: str | None = Field(None, alias="allowedParticipants")
    map_type: MapType | None = Field(None, alias="mapType")
    pick_type: PickType | None = Field(None, alias="pickType")
    spectator_type: SpectatorType | None = Field(None, alias="spectatorType")


class TournamentCodeDTO(RiotModel):
    code: str
    id: int
    lobby_name: str = Field(..., alias="lobbyName")
    map: str
    meta_data: str | None = Field(None, alias="metaData")
    participants: list[int]
    password: str
    pick_type: str = Field(..., alias="pickType")
    provider_id: int = Field(..., alias="providerId")
    region: str
    spectators: str
    team_size: int = Field(..., alias="teamSize")
    tournament_id: int = Field(..., alias="tournamentId")


class LobbyEventDTO(RiotModel):
    event_type: str = Field(..., alias="eventType")
    summoner_id: str | None = Field(None, alias="summonerId")
    timestamp: str


class LobbyEventDTOWrapper(RiotModel):
    event_list: list[LobbyEventDTO] = Field(..., alias="eventList")


class ProviderRegistrationParameters(RiotModel):
    region: TournamentRegion
    url: str = Field(
        ...,
        description="Callback URL for game results; http on port 80 or https on port 443.",
    )


class TournamentRegistrationParameters(RiotModel):
    name: str | None = None
    provider_id: int = Field(..., alias="providerId")


class TournamentProviderApi(Protocol):
    def create_tournament_codes(
        self,
        tournament_id: int,
        parameters: TournamentCodeParameters,
        count: int | None = None,
    ) -> list[str]:
        """POST /tournament/public/v1/code"""
        ...

    def get_tournament_code(self, tournament_code: str) -> TournamentCodeDTO:
        """GET /tournament/public/v1/code/{tournamentCode}"""
        ...

    def update_tournament_code(
        self, tournament_code: str, parameters: TournamentCodeUpdateParameters
    ) -> None:
        """PUT /tournament/public/v1/code/{tournamentCode}"""
        ...

    def get_lobby_events(self, tournament_code: str) -> LobbyEventDTOWrapper:
        """GET /tournament/public/v1/lobby/events/by-code/{tournamentCode}"""
        ...

    def register_provider(self, parameters: ProviderRegistrationParameters) -> int:
        """POST /tournament/public/v1/provider"""
        ...

    def register_tournament(self, parameters: TournamentRegistrationParameters) -> int:
        """POST /tournament/public/v1/tournament"""
        ...


OPERATIONS = (
    Operation(
        name="create_tournament_codes",
        method="POST",
        host=HostKind.GLOBAL,
        path=_BASE + "/code",
        result=list[str],
        params=(
            query("tournament_id", "tournamentId", int, required=True),
            body("parameters", TournamentCodeParameters),
            query("count", "count", CodeCount, description="Number of codes to create (max 1000)."),
        ),
        description="Create tournament codes for a tournament.",
    ),
    Operation(
        name="get_tournament_code",
        method="GET",
        host=HostKind.GLOBAL,
        path=_BASE + "/code/{tournamentCode}",
        result=TournamentCodeDTO,
        params=(path("tournament_code", "tournamentCode", str),),
        description="Tournament code details.",
    ),
    Operation(
        name="update_tournament_code",
        method="PUT",
        host=HostKind.GLOBAL,
        path=_BASE + "/code/{tournamentCode}",
        result=None,
        params=(
            path("tournament_code", "tournamentCode", str),
            body("parameters", TournamentCodeUpdateParameters),
        ),
        description="Update the pick type, map, spectator type, or allowed summoners for a code.",
    ),
    Operation(
        name="get_lobby_events",
        method="GET",
        host=HostKind.GLOBAL,
        path=_BASE + "/lobby/events/by-code/{tournamentCode}",
        result=LobbyEventDTOWrapper,
        params=(path("tournament_code", "tournamentCode", str),),
        description="Lobby events by tournament code.",
    ),
    Operation(
        name="register_provider",
        method="POST",
        host=HostKind.GLOBAL,
        path=_BASE + "/provider",
        result=int,
        params=(body("parameters", ProviderRegistrationParameters),),
        description="Register a tournament provider; returns the provider ID.",
    ),
    Operation(
        name="register_tournament",
        method="POST",
        host=HostKind.GLOBAL,
        path=_BASE + "/tournament",
        result=int,
        params=(body("parameters", TournamentRegistrationParameters),),
        description="Register a tournament; returns the tournament ID.",
    ),
)

MODULE = ApiModule(
    name="tournament-provider",
    version="v1",
    description="Tournament code provisioning.",
    entities=(
        TournamentCodeParameters,
        SummonerIdParams,
        TournamentCodeDTO,
        TournamentCodeUpdateParameters,
        LobbyEventDTOWrapper,
        LobbyEventDTO,
        ProviderRegistrationParameters,
        TournamentRegistrationParameters,
    ),
    operations=OPERATIONS,
    protocol=TournamentProviderApi,
)
