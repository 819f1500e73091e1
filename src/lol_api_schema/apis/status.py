"""lol-status-v1.0: shard list and per-shard service status."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from lol_api_schema.enums import Region
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, path
from lol_api_schema.schema.registry import ApiModule


class ServiceStatus(StrEnum):
    ONLINE = "Online"
    ALERT = "Alert"
    OFFLINE = "Offline"
    DEPLOYING = "Deploying"


class Severity(StrEnum):
    INFO = "Info"
    ALERT = "Alert"
    CRITICAL = "Critical"


class Translation(RiotModel):
    content: str
    locale: str
    updated_at: str | None = None


class Message(RiotModel):
    author: str
    content: str
    created_at: str
    id: int
    severity: Severity
    translations: list[Translation]
    updated_at: str | None = None


class Incident(RiotModel):
    active: bool
    created_at: str
    id: int
    updates: list[Message]


class Service(RiotModel):
    incidents: list[Incident]
    name: str
    slug: str
    status: ServiceStatus


class Shard(RiotModel):
    hostname: str
    locales: list[str]
    name: str
    region_tag: str | None = None
    slug: str


class ShardStatus(RiotModel):
    hostname: str
    locales: list[str]
    name: str
    region_tag: str | None = None
    services: list[Service]
    slug: str


class StatusApi(Protocol):
    def get_shards(self) -> list[Shard]:
        """GET http://status.leagueoflegends.com/shards"""
        ...

    def get_shard(self, region: Region) -> ShardStatus:
        """GET http://status.leagueoflegends.com/shards/{region}"""
        ...


OPERATIONS = (
    Operation(
        name="get_shards",
        method="GET",
        host=HostKind.STATUS,
        path="/shards",
        result=list[Shard],
        description="Shard list.",
    ),
    Operation(
        name="get_shard",
        method="GET",
        host=HostKind.STATUS,
        path="/shards/{region}",
        result=ShardStatus,
        params=(path("region", "region", Region),),
        description="Shard status, including service incidents.",
    ),
)

MODULE = ApiModule(
    name="lol-status",
    version="v1.0",
    description="Service status per shard.",
    entities=(Shard, ShardStatus, Service, Incident, Message, Translation),
    operations=OPERATIONS,
    protocol=StatusApi,
)
