from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import Any, Literal, Union, get_args, get_origin
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from lol_api_schema.core.config import Settings, settings as default_settings
from lol_api_schema.core.text import format_value
from lol_api_schema.enums import Region, region_for_platform
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.errors import ParameterError, ResponseShapeError

logger = logging.getLogger(__name__)


class ParamIn(StrEnum):
    HOST = "host"
    PATH = "path"
    QUERY = "query"
    BODY = "body"


class HostKind(StrEnum):
    REGIONAL = "regional"
    GLOBAL = "global"
    STATUS = "status"


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def type_name(tp: Any) -> str:
    """Readable name for a type expression (`dict[str, list[LeagueDto]]`)."""

    if tp is None or tp is type(None):
        return "None"
    origin = get_origin(tp)
    if origin is None:
        return getattr(tp, "__name__", repr(tp))
    args = get_args(tp)
    if origin is Union or origin is types.UnionType:
        return " | ".join(type_name(a) for a in args)
    if origin is Literal:
        return " | ".join(repr(a) for a in args)
    return f"{getattr(origin, '__name__', repr(origin))}[{', '.join(type_name(a) for a in args)}]"


@dataclass(frozen=True)
class Param:
    name: str
    wire_name: str
    location: ParamIn
    annotation: Any
    required: bool = True
    max_items: int | None = None
    description: str = ""


def host_region() -> Param:
    """`region` that only selects the regional host (no placeholder in the path)."""

    return Param(
        name="region",
        wire_name="region",
        location=ParamIn.HOST,
        annotation=Region,
        required=True,
        description="Region whose host serves the request.",
    )


def path(
    name: str, wire_name: str, annotation: Any, *, max_items: int | None = None, description: str = ""
) -> Param:
    return Param(
        name=name,
        wire_name=wire_name,
        location=ParamIn.PATH,
        annotation=annotation,
        required=True,
        max_items=max_items,
        description=description,
    )


def query(
    name: str,
    wire_name: str,
    annotation: Any,
    *,
    required: bool = False,
    max_items: int | None = None,
    description: str = "",
) -> Param:
    return Param(
        name=name,
        wire_name=wire_name,
        location=ParamIn.QUERY,
        annotation=annotation,
        required=required,
        max_items=max_items,
        description=description,
    )


def body(name: str, model: type[RiotModel], *, description: str = "") -> Param:
    return Param(
        name=name,
        wire_name=name,
        location=ParamIn.BODY,
        annotation=model,
        required=True,
        description=description,
    )


@dataclass(frozen=True)
class Operation:
    """
    One remote operation: HTTP verb, URL template, parameters and result shape.

    Path placeholders use the wire name of the parameter (`{summonerIds}`).
    `result` is any type pydantic can validate (`LeagueDto`,
    `dict[str, list[LeagueDto]]`, `list[str]`, `int`), or None for operations
    that return no body.
    """

    name: str
    method: str
    host: HostKind
    path: str
    result: Any
    params: tuple[Param, ...] = ()
    description: str = ""

    def signature(self) -> list[str]:
        return [p.name for p in self.params]

    def param(self, name: str) -> Param:
        for p in self.params:
            if p.name == name:
                return p
        raise ParameterError(f"{self.name} has no parameter {name!r}")

    @property
    def result_name(self) -> str:
        return type_name(self.result)

    def bind(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        """
        Validate arguments against the declared parameters.
        Returns {python name: coerced value} for every argument that was given.
        """
        unknown = sorted(set(arguments) - set(self.signature()))
        if unknown:
            raise ParameterError(f"{self.name} got unexpected parameter(s): {', '.join(unknown)}")

        bound: dict[str, Any] = {}
        for p in self.params:
            value = arguments.get(p.name)
            if value is None:
                if p.required:
                    raise ParameterError(f"{self.name} is missing required parameter {p.name!r}")
                continue

            try:
                value = _adapter(p.annotation).validate_python(value)
            except ValidationError as e:
                raise ParameterError(f"{self.name}: invalid value for {p.name!r}: {e}") from e

            if isinstance(value, (list, tuple, set, frozenset)):
                if p.required and not value:
                    raise ParameterError(f"{self.name}: {p.name!r} must not be empty")
                if p.max_items is not None and len(value) > p.max_items:
                    raise ParameterError(
                        f"{self.name}: {p.name!r} accepts at most {p.max_items} values, got {len(value)}"
                    )

            bound[p.name] = value
        return bound

    def build_request(self, *, settings: Settings | None = None, **arguments: Any) -> httpx.Request:
        """
        Bind arguments into an unsent httpx.Request.
        Raises ParameterError when the arguments do not fit the declared parameters.
        """
        cfg = settings or default_settings
        bound = self.bind(arguments)

        region: str | None = None
        if "region" in bound:
            region = format_value(bound["region"])
        elif "platform_id" in bound:
            region = region_for_platform(bound["platform_id"]).value

        url_path = self.path
        query_params: dict[str, str] = {}
        json_body: Any = None
        for p in self.params:
            if p.name not in bound:
                continue
            value = bound[p.name]
            if p.location is ParamIn.PATH:
                url_path = url_path.replace(
                    "{" + p.wire_name + "}", quote(format_value(value), safe=",")
                )
            elif p.location is ParamIn.QUERY:
                query_params[p.wire_name] = format_value(value)
            elif p.location is ParamIn.BODY:
                json_body = value.to_wire()

        base = cfg.host_for(self.host.value, region=region)
        url = base.rstrip("/") + url_path
        logger.debug("Bound %s -> %s %s", self.name, self.method, url)
        return httpx.Request(self.method, url, params=query_params or None, json=json_body)

    def parse_response(self, payload: Any) -> Any:
        """
        Validate a decoded JSON payload against the result shape.
        Raises ResponseShapeError on mismatch.
        """
        if self.result is None:
            return None
        try:
            return _adapter(self.result).validate_python(payload)
        except ValidationError as e:
            logger.info("Response for %s failed validation (%d errors)", self.name, e.error_count())
            raise ResponseShapeError(
                f"Response for {self.name} does not match {self.result_name}",
                context={
                    "operation": self.name,
                    "errors": e.errors(include_url=False),
                },
            ) from e

    def dump_response(self, value: Any) -> Any:
        if self.result is None:
            return None
        return _adapter(self.result).dump_python(
            value, mode="json", by_alias=True, exclude_unset=True
        )
