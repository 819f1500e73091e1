from lol_api_schema.apis import build_registry, default_registry
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.errors import (
    ParameterError,
    ResponseShapeError,
    SchemaError,
    SchemaLookupError,
)
from lol_api_schema.schema.operation import Operation, Param
from lol_api_schema.schema.registry import ApiKey, ApiModule, SchemaRegistry

__all__ = [
    "ApiKey",
    "ApiModule",
    "Operation",
    "Param",
    "ParameterError",
    "ResponseShapeError",
    "RiotModel",
    "SchemaError",
    "SchemaLookupError",
    "SchemaRegistry",
    "build_registry",
    "default_registry",
]
