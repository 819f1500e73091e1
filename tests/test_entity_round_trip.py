from __future__ import annotations

import types
from enum import Enum
from typing import Any, Literal, Union, get_args, get_origin

import pytest

from lol_api_schema.apis import ALL_MODULES
from lol_api_schema.schema.base import RiotModel

_ENTITIES = [
    pytest.param(model, id=f"{module.name}.{model.__name__}")
    for module in ALL_MODULES
    for model in module.entities
]


def _sample(tp: Any, depth: int = 0) -> Any:
    """A small wire value that validates against `tp`."""

    if isinstance(tp, type) and issubclass(tp, RiotModel):
        return _payload(tp, required_only=False, depth=depth + 1)
    if isinstance(tp, type) and issubclass(tp, Enum):
        return next(iter(tp)).value

    origin = get_origin(tp)
    args = get_args(tp)
    if origin is Union or origin is types.UnionType:
        return _sample(next(a for a in args if a is not type(None)), depth)
    if origin is Literal:
        return args[0]
    if origin is list:
        return [_sample(args[0], depth)]
    if origin is dict:
        return {"1": _sample(args[1], depth)}

    if tp is bool:
        return True
    if tp is int:
        return 1
    if tp is float:
        return 1.5
    if tp is str:
        return "x"
    raise AssertionError(f"No sample for {tp!r}")


def _payload(model: type[RiotModel], *, required_only: bool, depth: int = 0) -> dict[str, Any]:
    assert depth < 10, f"{model.__name__} nests too deep"
    return {
        field.wire_name: _sample(field.annotation, depth)
        for field in model.wire_fields()
        if field.required or not required_only
    }


@pytest.mark.parametrize("model", _ENTITIES)
def test_entity_with_every_field_round_trips(model: type[RiotModel]) -> None:
    payload = _payload(model, required_only=False)

    assert model.from_wire(payload).to_wire() == payload


@pytest.mark.parametrize("model", _ENTITIES)
def test_entity_with_required_fields_round_trips(model: type[RiotModel]) -> None:
    payload = _payload(model, required_only=True)

    assert model.from_wire(payload).to_wire() == payload


@pytest.mark.parametrize("model", _ENTITIES)
def test_entity_optional_fields_round_trip_as_null(model: type[RiotModel]) -> None:
    payload = _payload(model, required_only=True)
    payload.update(
        {field.wire_name: None for field in model.wire_fields() if not field.required}
    )

    assert model.from_wire(payload).to_wire() == payload
