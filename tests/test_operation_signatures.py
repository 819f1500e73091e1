from __future__ import annotations

import inspect
import types
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

import pytest

from lol_api_schema.apis import ALL_MODULES
from lol_api_schema.schema.operation import Operation, ParamIn
from lol_api_schema.schema.registry import ApiModule

_OPERATIONS = [
    pytest.param(module, op, id=f"{module.name}.{op.name}")
    for module in ALL_MODULES
    for op in module.operations
]


@pytest.mark.parametrize("module", ALL_MODULES, ids=lambda m: m.name)
def test_protocol_declares_exactly_the_operations(module: ApiModule) -> None:
    assert module.protocol is not None
    declared = {
        name
        for name, member in vars(module.protocol).items()
        if inspect.isfunction(member) and not name.startswith("_")
    }

    assert declared == {op.name for op in module.operations}


@pytest.mark.parametrize(("module", "op"), _OPERATIONS)
def test_params_match_protocol_signature(module: ApiModule, op: Operation) -> None:
    method = getattr(module.protocol, op.name)
    params = list(inspect.signature(method).parameters.values())[1:]  # drop self

    assert [p.name for p in params] == op.signature()
    for sig_param, declared in zip(params, op.params, strict=True):
        has_default = sig_param.default is not inspect.Parameter.empty
        assert has_default == (not declared.required), declared.name


@pytest.mark.parametrize(("module", "op"), _OPERATIONS)
def test_path_placeholders_are_all_bound(module: ApiModule, op: Operation) -> None:
    template = op.path
    for p in op.params:
        if p.location is ParamIn.PATH:
            placeholder = "{" + p.wire_name + "}"
            assert placeholder in template, p.name
            template = template.replace(placeholder, "")

    assert "{" not in template


@pytest.mark.parametrize(("module", "op"), _OPERATIONS)
def test_at_most_one_body(module: ApiModule, op: Operation) -> None:
    bodies = [p for p in op.params if p.location is ParamIn.BODY]

    assert len(bodies) <= 1
    if bodies:
        assert op.method in {"POST", "PUT"}


def _unwrap_annotated(tp: Any) -> Any:
    if get_origin(tp) is Annotated:
        return get_args(tp)[0]
    return tp


def _strip_none(tp: Any) -> Any:
    if get_origin(tp) in (Union, types.UnionType):
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


@pytest.mark.parametrize(("module", "op"), _OPERATIONS)
def test_result_matches_protocol_return(module: ApiModule, op: Operation) -> None:
    hints = get_type_hints(getattr(module.protocol, op.name))
    expected = type(None) if op.result is None else op.result

    assert hints["return"] == expected


@pytest.mark.parametrize(("module", "op"), _OPERATIONS)
def test_param_types_match_protocol_hints(module: ApiModule, op: Operation) -> None:
    hints = get_type_hints(getattr(module.protocol, op.name))

    for p in op.params:
        hint = hints[p.name] if p.required else _strip_none(hints[p.name])
        assert _unwrap_annotated(p.annotation) == hint, p.name
