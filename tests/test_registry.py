from __future__ import annotations

import pytest

from lol_api_schema.apis import ALL_MODULES, build_registry, default_registry
from lol_api_schema.apis import champion, static_data
from lol_api_schema.schema.errors import SchemaLookupError
from lol_api_schema.schema.registry import ApiKey, ApiModule, SchemaRegistry


def test_every_module_is_registered() -> None:
    registry = build_registry()

    assert len(registry) == len(ALL_MODULES) == 14
    assert ApiKey(name="league", version="v2.5") in registry
    assert [m.name for m in registry.modules()] == sorted(m.name for m in ALL_MODULES)


def test_default_registry_is_cached() -> None:
    assert default_registry() is default_registry()


def test_duplicate_registration_raises() -> None:
    registry = SchemaRegistry()
    registry.register(champion.MODULE)

    with pytest.raises(ValueError, match="Duplicate"):
        registry.register(champion.MODULE)


def test_get_without_version_returns_newest() -> None:
    older = ApiModule(
        name="champion",
        version="v1.1",
        description="older",
        entities=champion.MODULE.entities,
        operations=(),
    )
    registry = SchemaRegistry()
    registry.register(older)
    registry.register(champion.MODULE)

    assert registry.versions("champion") == ["v1.1", "v1.2"]
    assert registry.get("champion") is champion.MODULE
    assert registry.get("champion", "v1.1") is older


def test_lookups() -> None:
    registry = default_registry()

    assert registry.entity("lol-static-data", "ChampionSpellDto") is static_data.ChampionSpellDto
    assert registry.operation("team", "get_teams").path == "/api/lol/{region}/v2.4/team/{teamIds}"


@pytest.mark.parametrize(
    ("module", "entity", "version"),
    [
        ("nope", "ChampionDto", None),
        ("champion", "NopeDto", None),
        ("champion", "ChampionDto", "v9"),
    ],
)
def test_failed_lookups_raise(module: str, entity: str, version: str | None) -> None:
    with pytest.raises(SchemaLookupError):
        default_registry().entity(module, entity, version=version)


def test_unknown_operation_raises() -> None:
    with pytest.raises(SchemaLookupError):
        default_registry().operation("league", "get_bronze_league")


def test_same_entity_name_in_two_modules() -> None:
    found = default_registry().find_entity("ChampionDto")

    assert {module.name for module, _ in found} == {"champion", "lol-static-data"}
    assert found[0][1] is not found[1][1]


def test_spectator_records_are_shared() -> None:
    registry = default_registry()

    assert registry.entity("current-game", "BannedChampion") is registry.entity(
        "featured-games", "BannedChampion"
    )
    assert registry.entity("match", "BannedChampion") is not registry.entity(
        "current-game", "BannedChampion"
    )
