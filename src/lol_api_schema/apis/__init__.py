from __future__ import annotations

from functools import lru_cache

from lol_api_schema.apis import (
    champion,
    championmastery,
    current_game,
    featured_games,
    game,
    league,
    match,
    matchlist,
    static_data,
    stats,
    status,
    summoner,
    team,
    tournament_provider,
)
from lol_api_schema.schema.registry import ApiModule, SchemaRegistry

ALL_MODULES: tuple[ApiModule, ...] = (
    champion.MODULE,
    championmastery.MODULE,
    current_game.MODULE,
    featured_games.MODULE,
    game.MODULE,
    league.MODULE,
    static_data.MODULE,
    status.MODULE,
    match.MODULE,
    matchlist.MODULE,
    stats.MODULE,
    summoner.MODULE,
    team.MODULE,
    tournament_provider.MODULE,
)


def build_registry() -> SchemaRegistry:
    registry = SchemaRegistry()
    for module in ALL_MODULES:
        registry.register(module)
    return registry


@lru_cache(maxsize=1)
def default_registry() -> SchemaRegistry:
    return build_registry()
