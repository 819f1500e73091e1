from __future__ import annotations

import pytest

from lol_api_schema.core.config import Settings
from lol_api_schema.core.text import format_value, standardize_summoner_name
from lol_api_schema.enums import PlatformId, Region, Season, region_for_platform


def test_host_for_each_kind() -> None:
    cfg = Settings()

    assert cfg.host_for("regional", region="EUNE") == "https://eune.api.pvp.net"
    assert cfg.host_for("regional") == "https://na.api.pvp.net"
    assert cfg.host_for("global") == "https://global.api.pvp.net"
    assert cfg.host_for("status") == "http://status.leagueoflegends.com"


def test_host_for_unknown_kind() -> None:
    with pytest.raises(ValueError):
        Settings().host_for("esports")


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOL_SCHEMA_DEFAULT_REGION", "kr")
    monkeypatch.setenv("LOL_SCHEMA_GLOBAL_HOST", "http://localhost:9000")

    cfg = Settings()

    assert cfg.host_for("regional") == "https://kr.api.pvp.net"
    assert cfg.host_for("global") == "http://localhost:9000"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Region.EUW, "euw"),
        (True, "true"),
        (False, "false"),
        ([1, 2, 3], "1,2,3"),
        ({Season.SEASON2016, Season.SEASON2015}, "SEASON2015,SEASON2016"),
        (42, "42"),
    ],
)
def test_format_value(value: object, expected: str) -> None:
    assert format_value(value) == expected


def test_standardize_summoner_name() -> None:
    assert standardize_summoner_name(" Some  Name\t") == "somename"


def test_region_for_platform() -> None:
    assert region_for_platform(PlatformId.EUN1) is Region.EUNE
    assert region_for_platform("la1") is Region.LAN
    with pytest.raises(ValueError):
        region_for_platform("XX1")
