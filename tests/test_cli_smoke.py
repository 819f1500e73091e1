from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from lol_api_schema.cli.app import app

runner = CliRunner()


def test_cli_help_smoke() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    # Basic sanity checks that the top-level commands are registered.
    assert "modules" in result.stdout
    assert "validate" in result.stdout


def test_modules_lists_every_module() -> None:
    result = runner.invoke(app, ["modules"])
    assert result.exit_code == 0
    assert "league v2.5" in result.stdout
    assert "tournament-provider v1" in result.stdout


def test_operations_shows_signatures() -> None:
    result = runner.invoke(app, ["operations", "champion"])
    assert result.exit_code == 0
    assert "get_champions(region, free_to_play?) -> ChampionListDto" in result.stdout


def test_describe_shows_wire_names() -> None:
    result = runner.invoke(app, ["describe", "league", "LeagueEntryDto"])
    assert result.exit_code == 0
    assert "miniSeries: MiniSeriesDto | None [optional]" in result.stdout
    assert "leaguePoints: int [required]" in result.stdout


def test_json_schema_uses_wire_names() -> None:
    result = runner.invoke(app, ["json-schema", "summoner", "SummonerDto"])
    assert result.exit_code == 0
    schema = json.loads(result.stdout)
    assert "profileIconId" in schema["properties"]


def test_url_binds_parameters() -> None:
    result = runner.invoke(
        app,
        ["url", "league", "get_leagues_by_summoner", "-p", "region=na", "-p", "summoner_ids=1,2"],
    )
    assert result.exit_code == 0
    assert "GET https://na.api.pvp.net/api/lol/na/v2.5/league/by-summoner/1,2" in result.stdout


def test_url_prints_json_body() -> None:
    result = runner.invoke(
        app,
        [
            "url",
            "tournament-provider",
            "register_tournament",
            "-p",
            'parameters={"providerId": 7, "name": "cup"}',
        ],
    )
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "POST https://global.api.pvp.net/tournament/public/v1/tournament"
    assert json.loads(lines[1]) == {"providerId": 7, "name": "cup"}


def test_url_reports_bad_parameters() -> None:
    result = runner.invoke(app, ["url", "league", "get_leagues_by_summoner", "-p", "region=na"])
    assert result.exit_code == 1
    assert "summoner_ids" in result.output


def test_unknown_module_exits_1() -> None:
    result = runner.invoke(app, ["entities", "nope"])
    assert result.exit_code == 1
    assert "nope" in result.output


def test_validate_payload(tmp_path: Path) -> None:
    payload = tmp_path / "score.json"
    payload.write_text("57", encoding="utf-8")

    result = runner.invoke(app, ["validate", "championmastery", "get_mastery_score", str(payload)])
    assert result.exit_code == 0
    assert "OK: score.json matches int" in result.stdout


def test_validate_reports_shape_errors(tmp_path: Path) -> None:
    payload = tmp_path / "shards.json"
    payload.write_text(json.dumps([{"name": "North America"}]), encoding="utf-8")

    result = runner.invoke(app, ["validate", "lol-status", "get_shards", str(payload)])
    assert result.exit_code == 1
    assert "list[Shard]" in result.output


def test_unknown_log_level_is_a_usage_error() -> None:
    result = runner.invoke(app, ["--log-level", "chatty", "modules"])
    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_missing_body_file_exits_1(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"

    result = runner.invoke(
        app,
        ["url", "tournament-provider", "register_provider", "-p", f"parameters=@{missing}"],
    )
    assert result.exit_code == 1
    assert "Cannot read body file" in result.output
