"""stats-v1.3: aggregated ranked and per-queue statistics."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.enums import PlayerStatSummaryType, Region, Season
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, path, query
from lol_api_schema.schema.registry import ApiModule


class AggregatedStatsDto(RiotModel):
    """Only the stats relevant to the queue are present, and zero values are omitted."""

    # Dominion only
    average_assists: int | None = Field(None, alias="averageAssists")
    average_champions_killed: int | None = Field(None, alias="averageChampionsKilled")
    average_combat_player_score: int | None = Field(None, alias="averageCombatPlayerScore")
    average_node_capture: int | None = Field(None, alias="averageNodeCapture")
    average_node_capture_assist: int | None = Field(None, alias="averageNodeCaptureAssist")
    average_node_neutralize: int | None = Field(None, alias="averageNodeNeutralize")
    average_node_neutralize_assist: int | None = Field(None, alias="averageNodeNeutralizeAssist")
    average_num_deaths: int | None = Field(None, alias="averageNumDeaths")
    average_objective_player_score: int | None = Field(None, alias="averageObjectivePlayerScore")
    average_team_objective: int | None = Field(None, alias="averageTeamObjective")
    average_total_player_score: int | None = Field(None, alias="averageTotalPlayerScore")

    bot_games_played: int | None = Field(None, alias="botGamesPlayed")
    killing_spree: int | None = Field(None, alias="killingSpree")
    max_assists: int | None = Field(None, alias="maxAssists")
    max_champions_killed: int | None = Field(None, alias="maxChampionsKilled")
    max_combat_player_score: int | None = Field(None, alias="maxCombatPlayerScore")
    max_largest_critical_strike: int | None = Field(None, alias="maxLargestCriticalStrike")
    max_largest_killing_spree: int | None = Field(None, alias="maxLargestKillingSpree")
    max_node_capture: int | None = Field(None, alias="maxNodeCapture")
    max_node_capture_assist: int | None = Field(None, alias="maxNodeCaptureAssist")
    max_node_neutralize: int | None = Field(None, alias="maxNodeNeutralize")
    max_node_neutralize_assist: int | None = Field(None, alias="maxNodeNeutralizeAssist")
    max_num_deaths: int | None = Field(None, alias="maxNumDeaths")
    max_objective_player_score: int | None = Field(None, alias="maxObjectivePlayerScore")
    max_team_objective: int | None = Field(None, alias="maxTeamObjective")
    max_time_played: int | None = Field(None, alias="maxTimePlayed")
    max_time_spent_living: int | None = Field(None, alias="maxTimeSpentLiving")
    max_total_player_score: int | None = Field(None, alias="maxTotalPlayerScore")
    most_champion_kills_per_session: int | None = Field(None, alias="mostChampionKillsPerSession")
    most_spells_cast: int | None = Field(None, alias="mostSpellsCast")
    normal_games_played: int | None = Field(None, alias="normalGamesPlayed")
    ranked_premade_games_played: int | None = Field(None, alias="rankedPremadeGamesPlayed")
    ranked_solo_games_played: int | None = Field(None, alias="rankedSoloGamesPlayed")
    total_assists: int | None = Field(None, alias="totalAssists")
    total_champion_kills: int | None = Field(None, alias="totalChampionKills")
    total_damage_dealt: int | None = Field(None, alias="totalDamageDealt")
    total_damage_taken: int | None = Field(None, alias="totalDamageTaken")
    total_deaths_per_session: int | None = Field(None, alias="totalDeathsPerSession")
    total_double_kills: int | None = Field(None, alias="totalDoubleKills")
    total_first_blood: int | None = Field(None, alias="totalFirstBlood")
    total_gold_earned: int | None = Field(None, alias="totalGoldEarned")
    total_heal: int | None = Field(None, alias="totalHeal")
    total_magic_damage_dealt: int | None = Field(None, alias="totalMagicDamageDealt")
    total_minion_kills: int | None = Field(None, alias="totalMinionKills")
    total_neutral_minions_killed: int | None = Field(None, alias="totalNeutralMinionsKilled")
    total_node_capture: int | None = Field(None, alias="totalNodeCapture")
    total_node_neutralize: int | None = Field(None, alias="totalNodeNeutralize")
    total_penta_kills: int | None = Field(None, alias="totalPentaKills")
    total_physical_damage_dealt: int | None = Field(None, alias="totalPhysicalDamageDealt")
    total_quadra_kills: int | None = Field(None, alias="totalQuadraKills")
    total_sessions_lost: int | None = Field(None, alias="totalSessionsLost")
    total_sessions_played: int | None = Field(None, alias="totalSessionsPlayed")
    total_sessions_won: int | None = Field(None, alias="totalSessionsWon")
    total_triple_kills: int | None = Field(None, alias="totalTripleKills")
    total_turrets_killed: int | None = Field(None, alias="totalTurretsKilled")
    total_unreal_kills: int | None = Field(None, alias="totalUnrealKills")


class ChampionStatsDto(RiotModel):
    # 0 is the summoner's totals over all champions
    id: int
    stats: AggregatedStatsDto


class RankedStatsDto(RiotModel):
    champions: list[ChampionStatsDto]
    modify_date: int = Field(..., alias="modifyDate")
    summoner_id: int = Field(..., alias="summonerId")


class PlayerStatsSummaryDto(RiotModel):
    aggregated_stats: AggregatedStatsDto = Field(..., alias="aggregatedStats")
    losses: int | None = None
    modify_date: int = Field(..., alias="modifyDate")
    player_stat_summary_type: PlayerStatSummaryType = Field(..., alias="playerStatSummaryType")
    wins: int


class PlayerStatsSummaryListDto(RiotModel):
    player_stat_summaries: list[PlayerStatsSummaryDto] = Field(..., alias="playerStatSummaries")
    summoner_id: int = Field(..., alias="summonerId")


class StatsApi(Protocol):
    def get_ranked_stats(
        self, region: Region, summoner_id: int, season: Season | None = None
    ) -> RankedStatsDto:
        """GET /api/lol/{region}/v1.3/stats/by-summoner/{summonerId}/ranked"""
        ...

    def get_stats_summary(
        self, region: Region, summoner_id: int, season: Season | None = None
    ) -> PlayerStatsSummaryListDto:
        """GET /api/lol/{region}/v1.3/stats/by-summoner/{summonerId}/summary"""
        ...


def _stats_op(name: str, kind: str, result: type[RiotModel], description: str) -> Operation:
    return Operation(
        name=name,
        method="GET",
        host=HostKind.REGIONAL,
        path=f"/api/lol/{{region}}/v1.3/stats/by-summoner/{{summonerId}}/{kind}",
        result=result,
        params=(
            path("region", "region", Region),
            path("summoner_id", "summonerId", int),
            query("season", "season", Season, description="Defaults to the current season."),
        ),
        description=description,
    )


OPERATIONS = (
    _stats_op("get_ranked_stats", "ranked", RankedStatsDto, "Ranked stats by summoner ID."),
    _stats_op(
        "get_stats_summary",
        "summary",
        PlayerStatsSummaryListDto,
        "Player stats summaries by summoner ID.",
    ),
)

MODULE = ApiModule(
    name="stats",
    version="v1.3",
    description="Aggregated player statistics.",
    entities=(
        RankedStatsDto,
        ChampionStatsDto,
        AggregatedStatsDto,
        PlayerStatsSummaryListDto,
        PlayerStatsSummaryDto,
    ),
    operations=OPERATIONS,
    protocol=StatsApi,
)
