"""game-v1.3: a summoner's recent games."""

from __future__ import annotations

from typing import Protocol

from pydantic import Field

from lol_api_schema.enums import GameMode, GameType, Region, SubType
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, path
from lol_api_schema.schema.registry import ApiModule


class PlayerDto(RiotModel):
    champion_id: int = Field(..., alias="championId")
    summoner_id: int = Field(..., alias="summonerId")
    team_id: int = Field(..., alias="teamId")


class RawStatsDto(RiotModel):
    """
    Stats of one game from the requesting summoner's point of view.

    The API leaves out every stat that is zero or false, so all fields are optional.
    """

    assists: int | None = None
    barracks_killed: int | None = Field(None, alias="barracksKilled")
    bounty_level: int | None = Field(None, alias="bountyLevel")
    champions_killed: int | None = Field(None, alias="championsKilled")
    combat_player_score: int | None = Field(None, alias="combatPlayerScore")
    consumables_purchased: int | None = Field(None, alias="consumablesPurchased")
    damage_dealt_player: int | None = Field(None, alias="damageDealtPlayer")
    double_kills: int | None = Field(None, alias="doubleKills")
    first_blood: int | None = Field(None, alias="firstBlood")
    gold: int | None = None
    gold_earned: int | None = Field(None, alias="goldEarned")
    gold_spent: int | None = Field(None, alias="goldSpent")
    item0: int | None = None
    item1: int | None = None
    item2: int | None = None
    item3: int | None = None
    item4: int | None = None
    item5: int | None = None
    item6: int | None = None
    items_purchased: int | None = Field(None, alias="itemsPurchased")
    killing_sprees: int | None = Field(None, alias="killingSprees")
    largest_critical_strike: int | None = Field(None, alias="largestCriticalStrike")
    largest_killing_spree: int | None = Field(None, alias="largestKillingSpree")
    largest_multi_kill: int | None = Field(None, alias="largestMultiKill")
    legendary_items_created: int | None = Field(
        None, alias="legendaryItemsCreated", description="Number of tier 3 items built."
    )
    level: int | None = None
    magic_damage_dealt_player: int | None = Field(None, alias="magicDamageDealtPlayer")
    magic_damage_dealt_to_champions: int | None = Field(None, alias="magicDamageDealtToChampions")
    magic_damage_taken: int | None = Field(None, alias="magicDamageTaken")
    minions_denied: int | None = Field(None, alias="minionsDenied")
    minions_killed: int | None = Field(None, alias="minionsKilled")
    neutral_minions_killed: int | None = Field(None, alias="neutralMinionsKilled")
    neutral_minions_killed_enemy_jungle: int | None = Field(
        None, alias="neutralMinionsKilledEnemyJungle"
    )
    neutral_minions_killed_your_jungle: int | None = Field(
        None, alias="neutralMinionsKilledYourJungle"
    )
    nexus_killed: bool | None = Field(None, alias="nexusKilled")
    node_capture: int | None = Field(None, alias="nodeCapture")
    node_capture_assist: int | None = Field(None, alias="nodeCaptureAssist")
    node_neutralize: int | None = Field(None, alias="nodeNeutralize")
    node_neutralize_assist: int | None = Field(None, alias="nodeNeutralizeAssist")
    num_deaths: int | None = Field(None, alias="numDeaths")
    num_items_bought: int | None = Field(None, alias="numItemsBought")
    objective_player_score: int | None = Field(None, alias="objectivePlayerScore")
    penta_kills: int | None = Field(None, alias="pentaKills")
    physical_damage_dealt_player: int | None = Field(None, alias="physicalDamageDealtPlayer")
    physical_damage_dealt_to_champions: int | None = Field(
        None, alias="physicalDamageDealtToChampions"
    )
    physical_damage_taken: int | None = Field(None, alias="physicalDamageTaken")
    # 1 top, 2 middle, 3 jungle, 4 bottom
    player_position: int | None = Field(None, alias="playerPosition")
    # 1 duo, 2 support, 3 carry, 4 solo
    player_role: int | None = Field(None, alias="playerRole")
    player_score0: int | None = Field(None, alias="playerScore0")
    player_score1: int | None = Field(None, alias="playerScore1")
    player_score2: int | None = Field(None, alias="playerScore2")
    player_score3: int | None = Field(None, alias="playerScore3")
    player_score4: int | None = Field(None, alias="playerScore4")
    player_score5: int | None = Field(None, alias="playerScore5")
    player_score6: int | None = Field(None, alias="playerScore6")
    player_score7: int | None = Field(None, alias="playerScore7")
    player_score8: int | None = Field(None, alias="playerScore8")
    player_score9: int | None = Field(None, alias="playerScore9")
    quadra_kills: int | None = Field(None, alias="quadraKills")
    sight_wards_bought: int | None = Field(None, alias="sightWardsBought")
    spell1_cast: int | None = Field(None, alias="spell1Cast")
    spell2_cast: int | None = Field(None, alias="spell2Cast")
    spell3_cast: int | None = Field(None, alias="spell3Cast")
    spell4_cast: int | None = Field(None, alias="spell4Cast")
    summon_spell1_cast: int | None = Field(None, alias="summonSpell1Cast")
    summon_spell2_cast: int | None = Field(None, alias="summonSpell2Cast")
    super_monster_killed: int | None = Field(None, alias="superMonsterKilled")
    team: int | None = None
    team_objective: int | None = Field(None, alias="teamObjective")
    time_played: int | None = Field(None, alias="timePlayed")
    total_damage_dealt: int | None = Field(None, alias="totalDamageDealt")
    total_damage_dealt_to_champions: int | None = Field(None, alias="totalDamageDealtToChampions")
    total_damage_taken: int | None = Field(None, alias="totalDamageTaken")
    total_heal: int | None = Field(None, alias="totalHeal")
    total_player_score: int | None = Field(None, alias="totalPlayerScore")
    total_score_rank: int | None = Field(None, alias="totalScoreRank")
    total_time_crowd_control_dealt: int | None = Field(None, alias="totalTimeCrowdControlDealt")
    total_units_healed: int | None = Field(None, alias="totalUnitsHealed")
    triple_kills: int | None = Field(None, alias="tripleKills")
    true_damage_dealt_player: int | None = Field(None, alias="trueDamageDealtPlayer")
    true_damage_dealt_to_champions: int | None = Field(None, alias="trueDamageDealtToChampions")
    true_damage_taken: int | None = Field(None, alias="trueDamageTaken")
    turrets_killed: int | None = Field(None, alias="turretsKilled")
    unreal_kills: int | None = Field(None, alias="unrealKills")
    victory_point_total: int | None = Field(None, alias="victoryPointTotal")
    vision_wards_bought: int | None = Field(None, alias="visionWardsBought")
    ward_killed: int | None = Field(None, alias="wardKilled")
    ward_placed: int | None = Field(None, alias="wardPlaced")
    win: bool | None = None


class GameDto(RiotModel):
    champion_id: int = Field(..., alias="championId")
    create_date: int = Field(..., alias="createDate", description="Epoch milliseconds.")
    fellow_players: list[PlayerDto] | None = Field(None, alias="fellowPlayers")
    game_id: int = Field(..., alias="gameId")
    game_mode: GameMode = Field(..., alias="gameMode")
    game_type: GameType = Field(..., alias="gameType")
    invalid: bool = Field(..., description="Invalid flag (e.g. a game with a leaver).")
    ip_earned: int = Field(..., alias="ipEarned")
    level: int
    map_id: int = Field(..., alias="mapId")
    spell1: int
    spell2: int
    stats: RawStatsDto
    sub_type: SubType = Field(..., alias="subType")
    team_id: int = Field(..., alias="teamId")


class RecentGamesDto(RiotModel):
    games: list[GameDto]
    summoner_id: int = Field(..., alias="summonerId")


class GameApi(Protocol):
    def get_recent_games(self, region: Region, summoner_id: int) -> RecentGamesDto:
        """GET /api/lol/{region}/v1.3/game/by-summoner/{summonerId}/recent"""
        ...


OPERATIONS = (
    Operation(
        name="get_recent_games",
        method="GET",
        host=HostKind.REGIONAL,
        path="/api/lol/{region}/v1.3/game/by-summoner/{summonerId}/recent",
        result=RecentGamesDto,
        params=(
            path("region", "region", Region),
            path("summoner_id", "summonerId", int),
        ),
        description="Recent games (at most 10) for a summoner.",
    ),
)

MODULE = ApiModule(
    name="game",
    version="v1.3",
    description="Recent games per summoner.",
    entities=(RecentGamesDto, GameDto, PlayerDto, RawStatsDto),
    operations=OPERATIONS,
    protocol=GameApi,
)
