"""
match-v2.2: full detail of a finished match, optionally with its timeline.

A match is immutable once the game has ended. The timeline is only present
when requested with includeTimeline=true; per-event fields depend on the
event type, so every field of `Event` other than its type and timestamp is
optional.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from pydantic import Field

from lol_api_schema.enums import GameMode, GameType, Lane, MatchQueueType, Region, Role, Season, Tier
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, Param, path, query
from lol_api_schema.schema.registry import ApiModule

_BASE = "/api/lol/{region}/v2.2/match"


class EventType(StrEnum):
    ASCENDED_EVENT = "ASCENDED_EVENT"
    BUILDING_KILL = "BUILDING_KILL"
    CAPTURE_POINT = "CAPTURE_POINT"
    CHAMPION_KILL = "CHAMPION_KILL"
    ELITE_MONSTER_KILL = "ELITE_MONSTER_KILL"
    ITEM_DESTROYED = "ITEM_DESTROYED"
    ITEM_PURCHASED = "ITEM_PURCHASED"
    ITEM_SOLD = "ITEM_SOLD"
    ITEM_UNDO = "ITEM_UNDO"
    PORO_KING_SUMMON = "PORO_KING_SUMMON"
    SKILL_LEVEL_UP = "SKILL_LEVEL_UP"
    WARD_KILL = "WARD_KILL"
    WARD_PLACED = "WARD_PLACED"


class AscendedType(StrEnum):
    CHAMPION_ASCENDED = "CHAMPION_ASCENDED"
    CLEAR_ASCENDED = "CLEAR_ASCENDED"
    MINION_ASCENDED = "MINION_ASCENDED"


class BuildingType(StrEnum):
    INHIBITOR_BUILDING = "INHIBITOR_BUILDING"
    TOWER_BUILDING = "TOWER_BUILDING"


class LaneType(StrEnum):
    BOT_LANE = "BOT_LANE"
    MID_LANE = "MID_LANE"
    TOP_LANE = "TOP_LANE"


class LevelUpType(StrEnum):
    EVOLVE = "EVOLVE"
    NORMAL = "NORMAL"


class MonsterType(StrEnum):
    BARON_NASHOR = "BARON_NASHOR"
    BLUE_GOLEM = "BLUE_GOLEM"
    DRAGON = "DRAGON"
    RED_LIZARD = "RED_LIZARD"
    RIFTHERALD = "RIFTHERALD"
    VILEMAW = "VILEMAW"


class MonsterSubType(StrEnum):
    AIR_DRAGON = "AIR_DRAGON"
    EARTH_DRAGON = "EARTH_DRAGON"
    FIRE_DRAGON = "FIRE_DRAGON"
    WATER_DRAGON = "WATER_DRAGON"
    ELDER_DRAGON = "ELDER_DRAGON"


class PointCaptured(StrEnum):
    POINT_A = "POINT_A"
    POINT_B = "POINT_B"
    POINT_C = "POINT_C"
    POINT_D = "POINT_D"
    POINT_E = "POINT_E"


class TowerType(StrEnum):
    BASE_TURRET = "BASE_TURRET"
    FOUNTAIN_TURRET = "FOUNTAIN_TURRET"
    INNER_TURRET = "INNER_TURRET"
    NEXUS_TURRET = "NEXUS_TURRET"
    OUTER_TURRET = "OUTER_TURRET"
    UNDEFINED_TURRET = "UNDEFINED_TURRET"


class WardType(StrEnum):
    BLUE_TRINKET = "BLUE_TRINKET"
    SIGHT_WARD = "SIGHT_WARD"
    TEEMO_MUSHROOM = "TEEMO_MUSHROOM"
    UNDEFINED = "UNDEFINED"
    VISION_WARD = "VISION_WARD"
    YELLOW_TRINKET = "YELLOW_TRINKET"
    YELLOW_TRINKET_UPGRADE = "YELLOW_TRINKET_UPGRADE"


# -----------------------------
# Participants
# -----------------------------


class Mastery(RiotModel):
    mastery_id: int = Field(..., alias="masteryId")
    rank: int


class Rune(RiotModel):
    rank: int
    rune_id: int = Field(..., alias="runeId")


class Player(RiotModel):
    match_history_uri: str = Field(..., alias="matchHistoryUri")
    profile_icon: int = Field(..., alias="profileIcon")
    summoner_id: int = Field(..., alias="summonerId")
    summoner_name: str = Field(..., alias="summonerName")


class ParticipantIdentity(RiotModel):
    participant_id: int = Field(..., alias="participantId")
    # only ranked games identify their players
    player: Player | None = None


class ParticipantStats(RiotModel):
    assists: int
    champ_level: int = Field(..., alias="champLevel")
    combat_player_score: int | None = Field(None, alias="combatPlayerScore")
    deaths: int
    double_kills: int = Field(..., alias="doubleKills")
    first_blood_assist: bool | None = Field(None, alias="firstBloodAssist")
    first_blood_kill: bool | None = Field(None, alias="firstBloodKill")
    first_inhibitor_assist: bool | None = Field(None, alias="firstInhibitorAssist")
    first_inhibitor_kill: bool | None = Field(None, alias="firstInhibitorKill")
    first_tower_assist: bool | None = Field(None, alias="firstTowerAssist")
    first_tower_kill: bool | None = Field(None, alias="firstTowerKill")
    gold_earned: int = Field(..., alias="goldEarned")
    gold_spent: int = Field(..., alias="goldSpent")
    inhibitor_kills: int | None = Field(None, alias="inhibitorKills")
    item0: int
    item1: int
    item2: int
    item3: int
    item4: int
    item5: int
    item6: int
    killing_sprees: int = Field(..., alias="killingSprees")
    kills: int
    largest_critical_strike: int = Field(..., alias="largestCriticalStrike")
    largest_killing_spree: int = Field(..., alias="largestKillingSpree")
    largest_multi_kill: int = Field(..., alias="largestMultiKill")
    magic_damage_dealt: int = Field(..., alias="magicDamageDealt")
    magic_damage_dealt_to_champions: int = Field(..., alias="magicDamageDealtToChampions")
    magic_damage_taken: int = Field(..., alias="magicDamageTaken")
    minions_killed: int = Field(..., alias="minionsKilled")
    neutral_minions_killed: int = Field(..., alias="neutralMinionsKilled")
    neutral_minions_killed_enemy_jungle: int | None = Field(
        None, alias="neutralMinionsKilledEnemyJungle"
    )
    neutral_minions_killed_team_jungle: int | None = Field(
        None, alias="neutralMinionsKilledTeamJungle"
    )
    # Dominion only
    node_capture: int | None = Field(None, alias="nodeCapture")
    node_capture_assist: int | None = Field(None, alias="nodeCaptureAssist")
    node_neutralize: int | None = Field(None, alias="nodeNeutralize")
    node_neutralize_assist: int | None = Field(None, alias="nodeNeutralizeAssist")
    objective_player_score: int | None = Field(None, alias="objectivePlayerScore")
    penta_kills: int = Field(..., alias="pentaKills")
    physical_damage_dealt: int = Field(..., alias="physicalDamageDealt")
    physical_damage_dealt_to_champions: int = Field(..., alias="physicalDamageDealtToChampions")
    physical_damage_taken: int = Field(..., alias="physicalDamageTaken")
    quadra_kills: int = Field(..., alias="quadraKills")
    sight_wards_bought_in_game: int = Field(..., alias="sightWardsBoughtInGame")
    team_objective: int | None = Field(None, alias="teamObjective")
    total_damage_dealt: int = Field(..., alias="totalDamageDealt")
    total_damage_dealt_to_champions: int = Field(..., alias="totalDamageDealtToChampions")
    total_damage_taken: int = Field(..., alias="totalDamageTaken")
    total_heal: int = Field(..., alias="totalHeal")
    total_player_score: int | None = Field(None, alias="totalPlayerScore")
    total_score_rank: int | None = Field(None, alias="totalScoreRank")
    total_time_crowd_control_dealt: int = Field(..., alias="totalTimeCrowdControlDealt")
    total_units_healed: int = Field(..., alias="totalUnitsHealed")
    tower_kills: int | None = Field(None, alias="towerKills")
    triple_kills: int = Field(..., alias="tripleKills")
    true_damage_dealt: int = Field(..., alias="trueDamageDealt")
    true_damage_dealt_to_champions: int = Field(..., alias="trueDamageDealtToChampions")
    true_damage_taken: int = Field(..., alias="trueDamageTaken")
    unreal_kills: int = Field(..., alias="unrealKills")
    vision_wards_bought_in_game: int = Field(..., alias="visionWardsBoughtInGame")
    wards_killed: int | None = Field(None, alias="wardsKilled")
    wards_placed: int | None = Field(None, alias="wardsPlaced")
    winner: bool


class ParticipantTimelineData(RiotModel):
    """A per-minute value bucketed by game phase."""

    ten_to_twenty: float | None = Field(None, alias="tenToTwenty")
    thirty_to_end: float | None = Field(None, alias="thirtyToEnd")
    twenty_to_thirty: float | None = Field(None, alias="twentyToThirty")
    zero_to_ten: float | None = Field(None, alias="zeroToTen")


class ParticipantTimeline(RiotModel):
    ancient_golem_assists_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="ancientGolemAssistsPerMinCounts"
    )
    ancient_golem_kills_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="ancientGolemKillsPerMinCounts"
    )
    assisted_lane_deaths_per_min_deltas: ParticipantTimelineData | None = Field(
        None, alias="assistedLaneDeathsPerMinDeltas"
    )
    assisted_lane_kills_per_min_deltas: ParticipantTimelineData | None = Field(
        None, alias="assistedLaneKillsPerMinDeltas"
    )
    baron_assists_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="baronAssistsPerMinCounts"
    )
    baron_kills_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="baronKillsPerMinCounts"
    )
    creeps_per_min_deltas: ParticipantTimelineData | None = Field(None, alias="creepsPerMinDeltas")
    cs_diff_per_min_deltas: ParticipantTimelineData | None = Field(None, alias="csDiffPerMinDeltas")
    damage_taken_diff_per_min_deltas: ParticipantTimelineData | None = Field(
        None, alias="damageTakenDiffPerMinDeltas"
    )
    damage_taken_per_min_deltas: ParticipantTimelineData | None = Field(
        None, alias="damageTakenPerMinDeltas"
    )
    dragon_assists_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="dragonAssistsPerMinCounts"
    )
    dragon_kills_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="dragonKillsPerMinCounts"
    )
    elder_lizard_assists_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="elderLizardAssistsPerMinCounts"
    )
    elder_lizard_kills_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="elderLizardKillsPerMinCounts"
    )
    gold_per_min_deltas: ParticipantTimelineData | None = Field(None, alias="goldPerMinDeltas")
    inhibitor_assists_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="inhibitorAssistsPerMinCounts"
    )
    inhibitor_kills_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="inhibitorKillsPerMinCounts"
    )
    lane: Lane
    role: Role
    tower_assists_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="towerAssistsPerMinCounts"
    )
    tower_kills_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="towerKillsPerMinCounts"
    )
    tower_kills_per_min_deltas: ParticipantTimelineData | None = Field(
        None, alias="towerKillsPerMinDeltas"
    )
    vilemaw_assists_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="vilemawAssistsPerMinCounts"
    )
    vilemaw_kills_per_min_counts: ParticipantTimelineData | None = Field(
        None, alias="vilemawKillsPerMinCounts"
    )
    wards_per_min_deltas: ParticipantTimelineData | None = Field(None, alias="wardsPerMinDeltas")
    xp_diff_per_min_deltas: ParticipantTimelineData | None = Field(None, alias="xpDiffPerMinDeltas")
    xp_per_min_deltas: ParticipantTimelineData | None = Field(None, alias="xpPerMinDeltas")


class Participant(RiotModel):
    champion_id: int = Field(..., alias="championId")
    highest_achieved_season_tier: Tier | None = Field(None, alias="highestAchievedSeasonTier")
    masteries: list[Mastery] | None = None
    participant_id: int = Field(..., alias="participantId")
    runes: list[Rune] | None = None
    spell1_id: int = Field(..., alias="spell1Id")
    spell2_id: int = Field(..., alias="spell2Id")
    stats: ParticipantStats
    team_id: int = Field(..., alias="teamId")
    timeline: ParticipantTimeline


# -----------------------------
# Teams
# -----------------------------


class BannedChampion(RiotModel):
    champion_id: int = Field(..., alias="championId")
    pick_turn: int = Field(..., alias="pickTurn")


class Team(RiotModel):
    bans: list[BannedChampion] | None = None
    baron_kills: int = Field(..., alias="baronKills")
    # Dominion only
    dominion_victory_score: int | None = Field(None, alias="dominionVictoryScore")
    dragon_kills: int = Field(..., alias="dragonKills")
    first_baron: bool = Field(..., alias="firstBaron")
    first_blood: bool = Field(..., alias="firstBlood")
    first_dragon: bool = Field(..., alias="firstDragon")
    first_inhibitor: bool = Field(..., alias="firstInhibitor")
    first_rift_herald: bool | None = Field(None, alias="firstRiftHerald")
    first_tower: bool = Field(..., alias="firstTower")
    inhibitor_kills: int = Field(..., alias="inhibitorKills")
    rift_herald_kills: int | None = Field(None, alias="riftHeraldKills")
    team_id: int = Field(..., alias="teamId")
    tower_kills: int = Field(..., alias="towerKills")
    vilemaw_kills: int = Field(..., alias="vilemawKills")
    winner: bool


# -----------------------------
# Timeline
# -----------------------------


class Position(RiotModel):
    x: int
    y: int


class ParticipantFrame(RiotModel):
    current_gold: int = Field(..., alias="currentGold")
    dominion_score: int | None = Field(None, alias="dominionScore")
    jungle_minions_killed: int = Field(..., alias="jungleMinionsKilled")
    level: int
    minions_killed: int = Field(..., alias="minionsKilled")
    participant_id: int = Field(..., alias="participantId")
    position: Position | None = None
    team_score: int | None = Field(None, alias="teamScore")
    total_gold: int = Field(..., alias="totalGold")
    xp: int


class Event(RiotModel):
    ascended_type: AscendedType | None = Field(None, alias="ascendedType")
    assisting_participant_ids: list[int] | None = Field(None, alias="assistingParticipantIds")
    building_type: BuildingType | None = Field(None, alias="buildingType")
    creator_id: int | None = Field(None, alias="creatorId")
    event_type: EventType = Field(..., alias="eventType")
    item_after: int | None = Field(None, alias="itemAfter")
    item_before: int | None = Field(None, alias="itemBefore")
    item_id: int | None = Field(None, alias="itemId")
    killer_id: int | None = Field(None, alias="killerId")
    lane_type: LaneType | None = Field(None, alias="laneType")
    level_up_type: LevelUpType | None = Field(None, alias="levelUpType")
    monster_sub_type: MonsterSubType | None = Field(None, alias="monsterSubType")
    monster_type: MonsterType | None = Field(None, alias="monsterType")
    participant_id: int | None = Field(None, alias="participantId")
    point_captured: PointCaptured | None = Field(None, alias="pointCaptured")
    position: Position | None = None
    skill_slot: int | None = Field(None, alias="skillSlot")
    team_id: int | None = Field(None, alias="teamId")
    timestamp: int = Field(..., description="Milliseconds since the start of the game.")
    tower_type: TowerType | None = Field(None, alias="towerType")
    victim_id: int | None = Field(None, alias="victimId")
    ward_type: WardType | None = Field(None, alias="wardType")


class Frame(RiotModel):
    events: list[Event] | None = None
    # keyed by participant id as a string
    participant_frames: dict[str, ParticipantFrame] = Field(..., alias="participantFrames")
    timestamp: int


class Timeline(RiotModel):
    frame_interval: int = Field(..., alias="frameInterval", description="Milliseconds between frames.")
    frames: list[Frame]


class MatchDetail(RiotModel):
    map_id: int = Field(..., alias="mapId")
    match_creation: int = Field(..., alias="matchCreation", description="Epoch milliseconds.")
    match_duration: int = Field(..., alias="matchDuration", description="Seconds.")
    match_id: int = Field(..., alias="matchId")
    match_mode: GameMode = Field(..., alias="matchMode")
    match_type: GameType = Field(..., alias="matchType")
    match_version: str = Field(..., alias="matchVersion")
    participant_identities: list[ParticipantIdentity] = Field(..., alias="participantIdentities")
    participants: list[Participant]
    platform_id: str = Field(..., alias="platformId")
    queue_type: MatchQueueType = Field(..., alias="queueType")
    region: str
    season: Season
    teams: list[Team]
    timeline: Timeline | None = None


class MatchApi(Protocol):
    def get_match(
        self, region: Region, match_id: int, include_timeline: bool | None = None
    ) -> MatchDetail:
        """GET /api/lol/{region}/v2.2/match/{matchId}"""
        ...

    def get_match_ids_by_tournament(self, region: Region, tournament_code: str) -> list[int]:
        """GET /api/lol/{region}/v2.2/match/by-tournament/{tournamentCode}/ids"""
        ...

    def get_match_for_tournament(
        self,
        region: Region,
        match_id: int,
        tournament_code: str,
        include_timeline: bool | None = None,
    ) -> MatchDetail:
        """GET /api/lol/{region}/v2.2/match/for-tournament/{matchId}"""
        ...


def _include_timeline() -> Param:
    return query(
        "include_timeline",
        "includeTimeline",
        bool,
        description="Include the timeline (frames and events).",
    )


OPERATIONS = (
    Operation(
        name="get_match",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/{matchId}",
        result=MatchDetail,
        params=(
            path("region", "region", Region),
            path("match_id", "matchId", int),
            _include_timeline(),
        ),
        description="Match by match ID.",
    ),
    Operation(
        name="get_match_ids_by_tournament",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/by-tournament/{tournamentCode}/ids",
        result=list[int],
        params=(
            path("region", "region", Region),
            path("tournament_code", "tournamentCode", str),
        ),
        description="Match IDs played with a tournament code.",
    ),
    Operation(
        name="get_match_for_tournament",
        method="GET",
        host=HostKind.REGIONAL,
        path=_BASE + "/for-tournament/{matchId}",
        result=MatchDetail,
        params=(
            path("region", "region", Region),
            path("match_id", "matchId", int),
            query("tournament_code", "tournamentCode", str, required=True),
            _include_timeline(),
        ),
        description="Match by match ID and tournament code.",
    ),
)

MODULE = ApiModule(
    name="match",
    version="v2.2",
    description="Match details and timelines.",
    entities=(
        MatchDetail,
        Participant,
        ParticipantIdentity,
        Team,
        Timeline,
        Frame,
        Event,
        ParticipantFrame,
        ParticipantStats,
        ParticipantTimeline,
        ParticipantTimelineData,
        Player,
        Position,
        Mastery,
        Rune,
        BannedChampion,
    ),
    operations=OPERATIONS,
    protocol=MatchApi,
)
