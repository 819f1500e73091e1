from __future__ import annotations

from enum import Enum, StrEnum


class Region(StrEnum):
    BR = "br"
    EUNE = "eune"
    EUW = "euw"
    JP = "jp"
    KR = "kr"
    LAN = "lan"
    LAS = "las"
    NA = "na"
    OCE = "oce"
    PBE = "pbe"
    RU = "ru"
    TR = "tr"


class PlatformId(StrEnum):
    BR1 = "BR1"
    EUN1 = "EUN1"
    EUW1 = "EUW1"
    JP1 = "JP1"
    KR = "KR"
    LA1 = "LA1"
    LA2 = "LA2"
    NA1 = "NA1"
    OC1 = "OC1"
    PBE1 = "PBE1"
    RU = "RU"
    TR1 = "TR1"


PLATFORM_REGIONS: dict[PlatformId, Region] = {
    PlatformId.BR1: Region.BR,
    PlatformId.EUN1: Region.EUNE,
    PlatformId.EUW1: Region.EUW,
    PlatformId.JP1: Region.JP,
    PlatformId.KR: Region.KR,
    PlatformId.LA1: Region.LAN,
    PlatformId.LA2: Region.LAS,
    PlatformId.NA1: Region.NA,
    PlatformId.OC1: Region.OCE,
    PlatformId.PBE1: Region.PBE,
    PlatformId.RU: Region.RU,
    PlatformId.TR1: Region.TR,
}


def region_for_platform(platform_id: str | PlatformId) -> Region:
    return PLATFORM_REGIONS[PlatformId(str(platform_id).upper())]


class GameMode(StrEnum):
    CLASSIC = "CLASSIC"
    ODIN = "ODIN"
    ARAM = "ARAM"
    TUTORIAL = "TUTORIAL"
    ONEFORALL = "ONEFORALL"
    ASCENSION = "ASCENSION"
    FIRSTBLOOD = "FIRSTBLOOD"
    KINGPORO = "KINGPORO"


class GameType(StrEnum):
    CUSTOM_GAME = "CUSTOM_GAME"
    MATCHED_GAME = "MATCHED_GAME"
    TUTORIAL_GAME = "TUTORIAL_GAME"


class SubType(StrEnum):
    """Game sub type reported by the recent games endpoint."""

    NONE = "NONE"
    NORMAL = "NORMAL"
    BOT = "BOT"
    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"
    RANKED_PREMADE_3x3 = "RANKED_PREMADE_3x3"
    RANKED_PREMADE_5x5 = "RANKED_PREMADE_5x5"
    ODIN_UNRANKED = "ODIN_UNRANKED"
    RANKED_TEAM_3x3 = "RANKED_TEAM_3x3"
    RANKED_TEAM_5x5 = "RANKED_TEAM_5x5"
    NORMAL_3x3 = "NORMAL_3x3"
    BOT_3x3 = "BOT_3x3"
    CAP_5x5 = "CAP_5x5"
    ARAM_UNRANKED_5x5 = "ARAM_UNRANKED_5x5"
    ONEFORALL_5x5 = "ONEFORALL_5x5"
    FIRSTBLOOD_1x1 = "FIRSTBLOOD_1x1"
    FIRSTBLOOD_2x2 = "FIRSTBLOOD_2x2"
    SR_6x6 = "SR_6x6"
    URF = "URF"
    URF_BOT = "URF_BOT"
    NIGHTMARE_BOT = "NIGHTMARE_BOT"
    ASCENSION = "ASCENSION"
    HEXAKILL = "HEXAKILL"
    KING_PORO = "KING_PORO"
    COUNTER_PICK = "COUNTER_PICK"
    BILGEWATER = "BILGEWATER"


class RankedQueue(StrEnum):
    """Queues that have leagues."""

    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"
    RANKED_FLEX_SR = "RANKED_FLEX_SR"
    RANKED_FLEX_TT = "RANKED_FLEX_TT"
    RANKED_TEAM_3x3 = "RANKED_TEAM_3x3"
    RANKED_TEAM_5x5 = "RANKED_TEAM_5x5"


class MatchQueueType(StrEnum):
    CUSTOM = "CUSTOM"
    NORMAL_5x5_BLIND = "NORMAL_5x5_BLIND"
    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"
    RANKED_PREMADE_5x5 = "RANKED_PREMADE_5x5"
    BOT_5x5 = "BOT_5x5"
    NORMAL_3x3 = "NORMAL_3x3"
    RANKED_PREMADE_3x3 = "RANKED_PREMADE_3x3"
    NORMAL_5x5_DRAFT = "NORMAL_5x5_DRAFT"
    ODIN_5x5_BLIND = "ODIN_5x5_BLIND"
    ODIN_5x5_DRAFT = "ODIN_5x5_DRAFT"
    BOT_ODIN_5x5 = "BOT_ODIN_5x5"
    BOT_5x5_INTRO = "BOT_5x5_INTRO"
    BOT_5x5_BEGINNER = "BOT_5x5_BEGINNER"
    BOT_5x5_INTERMEDIATE = "BOT_5x5_INTERMEDIATE"
    RANKED_TEAM_3x3 = "RANKED_TEAM_3x3"
    RANKED_TEAM_5x5 = "RANKED_TEAM_5x5"
    BOT_TT_3x3 = "BOT_TT_3x3"
    GROUP_FINDER_5x5 = "GROUP_FINDER_5x5"
    ARAM_5x5 = "ARAM_5x5"
    ONEFORALL_5x5 = "ONEFORALL_5x5"
    FIRSTBLOOD_1x1 = "FIRSTBLOOD_1x1"
    FIRSTBLOOD_2x2 = "FIRSTBLOOD_2x2"
    SR_6x6 = "SR_6x6"
    URF_5x5 = "URF_5x5"
    ONEFORALL_MIRRORMODE_5x5 = "ONEFORALL_MIRRORMODE_5x5"
    BOT_URF_5x5 = "BOT_URF_5x5"
    NIGHTMARE_BOT_5x5_RANK1 = "NIGHTMARE_BOT_5x5_RANK1"
    NIGHTMARE_BOT_5x5_RANK2 = "NIGHTMARE_BOT_5x5_RANK2"
    NIGHTMARE_BOT_5x5_RANK5 = "NIGHTMARE_BOT_5x5_RANK5"
    ASCENSION_5x5 = "ASCENSION_5x5"
    HEXAKILL = "HEXAKILL"
    BILGEWATER_ARAM_5x5 = "BILGEWATER_ARAM_5x5"
    KING_PORO_5x5 = "KING_PORO_5x5"
    COUNTER_PICK = "COUNTER_PICK"
    BILGEWATER_5x5 = "BILGEWATER_5x5"
    TEAM_BUILDER_DRAFT_UNRANKED_5x5 = "TEAM_BUILDER_DRAFT_UNRANKED_5x5"
    TEAM_BUILDER_DRAFT_RANKED_5x5 = "TEAM_BUILDER_DRAFT_RANKED_5x5"
    TEAM_BUILDER_RANKED_SOLO = "TEAM_BUILDER_RANKED_SOLO"
    RANKED_FLEX_SR = "RANKED_FLEX_SR"


class Season(StrEnum):
    PRESEASON3 = "PRESEASON3"
    SEASON3 = "SEASON3"
    PRESEASON2014 = "PRESEASON2014"
    SEASON2014 = "SEASON2014"
    PRESEASON2015 = "PRESEASON2015"
    SEASON2015 = "SEASON2015"
    PRESEASON2016 = "PRESEASON2016"
    SEASON2016 = "SEASON2016"


class Tier(StrEnum):
    CHALLENGER = "CHALLENGER"
    MASTER = "MASTER"
    DIAMOND = "DIAMOND"
    PLATINUM = "PLATINUM"
    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"
    UNRANKED = "UNRANKED"


class Division(str, Enum):
    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"


class Lane(str, Enum):
    # match-v2.2 timelines report MID/BOT, matchlist reports MIDDLE/BOTTOM
    MID = "MID"
    MIDDLE = "MIDDLE"
    TOP = "TOP"
    JUNGLE = "JUNGLE"
    BOT = "BOT"
    BOTTOM = "BOTTOM"


class Role(str, Enum):
    DUO = "DUO"
    NONE = "NONE"
    SOLO = "SOLO"
    DUO_CARRY = "DUO_CARRY"
    DUO_SUPPORT = "DUO_SUPPORT"


class PlayerStatSummaryType(StrEnum):
    AramUnranked5x5 = "AramUnranked5x5"
    Ascension = "Ascension"
    Bilgewater = "Bilgewater"
    CAP5x5 = "CAP5x5"
    CoopVsAI = "CoopVsAI"
    CoopVsAI3x3 = "CoopVsAI3x3"
    CounterPick = "CounterPick"
    FirstBlood1x1 = "FirstBlood1x1"
    FirstBlood2x2 = "FirstBlood2x2"
    Hexakill = "Hexakill"
    KingPoro = "KingPoro"
    NightmareBot = "NightmareBot"
    OdinUnranked = "OdinUnranked"
    OneForAll5x5 = "OneForAll5x5"
    RankedFlexSR = "RankedFlexSR"
    RankedFlexTT = "RankedFlexTT"
    RankedPremade3x3 = "RankedPremade3x3"
    RankedPremade5x5 = "RankedPremade5x5"
    RankedSolo5x5 = "RankedSolo5x5"
    RankedTeam3x3 = "RankedTeam3x3"
    RankedTeam5x5 = "RankedTeam5x5"
    SummonersRift6x6 = "SummonersRift6x6"
    Unranked = "Unranked"
    Unranked3x3 = "Unranked3x3"
    URF = "URF"
    URFBots = "URFBots"


class MapType(StrEnum):
    """Maps a tournament lobby can be created on."""

    SUMMONERS_RIFT = "SUMMONERS_RIFT"
    TWISTED_TREELINE = "TWISTED_TREELINE"
    CRYSTAL_SCAR = "CRYSTAL_SCAR"
    HOWLING_ABYSS = "HOWLING_ABYSS"


class PickType(StrEnum):
    BLIND_PICK = "BLIND_PICK"
    DRAFT_MODE = "DRAFT_MODE"
    ALL_RANDOM = "ALL_RANDOM"
    TOURNAMENT_DRAFT = "TOURNAMENT_DRAFT"


class SpectatorType(StrEnum):
    NONE = "NONE"
    LOBBYONLY = "LOBBYONLY"
    ALL = "ALL"
