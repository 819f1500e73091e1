"""
lol-static-data-v1.2: the game's catalogue (champions, items, masteries, runes,
summoner spells, maps, realms, localized strings).

Catalogue entries are keyed by id or key and are immutable for a given data
version. Most fields are only returned when requested through the
`*Data` filter parameters (`champData=all`, `itemData=gold,image`, ...), so
everything beyond the identifying fields is optional.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, Protocol

from pydantic import Field

from lol_api_schema.enums import Region
from lol_api_schema.schema.base import RiotModel
from lol_api_schema.schema.operation import HostKind, Operation, Param, path, query
from lol_api_schema.schema.registry import ApiModule

_BASE = "/api/lol/static-data/{region}/v1.2"


class MasteryTreeType(StrEnum):
    CUNNING = "Cunning"
    FEROCITY = "Ferocity"
    RESOLVE = "Resolve"


# -----------------------------
# Shared building blocks
# -----------------------------


class ImageDto(RiotModel):
    full: str
    group: str
    h: int
    sprite: str
    w: int
    x: int
    y: int


class LevelTipDto(RiotModel):
    effect: list[str]
    label: list[str]


class SpellVarsDto(RiotModel):
    coeff: list[float]
    dyn: str | None = None
    key: str
    link: str
    ranks_with: str | None = Field(None, alias="ranksWith")


class MetaDataDto(RiotModel):
    is_rune: bool = Field(..., alias="isRune")
    tier: str
    type: str


class GoldDto(RiotModel):
    base: int
    purchasable: bool
    sell: int
    total: int


class BasicDataStatsDto(RiotModel):
    """Stat modifiers of an item or rune. Only the non-zero modifiers are sent."""

    flat_armor_mod: float | None = Field(None, alias="FlatArmorMod")
    flat_attack_speed_mod: float | None = Field(None, alias="FlatAttackSpeedMod")
    flat_block_mod: float | None = Field(None, alias="FlatBlockMod")
    flat_crit_chance_mod: float | None = Field(None, alias="FlatCritChanceMod")
    flat_crit_damage_mod: float | None = Field(None, alias="FlatCritDamageMod")
    flat_exp_bonus: float | None = Field(None, alias="FlatEXPBonus")
    flat_energy_pool_mod: float | None = Field(None, alias="FlatEnergyPoolMod")
    flat_energy_regen_mod: float | None = Field(None, alias="FlatEnergyRegenMod")
    flat_hp_pool_mod: float | None = Field(None, alias="FlatHPPoolMod")
    flat_hp_regen_mod: float | None = Field(None, alias="FlatHPRegenMod")
    flat_mp_pool_mod: float | None = Field(None, alias="FlatMPPoolMod")
    flat_mp_regen_mod: float | None = Field(None, alias="FlatMPRegenMod")
    flat_magic_damage_mod: float | None = Field(None, alias="FlatMagicDamageMod")
    flat_movement_speed_mod: float | None = Field(None, alias="FlatMovementSpeedMod")
    flat_physical_damage_mod: float | None = Field(None, alias="FlatPhysicalDamageMod")
    flat_spell_block_mod: float | None = Field(None, alias="FlatSpellBlockMod")
    percent_armor_mod: float | None = Field(None, alias="PercentArmorMod")
    percent_attack_speed_mod: float | None = Field(None, alias="PercentAttackSpeedMod")
    percent_block_mod: float | None = Field(None, alias="PercentBlockMod")
    percent_crit_chance_mod: float | None = Field(None, alias="PercentCritChanceMod")
    percent_crit_damage_mod: float | None = Field(None, alias="PercentCritDamageMod")
    percent_dodge_mod: float | None = Field(None, alias="PercentDodgeMod")
    percent_exp_bonus: float | None = Field(None, alias="PercentEXPBonus")
    percent_hp_pool_mod: float | None = Field(None, alias="PercentHPPoolMod")
    percent_hp_regen_mod: float | None = Field(None, alias="PercentHPRegenMod")
    percent_life_steal_mod: float | None = Field(None, alias="PercentLifeStealMod")
    percent_mp_pool_mod: float | None = Field(None, alias="PercentMPPoolMod")
    percent_mp_regen_mod: float | None = Field(None, alias="PercentMPRegenMod")
    percent_magic_damage_mod: float | None = Field(None, alias="PercentMagicDamageMod")
    percent_movement_speed_mod: float | None = Field(None, alias="PercentMovementSpeedMod")
    percent_physical_damage_mod: float | None = Field(None, alias="PercentPhysicalDamageMod")
    percent_spell_block_mod: float | None = Field(None, alias="PercentSpellBlockMod")
    percent_spell_vamp_mod: float | None = Field(None, alias="PercentSpellVampMod")
    r_flat_armor_mod_per_level: float | None = Field(None, alias="rFlatArmorModPerLevel")
    r_flat_armor_penetration_mod: float | None = Field(None, alias="rFlatArmorPenetrationMod")
    r_flat_armor_penetration_mod_per_level: float | None = Field(
        None, alias="rFlatArmorPenetrationModPerLevel"
    )
    r_flat_crit_chance_mod_per_level: float | None = Field(None, alias="rFlatCritChanceModPerLevel")
    r_flat_crit_damage_mod_per_level: float | None = Field(None, alias="rFlatCritDamageModPerLevel")
    r_flat_dodge_mod: float | None = Field(None, alias="rFlatDodgeMod")
    r_flat_dodge_mod_per_level: float | None = Field(None, alias="rFlatDodgeModPerLevel")
    r_flat_energy_mod_per_level: float | None = Field(None, alias="rFlatEnergyModPerLevel")
    r_flat_energy_regen_mod_per_level: float | None = Field(
        None, alias="rFlatEnergyRegenModPerLevel"
    )
    r_flat_gold_per10_mod: float | None = Field(None, alias="rFlatGoldPer10Mod")
    r_flat_hp_mod_per_level: float | None = Field(None, alias="rFlatHPModPerLevel")
    r_flat_hp_regen_mod_per_level: float | None = Field(None, alias="rFlatHPRegenModPerLevel")
    r_flat_mp_mod_per_level: float | None = Field(None, alias="rFlatMPModPerLevel")
    r_flat_mp_regen_mod_per_level: float | None = Field(None, alias="rFlatMPRegenModPerLevel")
    r_flat_magic_damage_mod_per_level: float | None = Field(
        None, alias="rFlatMagicDamageModPerLevel"
    )
    r_flat_magic_penetration_mod: float | None = Field(None, alias="rFlatMagicPenetrationMod")
    r_flat_magic_penetration_mod_per_level: float | None = Field(
        None, alias="rFlatMagicPenetrationModPerLevel"
    )
    r_flat_movement_speed_mod_per_level: float | None = Field(
        None, alias="rFlatMovementSpeedModPerLevel"
    )
    r_flat_physical_damage_mod_per_level: float | None = Field(
        None, alias="rFlatPhysicalDamageModPerLevel"
    )
    r_flat_spell_block_mod_per_level: float | None = Field(None, alias="rFlatSpellBlockModPerLevel")
    r_flat_time_dead_mod: float | None = Field(None, alias="rFlatTimeDeadMod")
    r_flat_time_dead_mod_per_level: float | None = Field(None, alias="rFlatTimeDeadModPerLevel")
    r_percent_armor_penetration_mod: float | None = Field(None, alias="rPercentArmorPenetrationMod")
    r_percent_armor_penetration_mod_per_level: float | None = Field(
        None, alias="rPercentArmorPenetrationModPerLevel"
    )
    r_percent_attack_speed_mod_per_level: float | None = Field(
        None, alias="rPercentAttackSpeedModPerLevel"
    )
    r_percent_cooldown_mod: float | None = Field(None, alias="rPercentCooldownMod")
    r_percent_cooldown_mod_per_level: float | None = Field(None, alias="rPercentCooldownModPerLevel")
    r_percent_magic_penetration_mod: float | None = Field(None, alias="rPercentMagicPenetrationMod")
    r_percent_magic_penetration_mod_per_level: float | None = Field(
        None, alias="rPercentMagicPenetrationModPerLevel"
    )
    r_percent_movement_speed_mod_per_level: float | None = Field(
        None, alias="rPercentMovementSpeedModPerLevel"
    )
    r_percent_time_dead_mod: float | None = Field(None, alias="rPercentTimeDeadMod")
    r_percent_time_dead_mod_per_level: float | None = Field(
        None, alias="rPercentTimeDeadModPerLevel"
    )


# -----------------------------
# Champions
# -----------------------------


class InfoDto(RiotModel):
    attack: int
    defense: int
    difficulty: int
    magic: int


class PassiveDto(RiotModel):
    description: str
    image: ImageDto
    name: str
    sanitized_description: str = Field(..., alias="sanitizedDescription")


class BlockItemDto(RiotModel):
    count: int
    id: int


class BlockDto(RiotModel):
    items: list[BlockItemDto]
    rec_math: bool | None = Field(None, alias="recMath")
    type: str


class RecommendedDto(RiotModel):
    blocks: list[BlockDto]
    champion: str
    map: str
    mode: str
    priority: bool | None = None
    title: str
    type: str


class SkinDto(RiotModel):
    id: int
    name: str
    num: int


class StatsDto(RiotModel):
    armor: float
    armorperlevel: float
    attackdamage: float
    attackdamageperlevel: float
    attackrange: float
    attackspeedoffset: float
    attackspeedperlevel: float
    crit: float
    critperlevel: float
    hp: float
    hpperlevel: float
    hpregen: float
    hpregenperlevel: float
    movespeed: float
    mp: float
    mpperlevel: float
    mpregen: float
    mpregenperlevel: float
    spellblock: float
    spellblockperlevel: float


class ChampionSpellDto(RiotModel):
    altimages: list[ImageDto] | None = None
    cooldown: list[float]
    cooldown_burn: str = Field(..., alias="cooldownBurn")
    cost: list[int]
    cost_burn: str = Field(..., alias="costBurn")
    cost_type: str = Field(..., alias="costType")
    description: str
    # One row per effect slot, one value per rank. Row 0 is null on the wire.
    effect: list[list[int | float] | None] | None = None
    effect_burn: list[str | None] = Field(..., alias="effectBurn")
    image: ImageDto
    key: str
    leveltip: LevelTipDto | None = None
    maxrank: int
    name: str
    # Either one range per rank or the literal "self".
    range: list[int] | Literal["self"]
    range_burn: str = Field(..., alias="rangeBurn")
    resource: str | None = None
    sanitized_description: str = Field(..., alias="sanitizedDescription")
    sanitized_tooltip: str = Field(..., alias="sanitizedTooltip")
    tooltip: str
    vars: list[SpellVarsDto] | None = None


class ChampionDto(RiotModel):
    allytips: list[str] | None = None
    blurb: str | None = None
    enemytips: list[str] | None = None
    id: int
    image: ImageDto | None = None
    info: InfoDto | None = None
    key: str
    lore: str | None = None
    name: str
    partype: str | None = None
    passive: PassiveDto | None = None
    recommended: list[RecommendedDto] | None = None
    skins: list[SkinDto] | None = None
    spells: list[ChampionSpellDto] | None = None
    stats: StatsDto | None = None
    tags: list[str] | None = None
    title: str


class ChampionListDto(RiotModel):
    # keyed by champion key, or by id when dataById=true
    data: dict[str, ChampionDto]
    format: str | None = None
    keys: dict[str, str] | None = None
    type: str
    version: str


# -----------------------------
# Items and runes
# -----------------------------


class _CatalogEntryFields(RiotModel):
    colloq: str | None = None
    consume_on_full: bool | None = Field(None, alias="consumeOnFull")
    consumed: bool | None = None
    depth: int | None = None
    description: str | None = None
    from_: list[str] | None = Field(None, alias="from")
    group: str | None = None
    hide_from_all: bool | None = Field(None, alias="hideFromAll")
    id: int
    image: ImageDto | None = None
    in_store: bool | None = Field(None, alias="inStore")
    into: list[str] | None = None
    maps: dict[str, bool] | None = None
    name: str | None = None
    plaintext: str | None = None
    required_champion: str | None = Field(None, alias="requiredChampion")
    rune: MetaDataDto | None = None
    sanitized_description: str | None = Field(None, alias="sanitizedDescription")
    special_recipe: int | None = Field(None, alias="specialRecipe")
    stacks: int | None = None
    stats: BasicDataStatsDto | None = None
    tags: list[str] | None = None


class BasicDataDto(_CatalogEntryFields):
    """Defaults every item or rune entry falls back to."""

    gold: GoldDto | None = None


class ItemDto(BasicDataDto):
    effect: dict[str, str] | None = None


class RuneDto(_CatalogEntryFields):
    pass


class GroupDto(RiotModel):
    max_group_ownable: str = Field(..., alias="MaxGroupOwnable")
    key: str


class ItemTreeDto(RiotModel):
    header: str
    tags: list[str]


class ItemListDto(RiotModel):
    basic: BasicDataDto | None = None
    data: dict[str, ItemDto]
    groups: list[GroupDto] | None = None
    tree: list[ItemTreeDto] | None = None
    type: str
    version: str


class RuneListDto(RiotModel):
    basic: BasicDataDto | None = None
    data: dict[str, RuneDto]
    type: str
    version: str


# -----------------------------
# Masteries
# -----------------------------


class MasteryDto(RiotModel):
    description: list[str] | None = None
    id: int
    image: ImageDto | None = None
    mastery_tree: MasteryTreeType | None = Field(None, alias="masteryTree")
    name: str
    prereq: str | None = None
    ranks: int | None = None
    sanitized_description: list[str] | None = Field(None, alias="sanitizedDescription")


class MasteryTreeItemDto(RiotModel):
    mastery_id: int = Field(..., alias="masteryId")
    prereq: str


class MasteryTreeListDto(RiotModel):
    # empty cells in a tree row are null
    mastery_tree_items: list[MasteryTreeItemDto | None] = Field(..., alias="masteryTreeItems")


class MasteryTreeDto(RiotModel):
    cunning: list[MasteryTreeListDto] = Field(..., alias="Cunning")
    ferocity: list[MasteryTreeListDto] = Field(..., alias="Ferocity")
    resolve: list[MasteryTreeListDto] = Field(..., alias="Resolve")


class MasteryListDto(RiotModel):
    data: dict[str, MasteryDto]
    tree: MasteryTreeDto | None = None
    type: str
    version: str


# -----------------------------
# Summoner spells
# -----------------------------


class SummonerSpellDto(RiotModel):
    cooldown: list[float] | None = None
    cooldown_burn: str | None = Field(None, alias="cooldownBurn")
    cost: list[int] | None = None
    cost_burn: str | None = Field(None, alias="costBurn")
    cost_type: str | None = Field(None, alias="costType")
    description: str | None = None
    effect: list[list[int | float] | None] | None = None
    effect_burn: list[str | None] | None = Field(None, alias="effectBurn")
    id: int
    image: ImageDto | None = None
    key: str
    leveltip: LevelTipDto | None = None
    maxrank: int | None = None
    modes: list[str] | None = None
    name: str
    range: list[int] | Literal["self"] | None = None
    range_burn: str | None = Field(None, alias="rangeBurn")
    resource: str | None = None
    sanitized_description: str | None = Field(None, alias="sanitizedDescription")
    sanitized_tooltip: str | None = Field(None, alias="sanitizedTooltip")
    summoner_level: int | None = Field(None, alias="summonerLevel")
    tooltip: str | None = None
    vars: list[SpellVarsDto] | None = None


class SummonerSpellListDto(RiotModel):
    data: dict[str, SummonerSpellDto]
    type: str
    version: str


# -----------------------------
# Maps, realms, languages
# -----------------------------


class MapDetailsDto(RiotModel):
    image: ImageDto
    map_id: int = Field(..., alias="mapId")
    map_name: str = Field(..., alias="mapName")
    unpurchasable_item_list: list[int] = Field(..., alias="unpurchasableItemList")


class MapDataDto(RiotModel):
    data: dict[str, MapDetailsDto]
    type: str
    version: str


class LanguageStringsDto(RiotModel):
    data: dict[str, str]
    type: str
    version: str


class RealmDto(RiotModel):
    """Data Dragon locations and current versions for a region."""

    cdn: str
    css: str = Field(..., description="Latest changed version of Dragon Magic's css file.")
    dd: str = Field(..., description="Latest changed version of Dragon Magic.")
    l: str = Field(..., description="Default language for this realm.")  # noqa: E741
    lg: str = Field(..., description="Legacy script mode for IE6 or older.")
    n: dict[str, str] = Field(..., description="Latest changed version for each data type.")
    profileiconmax: int
    store: str | None = None
    v: str = Field(..., description="Current version of this file for this realm.")


# -----------------------------
# Operations
# -----------------------------


class StaticDataApi(Protocol):
    def get_champion_list(
        self,
        region: Region,
        locale: str | None = None,
        version: str | None = None,
        data_by_id: bool | None = None,
        champ_data: list[str] | None = None,
    ) -> ChampionListDto:
        """GET /api/lol/static-data/{region}/v1.2/champion"""
        ...

    def get_champion(
        self,
        region: Region,
        champion_id: int,
        locale: str | None = None,
        version: str | None = None,
        champ_data: list[str] | None = None,
    ) -> ChampionDto:
        """GET /api/lol/static-data/{region}/v1.2/champion/{id}"""
        ...

    def get_item_list(
        self,
        region: Region,
        locale: str | None = None,
        version: str | None = None,
        item_list_data: list[str] | None = None,
    ) -> ItemListDto:
        """GET /api/lol/static-data/{region}/v1.2/item"""
        ...

    def get_item(
        self,
        region: Region,
        item_id: int,
        locale: str | None = None,
        version: str | None = None,
        item_data: list[str] | None = None,
    ) -> ItemDto:
        """GET /api/lol/static-data/{region}/v1.2/item/{id}"""
        ...

    def get_language_strings(
        self, region: Region, locale: str | None = None, version: str | None = None
    ) -> LanguageStringsDto:
        """GET /api/lol/static-data/{region}/v1.2/language-strings"""
        ...

    def get_languages(self, region: Region) -> list[str]:
        """GET /api/lol/static-data/{region}/v1.2/languages"""
        ...

    def get_map_data(
        self, region: Region, locale: str | None = None, version: str | None = None
    ) -> MapDataDto:
        """GET /api/lol/static-data/{region}/v1.2/map"""
        ...

    def get_mastery_list(
        self,
        region: Region,
        locale: str | None = None,
        version: str | None = None,
        mastery_list_data: list[str] | None = None,
    ) -> MasteryListDto:
        """GET /api/lol/static-data/{region}/v1.2/mastery"""
        ...

    def get_mastery(
        self,
        region: Region,
        mastery_id: int,
        locale: str | None = None,
        version: str | None = None,
        mastery_data: list[str] | None = None,
    ) -> MasteryDto:
        """GET /api/lol/static-data/{region}/v1.2/mastery/{id}"""
        ...

    def get_realm(self, region: Region) -> RealmDto:
        """GET /api/lol/static-data/{region}/v1.2/realm"""
        ...

    def get_rune_list(
        self,
        region: Region,
        locale: str | None = None,
        version: str | None = None,
        rune_list_data: list[str] | None = None,
    ) -> RuneListDto:
        """GET /api/lol/static-data/{region}/v1.2/rune"""
        ...

    def get_rune(
        self,
        region: Region,
        rune_id: int,
        locale: str | None = None,
        version: str | None = None,
        rune_data: list[str] | None = None,
    ) -> RuneDto:
        """GET /api/lol/static-data/{region}/v1.2/rune/{id}"""
        ...

    def get_summoner_spell_list(
        self,
        region: Region,
        locale: str | None = None,
        version: str | None = None,
        data_by_id: bool | None = None,
        spell_data: list[str] | None = None,
    ) -> SummonerSpellListDto:
        """GET /api/lol/static-data/{region}/v1.2/summoner-spell"""
        ...

    def get_summoner_spell(
        self,
        region: Region,
        spell_id: int,
        locale: str | None = None,
        version: str | None = None,
        spell_data: list[str] | None = None,
    ) -> SummonerSpellDto:
        """GET /api/lol/static-data/{region}/v1.2/summoner-spell/{id}"""
        ...

    def get_versions(self, region: Region) -> list[str]:
        """GET /api/lol/static-data/{region}/v1.2/versions"""
        ...


def _region() -> Param:
    return path("region", "region", Region)


def _localized() -> tuple[Param, ...]:
    return (
        query(
            "locale",
            "locale",
            str,
            description="Locale code for returned data (e.g. en_US). Defaults to the region's default locale.",
        ),
        query(
            "version",
            "version",
            str,
            description="Data dragon version. Defaults to the latest version for the region.",
        ),
    )


def _data_by_id() -> Param:
    return query(
        "data_by_id",
        "dataById",
        bool,
        description="Key the data map by id instead of by key.",
    )


def _tags(name: str, wire_name: str) -> Param:
    return query(
        name,
        wire_name,
        list[str],
        description="Tags to return additional data for ('all' returns everything).",
    )


def _op(name: str, suffix: str, result: object, params: tuple[Param, ...], description: str) -> Operation:
    return Operation(
        name=name,
        method="GET",
        host=HostKind.GLOBAL,
        path=_BASE + suffix,
        result=result,
        params=params,
        description=description,
    )


OPERATIONS = (
    _op(
        "get_champion_list",
        "/champion",
        ChampionListDto,
        (_region(), *_localized(), _data_by_id(), _tags("champ_data", "champData")),
        "Champion list.",
    ),
    _op(
        "get_champion",
        "/champion/{id}",
        ChampionDto,
        (_region(), path("champion_id", "id", int), *_localized(), _tags("champ_data", "champData")),
        "Champion by id.",
    ),
    _op(
        "get_item_list",
        "/item",
        ItemListDto,
        (_region(), *_localized(), _tags("item_list_data", "itemListData")),
        "Item list.",
    ),
    _op(
        "get_item",
        "/item/{id}",
        ItemDto,
        (_region(), path("item_id", "id", int), *_localized(), _tags("item_data", "itemData")),
        "Item by id.",
    ),
    _op(
        "get_language_strings",
        "/language-strings",
        LanguageStringsDto,
        (_region(), *_localized()),
        "Localized language strings.",
    ),
    _op(
        "get_languages",
        "/languages",
        list[str],
        (_region(),),
        "Supported languages.",
    ),
    _op(
        "get_map_data",
        "/map",
        MapDataDto,
        (_region(), *_localized()),
        "Map data.",
    ),
    _op(
        "get_mastery_list",
        "/mastery",
        MasteryListDto,
        (_region(), *_localized(), _tags("mastery_list_data", "masteryListData")),
        "Mastery list.",
    ),
    _op(
        "get_mastery",
        "/mastery/{id}",
        MasteryDto,
        (_region(), path("mastery_id", "id", int), *_localized(), _tags("mastery_data", "masteryData")),
        "Mastery by id.",
    ),
    _op(
        "get_realm",
        "/realm",
        RealmDto,
        (_region(),),
        "Realm data.",
    ),
    _op(
        "get_rune_list",
        "/rune",
        RuneListDto,
        (_region(), *_localized(), _tags("rune_list_data", "runeListData")),
        "Rune list.",
    ),
    _op(
        "get_rune",
        "/rune/{id}",
        RuneDto,
        (_region(), path("rune_id", "id", int), *_localized(), _tags("rune_data", "runeData")),
        "Rune by id.",
    ),
    _op(
        "get_summoner_spell_list",
        "/summoner-spell",
        SummonerSpellListDto,
        (_region(), *_localized(), _data_by_id(), _tags("spell_data", "spellData")),
        "Summoner spell list.",
    ),
    _op(
        "get_summoner_spell",
        "/summoner-spell/{id}",
        SummonerSpellDto,
        (_region(), path("spell_id", "id", int), *_localized(), _tags("spell_data", "spellData")),
        "Summoner spell by id.",
    ),
    _op(
        "get_versions",
        "/versions",
        list[str],
        (_region(),),
        "Data dragon versions, newest first.",
    ),
)

MODULE = ApiModule(
    name="lol-static-data",
    version="v1.2",
    description="Game catalogue data.",
    entities=(
        ChampionListDto,
        ChampionDto,
        ChampionSpellDto,
        ImageDto,
        InfoDto,
        PassiveDto,
        RecommendedDto,
        BlockDto,
        BlockItemDto,
        SkinDto,
        StatsDto,
        LevelTipDto,
        SpellVarsDto,
        ItemListDto,
        BasicDataDto,
        ItemDto,
        GroupDto,
        ItemTreeDto,
        GoldDto,
        MetaDataDto,
        BasicDataStatsDto,
        LanguageStringsDto,
        MapDataDto,
        MapDetailsDto,
        MasteryListDto,
        MasteryDto,
        MasteryTreeDto,
        MasteryTreeListDto,
        MasteryTreeItemDto,
        RealmDto,
        RuneListDto,
        RuneDto,
        SummonerSpellListDto,
        SummonerSpellDto,
    ),
    operations=OPERATIONS,
    protocol=StaticDataApi,
)
