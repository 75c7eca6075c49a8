"""Data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

PlayerId = str


class SpaceType(str, Enum):
    """Space category."""

    LAND = "LAND"
    OCEAN = "OCEAN"
    COLONY = "COLONY"
    LUNAR_MINE = "LUNAR_MINE"  # The Moon
    COVE = "COVE"
    RESTRICTED = "RESTRICTED"  # The Moon


class SpaceBonus(str, Enum):
    """Static bonus (or restriction) printed on a space."""

    TITANIUM = "TITANIUM"
    STEEL = "STEEL"
    PLANT = "PLANT"
    DRAW_CARD = "DRAW_CARD"
    HEAT = "HEAT"
    OCEAN = "OCEAN"
    MEGACREDITS = "MEGACREDITS"
    ANIMAL = "ANIMAL"
    MICROBE = "MICROBE"
    ENERGY = "ENERGY"
    DATA = "DATA"
    SCIENCE = "SCIENCE"
    ENERGY_PRODUCTION = "ENERGY_PRODUCTION"
    TEMPERATURE = "TEMPERATURE"
    RESTRICTED = "RESTRICTED"  # nothing may be placed here
    ASTEROID = "ASTEROID"
    DELEGATE = "DELEGATE"
    COLONY = "COLONY"


class TileType(str, Enum):
    """Kind of tile placed on a space."""

    GREENERY = "GREENERY"
    OCEAN = "OCEAN"
    CITY = "CITY"

    CAPITAL = "CAPITAL"
    COMMERCIAL_DISTRICT = "COMMERCIAL_DISTRICT"
    ECOLOGICAL_ZONE = "ECOLOGICAL_ZONE"
    INDUSTRIAL_CENTER = "INDUSTRIAL_CENTER"
    LAVA_FLOWS = "LAVA_FLOWS"
    MINING_AREA = "MINING_AREA"
    MINING_RIGHTS = "MINING_RIGHTS"
    MOHOLE_AREA = "MOHOLE_AREA"
    NATURAL_PRESERVE = "NATURAL_PRESERVE"
    NUCLEAR_ZONE = "NUCLEAR_ZONE"
    RESTRICTED_AREA = "RESTRICTED_AREA"
    DEIMOS_DOWN = "DEIMOS_DOWN"
    GREAT_DAM = "GREAT_DAM"
    MAGNETIC_FIELD_GENERATORS = "MAGNETIC_FIELD_GENERATORS"

    # Ares
    BIOFERTILIZER_FACILITY = "BIOFERTILIZER_FACILITY"
    METALLIC_ASTEROID = "METALLIC_ASTEROID"
    SOLAR_FARM = "SOLAR_FARM"
    OCEAN_CITY = "OCEAN_CITY"
    OCEAN_FARM = "OCEAN_FARM"
    OCEAN_SANCTUARY = "OCEAN_SANCTUARY"
    DUST_STORM_MILD = "DUST_STORM_MILD"
    DUST_STORM_SEVERE = "DUST_STORM_SEVERE"
    EROSION_MILD = "EROSION_MILD"
    EROSION_SEVERE = "EROSION_SEVERE"
    MINING_STEEL_BONUS = "MINING_STEEL_BONUS"
    MINING_TITANIUM_BONUS = "MINING_TITANIUM_BONUS"

    # The Moon
    MOON_MINE = "MOON_MINE"
    MOON_HABITAT = "MOON_HABITAT"
    MOON_ROAD = "MOON_ROAD"
    LUNA_TRADE_STATION = "LUNA_TRADE_STATION"

    # Pathfinders
    RED_CITY = "RED_CITY"
    MARTIAN_NATURE_WONDERS = "MARTIAN_NATURE_WONDERS"
    CRASHLANDING = "CRASHLANDING"
    MARS_NOMADS = "MARS_NOMADS"

    # Promos
    WETLANDS = "WETLANDS"
    MAN_MADE_VOLCANO = "MAN_MADE_VOLCANO"
    NEW_HOLLAND = "NEW_HOLLAND"


class Tile(BaseModel):
    """Tile placed on a space."""

    tile_type: TileType
    card: str | None = None  # card that placed this tile
    protected_hazard: bool | None = None


class Ability(str, Enum):
    """Player ability that changes placement rules."""

    IGNORE_PLACEMENT_RESTRICTIONS = "IGNORE_PLACEMENT_RESTRICTIONS"


class Player(BaseModel):
    """The parts of a player that the board cares about."""

    model_config = ConfigDict(frozen=True)

    id: PlayerId
    name: str = ""
    abilities: frozenset[Ability] = frozenset()

    def has_ability(self, ability: Ability) -> bool:
        """Check whether an ability is in effect for this player."""
        return ability in self.abilities

    @property
    def ignores_placement_restrictions(self) -> bool:
        """City and greenery adjacency rules don't apply to this player."""
        return self.has_ability(Ability.IGNORE_PLACEMENT_RESTRICTIONS)


class GameOptions(BaseModel):
    """Game options that change placement rules."""

    model_config = ConfigDict(frozen=True)

    pathfinders_expansion: bool = False
