"""Core domain models.

The parser produces plain dicts (GenericDocument); the transformer builds the
FancyNPCs records below and dumps them back to plain dicts by alias.
Pydantic is used for the target shape and for the result returned to callers.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Scalar = Union[bool, int, float, str]
GenericValue = Union[Scalar, "GenericDocument"]
GenericDocument = dict[str, GenericValue]

NIL_UUID = "00000000-0000-0000-0000-000000000000"
MAX_VISIBILITY_DISTANCE = 2147483647  # Integer.MAX_VALUE on the Java side


class SourceFormat(str, Enum):
    """Legacy plugin schemas a document can be converted from."""

    CITIZENS = "citizens"
    ZNPCS = "znpcs"
    ZNPCSPLUS = "znpcsplus"

    @property
    def label(self) -> str:
        return {
            SourceFormat.CITIZENS: "Citizens",
            SourceFormat.ZNPCS: "zNPCs",
            SourceFormat.ZNPCSPLUS: "zNPCsPlus",
        }[self]


SkinVariant = Literal["CLASSIC", "SLIM"]


class _FancyModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Location(_FancyModel):
    world: str
    x: float
    y: float
    z: float
    yaw: float
    pitch: float


class Skin(_FancyModel):
    identifier: str = "steve"  # literal skin name or texture URL
    variant: SkinVariant = "CLASSIC"
    mirror_skin: bool = False


class Attributes(_FancyModel):
    shaking: str = "false"  # FancyNPCs stores attribute values as strings
    pose: str = "standing"


class FancyNpc(_FancyModel):
    """One NPC in the FancyNPCs `npcs` section."""

    name: str
    creator: str = NIL_UUID
    display_name: str
    type: str = "PLAYER"
    location: Location
    show_in_tab: bool = False
    spawn_entity: bool = True
    collidable: bool = False
    glowing: bool = False
    glowing_color: str = "dark_aqua"
    turn_to_player: bool = False
    turn_to_player_distance: int | float = -1  # -1 = unbounded
    interaction_cooldown: float = 0.0
    scale: float = 1.0
    visibility_distance: int = Field(
        default=MAX_VISIBILITY_DISTANCE, alias="visibility_distance"
    )
    skin: Skin = Field(default_factory=Skin)
    attributes: Attributes = Field(default_factory=Attributes)


class ConversionStats(_FancyModel):
    original_count: int = 0
    converted_count: int = 0
    skipped_count: int = 0


class ConversionResult(_FancyModel):
    """Converted NPCs keyed by uuid, plus counts for reporting."""

    npcs: dict[str, FancyNpc] = Field(default_factory=dict)
    stats: ConversionStats = Field(default_factory=ConversionStats)

    def document(self) -> GenericDocument:
        """The FancyNPCs document: {"npcs": {uuid: record}}."""
        return {
            "npcs": {
                uuid: npc.model_dump(by_alias=True)
                for uuid, npc in self.npcs.items()
            }
        }
