"""Tests for npc_converter.models."""

import pytest
from pydantic import ValidationError

from npc_converter.models import (
    NIL_UUID,
    ConversionResult,
    ConversionStats,
    FancyNpc,
    Location,
    Skin,
    SourceFormat,
)

LOCATION = {"world": "world", "x": 0.0, "y": 64.0, "z": 0.0, "yaw": 0.0, "pitch": 0.0}


class TestSourceFormat:
    def test_values(self) -> None:
        assert [f.value for f in SourceFormat] == ["citizens", "znpcs", "znpcsplus"]

    def test_labels(self) -> None:
        assert SourceFormat.ZNPCSPLUS.label == "zNPCsPlus"

    def test_unknown_rejected(self) -> None:
        with pytest.raises(ValueError):
            SourceFormat("fancynpcs")


class TestSkin:
    def test_defaults(self) -> None:
        assert Skin().model_dump(by_alias=True) == {
            "identifier": "steve",
            "variant": "CLASSIC",
            "mirrorSkin": False,
        }

    def test_invalid_variant_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Skin(variant="WIDE")


class TestFancyNpc:
    def test_defaults(self) -> None:
        npc = FancyNpc(name="converted_x", display_name="X", location=Location(**LOCATION))
        assert npc.creator == NIL_UUID
        assert npc.type == "PLAYER"
        assert npc.spawn_entity is True
        assert npc.glowing_color == "dark_aqua"
        assert npc.turn_to_player_distance == -1
        assert npc.visibility_distance == 2147483647
        assert npc.attributes.shaking == "false"
        assert npc.attributes.pose == "standing"

    def test_dump_uses_wire_names(self) -> None:
        npc = FancyNpc(name="n", display_name="d", location=Location(**LOCATION))
        dumped = npc.model_dump(by_alias=True)
        assert "displayName" in dumped
        assert "showInTab" in dumped
        assert "turnToPlayerDistance" in dumped
        # FancyNPCs reads this one in snake_case
        assert "visibility_distance" in dumped
        assert "visibilityDistance" not in dumped

    def test_accepts_wire_names(self) -> None:
        npc = FancyNpc.model_validate({
            "name": "n",
            "displayName": "d",
            "location": LOCATION,
            "showInTab": True,
            "visibility_distance": 48,
        })
        assert npc.show_in_tab is True
        assert npc.visibility_distance == 48

    def test_location_required(self) -> None:
        with pytest.raises(ValidationError):
            FancyNpc(name="n", display_name="d")


class TestConversionResult:
    def test_empty(self) -> None:
        result = ConversionResult()
        assert result.document() == {"npcs": {}}
        assert result.stats.model_dump(by_alias=True) == {
            "originalCount": 0,
            "convertedCount": 0,
            "skippedCount": 0,
        }

    def test_stats_by_field_name(self) -> None:
        stats = ConversionStats(original_count=3, converted_count=2, skipped_count=1)
        assert stats.model_dump(by_alias=True)["convertedCount"] == 2
