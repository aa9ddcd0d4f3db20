"""Tests for skin texture decoding and display name cleanup."""

import base64
import logging

from conftest import SKIN_URL, encode_texture
from npc_converter.texture import (
    clean_display_name,
    decode_texture,
    strip_format_codes,
)


# ── Display names ──────────────────────────────────────────


def test_strip_color_and_format_codes():
    assert strip_format_codes("&6Example &lNPC") == "Example NPC"


def test_strip_reset_and_uppercase_untouched():
    assert strip_format_codes("&rA&0B&fC") == "ABC"
    # Only lowercase codes are recognised
    assert strip_format_codes("&AGreen") == "&AGreen"


def test_strip_leaves_other_ampersands():
    assert strip_format_codes("Tom & Jerry &z") == "Tom & Jerry &z"


def test_clean_display_name_placeholder():
    assert clean_display_name("(&7Rechtsklick&)") == "<empty>"


def test_clean_display_name_plain():
    assert clean_display_name("&6Bob") == "Bob"
    assert clean_display_name("") == ""


def test_clean_display_name_similar_to_placeholder():
    assert clean_display_name("(&7Rechtsklick)") == "(Rechtsklick)"


# ── decode_texture ─────────────────────────────────────────


def test_no_payload_is_steve():
    skin = decode_texture(None)
    assert skin.identifier == "steve"
    assert skin.variant == "CLASSIC"
    assert skin.mirror_skin is False


def test_empty_payload_is_steve():
    assert decode_texture("").identifier == "steve"
    assert decode_texture({}).identifier == "steve"


def test_slim_texture():
    skin = decode_texture(encode_texture(model="slim"))
    assert skin.identifier == SKIN_URL
    assert skin.variant == "SLIM"


def test_classic_texture_without_metadata():
    skin = decode_texture(encode_texture())
    assert skin.identifier == SKIN_URL
    assert skin.variant == "CLASSIC"


def test_unknown_model_is_classic():
    skin = decode_texture(encode_texture(model="wide"))
    assert skin.variant == "CLASSIC"


def test_invalid_base64_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        skin = decode_texture("not base64!!!")
    assert skin.identifier == "steve"
    assert skin.variant == "CLASSIC"
    assert "Failed to decode textureRaw" in caplog.text


def test_non_json_payload_falls_back():
    raw = base64.b64encode(b"definitely not json").decode()
    assert decode_texture(raw).identifier == "steve"


def test_non_utf8_payload_falls_back():
    raw = base64.b64encode(b"\xff\xfe\x00").decode()
    assert decode_texture(raw).identifier == "steve"


def test_payload_without_url_falls_back():
    skin = decode_texture(encode_texture(url=None, model="slim"))
    assert skin.identifier == "steve"
    assert skin.variant == "CLASSIC"


def test_json_array_payload_falls_back():
    raw = base64.b64encode(b"[1, 2, 3]").decode()
    assert decode_texture(raw).identifier == "steve"


def test_non_string_payload_is_logged(caplog):
    with caplog.at_level(logging.WARNING):
        skin = decode_texture(12345)
    assert skin.identifier == "steve"
    assert "Failed to decode textureRaw: expected a string, got int" in caplog.text
