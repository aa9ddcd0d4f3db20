"""Skin texture decoding and display name cleanup for Citizens entries."""

import base64
import json
import logging
import re

from npc_converter.models import GenericValue, Skin
from npc_converter.parser import lookup

logger = logging.getLogger(__name__)

# &0-&9, &a-&f colors; &k-&o formats; &r reset
_FORMAT_CODE_RE = re.compile(r"&[0-9a-fk-or]")

# Name Citizens shows for an NPC without one; stored raw as "(&7Rechtsklick&)"
UNNAMED_PLACEHOLDER = "(&7Rechtsklick&)"
EMPTY_DISPLAY_NAME = "<empty>"


def strip_format_codes(text: str) -> str:
    """Remove legacy &-codes: "&6Example &lNPC" → "Example NPC"."""
    return _FORMAT_CODE_RE.sub("", text)


def clean_display_name(raw_name: str) -> str:
    """Strip format codes; the unnamed placeholder becomes "<empty>"."""
    cleaned = strip_format_codes(raw_name)
    if cleaned == strip_format_codes(UNNAMED_PLACEHOLDER):
        return EMPTY_DISPLAY_NAME
    return cleaned


def decode_texture(texture_raw: GenericValue | None) -> Skin:
    """Resolve a skin from a base64-encoded textures payload.

    The payload is the profile property Mojang's session server signs:
      {"textures": {"SKIN": {"url": "...", "metadata": {"model": "slim"}}}}

    Returns the default "steve" skin when there is no payload or it cannot be
    decoded; decode errors are logged, never raised.
    """
    if texture_raw is None or texture_raw == "" or texture_raw == {}:
        return Skin()
    if not isinstance(texture_raw, str):
        logger.warning(
            f"Failed to decode textureRaw: expected a string, got {type(texture_raw).__name__}"
        )
        return Skin()

    try:
        decoded = base64.b64decode(texture_raw).decode("utf-8")
        texture_data = json.loads(decoded)
    except ValueError as e:
        logger.warning(f"Failed to decode textureRaw: {e}")
        return Skin()

    url = lookup(texture_data, "textures", "SKIN", "url")
    if not url or not isinstance(url, str):
        logger.warning("textureRaw has no textures.SKIN.url, using default skin")
        return Skin()

    model = lookup(texture_data, "textures", "SKIN", "metadata", "model")
    return Skin(identifier=url, variant="SLIM" if model == "slim" else "CLASSIC")
