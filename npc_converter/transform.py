"""Source-format dispatch and the Citizens → FancyNPCs mapping.

transform() is the single entry point. Each supported SourceFormat maps to one
converter function taking the parsed document and returning a ConversionResult;
formats without an entry in _CONVERTERS raise UnsupportedFormatError. Adding a
format means adding its converter to _CONVERTERS.

Citizens saves.yml layout (only the keys that are read):

    npc:
      '0':
        name: '&6Bob'
        uuid: 11111111-1111-1111-1111-111111111111
        traits:
          type: PLAYER
          owner:
            uuid: ...
          location:
            world: world
            x: 1.0
            ...
          lookclose:
            enabled: true
            range: 5.0
          skintrait:
            textureRaw: <base64 textures JSON>

Every lookup goes through parser.lookup(), since the lenient parser may not
recover the intended nesting.
"""

import logging
from collections.abc import Callable

from npc_converter.models import (
    NIL_UUID,
    ConversionResult,
    ConversionStats,
    FancyNpc,
    GenericDocument,
    GenericValue,
    Location,
    SourceFormat,
)
from npc_converter.parser import lookup
from npc_converter.texture import clean_display_name, decode_texture

logger = logging.getLogger(__name__)

LOCATION_FIELDS = ("world", "x", "y", "z", "yaw", "pitch")


class ConversionError(Exception):
    """Base for failures reported to the user as a single message."""


class InvalidSourceFormat(ConversionError):
    """Raised when the selector names no known source format."""


class UnsupportedFormatError(ConversionError):
    """Raised for known source formats that have no converter yet."""


class MalformedEntryError(ConversionError):
    """Raised when the document or one NPC entry lacks a required field."""

    def __init__(self, message: str, entry_key: str | None = None) -> None:
        super().__init__(message)
        self.entry_key = entry_key


def resolve_source_format(value: str | SourceFormat) -> SourceFormat:
    """Turn a selector string ("citizens", ...) into a SourceFormat."""
    try:
        return SourceFormat(value)
    except ValueError:
        raise InvalidSourceFormat(f"Invalid source format: {value!r}") from None


# ── Citizens ───────────────────────────────────────────────


def _citizens_location(entry_key: str, entry: GenericDocument) -> Location:
    location = lookup(entry, "traits", "location")
    if not isinstance(location, dict):
        raise MalformedEntryError(
            f"NPC {entry_key!r} has no traits.location", entry_key
        )
    # A bare "world:" line parses to {}, which counts as missing
    missing = [f for f in LOCATION_FIELDS if location.get(f, {}) == {}]
    if missing:
        raise MalformedEntryError(
            f"NPC {entry_key!r} location is missing {', '.join(missing)}", entry_key
        )
    try:
        return Location(
            world=str(location["world"]),
            **{f: location[f] for f in LOCATION_FIELDS[1:]},
        )
    except ValueError as e:
        # pydantic.ValidationError, e.g. a coordinate that is not a number
        raise MalformedEntryError(
            f"NPC {entry_key!r} has an invalid location", entry_key
        ) from e


def convert_citizens_npc(entry_key: str, entry: GenericValue) -> tuple[str, FancyNpc]:
    """Map one Citizens entry to (uuid, FancyNpc)."""
    if not isinstance(entry, dict):
        raise MalformedEntryError(f"NPC {entry_key!r} is not a mapping", entry_key)

    uuid = lookup(entry, "uuid")
    if uuid is None or uuid == {}:
        raise MalformedEntryError(f"NPC {entry_key!r} has no uuid", entry_key)

    raw_name = lookup(entry, "name")
    raw_name = "" if raw_name is None or raw_name == {} else str(raw_name)

    npc = FancyNpc(
        name=f"converted_{entry_key}",
        creator=str(lookup(entry, "traits", "owner", "uuid") or NIL_UUID),
        display_name=clean_display_name(raw_name),
        type=str(lookup(entry, "traits", "type") or "PLAYER"),
        location=_citizens_location(entry_key, entry),
        turn_to_player=bool(lookup(entry, "traits", "lookclose", "enabled")),
        turn_to_player_distance=_number_or(
            lookup(entry, "traits", "lookclose", "range"), -1
        ),
        skin=decode_texture(lookup(entry, "traits", "skintrait", "textureRaw")),
    )
    return str(uuid), npc


def _number_or(value: GenericValue | None, default: int | float) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value:
        return default
    return value


def convert_citizens(
    document: GenericDocument, skip_malformed: bool = False
) -> ConversionResult:
    """Convert every entry under the top-level `npc` section.

    An empty document yields an empty result. A missing `npc` section always
    fails; a malformed entry fails the batch unless skip_malformed is set, in
    which case it is logged and counted in stats.skipped_count.
    """
    if not document:
        return ConversionResult()

    entries = lookup(document, "npc")
    if not isinstance(entries, dict):
        raise MalformedEntryError("Document has no 'npc' section")

    result = ConversionResult()
    skipped = 0
    for entry_key, entry in entries.items():
        try:
            uuid, npc = convert_citizens_npc(entry_key, entry)
        except MalformedEntryError as e:
            if not skip_malformed:
                raise
            logger.warning(f"Skipping NPC {entry_key!r}: {e}")
            skipped += 1
            continue
        result.npcs[uuid] = npc

    result.stats = ConversionStats(
        original_count=len(entries),
        converted_count=len(result.npcs),
        skipped_count=skipped,
    )
    return result


# ── Dispatch ───────────────────────────────────────────────


_CONVERTERS: dict[SourceFormat, Callable[..., ConversionResult]] = {
    SourceFormat.CITIZENS: convert_citizens,
}


def is_supported(source: SourceFormat) -> bool:
    return source in _CONVERTERS


def source_formats() -> list[dict]:
    """Every known source format, with whether it has a converter."""
    return [
        {"id": fmt.value, "label": fmt.label, "supported": is_supported(fmt)}
        for fmt in SourceFormat
    ]


def transform(
    document: GenericDocument,
    source: str | SourceFormat,
    skip_malformed: bool = False,
) -> ConversionResult:
    """Convert a parsed document from the given source format to FancyNPCs.

    Raises ConversionError (InvalidSourceFormat, UnsupportedFormatError,
    MalformedEntryError) with a user-facing message.
    """
    source_format = resolve_source_format(source)
    converter = _CONVERTERS.get(source_format)
    if converter is None:
        raise UnsupportedFormatError(f"{source_format.label} conversion not yet implemented")
    result = converter(document, skip_malformed=skip_malformed)
    logger.info(
        "Conversion successful source=%s original=%d converted=%d skipped=%d",
        source_format.value,
        result.stats.original_count,
        result.stats.converted_count,
        result.stats.skipped_count,
    )
    return result
