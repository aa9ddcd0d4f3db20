"""Markup export of converted documents.

Output is plain YAML as FancyNPCs reads it from npcs.yml. Downloads get a
short comment header naming the source format and original file, rendered
from a Handlebars template.
"""

from collections.abc import Callable
from typing import Any

import pybars
import yaml

from npc_converter.models import ConversionResult, GenericDocument, SourceFormat

DEFAULT_FILENAME = "npcs.yml"

HEADER_TEMPLATE = (
    "# Converted from {{{source}}} to FancyNPCs format\n"
    "{{#if original_file}}# Original file: {{{original_file}}}\n{{/if}}"
    "\n"
)

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


def render_header(source_format: SourceFormat | str, original_file: str | None = None) -> str:
    """Render the comment block placed above a converted document."""
    compiled = _cache.get(HEADER_TEMPLATE)
    if compiled is None:
        compiled = _compiler.compile(HEADER_TEMPLATE)
        _cache[HEADER_TEMPLATE] = compiled
    source = source_format.value if isinstance(source_format, SourceFormat) else source_format
    return str(compiled({"source": source, "original_file": original_file or ""}))


class _VerbatimKeyDumper(yaml.SafeDumper):
    """SafeDumper that writes mapping keys exactly as parse() returned them.

    parse() keeps keys verbatim ('0' stays "'0'", 0 stays "0"), so quoting or
    tagging a key here would change it on the next parse.
    """

    def _plain_key(self) -> bool:
        value = self.event.value
        return (
            self.simple_key_context
            and bool(value)
            and value == value.strip()
            and "\n" not in value
            and ":" not in value
            and not value.startswith("#")
        )

    def choose_scalar_style(self):
        if self._plain_key():
            return ""
        return super().choose_scalar_style()

    def process_tag(self):
        if isinstance(self.event, yaml.ScalarEvent) and self._plain_key():
            self.style = ""
            self.prepared_tag = None
            return
        super().process_tag()


def dump_document(document: GenericDocument) -> str:
    """Serialize a document as two-space block YAML, keys in insertion order.

    Lines are never wrapped: textureRaw payloads and URLs stay on one line so
    parser.parse() reads the output back unchanged.
    """
    return yaml.dump(
        document,
        Dumper=_VerbatimKeyDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        indent=2,
        width=float("inf"),
    )


def to_yaml(
    converted: ConversionResult | dict[str, Any],
    source_format: SourceFormat | str | None = None,
    original_file: str | None = None,
) -> str:
    """Serialize a conversion result (or its document) for download."""
    document = converted.document() if isinstance(converted, ConversionResult) else converted
    body = dump_document(document)
    if source_format is None:
        return body
    return render_header(source_format, original_file) + body
