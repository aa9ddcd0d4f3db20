"""Parse + transform wrapped in the {success, data, stats} response envelope.

Shared by the HTTP routes and the MCP server. Failures become
{"success": False, "error": <message>} with an HTTP-style status code; no
exception or traceback crosses this boundary.
"""

import logging
from typing import Any

from npc_converter.models import ConversionResult
from npc_converter.parser import parse
from npc_converter.transform import ConversionError, transform

logger = logging.getLogger(__name__)

Envelope = dict[str, Any]


def success_envelope(result: ConversionResult) -> Envelope:
    return {
        "success": True,
        "data": result.document(),
        "stats": result.stats.model_dump(by_alias=True),
    }


def error_envelope(message: str) -> Envelope:
    return {"success": False, "error": message}


def convert_document(
    document: dict | None, source_format: str, skip_malformed: bool = False
) -> tuple[int, Envelope]:
    """Convert an already-parsed document. Returns (status_code, envelope)."""
    if document is None:
        return 400, error_envelope("No data provided")
    try:
        result = transform(document, source_format, skip_malformed=skip_malformed)
    except ConversionError as e:
        logger.warning(f"Conversion rejected: {e}")
        return 400, error_envelope(str(e))
    except Exception:
        logger.exception("Conversion error")
        return 500, error_envelope("Conversion failed")
    return 200, success_envelope(result)


def convert_text(
    content: str, source_format: str, skip_malformed: bool = False
) -> tuple[int, Envelope]:
    """Parse markup text, then convert it."""
    if not content.strip():
        return 400, error_envelope("No data provided")
    return convert_document(parse(content), source_format, skip_malformed)
