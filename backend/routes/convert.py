"""Conversion endpoints: JSON document, markup file download, and parse."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from backend.conversion import convert_document, convert_text, error_envelope
from npc_converter.export import DEFAULT_FILENAME, to_yaml
from npc_converter.parser import parse
from npc_converter.transform import source_formats

from .models import ConvertBody, ConvertFileBody, ParseBody

router = APIRouter()

ALLOWED_EXTENSIONS = (".yml", ".yaml")


@router.get("/formats")
async def list_formats():
    """List source formats and whether each has a converter."""
    return source_formats()


@router.post("/parse")
async def parse_markup(body: ParseBody):
    """Parse markup text into the generic document the converter consumes."""
    return parse(body.content)


@router.post("/convert")
async def convert(body: ConvertBody, request: Request):
    """Convert a parsed document to FancyNPCs. Returns {success, data, stats}."""
    status, envelope = convert_document(
        body.document, body.source_format, request.app.state.skip_malformed
    )
    return JSONResponse(envelope, status_code=status)


@router.post("/convert/file")
async def convert_file(body: ConvertFileBody, request: Request):
    """Convert an uploaded .yml file and return npcs.yml as an attachment."""
    if not body.filename.lower().endswith(ALLOWED_EXTENSIONS):
        return JSONResponse(
            error_envelope("Please upload a .yml or .yaml file"), status_code=400
        )

    status, envelope = convert_text(
        body.content, body.source_format, request.app.state.skip_malformed
    )
    if not envelope["success"]:
        return JSONResponse(envelope, status_code=status)

    stats = envelope["stats"]
    return Response(
        content=to_yaml(envelope["data"], body.source_format, body.filename),
        media_type="text/yaml",
        headers={
            "Content-Disposition": f'attachment; filename="{DEFAULT_FILENAME}"',
            "X-Original-Count": str(stats["originalCount"]),
            "X-Converted-Count": str(stats["convertedCount"]),
        },
    )
