"""FastMCP server exposing NPC conversion as MCP tools.

Tools:
  - list_source_formats()                 : known source formats and support
  - convert_npcs(content, source_format)  : parse + convert a saves.yml text
  - convert_npcs_to_yaml(content, ...)    : same, returning npcs.yml text

Usage:
    uv run python -m backend.mcp_server
"""

from mcp.server.fastmcp import FastMCP

from backend.conversion import convert_text
from npc_converter.export import to_yaml
from npc_converter.transform import source_formats

mcp = FastMCP("fancynpcs-converter")


@mcp.tool()
def list_source_formats() -> list[dict]:
    """List the source formats a document can be converted from."""
    return source_formats()


@mcp.tool()
def convert_npcs(content: str, source_format: str = "citizens") -> dict:
    """Convert NPC save file text to FancyNPCs. Returns {success, data, stats} or {success, error}."""
    _, envelope = convert_text(content, source_format)
    return envelope


@mcp.tool()
def convert_npcs_to_yaml(content: str, source_format: str = "citizens") -> str:
    """Convert NPC save file text and return the FancyNPCs npcs.yml content."""
    _, envelope = convert_text(content, source_format)
    if not envelope["success"]:
        raise ValueError(envelope["error"])
    return to_yaml(envelope["data"], source_format)


if __name__ == "__main__":
    mcp.run()
