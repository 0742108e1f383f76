"""
Google Docs Suggestions MCP Server

Main MCP server entry point with all tool definitions.
Uses FastMCP framework for MCP protocol implementation.

IMPORTANT: All logging must use stderr, never stdout.
The MCP protocol uses stdout for JSON-RPC communication.
"""

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from gdocs_suggestions_mcp.api import suggestions
from gdocs_suggestions_mcp.utils import log


# Create MCP server
mcp = FastMCP(
    name="Google Docs Suggestions MCP Server",
    instructions="""
    This MCP server reports pending suggestions in Google Documents.

    Suggestions include suggested text insertions and deletions, and suggested
    changes to text, paragraph, named and document styles. Each is listed with
    its suggestion ID and its position in the document structure.
    """,
)


# === DOCUMENT TOOLS ===


@mcp.tool(name="gdocs_get_suggestions", annotations={"readOnlyHint": True})
def gdocs_get_suggestions(
    documentId: Annotated[str, "ID of the Google Document to get suggestions from"],
) -> str:
    """
    Get suggestions from a Google Document.
    """
    response = suggestions.get_suggestions(documentId)
    if response.is_error:
        raise ToolError(response.text)
    return response.text


def main() -> None:
    """Run the Google Docs Suggestions MCP Server."""
    log("Starting Google Docs Suggestions MCP Server...")
    mcp.run()


if __name__ == "__main__":
    main()
