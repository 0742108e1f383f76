"""
Document fetching for Google Docs Suggestions MCP Server.
"""

from gdocs_suggestions_mcp.auth import get_docs_client
from gdocs_suggestions_mcp.types import DocumentSnapshot
from gdocs_suggestions_mcp.utils import log

# Shows suggested insertions and deletions inline, each tagged with its change ID
SUGGESTIONS_VIEW_MODE = "SUGGESTIONS_INLINE"


def fetch_document(document_id: str, docs=None) -> DocumentSnapshot:
    """
    Fetch a Google Document with its suggestions shown inline.

    Args:
        document_id: The ID of the Google Document
        docs: Google Docs API client (defaults to the shared authorized client)

    Returns:
        DocumentSnapshot built from the API response

    Raises:
        Exception: Any error raised by the Google API client, unchanged
    """
    if docs is None:
        docs = get_docs_client()

    res = (
        docs.documents()
        .get(documentId=document_id, suggestionsViewMode=SUGGESTIONS_VIEW_MODE)
        .execute()
    )
    log(f"Fetched doc: {document_id}")

    return DocumentSnapshot.from_api(res)
