"""
Suggestion reporting for Google Docs Suggestions MCP Server.

Flattens the suggestions scattered through a document tree into a numbered,
human-readable report. Paths in the report locate each suggestion:

    [2]                          third element of the body
    [2].elements[1]              second text run of that paragraph
    [3].table[0][1][0]           first element in row 0, cell 1 of a table
"""

from googleapiclient.errors import HttpError

from gdocs_suggestions_mcp.api.documents import fetch_document
from gdocs_suggestions_mcp.types import (
    BlockElement,
    DocumentSnapshot,
    Paragraph,
    SuggestionCategory,
    SuggestionRecord,
    Table,
    TextRun,
    ToolResponse,
)
from gdocs_suggestions_mcp.utils import log


# --- Extraction ---
def extract_suggestions(snapshot: DocumentSnapshot) -> list[SuggestionRecord]:
    """
    Collect every suggestion in a document, in document order.

    Document-level style suggestions come first, followed by a depth-first
    walk of the body (table rows, then cells, in index order).

    Args:
        snapshot: Document fetched with suggestions inline

    Returns:
        List of SuggestionRecord, empty if the document has no body content
    """
    records: list[SuggestionRecord] = []

    if not snapshot.body:
        return records

    for change_id in snapshot.suggested_named_styles_changes:
        records.append(SuggestionRecord(SuggestionCategory.NAMED_STYLE, change_id))

    for change_id in snapshot.suggested_document_style_changes:
        records.append(SuggestionRecord(SuggestionCategory.DOCUMENT_STYLE, change_id))

    _collect_from_content(snapshot.body, "", records)
    return records


def _collect_from_content(
    content: list[BlockElement], path: str, records: list[SuggestionRecord]
) -> None:
    for index, element in enumerate(content):
        current_path = f"{path}[{index}]"

        if isinstance(element, Paragraph):
            _collect_from_paragraph(element, current_path, records)
        elif isinstance(element, Table):
            for row_index, row in enumerate(element.rows):
                for cell_index, cell in enumerate(row.cells):
                    _collect_from_content(
                        cell.content,
                        f"{current_path}.table[{row_index}][{cell_index}]",
                        records,
                    )


def _collect_from_paragraph(
    paragraph: Paragraph, path: str, records: list[SuggestionRecord]
) -> None:
    for change_id in paragraph.suggested_paragraph_style_changes:
        records.append(
            SuggestionRecord(SuggestionCategory.PARAGRAPH_STYLE, change_id, path=path)
        )

    for elem_index, elem in enumerate(paragraph.elements):
        if not isinstance(elem, TextRun):
            continue

        elem_path = f"{path}.elements[{elem_index}]"
        snippet = elem.content.strip()

        for suggestion_id in elem.suggested_insertion_ids:
            records.append(
                SuggestionRecord(
                    SuggestionCategory.TEXT_INSERTION, suggestion_id, elem_path, snippet
                )
            )
        for suggestion_id in elem.suggested_deletion_ids:
            records.append(
                SuggestionRecord(
                    SuggestionCategory.TEXT_DELETION, suggestion_id, elem_path, snippet
                )
            )
        for change_id in elem.suggested_text_style_changes:
            records.append(
                SuggestionRecord(SuggestionCategory.TEXT_STYLE, change_id, path=elem_path)
            )


# --- Formatting ---
def format_suggestion(record: SuggestionRecord) -> str:
    """Render one suggestion as a single line (without its number)."""
    category = record.category
    if category.is_text_change:
        return (
            f'Text {category.label} at {record.path}: "{record.snippet}" '
            f"(ID: {record.suggestion_id})"
        )
    if category.is_document_level or record.path is None:
        return f"{category.label} suggestion (ID: {record.suggestion_id})"
    return f"{category.label} suggestion at {record.path} (ID: {record.suggestion_id})"


def format_suggestions(title: str, records: list[SuggestionRecord]) -> str:
    """
    Render a suggestions report.

    Args:
        title: Document title
        records: Suggestions in document order

    Returns:
        A "no suggestions" sentence, or a header followed by one numbered line per suggestion
    """
    if not records:
        return f'Document "{title}" has no suggestions.'

    lines = [f'Found {len(records)} suggestions in "{title}":']
    for index, record in enumerate(records, start=1):
        lines.append(f"{index}. {format_suggestion(record)}")
    return "\n".join(lines)


# --- Tool Entry Point ---
def _error_message(error: Exception) -> str:
    if isinstance(error, HttpError) and getattr(error, "reason", None):
        return error.reason
    return str(error) or type(error).__name__


def get_suggestions(document_id: str, docs=None) -> ToolResponse:
    """
    Fetch a document and report its suggestions.

    Any error while fetching or extracting becomes an error response;
    a partial report is never returned.

    Args:
        document_id: The ID of the Google Document
        docs: Google Docs API client (defaults to the shared authorized client)

    Returns:
        ToolResponse with the report text, or the error text and is_error set
    """
    log(f"Getting suggestions for document: {document_id}")

    try:
        snapshot = fetch_document(document_id, docs)
        records = extract_suggestions(snapshot)
        text = format_suggestions(snapshot.title, records)
    except Exception as e:
        error_message = _error_message(e)
        log(f"Error getting suggestions for document {document_id}: {error_message}")
        return ToolResponse(f"Error getting suggestions: {error_message}", is_error=True)

    log(f"Found {len(records)} suggestions in document {document_id}")
    return ToolResponse(text)
