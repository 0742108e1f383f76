"""
Type definitions for Google Docs MCP Suggestions Server.

The snapshot types mirror the parts of the Docs API ``Document`` resource
that can carry suggestions. ``from_api`` constructors fill every absent
field with an empty default, so code walking a snapshot never needs to
check for missing keys.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# --- Inline Elements ---
@dataclass
class TextRun:
    """A run of text inside a paragraph."""

    content: str = ""
    suggested_insertion_ids: list[str] = field(default_factory=list)
    suggested_deletion_ids: list[str] = field(default_factory=list)
    suggested_text_style_changes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict) -> "TextRun":
        text_style = data.get("textStyle") or {}
        return cls(
            content=data.get("content") or "",
            suggested_insertion_ids=list(data.get("suggestedInsertionIds") or []),
            suggested_deletion_ids=list(data.get("suggestedDeletionIds") or []),
            suggested_text_style_changes=dict(
                text_style.get("suggestedTextStyleChanges") or {}
            ),
        )


@dataclass
class OtherInline:
    """Any paragraph element that is not a text run (inline image, page break, ...)."""

    kind: str = "unknown"


InlineElement = TextRun | OtherInline


def parse_inline_element(data: dict) -> InlineElement:
    """Build the inline variant for a raw ``ParagraphElement``."""
    if "textRun" in data:
        return TextRun.from_api(data["textRun"] or {})
    kind = next(
        (key for key in data if key not in ("startIndex", "endIndex")), "unknown"
    )
    return OtherInline(kind=kind)


# --- Block Elements ---
@dataclass
class Paragraph:
    """A paragraph and its inline elements."""

    elements: list[InlineElement] = field(default_factory=list)
    suggested_paragraph_style_changes: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableCell:
    """A table cell holding its own sequence of block elements."""

    content: list["BlockElement"] = field(default_factory=list)


@dataclass
class TableRow:
    """A table row."""

    cells: list[TableCell] = field(default_factory=list)


@dataclass
class Table:
    """A table; cells may contain further tables."""

    rows: list[TableRow] = field(default_factory=list)


@dataclass
class OtherBlock:
    """A structural element with no suggestions of interest (section break, TOC, ...)."""

    kind: str = "unknown"


BlockElement = Paragraph | Table | OtherBlock


def parse_block_elements(content: list[dict] | None) -> list[BlockElement]:
    """Build block variants for a raw ``StructuralElement`` list."""
    return [parse_block_element(item) for item in content or []]


def parse_block_element(data: dict) -> BlockElement:
    """Build the block variant for a single raw ``StructuralElement``."""
    if "paragraph" in data:
        para = data["paragraph"] or {}
        paragraph_style = para.get("paragraphStyle") or {}
        return Paragraph(
            elements=[parse_inline_element(elem) for elem in para.get("elements") or []],
            suggested_paragraph_style_changes=dict(
                paragraph_style.get("suggestedParagraphStyleChanges") or {}
            ),
        )

    if "table" in data:
        table = data["table"] or {}
        return Table(
            rows=[
                TableRow(
                    cells=[
                        TableCell(content=parse_block_elements(cell.get("content")))
                        for cell in row.get("tableCells") or []
                    ]
                )
                for row in table.get("tableRows") or []
            ]
        )

    kind = next(
        (key for key in data if key not in ("startIndex", "endIndex")), "unknown"
    )
    return OtherBlock(kind=kind)


# --- Document Snapshot ---
@dataclass
class DocumentSnapshot:
    """A document fetched with suggestions shown inline."""

    title: str = "Untitled"
    suggested_named_styles_changes: dict[str, Any] = field(default_factory=dict)
    suggested_document_style_changes: dict[str, Any] = field(default_factory=dict)
    body: list[BlockElement] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "DocumentSnapshot":
        """
        Build a snapshot from a Docs API ``documents.get`` response.

        Args:
            data: Raw document JSON

        Returns:
            DocumentSnapshot with all absent fields defaulted
        """
        body = data.get("body") or {}
        return cls(
            title=data.get("title") or "Untitled",
            suggested_named_styles_changes=dict(
                data.get("suggestedNamedStylesChanges") or {}
            ),
            suggested_document_style_changes=dict(
                data.get("suggestedDocumentStyleChanges") or {}
            ),
            body=parse_block_elements(body.get("content")),
        )


# --- Suggestion Report Types ---
class SuggestionCategory(Enum):
    """Kinds of suggestion found in a document, with their display labels."""

    NAMED_STYLE = "Named style"
    DOCUMENT_STYLE = "Document style"
    PARAGRAPH_STYLE = "Paragraph style"
    TEXT_INSERTION = "insertion"
    TEXT_DELETION = "deletion"
    TEXT_STYLE = "Text style"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_document_level(self) -> bool:
        return self in (SuggestionCategory.NAMED_STYLE, SuggestionCategory.DOCUMENT_STYLE)

    @property
    def is_text_change(self) -> bool:
        return self in (SuggestionCategory.TEXT_INSERTION, SuggestionCategory.TEXT_DELETION)


@dataclass(frozen=True)
class SuggestionRecord:
    """A single suggestion and where it was found."""

    category: SuggestionCategory
    suggestion_id: str
    path: str | None = None  # None for document-level suggestions
    snippet: str | None = None  # Only for insertions and deletions


@dataclass
class ToolResponse:
    """Text payload returned by a tool, with its error flag."""

    text: str
    is_error: bool = False

    def to_dict(self) -> dict:
        """Render as an MCP tool result payload."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }


# --- Custom Exceptions ---
class AuthError(Exception):
    """Raised when Google API credentials cannot be loaded."""

    def __init__(self, message: str = "Failed to authorize Google API client."):
        super().__init__(message)
        self.name = "AuthError"
