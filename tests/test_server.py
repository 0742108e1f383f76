"""
Tests for the MCP tool registration.
"""

import pytest
from unittest.mock import patch

from fastmcp.exceptions import ToolError

from gdocs_suggestions_mcp import server
from gdocs_suggestions_mcp.types import ToolResponse

# The decorator may wrap the function in a tool object
_tool_fn = getattr(server.gdocs_get_suggestions, "fn", server.gdocs_get_suggestions)


class TestGetSuggestionsTool:
    """Tests for the gdocs_get_suggestions tool."""

    @patch("gdocs_suggestions_mcp.api.suggestions.get_suggestions")
    def test_returns_report_text(self, mock_get_suggestions):
        """Should return the report on success."""
        mock_get_suggestions.return_value = ToolResponse(
            'Document "Report" has no suggestions.'
        )

        result = _tool_fn(documentId="doc123")

        assert result == 'Document "Report" has no suggestions.'
        mock_get_suggestions.assert_called_once_with("doc123")

    @patch("gdocs_suggestions_mcp.api.suggestions.get_suggestions")
    def test_raises_tool_error_on_failure(self, mock_get_suggestions):
        """Should raise ToolError so the result is flagged as an error."""
        mock_get_suggestions.return_value = ToolResponse(
            "Error getting suggestions: permission denied", is_error=True
        )

        with pytest.raises(ToolError) as exc_info:
            _tool_fn(documentId="doc123")

        assert str(exc_info.value) == "Error getting suggestions: permission denied"


class TestMain:
    """Tests for the console entry point."""

    @patch.object(server.mcp, "run")
    def test_main_runs_server(self, mock_run):
        server.main()
        mock_run.assert_called_once_with()
