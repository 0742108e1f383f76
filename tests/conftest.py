"""
Pytest configuration and fixtures for Google Docs Suggestions MCP Server tests.
"""

import pytest
from unittest.mock import MagicMock


@pytest.fixture
def mock_docs_client():
    """
    Provide a mock Google Docs API client.
    """
    return MagicMock()


@pytest.fixture
def sample_document_without_suggestions():
    """
    Provide a plain document matching Google Docs API structure.
    """
    return {
        "title": "Plain Doc",
        "body": {
            "content": [
                {"endIndex": 1, "sectionBreak": {"sectionStyle": {}}},
                {
                    "paragraph": {
                        "elements": [
                            {
                                "startIndex": 1,
                                "endIndex": 25,
                                "textRun": {"content": "This is a test sentence.\n"},
                            }
                        ]
                    }
                },
            ]
        },
    }


@pytest.fixture
def sample_document_with_suggestions():
    """
    Provide a document with suggestions at every level, including a nested table.
    """
    return {
        "title": "Quarterly Report",
        "suggestedNamedStylesChanges": {"suggest.named1": {}},
        "suggestedDocumentStyleChanges": {"suggest.doc1": {}},
        "body": {
            "content": [
                {"endIndex": 1, "sectionBreak": {"sectionStyle": {}}},
                {
                    "paragraph": {
                        "paragraphStyle": {
                            "namedStyleType": "HEADING_1",
                            "suggestedParagraphStyleChanges": {"suggest.para1": {}},
                        },
                        "elements": [
                            {"textRun": {"content": "Intro "}},
                            {
                                "textRun": {
                                    "content": "  new words \n",
                                    "suggestedInsertionIds": ["suggest.ins1"],
                                }
                            },
                        ],
                    }
                },
                {
                    "table": {
                        "rows": 1,
                        "columns": 2,
                        "tableRows": [
                            {
                                "tableCells": [
                                    {
                                        "content": [
                                            {
                                                "paragraph": {
                                                    "elements": [
                                                        {
                                                            "textRun": {
                                                                "content": "old",
                                                                "suggestedDeletionIds": [
                                                                    "suggest.del1"
                                                                ],
                                                            }
                                                        }
                                                    ]
                                                }
                                            }
                                        ]
                                    },
                                    {
                                        "content": [
                                            {
                                                "table": {
                                                    "tableRows": [
                                                        {
                                                            "tableCells": [
                                                                {
                                                                    "content": [
                                                                        {
                                                                            "paragraph": {
                                                                                "elements": [
                                                                                    {
                                                                                        "inlineObjectElement": {
                                                                                            "inlineObjectId": "kix.img"
                                                                                        }
                                                                                    },
                                                                                    {
                                                                                        "textRun": {
                                                                                            "content": "bold me",
                                                                                            "textStyle": {
                                                                                                "suggestedTextStyleChanges": {
                                                                                                    "suggest.style1": {}
                                                                                                }
                                                                                            },
                                                                                        }
                                                                                    },
                                                                                ]
                                                                            }
                                                                        }
                                                                    ]
                                                                }
                                                            ]
                                                        }
                                                    ]
                                                }
                                            }
                                        ]
                                    },
                                ]
                            }
                        ],
                    }
                },
            ]
        },
    }
