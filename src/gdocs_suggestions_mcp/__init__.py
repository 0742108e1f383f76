"""
Google Docs Suggestions MCP Server

A Model Context Protocol (MCP) server that reports the pending suggestions
(insertions, deletions and style changes) in a Google Document.
"""

__version__ = "1.0.0"
