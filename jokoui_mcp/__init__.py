"""
Joko UI component catalog and retrieval service.

Lists, searches, fetches and writes Joko UI components over MCP and HTTP.
"""

__version__ = "2.0.0"
