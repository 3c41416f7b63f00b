# =============================================================================
# usescraper/__init__.py
# =============================================================================
# This package contains the scraping logic behind the UseScraper MCP server:
# the tool descriptor, argument validation, configuration and the HTTP
# adapter that talks to api.usescraper.com.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports the MCP SDK.  The protocol wiring lives
#   in usescraper_mcp/; this package can be driven from a bare Python REPL
#   (given an API key) and is tested without a protocol session.
# =============================================================================
