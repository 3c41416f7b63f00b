# =============================================================================
# usescraper_mcp/__init__.py
# =============================================================================
# This package contains the MCP server that wraps usescraper/.
#
# ARCHITECTURAL ROLE:
#   usescraper_mcp/ is the translation layer between the MCP protocol and
#   the scraping logic.  It:
#     1. Advertises the tool descriptor from usescraper.tool
#     2. Routes tools/call into usescraper.tool.dispatch()
#     3. Maps domain errors onto JSON-RPC error codes
#     4. Runs the stdio transport and handles shutdown signals
#
# WHAT IT DOES NOT DO:
#   - It does NOT validate arguments itself (usescraper.validation does)
#   - It does NOT talk HTTP (usescraper.client does)
# =============================================================================
