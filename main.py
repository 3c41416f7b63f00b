# =============================================================================
# main.py  —  Entry Point for the UseScraper MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. .env is loaded (USESCRAPER_API_KEY, optional USESCRAPER_TIMEOUT)
#   2. Settings are read; a missing API key stops the process here
#   3. The MCP server connects over stdin/stdout
#   4. "UseScraper MCP server running on stdio" is logged to stderr
#   5. Tool calls are served until Ctrl-C / SIGTERM or stdin closes
#
# CONNECTING A CLIENT:
#   Point any MCP host at this script, e.g. for Claude Desktop:
#
#     "usescraper": {
#       "command": "uv",
#       "args": ["run", "python", "/path/to/main.py"],
#       "env": {"USESCRAPER_API_KEY": "..."}
#     }
# =============================================================================

from usescraper_mcp.mcp_server import main

if __name__ == "__main__":
    main()
