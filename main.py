# =============================================================================
# main.py  —  Entry Point for the Unsplash Image Search MCP Server
# =============================================================================
#
# HOW TO RUN:
#   UNSPLASH_ACCESS_KEY=... uv run python main.py
#
#   Usually you don't run it by hand: an MCP client (Claude Desktop, an IDE,
#   an agent framework) launches it as a subprocess and talks to it over
#   stdin/stdout.  Put the key in the client's server configuration, e.g.:
#
#     "get-image": {
#       "command": "get-image-mcp",
#       "env": {"UNSPLASH_ACCESS_KEY": "<your access key>"}
#     }
#
# WHAT HAPPENS:
#   1. Loads a .env file if there is one
#   2. Reads Settings; exits with status 1 if UNSPLASH_ACCESS_KEY is missing
#   3. Builds UnsplashClient → InvocationHandler → FastMCP server
#   4. Serves MCP over stdio until the client disconnects
# =============================================================================

import sys

from dotenv import load_dotenv

from core.config import ConfigError, Settings
from core.search import InvocationHandler
from core.unsplash import UnsplashClient
from tools.mcp_server import configure_logging, create_server


def main() -> None:
    load_dotenv()

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Please set it in your MCP settings configuration", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)

    client = UnsplashClient(settings.access_key, settings.api_base)
    mcp = create_server(InvocationHandler(client))

    try:
        mcp.run()
    except Exception as e:
        print(f"Server error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
