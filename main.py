# =============================================================================
# main.py  —  Entry Point for the Interzoid Data Quality MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py                          # stdio (local agents)
#   uv run python main.py --transport http         # streamable HTTP on :8080
#   interzoid-mcp --transport http --port 9000     # installed console script
#
# WHAT HAPPENS:
#   1. .env is loaded (INTERZOID_API_KEY, INTERZOID_BASE_URL, ...)
#   2. Settings are snapshotted once from the environment
#   3. The FastMCP server is built with one tool per Interzoid API
#   4. The chosen transport is started and serves until interrupted
#
# AUTHENTICATION:
#   stdio: set INTERZOID_API_KEY, or leave it unset to use x402 payments.
#   http:  each client may send "Authorization: Bearer <key>"; otherwise
#          the server key (if any) is used, else x402.
# =============================================================================

import argparse
import logging
from typing import Optional, Sequence

from dotenv import load_dotenv

from core.config import Settings
from tools.mcp_server import configure_logging, create_server


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interzoid Data Quality APIs as MCP tools")
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default="stdio",
        help="Transport type: stdio or http (default: stdio)",
    )
    parser.add_argument("--port", type=int, default=8080, help="Port for HTTP transport (default: 8080)")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address for HTTP transport (default: 0.0.0.0)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    # Must happen before Settings.from_env() reads the environment.
    load_dotenv()

    args = parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    mcp = create_server(settings)

    if args.transport == "stdio":
        logging.info("Starting Interzoid MCP server (stdio transport)...")
        mcp.run()
    else:
        logging.info("Starting Interzoid MCP server (streamable HTTP transport) on %s:%d...", args.host, args.port)
        logging.info("MCP endpoint available at http://localhost:%d/mcp", args.port)
        mcp.run(transport="http", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
