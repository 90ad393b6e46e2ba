#!/usr/bin/env python3
"""Run the rover mission API with uvicorn.

Missions are created over HTTP and pushed to viewers over WebSocket; see
rover/server/main.py for the endpoints.
"""

import argparse

import uvicorn

from rover.utils.constants import SERVER_HOST, SERVER_PORT

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def main():
    """Parse server options and start uvicorn."""
    parser = argparse.ArgumentParser(
        description="Pragyan Rover - mission API server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # Development server with auto-reload
  %(prog)s --port 9100          # Different port
  %(prog)s --no-reload --log-level warning
        """,
    )
    parser.add_argument(
        "--host",
        default=SERVER_HOST,
        help=f"Interface to bind (default: {SERVER_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=SERVER_PORT,
        help=f"Port to listen on (default: {SERVER_PORT})",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="info",
        help="uvicorn log level (default: info)",
    )
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable auto-reload on code changes",
    )
    args = parser.parse_args()

    uvicorn.run(
        "rover.server.main:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
