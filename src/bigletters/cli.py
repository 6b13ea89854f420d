"""Command-line interface for Big Letters.

Runs the web server, or talks to a running one through the grid API.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from bigletters.domain.models import GRID_SIZE, Grid

logger = logging.getLogger(__name__)

# Darkest first
SHADES = " .:-=+*#%@"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="bigletters",
        description="Big Letters web server and grid client",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/bigletters.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Start the web server")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    subparsers.add_parser("show", help="Print the grid of a running server")

    darken_parser = subparsers.add_parser("darken", help="Darken one cell on a running server")
    darken_parser.add_argument("idx", type=int, help="Row-major cell index")

    return parser.parse_args(argv)


def render_grid(grid: Grid, width: int = GRID_SIZE) -> str:
    """Render a grid as text, one character per cell."""
    lines = []
    for y in range(len(grid.cells) // width):
        row = grid.row(y, width)
        lines.append("".join(SHADES[v * (len(SHADES) - 1) // 255] for v in row))
    return "\n".join(lines)


async def _show(settings) -> None:
    from bigletters.client import GridClient

    async with GridClient(settings.client.base_url, timeout=settings.client.timeout) as client:
        grid = await client.fetch_grid()
    print(render_grid(grid))


async def _darken(settings, idx: int) -> None:
    from bigletters.client import GridClient

    async with GridClient(settings.client.base_url, timeout=settings.client.timeout) as client:
        await client.darken_cell(idx)
    print(f"Darkened cell {idx}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the bigletters CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from bigletters.config.settings import load_settings
    from bigletters.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "serve":
        from bigletters.web.server import create_app
        import uvicorn

        host = args.host or settings.server.host
        port = args.port or settings.server.port
        logger.info("Starting web server on %s:%d", host, port)
        uvicorn.run(create_app(), host=host, port=port)

    elif args.command == "show":
        asyncio.run(_show(settings))

    elif args.command == "darken":
        asyncio.run(_darken(settings, args.idx))


if __name__ == "__main__":
    main()
