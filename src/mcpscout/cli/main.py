"""mcpscout CLI: Inventory the tools, resources and prompts of an MCP server.

Entry point for the ``mcpscout`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan        Inventory a local directory or a remote repository.
    signatures  List the recognized declaration call shapes.

Usage::

    mcpscout scan ./weather-server
    mcpscout scan --url https://github.com/example/weather-mcp.git
    mcpscout scan --config scan.yaml --format json --output inventory.json
    mcpscout signatures
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from mcpscout import __version__
from mcpscout.cli.scan import scan_command
from mcpscout.cli.signatures_cmd import signatures_command


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "-v", "--verbose", count=True,
    help="Increase log output (-v for progress, -vv for per-file detail).",
)
def cli(verbose: int) -> None:
    """mcpscout: Inventory MCP server declarations in JS/TS source.

    Finds registerTool / tool / registerResource / registerPrompt calls
    without executing or compiling the code, and reports each tool's
    description and approximate input schema.
    """
    _configure_logging(verbose)


# Register all subcommands
cli.add_command(scan_command)
cli.add_command(signatures_command)
