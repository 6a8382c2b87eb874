"""``mcpscout scan [path]``: Inventory MCP server declarations.

With a PATH, scans that local directory. With ``--url``, clones the
repository into a scratch directory, scans it and removes the clone.
``--mode bare`` skips scanning and reports an empty inventory. Settings
may also come from a YAML file given with ``--config``; command-line
options override it.

Exit Codes:
    0: Scan completed (an empty inventory is a valid result).
    1: Scan aborted: missing path, failed clone, or invalid configuration.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from mcpscout.config import ScanConfig, SourceMode, load_config
from mcpscout.exceptions import McpScoutError
from mcpscout.inventory.engine import scan_source
from mcpscout.inventory.models import Inventory


def _resolve_config(
    path: str | None,
    url: str | None,
    mode: str | None,
    config_file: str | None,
    jobs: int | None,
    timeout: float | None,
) -> ScanConfig:
    """Combine the config file (if any) with command-line overrides.

    The mode is inferred when not given explicitly: ``--url`` selects
    remote mode and a PATH selects local mode.
    """
    base = load_config(config_file) if config_file else ScanConfig()
    if mode is None:
        if url is not None:
            mode = SourceMode.REMOTE.value
        elif path is not None:
            mode = SourceMode.LOCAL.value
    return base.merged(
        mode=mode,
        source_path=path,
        repository_url=url,
        max_workers=jobs,
        clone_timeout=timeout,
    )


def _write_output(inventory: Inventory, output: str) -> None:
    from mcpscout.cli.output import inventory_json

    out_path = Path(output)
    out_path.write_text(inventory_json(inventory) + "\n", encoding="utf-8")
    click.echo(f"Inventory written to: {out_path.resolve()}", err=True)


@click.command("scan")
@click.argument(
    "path",
    type=click.Path(file_okay=False),
    required=False,
    default=None,
)
@click.option("--url", default=None, help="Repository URL to clone and scan.")
@click.option(
    "--mode",
    type=click.Choice(["local", "remote", "bare", "github", "bare-bones"]),
    default=None,
    help="Acquisition mode (inferred from PATH / --url when omitted).",
)
@click.option(
    "--config", "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with scan settings.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Also write the JSON inventory to this file.",
)
@click.option(
    "--jobs", "-j",
    type=click.IntRange(min=1),
    default=None,
    help="Worker threads for reading files (default: 4).",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds before a remote clone is abandoned (default: 120).",
)
def scan_command(
    path: str | None,
    url: str | None,
    mode: str | None,
    config_file: str | None,
    output_format: str,
    output: str | None,
    jobs: int | None,
    timeout: float | None,
) -> None:
    """Inventory the tools, resources and prompts declared in JS/TS source.

    PATH is a local directory to scan. Use --url to scan a remote
    repository instead.
    """
    try:
        config = _resolve_config(path, url, mode, config_file, jobs, timeout)
        inventory = scan_source(config)
    except McpScoutError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output:
        try:
            _write_output(inventory, output)
        except OSError as exc:
            click.echo(f"Error: cannot write {output}: {exc}", err=True)
            sys.exit(1)

    if output_format == "json":
        from mcpscout.cli.output import inventory_json

        click.echo(inventory_json(inventory))
    else:
        from mcpscout.cli.output import print_inventory

        print_inventory(inventory)
