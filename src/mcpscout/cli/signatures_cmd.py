"""``mcpscout signatures`` -- List the recognized declaration call shapes.

Prints one row per entry of the signature catalog, in precedence order.

Exit Codes:
    0 -- Always (informational command, cannot fail).
"""

from __future__ import annotations

import click

from mcpscout import __version__
from mcpscout.inventory.signatures import RECEIVERS, SIGNATURES

# Column widths for alignment
_W_NUM = 3
_W_KIND = 9
_W_RANK = 4
_W_SHAPE = 52

_ROW_FMT = "{num:>{wn}}  {kind:<{wk}}  {rank:<{wr}}  {shape:<{ws}}"


def _format_row(num: str, kind: str, rank: str, shape: str) -> str:
    """Render a single table row, right-stripped for clean output."""
    return _ROW_FMT.format(
        num=num, kind=kind, rank=rank, shape=shape,
        wn=_W_NUM, wk=_W_KIND, wr=_W_RANK, ws=_W_SHAPE,
    ).rstrip()


def format_signatures_table() -> str:
    """Build the signature table as a plain string.

    Returns:
        Multi-line string ready for terminal output.  Never raises.
    """
    lines: list[str] = [
        f"mcpscout v{__version__} -- {len(SIGNATURES)} recognized signatures",
        "",
        _format_row("#", "Kind", "Rank", "Call shape"),
        _format_row("-" * _W_NUM, "-" * _W_KIND, "-" * _W_RANK, "-" * _W_SHAPE),
    ]
    for idx, sig in enumerate(SIGNATURES, start=1):
        lines.append(_format_row(str(idx), sig.kind.value, str(sig.rank), sig.call_shape))
    lines.append("")
    lines.append(f"  Receivers: {', '.join(RECEIVERS)}")
    lines.append("  Lower rank wins when two tool signatures declare the same name.")
    return "\n".join(lines)


@click.command("signatures")
def signatures_command() -> None:
    """List the declaration call shapes the scanner recognizes."""
    click.echo(format_signatures_table())
