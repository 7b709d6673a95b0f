import logging
from typing import IO, List, Optional

import click

from dfree.display.columns import ColumnType
from dfree.display.theme import Theme
from dfree.display.units import NumberFormat, format_count
from dfree.display.usage import render_bar, usage_color
from dfree.mounts.models import Mount

logger = logging.getLogger(__name__)


def format_percentage(percentage: Optional[float]) -> str:
    if percentage is None:
        return "-"
    return f"{percentage:.1f}%"


def render_cell(column: ColumnType, mount: Mount, theme: Theme,
                number_format: NumberFormat, aliases: bool = True) -> str:
    """Cell text for one mount, styled but not padded."""
    base = number_format.powers_of
    color = usage_color(mount.used_percentage(), theme)

    if column is ColumnType.FILESYSTEM:
        return mount.fsname_aliased() if aliases else mount.fsname
    if column is ColumnType.TYPE:
        return mount.type
    if column is ColumnType.BAR:
        return render_bar(theme.bar_width, mount.used_percentage(), theme)
    if column is ColumnType.USED:
        return click.style(format_count(mount.used, base), fg=color)
    if column is ColumnType.USED_PERCENTAGE:
        return click.style(format_percentage(mount.used_percentage()), fg=color)
    if column is ColumnType.AVAILABLE:
        return click.style(format_count(mount.free, base), fg=color)
    if column is ColumnType.AVAILABLE_PERCENTAGE:
        return click.style(format_percentage(mount.free_percentage()), fg=color)
    if column is ColumnType.CAPACITY:
        return click.style(format_count(mount.capacity, base), fg=color)
    if column is ColumnType.MOUNTED_ON:
        return mount.dir
    raise ValueError(f"Unknown column {column}")


def visible_width(text: str) -> int:
    return len(click.unstyle(text))


def pad(text: str, width: int, right_aligned: bool) -> str:
    padding = " " * max(width - visible_width(text), 0)
    return padding + text if right_aligned else text + padding


def column_widths(columns: List[ColumnType], heading: List[str], rows: List[List[str]]) -> List[int]:
    """Widest of the label and every cell, per column."""
    return [
        max([visible_width(heading[i])] + [visible_width(row[i]) for row in rows])
        for i in range(len(columns))
    ]


def format_table(mounts: List[Mount], theme: Theme, number_format: NumberFormat,
                 inodes_mode: bool = False, aliases: bool = True) -> List[str]:
    """Lays out the heading and one line per mount following theme.columns."""
    columns = theme.columns
    heading = [column.label(inodes_mode) for column in columns]
    rows = [
        [render_cell(column, mount, theme, number_format, aliases) for column in columns]
        for mount in mounts
    ]
    widths = column_widths(columns, heading, rows)

    lines = [
        " ".join(
            pad(click.style(label, fg=theme.color_heading), width, column.right_aligned)
            for column, label, width in zip(columns, heading, widths)
        ).rstrip()
    ]
    for row in rows:
        lines.append(" ".join(
            pad(cell, width, column.right_aligned)
            for column, cell, width in zip(columns, row, widths)
        ).rstrip())
    return lines


def render_table(mounts: List[Mount], theme: Theme, number_format: NumberFormat,
                 inodes_mode: bool = False, aliases: bool = True,
                 color: Optional[bool] = None, file: Optional[IO] = None) -> bool:
    """
    Writes the table to file (stdout by default).
    color=None lets click decide from the terminal.
    Returns False if the reader went away before the table was written.
    """
    try:
        for line in format_table(mounts, theme, number_format, inodes_mode, aliases):
            click.echo(line, file=file, color=color)
    except BrokenPipeError:
        logger.debug("Output closed, stopping")
        return False
    return True
