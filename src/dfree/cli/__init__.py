import logging
import os
import sys

import click

from dfree.cli.utils import MutuallyExclusiveOption, columns_callback
from dfree.config.settings import config, load_theme
from dfree.display.units import NumberFormat
from dfree.errors import DfreeError
from dfree.mounts.filters import DisplayFilter

logger = logging.getLogger(__name__)

COLOR_MODES = {"auto": None, "always": True, "never": False}


def print_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    from dfree.version import get_version
    click.echo(f"dfree {get_version()}")
    ctx.exit()


def silence_stdout():
    """Points stdout at /dev/null so the interpreter can flush on exit."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError) as e:
        logger.debug(f"Could not redirect stdout: {e}")


@click.command(context_settings={"help_option_names": ["--help"]})
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("-a", "display", count=True,
              cls=MutuallyExclusiveOption, mutually_exclusive=["more", "all_"],
              help="Show more, use twice to show all.")
@click.option("--more", is_flag=True,
              cls=MutuallyExclusiveOption, mutually_exclusive=["display", "all_"],
              help="Show more.")
@click.option("--all", "all_", is_flag=True,
              cls=MutuallyExclusiveOption, mutually_exclusive=["display", "more"],
              help="Show all.")
@click.option("--color", type=click.Choice(list(COLOR_MODES)),
              cls=MutuallyExclusiveOption, mutually_exclusive=["color_always"],
              help="Bypass tty detection for colors.")
@click.option("-c", "color_always", is_flag=True,
              cls=MutuallyExclusiveOption, mutually_exclusive=["color"],
              help="Bypass tty detection and always show colors.")
@click.option("-i", "--inodes", is_flag=True, help="Show inode instead of block usage.")
@click.option("-h", "--human-readable", "base2", is_flag=True,
              cls=MutuallyExclusiveOption, mutually_exclusive=["base10"],
              help="Print sizes in powers of 1024 (e.g., 1023M).")
@click.option("-H", "--si", "base10", is_flag=True,
              cls=MutuallyExclusiveOption, mutually_exclusive=["base2"],
              help="Print sizes in powers of 1000 (e.g., 1.1G).")
@click.option("--total", is_flag=True, help="Produce and show a grand total.")
@click.option("-l", "--local", "local_only", is_flag=True, help="Limit listing to local file systems.")
@click.option("--no-aliases", is_flag=True, help="Do not resolve file system shorthand aliases (e.g., LVM).")
@click.option("--mounts", "mounts_file", default=lambda: config.mounts_file, show_default="/proc/self/mounts",
              metavar="FILE", help="File to get mount information from.")
@click.option("--columns", callback=columns_callback,
              help="Display columns as comma separated list.")
@click.option("--theme", "theme_file", type=click.Path(), metavar="FILE", help="YAML theme file.")
@click.option("-v", "verbose", is_flag=True, help="Verbose logging.")
@click.option("--version", is_flag=True, expose_value=False, is_eager=True,
              callback=print_version, help="Show the version and exit.")
def main(paths, display, more, all_, color, color_always, inodes, base2, base10,
         total, local_only, no_aliases, mounts_file, columns, theme_file, verbose):
    """Show disk usage per mount, or for the mounts holding PATHS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from dfree.display.table import render_table
    from dfree.mounts.listing import ListingOptions, build_rows

    color_override = True if color_always else COLOR_MODES[color or "auto"]
    if color_override is not None:
        logger.debug(f"Bypass tty detection for colors: {color_override}")

    options = ListingOptions(
        mounts_file=mounts_file,
        display_filter=DisplayFilter.from_flags(display, more, all_),
        inodes=inodes,
        paths=list(paths),
        local_only=local_only,
        total=total,
    )

    try:
        theme = load_theme(theme_file)
        if columns:
            theme = theme.model_copy(update={"columns": columns})
        listing = build_rows(options)
    except DfreeError as e:
        raise click.ClickException(str(e))

    for path, reason in listing.unresolved:
        click.echo(f"dfree: {path}: {reason}", err=True)

    number_format = NumberFormat.BASE10 if base10 else NumberFormat.BASE2
    if not render_table(listing.mounts, theme, number_format, inodes,
                        aliases=not no_aliases, color=color_override):
        silence_stdout()
