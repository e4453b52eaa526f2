"""Command-line interface for kmpsearch."""

import logging

import click

from kmpsearch import __version__
from kmpsearch.matcher import Searcher
from kmpsearch.render import format_table, highlight, match_line
from kmpsearch.validation import InvalidArgument

log = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--table",
    is_flag=True,
    help="print the failure table of the pattern before searching",
)
@click.option(
    "--highlight",
    "show_highlight",
    is_flag=True,
    help="print the text with every match wrapped in [brackets]",
)
@click.option(
    "--count",
    "count_only",
    is_flag=True,
    help="print only the number of matches",
)
@click.option("-v", "--verbose", is_flag=True, help="log debug output to stderr")
@click.argument("pattern", default="rall")
@click.argument("text", default="parallel")
@click.version_option(version=__version__, prog_name="kmpsearch")
def main(
    table: bool,
    show_highlight: bool,
    count_only: bool,
    verbose: bool,
    pattern: str,
    text: str,
) -> None:
    """[kmpsearch] reports every index of TEXT where PATTERN occurs.

    Matching is exact and case-sensitive, and overlapping occurrences are all
    reported. With no arguments, searches for "rall" in "parallel".
    """
    if count_only and show_highlight:
        raise click.UsageError("--count and --highlight cannot be used together")

    _configure_logging(verbose)
    log.debug("searching for %r in a text of length %d", pattern, len(text))

    try:
        searcher = Searcher(pattern)
        matches = searcher.findall(text)
    except InvalidArgument as err:
        raise click.UsageError(str(err)) from err

    if table:
        click.echo(format_table(pattern, searcher.table))
        click.echo()
    if count_only:
        click.echo(len(matches))
        return
    for offset in matches:
        click.echo(match_line(offset))
    if show_highlight:
        click.echo(highlight(text, matches, len(pattern)))
