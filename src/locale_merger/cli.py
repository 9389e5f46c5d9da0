"""
locale-merger: expand multi-lingual YAML locale sources into one file per language.

Usage:
  locale-merger [OPTIONS] [PATH_FILTER]

Examples:
  locale-merger
  locale-merger 'views/profile' -v
  LOCALE_MERGER_LANGUAGES=en,ja,zh-CN locale-merger -vv
"""

import logging
import re

import typer

import locale_merger

app = typer.Typer(help=__doc__, add_completion=False)


def setup_logging(verbose: int):
    """Set up logging based on verbosity level."""
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:  # verbose >= 2
        level = logging.DEBUG

    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")


def _validate_pattern(value: str | None) -> str | None:
    if value is None:
        return value
    try:
        re.compile(value)
    except re.error as e:
        raise typer.BadParameter(f"not a valid regular expression: {e}")
    return value


@app.command()
def main(
    path_filter: str = typer.Argument(
        None,
        help="Regular expression; only source files whose path matches are merged",
        callback=_validate_pattern,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    ),
) -> None:
    """Parse every locale source file and rewrite the per-language output files."""
    setup_logging(verbose)
    locale_merger.run(path_filter)


if __name__ == "__main__":
    app()
