"""
User-facing diagnostics for failed locale runs.
"""

import logging

import typer

from locale_merger.io.parser import ParseError

QUOTING_HINT = (
    "This line might require single or double quotes around the string.\n"
    "All symbols like ':', '%', '{}' etc need to be in single or double quotes."
)


def format_parse_error(err: ParseError) -> str:
    """
    Render a parse failure as the header, location and hint shown to authors.

    >>> from pathlib import Path
    >>> print(format_parse_error(ParseError(Path("a/b.yml"), 3, "boom")).splitlines()[0])
    ERROR: YAML error trying to parse locale file on line 3 located at:
    """
    header = "ERROR: YAML error trying to parse locale file"
    if err.line is not None:
        header += f" on line {err.line}"
    return "\n".join(
        [
            f"{header} located at:",
            f"  {err.path}",
            "",
            "Actual error message was:",
            err.message,
            "",
            QUOTING_HINT,
        ]
    )


def report_parse_error(err: ParseError) -> None:
    """Write the parse failure to stderr with a red header."""
    logging.debug("Locale parse failed", exc_info=err)
    header, _, rest = format_parse_error(err).partition("\n")
    typer.secho(header, fg=typer.colors.RED, bold=True, err=True)
    typer.echo(rest, err=True)


def warn_filtered_run(pattern: str) -> None:
    logging.warning(
        f"Only files matching {pattern!r} are merged; the output files are rebuilt "
        "from those files alone and lose every other translation until the next "
        "unfiltered run."
    )
