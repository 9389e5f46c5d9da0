import logging
from pathlib import Path

from locale_merger.config import MergerConfig
from locale_merger.diagnostics import report_parse_error
from locale_merger.io.emitter import EmitError
from locale_merger.io.parser import ParseError
from locale_merger.runner import LocaleRun


def run(
    path_filter: str | None = None, config: MergerConfig | None = None
) -> list[Path]:
    """
    Regenerate every per-language locale file; safe to call at host startup.

    Configuration comes from ``LOCALE_MERGER_*`` environment variables unless
    ``config`` is given.  A malformed source document is reported on stderr
    and ends the process with exit status 1 before any file is written.
    """
    config = config or MergerConfig.from_env()
    try:
        return LocaleRun(config, path_filter).execute()
    except ParseError as e:
        report_parse_error(e)
        raise SystemExit(1) from e
    except EmitError as e:
        logging.error(str(e))
        raise SystemExit(1) from e


__all__ = ["EmitError", "LocaleRun", "MergerConfig", "ParseError", "run"]
