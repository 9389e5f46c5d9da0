import logging
import os
import stat
from pathlib import Path
from tempfile import NamedTemporaryFile

import yaml

from locale_merger.config import MergerConfig


class EmitError(Exception):
    """One or more per-language output files could not be written."""

    def __init__(self, failures: dict[str, OSError]):
        self.failures = failures
        detail = ", ".join(f"{lang}: {err}" for lang, err in failures.items())
        super().__init__(f"Failed to write locale output for {detail}")


def dump_tree(lang: str, tree: dict) -> str:
    """
    Serialize ``tree`` under a single top-level ``lang`` key.

    Keys keep insertion order, collections are always in block style and
    long strings are never wrapped.

    >>> print(dump_tree("ja", {"title": "プロフィール"}), end="")
    ja:
      title: プロフィール
    """
    return yaml.safe_dump(
        {lang: tree},
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=float("inf"),
        explicit_start=False,
    )


def _target_mode(path: Path) -> int:
    # Keep the mode of the file being replaced; new files get 0o666 minus the umask.
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` so readers never see a half-written file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    f = NamedTemporaryFile(
        "w",
        encoding="utf-8",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    tmp_path = Path(f.name)
    try:
        with f:
            f.write(text)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def emit(trees: dict[str, dict], config: MergerConfig) -> list[Path]:
    """
    Write one ``<lang><extension>`` file per configured language.

    Every language is attempted even when an earlier one fails; failures are
    collected and raised together as :class:`EmitError`.

    :return: paths written, in language order
    """
    written: list[Path] = []
    failures: dict[str, OSError] = {}
    for lang in config.languages:
        path = config.output_path(lang)
        try:
            write_atomic(path, dump_tree(lang, trees.get(lang, {})))
        except OSError as e:
            logging.error(f"Could not write {path}: {e}")
            failures[lang] = e
            continue
        logging.info(f"Wrote {path}")
        written.append(path)

    if failures:
        raise EmitError(failures)
    return written
