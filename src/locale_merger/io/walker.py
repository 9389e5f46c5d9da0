import logging
import re
from collections.abc import Iterator
from pathlib import Path

from locale_merger.config import MergerConfig


def is_generated_output(path: Path, config: MergerConfig) -> bool:
    """True for ``en.yml``, ``ja.yml`` etc., the files this tool writes."""
    return path.name in config.output_names()


def _iter_subdirectories(root: Path) -> Iterator[Path]:
    # Sorted, depth-first; the root itself is skipped because it holds the output files.
    stack = sorted((p for p in root.iterdir() if p.is_dir()), reverse=True)
    while stack:
        folder = stack.pop()
        yield folder
        stack.extend(sorted((p for p in folder.iterdir() if p.is_dir()), reverse=True))


def find_source_files(
    config: MergerConfig, path_filter: str | None = None
) -> list[Path]:
    """
    Collect the locale source documents below ``config.root``.

    :param config: run configuration (root directory, extension, languages)
    :param path_filter: optional regular expression; when given only paths it
        matches anywhere in their POSIX form are returned
    :return: source paths in walk order
    """
    root = config.root
    if not root.is_dir():
        logging.warning(f"Locale root {root} does not exist or is not a directory")
        return []

    pattern = re.compile(path_filter) if path_filter else None
    files: list[Path] = []
    for folder in _iter_subdirectories(root):
        candidates = sorted(
            p
            for p in folder.glob(f"*{config.extension}")
            if p.is_file() and not is_generated_output(p, config)
        )
        for path in candidates:
            if pattern is not None and not pattern.search(path.as_posix()):
                logging.debug(f"Skipping {path} (does not match {path_filter!r})")
                continue
            files.append(path)

    logging.info(f"Found {len(files)} locale source file(s) under {root}")
    return files
