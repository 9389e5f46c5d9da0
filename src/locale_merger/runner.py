import logging
import time
from pathlib import Path

from locale_merger.classifier import classify
from locale_merger.config import MergerConfig
from locale_merger.diagnostics import warn_filtered_run
from locale_merger.io.emitter import emit
from locale_merger.io.parser import ParseError, parse_document
from locale_merger.io.walker import find_source_files
from locale_merger.merge import MergeEngine
from locale_merger.schemas import RunState, SourceDocument


class LocaleRun:
    """
    One walk -> parse/merge -> emit pass over a locale tree.

    Every document is parsed and merged before the first file is written, so
    a :class:`ParseError` anywhere leaves the previous output untouched.
    """

    def __init__(self, config: MergerConfig, path_filter: str | None = None):
        self.config = config
        self.path_filter = path_filter
        self.state = RunState.IDLE
        self.engine = MergeEngine(config)
        self.skipped: list[Path] = []
        self.written: list[Path] = []

    def _load(self, path: Path) -> SourceDocument | None:
        root = parse_document(path)
        classification = classify(root, self.config.languages, path)
        if classification is None:
            logging.warning(
                f"{path}: top level is {type(root).__name__}, not a mapping; skipped"
            )
            self.skipped.append(path)
            return None
        return SourceDocument(path, root, classification)

    def execute(self) -> list[Path]:
        """
        Run every phase in order and return the written output paths.

        :raises ParseError: a source document is not valid YAML; nothing is written
        :raises EmitError: at least one output file could not be written
        """
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"LocaleRun already used (state {self.state.value})")
        started = time.perf_counter()
        logging.info("Parsing localization files...")

        self.state = RunState.WALKING
        if self.path_filter:
            warn_filtered_run(self.path_filter)
        paths = find_source_files(self.config, self.path_filter)

        self.state = RunState.PARSING_MERGING
        try:
            for path in paths:
                document = self._load(path)
                if document is None:
                    continue
                logging.debug(f"- {path.relative_to(self.config.root).as_posix()}")
                self.engine.merge(document)
        except (ParseError, OSError):
            self.state = RunState.ABORTED
            raise

        self.state = RunState.EMITTING
        try:
            self.written = emit(self.engine.trees, self.config)
        finally:
            self.state = RunState.DONE

        logging.info(f"Done in {time.perf_counter() - started:.3f}s.")
        return self.written
