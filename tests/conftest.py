from pathlib import Path

import pytest

from locale_merger.config import MergerConfig


@pytest.fixture
def locale_root(tmp_path) -> Path:
    root = tmp_path / "config" / "locales"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def config(locale_root) -> MergerConfig:
    return MergerConfig(root=locale_root)


@pytest.fixture
def write_locale(locale_root):
    """Write a source document relative to the locale root and return its path."""

    def _write(relpath: str, text: str) -> Path:
        path = locale_root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
