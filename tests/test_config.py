from pathlib import Path

import pytest
from pydantic import ValidationError

from locale_merger.config import MergerConfig


def test_defaults():
    config = MergerConfig()
    assert config.root == Path("config/locales")
    assert config.languages == ("en", "ja")
    assert config.output_path("ja") == Path("config/locales/ja.yml")
    assert config.output_names() == {"en.yml", "ja.yml"}


@pytest.mark.parametrize("languages", [(), ("en", "en"), ("en", " ")])
def test_invalid_languages(languages):
    with pytest.raises(ValidationError):
        MergerConfig(languages=languages)


def test_invalid_extension():
    with pytest.raises(ValidationError):
        MergerConfig(extension="yml")


def test_config_is_frozen():
    config = MergerConfig()
    with pytest.raises(ValidationError):
        config.languages = ("fr",)


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LOCALE_MERGER_ROOT", str(tmp_path))
    monkeypatch.setenv("LOCALE_MERGER_LANGUAGES", "en, ja ,zh-CN,")
    config = MergerConfig.from_env()
    assert config.root == tmp_path
    assert config.languages == ("en", "ja", "zh-CN")
    assert MergerConfig.from_env(languages=("fr",)).languages == ("fr",)


def test_from_env_without_variables(monkeypatch):
    monkeypatch.delenv("LOCALE_MERGER_ROOT", raising=False)
    monkeypatch.delenv("LOCALE_MERGER_LANGUAGES", raising=False)
    assert MergerConfig.from_env() == MergerConfig()
