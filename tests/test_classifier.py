import logging

import pytest

from locale_merger.classifier import classify
from locale_merger.schemas import LanguageRooted, MultiLingual

LANGUAGES = ("en", "ja")


def test_language_rooted():
    assert classify({"ja": {"greeting": "やあ"}}, LANGUAGES) == LanguageRooted("ja")


def test_multi_lingual():
    assert classify({"greeting": {"en": "Hi"}}, LANGUAGES) == MultiLingual()


def test_only_first_key_decides():
    root = {"greeting": {"en": "Hi"}, "en": {"other": "x"}}
    assert classify(root, LANGUAGES) == MultiLingual()


def test_unsupported_language_root_is_multi_lingual():
    assert classify({"fr": {"greeting": "Salut"}}, LANGUAGES) == MultiLingual()


def test_extra_top_level_keys_warn(caplog):
    with caplog.at_level(logging.WARNING):
        result = classify({"en": {"a": "A"}, "ja": {"a": "あ"}}, LANGUAGES)
    assert result == LanguageRooted("en")
    assert "ignoring other top-level keys" in caplog.text


@pytest.mark.parametrize("root", [None, "just text", ["a", "b"], 42])
def test_non_mapping_roots_are_not_classified(root):
    assert classify(root, LANGUAGES) is None
