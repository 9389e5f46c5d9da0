from pathlib import Path

import pytest

from locale_merger.diagnostics import format_parse_error
from locale_merger.io.parser import (
    ParseError,
    find_recursive_key,
    parse_document,
    parse_text,
)


def test_parse_preserves_key_order(tmp_path):
    path = tmp_path / "order.yml"
    path.write_text("c:\n  en: C\na:\n  en: A\nb:\n  en: B\n", encoding="utf-8")
    root = parse_document(path)
    assert list(root) == ["c", "a", "b"]


def test_parse_unicode_values():
    root = parse_text("title:\n  en: Profile\n  ja: プロフィール\n", Path("p.yml"))
    assert root == {"title": {"en": "Profile", "ja": "プロフィール"}}


def test_empty_document_is_none():
    assert parse_text("", Path("empty.yml")) is None


def test_parse_error_carries_path_and_line():
    path = Path("views/broken.yml")
    with pytest.raises(ParseError) as excinfo:
        parse_text("title:\n  en: Profile: bad\n", path)
    err = excinfo.value
    assert err.path == path
    assert err.line == 2
    assert "mapping values are not allowed" in err.message
    assert str(path) in str(err)


def test_parse_error_message_has_hint():
    text = format_parse_error(ParseError(Path("views/broken.yml"), 7, "boom"))
    print(text)
    assert "on line 7" in text
    assert "views/broken.yml" in text
    assert "boom" in text
    assert "':', '%', '{}'" in text


def test_parse_error_without_line():
    err = ParseError(Path("x.yml"), None, "no position")
    text = format_parse_error(err)
    assert "on line" not in text.splitlines()[0]


def test_invalid_utf8_is_a_parse_error(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_bytes(b"title:\n  en: \xff\xfe bad\n")
    with pytest.raises(ParseError) as excinfo:
        parse_document(path)
    assert excinfo.value.path == path
    assert excinfo.value.line is None
    assert "UTF-8" in excinfo.value.message


def test_recursive_alias_is_a_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse_text("a: &x\n  b: *x\n", Path("views/cyc.yml"))
    assert "'a.b'" in excinfo.value.message


def test_shared_aliases_are_allowed():
    root = parse_text(
        "base: &base\n  en: Save\n  ja: 保存\nsave: *base\nsubmit: *base\n",
        Path("buttons.yml"),
    )
    assert root["save"] is root["submit"]
    assert find_recursive_key(root) is None


def test_recursive_list_is_detected():
    items = ["a"]
    items.append(items)
    assert find_recursive_key({"menu": {"items": items}}) == "menu.items.1"
