"""
YAML locale document parsing.
"""

import re
from pathlib import Path

import yaml

from locale_merger.schemas import TranslationNode

_LINE_RE = re.compile(r"line (\d+)")


class ParseError(Exception):
    """A locale source document cannot be loaded as a YAML node tree."""

    def __init__(self, path: Path, line: int | None, message: str):
        self.path = path
        self.line = line
        self.message = message
        location = f"{path}, line {line}" if line is not None else str(path)
        super().__init__(f"{location}: {message}")


def _line_from_message(message: str) -> int | None:
    match = _LINE_RE.search(message)
    return int(match.group(1)) if match else None


def _children(node):
    return node.items() if isinstance(node, dict) else enumerate(node)


def find_recursive_key(root: TranslationNode) -> str | None:
    """
    Return the key path of the first alias that points back at an enclosing
    mapping or list, or None when the tree is acyclic.

    >>> a = {}
    >>> a["b"] = a
    >>> find_recursive_key({"a": a})
    'a.b'
    """
    if not isinstance(root, (dict, list)):
        return None
    on_path = {id(root)}
    finished: set[int] = set()
    stack = [(root, iter(_children(root)), ())]
    while stack:
        node, children, prefix = stack[-1]
        for key, child in children:
            if not isinstance(child, (dict, list)) or id(child) in finished:
                continue
            if id(child) in on_path:
                return ".".join(str(k) for k in (*prefix, key))
            on_path.add(id(child))
            stack.append((child, iter(_children(child)), (*prefix, key)))
            break
        else:
            stack.pop()
            on_path.discard(id(node))
            finished.add(id(node))
    return None


def parse_text(text: str, path: Path) -> TranslationNode:
    """
    Parse YAML ``text`` read from ``path`` into a node tree.

    >>> parse_text("title:\\n  en: Profile\\n", Path("profile.yml"))
    {'title': {'en': 'Profile'}}
    """
    try:
        root = yaml.safe_load(text)
    except yaml.YAMLError as e:
        message = str(e)
        raise ParseError(path, _line_from_message(message), message) from e

    if (key_path := find_recursive_key(root)) is not None:
        raise ParseError(
            path, None, f"alias at {key_path!r} refers to a mapping that contains it"
        )
    return root


def parse_document(path: Path) -> TranslationNode:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(path, None, f"file is not valid UTF-8: {e}") from e
    return parse_text(text, path)
