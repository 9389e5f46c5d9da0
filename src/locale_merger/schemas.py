from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# A parsed YAML node: either a mapping of key -> node, or any scalar value.
# Sequences are carried through as opaque scalars.
TranslationNode = Union[dict[Any, "TranslationNode"], Any]


@dataclass(frozen=True)
class LanguageRooted:
    """Document whose single top-level key is a supported language code."""

    language: str


@dataclass(frozen=True)
class MultiLingual:
    """Document with language codes nested at its translation leaves."""


Classification = Union[LanguageRooted, MultiLingual]


@dataclass(frozen=True)
class SourceDocument:
    path: Path
    root: dict
    classification: Classification


class RunState(str, Enum):
    IDLE = "idle"
    WALKING = "walking"
    PARSING_MERGING = "parsing_merging"
    ABORTED = "aborted"
    EMITTING = "emitting"
    DONE = "done"


def is_map(node: TranslationNode) -> bool:
    return isinstance(node, dict)


def clone_node(node: TranslationNode) -> TranslationNode:
    """
    Copy the mapping structure of ``node`` without recursion.

    Scalars are returned as-is; sequences are shallow-copied so that later
    edits to an output tree never reach back into the parsed document.

    :raises ValueError: a mapping contains itself (YAML alias cycle)
    """
    if isinstance(node, list):
        return list(node)
    if not is_map(node):
        return node
    top: dict = {}
    stack = [(node, top, frozenset([id(node)]))]
    while stack:
        src, dst, ancestors = stack.pop()
        for key, value in src.items():
            if is_map(value):
                if id(value) in ancestors:
                    raise ValueError(f"Recursive mapping under key {key!r}")
                dst[key] = {}
                stack.append((value, dst[key], ancestors | {id(value)}))
            elif isinstance(value, list):
                dst[key] = list(value)
            else:
                dst[key] = value
    return top
