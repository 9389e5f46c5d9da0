"""
Fold classified locale documents into one output tree per language.

Two document shapes are supported::

    # language-rooted: already scoped to one language
    en:
      greeting: Hi

    # multi-lingual: language codes sit at the translation leaves
    greeting:
      en: Hi
      ja: こんにちは

Both descend with explicit stacks, so nesting depth is bounded by memory
rather than the interpreter's recursion limit.  Documents are only read;
values copied into an output tree are cloned first.
"""

import logging
from collections.abc import Hashable
from pathlib import Path

from locale_merger.classifier import classify
from locale_merger.config import MergerConfig
from locale_merger.schemas import (
    LanguageRooted,
    SourceDocument,
    TranslationNode,
    clone_node,
    is_map,
)


def new_output_trees(languages: tuple[str, ...]) -> dict[str, dict]:
    return {lang: {} for lang in languages}


def _ensure_map(output: dict, key: Hashable) -> dict:
    # An earlier scalar at this key path is replaced by the mapping.
    if not is_map(output.get(key)):
        output[key] = {}
    return output[key]


def _key_path(prefix: tuple, key: Hashable) -> str:
    return ".".join(str(k) for k in (*prefix, key))


def _warn_recursive(source: object, prefix: tuple, key: Hashable) -> None:
    logging.warning(
        f"{source or '<document>'}: {_key_path(prefix, key)!r} refers back to an "
        "enclosing mapping; skipped"
    )


def merge_language_rooted(
    subtree: TranslationNode, output: dict, source: object = None
) -> None:
    """
    Deep-merge a single-language ``subtree`` into ``output``.

    Mappings merge key by key, creating missing mappings on the way; any
    other value overwrites the output entry at the same key path.
    """
    if not is_map(subtree):
        logging.warning(
            f"Language-rooted document has a non-mapping body ({type(subtree).__name__}); skipped"
        )
        return

    stack = [(subtree, output, (), frozenset([id(subtree)]))]
    while stack:
        node, context, prefix, ancestors = stack.pop()
        for key, child in node.items():
            if is_map(child):
                if id(child) in ancestors:
                    _warn_recursive(source, prefix, key)
                    continue
                stack.append(
                    (child, _ensure_map(context, key), (*prefix, key), ancestors | {id(child)})
                )
            else:
                context[key] = clone_node(child)


def merge_multi_lingual(
    node: dict, output: dict, lang: str, source: object = None
) -> None:
    """
    Extract the ``lang`` variant of every translation leaf under ``node``.

    For each child of a mapping:

    - a mapping containing ``lang`` is a translation leaf, and its ``lang``
      value is stored at the same key path in ``output``;
    - any other mapping is a grouping node and is descended into, unless an
      earlier document already left a non-mapping value at that key path,
      which is kept;
    - a scalar has no language key anywhere below it, so it is skipped with
      a warning.

    :param node: document mapping to read from (never modified)
    :param output: output tree for ``lang``, modified in place
    :param lang: target language code
    :param source: document path, used in warnings only
    """
    stack: list[tuple[dict, dict, tuple, frozenset]] = [
        (node, output, (), frozenset([id(node)]))
    ]
    while stack:
        current, context, prefix, ancestors = stack.pop()
        for key, child in current.items():
            if not is_map(child):
                logging.warning(
                    f"{source or '<document>'}: {_key_path(prefix, key)!r} has no "
                    f"{lang!r} translation; value ignored"
                )
            elif lang in child:
                context[key] = clone_node(child[lang])
            elif id(child) in ancestors:
                _warn_recursive(source, prefix, key)
            else:
                if key not in context:
                    context[key] = {}
                elif not is_map(context[key]):
                    continue
                stack.append(
                    (child, context[key], (*prefix, key), ancestors | {id(child)})
                )


class MergeEngine:
    """
    Owns the per-language output trees of a single run.

    >>> engine = MergeEngine(MergerConfig())
    >>> engine.merge_root({"title": {"en": "Profile", "ja": "プロフィール"}})
    >>> engine.trees
    {'en': {'title': 'Profile'}, 'ja': {'title': 'プロフィール'}}
    """

    def __init__(self, config: MergerConfig):
        self.config = config
        self.trees = new_output_trees(config.languages)
        self.merged = 0

    def merge(self, document: SourceDocument) -> None:
        classification = document.classification
        if isinstance(classification, LanguageRooted):
            lang = classification.language
            logging.debug(f"Merging {document.path} into {lang!r} (language-rooted)")
            merge_language_rooted(
                document.root[lang], self.trees[lang], source=document.path
            )
        else:
            logging.debug(f"Merging {document.path} into all languages (multi-lingual)")
            for lang in self.config.languages:
                merge_multi_lingual(
                    document.root, self.trees[lang], lang, source=document.path
                )
        self.merged += 1

    def merge_root(self, root: dict) -> None:
        """Classify and merge an in-memory document root."""
        path = Path("<memory>")
        classification = classify(root, self.config.languages, path)
        if classification is None:
            raise TypeError(f"Document root must be a mapping, got {type(root).__name__}")
        self.merge(SourceDocument(path, root, classification))
