import logging
from collections.abc import Sequence
from pathlib import Path

from locale_merger.schemas import (
    Classification,
    LanguageRooted,
    MultiLingual,
    TranslationNode,
    is_map,
)


def classify(
    root: TranslationNode, languages: Sequence[str], path: Path | None = None
) -> Classification | None:
    """
    Decide which shape a parsed document has.

    Returns None when the root is not a mapping (empty file, bare scalar or
    list); such documents cannot contribute to any output tree.

    >>> classify({"en": {"greeting": "Hi"}}, ("en", "ja"))
    LanguageRooted(language='en')
    >>> classify({"greeting": {"en": "Hi"}}, ("en", "ja"))
    MultiLingual()
    """
    if not is_map(root):
        return None
    if not root:
        return MultiLingual()

    first_key = next(iter(root))
    if first_key in languages:
        if len(root) > 1:
            ignored = [k for k in root if k != first_key]
            logging.warning(
                f"{path or 'Document'} is rooted at {first_key!r}; ignoring other top-level keys {ignored!r}"
            )
        return LanguageRooted(first_key)
    return MultiLingual()
