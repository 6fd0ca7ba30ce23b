"""
Search Index Builder

Resolves the page content mapping against one language's translations to
produce one searchable entry per page.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sitesearch.i18n.store import TranslationStore
from sitesearch.search.pages import DEFAULT_PAGES, PageDescriptor

logger = logging.getLogger(__name__)

CONTENT_SEPARATOR = ". "


@dataclass(frozen=True)
class IndexEntry:
    """A searchable page."""

    url: str
    title: str
    description: str
    content: str


SearchIndex = tuple[IndexEntry, ...]


def resolve_path(tree: Any, path: str) -> str:
    """
    Resolve a dot-path against a nested mapping.

    Missing segments, non-mapping intermediates, falsy leaves (None, "",
    0, False) and nested containers all resolve to "".
    """
    node = tree
    for part in path.split("."):
        if isinstance(node, Mapping) and node.get(part) is not None:
            node = node[part]
        else:
            return ""
    if not node or isinstance(node, (Mapping, list, tuple)):
        return ""
    return node if isinstance(node, str) else str(node)


def build_entry(tree: Mapping[str, Any], page: PageDescriptor) -> IndexEntry:
    resolved = (resolve_path(tree, key) for key in page.content_keys)
    content = CONTENT_SEPARATOR.join(value for value in resolved if value)
    description = resolve_path(tree, page.description_key)
    return IndexEntry(
        url=page.url,
        title=resolve_path(tree, page.title_key),
        description=description,
        content=content or description,
    )


def build_entries(
    tree: Mapping[str, Any] | None,
    pages: Sequence[PageDescriptor] = DEFAULT_PAGES,
) -> SearchIndex:
    """Build one entry per page, in page declaration order."""
    if not isinstance(tree, Mapping):
        return ()
    return tuple(build_entry(tree, page) for page in pages)


class SearchIndexer:
    """Builds search indexes from a translation store."""

    def __init__(
        self,
        store: TranslationStore,
        pages: Sequence[PageDescriptor] = DEFAULT_PAGES,
    ):
        self.store = store
        self.pages = tuple(pages)

    def build(self, lang: str) -> SearchIndex:
        """
        Build the index for a language.

        Returns an empty index when translations are unavailable.
        """
        if not self.store.available:
            logger.warning("Translations unavailable; search index is empty")
            return ()

        tree = self.store.tree(lang)
        if tree is None:
            logger.warning(f"No translations for language '{lang}'; search index is empty")
            return ()

        index = build_entries(tree, self.pages)
        logger.info(f"Built search index for '{lang}' with {len(index)} pages")
        return index
