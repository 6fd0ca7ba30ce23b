"""
Search Service

Owns the active search index for one application context and keeps it in
step with the translation store's language.
"""

import logging
from collections.abc import Mapping, Sequence

from sitesearch.i18n.messages import get_messages
from sitesearch.i18n.store import TranslationStore
from sitesearch.models.search import QueryResult
from sitesearch.search.indexer import SearchIndex, SearchIndexer
from sitesearch.search.pages import DEFAULT_PAGES, PageDescriptor
from sitesearch.search.searcher import SearchEngine

logger = logging.getLogger(__name__)


class SearchService:
    """
    Search over the site's pages in the active language.

    The index is replaced in a single assignment, so a query always sees
    either the complete old index or the complete new one.
    """

    def __init__(
        self,
        store: TranslationStore,
        pages: Sequence[PageDescriptor] = DEFAULT_PAGES,
        engine: SearchEngine | None = None,
    ):
        self.store = store
        self.indexer = SearchIndexer(store, pages)
        self.engine = engine or SearchEngine()
        self.language = store.current_language
        self._index: SearchIndex | None = None

    @property
    def index(self) -> SearchIndex | None:
        return self._index

    def build_index(self, lang: str | None = None) -> SearchIndex:
        """Build the index for a language and make it the active index."""
        lang = lang or self.language
        index = self.indexer.build(lang)
        self.language = lang
        self._index = index
        return index

    def reindex(self, lang: str) -> SearchIndex:
        """Discard the current index and rebuild it for a new language."""
        logger.info(f"Reindexing search for language '{lang}'")
        self._index = None
        return self.build_index(lang)

    def search(self, query: str | None) -> list[QueryResult]:
        index = self._index
        return self.engine.search(index, query)

    def messages(self, lang: str | None = None) -> dict[str, str]:
        """Search widget text, translated where the document provides it."""
        lang = lang or self.language
        messages = get_messages(lang)
        tree = self.store.tree(lang)
        section = tree.get("search") if tree is not None else None
        if isinstance(section, Mapping):
            messages.update(
                {k: v for k, v in section.items() if isinstance(v, str) and v}
            )
        return messages

    def attach(self) -> None:
        """Rebuild the index whenever the store changes language."""
        self.store.add_language_listener(self.reindex)

    def detach(self) -> None:
        self.store.remove_language_listener(self.reindex)
