"""In-memory site search."""

from sitesearch.search.excerpt import Excerpt, generate_excerpt, make_excerpt
from sitesearch.search.indexer import (
    IndexEntry,
    SearchIndex,
    SearchIndexer,
    build_entries,
    resolve_path,
)
from sitesearch.search.normalize import normalize
from sitesearch.search.pages import DEFAULT_PAGES, PageDescriptor
from sitesearch.search.scoring import RelevanceConfig, ZoneScorer
from sitesearch.search.searcher import SearchEngine

__all__ = [
    "Excerpt",
    "generate_excerpt",
    "make_excerpt",
    "IndexEntry",
    "SearchIndex",
    "SearchIndexer",
    "build_entries",
    "resolve_path",
    "normalize",
    "DEFAULT_PAGES",
    "PageDescriptor",
    "RelevanceConfig",
    "ZoneScorer",
    "SearchEngine",
]
