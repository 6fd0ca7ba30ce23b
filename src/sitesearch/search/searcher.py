"""
Site Search Engine

Substring search over an in-memory index with accent- and case-insensitive
matching and fixed zone weights.
"""

from sitesearch.core.config import settings
from sitesearch.models.search import QueryResult
from sitesearch.search.excerpt import generate_excerpt
from sitesearch.search.indexer import IndexEntry, SearchIndex
from sitesearch.search.normalize import normalize
from sitesearch.search.scoring import RelevanceConfig, ZoneScorer


class SearchEngine:
    """
    Query engine over a SearchIndex.

    A page matches when the normalized query appears anywhere in its
    title, description or content. Matches are ranked by zone relevance;
    pages with equal relevance keep their index order.
    """

    def __init__(
        self,
        relevance_config: RelevanceConfig | None = None,
        min_query_length: int | None = None,
    ):
        self.scorer = ZoneScorer(relevance_config)
        if min_query_length is None:
            min_query_length = settings.MIN_QUERY_LEN
        self.min_query_length = min_query_length

    def search(self, index: SearchIndex | None, query: str | None) -> list[QueryResult]:
        """
        Search the index.

        Args:
            index: Index to scan (None when not built yet)
            query: Free-text query

        Returns:
            Results ordered by relevance (highest first)
        """
        if not index or not query:
            return []

        query = query.strip()
        if len(query) < self.min_query_length:
            return []

        normalized_query = normalize(query)
        if not normalized_query:
            return []

        results = []
        for entry in index:
            relevance = self._score(entry, normalized_query)
            if relevance is None:
                continue
            results.append(
                QueryResult(
                    url=entry.url,
                    title=entry.title,
                    description=entry.description,
                    excerpt=generate_excerpt(entry.content, query).text,
                    relevance=relevance,
                )
            )

        # sorted() is stable, so ties keep index order
        return sorted(results, key=lambda r: r.relevance, reverse=True)

    def _score(self, entry: IndexEntry, normalized_query: str) -> int | None:
        """Return the relevance of a matching entry, or None if it does not match."""
        searchable = normalize(f"{entry.title} {entry.description} {entry.content}")
        if normalized_query not in searchable:
            return None
        return self.scorer.score(
            normalized_query,
            normalize(entry.title),
            normalize(entry.description),
            normalize(entry.content),
        )
