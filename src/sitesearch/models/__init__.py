"""
Models package initialization
"""

from sitesearch.models.search import QueryResult

__all__ = [
    "QueryResult",
]
