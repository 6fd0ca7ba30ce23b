"""Runtime translations and in-memory page search for a static site."""

from sitesearch.i18n import TranslationStore, aload_translations, load_translations
from sitesearch.models import QueryResult
from sitesearch.search import IndexEntry, PageDescriptor, normalize
from sitesearch.service import SearchService

__all__ = [
    "TranslationStore",
    "load_translations",
    "aload_translations",
    "QueryResult",
    "IndexEntry",
    "PageDescriptor",
    "normalize",
    "SearchService",
]
