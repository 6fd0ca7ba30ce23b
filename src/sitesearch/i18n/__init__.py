"""Translation store and loading."""

from sitesearch.i18n.loader import aload_translations, load_translations
from sitesearch.i18n.store import TranslationStore

__all__ = [
    "TranslationStore",
    "load_translations",
    "aload_translations",
]
