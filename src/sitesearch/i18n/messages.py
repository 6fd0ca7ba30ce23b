"""
Search Widget Messages

Built-in text for the search widget, used when the translations document
has no "search" section for the active language.
"""

MESSAGES = {
    "es": {
        "placeholder": "Buscar...",
        "noResults": "No se encontraron resultados para",
        "loading": "Cargando índice...",
    },
    "en": {
        "placeholder": "Search...",
        "noResults": "No results found for",
        "loading": "Loading index...",
    },
}

FALLBACK_LANGUAGE = "es"


def get_messages(lang: str) -> dict[str, str]:
    """Return a copy of the built-in messages for a language."""
    return dict(MESSAGES.get(lang, MESSAGES[FALLBACK_LANGUAGE]))
