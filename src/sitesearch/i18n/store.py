"""
Translation Store

Holds the nested translation tree for every language and the currently
active language. Other components read from it and subscribe to language
changes through explicit listeners.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable

from sitesearch.core.config import settings

logger = logging.getLogger(__name__)

LanguageListener = Callable[[str], Any]


class TranslationStore:
    """In-memory translations keyed by language code."""

    def __init__(self, default_language: str | None = None):
        self.default_language = default_language or settings.DEFAULT_LANGUAGE
        self.current_language = self.default_language
        self._translations: dict[str, Any] | None = None
        self._listeners: list[LanguageListener] = []

    # Loading

    def load(self, data: Mapping[str, Any] | None) -> bool:
        """
        Replace all translations with an already-parsed document.

        A missing or malformed document leaves the store unavailable.
        """
        if not isinstance(data, Mapping):
            if data is not None:
                logger.warning(
                    f"Ignoring translations document of type {type(data).__name__}"
                )
            self._translations = None
            return False

        self._translations = {
            lang: tree for lang, tree in data.items() if isinstance(tree, Mapping)
        }
        logger.info(f"Loaded translations for languages: {sorted(self._translations)}")
        return True

    @property
    def available(self) -> bool:
        return self._translations is not None

    @property
    def languages(self) -> list[str]:
        if self._translations is None:
            return []
        return list(self._translations)

    def tree(self, lang: str | None = None) -> Mapping[str, Any] | None:
        """Return the translation tree for a language, or None."""
        if self._translations is None:
            return None
        return self._translations.get(lang or self.current_language)

    # Lookups

    def get_translation(self, key: str, lang: str | None = None) -> Any:
        """
        Look up a dot-path such as "nav.home".

        Returns the key itself when the translation is missing so that gaps
        stay visible in the rendered page.
        """
        node: Any = self.tree(lang)
        for part in key.split("."):
            if isinstance(node, Mapping) and node.get(part):
                node = node[part]
            else:
                return key
        return node

    def page_meta(self, page_id: str, lang: str | None = None) -> tuple[str, str]:
        """Return (document title, meta description) for a page."""
        title = self.get_translation(f"meta.{page_id}Title", lang)
        description = self.get_translation(f"meta.{page_id}Description", lang)
        return title, description

    def detect_language(
        self,
        saved: str | None = None,
        browser_language: str | None = None,
    ) -> str:
        """
        Pick the initial language.

        A saved preference wins, then an English browser locale, then the
        default language.
        """
        if saved:
            return saved
        if browser_language and browser_language.lower().startswith("en"):
            return "en"
        return self.default_language

    # Switching

    def add_language_listener(self, listener: LanguageListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_language_listener(self, listener: LanguageListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def change_language(self, lang: str) -> bool:
        """
        Switch the active language and notify listeners synchronously.

        Unknown languages are ignored.
        """
        if self._translations is None or lang not in self._translations:
            logger.warning(f"Cannot switch to unavailable language: {lang}")
            return False

        self.current_language = lang
        for listener in list(self._listeners):
            listener(lang)
        return True
