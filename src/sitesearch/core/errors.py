"""
Error types for the site search package.

Only the translation loader raises these internally; public entry points
log them and degrade to empty results.
"""


class SiteSearchError(Exception):
    """Base class for site search errors."""


class TranslationsUnavailableError(SiteSearchError):
    """The translations document could not be fetched or parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Translations unavailable from {source}: {reason}")
