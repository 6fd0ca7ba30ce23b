"""
Excerpt Generation for Search Results

Cuts a window of the original text around the first accent- and
case-insensitive match of the query and highlights the query inside it.
"""

import re
from dataclasses import dataclass

from sitesearch.core.config import settings
from sitesearch.search.normalize import normalize, normalize_with_offsets

ELLIPSIS = "..."
HIGHLIGHT_OPEN = "<mark>"
HIGHLIGHT_CLOSE = "</mark>"


@dataclass
class Excerpt:
    """An excerpt with optional highlighting."""

    text: str  # The excerpt (may include highlight markers)
    plain_text: str  # The excerpt without markers


def _leading(text: str, length: int) -> str:
    return text[:length] + ELLIPSIS if len(text) > length else text


def generate_excerpt(
    text: str,
    query: str,
    before: int | None = None,
    after: int | None = None,
    fallback_length: int | None = None,
    highlight: bool = True,
    open_marker: str = HIGHLIGHT_OPEN,
    close_marker: str = HIGHLIGHT_CLOSE,
) -> Excerpt:
    """
    Generate an excerpt around the first match of query in text.

    Args:
        text: The original (not normalized) content.
        query: The original query text.
        before: Characters kept before the match.
        after: Characters kept after the end of the query.
        fallback_length: Characters kept when the query is not found.
        highlight: Whether to wrap query occurrences in markers.
        open_marker: Marker inserted before each occurrence.
        close_marker: Marker inserted after each occurrence.

    Returns:
        Excerpt object with text and plain_text
    """
    before = settings.EXCERPT_BEFORE if before is None else before
    after = settings.EXCERPT_AFTER if after is None else after
    if fallback_length is None:
        fallback_length = settings.EXCERPT_FALLBACK_LEN

    if not text:
        return Excerpt(text="", plain_text="")

    # 1. Locate the match on normalized forms
    normalized_query = normalize(query)
    position = -1
    if normalized_query:
        normalized_text, offsets = normalize_with_offsets(text)
        position = normalized_text.find(normalized_query)

    if position == -1:
        plain = _leading(text, fallback_length)
        return Excerpt(text=plain, plain_text=plain)

    # 2. Map back onto the original text and cut the window
    match_start = offsets[position]
    window_start = max(0, match_start - before)
    window_end = min(len(text), match_start + len(query) + after)
    window = text[window_start:window_end]

    prefix = ELLIPSIS if window_start > 0 else ""
    suffix = ELLIPSIS if window_end < len(text) else ""
    plain_text = prefix + window + suffix

    if not highlight:
        return Excerpt(text=plain_text, plain_text=plain_text)

    # 3. Highlight literal occurrences of the query (case-insensitive)
    pattern = re.compile(re.escape(query), re.IGNORECASE)

    def replace_fn(match):
        return f"{open_marker}{match.group(0)}{close_marker}"

    highlighted = prefix + pattern.sub(replace_fn, window) + suffix
    return Excerpt(text=highlighted, plain_text=plain_text)


def make_excerpt(content: str, query: str) -> str:
    """Convenience function that returns just the highlighted excerpt."""
    return generate_excerpt(content, query).text
