"""
Text Normalization

Case- and accent-insensitive folding shared by indexing, matching and
excerpt location.
"""

import re
import unicodedata

# Combining Diacritical Marks block
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def _strip_marks(text: str) -> str:
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def normalize(text: str | None) -> str:
    """
    Lower-case text and strip diacritics.

    "Café" and "cafe" normalize to the same string. Applying the function
    twice gives the same result as applying it once.
    """
    if not text:
        return ""
    return _strip_marks(text.lower())


def normalize_with_offsets(text: str) -> tuple[str, list[int]]:
    """
    Normalize text while tracking where each output character came from.

    Returns the normalized string and a list where ``offsets[j]`` is the
    index in ``text`` of the character that produced normalized character
    ``j``. A trailing sentinel equal to ``len(text)`` is appended so that
    match end positions map back as well.
    """
    # Lower-case the whole string so context-dependent forms (final sigma)
    # agree with normalize(); fall back to per-character when length changes
    lowered = text.lower()
    if len(lowered) != len(text):
        lowered_chars = [char.lower() for char in text]
    else:
        lowered_chars = list(lowered)

    chars: list[str] = []
    offsets: list[int] = []
    for i, char in enumerate(lowered_chars):
        folded = _strip_marks(char)
        chars.append(folded)
        offsets.extend([i] * len(folded))
    offsets.append(len(text))
    return "".join(chars), offsets
