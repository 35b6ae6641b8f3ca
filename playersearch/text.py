"""Text normalization and tokenization for name search."""

import re
import unicodedata

# Combining Diacritical Marks block
_COMBINING_MARKS_RE = re.compile('[\u0300-\u036f]')


def normalize_text(text: str) -> str:
    """Normalize text for accent- and case-insensitive comparison.

    Applies NFD decomposition, removes the combining diacritical marks
    (U+0300–U+036F) and lower-cases. Whitespace and punctuation are
    left untouched.

    Args:
        text: Raw text.

    Returns:
        Normalized text.
    """
    decomposed = unicodedata.normalize('NFD', text)
    return _COMBINING_MARKS_RE.sub('', decomposed).lower()


def split_terms(text: str) -> list[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return text.split()
