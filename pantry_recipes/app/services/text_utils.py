"""Text normalization helpers shared by the catalog and the AI reply parser."""

import re
from typing import List

_TRAILING_PERIODS_RE = re.compile(r"\.+$")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9])")


def collapse_whitespace(text: str) -> str:
    """Trim and collapse runs of whitespace to single spaces."""
    return re.sub(r"\s+", " ", text or "").strip()


def _capitalize_part(part: str) -> str:
    return part[:1].upper() + part[1:].lower()


def title_case(text: str) -> str:
    """Title-case each word, treating hyphenated sub-words as words.

    Trailing periods are stripped, so "extra-virgin olive oil." becomes
    "Extra-Virgin Olive Oil".
    """
    cleaned = _TRAILING_PERIODS_RE.sub("", (text or "").strip()).strip()
    words = cleaned.split()
    return " ".join("-".join(_capitalize_part(part) for part in word.split("-")) for word in words)


def split_sentences(text: str) -> List[str]:
    """Split prose into sentences on ". ", "! " or "? " before an uppercase letter or digit."""
    pieces = _SENTENCE_BOUNDARY_RE.split(text or "")
    return [piece.strip() for piece in pieces if piece.strip()]


def split_list_items(text: str) -> List[str]:
    """Split a comma/semicolon separated list, trimming and dropping empty items."""
    return [item.strip() for item in re.split(r"[,;]", text or "") if item.strip()]
