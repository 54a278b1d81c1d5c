"""
Cleaning for feed-supplied text (RSS titles and descriptions).

Document text handed to the analyzer is used verbatim; cleaning happens once,
when a feed item is turned into a ``Document``.
"""
from __future__ import annotations

import html
import re


_HTML_RE = re.compile(r"<[^>]+>")
_URL_RE = re.compile(r"(https?://\S+|www\.\S+)", re.IGNORECASE)
_MULTI_SPACE_RE = re.compile(r"\s+")


def strip_html(text: str) -> str:
    """Drop tags and decode entities."""
    if not text:
        return ""
    return html.unescape(_HTML_RE.sub(" ", str(text)))


def clean_text(text: str, max_length: int = 0) -> str:
    """Strip HTML and bare URLs, collapse whitespace, optionally truncate."""
    if not text:
        return ""
    cleaned = strip_html(text)
    cleaned = _URL_RE.sub(" ", cleaned)
    cleaned = cleaned.replace("\u200b", " ")
    cleaned = _MULTI_SPACE_RE.sub(" ", cleaned).strip()
    if max_length > 0:
        cleaned = cleaned[:max_length]
    return cleaned
