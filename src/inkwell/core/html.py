"""Helpers for the editor's HTML note bodies."""

import html
import re

# block-level closers become whitespace so words from adjacent blocks don't merge
_BLOCK_BREAK = re.compile(r"</(p|div|h[1-6]|li|blockquote|pre|tr)>|<br\s*/?>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")
_WHITESPACE = re.compile(r"\s+")


def html_to_text(raw_html: str) -> str:
    """Strip markup and collapse whitespace."""
    if not raw_html:
        return ""
    text = _BLOCK_BREAK.sub(" ", raw_html)
    text = _TAG.sub("", text)
    text = html.unescape(text)
    return _WHITESPACE.sub(" ", text).strip()
