"""Conversions between the tag representations and the tag cleaning pipeline.

A tag field lives in three forms: a separator-delimited string, an array of
tags and an array of URL-safe slugs. Everything here is pure and tolerant:
input of the wrong type degrades to the empty value instead of raising.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import quote

from .stop_words import STOP_WORDS
from .tag_set import TagSet

# Anything outside these characters becomes a space during cleanup
_NOISE_RE = re.compile(r"[^a-z0-9/'\"]+", re.IGNORECASE)

DEFAULT_SEPARATOR = " "


def _text_utils(text_utils):
    if text_utils is not None:
        return text_utils
    from taggable.services.text import get_text_utilities

    return get_text_utilities()


def _as_text(value) -> str:
    return value if isinstance(value, str) else ""


def _as_items(value) -> list:
    if value is None or isinstance(value, (str, bytes)):
        return []
    if not isinstance(value, Iterable):
        return []
    return list(value)


def dedupe(items: Iterable) -> list:
    """Drop repeated items, keeping the first occurrence."""
    return list(dict.fromkeys(items))


def string_to_array(text: str | None, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Split a tag string into a deduplicated list of stripped tags."""
    text = _as_text(text)
    if not text:
        return []
    pieces = (piece.strip() for piece in text.split(separator or DEFAULT_SEPARATOR))
    return dedupe(piece for piece in pieces if piece)


def array_to_string(tags: Iterable | None, separator: str = DEFAULT_SEPARATOR) -> str:
    """Join tags with the separator, skipping blanks and repeats."""
    items = (str(tag) for tag in _as_items(tags) if tag is not None)
    separator = separator or DEFAULT_SEPARATOR
    return separator.join(dedupe(tag for tag in items if tag.strip()))


def array_to_slugs(tags: Iterable | None, text_utils=None) -> list[str]:
    """Slug every distinct tag; slug i belongs to distinct tag i."""
    items = (str(tag) for tag in _as_items(tags) if tag is not None)
    distinct = dedupe(tag for tag in items if tag.strip())
    if not distinct:
        return []
    utils = _text_utils(text_utils)
    return [utils.slugify(tag) for tag in distinct]


def string_to_slugs(text: str | None, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """URL-encode every token of a tag string, then dedupe the encodings."""
    text = _as_text(text)
    if not text:
        return []
    tokens = text.split(separator or DEFAULT_SEPARATOR)
    encoded = (quote(token.strip(), safe="") for token in tokens)
    return dedupe(token for token in encoded if token)


def filter_tags(
    text: str | None,
    separator: str = ",",
    text_utils=None,
    stop_words: frozenset[str] = STOP_WORDS,
    min_length: int | None = None,
) -> str:
    """Clean free text into the canonical tag string.

    Comma and whitespace separated tokens are stripped of punctuation,
    singularized and lowercased. Cleanup can open up spaces inside a
    token ("rock&roll" becomes "rock roll") and those pieces become tags
    of their own. Short tokens and stop words are dropped. Survivors are
    joined with the separator, a comma unless the caller stores tags
    under another one.
    """
    text = _as_text(text)
    if not text:
        return ""
    if min_length is None:
        from taggable.config import settings

        min_length = settings.min_tag_length
    utils = _text_utils(text_utils)

    tokens = [word for piece in text.split(",") for word in piece.split()]

    cleaned = []
    for token in tokens:
        token = _NOISE_RE.sub(" ", token).strip()
        if token:
            token = utils.singularize(token)
        cleaned.extend(token.lower().split())

    kept = dedupe(token for token in cleaned if len(token) >= min_length)
    return separator.join(token for token in kept if token not in stop_words)


def normalize(
    text: str | None,
    separator: str = ",",
    text_utils=None,
) -> TagSet:
    """Filter free text and return the resulting tag set."""
    return TagSet.from_string(filter_tags(text, separator, text_utils=text_utils), separator)
