"""Pluggable linguistic helpers: singularization and slugs."""

from .base import TextUtilities, TextUtilitiesError, ascii_slug
from .factory import create_text_utilities, get_text_utilities, set_text_utilities
from .simple import SimpleTextUtilities
from .spacy_text import SpacyTextUtilities

__all__ = [
    "SimpleTextUtilities",
    "SpacyTextUtilities",
    "TextUtilities",
    "TextUtilitiesError",
    "ascii_slug",
    "create_text_utilities",
    "get_text_utilities",
    "set_text_utilities",
]
