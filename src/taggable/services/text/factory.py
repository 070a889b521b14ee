"""Factory for the process-wide text utility provider."""

from taggable.config import settings

from .base import TextUtilities
from .simple import SimpleTextUtilities
from .spacy_text import SpacyTextUtilities

_provider: TextUtilities | None = None


def get_text_utilities() -> TextUtilities:
    """Get the configured text utility provider.

    Uses TAGGABLE_TEXT_UTILITIES from settings to determine which
    provider to instantiate; the instance is cached for the process.
    """
    global _provider
    if _provider is None:
        _provider = create_text_utilities(settings.text_utilities)
    return _provider


def set_text_utilities(provider: TextUtilities | None) -> None:
    """Swap the process default provider, None restores the configured one."""
    global _provider
    _provider = provider


def create_text_utilities(name: str) -> TextUtilities:
    """Instantiate a provider by name."""
    # Settings already validates the provider name
    if name == "spacy":
        return SpacyTextUtilities()
    elif name == "simple":
        return SimpleTextUtilities()
    else:
        raise ValueError(
            f"Unknown text utilities provider: {name}. Valid options: spacy, simple"
        )
