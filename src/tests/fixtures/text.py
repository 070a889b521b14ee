"""Text utility fixtures for testing."""

import pytest

from taggable.services.text import SimpleTextUtilities, set_text_utilities


@pytest.fixture(autouse=True)
def simple_text_utilities():
    """Use the rule-based provider so tests never load a spaCy model."""
    provider = SimpleTextUtilities()
    set_text_utilities(provider)
    yield provider
    set_text_utilities(None)
