"""Tests for text utility providers."""

from types import SimpleNamespace

import pytest

from taggable.services.text import (
    SimpleTextUtilities,
    SpacyTextUtilities,
    TextUtilitiesError,
    ascii_slug,
    create_text_utilities,
    get_text_utilities,
    set_text_utilities,
)


class TestSimpleTextUtilities:
    """Test the rule-based provider."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("cats", "cat"),
            ("stories", "story"),
            ("classes", "class"),
            ("status", "status"),
            ("analysis", "analysis"),
            ("glass", "glass"),
            ("gas", "gas"),
            ("python", "python"),
            ("", ""),
        ],
    )
    def test_singularize(self, word, expected):
        assert SimpleTextUtilities().singularize(word) == expected

    def test_slugify(self):
        utils = SimpleTextUtilities()
        assert utils.slugify("Ruby on Rails!") == "ruby-on-rails"
        assert utils.slugify("Crème Brûlée") == "creme-brulee"
        assert utils.slugify("--") == ""


class TestAsciiSlug:
    """Test the shared slug transform."""

    def test_collapses_punctuation_runs(self):
        assert ascii_slug("C++ / Java  &  Go") == "c-java-go"

    def test_empty(self):
        assert ascii_slug("") == ""
        assert ascii_slug("日本語") == ""


class TestFactory:
    """Test provider selection."""

    def test_create_by_name(self):
        assert isinstance(create_text_utilities("simple"), SimpleTextUtilities)
        assert isinstance(create_text_utilities("spacy"), SpacyTextUtilities)

    def test_create_unknown(self):
        with pytest.raises(ValueError, match="Unknown text utilities provider"):
            create_text_utilities("nltk")

    def test_set_and_reset(self, monkeypatch, simple_text_utilities):
        assert get_text_utilities() is simple_text_utilities

        monkeypatch.setattr("taggable.config.settings.text_utilities", "simple")
        set_text_utilities(None)
        provider = get_text_utilities()
        assert isinstance(provider, SimpleTextUtilities)
        assert provider is not simple_text_utilities
        # Cached for the process
        assert get_text_utilities() is provider


class TestSpacyTextUtilities:
    """Test the spaCy provider without requiring a model for most checks."""

    def test_name_and_lazy_load(self):
        utils = SpacyTextUtilities("en_core_web_sm")
        assert utils.name == "spacy-en_core_web_sm"
        assert utils._nlp is None

    def test_blank_input_skips_model(self):
        utils = SpacyTextUtilities("not_a_real_model")
        assert utils.singularize("") == ""
        assert utils.singularize("   ") == ""

    def test_singularizes_last_word_of_phrase(self):
        """Only a trailing plural noun is replaced, the rest of the phrase is kept."""

        def tagger(text):
            tokens, idx = [], 0
            for word in text.split(" "):
                plural = word.endswith("s")
                tokens.append(
                    SimpleNamespace(
                        text=word,
                        idx=idx,
                        tag_="NNS" if plural else "NN",
                        lemma_=word[:-1] if plural else word,
                    )
                )
                idx += len(word) + 1
            return tokens

        utils = SpacyTextUtilities("en_core_web_sm")
        utils._nlp = tagger

        assert utils.singularize("cats dogs") == "cats dog"
        assert utils.singularize("python tips") == "python tip"
        assert utils.singularize("machine learning") == "machine learning"

    def test_missing_model(self):
        pytest.importorskip("spacy")
        utils = SpacyTextUtilities("not_a_real_model")
        with pytest.raises(TextUtilitiesError, match="python -m spacy download"):
            utils.singularize("cats")

    def test_singularizes_plural_nouns(self):
        spacy = pytest.importorskip("spacy")
        if not spacy.util.is_package("en_core_web_sm"):
            pytest.skip("en_core_web_sm is not installed")

        utils = SpacyTextUtilities("en_core_web_sm")
        assert utils.singularize("stories") == "story"
        assert utils.singularize("running") == "running"
        assert utils.slugify("Python Tips") == "python-tips"
