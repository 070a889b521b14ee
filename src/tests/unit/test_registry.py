"""Tests for the tag configuration registry."""

import pytest

from taggable.domain import TagFieldConfig, TagRegistry, UnknownTagField


class TestTagFieldConfig:
    """Test per-field configuration defaults."""

    def test_defaults(self):
        config = TagFieldConfig(name="keywords")
        assert config.separator == " "
        assert config.array_field == "keywords_array"
        assert config.slug_field == "keywords_slug"
        assert config.default_type is None
        assert config.attributes == ("keywords", "keywords_array", "keywords_slug")

    def test_empty_separator_becomes_space(self):
        assert TagFieldConfig(name="tags", separator="").separator == " "
        assert TagFieldConfig(name="tags", separator=None).separator == " "


class TestTagRegistry:
    """Test registering and looking up tag fields."""

    def test_register_merges_defaults(self):
        registry = TagRegistry("Article")
        config = registry.register("keywords", separator=",", default_type="seo")

        assert config.separator == ","
        assert config.array_field == "keywords_array"
        assert config.slug_field == "keywords_slug"
        assert config.default_type == "seo"
        assert registry.config_for("keywords") is config

    def test_register_defaults_to_tags_field(self):
        registry = TagRegistry()
        registry.register()
        assert registry.contexts() == ["tags"]
        assert registry.get_separator("tags") == " "

    def test_custom_storage_names(self):
        registry = TagRegistry()
        registry.register("topics", array_field="topic_list", slug_field="topic_slugs")

        options = registry.options_for("topics")
        assert options["array_field"] == "topic_list"
        assert options["slug_field"] == "topic_slugs"

    def test_contexts_in_registration_order(self):
        registry = TagRegistry()
        registry.register("tags")
        registry.register("keywords")
        registry.register("categories")
        assert registry.contexts() == ["tags", "keywords", "categories"]

    def test_reregistering_overwrites(self):
        registry = TagRegistry()
        registry.register("tags", separator=",")
        registry.register("tags", separator="|", array_field="tag_list")

        assert registry.contexts() == ["tags"]
        assert registry.get_separator("tags") == "|"
        assert registry.config_for("tags").array_field == "tag_list"
        # The old array attribute no longer maps to the field
        assert registry.field_for_attribute("tags_array") is None
        assert registry.field_for_attribute("tag_list") == ("array", "tags")

    def test_unknown_option_rejected(self):
        registry = TagRegistry()
        with pytest.raises(TypeError, match="seperator"):
            registry.register("tags", seperator=",")

    def test_unknown_field(self):
        registry = TagRegistry("Article")

        with pytest.raises(UnknownTagField) as exc_info:
            registry.config_for("nonexistent_field")

        assert exc_info.value.field == "nonexistent_field"
        assert "Article" in str(exc_info.value)
        # Also catchable as a KeyError
        with pytest.raises(KeyError):
            registry.get_separator("nonexistent_field")

    def test_set_separator(self):
        registry = TagRegistry()
        registry.register("tags")

        registry.set_separator("tags", ",")
        assert registry.get_separator("tags") == ","

        registry.set_separator("tags", None)
        assert registry.get_separator("tags") == " "

        registry.set_separator("tags", "")
        assert registry.get_separator("tags") == " "

    def test_set_separator_coerces_to_string(self):
        registry = TagRegistry()
        registry.register("tags")
        registry.set_separator("tags", 0)
        assert registry.get_separator("tags") == "0"

    def test_set_separator_unknown_field(self):
        with pytest.raises(UnknownTagField):
            TagRegistry().set_separator("tags", ",")

    def test_attribute_lookup_table(self):
        registry = TagRegistry()
        registry.register("keywords")

        assert registry.field_for_attribute("keywords") == ("string", "keywords")
        assert registry.field_for_attribute("keywords_array") == ("array", "keywords")
        assert registry.field_for_attribute("keywords_slug") == ("slug", "keywords")
        assert registry.field_for_attribute("title") is None

    def test_copy_is_independent(self):
        parent = TagRegistry("Parent")
        parent.register("tags", separator=",")

        child = parent.copy("Child")
        child.register("keywords")
        child.set_separator("tags", "|")

        assert parent.contexts() == ["tags"]
        assert parent.get_separator("tags") == ","
        assert child.contexts() == ["tags", "keywords"]
        assert child.get_separator("tags") == "|"
        assert child.owner == "Child"

    def test_default_separator_from_settings(self, monkeypatch):
        monkeypatch.setattr("taggable.config.settings.default_separator", ",")

        registry = TagRegistry()
        registry.register("tags")
        assert registry.get_separator("tags") == ","
