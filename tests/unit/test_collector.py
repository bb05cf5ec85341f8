"""
Tag collector tests.

Append-only and key-indexed collectors.
"""

from __future__ import annotations

import pytest

from src.components.metadata import (
    KeyedTagCollector,
    ResolvedContext,
    TagCollector,
    collect_tags,
)
from src.rules.models import MetadataConfig


class TestTagCollector:
    """Test the append-only collector."""

    def test_add_tag_returns_all_tags(self) -> None:
        """Each call returns the full list so far."""
        collector = TagCollector()
        collector.add_tag("title", None, "Home")
        tags = collector.add_tag("meta", {"charset": "utf-8"})

        assert [t.tag_name for t in tags] == ["title", "meta"]

    def test_no_deduplication(self) -> None:
        """The same tag twice yields two elements."""
        collector = TagCollector()
        collector.add_tag("meta", {"name": "robots", "content": "index"})
        collector.add_tag("meta", {"name": "robots", "content": "index"})

        assert len(collector) == 2

    def test_returned_list_is_a_copy(self) -> None:
        """Mutating the returned list does not touch the collector."""
        collector = TagCollector()
        tags = collector.add_tag("meta")
        tags.clear()

        assert len(collector) == 1

    def test_empty_name_rejected(self) -> None:
        """Empty tag names raise ValueError."""
        with pytest.raises(ValueError):
            TagCollector().add_tag("")

    def test_clear(self) -> None:
        """Clear drops all tags."""
        collector = TagCollector()
        collector.add_tag("meta")
        collector.clear()

        assert collector.tags == ()

    def test_collect_tags_fills_given_collector(self) -> None:
        """An empty collector passed in is filled and returned."""
        ctx = ResolvedContext(
            page_title="Home",
            document_title="Home - Example",
            page_url="https://example.com/",
            description="",
            keywords="",
        )
        collector = TagCollector()

        returned = collect_tags(MetadataConfig(), ctx, collector)

        assert returned is collector
        assert len(collector) > 0
        assert collector.tags[0].content == "Home - Example"


class TestKeyedTagCollector:
    """Test the key-indexed collector."""

    def test_overwrite_keeps_first_position(self) -> None:
        """Replacing a key keeps where it was first set."""
        collector = KeyedTagCollector()
        collector.set_tag("title", "title", None, "First")
        collector.set_tag("charset", "meta", {"charset": "utf-8"})
        tags = collector.set_tag("title", "title", None, "Second")

        assert [t.tag_name for t in tags] == ["title", "meta"]
        assert tags[0].content == "Second"
        assert len(collector) == 2

    def test_remove_tag(self) -> None:
        """Removing a key drops its tag."""
        collector = KeyedTagCollector()
        collector.set_tag("description", "meta", {"name": "description", "content": "x"})

        assert collector.remove_tag("description") is True
        assert "description" not in collector
        assert collector.tags == ()

    def test_remove_missing_key(self) -> None:
        """Removing an unknown key reports False."""
        assert KeyedTagCollector().remove_tag("nope") is False

    def test_removed_key_goes_to_end_when_set_again(self) -> None:
        """A removed key starts a new position."""
        collector = KeyedTagCollector()
        collector.set_tag("a", "meta", {"name": "a"})
        collector.set_tag("b", "meta", {"name": "b"})
        collector.remove_tag("a")
        collector.set_tag("a", "meta", {"name": "a"})

        assert [t.attrs["name"] for t in collector] == ["b", "a"]

    def test_get_tag(self) -> None:
        """Tags can be read back by key."""
        collector = KeyedTagCollector()
        collector.set_tag("canonical", "link", {"rel": "canonical", "href": "/"})

        tag = collector.get_tag("canonical")
        assert tag is not None
        assert tag.attrs["href"] == "/"
        assert collector.get_tag("missing") is None
