"""
Tag collectors.

TagCollector is append-only: adding the same tag twice yields two elements.
KeyedTagCollector indexes tags by key: setting an existing key replaces the
tag in its original position, and a key can be removed again.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .models import AttributeValue, TagDescriptor


class TagCollector:
    """Ordered, append-only tag accumulator for one render call."""

    def __init__(self) -> None:
        self._tags: list[TagDescriptor] = []

    def add_tag(
        self,
        tag_name: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        content: str | None = None,
    ) -> list[TagDescriptor]:
        """Append a tag and return all tags collected so far."""
        self._tags.append(TagDescriptor.create(tag_name, attributes, content))
        return list(self._tags)

    def extend(self, tags: tuple[TagDescriptor, ...] | list[TagDescriptor]) -> None:
        """Append ready-made descriptors."""
        self._tags.extend(tags)

    @property
    def tags(self) -> tuple[TagDescriptor, ...]:
        return tuple(self._tags)

    def clear(self) -> None:
        self._tags.clear()

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[TagDescriptor]:
        return iter(self.tags)


class KeyedTagCollector:
    """
    Tag accumulator indexed by key.

    Overwriting a key keeps the position of its first insertion.
    """

    def __init__(self) -> None:
        self._tags: dict[str, TagDescriptor] = {}

    def set_tag(
        self,
        key: str,
        tag_name: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        content: str | None = None,
    ) -> list[TagDescriptor]:
        """Set or replace the tag under key and return all tags."""
        # dict assignment to an existing key keeps its position
        self._tags[key] = TagDescriptor.create(tag_name, attributes, content)
        return list(self._tags.values())

    def remove_tag(self, key: str) -> bool:
        """Remove the tag under key. Returns False if the key was not set."""
        return self._tags.pop(key, None) is not None

    def get_tag(self, key: str) -> TagDescriptor | None:
        return self._tags.get(key)

    @property
    def tags(self) -> tuple[TagDescriptor, ...]:
        return tuple(self._tags.values())

    def clear(self) -> None:
        self._tags.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[TagDescriptor]:
        return iter(self.tags)
