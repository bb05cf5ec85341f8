"""
Tag descriptor serialization.

Values are written as given: callers pass pre-sanitized strings, nothing is
HTML-escaped here.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import AttributeValue, TagDescriptor


def _is_empty(value: AttributeValue) -> bool:
    return value is None or value == "" or value == 0


def render_attributes(attributes: Iterable[tuple[str, AttributeValue]]) -> str:
    """Render attributes in order, skipping empty values."""
    return "".join(
        f' {name}="{value}"' for name, value in attributes if not _is_empty(value)
    )


def render_tag(tag: TagDescriptor) -> str:
    """Render one descriptor."""
    markup = f"<{tag.tag_name}{render_attributes(tag.attributes)}>"
    if tag.content:
        markup += f"{tag.content}</{tag.tag_name}>"
    return markup


def render_tags(tags: Iterable[TagDescriptor]) -> str | None:
    """
    Render descriptors into one markup string.

    Returns None when there is nothing to render.
    """
    tags = list(tags)
    if not tags:
        return None
    return "".join(render_tag(tag) for tag in tags)
