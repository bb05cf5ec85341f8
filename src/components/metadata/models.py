"""
Metadata component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from src.rules.models import MetadataConfig

AttributeValue = str | int | float | None

# --- Validation Error ---


@dataclass(frozen=True)
class MetadataValidationError:
    """Metadata validation error."""

    code: str
    message: str
    field: str | None = None


# --- Tag Descriptor ---


@dataclass(frozen=True)
class TagDescriptor:
    """
    One emittable markup element.

    Attributes keep insertion order. Empty attribute values are kept here and
    dropped by the renderer.
    """

    tag_name: str
    attributes: tuple[tuple[str, AttributeValue], ...] = ()
    content: str | None = None

    def __post_init__(self) -> None:
        if not self.tag_name:
            raise ValueError("Tag name must not be empty")

    @classmethod
    def create(
        cls,
        tag_name: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        content: str | None = None,
    ) -> TagDescriptor:
        """Build a descriptor from an ordered attribute mapping."""
        return cls(
            tag_name=tag_name,
            attributes=tuple((attributes or {}).items()),
            content=content,
        )

    @property
    def attrs(self) -> dict[str, AttributeValue]:
        """Attributes as an insertion-ordered dict."""
        return dict(self.attributes)


# --- Resolved Values ---


@dataclass(frozen=True)
class AlternateLink:
    """Localized equivalent of the current page."""

    code: str
    url: str


@dataclass(frozen=True)
class ResolvedContext:
    """Values derived for one render call."""

    page_title: str
    document_title: str
    page_url: str | None
    description: str
    keywords: str
    image: Any | None = None
    image_alt: str | None = None
    alternate_links: tuple[AlternateLink, ...] = ()


@dataclass(frozen=True)
class MetadataOverrides:
    """
    Values assigned by the caller before rendering.

    A non-None value replaces the resolved one. The description is still
    truncated and the image still goes through the fallback chain as its
    first candidate.
    """

    page_title: str | None = None
    page_url: str | None = None
    document_title: str | None = None
    description: str | None = None
    keywords: str | None = None
    image: Any | None = None


# --- Input Models ---


@dataclass(frozen=True)
class RenderMetadataInput:
    """Input for rendering head markup for a page."""

    config: MetadataConfig | Mapping[str, Any]
    page: Any
    overrides: MetadataOverrides = field(default_factory=MetadataOverrides)
    url_segment_str: str = ""
    extra_tags: tuple[TagDescriptor, ...] = ()


@dataclass(frozen=True)
class CollectTagsInput:
    """Input for collecting tag descriptors without rendering them."""

    config: MetadataConfig | Mapping[str, Any]
    page: Any
    overrides: MetadataOverrides = field(default_factory=MetadataOverrides)
    url_segment_str: str = ""
    extra_tags: tuple[TagDescriptor, ...] = ()


# --- Output Models ---


@dataclass(frozen=True)
class RenderMetadataOutput:
    """Output containing rendered markup and the descriptors behind it."""

    markup: str | None
    tags: tuple[TagDescriptor, ...] = ()
    context: ResolvedContext | None = None
    errors: list[MetadataValidationError] = field(default_factory=list)
    success: bool = True
