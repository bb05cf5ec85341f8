"""
Metadata component port definitions.

The host CMS implements these; the component never reaches for globals.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


class TemplatePort(Protocol):
    """Template of a page or language page."""

    url_segments: bool
    slash_url_segments: bool
    slash_urls: bool

    def has_field(self, name: str) -> bool:
        """Whether the template includes the named field."""
        ...


class LanguagePort(Protocol):
    """Host language."""

    template: TemplatePort

    def get(self, field: str) -> Any:
        """Get a field value from the language page."""
        ...


class PagePort(Protocol):
    """Page-like object the metadata is built for."""

    url: str
    template: TemplatePort

    @property
    def parents(self) -> Sequence[PagePort]:
        """Ancestors ordered from the root to the closest parent."""
        ...

    def get(self, selector: str) -> Any:
        """Look up a field value by selector, None when absent."""
        ...

    def local_url(self, language: LanguagePort) -> str:
        """Page path in the given language."""
        ...

    def viewable(self, language: LanguagePort) -> bool:
        """Whether the page can be viewed in the given language."""
        ...


@runtime_checkable
class ImagePort(Protocol):
    """Image stored on a page."""

    http_url: str
    width: int
    height: int

    def get(self, field: str) -> Any:
        """Get a custom field value (e.g. alt text)."""
        ...


class LanguageEnumeratorPort(Protocol):
    """Host language registry."""

    def all(self) -> Sequence[LanguagePort]:
        """All languages in host order."""
        ...

    def current(self) -> LanguagePort | None:
        """Language of the current request."""
        ...

    def page_names_enabled(self) -> bool:
        """Whether language names are part of page URLs."""
        ...


class PageLookupPort(Protocol):
    """Host page storage."""

    def get_by_id(self, page_id: int | str) -> PagePort | None:
        """Get a page by ID, None if missing."""
        ...


class ImageResizerPort(Protocol):
    """Host image resizing."""

    def size(self, image: ImagePort, width: int, height: int) -> ImagePort:
        """Crop/fit the image to an exact box."""
        ...

    def width(self, image: ImagePort, width: int) -> ImagePort:
        """Scale to width, keeping the aspect ratio."""
        ...

    def height(self, image: ImagePort, height: int) -> ImagePort:
        """Scale to height, keeping the aspect ratio."""
        ...


class TextTruncatorPort(Protocol):
    """Host text utility."""

    def truncate(self, text: Any, max_length: int, mode: str) -> str:
        """Truncate text using a truncate mode."""
        ...


@dataclass(frozen=True)
class HostServices:
    """Host services injected into the resolver."""

    languages: LanguageEnumeratorPort
    pages: PageLookupPort
    resizer: ImageResizerPort
    truncator: TextTruncatorPort
