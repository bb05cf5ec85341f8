"""
In-memory host adapter.

Pages, templates, images and languages held in plain objects. Implements the
metadata component ports without a CMS behind them. Used for local
development and tests.

Key behaviors:
- Page fields are looked up by selector name from a dict
- Images resize into new image objects and remember how they were made
- Languages are enumerated in insertion order
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass
class MemoryTemplate:
    """Template flags and field names."""

    name: str = "basic-page"
    fields: frozenset[str] = frozenset()
    url_segments: bool = False
    slash_url_segments: bool = False
    slash_urls: bool = False

    def has_field(self, name: str) -> bool:
        return name in self.fields


@dataclass(frozen=True)
class MemoryImage:
    """
    Image with dimensions and custom fields.

    Resize operations return a new image; `resized_by` records the call.
    """

    http_url: str
    width: int
    height: int
    fields: dict[str, Any] = field(default_factory=dict)
    resized_by: tuple[str, ...] = ()

    def get(self, name: str) -> Any:
        return self.fields.get(name)

    def _variation(self, width: int, height: int, op: str) -> MemoryImage:
        stem, dot, ext = self.http_url.rpartition(".")
        url = f"{stem}.{width}x{height}.{ext}" if dot else f"{self.http_url}.{width}x{height}"
        return replace(
            self,
            http_url=url,
            width=width,
            height=height,
            resized_by=self.resized_by + (op,),
        )

    def size(self, width: int, height: int) -> MemoryImage:
        return self._variation(width, height, f"size({width},{height})")

    def resize_width(self, width: int) -> MemoryImage:
        height = math.floor(self.height * width / self.width) if self.width else self.height
        return self._variation(width, height, f"width({width})")

    def resize_height(self, height: int) -> MemoryImage:
        width = math.floor(self.width * height / self.height) if self.height else self.width
        return self._variation(width, height, f"height({height})")


class MemoryImageCollection:
    """Collection of images stored in one field."""

    def __init__(self, images: list[MemoryImage] | None = None) -> None:
        self._images = list(images or [])

    def first(self) -> MemoryImage | None:
        return self._images[0] if self._images else None

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[MemoryImage]:
        return iter(self._images)


@dataclass
class MemoryLanguage:
    """Language page with fields (e.g. its hreflang code)."""

    name: str
    fields: dict[str, Any] = field(default_factory=dict)
    template: MemoryTemplate = field(default_factory=lambda: MemoryTemplate(name="language"))

    def get(self, name: str) -> Any:
        return self.fields.get(name)


@dataclass
class MemoryPage:
    """
    Page with fields, ancestors and localized paths.

    `parents` is ordered from the root to the closest parent.
    """

    id: int
    url: str
    fields: dict[str, Any] = field(default_factory=dict)
    template: MemoryTemplate = field(default_factory=MemoryTemplate)
    parents: list[MemoryPage] = field(default_factory=list)
    local_urls: dict[str, str] = field(default_factory=dict)
    hidden_in: set[str] = field(default_factory=set)
    lookups: list[str] = field(default_factory=list)

    def get(self, selector: str) -> Any:
        self.lookups.append(selector)
        return self.fields.get(selector)

    def local_url(self, language: MemoryLanguage) -> str:
        return self.local_urls.get(language.name, self.url)

    def viewable(self, language: MemoryLanguage) -> bool:
        return language.name not in self.hidden_in


class MemoryPageStore:
    """Pages by ID."""

    def __init__(self, pages: list[MemoryPage] | None = None) -> None:
        self._pages: dict[int | str, MemoryPage] = {}
        for page in pages or []:
            self.add(page)

    def add(self, page: MemoryPage) -> MemoryPage:
        self._pages[page.id] = page
        return page

    def get_by_id(self, page_id: int | str) -> MemoryPage | None:
        page = self._pages.get(page_id)
        if page is None and isinstance(page_id, str) and page_id.isdigit():
            page = self._pages.get(int(page_id))
        return page


class MemoryLanguageRegistry:
    """Languages in host order plus the current request language."""

    def __init__(
        self,
        languages: list[MemoryLanguage] | None = None,
        current: MemoryLanguage | None = None,
        page_names: bool = True,
    ) -> None:
        self._languages = list(languages or [])
        self._current = current if current is not None else next(iter(self._languages), None)
        self._page_names = page_names

    def all(self) -> list[MemoryLanguage]:
        return list(self._languages)

    def current(self) -> MemoryLanguage | None:
        return self._current

    def page_names_enabled(self) -> bool:
        return self._page_names
