"""
MetadataResolver - page values for document head tags.

Derives title, URLs, description, keywords, image and language alternates from
a host page, then turns them into an ordered tag set.

Key behaviors:
- Each value is resolved lazily, at most once per render call
- Missing data omits the dependent tags, nothing is raised for it
- Image resolution walks a fallback chain and stops at the first hit
- Hreflang links only appear when at least two languages carry a code
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from functools import cached_property
from typing import Any

from src.rules.models import MetadataConfig

from ._collector import TagCollector
from .models import AlternateLink, MetadataOverrides, ResolvedContext, TagDescriptor
from .ports import HostServices, ImagePort, LanguagePort, PagePort

logger = logging.getLogger(__name__)


# --- Helpers ---


def _text(value: Any) -> str:
    """Field value as a string, empty when absent."""
    if value is None:
        return ""
    return str(value)


def build_document_title(page_title: str, separator: str, site_name: str) -> str:
    """
    Join page title and site name.

    The separator only appears when both sides are non-empty.
    """
    tokens = [
        page_title,
        separator if page_title and site_name else "",
        site_name,
    ]
    return " ".join(token for token in tokens if token)


def build_page_url(
    base_url: str,
    page_path: str,
    template: Any,
    url_segment_str: str = "",
) -> str | None:
    """
    Build an absolute page URL the way the host builds its own URLs.

    Returns None when no base URL is configured.
    """
    if not base_url:
        return None

    url_segments = bool(getattr(template, "url_segments", False))
    parts = [
        base_url.rstrip("/"),
        (page_path or "").strip("/"),
        url_segment_str if url_segments else "",
    ]
    url = "/".join(part for part in parts if part)

    slash_segments = bool(getattr(template, "slash_url_segments", False))
    slash_urls = bool(getattr(template, "slash_urls", False))
    if (url_segments and slash_segments and url_segment_str) or (
        slash_urls and not url_segment_str
    ):
        url += "/"

    return url


def coerce_image(value: Any) -> ImagePort | None:
    """
    Accept a single image or a collection of images.

    Collections yield their first image. Anything else counts as no image.
    """
    if value is None:
        return None

    if isinstance(value, ImagePort):
        return value

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        first = value[0] if len(value) else None
        return first if isinstance(first, ImagePort) else None

    first_method = getattr(value, "first", None)
    if callable(first_method):
        try:
            count = len(value)
        except TypeError:
            count = 1
        if not count:
            return None
        first = first_method()
        return first if isinstance(first, ImagePort) else None

    return None


# --- Resolver ---


class MetadataResolver:
    """
    Resolves metadata values for a single render call.

    Values are cached on the instance; build a new resolver per render.
    """

    def __init__(
        self,
        config: MetadataConfig,
        host: HostServices,
        page: PagePort,
        overrides: MetadataOverrides | None = None,
        url_segment_str: str = "",
    ) -> None:
        self._config = config
        self._host = host
        self._page = page
        self._overrides = overrides or MetadataOverrides()
        self._url_segment_str = url_segment_str or ""

    # Title

    @cached_property
    def page_title(self) -> str:
        if self._overrides.page_title is not None:
            return self._overrides.page_title
        return _text(self._page.get(self._config.page_title_selector))

    @cached_property
    def document_title(self) -> str:
        if self._overrides.document_title:
            return self._overrides.document_title
        return build_document_title(
            self.page_title,
            self._config.document_title_separator,
            self._config.site_name,
        )

    # URLs

    def url_for(self, language: LanguagePort | None = None) -> str | None:
        """Absolute URL of the page, localized when a language is given."""
        path = self._page.local_url(language) if language is not None else self._page.url
        return build_page_url(
            self._config.base_url,
            path,
            self._page.template,
            self._url_segment_str,
        )

    @cached_property
    def page_url(self) -> str | None:
        if self._overrides.page_url is not None:
            return self._overrides.page_url
        return self.url_for()

    # Description and keywords

    @cached_property
    def description(self) -> str:
        raw = self._overrides.description
        if raw is None:
            raw = self._page.get(self._config.description_selector)
        if not raw:
            logger.debug(
                "No description found with selector %r", self._config.description_selector
            )
            return ""
        return self._host.truncator.truncate(
            raw,
            self._config.description_max_length,
            self._config.description_truncate_mode,
        )

    @cached_property
    def keywords(self) -> str:
        if self._overrides.keywords is not None:
            return self._overrides.keywords
        if not self._config.keywords_selector:
            return ""
        return _text(self._page.get(self._config.keywords_selector))

    # Image

    def find_image_on_page(self, page: PagePort | None) -> ImagePort | None:
        """Image found on a page with the configured selector."""
        if page is None or not self._config.image_selector:
            return None
        return coerce_image(page.get(self._config.image_selector))

    def resize_image(self, image: ImagePort) -> ImagePort:
        """Resize according to the configured dimensions."""
        width = self._config.image_width
        height = self._config.image_height
        resizer = self._host.resizer

        if width and height:
            return resizer.size(image, width, height)
        if width:
            return resizer.width(image, width)
        if height:
            return resizer.height(image, height)
        return image

    def _image_candidates(self) -> Iterator[tuple[str, ImagePort | None]]:
        """Yield image candidates lazily, in priority order."""
        yield "override", coerce_image(self._overrides.image)
        yield "page", self.find_image_on_page(self._page)

        if self._config.image_inherit:
            for parent in reversed(list(self._page.parents)):
                yield "parent", self.find_image_on_page(parent)

        fallback_id = self._config.image_fallback_page
        if fallback_id not in (None, "", 0):
            yield "fallback", self.find_image_on_page(self._host.pages.get_by_id(fallback_id))

    @cached_property
    def image(self) -> ImagePort | None:
        for source, candidate in self._image_candidates():
            if candidate is not None:
                logger.debug("Image resolved from %s", source)
                return self.resize_image(candidate)
        logger.debug("No image resolved")
        return None

    @cached_property
    def image_alt(self) -> str | None:
        if self.image is None or not self._config.image_alt_field:
            return None
        alt = self.image.get(self._config.image_alt_field)
        return _text(alt) or None

    # Hreflang

    def _hreflang_enabled(self) -> bool:
        if not self._config.render_hreflang:
            return False

        languages = self._host.languages
        if not languages.page_names_enabled():
            logger.debug("Hreflang skipped: language page names not enabled")
            return False

        current = languages.current()
        if current is None or not current.template.has_field(self._config.hreflang_code_field):
            logger.debug(
                "Hreflang skipped: language template lacks field %r",
                self._config.hreflang_code_field,
            )
            return False

        return True

    @cached_property
    def alternate_links(self) -> tuple[AlternateLink, ...]:
        if not self._hreflang_enabled():
            return ()

        code_field = self._config.hreflang_code_field
        languages = [
            language for language in self._host.languages.all() if _text(language.get(code_field))
        ]
        if len(languages) < 2:
            logger.debug("Hreflang skipped: %d language(s) with a code", len(languages))
            return ()

        links: list[AlternateLink] = []
        for language in languages:
            if not self._page.viewable(language):
                continue
            url = self.url_for(language)
            if not url:
                continue
            links.append(AlternateLink(code=_text(language.get(code_field)), url=url))

        return tuple(links)

    # Snapshot

    def resolve(self) -> ResolvedContext:
        """Resolve every value in a fixed order."""
        return ResolvedContext(
            page_title=self.page_title,
            page_url=self.page_url,
            document_title=self.document_title,
            description=self.description,
            image=self.image,
            image_alt=self.image_alt,
            keywords=self.keywords,
            alternate_links=self.alternate_links,
        )


# --- Tag Set ---


def collect_tags(
    config: MetadataConfig,
    ctx: ResolvedContext,
    collector: TagCollector | None = None,
) -> TagCollector:
    """
    Add the configured tag families for a resolved context.

    Each tag is only added when its value is non-empty.
    """
    if collector is None:
        collector = TagCollector()
    add = collector.add_tag

    # General
    if ctx.document_title:
        add("title", None, ctx.document_title)
    if config.charset:
        add("meta", {"charset": config.charset})
    if ctx.page_url:
        add("link", {"rel": "canonical", "href": ctx.page_url})
    if config.viewport:
        add("meta", {"name": "viewport", "content": config.viewport})
    if ctx.description:
        add("meta", {"name": "description", "content": ctx.description})
    if ctx.keywords:
        add("meta", {"name": "keywords", "content": ctx.keywords})

    # Open Graph
    if config.render_og:
        if ctx.page_title:
            add("meta", {"property": "og:title", "content": ctx.page_title})
        if config.site_name:
            add("meta", {"property": "og:site_name", "content": config.site_name})
        if config.og_type:
            add("meta", {"property": "og:type", "content": config.og_type})
        if ctx.page_url:
            add("meta", {"property": "og:url", "content": ctx.page_url})
        if ctx.description:
            add("meta", {"property": "og:description", "content": ctx.description})

        if ctx.image is not None:
            add("meta", {"property": "og:image", "content": ctx.image.http_url})
            add("meta", {"property": "og:image:width", "content": ctx.image.width})
            add("meta", {"property": "og:image:height", "content": ctx.image.height})
            if ctx.image_alt:
                add("meta", {"property": "og:image:alt", "content": ctx.image_alt})

    # Twitter
    if config.render_twitter:
        if config.twitter_card:
            add("meta", {"name": "twitter:card", "content": config.twitter_card})
        if config.twitter_site:
            add("meta", {"name": "twitter:site", "content": config.twitter_site})
        if config.twitter_creator:
            add("meta", {"name": "twitter:creator", "content": config.twitter_creator})
        if ctx.page_title:
            add("meta", {"name": "twitter:title", "content": ctx.page_title})
        if ctx.description:
            add("meta", {"name": "twitter:description", "content": ctx.description})

        if ctx.image is not None:
            add("meta", {"name": "twitter:image", "content": ctx.image.http_url})
            if ctx.image_alt:
                # Historical markup uses property here
                add("meta", {"property": "twitter:image:alt", "content": ctx.image_alt})

    # Facebook
    if config.render_facebook and config.facebook_app_id:
        add("meta", {"property": "fb:app_id", "content": config.facebook_app_id})

    # Hreflang
    for link in ctx.alternate_links:
        add("link", {"rel": "alternate", "href": link.url, "hreflang": link.code})

    return collector


def build_tags(
    config: MetadataConfig,
    host: HostServices,
    page: PagePort,
    overrides: MetadataOverrides | None = None,
    url_segment_str: str = "",
    extra_tags: Sequence[TagDescriptor] = (),
) -> tuple[ResolvedContext, tuple[TagDescriptor, ...]]:
    """Resolve a page and return its context and ordered tags."""
    resolver = MetadataResolver(config, host, page, overrides, url_segment_str)
    ctx = resolver.resolve()
    collector = collect_tags(config, ctx)
    collector.extend(list(extra_tags))
    return ctx, collector.tags
