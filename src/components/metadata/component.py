"""
Metadata component - document head markup builder.

Builds <title>, <meta> and <link> markup from a host page and configuration.

Invariants:
- I1: Tags appear in a fixed family order, attributes in insertion order
- I2: Empty attribute values are never rendered
- I3: An empty tag list renders to None, not ""
- I4: Missing page data omits tags, it never raises
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from src.adapters.image_resizer import DelegatingImageResizer
from src.adapters.text_truncator import SanitizerTruncator
from src.rules.loader import config_from_mapping
from src.rules.models import MetadataConfig

from ._impl import build_tags
from ._markup import render_tags
from .models import (
    CollectTagsInput,
    MetadataValidationError,
    RenderMetadataInput,
    RenderMetadataOutput,
)
from .ports import (
    HostServices,
    ImageResizerPort,
    LanguageEnumeratorPort,
    PageLookupPort,
    TextTruncatorPort,
)

logger = logging.getLogger(__name__)


def create_host_services(
    languages: LanguageEnumeratorPort,
    pages: PageLookupPort,
    resizer: ImageResizerPort | None = None,
    truncator: TextTruncatorPort | None = None,
) -> HostServices:
    """
    Bundle host services, filling in the default resizer and truncator.

    Args:
        languages: Host language registry.
        pages: Host page storage.
        resizer: Image resizer (defaults to the image's own resize methods).
        truncator: Text truncator (defaults to the built-in truncate modes).

    Returns:
        HostServices bundle.
    """
    return HostServices(
        languages=languages,
        pages=pages,
        resizer=resizer or DelegatingImageResizer(),
        truncator=truncator or SanitizerTruncator(),
    )


def _resolve_config(
    config: MetadataConfig | Mapping[str, Any],
) -> tuple[MetadataConfig | None, list[MetadataValidationError]]:
    """Accept a ready config or validate a mapping."""
    if isinstance(config, MetadataConfig):
        return config, []
    try:
        return config_from_mapping(config), []
    except ValueError as e:
        logger.warning("Invalid metadata config: %s", e)
        return None, [
            MetadataValidationError(code="invalid_config", message=str(e), field="config")
        ]


# --- Component Entry Points ---


def run_collect_tags(inp: CollectTagsInput, *, host: HostServices) -> RenderMetadataOutput:
    """
    Resolve page values and collect tag descriptors without rendering.

    Args:
        inp: Input containing config, page, overrides and extra tags.
        host: Host services bundle.

    Returns:
        RenderMetadataOutput with tags and context; markup is None.
    """
    config, errors = _resolve_config(inp.config)
    if config is None:
        return RenderMetadataOutput(markup=None, errors=errors, success=False)

    ctx, tags = build_tags(
        config,
        host,
        inp.page,
        overrides=inp.overrides,
        url_segment_str=inp.url_segment_str,
        extra_tags=inp.extra_tags,
    )

    return RenderMetadataOutput(markup=None, tags=tags, context=ctx)


def run_render_metadata(
    inp: RenderMetadataInput, *, host: HostServices
) -> RenderMetadataOutput:
    """
    Build head markup for a page.

    Args:
        inp: Input containing config, page, overrides and extra tags.
        host: Host services bundle.

    Returns:
        RenderMetadataOutput with markup (None when no tags were produced).
    """
    collected = run_collect_tags(
        CollectTagsInput(
            config=inp.config,
            page=inp.page,
            overrides=inp.overrides,
            url_segment_str=inp.url_segment_str,
            extra_tags=inp.extra_tags,
        ),
        host=host,
    )
    if not collected.success:
        return collected

    markup = render_tags(collected.tags)
    logger.debug("Rendered %d metadata tag(s)", len(collected.tags))

    return RenderMetadataOutput(
        markup=markup,
        tags=collected.tags,
        context=collected.context,
    )


def run(
    inp: RenderMetadataInput | CollectTagsInput,
    *,
    host: HostServices,
) -> RenderMetadataOutput:
    """
    Main entry point for the metadata component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RenderMetadataInput):
        return run_render_metadata(inp, host=host)
    elif isinstance(inp, CollectTagsInput):
        return run_collect_tags(inp, host=host)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
