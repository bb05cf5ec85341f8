"""
Metadata component - document head markup builder.
"""

from ._collector import KeyedTagCollector, TagCollector
from ._impl import (
    MetadataResolver,
    build_document_title,
    build_page_url,
    build_tags,
    coerce_image,
    collect_tags,
)
from ._markup import render_attributes, render_tag, render_tags
from .component import (
    create_host_services,
    run,
    run_collect_tags,
    run_render_metadata,
)
from .models import (
    AlternateLink,
    CollectTagsInput,
    MetadataOverrides,
    MetadataValidationError,
    RenderMetadataInput,
    RenderMetadataOutput,
    ResolvedContext,
    TagDescriptor,
)
from .ports import (
    HostServices,
    ImagePort,
    ImageResizerPort,
    LanguageEnumeratorPort,
    LanguagePort,
    PageLookupPort,
    PagePort,
    TemplatePort,
    TextTruncatorPort,
)

__all__ = [
    # Entry points
    "run",
    "run_collect_tags",
    "run_render_metadata",
    "create_host_services",
    # Input models
    "CollectTagsInput",
    "MetadataOverrides",
    "RenderMetadataInput",
    # Output models
    "AlternateLink",
    "MetadataValidationError",
    "RenderMetadataOutput",
    "ResolvedContext",
    "TagDescriptor",
    # Collectors
    "KeyedTagCollector",
    "TagCollector",
    # Resolution
    "MetadataResolver",
    "build_document_title",
    "build_page_url",
    "build_tags",
    "coerce_image",
    "collect_tags",
    # Rendering
    "render_attributes",
    "render_tag",
    "render_tags",
    # Ports
    "HostServices",
    "ImagePort",
    "ImageResizerPort",
    "LanguageEnumeratorPort",
    "LanguagePort",
    "PageLookupPort",
    "PagePort",
    "TemplatePort",
    "TextTruncatorPort",
]
