"""
Image resizer adapter.

Default ImageResizerPort implementation. Delegates to the resize methods of
the host image object (size/width/height), which return a resized variation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelegatingImageResizer:
    """Calls the resize operations exposed by the image itself."""

    def size(self, image: Any, width: int, height: int) -> Any:
        """Crop/fit to an exact box."""
        logger.debug("Resizing image to %dx%d", width, height)
        return image.size(width, height)

    def width(self, image: Any, width: int) -> Any:
        """Scale to width, keeping the aspect ratio."""
        logger.debug("Resizing image to width %d", width)
        return image.resize_width(width)

    def height(self, image: Any, height: int) -> Any:
        """Scale to height, keeping the aspect ratio."""
        logger.debug("Resizing image to height %d", height)
        return image.resize_height(height)
