import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.rules.models import MetadataConfig

logger = logging.getLogger(__name__)


def config_from_mapping(data: Mapping[str, Any] | None) -> MetadataConfig:
    """
    Validate an in-memory configuration mapping.
    Missing keys take their defaults.
    Raises ValueError if the mapping does not validate.
    """
    try:
        return MetadataConfig.model_validate(dict(data or {}))
    except ValidationError as e:
        raise ValueError(f"Metadata config validation failed:\n{e}") from e


def load_config(path: Path) -> MetadataConfig:
    """
    Load and validate the metadata config file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Metadata config not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in metadata config: {e}") from e

    if data is not None and not isinstance(data, Mapping):
        raise ValueError("Metadata config must be a mapping of option names to values")

    config = config_from_mapping(data)
    logger.info("Metadata config loaded from %s", path)
    return config
