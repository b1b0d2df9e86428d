"""Configuration for dirwalk.

Settings come from an optional YAML file (./dirwalk.yaml by default) and
can be overridden from the command line.

Example dirwalk.yaml:
    start_directory: ~/Documents
    max_count: 500
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dirwalk.exceptions import ConfigurationError
from dirwalk.traversal.walker import DEFAULT_MAX_COUNT

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "dirwalk.yaml"


class WalkerConfig(BaseModel):
    """Traversal configuration.

    Attributes:
        start_directory: Root directory to traverse. Empty means unset.
        max_count: Maximum number of visited entries before aborting.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    start_directory: str = Field(
        default="",
        description="Root directory to traverse",
    )
    max_count: int = Field(
        default=DEFAULT_MAX_COUNT,
        ge=0,
        description="Maximum number of visited entries before aborting",
    )

    @field_validator("start_directory", mode="before")
    @classmethod
    def coerce_start_directory(cls, v: Any) -> str:
        """YAML parses an empty key as None; paths are stripped and expanded."""
        if v is None:
            return ""
        if isinstance(v, Path):
            v = str(v)
        if isinstance(v, str):
            v = v.strip()
            return str(Path(v).expanduser()) if v else ""
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from path.

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping.

    """
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_config(
    path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> WalkerConfig:
    """Load configuration from YAML and apply overrides.

    Args:
        path: Config file to read. If None, ./dirwalk.yaml is used when present.
        overrides: Values taking precedence over the file; None values are ignored.

    Returns:
        Validated WalkerConfig.

    Raises:
        ConfigurationError: If the file is unreadable or values are invalid.

    """
    data: dict[str, Any] = {}
    if path is not None:
        data = _read_yaml(path)
    else:
        default_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if default_path.is_file():
            logger.debug("Using config file %s", default_path)
            data = _read_yaml(default_path)

    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return WalkerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
