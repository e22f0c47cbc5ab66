"""YAML configuration loading and validation."""

import yaml
from pathlib import Path
from typing import Any, Union
from pydantic import ValidationError
from .schema import TrimmerConfig

class ConfigLoadError(Exception):
    """Exception raised when configuration loading or validation fails."""
    pass

def _build_config(data: Any, source: str) -> TrimmerConfig:
    if data is None:
        return TrimmerConfig()

    if not isinstance(data, dict):
        raise ConfigLoadError(f"{source} must contain a YAML mapping, got {type(data)}")

    try:
        return TrimmerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Config validation failed: {e}")

def load_config(path: Union[str, Path]) -> TrimmerConfig:
    """
    Load and validate trimmer options from a YAML file.

    Args:
        path: Path to YAML config file

    Returns:
        TrimmerConfig: Validated options

    Raises:
        ConfigLoadError: If file cannot be read or options are invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")

    return _build_config(data, f"Config file {path}")

def load_config_from_string(yaml_content: str) -> TrimmerConfig:
    """
    Load and validate trimmer options from a YAML string.

    An empty document yields the default options.

    Raises:
        ConfigLoadError: If YAML is invalid or options fail validation
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")

    return _build_config(data, "Config content")
