"""YAML configuration loading and validation."""

import yaml
from pathlib import Path
from typing import Union
from pydantic import ValidationError
from .schema import AnalyzerConfig
from ..core.errors import ConfigLoadError


def load_config(path: Union[str, Path]) -> AnalyzerConfig:
    """
    Load and validate an analyzer configuration from a YAML file.

    Args:
        path: Path to YAML config file

    Returns:
        AnalyzerConfig: Validated configuration

    Raises:
        ConfigLoadError: If file cannot be read or the configuration is invalid
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

    return _validate(data, source=str(path))


def load_config_from_string(yaml_content: str) -> AnalyzerConfig:
    """
    Load and validate an analyzer configuration from a YAML string.

    Raises:
        ConfigLoadError: If YAML is invalid or validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")

    return _validate(data, source="<string>")


def _validate(data, source: str) -> AnalyzerConfig:
    # An empty document means "all defaults"
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config in {source} must contain a YAML mapping, got {type(data)}")

    try:
        config = AnalyzerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Config validation failed: {e}")

    issues = config.validate_rules()
    if issues:
        raise ConfigLoadError(f"Config validation issues: {'; '.join(issues)}")

    return config
