"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, LoggingParams, ScoringParams, get_default_config

CONFIG_FILENAME = "points.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load deployment overrides from the YAML config file, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"{config_file} is not valid YAML: {e}") from e

        if file_config is None:
            return {}

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{config_file} must contain a mapping at the top level"
            )

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Caller overrides (highest priority)
        2. YAML file overrides
        3. Global defaults (lowest priority)
        """
        # Start with global defaults
        config = self._dataclass_to_dict(self.defaults)

        # Apply file overrides
        config = self._deep_merge(config, self.load_file_config())

        # Apply caller overrides
        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge all tiers and return typed configuration."""
        merged = self.merge_config(overrides)
        return DefaultConfig(
            scoring=ScoringParams(**merged.get("scoring", {})),
            logging=LoggingParams(**merged.get("logging", {})),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
