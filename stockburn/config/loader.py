"""Configuration loader with 2-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    BatchParams,
    DefaultConfig,
    IOParams,
    PriceWalkParams,
    ScalerParams,
    VolumeParams,
    get_default_config,
)
from .validation import ConfigValidator, ValidationError
from ..logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = "stockburn.yaml"

_SECTIONS = {
    "price": PriceWalkParams,
    "volume": VolumeParams,
    "scaler": ScalerParams,
    "batch": BatchParams,
    "io": IOParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 2-tier precedence."""

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
        """Load overrides from the YAML file in the config directory."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        if file_config is not None and not isinstance(file_config, dict):
            logger.error("Configuration file is not a mapping", path=str(config_file))
            raise ValueError(f"{config_file} must contain a mapping of sections")

        return file_config or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 2-tier precedence.

        Priority order:
        1. Explicit overrides, then the YAML file (highest priority)
        2. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge configuration and rebuild the typed dataclasses.

        Values are converted to their field types before validation; unknown
        keys are ignored and an empty section keeps its defaults.

        Raises:
            ValueError: If a section is not a mapping or a parameter fails
                conversion or validation
        """
        merged = self.merge_config(overrides)

        validation_errors = []
        sections: dict[str, dict[str, Any]] = {}
        for name, params_cls in _SECTIONS.items():
            values = merged.get(name) or {}
            if not isinstance(values, dict):
                validation_errors.append(ValidationError(
                    field=name,
                    message="Must be a mapping",
                    value=values
                ))
                continue
            converted, errors = ConfigValidator.coerce_params(params_cls, values)
            validation_errors.extend(errors)
            sections[name] = converted

        validation_errors.extend(ConfigValidator.validate_config(sections))
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value!r})" for err in validation_errors]
            logger.error("Configuration validation failed", errors=error_msgs)
            raise ValueError("Invalid configuration: " + "; ".join(error_msgs))

        return DefaultConfig(**{
            name: params_cls(**sections[name]) for name, params_cls in _SECTIONS.items()
        })

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
