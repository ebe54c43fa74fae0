"""Configuration validation utilities."""

import math
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    return _is_number(value) and math.isfinite(value)


def _coerce_value(field_type: type, value: Any) -> Any:
    """Convert a raw config value to a field type; raises ValueError or TypeError."""
    if isinstance(value, bool):
        # bool is an int subclass; never a valid number here
        raise TypeError("boolean")
    if field_type is float:
        return float(value)
    if field_type is int and isinstance(value, str):
        return int(value)
    if field_type is str and not isinstance(value, str):
        raise TypeError("not a string")
    return value


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def coerce_params(params_cls: type, params: dict[str, Any]) -> tuple[dict[str, Any], list[ValidationError]]:
        """
        Convert raw values to the field types of a parameter dataclass.

        YAML reads exponent literals without a dot (`1e-7`) as strings, so
        float fields are converted with float(). Unknown keys are dropped.

        Args:
            params_cls: Parameter dataclass of the section
            params: Raw section values

        Returns:
            Tuple of (converted values, errors for values that failed to convert)
        """
        converted = {}
        errors = []

        for f in fields(params_cls):
            if f.name not in params:
                continue
            value = params[f.name]
            try:
                converted[f.name] = _coerce_value(f.type, value)
            except (TypeError, ValueError):
                errors.append(ValidationError(
                    field=f.name,
                    message=f"Must be convertible to {f.type.__name__}",
                    value=value
                ))

        return converted, errors

    @staticmethod
    def validate_scaler_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate scaler decay parameters."""
        errors = []

        for name in ("average_decay", "range_decay"):
            if name in params:
                value = params[name]
                if not _is_number(value) or not 0 < value <= 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number in (0, 1]",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_price_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate random walk parameters."""
        errors = []

        for name in ("initial_price", "velocity", "acceleration"):
            if name in params and not _is_finite_number(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a finite number",
                    value=params[name]
                ))

        for name in ("jitter_std", "jerk_std"):
            if name in params:
                value = params[name]
                if not _is_finite_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_volume_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volume distribution parameters."""
        errors = []

        # Negative means are allowed; samples are clamped at zero
        for name in ("trade_rate_mean", "trade_size_mean"):
            if name in params and not _is_finite_number(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a finite number",
                    value=params[name]
                ))

        for name in ("trade_rate_std", "trade_size_std"):
            if name in params:
                value = params[name]
                if not _is_finite_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_batch_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate batch dimensions."""
        errors = []

        for name in ("batch_size", "sequence_length", "hidden", "layers"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        if "additional_inputs" in params:
            value = params["additional_inputs"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="additional_inputs",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        section_validators = {
            "price": ConfigValidator.validate_price_params,
            "volume": ConfigValidator.validate_volume_params,
            "scaler": ConfigValidator.validate_scaler_params,
            "batch": ConfigValidator.validate_batch_params,
        }

        for section, validator in section_validators.items():
            if section not in config or config[section] is None:
                continue
            if not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
                continue
            errors.extend(validator(config[section]))

        return errors
