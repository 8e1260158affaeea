"""Configuration validation."""

from .validate_config import validate_config
from .ValidationResult import ValidationResult

__all__ = ["ValidationResult", "validate_config"]
