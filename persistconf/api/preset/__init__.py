"""Named persistence presets."""

from .build_default_registry import build_default_registry
from .PresetRegistry import DEFAULT_ENVIRONMENT, PresetRegistry

__all__ = ["DEFAULT_ENVIRONMENT", "PresetRegistry", "build_default_registry"]
