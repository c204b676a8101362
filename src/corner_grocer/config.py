"""
Configuration for corner-grocer.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .models import UsageError
from .suggest import DEFAULT_MAX_DISTANCE, DEFAULT_MAX_RESULTS

DEFAULT_INPUT_PATH = "data/CS210_Project_Three_Input_File.txt"
DEFAULT_BACKUP_PATH = "data/frequency.dat"
CONFIG_SECTION = "corner-grocer"


def _mapping(value: Any, name: str) -> dict[str, Any]:
    """A config section as a dict; an empty section counts as {}."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise UsageError(f"{name} must be a mapping, got {value!r}")
    return value


@dataclass
class SuggestionsConfig:
    """Tuning for "did you mean" suggestions."""

    max_results: int = DEFAULT_MAX_RESULTS
    max_distance: int = DEFAULT_MAX_DISTANCE


@dataclass
class HistogramConfig:
    """Histogram rendering options."""

    width: int = 50  # Longest bar, in characters


@dataclass
class GrocerConfig:
    """Complete corner-grocer configuration."""

    input_path: Path = field(default_factory=lambda: Path(DEFAULT_INPUT_PATH))
    backup_path: Path = field(default_factory=lambda: Path(DEFAULT_BACKUP_PATH))
    color: bool = True

    suggestions: SuggestionsConfig = field(default_factory=SuggestionsConfig)
    histogram: HistogramConfig = field(default_factory=HistogramConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GrocerConfig":
        """Create config from a dictionary (e.g., from YAML)."""
        config = cls()

        if "input_path" in data:
            config.input_path = Path(data["input_path"])
        if "backup_path" in data:
            config.backup_path = Path(data["backup_path"])
        if "color" in data:
            config.color = bool(data["color"])

        if "suggestions" in data:
            suggestions = _mapping(data["suggestions"], "suggestions")
            config.suggestions = SuggestionsConfig(
                max_results=suggestions.get("max_results", DEFAULT_MAX_RESULTS),
                max_distance=suggestions.get("max_distance", DEFAULT_MAX_DISTANCE),
            )

        if "histogram" in data:
            histogram = _mapping(data["histogram"], "histogram")
            config.histogram = HistogramConfig(width=histogram.get("width", 50))

        config.validate()
        return config

    @classmethod
    def from_yaml(cls, path: Path) -> "GrocerConfig":
        """Load config from a YAML file; a missing file gives defaults."""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise UsageError(f"Invalid config file {path}: {e}", path=str(path)) from e

        if not isinstance(data, dict):
            raise UsageError(f"Invalid config file {path}: expected a mapping", path=str(path))

        return cls.from_dict(_mapping(data.get(CONFIG_SECTION), CONFIG_SECTION))

    def validate(self) -> None:
        """Raise UsageError for values the menu cannot work with."""
        if not isinstance(self.suggestions.max_results, int) or self.suggestions.max_results < 1:
            raise UsageError(
                f"suggestions.max_results must be a positive integer, "
                f"got {self.suggestions.max_results!r}"
            )
        if not isinstance(self.suggestions.max_distance, int) or self.suggestions.max_distance < 0:
            raise UsageError(
                f"suggestions.max_distance must be a non-negative integer, "
                f"got {self.suggestions.max_distance!r}"
            )
        if not isinstance(self.histogram.width, int) or self.histogram.width < 1:
            raise UsageError(
                f"histogram.width must be a positive integer, got {self.histogram.width!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a plain dictionary."""
        return {
            "input_path": str(self.input_path),
            "backup_path": str(self.backup_path),
            "color": self.color,
            "suggestions": {
                "max_results": self.suggestions.max_results,
                "max_distance": self.suggestions.max_distance,
            },
            "histogram": {
                "width": self.histogram.width,
            },
        }
