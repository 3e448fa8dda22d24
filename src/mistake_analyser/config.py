from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class AnalyserConfig:
    """Configuration options for the attempt-vs-correct analysis."""

    context_window_size: int = 3
    max_context_chars: int = 120
    skip_punctuation_replacements: bool = True

    def __post_init__(self) -> None:
        if self.context_window_size < 0:
            raise ValueError("context_window_size must be >= 0.")
        if self.max_context_chars < 0:
            raise ValueError("max_context_chars must be >= 0.")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(AnalyserConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyserConfig:
    """Build an AnalyserConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return AnalyserConfig()
    return AnalyserConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> AnalyserConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyserConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalyserConfig()
    return config_from_yaml(path)
