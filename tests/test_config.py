from pathlib import Path

import pytest

from mistake_analyser.config import (
    AnalyserConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_defaults():
    cfg = load_config()

    assert cfg == AnalyserConfig()
    assert cfg.context_window_size == 3
    assert cfg.max_context_chars == 120
    assert cfg.skip_punctuation_replacements is True


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"context_window_size": 5, "unknown": "value"})

    assert cfg.context_window_size == 5
    assert config_from_dict(None) == AnalyserConfig()


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "max_context_chars: 40\nskip_punctuation_replacements: false\n",
        encoding="utf-8",
    )

    cfg = config_from_yaml(path)

    assert cfg.max_context_chars == 40
    assert cfg.skip_punctuation_replacements is False
    assert cfg.to_dict()["context_window_size"] == 3


def test_config_from_yaml_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        config_from_yaml(path)


def test_negative_values_are_rejected():
    with pytest.raises(ValueError):
        AnalyserConfig(context_window_size=-1)
    with pytest.raises(ValueError):
        config_from_dict({"max_context_chars": -5})
