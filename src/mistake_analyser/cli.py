from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from .config import AnalyserConfig, load_config
from .pipeline import analyse as run_analysis, diff_texts

app = typer.Typer(help="Spanish attempt-vs-correction mistake analyser.", no_args_is_help=True)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@app.command()
def analyse(
    attempt: str | None = typer.Option(None, "--attempt", "-a", help="Attempt text."),
    attempt_file: Path | None = typer.Option(
        None, "--attempt-file", help="Read the attempt text from a UTF-8 file."
    ),
    correct: str | None = typer.Option(None, "--correct", "-c", help="Corrected text."),
    correct_file: Path | None = typer.Option(
        None, "--correct-file", help="Read the corrected text from a UTF-8 file."
    ),
    day_id: str = typer.Option("", "--day-id", help="Day identifier copied onto each mistake."),
    page_id: str = typer.Option("", "--page-id", help="Page identifier copied onto each mistake."),
    config: Path | None = typer.Option(None, "--config", help="YAML configuration file."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Python logging level."),
) -> None:
    """Classify the differences between an attempt and its correction and emit JSON."""
    _configure_logging(log_level)
    cfg = _load_config_option(config)
    attempt_text = _resolve_text("attempt", attempt, attempt_file)
    correct_text = _resolve_text("correct", correct, correct_file)
    result = run_analysis(day_id, page_id, attempt_text, correct_text, config=cfg)
    typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


@app.command()
def diff(
    attempt: str | None = typer.Option(None, "--attempt", "-a", help="Attempt text."),
    attempt_file: Path | None = typer.Option(
        None, "--attempt-file", help="Read the attempt text from a UTF-8 file."
    ),
    correct: str | None = typer.Option(None, "--correct", "-c", help="Corrected text."),
    correct_file: Path | None = typer.Option(
        None, "--correct-file", help="Read the corrected text from a UTF-8 file."
    ),
) -> None:
    """Print the annotated token diff between an attempt and its correction."""
    attempt_text = _resolve_text("attempt", attempt, attempt_file)
    correct_text = _resolve_text("correct", correct, correct_file)
    typer.echo(diff_texts(attempt_text, correct_text))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyserConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(level_name: str) -> None:
    level = level_name.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Unknown log level '{level_name}'; expected one of {', '.join(LOG_LEVELS)}."
        )
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_config_option(path: Path | None) -> AnalyserConfig:
    """Load the YAML config, reporting unreadable or invalid files as CLI errors."""
    try:
        return load_config(path)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Invalid config {path}: {exc}") from exc


def _resolve_text(name: str, inline: str | None, path: Path | None) -> str:
    """Pick the inline text or the file contents for one side of the comparison."""
    if inline is not None and path is not None:
        raise typer.BadParameter(f"Pass either --{name} or --{name}-file, not both.")
    if path is None:
        if inline is None:
            raise typer.BadParameter(f"Missing --{name} or --{name}-file.")
        return inline
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Could not read {path}: {exc}") from exc


if __name__ == "__main__":
    main()
