"""Settings loading shared by CLI commands."""

from __future__ import annotations

from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from langcrawl.core.config import Settings
from langcrawl.core.logger import get_logger


def load_settings(console: Console, preset: str | None = None, **overrides: Any) -> Settings:
    """Build settings from a preset and command-line overrides.

    Options left unset on the command line (None) fall back to the
    environment, then to the preset or defaults.

    Raises:
        typer.Exit: With code 1 if the configuration is invalid
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        if preset is not None:
            settings = Settings.from_preset(preset, **values)
        else:
            settings = Settings(**values)
    except (ValidationError, KeyError) as exc:
        console.print(f"[red]Invalid configuration: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    get_logger("langcrawl", log_level=settings.log_level, log_file=settings.log_file)
    return settings
