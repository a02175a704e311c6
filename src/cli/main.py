"""pkgctl CLI entry point.

Why Typer:
- Subcommands (`package`, `doctor`) are plain Typer apps mounted here.
- Global options (manifests path, verbosity) are resolved once into
  `AppSettings` and passed down through the Typer context.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from cli import doctor, package
from cli.ui_components import print_error
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Inspect and validate package metadata.")
app.add_typer(package.app, name="package")
app.add_typer(doctor.app, name="doctor")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    manifests: Optional[Path] = typer.Option(
        None, "--manifests", "-m", help="Manifests directory (overrides PKGCTL_MANIFESTS_DIR)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    overrides = {}
    if manifests is not None:
        overrides["manifests_dir"] = manifests
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        print_error(f"invalid configuration: {exc}")
        raise typer.Exit(code=2) from exc

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


def run() -> None:
    app()


if __name__ == "__main__":
    run()
