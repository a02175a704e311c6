"""`package` commands: inspect repositories and validate manifests."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.text import Text

from adapters.manifest_store import ManifestStore, iter_manifest_files, load_manifest
from cli.ui_components import build_console, build_errors_table, build_repository_table, print_error
from core.config import AppSettings
from core.domain.models import Package, PackageVersion
from core.errors import InvalidObjectError, ManifestError, ResourceNotFoundError
from core.interfaces.resources import ResourceClient
from core.services.admission import admit

app = typer.Typer(no_args_is_help=True, help="Package commands.")
repository_app = typer.Typer(no_args_is_help=True, help="Package repository commands.")
app.add_typer(repository_app, name="repository")


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return AppSettings()


def build_client(settings: AppSettings) -> ResourceClient:
    return ManifestStore(settings.manifests_dir)


def _fail(message: str, settings: AppSettings, code: int = 1) -> typer.Exit:
    print_error(message, settings)
    return typer.Exit(code=code)


@repository_app.command("get")
def get_repository(
    ctx: typer.Context,
    name_arg: Optional[str] = typer.Argument(None, metavar="NAME", help="Package repository name."),
    repository: Optional[str] = typer.Option(None, "--repository", "-r", help="Set package repository name."),
    namespace: Optional[str] = typer.Option(None, "--namespace", "-n", help="Specified namespace."),
) -> None:
    """Get details for a package repository."""

    settings = _settings(ctx)
    name = name_arg or repository
    if not name:
        raise typer.BadParameter("a package repository name is required (NAME or --repository)")
    namespace = namespace or settings.default_namespace

    try:
        client = build_client(settings)
        repo = client.get_package_repository(namespace, name)
    except ManifestError as exc:
        raise _fail(str(exc), settings, code=2) from exc
    except ResourceNotFoundError as exc:
        raise _fail(str(exc), settings) from exc

    build_console(settings).print(build_repository_table(repo))


@app.command("validate")
def validate(
    ctx: typer.Context,
    files: list[Path] = typer.Argument(..., exists=True, readable=True, help="Manifest files or directories."),
) -> None:
    """Validate the names of Package and PackageVersion manifests."""

    settings = _settings(ctx)
    console = build_console(settings)

    # Every document is checked, even when several share kind/namespace/name.
    objects = []
    try:
        for path in files:
            for manifest in iter_manifest_files(path):
                objects.extend(load_manifest(manifest))
    except ManifestError as exc:
        raise _fail(str(exc), settings, code=2) from exc

    checked = 0
    rejected = 0
    for obj in objects:
        if not isinstance(obj, (Package, PackageVersion)):
            continue
        checked += 1
        try:
            admit(obj)
        except InvalidObjectError as exc:
            rejected += 1
            console.print(build_errors_table(f'{exc.kind} "{exc.name}" is invalid', exc.errors))

    summary = f"{checked} object(s) checked, {rejected} invalid"
    if rejected:
        raise _fail(summary, settings)
    console.print(Text(summary, style="green"))
