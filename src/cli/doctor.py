"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.table import Table
from rich.text import Text

from adapters.manifest_store import ManifestStore
from cli.ui_components import build_console
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.errors import ManifestError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")


def _check_manifests(settings: AppSettings) -> tuple[bool, str]:
    if not settings.manifests_dir.exists():
        return False, f"{settings.manifests_dir} does not exist"
    try:
        store = ManifestStore(settings.manifests_dir)
    except ManifestError as exc:
        return False, str(exc)
    return True, f"{len(store)} object(s) in {settings.manifests_dir}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show effective settings and check the manifests directory."""

    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()

    table = Table(title="pkgctl Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Default namespace", "OK", Text(settings.default_namespace))
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("User config", "OK", Text(str(get_user_env_file())))

    ok, detail = _check_manifests(settings)
    table.add_row("Manifests", "OK" if ok else "FAIL", Text(detail))

    build_console(settings).print(table)

    if not ok:
        raise typer.Exit(code=1)


@app.command(name="set-namespace")
def set_namespace(
    ctx: typer.Context,
    namespace: str = typer.Argument(..., help="Namespace to use by default."),
) -> None:
    """Store the default namespace in the user config .env."""

    namespace = namespace.strip()
    if not namespace:
        raise typer.BadParameter("namespace must not be empty")

    env_path = write_user_env_vars({"PKGCTL_DEFAULT_NAMESPACE": namespace})
    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else None
    message = Text("Saved default namespace to: ", style="green")
    message.append(str(env_path), style="white")
    build_console(settings).print(message)
