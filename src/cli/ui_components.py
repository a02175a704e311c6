"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same tables.

Cell values are wrapped in `Text` so brackets in names or error details are
never parsed as Rich markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.field import FieldError
from core.domain.models import Condition, FetchSource, PackageRepository


def build_console(settings: AppSettings | None = None, *, stderr: bool = False) -> Console:
    """Console honouring the `color` setting."""

    no_color = settings is not None and not settings.color
    return Console(stderr=stderr, no_color=no_color)


def print_error(message: str, settings: AppSettings | None = None) -> None:
    build_console(settings, stderr=True).print(Text(f"Error: {message}", style="red"))


def format_fetch_source(fetch: FetchSource) -> str:
    """Short description of where a repository is fetched from."""

    if fetch.imgpkg_bundle is not None:
        return f"(imgpkg) {fetch.imgpkg_bundle.image}"
    if fetch.image is not None:
        return f"(image) {fetch.image.url}"
    if fetch.http is not None:
        return f"(http) {fetch.http.url}"
    if fetch.git is not None:
        ref = f"@{fetch.git.ref}" if fetch.git.ref else ""
        return f"(git) {fetch.git.url}{ref}"
    if fetch.inline is not None:
        return "(inline)"
    return ""


def format_conditions(conditions: list[Condition]) -> str:
    lines = []
    for cond in conditions:
        line = f"{cond.type}: {cond.status}"
        if cond.reason:
            line += f" ({cond.reason})"
        lines.append(line)
    return "\n".join(lines)


def build_repository_table(repo: PackageRepository) -> Table:
    """Transposed table: one row per attribute of a single repository."""

    table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value", style="white")

    rows = [
        ("Namespace", repo.metadata.namespace),
        ("Name", repo.metadata.name),
        ("Source", format_fetch_source(repo.spec.fetch)),
        ("Description", repo.status.friendly_description),
        ("Conditions", format_conditions(repo.status.conditions)),
        ("Useful error message", repo.status.useful_error_message),
    ]
    for label, value in rows:
        table.add_row(label, Text(value))
    return table


def build_errors_table(title: str, errors: list[FieldError]) -> Table:
    table = Table(title=Text(title), title_justify="left")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Type", style="yellow", no_wrap=True)
    table.add_column("Value", style="magenta")
    table.add_column("Detail", style="white")
    for err in errors:
        value = "" if err.bad_value is None else str(err.bad_value)
        table.add_row(Text(str(err.field)), err.type.label(), Text(value), Text(err.detail))
    return table
