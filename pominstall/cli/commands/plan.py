"""``pominstall plan FILES`` — preview the records an install would write."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from pominstall.config import settings
from pominstall.core.bulk_installer import BulkInstaller
from pominstall.core.errors import PomInstallError
from pominstall.core.installer import (
    LocalRepositoryInstaller,
    UnsafeCoordinates,
    artifact_path,
)
from pominstall.core.locator import DescriptorLocator
from pominstall.models.repository import RepositoryTarget

console = Console()


def plan_cmd(
    files: Path = typer.Argument(
        ...,
        help="Directory containing the jar, zip and pom files to inspect.",
    ),
    local_repo: Path = typer.Option(
        settings.local_repository_path,
        "--local-repo",
        "-r",
        help="Root of the local repository the paths are shown for.",
    ),
    recursive: bool = typer.Option(
        settings.recursive,
        "--recursive/--no-recursive",
        help="Descend into subdirectories of FILES.",
    ),
) -> None:
    """List the install records for every artifact in FILES."""
    target = RepositoryTarget.for_session(local_repo, settings.layout)
    bulk = BulkInstaller(
        LocalRepositoryInstaller(),
        target,
        locator=DescriptorLocator(settings.temp_dir),
    )

    table = Table(title="Planned Installs")
    table.add_column("File", style="cyan")
    table.add_column("Coordinates", style="green", no_wrap=True)
    table.add_column("Destination", overflow="fold")

    candidates = 0
    try:
        for candidate, records in bulk.preview(files, recursive=recursive):
            candidates += 1
            if records is None:
                table.add_row(candidate.path.name, "[yellow]no POM found[/yellow]", "")
                continue
            if not records:
                table.add_row(
                    candidate.path.name, "[dim]superseded by binary[/dim]", ""
                )
                continue
            for record in records:
                table.add_row(
                    candidate.path.name,
                    record.coordinates,
                    str(artifact_path(target, record)),
                )
    except (PomInstallError, UnsafeCoordinates) as exc:
        console.print(f"[bold red]Plan failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if candidates == 0:
        console.print(f"[bold yellow]Artifacts not found in {files}[/bold yellow]")
        return
    console.print(table)
