"""``pominstall install-multiple FILES`` — install a directory of artifacts.

Walks FILES, resolves every artifact's coordinates from its POM and installs
it into the local repository.  Fatal errors exit with code 1; a directory
without artifacts only warns.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from pominstall.config import settings
from pominstall.core.bulk_installer import BulkInstaller
from pominstall.core.errors import PomInstallError
from pominstall.core.installer import LocalRepositoryInstaller
from pominstall.core.locator import DescriptorLocator
from pominstall.models.repository import ContentLayout, RepositoryTarget

console = Console()


def install_cmd(
    files: Path = typer.Argument(
        ...,
        help="Directory containing the jar, zip and pom files to install.",
    ),
    local_repo: Path = typer.Option(
        settings.local_repository_path,
        "--local-repo",
        "-r",
        help="Root of the local repository to install into.",
    ),
    recursive: bool = typer.Option(
        settings.recursive,
        "--recursive/--no-recursive",
        help="Descend into subdirectories of FILES.",
    ),
    layout: ContentLayout = typer.Option(
        settings.layout,
        "--layout",
        help="Content layout of the local repository.",
    ),
) -> None:
    """Install every artifact found in FILES.

    Coordinates come from the POM embedded under META-INF/maven/ or from a
    sibling .pom file.  Each archive is installed together with its POM.
    """
    target = RepositoryTarget.for_session(local_repo, layout)
    bulk = BulkInstaller(
        LocalRepositoryInstaller(),
        target,
        locator=DescriptorLocator(settings.temp_dir),
    )

    try:
        summary = bulk.run(files, recursive=recursive)
    except PomInstallError as exc:
        console.print(f"[bold red]Install failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if summary.candidates == 0:
        console.print(f"[bold yellow]Artifacts not found in {files}[/bold yellow]")
        return

    lines = [
        "[bold green]Install complete![/bold green]",
        "",
        f"[bold]Repository:[/bold]          {target.root} ({target.layout.value})",
        f"[bold]Files scanned:[/bold]       {summary.candidates}",
        f"[bold]Records installed:[/bold]   {len(summary.installed)}",
        f"[bold]Superseded POMs:[/bold]     {len(summary.superseded)}",
        f"[bold]Missing POM:[/bold]         {len(summary.missing_descriptor)}",
    ]
    if summary.installed:
        lines.append("")
        lines.extend(f"  [cyan]{coords}[/cyan]" for coords in summary.installed)
    if summary.missing_descriptor:
        lines.append("")
        lines.extend(
            f"  [yellow]no POM:[/yellow] {path}" for path in summary.missing_descriptor
        )

    console.print()
    console.print(
        Panel(
            "\n".join(lines),
            title="[bold]pominstall[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
