"""Main Typer application — registers all CLI commands.

Entry point: ``pominstall`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from pominstall.cli.commands.install import install_cmd
from pominstall.cli.commands.plan import plan_cmd
from pominstall.config import settings

app = typer.Typer(
    name="pominstall",
    help="Install directories of jar, zip and pom files into a local Maven repository.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(
    name="install-multiple", help="Install every artifact found in a directory."
)(install_cmd)
app.command(name="plan", help="Show what would be installed, without writing.")(plan_cmd)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        settings.log_level, "--log-level", help="Logging level (DEBUG, INFO, ...)."
    ),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
