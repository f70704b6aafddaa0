"""Command line tools for clawmeta."""

from __future__ import annotations

from importlib import metadata

import typer

from clawmeta.cli.parse import parse_command

app = typer.Typer(
    name="clawmeta",
    help="Inspect SKILL.md / HOOK.md frontmatter metadata.",
    no_args_is_help=True,
)


def _print_version_and_exit(value: bool) -> None:
    """Print installed package version and exit."""
    if not value:
        return
    try:
        version = metadata.version("clawmeta")
    except metadata.PackageNotFoundError:
        version = "unknown"
    typer.echo(f"clawmeta {version}")
    raise typer.Exit(0)


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_print_version_and_exit,
        is_eager=True,
        help="Show the installed version and exit.",
    ),
) -> None:
    """clawmeta command line."""


app.command("parse")(parse_command)


def main() -> None:
    """CLI entry point."""
    try:
        app()
    except KeyboardInterrupt:
        raise SystemExit(130) from None


__all__ = ["app", "main"]
