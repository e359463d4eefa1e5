"""Command-line entry point for package-release."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from package_release.cli.commands.release import run_release
from package_release.exceptions import PackageReleaseError

# Value used when -v/-t is given without a value
_NO_VALUE = ""

HELP_TEXT = """\
Generate CHANGELOG.md from the git history, bump the package.json version,
then commit and tag the release.

\b
  package-release [-t major|minor|patch] [-v 1.0.0] [-p]

The type can also be a pre-release channel such as alpha or beta; the
version is then upgraded like 1.0.0-alpha.1.
"""


class ReleaseCommand(click.Command):
    """Command that answers unparseable arguments with the usage text."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError:
            click.echo(ctx.get_help())
            ctx.exit(0)


@click.command(
    cls=ReleaseCommand,
    help=HELP_TEXT,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--version",
    "-v",
    "version",
    is_flag=False,
    flag_value=_NO_VALUE,
    default=None,
    help="The version you want to release. Overrides --type.",
)
@click.option(
    "--type",
    "-t",
    "bump_type",
    is_flag=False,
    flag_value=_NO_VALUE,
    default="patch",
    show_default=True,
    help="Which part of the version is upgraded: major, minor, patch, or a pre-release channel.",
)
@click.option("--push", "-p", is_flag=True, help="Push commits and tags to the git remote.")
@click.option(
    "--upgrade-only",
    "-u",
    is_flag=True,
    help="Only update CHANGELOG.md and package.json, do not commit or tag.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    version: str | None,
    bump_type: str,
    push: bool,
    upgrade_only: bool,
) -> None:
    if version == _NO_VALUE or bump_type == _NO_VALUE:
        click.echo(ctx.get_help())
        ctx.exit(0)

    console = Console()
    try:
        run_release(
            Path.cwd(),
            version_override=version,
            bump_type=bump_type,
            push=push,
            upgrade_only=upgrade_only,
            console=console,
        )
    except PackageReleaseError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        raise SystemExit(1) from e


if __name__ == "__main__":
    cli()
