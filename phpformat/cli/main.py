"""CLI interface for phpformat."""

import json

import click
from rich.console import Console

from phpformat.cli.commands.options import options
from phpformat.cli.commands.preview import preview
from phpformat.version import PHPFORMAT_VERSION, get_version_info, get_version_string

console = Console()


@click.group()
@click.version_option(version=PHPFORMAT_VERSION, prog_name="phpformat")
def cli() -> None:
    """phpformat - Inspect formatter options and preview PHP formatting."""


# Add commands to CLI
cli.add_command(options)
cli.add_command(preview)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print version details as JSON")
def version(as_json: bool) -> None:
    """Show version information."""
    if as_json:
        click.echo(json.dumps(get_version_info(), indent=2))
    else:
        console.print(f"[bold]{get_version_string()}[/bold]")


if __name__ == "__main__":
    cli()
