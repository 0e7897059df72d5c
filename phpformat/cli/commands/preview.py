"""CLI command rendering preview snippets under chosen options."""

import click
from rich.console import Console
from rich.syntax import Syntax

from phpformat.cli.commands.options import load_preset
from phpformat.codegen import CodeFormatter
from phpformat.options import OptionError, OptionSet
from phpformat.preview import SNIPPETS, get_snippet

console = Console()


def apply_overrides(options: OptionSet, assignments: tuple[str, ...]) -> None:
    """Apply ``NAME=VALUE`` pairs, each value in its wire form."""
    for assignment in assignments:
        name, sep, raw = assignment.partition("=")
        if not sep:
            msg = f"Expected NAME=VALUE, got {assignment!r}"
            raise click.BadParameter(msg, param_hint="--set")
        try:
            descriptor = OptionSet.descriptor(name.strip())
            value = descriptor.codec.decode(raw.strip())
        except OptionError:
            msg = f"Unknown option: {name.strip()}"
            raise click.BadParameter(msg, param_hint="--set") from None
        except (TypeError, ValueError) as e:
            msg = f"Invalid value for {descriptor.name}: {e}"
            raise click.BadParameter(msg, param_hint="--set") from None
        options.set(descriptor.name, value)


@click.command()
@click.argument("snippet", type=click.Choice(sorted(SNIPPETS)))
@click.option(
    "--preset",
    "-p",
    default="default",
    help="Start from a predefined style",
)
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="NAME=VALUE",
    help="Override one option (wire value, repeatable)",
)
@click.option("--plain", is_flag=True, help="Print without highlighting")
def preview(snippet: str, preset: str, assignments: tuple[str, ...], plain: bool) -> None:
    """Format a preview snippet and print the result."""
    options = load_preset(preset)
    apply_overrides(options, assignments)

    text = CodeFormatter(options).format(get_snippet(snippet).build())
    if plain:
        click.echo(text)
    else:
        console.print(Syntax(text, "php", line_numbers=False))
