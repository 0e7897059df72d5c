"""CLI commands for inspecting formatter options."""

import json
from enum import Enum
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from phpformat.alignment import AlignmentMode
from phpformat.options import (
    OPTION_DESCRIPTORS,
    OptionError,
    OptionSet,
    StylePresets,
    option_groups,
)
from phpformat.preview import snippets_for, tree_by_position, tree_by_syntax_element

console = Console()


def display_value(value: Any) -> str:
    """Readable form of an option value."""
    if isinstance(value, AlignmentMode):
        return str(value)
    if isinstance(value, Enum):
        return value.name.lower()
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def load_preset(name: str) -> OptionSet:
    try:
        return StylePresets.by_name(name)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--preset") from None


preset_option = click.option(
    "--preset",
    "-p",
    type=click.Choice(StylePresets.names()),
    default="default",
    help="Start from a predefined style",
)


@click.group()
def options() -> None:
    """Inspect formatter options and presets."""


@options.command("list")
@click.option(
    "--group",
    "-g",
    type=click.Choice(option_groups()),
    help="Only options of one group",
)
@click.option("--changed", is_flag=True, help="Only options that differ from the defaults")
@preset_option
def list_options(group: str | None, changed: bool, preset: str) -> None:
    """List options with their current values."""
    current = load_preset(preset)
    modified = current.changed()

    table = Table(title=f"Formatter options ({preset})")
    table.add_column("Option", style="cyan")
    table.add_column("Group", style="dim")
    table.add_column("Value", style="green")
    table.add_column("Default", style="dim")

    shown = 0
    for descriptor in OPTION_DESCRIPTORS:
        if group and descriptor.group != group:
            continue
        if changed and descriptor.name not in modified:
            continue
        value = current.get(descriptor.name)
        table.add_row(
            descriptor.name,
            descriptor.group,
            display_value(value),
            display_value(descriptor.default),
        )
        shown += 1

    if shown:
        console.print(table)
    else:
        console.print("[yellow]No options match[/yellow]")


@options.command()
@click.argument("name")
@preset_option
def show(name: str, preset: str) -> None:
    """Show one option: key, type, default and value."""
    try:
        descriptor = OptionSet.descriptor(name)
    except OptionError:
        console.print(f"[red]Unknown option: {name}[/red]")
        raise click.Abort from None

    value = load_preset(preset).get(name)
    console.print(f"[bold]{descriptor.name}[/bold]")
    console.print(f"  Key:     {descriptor.key}")
    console.print(f"  Group:   {descriptor.group}")
    console.print(f"  Type:    {descriptor.codec.describe()}")
    default = descriptor.default
    console.print(f"  Default: {display_value(default)} ({descriptor.encode(default)!r})")
    console.print(f"  Value:   {display_value(value)} ({descriptor.encode(value)!r})")


@options.command()
@click.option(
    "--by",
    type=click.Choice(["element", "position"]),
    default="element",
    help="Group by syntax element first, or by position",
)
@preset_option
@click.option("--snippets", is_flag=True, help="Name the preview snippets of each option")
def tree(by: str, preset: str, snippets: bool) -> None:
    """Show the whitespace options as a tree, with checked state."""
    current = load_preset(preset)
    groupings = tree_by_syntax_element() if by == "element" else tree_by_position()

    root = Tree("[bold]White space[/bold]")

    def add(branch: Tree, index: int) -> None:
        node = groupings.node(index)
        mark = "[green]☑[/green]" if groupings.is_checked(current, index) else "☐"
        label = f"{mark} {node.label}"
        if node.is_leaf:
            label += f" [dim]{node.option}[/dim]"
            if snippets:
                names = ", ".join(s.name for s in snippets_for(node.context))
                label += f" [blue]{names}[/blue]"
        child = branch.add(label)
        for grandchild in node.children:
            add(child, grandchild)

    for index in groupings.roots:
        add(root, index)
    console.print(root)


@options.command()
@preset_option
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file")
def export(preset: str, output: str | None) -> None:
    """Export the options as the flat key/value map."""
    text = json.dumps(load_preset(preset).to_external_map(), indent=2, sort_keys=True)
    if output:
        with Path(output).open("w") as f:
            f.write(text + "\n")
        click.echo(f"Options written to {output}")
    else:
        click.echo(text)
