import json

import rich_click as click
from rich.table import Table

from .common import load_modules, make_console, select_type, module_option, color_option


@click.command(short_help="Display all values of an enum type")
@click.argument("typename")
@module_option()
@click.option("-a", "--alt", is_flag=True, help="Show the alternative names where the type has them.")
@click.option("-j", "--json", "as_json", is_flag=True, help="Print output in JSON format.")
@color_option()
def values(typename, modules, alt, as_json, color):
    """Display the name and ordinal of every value of a registered enum type."""
    console = make_console(color)
    registry = load_modules(modules)
    descriptor = select_type(registry, typename)
    vals = registry.values(descriptor, alt=alt)

    if as_json:
        click.echo(json.dumps([{"name": v.name, "value": v.value} for v in vals], indent=4))
        return

    table = Table(title=descriptor.name)
    table.add_column("Value", justify="right")
    table.add_column("Name", style="magenta")
    if registry.is_bit_flag(descriptor):
        table.add_column("Mask", justify="right")

    for v in vals:
        if registry.is_bit_flag(descriptor):
            table.add_row(str(v.value), v.name, hex(1 << v.value))
        else:
            table.add_row(str(v.value), v.name)
    console.print(table)
