import json

import rich_click as click
from rich.table import Table

from .common import load_modules, make_console, module_option, color_option


@click.command(short_help="List the registered enum types")
@module_option()
@click.option(
    "-t",
    "--tagged",
    type=str,
    default=None,
    help="Only list types that have this property, for example BitFlag or AltStrings.",
)
@click.option("-j", "--json", "as_json", is_flag=True, help="Print output in JSON format.")
@color_option()
def ls(modules, tagged, as_json, color):
    """List the registered enum types with their number of values and properties."""
    console = make_console(color)
    registry = load_modules(modules)

    descriptors = registry.all_tagged(tagged) if tagged else list(registry)
    descriptors.sort(key=lambda d: d.name)

    if as_json:
        data = {d.name: registry.properties(d).asdict() for d in descriptors}
        click.echo(json.dumps(data, indent=4, default=str))
        return

    if not descriptors:
        console.print("[bold red] :police_car_light: No enum types are registered[/]")
        return

    table = Table(title="Registered enums")
    table.add_column("Type", style="magenta")
    table.add_column("N", justify="right")
    table.add_column("BitFlag")
    table.add_column("AltStrings")
    table.add_column("Properties")

    for d in descriptors:
        props = registry.properties(d)
        table.add_row(
            d.name,
            str(props.n),
            "yes" if props.bit_flag else "",
            "yes" if props.alt_strings is not None else "",
            ", ".join(sorted(props.extra)),
        )
    console.print(table)
