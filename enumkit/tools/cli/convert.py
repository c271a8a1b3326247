import json

import rich_click as click

from enumkit.core import EnumKitException
from .common import load_modules, make_console, select_type, module_option, color_option


@click.command(short_help="Convert between names and integer values of an enum type")
@click.argument("typename")
@click.argument("text")
@module_option()
@click.option(
    "-i",
    "--from-int",
    is_flag=True,
    help="TEXT is an integer value, print its names instead of parsing names.",
)
@click.option("-j", "--json", "as_json", is_flag=True, help="Print output in JSON format.")
@color_option()
def convert(typename, text, modules, from_int, as_json, color):
    """Parse TEXT as a value of TYPENAME, accepting alternative and canonical names, and
    bit flag lists separated by |. Prints the integer value with its canonical and alternative strings."""
    console = make_console(color)
    registry = load_modules(modules)
    descriptor = select_type(registry, typename)

    try:
        if from_int:
            ival = int(text, 0)
        else:
            ival = registry.to_int(registry.from_any_string(descriptor, text))
        canonical = registry.to_string(ival, descriptor)
        alternative = registry.to_string_alt_first(ival, descriptor)
    except (ValueError, EnumKitException) as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps({"type": descriptor.name, "value": ival, "text": canonical, "alt": alternative}))
        return

    console.print(f"[magenta]{descriptor.name}[/] {ival}")
    console.print(f"  text: {canonical}")
    if alternative != canonical:
        console.print(f"  alt:  {alternative}")
