import logging
import importlib
from typing import Sequence

import rich_click as click
from rich.console import Console

from enumkit.registry import EnumRegistry, EnumTypeDescriptor, enums


log = logging.getLogger(__name__)


def make_console(color: str) -> Console:
    return Console(color_system=None if color == "none" else color)


def load_modules(modules: Sequence[str]) -> EnumRegistry:
    """Import the given modules, enums register themselves when their module is imported."""
    for module in modules:
        try:
            importlib.import_module(module)
        except ImportError as e:
            raise click.BadParameter(f"Could not import module {module}: {e}", param_hint="--module")
        log.debug(f"Imported {module}, registry holds {len(enums)} types.")
    return enums


def select_type(registry: EnumRegistry, name: str) -> EnumTypeDescriptor:
    descriptor = registry.lookup(name)
    if descriptor is not None:
        return descriptor

    # Allow the bare class name when it is unambiguous
    matches = [d for d in registry if d.name.rsplit(".", 1)[-1] == name]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise click.BadParameter(
            f"{name} is ambiguous, use one of: " + ", ".join(d.name for d in matches), param_hint="TYPENAME"
        )
    raise click.BadParameter(f"No enum type {name} is registered.", param_hint="TYPENAME")


def module_option():
    return click.option(
        "-m",
        "--module",
        "modules",
        type=str,
        multiple=True,
        help="Python module to import before inspecting the registry, can be repeated.",
    )


def color_option():
    from .settings import COLOR_CHOICES
    return click.option(
        "--color",
        type=click.Choice(COLOR_CHOICES),
        default="auto",
        help="""Force the command to output with/without terminal colors. By default output colours if the terminal supports it."
See the [underline blue][link=https://rich.readthedocs.io/en/stable/console.html#color-systems]Rich documentation[/link][/] for more info on what the options mean.""",
    )
