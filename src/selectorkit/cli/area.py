"""CLI command: selectorkit area -- compute a rectangle's area."""

from __future__ import annotations

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.model import Rectangle
from selectorkit.serialization import to_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_context
def area(ctx: click.Context, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    config = ctx.obj or SelectorKitConfig()
    rect = Rectangle(width=width, height=height)
    if as_json:
        payload = {"width": rect.width, "height": rect.height, "area": rect.area()}
        click.echo(to_json(payload, indent=config.json_indent))
        return
    click.echo(f"{rect.area():g}")
