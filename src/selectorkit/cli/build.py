"""CLI commands: selectorkit build / combinators -- compose selectors from tokens."""

from __future__ import annotations

import sys

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.selector import PartKind, SelectorBuilder, SelectorError, combine
from selectorkit.selector.compound import Stringifiable


def build_selector(tokens: list[str], combinators: dict[str, str]) -> Stringifiable:
    """Turn CLI tokens into a selector.

    Tokens are fragments (``kind=value``) or combinators. Fragments go into
    the current builder; a combinator closes it and starts the next one.
    Builders are combined left to right.
    """
    operands: list[SelectorBuilder] = [SelectorBuilder()]
    joins: list[str] = []

    for token in tokens:
        if token in combinators:
            if not operands[-1].part_kinds:
                raise click.BadParameter(
                    f"combinator {token!r} must follow a selector", param_hint="TOKENS"
                )
            joins.append(combinators[token])
            operands.append(SelectorBuilder())
            continue

        label, sep, value = token.partition("=")
        if not sep or not value:
            raise click.BadParameter(
                f"expected kind=value or a combinator, got {token!r}",
                param_hint="TOKENS",
            )
        try:
            kind = PartKind.from_label(label)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="TOKENS") from exc
        operands[-1].append(kind, value)

    if not operands[-1].part_kinds:
        raise click.BadParameter("selector cannot end with a combinator", param_hint="TOKENS")

    result: Stringifiable = operands[0]
    for join, operand in zip(joins, operands[1:]):
        result = combine(result, join, operand)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_context
def build(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from fragments and combinators.

    Fragments are kind=value pairs (element, id, class, attr, pseudo-class,
    pseudo-element); combinators are +, ~, > or a named alias.

    Example: selectorkit build element=div id=main + element=table
    """
    config = ctx.obj or SelectorKitConfig()
    try:
        selector = build_selector(list(tokens), config.combinators)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())


@click.command()
@click.pass_context
def combinators(ctx: click.Context) -> None:
    """List the combinator aliases accepted by build."""
    config = ctx.obj or SelectorKitConfig()
    for alias, text in config.combinator_aliases.items():
        click.echo(f"{alias:<12} {text!r}")
