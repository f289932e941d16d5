"""CLI entry point for raptor-layout."""

import json
import logging
import sys

import click

from raptor_layout.config import LayoutConfig, parse_option_pairs
from raptor_layout.ir.graph import GraphIR, records_from_dict
from raptor_layout.layout.engine import compute_layout
from raptor_layout.types import LayoutType

_LAYOUT_NAMES = [t.value for t in LayoutType]


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option(
    "--layout",
    "-l",
    "layout",
    type=click.Choice(_LAYOUT_NAMES, case_sensitive=False),
    default=LayoutType.default().value,
    help="Layout strategy",
)
@click.option("--width", "-W", "width", type=float, default=None, help="Canvas width [default: 800]")
@click.option("--height", "-H", "height", type=float, default=None, help="Canvas height [default: 600]")
@click.option("--seed", "-s", "seed", type=int, default=None, help="Seed for the stochastic layouts")
@click.option("--option", "-O", "option_pairs", multiple=True, help="Strategy option as key=value (repeatable)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log layout progress to stderr")
def main(
    input: str | None,
    layout: str,
    width: float | None,
    height: float | None,
    seed: int | None,
    option_pairs: tuple[str, ...],
    output: str | None,
    verbose: bool,
) -> None:
    """Graph node/edge JSON to node positions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        nodes, edges = records_from_dict(json.loads(text))
    except json.JSONDecodeError as e:
        click.echo(f"error: invalid JSON: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    try:
        layout_type = LayoutType.from_name(layout)
        options = parse_option_pairs(layout_type, list(option_pairs))
        for name, value in (("width", width), ("height", height)):
            if value is None:
                continue
            if name in options:
                raise ValueError(f"'{name}' given both as --{name} and as -O {name}=...; use one")
            options[name] = value
        config = LayoutConfig(layout_type=layout_type, options=options, seed=seed)
        layout_options = config.build_options()
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    gir = GraphIR.from_records(nodes, edges)
    result = compute_layout(gir, layout_type, layout_options, config.make_rng())
    rendered = json.dumps({"layout": layout_type.value, **result.to_dict()}, indent=2) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
