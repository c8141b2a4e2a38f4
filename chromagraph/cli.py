"""Command-line interface for chromagraph."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import DEFAULT_PALETTE, PALETTE_ENVVAR, SEED_ENVVAR
from .errors import InvalidParametersError
from .graph.graph_kinds import GraphKind
from .output.formatter import format_report, format_validation_result
from .schema.errors import GraphLoadError, GraphSchemaError
from .schema.loader import dump_graph, parse_graph
from .schema.models import Graph

palette_option = click.option(
    "--palette",
    multiple=True,
    default=DEFAULT_PALETTE,
    envvar=PALETTE_ENVVAR,
    show_default=True,
    help="Palette color offered for hints (repeatable)",
)


def _load_graph(graph_file: str) -> Graph:
    """Load a graph file, exiting with status 2 on failure."""
    try:
        return parse_graph(graph_file)
    except GraphLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except GraphSchemaError as e:
        click.echo(f"Graph validation error: {e}", err=True)
        for err in e.errors:
            location = f"{err['loc']}: " if err["loc"] else ""
            click.echo(f"  - {location}{err['msg']}", err=True)
        sys.exit(2)


def _emit(text: str, output: str | None) -> None:
    if output is None:
        click.echo(text)
        return
    Path(output).write_text(text, encoding="utf-8")
    click.echo(f"Written: {output}", err=True)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output")
def main(verbose: bool):
    """chromagraph: a graph coloring puzzle engine."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("kind", type=click.Choice([kind.value for kind in GraphKind]))
@click.argument("node_count", type=int)
@click.option("--edges", "edge_count", type=int, default=None, help="Target edge count (random graphs)")
@click.option("--seed", type=int, envvar=SEED_ENVVAR, default=None, help="Random seed")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Output format",
)
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="Write to a file")
def generate(
    kind: str,
    node_count: int,
    edge_count: int | None,
    seed: int | None,
    output_format: str,
    output: str | None,
):
    """Generate a puzzle graph.

    KIND is one of the graph families; NODE_COUNT is the number of nodes.

    Exit codes:
      0 - Success
      2 - Invalid parameters
    """
    from .graph.generators import generate as generate_graph

    try:
        graph = generate_graph(kind, node_count, edge_count=edge_count, seed=seed)
    except InvalidParametersError as e:
        click.echo(f"Invalid parameters: {e}", err=True)
        sys.exit(2)

    _emit(dump_graph(graph, output_format), output)  # type: ignore


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def validate(graph_file: str, output_format: str):
    """Check a colored graph for conflicts.

    GRAPH_FILE is a YAML or JSON graph file.

    Exit codes:
      0 - No conflicts
      1 - Conflicts found
      2 - File or graph error
    """
    from .coloring.validator import validate as validate_coloring

    graph = _load_graph(graph_file)
    result = validate_coloring(graph)

    click.echo(format_validation_result(result, output_format))  # type: ignore
    sys.exit(0 if result.is_valid else 1)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
def estimate(graph_file: str):
    """Print the estimated chromatic number of a graph."""
    from .coloring.chromatic import estimate_chromatic_number

    graph = _load_graph(graph_file)
    click.echo(estimate_chromatic_number(graph))


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@palette_option
def hint(graph_file: str, palette: tuple[str, ...]):
    """Suggest the next node to color and its safe colors."""
    from .coloring.hints import suggest_hint

    graph = _load_graph(graph_file)
    suggestion = suggest_hint(graph, palette)

    if suggestion is None:
        click.echo("All nodes are colored")
        return

    click.echo(f"Next node: {suggestion.node_id}")
    if suggestion.needs_new_color:
        click.echo("Safe colors: (none, a new color is needed)")
    else:
        click.echo(f"Safe colors: {', '.join(suggestion.safe_colors)}")


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.argument("node_id")
@click.argument("color", required=False)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Output format",
)
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="Write to a file")
def recolor(
    graph_file: str,
    node_id: str,
    color: str | None,
    output_format: str,
    output: str | None,
):
    """Color a node and print the new graph.

    Omitting COLOR clears the node. An unknown NODE_ID leaves the graph
    unchanged.
    """
    from .coloring.recolor import recolor as recolor_node

    graph = _load_graph(graph_file)
    if not graph.has_node(node_id):
        click.echo(f"Warning: node '{node_id}' not found, graph unchanged", err=True)

    updated = recolor_node(graph, node_id, color)
    _emit(dump_graph(updated, output_format), output)  # type: ignore


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@palette_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def analyze(graph_file: str, palette: tuple[str, ...], output_format: str):
    """Report conflicts, colors used, chromatic estimate and a hint.

    Exit codes:
      0 - No conflicts
      1 - Conflicts found
      2 - File or graph error
    """
    from .coloring.runner import analyze_graph

    graph = _load_graph(graph_file)
    report = analyze_graph(graph, palette)

    click.echo(format_report(report, output_format))  # type: ignore
    sys.exit(0 if report.validation.is_valid else 1)


if __name__ == "__main__":
    main()
