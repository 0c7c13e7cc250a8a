import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from treepath._errors import TreePathError
from treepath._eval_engine import PathEvaluator
from treepath._index import TripleIndex
from treepath._io import load_graph
from treepath._locator import locate_path_root
from treepath._mapping import PathMapping
from treepath._models import PathResult
from treepath._render import render_path
from treepath._terms import coerce_entry_term, coerce_optional_entry_term

from .config import ConfigError, OutputFormat, TreepathConfig, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Evaluate SHACL and TREE property paths over RDF data."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> TreepathConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _require_file(value: Path | None, fallback: Path | None, option: str, key: str) -> Path:
    """Pick the CLI value, else the configured one, else abort."""
    resolved = value if value is not None else fallback
    if resolved is None:
        hint = escape(f"[tool.treepath].{key}")
        err_console.print(f"[red]Error: {option} is required (or set {hint})[/red]")
        raise typer.Exit(code=1)
    return resolved


def _print_result(result: PathResult, output_format: OutputFormat) -> None:
    match output_format:
        case OutputFormat.JSON:
            # Plain print so rich does not wrap or highlight the document
            print(result.model_dump_json(indent=2))  # noqa: T201
        case OutputFormat.TABLE:
            table = Table(show_header=True, header_style="bold cyan")
            table.add_column("#", justify="right", style="dim")
            table.add_column("Kind")
            table.add_column("Value", style="bold")
            table.add_column("Datatype / Language", style="dim")
            for i, record in enumerate(result.terms, start=1):
                extra = record.language or record.datatype or ""
                table.add_row(str(i), record.kind.value, escape(record.value), escape(extra))
            out_console.print(table)
        case OutputFormat.TEXT:
            for record in result.terms:
                print(record.to_term().n3())  # noqa: T201


@app.command(name="eval")
def eval_(  # noqa: PLR0913
    *,
    entry: Annotated[
        str,
        typer.Option("-e", "--entry", help="IRI of the data graph node to start from"),
    ],
    data: Annotated[
        Path | None,
        typer.Option("-d", "--data", help="RDF file with the data graph"),
    ] = None,
    path: Annotated[
        Path | None,
        typer.Option("-p", "--path", help="RDF file with the path declaration"),
    ] = None,
    path_entry: Annotated[
        str | None,
        typer.Option("--path-entry", help="IRI of the node carrying sh:path or tree:path"),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("-f", "--format", help="Output format"),
    ] = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", min=1, help="Maximum path nesting depth"),
    ] = None,
    rdf_format: Annotated[
        str | None,
        typer.Option("--rdf-format", help="rdflib parser for both files (guessed from extension by default)"),
    ] = None,
) -> None:
    """Evaluate a property path from an entry node and print the reached terms."""
    config = _load_config()
    data_file = _require_file(data, config.data, "--data", "data")
    path_file = _require_file(path, config.path, "--path", "path")
    if path_entry is None:
        path_entry = config.path_entry
    if output_format is None:
        output_format = config.format
    if max_depth is None:
        max_depth = config.max_depth

    try:
        start = coerce_entry_term(entry, parameter="--entry")
        declaration = coerce_optional_entry_term(path_entry, parameter="--path-entry")

        err_console.print(f"[cyan]Loading data graph from:[/cyan] {data_file}")
        data_graph = load_graph(data_file, rdf_format)
        err_console.print(f"[cyan]Loading path graph from:[/cyan] {path_file}")
        path_graph = load_graph(path_file, rdf_format)

        evaluator = PathEvaluator(
            data_graph=TripleIndex(graph=data_graph),
            path_graph=TripleIndex(graph=path_graph),
            max_depth=max_depth,
        )
        root = locate_path_root(evaluator.path_graph, declaration)
        rendered = render_path(
            evaluator.path_graph,
            root,
            namespace_manager=path_graph.namespace_manager,
            max_depth=max_depth,
        )
        err_console.print(f"[cyan]Path:[/cyan] {escape(rendered)}")

        mappings = evaluator.evaluate(root, PathMapping(path_node=root, data_nodes=(start,)))
    except TreePathError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    logger.debug("Evaluation produced %d branch(es)", len(mappings))
    terms = [term for mapping in mappings for term in mapping.data_nodes]
    err_console.print(f"[green]✓ {len(terms)} term(s) reached[/green]")

    _print_result(PathResult.from_terms(start, rendered, terms), output_format)


@app.command()
def show(
    *,
    path: Annotated[
        Path | None,
        typer.Option("-p", "--path", help="RDF file with the path declaration"),
    ] = None,
    path_entry: Annotated[
        str | None,
        typer.Option("--path-entry", help="IRI of the node carrying sh:path or tree:path"),
    ] = None,
    rdf_format: Annotated[
        str | None,
        typer.Option("--rdf-format", help="rdflib parser (guessed from extension by default)"),
    ] = None,
) -> None:
    """Print the declared path in SPARQL property path syntax."""
    config = _load_config()
    path_file = _require_file(path, config.path, "--path", "path")
    if path_entry is None:
        path_entry = config.path_entry

    try:
        declaration = coerce_optional_entry_term(path_entry, parameter="--path-entry")
        path_graph = load_graph(path_file, rdf_format)
        index = TripleIndex(graph=path_graph)
        root = locate_path_root(index, declaration)
        rendered = render_path(
            index,
            root,
            namespace_manager=path_graph.namespace_manager,
            max_depth=config.max_depth,
        )
    except TreePathError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    print(rendered)  # noqa: T201


def main() -> None:
    app()
