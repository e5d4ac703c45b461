"""appsketch CLI application entry point.

Provides commands for classifying the entities of a generated application
description, rendering their mock screens in the terminal, and inspecting
the component registry.

Usage:
    appsketch classify <result.json>
    appsketch render <result.json> [--classification <saved.json>]
    appsketch components
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from appsketch.models.classification import Domain
from appsketch.models.entities import GenerationResult

app = typer.Typer(
    name="appsketch",
    help="Classify generated app entities by domain and render mock screens.",
    no_args_is_help=True,
)

console = Console()


def _load_result(path: Path) -> GenerationResult:
    """Load a generation result or exit with a readable error."""
    from appsketch.io.result_reader import load_generation_result

    try:
        return load_generation_result(path)
    except FileNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e
    except ValidationError as e:
        console.print(
            f"[bold red]Error:[/bold red] Invalid generation result in {path}: "
            f"{e.error_count()} validation error(s)"
        )
        raise typer.Exit(code=1) from e


@app.command()
def version() -> None:
    """Show the current version."""
    from appsketch import __version__

    console.print(f"appsketch {__version__}")


@app.command()
def classify(
    result_path: Annotated[
        Path,
        typer.Argument(help="JSON file with a generation result"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Save classification result as JSON"),
    ] = None,
) -> None:
    """Classify the entities of a generation result into business domains.

    Shows each domain's aggregate score, the domain assigned to each entity
    and the primary domain of the whole application.
    """
    from appsketch.classification.heuristic import classify as classify_entities
    from appsketch.cli.display import display_classification, display_generation_summary
    from appsketch.io.result_reader import save_classification

    generated = _load_result(result_path)
    result = classify_entities(generated.entities)

    display_generation_summary(generated, console)
    console.print()
    display_classification(result, generated.entities, console)

    if output is not None:
        save_classification(result, output)
        console.print(f"\n[green]Classification saved to {output}[/green]")


@app.command()
def render(
    result_path: Annotated[
        Path,
        typer.Argument(help="JSON file with a generation result"),
    ],
    entity: Annotated[
        str | None,
        typer.Option("--entity", "-e", help="Only render the entity with this name"),
    ] = None,
    classification: Annotated[
        Path | None,
        typer.Option(
            "--classification",
            "-c",
            help="Reuse the classification saved at this path (written there if missing)",
        ),
    ] = None,
) -> None:
    """Render mock screens for the entities of a generation result.

    Each entity is routed to its domain-specific view when one is
    registered, otherwise to the generic form.

    If --classification points at a saved classification (from
    ``classify --output``), it is reused instead of classifying again.
    """
    from appsketch.classification.heuristic import classify as classify_entities
    from appsketch.cli.display import display_rendered_entities
    from appsketch.io.result_reader import load_classification, save_classification
    from appsketch.models.classification import ClassificationResult
    from appsketch.routing import create_router

    generated = _load_result(result_path)

    result: ClassificationResult | None = None
    if classification is not None and classification.exists():
        console.print(f"[dim]Loading saved classification from {classification}[/dim]")
        try:
            result = load_classification(classification)
        except ValidationError as e:
            console.print(
                f"[yellow]Warning: Could not load classification: "
                f"{e.error_count()} validation error(s)[/yellow]"
            )

    if result is None:
        result = classify_entities(generated.entities)
        if classification is not None:
            save_classification(result, classification)
            console.print(f"[dim]Classification saved to {classification}[/dim]")

    entities = generated.entities
    if entity is not None:
        entities = [e for e in entities if e.name.lower() == entity.lower()]
        if not entities:
            console.print(f"[bold red]Error:[/bold red] Entity '{entity}' not found.")
            names = [e.name for e in generated.entities]
            console.print(f"Available entities: {', '.join(names)}")
            raise typer.Exit(code=1)

    router = create_router()
    console.print(
        f"[bold blue]{generated.app_name}[/bold blue] "
        f"(primary domain: {result.primary_domain.value})\n"
    )
    display_rendered_entities(entities, result, router, console)


@app.command()
def components(
    domain: Annotated[
        Domain | None,
        typer.Option("--domain", "-d", help="Only list one domain"),
    ] = None,
) -> None:
    """List entity names with a registered domain view."""
    from appsketch.cli.display import display_component_registry
    from appsketch.routing import create_router

    router = create_router()
    domains = [domain] if domain is not None else list(Domain)
    display_component_registry(router, domains, console)
