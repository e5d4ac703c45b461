"""Rich display helpers for terminal output.

Provides formatted display functions for generation results, domain
classifications, component registries and rendered entity screens using
Rich tables and panels.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from appsketch.models.classification import ClassificationResult, Domain
from appsketch.models.entities import Entity, GenerationResult
from appsketch.routing.factory import ComponentRouter

_DOMAIN_STYLES: dict[Domain, str] = {
    Domain.ECOMMERCE: "green",
    Domain.USER_MANAGEMENT: "bright_blue",
    Domain.ADMIN: "red",
    Domain.GENERIC: "dim",
}


def domain_text(domain: Domain) -> Text:
    """Return the domain name styled with its display colour."""
    return Text(domain.value, style=_DOMAIN_STYLES[domain])


def display_generation_summary(result: GenerationResult, console: Console) -> None:
    """Print the app name, roles and features of a generation result.

    Args:
        result: Loaded generation result.
        console: Rich Console for output.
    """
    lines = [f"[bold]{result.app_name}[/bold]"]
    if result.description:
        lines.append(f"[dim]{result.description}[/dim]")
    lines.append(
        f"{len(result.entities)} entities, {len(result.user_roles)} roles, "
        f"{len(result.features)} features"
    )
    console.print(Panel("\n".join(lines), title="Generated App", border_style="cyan"))

    if result.user_roles:
        roles = Table(title="User Roles")
        roles.add_column("Role", style="bold cyan", no_wrap=True)
        roles.add_column("Description")
        for role in result.user_roles:
            roles.add_row(role.name, role.description)
        console.print(roles)

    if result.features:
        features = Table(title="Features")
        features.add_column("Feature", style="bold cyan", no_wrap=True)
        features.add_column("Operations")
        features.add_column("Entities", style="dim")
        for feature in result.features:
            features.add_row(
                feature.name,
                ", ".join(feature.operations) or "-",
                ", ".join(feature.related_entities) or "-",
            )
        console.print(features)


def display_classification(
    result: ClassificationResult,
    entities: list[Entity],
    console: Console,
) -> None:
    """Print domain scores and per-entity domain assignments.

    Args:
        result: ClassificationResult for ``entities``.
        entities: The classified entities, in submission order.
        console: Rich Console for output.
    """
    scores = Table(title="Domain Scores", show_lines=True)
    scores.add_column("Domain", no_wrap=True)
    scores.add_column("Score", justify="right", style="bold")
    scores.add_column("Entities")

    for ds in result.domain_scores:
        scores.add_row(
            domain_text(ds.domain),
            str(ds.score),
            ", ".join(ds.matched_entities) or "-",
        )
    console.print(scores)

    assignments = Table(title="Entity Domains")
    assignments.add_column("Entity", style="bold cyan", no_wrap=True)
    assignments.add_column("Domain", no_wrap=True)
    assignments.add_column("Attributes", style="dim")

    seen: set[str] = set()
    for entity in entities:
        if entity.name in seen:
            continue
        seen.add(entity.name)
        assignments.add_row(
            entity.name,
            domain_text(result.entity_domain_map.get(entity.name, Domain.GENERIC)),
            ", ".join(entity.attributes),
        )
    console.print(assignments)

    console.print(
        "\nPrimary domain: ",
        domain_text(result.primary_domain),
        style="bold",
    )


def display_component_registry(
    router: ComponentRouter,
    domains: list[Domain],
    console: Console,
) -> None:
    """Print registered entity-name keys per domain.

    Args:
        router: Router whose registry is shown.
        domains: Domains to list, in display order.
        console: Rich Console for output.
    """
    table = Table(title="Registered Components", show_lines=True)
    table.add_column("Domain", no_wrap=True)
    table.add_column("Count", justify="right", style="bold")
    table.add_column("Entity Names")

    for domain in domains:
        names = router.available_components(domain)
        table.add_row(domain_text(domain), str(len(names)), ", ".join(names) or "-")

    console.print(table)
    console.print(
        f"\n[bold]{router.total_registered_components()}[/bold] components registered"
    )


def display_rendered_entities(
    entities: list[Entity],
    result: ClassificationResult,
    router: ComponentRouter,
    console: Console,
) -> None:
    """Render every entity through the router, noting fallback renders.

    Args:
        entities: Entities to draw, in order.
        result: Classification of those entities.
        router: Router resolving each entity to a renderer.
        console: Rich Console for output.
    """
    fallback_count = 0
    for entity in entities:
        renderer = router.resolve(entity, result)
        if not router.has_specific_component(entity, result):
            fallback_count += 1
            console.print(f"[dim]{entity.name}: no specific view, using generic form[/dim]")
        console.print(renderer(entity))

    console.print(
        f"\n[bold]{len(entities) - fallback_count}[/bold] domain views, "
        f"[bold]{fallback_count}[/bold] generic forms"
    )
