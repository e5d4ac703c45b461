"""Generic attribute-listing form, the domain-agnostic fallback renderer."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from appsketch.models.entities import Entity

# (input kind, keywords) checked in order; first hit wins.
_INPUT_KIND_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("textarea", ("description", "notes")),
    ("select", ("category", "status", "type")),
    ("email", ("email",)),
    ("password", ("password",)),
    ("tel", ("phone",)),
    ("date", ("date", "created", "updated")),
    ("number", ("age", "count", "number")),
    ("url", ("url", "link", "website")),
)


def infer_input_type(attribute: str) -> str:
    """Guess the form input kind for an attribute name.

    E.g. "email_address" -> "email", "order_status" -> "select",
    anything unrecognised -> "text".
    """
    lowered = attribute.lower()
    for kind, keywords in _INPUT_KIND_RULES:
        if any(k in lowered for k in keywords):
            return kind
    return "text"


def placeholder_for(attribute: str) -> str:
    return f"Enter {attribute.lower()}"


def build_form_table(entity: Entity) -> Table:
    """Build the disabled-form table (one row per attribute) for an entity."""
    table = Table(show_header=True, header_style="bold", expand=True)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Input", style="dim", no_wrap=True)
    table.add_column("Placeholder", style="italic")

    for attribute in entity.attributes:
        table.add_row(attribute, infer_input_type(attribute), placeholder_for(attribute))

    if not entity.attributes:
        table.add_row("[dim](no fields)[/dim]", "", "")
    return table


def render_entity_form(entity: Entity) -> Panel:
    """Render an entity as a plain attribute form with no domain knowledge."""
    n = len(entity.attributes)
    return Panel(
        build_form_table(entity),
        title=f"[bold]{entity.name}[/bold]",
        subtitle=f"{n} field{'s' if n != 1 else ''}",
        border_style="blue",
    )
