"""Domain-specific mock views.

Each DomainView is a renderer binding for one kind of entity in one domain
(product catalog, shopping cart, user directory, system admin...). Views are
illustrative only: ``form`` views wrap the generic form under a domain badge,
``table`` views show a few rows of placeholder data derived from the
entity's attribute names.
"""

from __future__ import annotations

import random
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from appsketch.models.entities import Entity
from appsketch.rendering.form import build_form_table, infer_input_type

_STATUSES = ("Active", "Pending", "Inactive")
_MONEY_HINTS = ("price", "total", "amount", "cost", "subtotal")
_QUANTITY_HINTS = ("quantity", "qty", "stock")


def placeholder_value(attribute: str, row: int, rng: random.Random) -> str:
    """Produce a believable fake cell value for ``attribute`` in mock row ``row``."""
    lowered = attribute.lower()
    if any(h in lowered for h in _MONEY_HINTS):
        return f"${rng.uniform(5, 500):.2f}"
    if any(h in lowered for h in _QUANTITY_HINTS):
        return str(rng.randint(1, 20))

    kind = infer_input_type(attribute)
    if kind == "email":
        return f"user{row + 1}@example.com"
    if kind == "select":
        return rng.choice(_STATUSES)
    if kind == "date":
        return f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"
    if kind == "number":
        return str(rng.randint(1, 100))
    if kind == "tel":
        return f"555-{rng.randint(1000, 9999)}"
    if kind == "url":
        return f"https://example.com/{row + 1}"
    if kind == "password":
        return "********"
    return f"{attribute.replace('_', ' ').title()} {row + 1}"


def mock_rows(entity: Entity, count: int = 3) -> list[list[str]]:
    """Generate placeholder rows for an entity, stable for a given entity name."""
    rng = random.Random(entity.name.lower())
    return [
        [placeholder_value(attr, row, rng) for attr in entity.attributes]
        for row in range(count)
    ]


class DomainView(BaseModel):
    """Renderer binding for one entity kind within a domain."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Stable view identifier (e.g., 'ecommerce.product_display')")
    badge: str = Field(..., description="Badge label shown next to the entity name")
    summary: str = Field(default="", description="One-line description of the screen")
    accent: str = Field(default="blue", description="Rich colour for border and badge")
    layout: Literal["form", "table"] = Field(default="form")
    rows: int = Field(default=3, ge=1, description="Mock rows for table layouts")

    def _body(self, entity: Entity) -> Table:
        if self.layout == "form" or not entity.attributes:
            return build_form_table(entity)

        table = Table(show_header=True, header_style=f"bold {self.accent}", expand=True)
        for attr in entity.attributes:
            table.add_column(attr, overflow="fold")
        for row in mock_rows(entity, self.rows):
            table.add_row(*row)
        return table

    def render(self, entity: Entity) -> Panel:
        header = Text.assemble(
            (f"[{self.badge}]", f"bold {self.accent}"),
            "  ",
            (self.summary, "dim"),
        )
        return Panel(
            Group(header, self._body(entity)),
            title=f"[bold]{entity.name}[/bold]",
            subtitle=self.key,
            border_style=self.accent,
        )

    def __call__(self, entity: Entity) -> Panel:
        return self.render(entity)


# ---------------------------------------------------------------------------
# E-commerce
# ---------------------------------------------------------------------------

PRODUCT_FORM = DomainView(
    key="ecommerce.product_form",
    badge="Product Catalog",
    summary="Product management interface for inventory and catalog operations.",
    accent="blue",
)
ORDER_FORM = DomainView(
    key="ecommerce.order_form",
    badge="Order Management",
    summary="Order processing and fulfillment interface for sales operations.",
    accent="green",
)
CUSTOMER_FORM = DomainView(
    key="ecommerce.customer_form",
    badge="Customer Relationship",
    summary="Customer data and relationship management interface.",
    accent="magenta",
)
PRODUCT_DISPLAY = DomainView(
    key="ecommerce.product_display",
    badge="Product Catalog",
    summary="Product grid with filters, sorting and ratings.",
    accent="blue",
    layout="table",
    rows=4,
)
CART_DISPLAY = DomainView(
    key="ecommerce.cart_display",
    badge="Shopping Cart",
    summary="Shopping cart with quantity controls, item management and checkout.",
    accent="green",
    layout="table",
)
CHECKOUT_DISPLAY = DomainView(
    key="ecommerce.checkout_display",
    badge="Checkout",
    summary="Multi-step checkout: shipping, payment, review.",
    accent="cyan",
)

# ---------------------------------------------------------------------------
# User management
# ---------------------------------------------------------------------------

USER_FORM = DomainView(
    key="user_management.user_form",
    badge="User Account",
    summary="User account management with authentication and profile settings.",
    accent="bright_blue",
)
ROLE_FORM = DomainView(
    key="user_management.role_form",
    badge="Access Control",
    summary="Role-based access control and permission management interface.",
    accent="yellow",
)
USER_DISPLAY = DomainView(
    key="user_management.user_display",
    badge="User Directory",
    summary="Searchable user table with profile and activity details.",
    accent="bright_blue",
    layout="table",
    rows=5,
)
ROLE_DISPLAY = DomainView(
    key="user_management.role_display",
    badge="Roles & Permissions",
    summary="Role overview with a permission matrix.",
    accent="yellow",
    layout="table",
)

# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------

ADMIN_SYSTEM_FORM = DomainView(
    key="admin.system_form",
    badge="System Admin",
    summary="System administration and configuration management interface.",
    accent="red",
)
ADMIN_REPORT_FORM = DomainView(
    key="admin.report_form",
    badge="Analytics & Reports",
    summary="Analytics dashboard and reporting interface for data insights.",
    accent="dark_orange",
)
ADMIN_SYSTEM_DISPLAY = DomainView(
    key="admin.system_display",
    badge="Control Panel",
    summary="System health, metrics and configuration at a glance.",
    accent="red",
    layout="table",
)
ADMIN_REPORT_DISPLAY = DomainView(
    key="admin.report_display",
    badge="Reports",
    summary="Report listing with mock charts and recent log entries.",
    accent="dark_orange",
    layout="table",
    rows=5,
)
