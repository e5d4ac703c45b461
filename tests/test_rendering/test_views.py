"""Tests for the generic form renderer and the domain mock views."""

from __future__ import annotations

import random

import pytest
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from appsketch.models.entities import Entity
from appsketch.rendering import views
from appsketch.rendering.form import infer_input_type, placeholder_for, render_entity_form
from appsketch.rendering.views import DomainView, mock_rows, placeholder_value


def _text(renderable) -> str:
    console = Console(record=True, width=120, color_system=None)
    console.print(renderable)
    return console.export_text()


# ---------------------------------------------------------------------------
# Generic form
# ---------------------------------------------------------------------------


class TestInferInputType:
    @pytest.mark.parametrize(
        ("attribute", "expected"),
        [
            ("description", "textarea"),
            ("internal_notes", "textarea"),
            ("category", "select"),
            ("order_status", "select"),
            ("Email", "email"),
            ("password", "password"),
            ("phone_number", "tel"),
            ("created_at", "date"),
            ("birth_date", "date"),
            ("age", "number"),
            ("view_count", "number"),
            ("website", "url"),
            ("title", "text"),
        ],
    )
    def test_kinds(self, attribute: str, expected: str) -> None:
        assert infer_input_type(attribute) == expected

    def test_placeholder(self) -> None:
        assert placeholder_for("Unit Price") == "Enter unit price"


class TestRenderEntityForm:
    def test_returns_panel(self) -> None:
        assert isinstance(render_entity_form(Entity(name="Book", attributes=["title"])), Panel)

    def test_lists_every_attribute(self) -> None:
        entity = Entity(name="Book", attributes=["title", "author", "isbn"])
        out = _text(render_entity_form(entity))
        assert "Book" in out
        assert "3 fields" in out
        for attr in entity.attributes:
            assert f"Enter {attr}" in out

    def test_singular_field_count(self) -> None:
        out = _text(render_entity_form(Entity(name="Tag", attributes=["label"])))
        assert "1 field" in out
        assert "1 fields" not in out

    def test_no_attributes(self) -> None:
        out = _text(render_entity_form(Entity(name="Empty")))
        assert "(no fields)" in out


# ---------------------------------------------------------------------------
# Mock data
# ---------------------------------------------------------------------------


class TestPlaceholderValue:
    def test_money(self) -> None:
        assert placeholder_value("price", 0, random.Random(1)).startswith("$")

    def test_email(self) -> None:
        assert placeholder_value("email", 1, random.Random(1)) == "user2@example.com"

    def test_status(self) -> None:
        assert placeholder_value("status", 0, random.Random(1)) in ("Active", "Pending", "Inactive")

    def test_text_fallback(self) -> None:
        assert placeholder_value("first_name", 0, random.Random(1)) == "First Name 1"


class TestMockRows:
    def test_shape(self) -> None:
        entity = Entity(name="Product", attributes=["name", "price", "stock"])
        rows = mock_rows(entity, 4)
        assert len(rows) == 4
        assert all(len(row) == 3 for row in rows)

    def test_stable_per_entity_name(self) -> None:
        entity = Entity(name="Product", attributes=["name", "price", "stock"])
        assert mock_rows(entity) == mock_rows(entity)

    def test_seed_ignores_name_case(self) -> None:
        a = Entity(name="Product", attributes=["price"])
        b = Entity(name="PRODUCT", attributes=["price"])
        assert mock_rows(a) == mock_rows(b)


# ---------------------------------------------------------------------------
# DomainView
# ---------------------------------------------------------------------------


class TestDomainView:
    def test_callable_renders_panel(self) -> None:
        entity = Entity(name="Order", attributes=["total"])
        assert isinstance(views.ORDER_FORM(entity), Panel)

    def test_form_layout_shows_badge_and_fields(self) -> None:
        out = _text(views.ORDER_FORM(Entity(name="Order", attributes=["total", "status"])))
        assert "Order Management" in out
        assert "Enter status" in out

    def test_table_layout_shows_mock_rows(self) -> None:
        entity = Entity(name="Product", attributes=["name", "price"])
        out = _text(views.PRODUCT_DISPLAY(entity))
        assert "Product Catalog" in out
        assert "$" in out
        assert "Name 1" in out

    def test_table_layout_without_attributes_falls_back_to_form(self) -> None:
        out = _text(views.CART_DISPLAY(Entity(name="Cart")))
        assert "Shopping Cart" in out
        assert "(no fields)" in out

    def test_views_are_frozen_and_hashable(self) -> None:
        view = DomainView(key="k", badge="B")
        with pytest.raises(ValidationError):
            view.badge = "C"  # type: ignore[misc]
        assert hash(view) == hash(DomainView(key="k", badge="B"))
