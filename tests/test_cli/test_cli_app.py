"""Tests for the appsketch CLI application."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from appsketch.cli.app import app

runner = CliRunner()


@pytest.fixture()
def result_file(tmp_path: Path) -> Path:
    """A small e-commerce generation result on disk."""
    path = tmp_path / "shop.json"
    path.write_text(
        json.dumps(
            {
                "appName": "ShopFast",
                "description": "Sell sneakers online",
                "entities": [
                    {"name": "Product", "attributes": ["name", "price", "stock"]},
                    {"name": "Order", "attributes": ["customer_id", "total", "status"]},
                    {"name": "Review", "attributes": ["rating", "comment"]},
                    {"name": "Book", "attributes": ["title"]},
                ],
                "userRoles": [{"name": "Shopper", "description": "Buys sneakers"}],
                "features": [
                    {
                        "name": "Checkout",
                        "description": "Pay for the cart",
                        "operations": ["create"],
                        "relatedEntities": ["Order"],
                    }
                ],
            }
        )
    )
    return path


class TestVersionCommand:
    def test_version_exits_zero(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "appsketch" in result.output


class TestClassifyCommand:
    def test_classify_exits_zero(self, result_file: Path) -> None:
        result = runner.invoke(app, ["classify", str(result_file)])
        assert result.exit_code == 0
        assert "Domain Scores" in result.output
        assert "Entity Domains" in result.output
        assert "ShopFast" in result.output

    def test_classify_reports_primary_domain(self, result_file: Path) -> None:
        result = runner.invoke(app, ["classify", str(result_file)])
        assert "Primary domain:" in result.output
        assert "ecommerce" in result.output

    def test_classify_writes_output(self, result_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out" / "classification.json"
        result = runner.invoke(app, ["classify", str(result_file), "--output", str(out)])
        assert result.exit_code == 0
        data = json.loads(out.read_text())
        assert data["primary_domain"] == "ecommerce"
        assert data["entity_domain_map"]["Book"] == "generic"

    def test_classify_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["classify", str(tmp_path / "missing.json")])
        assert result.exit_code != 0
        assert "Error" in result.output

    def test_classify_invalid_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"entities": "nope"}))
        result = runner.invoke(app, ["classify", str(bad)])
        assert result.exit_code == 1
        assert "Invalid generation result" in result.output


class TestRenderCommand:
    def test_render_all(self, result_file: Path) -> None:
        result = runner.invoke(app, ["render", str(result_file)])
        assert result.exit_code == 0
        assert "Product Catalog" in result.output
        assert "Order Management" in result.output
        assert "using generic form" in result.output

    def test_render_summary_counts(self, result_file: Path) -> None:
        result = runner.invoke(app, ["render", str(result_file)])
        assert "2 domain views" in result.output
        assert "2 generic forms" in result.output

    def test_render_single_entity(self, result_file: Path) -> None:
        result = runner.invoke(app, ["render", str(result_file), "--entity", "order"])
        assert result.exit_code == 0
        assert "Order Management" in result.output
        assert "Product Catalog" not in result.output

    def test_render_reuses_saved_classification(self, result_file: Path, tmp_path: Path) -> None:
        """A saved classification wins over a fresh one."""
        saved = tmp_path / "classification.json"
        saved.write_text(
            json.dumps(
                {
                    "primary_domain": "admin",
                    "domain_scores": [],
                    "entity_domain_map": {"Product": "generic", "Order": "generic"},
                }
            )
        )
        result = runner.invoke(
            app, ["render", str(result_file), "--classification", str(saved)]
        )
        assert result.exit_code == 0
        assert "primary domain: admin" in result.output
        assert "Product Catalog" not in result.output
        assert "0 domain views" in result.output

    def test_render_writes_missing_classification(
        self, result_file: Path, tmp_path: Path
    ) -> None:
        saved = tmp_path / "cache" / "classification.json"
        result = runner.invoke(
            app, ["render", str(result_file), "--classification", str(saved)]
        )
        assert result.exit_code == 0
        assert json.loads(saved.read_text())["primary_domain"] == "ecommerce"
        assert "Product Catalog" in result.output

    def test_render_classify_output_round_trip(
        self, result_file: Path, tmp_path: Path
    ) -> None:
        saved = tmp_path / "classification.json"
        runner.invoke(app, ["classify", str(result_file), "--output", str(saved)])
        result = runner.invoke(
            app, ["render", str(result_file), "--classification", str(saved)]
        )
        assert result.exit_code == 0
        assert "Loading saved classification" in result.output
        assert "2 domain views" in result.output

    def test_render_invalid_saved_classification(
        self, result_file: Path, tmp_path: Path
    ) -> None:
        saved = tmp_path / "classification.json"
        saved.write_text(json.dumps({"primary_domain": "furniture"}))
        result = runner.invoke(
            app, ["render", str(result_file), "--classification", str(saved)]
        )
        assert result.exit_code == 0
        assert "Warning" in result.output
        assert "Product Catalog" in result.output

    def test_render_unknown_entity(self, result_file: Path) -> None:
        result = runner.invoke(app, ["render", str(result_file), "--entity", "Invoice"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestComponentsCommand:
    def test_components_lists_all_domains(self) -> None:
        result = runner.invoke(app, ["components"])
        assert result.exit_code == 0
        assert "Registered Components" in result.output
        assert "user_management" in result.output
        assert "components registered" in result.output

    def test_components_single_domain(self) -> None:
        result = runner.invoke(app, ["components", "--domain", "admin"])
        assert result.exit_code == 0
        assert "admin" in result.output
        assert "ecommerce" not in result.output

    def test_components_invalid_domain(self) -> None:
        result = runner.invoke(app, ["components", "--domain", "billing"])
        assert result.exit_code != 0
