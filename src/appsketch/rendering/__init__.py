"""Renderer bindings: the generic form fallback and domain-specific mock views."""

from appsketch.rendering.base import Renderer
from appsketch.rendering.form import infer_input_type, render_entity_form
from appsketch.rendering.views import DomainView, mock_rows

__all__ = [
    "DomainView",
    "Renderer",
    "infer_input_type",
    "mock_rows",
    "render_entity_form",
]
