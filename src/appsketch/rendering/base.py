"""Renderer binding type shared by the router and the views.

A renderer binding is any callable that turns an Entity into a Rich
renderable. Specific domain views and the generic form fallback both
satisfy it, so the router can hand either back without the caller caring.
"""

from __future__ import annotations

from collections.abc import Callable

from rich.console import RenderableType

from appsketch.models.entities import Entity

Renderer = Callable[[Entity], RenderableType]
