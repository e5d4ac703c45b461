"""Routing of classified entities to renderer bindings.

Re-exports for convenient imports:
    from appsketch.routing import ComponentRouter, create_router
"""

from appsketch.routing.factory import BUILTIN_COMPONENTS, ComponentRouter
from appsketch.routing.plugins import (
    DomainPlugin,
    PluginManager,
    builtin_plugins,
    create_router,
    initialize_plugins,
)

__all__ = [
    "BUILTIN_COMPONENTS",
    "ComponentRouter",
    "DomainPlugin",
    "PluginManager",
    "builtin_plugins",
    "create_router",
    "initialize_plugins",
]
