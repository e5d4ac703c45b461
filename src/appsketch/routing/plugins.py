"""Domain plugins: bundles of renderer bindings registered at startup.

A plugin ties one domain to a table of entity names and renderers. Plugins are
registered through a PluginManager, which records them and pushes their
bindings into a ComponentRouter. The built-in plugins replace the router's
seeded forms with the richer domain displays.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from appsketch.models.classification import Domain
from appsketch.rendering import views
from appsketch.rendering.base import Renderer
from appsketch.rendering.form import render_entity_form
from appsketch.routing.factory import ComponentRouter

ECOMMERCE_COMPONENTS: dict[str, Renderer] = {
    "product": views.PRODUCT_DISPLAY,
    "products": views.PRODUCT_DISPLAY,
    "item": views.PRODUCT_DISPLAY,
    "items": views.PRODUCT_DISPLAY,
    "catalog": views.PRODUCT_DISPLAY,
    "inventory": views.PRODUCT_DISPLAY,
    "cart": views.CART_DISPLAY,
    "basket": views.CART_DISPLAY,
    "shopping_cart": views.CART_DISPLAY,
    "order": views.ORDER_FORM,
    "orders": views.ORDER_FORM,
    "purchase": views.ORDER_FORM,
    "checkout": views.CHECKOUT_DISPLAY,
    "payment": views.CHECKOUT_DISPLAY,
    "billing": views.CHECKOUT_DISPLAY,
    "customer": views.CUSTOMER_FORM,
    "customers": views.CUSTOMER_FORM,
    "client": views.CUSTOMER_FORM,
    "buyer": views.CUSTOMER_FORM,
    "shopper": views.CUSTOMER_FORM,
}

USER_MANAGEMENT_COMPONENTS: dict[str, Renderer] = {
    "user": views.USER_DISPLAY,
    "users": views.USER_DISPLAY,
    "account": views.USER_DISPLAY,
    "accounts": views.USER_DISPLAY,
    "member": views.USER_DISPLAY,
    "members": views.USER_DISPLAY,
    "profile": views.USER_DISPLAY,
    "profiles": views.USER_DISPLAY,
    "directory": views.USER_DISPLAY,
    "activity": views.USER_DISPLAY,
    "role": views.ROLE_DISPLAY,
    "roles": views.ROLE_DISPLAY,
    "permission": views.ROLE_DISPLAY,
    "permissions": views.ROLE_DISPLAY,
    "group": views.ROLE_DISPLAY,
    "groups": views.ROLE_DISPLAY,
    "team": views.ROLE_DISPLAY,
    "teams": views.ROLE_DISPLAY,
    "user_form": views.USER_FORM,
    "role_form": views.ROLE_FORM,
}

ADMIN_COMPONENTS: dict[str, Renderer] = {
    "admin": views.ADMIN_SYSTEM_DISPLAY,
    "administrator": views.ADMIN_SYSTEM_DISPLAY,
    "system": views.ADMIN_SYSTEM_DISPLAY,
    "configuration": views.ADMIN_SYSTEM_DISPLAY,
    "config": views.ADMIN_SYSTEM_DISPLAY,
    "settings": views.ADMIN_SYSTEM_DISPLAY,
    "dashboard": views.ADMIN_SYSTEM_DISPLAY,
    "metrics": views.ADMIN_SYSTEM_DISPLAY,
    "monitor": views.ADMIN_SYSTEM_DISPLAY,
    "monitoring": views.ADMIN_SYSTEM_DISPLAY,
    "health": views.ADMIN_SYSTEM_DISPLAY,
    "log": views.ADMIN_REPORT_DISPLAY,
    "logs": views.ADMIN_REPORT_DISPLAY,
    "report": views.ADMIN_REPORT_DISPLAY,
    "reports": views.ADMIN_REPORT_DISPLAY,
    "analytics": views.ADMIN_REPORT_DISPLAY,
    "admin_form": views.ADMIN_SYSTEM_FORM,
    "report_form": views.ADMIN_REPORT_FORM,
}


class DomainPlugin(BaseModel):
    """A named bundle of renderer bindings for one domain."""

    name: str = Field(..., description="Plugin name (e.g., 'ecommerce')")
    domain: Domain = Field(..., description="Domain the bindings are registered into")
    components: dict[str, Renderer] = Field(
        default_factory=dict, description="Entity name -> renderer"
    )

    def initialize(self, router: ComponentRouter) -> None:
        """Push this plugin's bindings into ``router``."""
        router.register_plugin(self.domain, self.components)


class PluginManager:
    """Records registered plugins and initializes each one on a router."""

    def __init__(self, router: ComponentRouter) -> None:
        self._router = router
        self._plugins: list[DomainPlugin] = []

    @property
    def plugins(self) -> list[DomainPlugin]:
        """Return the registered plugins in registration order."""
        return list(self._plugins)

    def register_plugin(self, plugin: DomainPlugin) -> None:
        self._plugins.append(plugin)
        plugin.initialize(self._router)


def builtin_plugins() -> list[DomainPlugin]:
    """Return the e-commerce, user-management and admin display plugins."""
    return [
        DomainPlugin(name="ecommerce", domain=Domain.ECOMMERCE, components=ECOMMERCE_COMPONENTS),
        DomainPlugin(
            name="user_management",
            domain=Domain.USER_MANAGEMENT,
            components=USER_MANAGEMENT_COMPONENTS,
        ),
        DomainPlugin(name="admin", domain=Domain.ADMIN, components=ADMIN_COMPONENTS),
    ]


def initialize_plugins(router: ComponentRouter) -> PluginManager:
    """Register every built-in plugin on ``router``.

    Call once at startup, before the first ``resolve``.

    Returns:
        The PluginManager holding the registered plugins.
    """
    manager = PluginManager(router)
    for plugin in builtin_plugins():
        manager.register_plugin(plugin)
    return manager


def create_router() -> ComponentRouter:
    """Build a seeded router with the generic form fallback and all built-in plugins."""
    router = ComponentRouter(render_entity_form)
    initialize_plugins(router)
    return router
