"""Component router: maps classified entities to renderer bindings.

The router holds a registry of ``domain -> lowercased entity name -> renderer``
and a memo cache keyed ``"<domain>:<name>"``. Lookups that find nothing
registered bind to the generic fallback renderer supplied at construction;
"no specific screen for this entity" is an ordinary outcome, not an error.
"""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from appsketch.models.classification import ClassificationResult, Domain
from appsketch.models.entities import Entity
from appsketch.rendering import views
from appsketch.rendering.base import Renderer

# Registry contents a freshly constructed router starts with.
BUILTIN_COMPONENTS: dict[Domain, dict[str, Renderer]] = {
    Domain.ECOMMERCE: {
        "product": views.PRODUCT_FORM,
        "products": views.PRODUCT_FORM,
        "item": views.PRODUCT_FORM,
        "items": views.PRODUCT_FORM,
        "catalog": views.PRODUCT_FORM,
        "inventory": views.PRODUCT_FORM,
        "order": views.ORDER_FORM,
        "orders": views.ORDER_FORM,
        "purchase": views.ORDER_FORM,
        "cart": views.ORDER_FORM,
        "basket": views.ORDER_FORM,
        "customer": views.CUSTOMER_FORM,
        "customers": views.CUSTOMER_FORM,
        "client": views.CUSTOMER_FORM,
        "buyer": views.CUSTOMER_FORM,
        "shopper": views.CUSTOMER_FORM,
    },
    Domain.USER_MANAGEMENT: {
        "user": views.USER_FORM,
        "users": views.USER_FORM,
        "account": views.USER_FORM,
        "accounts": views.USER_FORM,
        "member": views.USER_FORM,
        "members": views.USER_FORM,
        "profile": views.USER_FORM,
        "profiles": views.USER_FORM,
        "role": views.ROLE_FORM,
        "roles": views.ROLE_FORM,
        "permission": views.ROLE_FORM,
        "permissions": views.ROLE_FORM,
        "group": views.ROLE_FORM,
        "groups": views.ROLE_FORM,
        "team": views.ROLE_FORM,
        "teams": views.ROLE_FORM,
    },
    Domain.ADMIN: {
        "admin": views.ADMIN_SYSTEM_FORM,
        "administrator": views.ADMIN_SYSTEM_FORM,
        "system": views.ADMIN_SYSTEM_FORM,
        "configuration": views.ADMIN_SYSTEM_FORM,
        "config": views.ADMIN_SYSTEM_FORM,
        "settings": views.ADMIN_SYSTEM_FORM,
        "log": views.ADMIN_REPORT_FORM,
        "logs": views.ADMIN_REPORT_FORM,
        "report": views.ADMIN_REPORT_FORM,
        "reports": views.ADMIN_REPORT_FORM,
        "analytics": views.ADMIN_REPORT_FORM,
        "dashboard": views.ADMIN_REPORT_FORM,
        "metric": views.ADMIN_REPORT_FORM,
        "monitor": views.ADMIN_SYSTEM_FORM,
        "monitoring": views.ADMIN_SYSTEM_FORM,
    },
}


def _cache_key(domain: Domain, entity_name: str) -> str:
    return f"{domain.value}:{entity_name}"


class ComponentRouter:
    """Resolves entities to the most specific registered renderer.

    Hold one instance for the life of the process and pass it to whatever
    renders entities, so registrations made at startup stay visible to every
    later lookup.
    """

    def __init__(self, fallback: Renderer, *, seed_defaults: bool = True) -> None:
        """Initialize the router.

        Args:
            fallback: Generic renderer used when no specific binding exists.
            seed_defaults: Pre-load BUILTIN_COMPONENTS into the registry.
        """
        self._fallback = fallback
        self._registry: dict[Domain, dict[str, Renderer]] = {domain: {} for domain in Domain}
        self._cache: dict[str, Renderer] = {}
        if seed_defaults:
            for domain, bindings in BUILTIN_COMPONENTS.items():
                self.register_plugin(domain, bindings)

    @property
    def fallback(self) -> Renderer:
        """Return the generic fallback renderer."""
        return self._fallback

    def _lookup(self, entity: Entity, result: ClassificationResult) -> tuple[Domain, str]:
        domain = result.entity_domain_map.get(entity.name, Domain.GENERIC)
        return domain, entity.name.lower()

    def resolve(self, entity: Entity, result: ClassificationResult) -> Renderer:
        """Return the renderer for an entity under a classification result.

        Never raises: unknown domains or names bind to the fallback renderer,
        and that binding is cached like any other.
        """
        domain, name = self._lookup(entity, result)
        key = _cache_key(domain, name)

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        binding = self._registry[domain].get(name, self._fallback)
        self._cache[key] = binding
        return binding

    def has_specific_component(self, entity: Entity, result: ClassificationResult) -> bool:
        """Return True iff a registered (non-fallback) renderer exists for the entity."""
        domain, name = self._lookup(entity, result)
        return name in self._registry[domain]

    def available_components(self, domain: Domain) -> list[str]:
        """Return the registered entity-name keys of a domain, in registration order."""
        return list(self._registry[domain])

    def total_registered_components(self) -> int:
        return sum(len(bindings) for bindings in self._registry.values())

    def register_component(self, domain: Domain, entity_name: str, binding: Renderer) -> None:
        """Register (or replace) the renderer for one entity name in a domain.

        Args:
            domain: Target domain.
            entity_name: Entity name in any casing; stored lowercased.
            binding: Renderer to return for that domain and name.
        """
        self._registry[domain][entity_name.lower()] = binding
        logger.debug(
            "Registered component {domain}:{name}", domain=domain.value, name=entity_name.lower()
        )
        self._invalidate(domain)

    def register_plugin(self, domain: Domain, bindings: Mapping[str, Renderer]) -> None:
        """Register a batch of renderers for one domain with a single cache flush."""
        registry = self._registry[domain]
        for entity_name, binding in bindings.items():
            registry[entity_name.lower()] = binding
        logger.debug(
            "Registered {n} components for domain {domain}", n=len(bindings), domain=domain.value
        )
        self._invalidate(domain)

    def _invalidate(self, domain: Domain) -> None:
        prefix = f"{domain.value}:"
        stale = [key for key in self._cache if key.startswith(prefix)]
        for key in stale:
            del self._cache[key]
        if stale:
            logger.debug(
                "Invalidated {n} cached lookups for domain {domain}",
                n=len(stale),
                domain=domain.value,
            )
