"""Deterministic keyword-based domain classification for generated entities.

Classifies entities to business domains by matching their names and attribute
names against curated per-domain vocabularies. No NLP and no fuzzy matching:
a partial match only counts when it is on the explicit allow-list or shares
one of a few semantic prefixes/suffixes with the bare pattern word.

The vocabularies hold singular forms only where the allow-list pairs them
with a plural. A plural name ("Orders") therefore scores as a partial match
(10, or 2 as an attribute) rather than exact plus partial, so mixed sets can
pick a different primary domain than a vocabulary listing both forms.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from appsketch.models.classification import ClassificationResult, Domain, DomainScore
from appsketch.models.entities import Entity

# Vocabularies per domain, in the fixed order used for per-entity tie-breaks.
# Plurals covered by ALLOWED_PARTIAL_MATCHES are left out so that a plural
# name scores as a partial match, strictly below the exact singular.
DOMAIN_PATTERNS: dict[Domain, tuple[str, ...]] = {
    Domain.ECOMMERCE: (
        "product", "item", "catalog", "inventory",
        "order", "purchase", "cart", "basket",
        "customer", "buyer", "client", "shopper",
        "payment", "billing", "invoice", "transaction", "checkout",
        "shipping", "delivery", "warehouse", "stock", "sku",
        "category", "brand", "vendor", "supplier",
        "price", "pricing", "discount", "coupon", "promotion",
        "review", "rating", "feedback", "wishlist", "favorite",
    ),
    Domain.USER_MANAGEMENT: (
        "user", "account", "member",
        "profile", "person", "people", "contact",
        "role", "permission", "access",
        "group", "team", "organization",
        "authentication", "authorization", "login", "session",
        "credential", "password", "token",
        "right", "rights",
    ),
    Domain.ADMIN: (
        "admin", "administrator", "management", "configuration",
        "settings", "config", "system", "log", "audit",
        "report", "analytics", "dashboard", "metric",
        "backup", "maintenance", "monitor", "monitoring",
        "privilege",
    ),
}

# Known plural/singular and compound pairs. Checked in both directions.
ALLOWED_PARTIAL_MATCHES: dict[str, tuple[str, ...]] = {
    # e-commerce
    "products": ("product",),
    "orders": ("order",),
    "customers": ("customer",),
    "categories": ("category",),
    "items": ("item",),
    # user management
    "users": ("user",),
    "accounts": ("account",),
    "members": ("member",),
    "profiles": ("profile",),
    "roles": ("role",),
    "permissions": ("permission",),
    "groups": ("group",),
    "teams": ("team",),
    "credentials": ("credential",),
    "privileges": ("privilege",),
    # admin
    "logs": ("log",),
    "reports": ("report",),
    "settings": ("setting",),
    "configs": ("config",),
}

SEMANTIC_PREFIXES: tuple[str, ...] = ("user_", "admin_", "product_", "order_", "customer_")
SEMANTIC_SUFFIXES: tuple[str, ...] = ("_id", "_name", "_type", "_status", "_date", "_time")

NAME_EXACT_WEIGHT = 20
NAME_PARTIAL_WEIGHT = 10
ATTRIBUTE_EXACT_WEIGHT = 5
ATTRIBUTE_PARTIAL_WEIGHT = 2

# Flat contribution of an unmatched entity to the GENERIC total.
GENERIC_ENTITY_SCORE = 1

# Top total must reach this multiple of the runner-up to win outright.
CLEAR_WINNER_RATIO = 1.5


def is_meaningful_match(term: str, pattern: str) -> bool:
    """Check whether ``term`` partially matches ``pattern`` in a meaningful way.

    Both arguments are expected lowercased. Returns True for allow-listed
    plural/compound pairs, or when one side is the other plus a recognised
    semantic prefix (``user_``...) or suffix (``_id``...). Plain substring
    containment never counts, e.g. "pricing" does not partially match "price".
    """
    if pattern in ALLOWED_PARTIAL_MATCHES.get(term, ()):
        return True
    if term in ALLOWED_PARTIAL_MATCHES.get(pattern, ()):
        return True

    for prefix in SEMANTIC_PREFIXES:
        bare = prefix[:-1]
        if term.startswith(prefix) and pattern == bare:
            return True
        if pattern.startswith(prefix) and term == bare:
            return True

    for suffix in SEMANTIC_SUFFIXES:
        if term.endswith(suffix) and pattern == term[: -len(suffix)]:
            return True
        if pattern.endswith(suffix) and term == pattern[: -len(suffix)]:
            return True

    return False


def _match_weight(term: str, patterns: Iterable[str], exact: int, partial: int) -> int:
    score = 0
    for pattern in patterns:
        if term == pattern:
            score += exact
        elif is_meaningful_match(term, pattern):
            score += partial
    return score


def score_entity_for_patterns(entity: Entity, patterns: Sequence[str]) -> int:
    """Score one entity against one domain vocabulary.

    The lowercased name is weighted 20 (exact) / 10 (partial) per pattern, each
    lowercased attribute 5 (exact) / 2 (partial). All contributions are summed.

    Args:
        entity: Entity to score.
        patterns: Lowercase vocabulary of one domain.

    Returns:
        Non-negative affinity score.
    """
    score = _match_weight(
        entity.name.lower(), patterns, NAME_EXACT_WEIGHT, NAME_PARTIAL_WEIGHT
    )
    for attribute in entity.attributes:
        score += _match_weight(
            attribute.lower(), patterns, ATTRIBUTE_EXACT_WEIGHT, ATTRIBUTE_PARTIAL_WEIGHT
        )
    return score


def score_entity_domains(entity: Entity) -> dict[Domain, int]:
    """Score an entity against every non-generic domain, in check order."""
    return {
        domain: score_entity_for_patterns(entity, patterns)
        for domain, patterns in DOMAIN_PATTERNS.items()
    }


def assign_entity_domain(entity: Entity) -> tuple[Domain, int]:
    """Pick the winning domain for a single entity.

    The strictly highest score wins; ties keep the domain checked first
    (e-commerce, user management, admin). A best score of 0 yields GENERIC.

    Returns:
        Tuple of (winning domain, its score). Score is 0 for GENERIC.
    """
    winner = Domain.GENERIC
    best = 0
    for domain, score in score_entity_domains(entity).items():
        if score > best:
            best = score
            winner = domain
    return winner, best


def _sorted_scores(scores: Iterable[DomainScore]) -> list[DomainScore]:
    # sorted() is stable, so ties keep enumeration order
    return sorted(scores, key=lambda s: s.score, reverse=True)


def determine_primary_domain(domain_scores: Sequence[DomainScore]) -> Domain:
    """Choose the single domain that best represents a whole entity set.

    A zero top score means GENERIC. A top score at least 1.5x the runner-up
    wins outright. In a close contest a specific domain is preferred: a GENERIC
    leader yields to the runner-up when that one is not GENERIC.
    """
    ranked = _sorted_scores(domain_scores)
    if not ranked or ranked[0].score == 0:
        return Domain.GENERIC

    top = ranked[0]
    if len(ranked) < 2:
        return top.domain
    second = ranked[1]

    if top.score >= second.score * CLEAR_WINNER_RATIO:
        return top.domain

    if top.domain != Domain.GENERIC:
        return top.domain

    return second.domain if second.domain != Domain.GENERIC else Domain.GENERIC


def classify(entities: Sequence[Entity]) -> ClassificationResult:
    """Classify a set of entities into business domains.

    Entities are processed in the given order. Each is assigned its winning
    domain; that domain's total grows by the entity's score (GENERIC by a flat
    1) and the entity name is appended to its matched list. Duplicate names
    are appended again and the last occurrence decides the map entry.
    Plural names score below their singular form (see module docstring).

    Args:
        entities: Entities from a generation result. May be empty.

    Returns:
        A fresh ClassificationResult with one DomainScore per Domain.
    """
    totals: dict[Domain, DomainScore] = {domain: DomainScore(domain=domain) for domain in Domain}
    entity_domain_map: dict[str, Domain] = {}

    for entity in entities:
        domain, score = assign_entity_domain(entity)
        if domain == Domain.GENERIC:
            score = GENERIC_ENTITY_SCORE

        totals[domain].score += score
        totals[domain].matched_entities.append(entity.name)
        entity_domain_map[entity.name] = domain

    domain_scores = _sorted_scores(totals.values())
    primary = determine_primary_domain(domain_scores)

    logger.debug(
        "Classified {n} entities, primary domain {primary} ({scores})",
        n=len(entities),
        primary=primary.value,
        scores=", ".join(f"{s.domain.value}={s.score}" for s in domain_scores),
    )

    return ClassificationResult(
        primary_domain=primary,
        domain_scores=domain_scores,
        entity_domain_map=entity_domain_map,
    )


def get_entity_domain(entity_name: str, result: ClassificationResult) -> Domain:
    """Return the domain assigned to ``entity_name``, or GENERIC if unknown."""
    return result.entity_domain_map.get(entity_name, Domain.GENERIC)


def has_specific_context(result: ClassificationResult) -> bool:
    """Return True when the primary domain is a specific (non-generic) one."""
    return result.primary_domain != Domain.GENERIC
