"""Domain classification for generated application entities.

Provides deterministic keyword-based classification of entities to business
domains (e-commerce, user management, admin, or generic).
"""

from appsketch.classification.heuristic import (
    assign_entity_domain,
    classify,
    determine_primary_domain,
    get_entity_domain,
    has_specific_context,
    is_meaningful_match,
    score_entity_domains,
    score_entity_for_patterns,
)

__all__ = [
    "assign_entity_domain",
    "classify",
    "determine_primary_domain",
    "get_entity_domain",
    "has_specific_context",
    "is_meaningful_match",
    "score_entity_domains",
    "score_entity_for_patterns",
]
