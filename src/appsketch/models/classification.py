"""Domain classification models.

These models represent the result of classifying a set of entities into
business domains: one aggregate score per domain, the per-entity domain
assignment, and the single primary domain of the whole entity set.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Domain(str, Enum):
    """Business domain an entity (or a whole application) belongs to.

    GENERIC is the explicit "nothing specific matched" value and is always a
    legal classification and lookup target.
    """

    ECOMMERCE = "ecommerce"
    USER_MANAGEMENT = "user_management"
    ADMIN = "admin"
    GENERIC = "generic"


class DomainScore(BaseModel):
    """Aggregate score of one domain over a classification run."""

    domain: Domain = Field(..., description="Domain being scored")
    score: int = Field(default=0, ge=0, description="Sum of winning entity scores")
    matched_entities: list[str] = Field(
        default_factory=list,
        description="Names of entities assigned to this domain, in first-seen order",
    )


class ClassificationResult(BaseModel):
    """Complete result of classifying one entity set.

    ``domain_scores`` always holds one entry per Domain, sorted by score
    descending. ``entity_domain_map`` has one key per distinct entity name.
    """

    primary_domain: Domain = Field(
        default=Domain.GENERIC, description="Domain judged most representative"
    )
    domain_scores: list[DomainScore] = Field(
        default_factory=list, description="Per-domain totals, highest first"
    )
    entity_domain_map: dict[str, Domain] = Field(
        default_factory=dict, description="Entity name -> assigned domain"
    )

    def score_for(self, domain: Domain) -> DomainScore:
        """Return the DomainScore entry for ``domain``."""
        for ds in self.domain_scores:
            if ds.domain == domain:
                return ds
        return DomainScore(domain=domain)
