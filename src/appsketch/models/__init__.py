"""Pydantic data models shared across all appsketch components.

All models are re-exported here for convenient imports:
    from appsketch.models import Entity, Domain, ClassificationResult
"""

from appsketch.models.classification import ClassificationResult, Domain, DomainScore
from appsketch.models.entities import Entity, Feature, GenerationResult, UserRole

__all__ = [
    # generation result
    "Entity",
    "UserRole",
    "Feature",
    "GenerationResult",
    # classification
    "Domain",
    "DomainScore",
    "ClassificationResult",
]
