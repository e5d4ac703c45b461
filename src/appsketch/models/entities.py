"""Generation result models.

These models describe the structured application description returned by the
generation service: the entities (data objects with attribute names), the user
roles, and the features of the generated application. The service speaks
camelCase JSON; the Python attributes are snake_case and both spellings are
accepted on validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """A named data object of the generated application.

    Names are free text (any casing, singular or plural). Attribute order does
    not matter for classification and duplicates are kept as given.
    """

    name: str = Field(..., description="Entity name as generated (e.g., 'Product')")
    attributes: list[str] = Field(
        default_factory=list,
        description="Attribute (field) names, e.g. ['name', 'price']",
    )


class UserRole(BaseModel):
    """A user role of the generated application."""

    name: str = Field(..., description="Role name (e.g., 'Admin')")
    description: str = Field(default="", description="What the role is for")


class Feature(BaseModel):
    """A feature of the generated application and who may use it."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Feature name (e.g., 'Checkout')")
    description: str = Field(default="", description="Short feature summary")
    operations: list[str] = Field(
        default_factory=list,
        description="Operations offered by the feature (e.g., ['create', 'list'])",
    )
    role_permissions: dict[str, str | list[str]] = Field(
        default_factory=dict,
        alias="rolePermissions",
        description="Role name -> permitted operation(s)",
    )
    related_entities: list[str] = Field(
        default_factory=list,
        alias="relatedEntities",
        description="Names of entities the feature works on",
    )


class GenerationResult(BaseModel):
    """Complete structured description of one generated application."""

    model_config = ConfigDict(populate_by_name=True)

    app_name: str = Field(..., alias="appName", description="Generated application name")
    description: str | None = Field(default=None, description="Original app idea")
    entities: list[Entity] = Field(default_factory=list)
    user_roles: list[UserRole] = Field(default_factory=list, alias="userRoles")
    features: list[Feature] = Field(default_factory=list)
