"""Base Pydantic schemas shared by catalog records, client profiles and results."""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Pydantic Base Classes
# =============================================================================


class OccmatchBaseModel(BaseModel):
    """Base Pydantic model for all schemas with common configuration."""

    model_config = ConfigDict(
        # Accept both the Python field name and the camelCase alias
        populate_by_name=True,
        # Validate on assignment
        validate_assignment=True,
        # Use enum values instead of enum members
        use_enum_values=True,
        str_strip_whitespace=True,
    )

    def to_dict(self) -> dict:
        """Dump the camelCase, JSON-compatible shape (unset optionals omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class FrozenModel(OccmatchBaseModel):
    """Immutable schema for catalog data and computed results."""

    model_config = ConfigDict(frozen=True)


class VersionedSchema(OccmatchBaseModel):
    """Schema with versioning."""

    schema_version: str = Field(
        default="1.0.0", alias="schemaVersion", description="Schema version"
    )
