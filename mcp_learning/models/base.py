"""Base model classes for MCP Learning."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..utils.date_utils import utcnow


class LearningBaseModel(BaseModel):
    """Base model with common configuration for all MCP Learning models."""

    model_config = ConfigDict(
        # Keep enum objects in memory, serialize values only when needed
        use_enum_values=False,
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment after model creation
        validate_assignment=True,
        # Reject unknown keys instead of silently dropping them
        extra="forbid",
    )


class TimestampedModel(LearningBaseModel):
    """Base model for entities with creation and update timestamps."""

    created_at: datetime = Field(
        default_factory=utcnow,
        description="When the entity was created"
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        description="When the entity was last updated"
    )
