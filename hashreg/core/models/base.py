"""
Base Pydantic models for hashreg.

Provides common configuration and base classes for all hashreg models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HashregBaseModel(BaseModel):
    """Base model for all hashreg Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
        - use_enum_values: Serialize enums as values
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )
