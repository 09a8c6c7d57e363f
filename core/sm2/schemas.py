"""
Pydantic models for review item input.

Validates user-supplied fields before an item is created.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


MAX_TITLE_LENGTH = 200


class NewReviewItem(BaseModel):
    """Fields a user supplies when adding a review item."""
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, description="What to remember")
    content: Optional[str] = Field(None, description="Key points, facts, or concepts")
    task_id: Optional[str] = Field(None, description="Task the item was created from")

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("content", "task_id", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value
