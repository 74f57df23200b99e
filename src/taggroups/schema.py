from enum import Enum
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrphanPolicy(str, Enum):
    """What to do with tag lines that appear before any group header."""

    error = "error"
    drop = "drop"
    default_group = "default_group"


class Group(BaseModel):
    """A named group of tag lines, in the order they were read."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Header text with the brackets removed.")
    tags: Tuple[str, ...] = Field(
        default=(), description="Tag lines of the group, not split further."
    )

    @field_validator("tags", mode="before")
    @classmethod
    def tags_to_tuple(cls, v):
        """Accept any sequence of tag lines."""
        if isinstance(v, list):
            return tuple(v)
        return v


ParseResult = Tuple[Group, ...]
