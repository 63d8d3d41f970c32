"""
Base schemas with standardized field types for consistent API responses.
"""

from typing import Annotated, Any, Generic, List, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ..core.time_of_day import TimeOfDay

T = TypeVar("T")


def _render_time(value: Any) -> Any:
    if isinstance(value, TimeOfDay):
        return value.isoformat()
    return value


# TimeOfDay rendered as "HH:mm" in responses
TimeText = Annotated[str, BeforeValidator(_render_time)]


class StandardizedModel(BaseModel):
    """Base model with standardized JSON encoding"""

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True, from_attributes=True)


class PaginatedResponse(BaseModel, Generic[T]):
    """Standard paginated response for list endpoints."""

    items: List[T] = Field(description="List of items")
    total: int = Field(description="Total number of items")
    page: int = Field(default=1, description="Current page number", ge=1)
    per_page: int = Field(default=50, description="Items per page", ge=1, le=200)
    has_next: bool = Field(description="Whether there's a next page")
    has_prev: bool = Field(description="Whether there's a previous page")
