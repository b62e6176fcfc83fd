"""
Argument models for the six catalog operations.

Field aliases match the camelCase argument names used on the wire.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .component_catalog import Category

MIN_SEARCH_LIMIT = 1
MAX_SEARCH_LIMIT = 50
DEFAULT_SEARCH_LIMIT = 10


class OperationArguments(BaseModel):
    """Common configuration for operation argument models"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ListComponentsRequest(OperationArguments):
    """Arguments for list_components"""
    category: Optional[Category] = Field(
        default=None,
        description="Optional filter to show only components from a specific category"
    )


class SearchComponentsRequest(OperationArguments):
    """Arguments for search_components"""
    query: Optional[str] = Field(
        default=None,
        description="Search query for component name, description, or tags"
    )
    category: Optional[Category] = Field(default=None, description="Filter by category")
    tags: Optional[List[str]] = Field(default=None, description="Filter by tags")
    limit: int = Field(
        default=DEFAULT_SEARCH_LIMIT,
        ge=MIN_SEARCH_LIMIT,
        le=MAX_SEARCH_LIMIT,
        description="Maximum number of results"
    )

    @field_validator('limit', mode='before')
    @classmethod
    def default_when_missing(cls, v):
        return DEFAULT_SEARCH_LIMIT if v is None else v


class GetComponentCodeRequest(OperationArguments):
    """Arguments for get_component_code"""
    component_id: str = Field(..., alias="componentId", min_length=1, description="Component ID to get code for")
    language: Literal["typescript", "tsx"] = Field(
        default="tsx",
        description="Language format (typescript or tsx)"
    )

    @field_validator('language', mode='before')
    @classmethod
    def default_language(cls, v):
        return "tsx" if v is None else v


class FetchComponentRequest(OperationArguments):
    """Arguments for fetch_component. ``url`` overrides lookup by id."""
    component_id: Optional[str] = Field(default=None, alias="componentId")
    url: Optional[str] = Field(default=None, description="Direct URL to component source")

    @model_validator(mode='after')
    def require_target(self):
        if not self.component_id and not self.url:
            raise ValueError("either componentId or url is required")
        return self


class ImplementComponentRequest(OperationArguments):
    """Arguments for implement_component"""
    code: str = Field(..., description="Component code to write to file")
    output_path: str = Field(..., alias="outputPath", min_length=1)
    create_directories: bool = Field(default=True, alias="createDirectories")

    @field_validator('create_directories', mode='before')
    @classmethod
    def default_create_directories(cls, v):
        return True if v is None else v


class FetchAndImplementComponentRequest(FetchComponentRequest):
    """Arguments for fetch_and_implement_component"""
    output_path: str = Field(..., alias="outputPath", min_length=1)
    create_directories: bool = Field(default=True, alias="createDirectories")

    @field_validator('create_directories', mode='before')
    @classmethod
    def default_create_directories(cls, v):
        return True if v is None else v
