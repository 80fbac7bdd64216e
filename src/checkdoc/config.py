"""
Conventions used by check-doc.
The defaults match the Swaggo controller layout: controllers/main.go,
an undocumented Init() hook, and six required annotation tags.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List


DEFAULT_DIRECTORY_NAME = "controllers"
DEFAULT_ENTRY_POINT = "main.go"
DEFAULT_EXEMPT_NAME = "Init"

# Order matters: missing tags are always reported in this order.
REQUIRED_TAGS: List[str] = [
    "@summary",
    "@description",
    "@tags",
    "@accept",
    "@produce",
    "@router",
]


class CheckConfig(BaseModel):
    """
    Naming conventions for a check run.
    Not read from disk; tests substitute values by building their own.
    """
    directory_name: str = DEFAULT_DIRECTORY_NAME
    entry_point: str = DEFAULT_ENTRY_POINT
    exempt_name: str = DEFAULT_EXEMPT_NAME
    required_tags: List[str] = Field(default_factory=lambda: list(REQUIRED_TAGS))

    @field_validator("required_tags")
    @classmethod
    def _tags_not_empty(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one tag is required")
        return value
