"""
Search Models

Pydantic models handed to the presentation layer.
"""

from pydantic import BaseModel, Field


class QueryResult(BaseModel):
    """A single ranked search result"""

    url: str = Field(..., description="Page the result points to")
    title: str = Field(default="", description="Page title (not escaped)")
    description: str = Field(default="", description="Page description (not escaped)")
    excerpt: str = Field(
        default="",
        description="Context around the first match, with highlight markers",
    )
    relevance: int = Field(default=0, ge=0, description="Sum of matched zone weights")
