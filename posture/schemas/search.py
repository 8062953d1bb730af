"""
Schemas - Search Models

Pydantic models for provider-neutral code search requests and results.
"""

from pydantic import BaseModel, Field
from typing import List


class SearchRequest(BaseModel):
    """Generic code search input."""
    query: str
    filename: str = ""
    path: str = ""


class SearchResult(BaseModel):
    """Single matching file."""
    path: str


class SearchResponse(BaseModel):
    """Normalized search response."""
    results: List[SearchResult] = []
    hits: int = Field(default=0, ge=0)
