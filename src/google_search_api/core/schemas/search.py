"""Schemas for the Custom Search JSON API response.

Only the documented parts are modelled. Every model allows extra fields, so
anything Google adds (pagemap, queries, context, spelling...) is kept as-is.

Reference: https://developers.google.com/custom-search/v1/reference/rest/v1/cse/list#response
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """Single matched document."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: Optional[str] = None
    html_title: Optional[str] = Field(default=None, alias="htmlTitle")
    link: Optional[str] = None
    display_link: Optional[str] = Field(default=None, alias="displayLink")
    snippet: Optional[str] = None
    html_snippet: Optional[str] = Field(default=None, alias="htmlSnippet")
    formatted_url: Optional[str] = Field(default=None, alias="formattedUrl")
    html_formatted_url: Optional[str] = Field(default=None, alias="htmlFormattedUrl")
    mime: Optional[str] = None
    file_format: Optional[str] = Field(default=None, alias="fileFormat")
    pagemap: Optional[dict[str, Any]] = None


class SearchInformation(BaseModel):
    """Summary metadata about a query."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    search_time: Optional[float] = Field(default=None, alias="searchTime")
    formatted_search_time: Optional[str] = Field(default=None, alias="formattedSearchTime")
    # Google sends the count as a string ("1234")
    total_results: Optional[str] = Field(default=None, alias="totalResults")
    formatted_total_results: Optional[str] = Field(default=None, alias="formattedTotalResults")


class SearchResponse(BaseModel):
    """Decoded response body."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    items: list[SearchResult] = Field(default_factory=list)
    search_information: Optional[SearchInformation] = Field(
        default=None, alias="searchInformation"
    )
