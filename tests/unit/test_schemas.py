"""Tests for response schemas."""

from google_search_api.core.schemas.search import (
    SearchInformation,
    SearchResponse,
    SearchResult,
)
from tests.fixtures import MockSearchResponses


class TestSearchResult:
    """Tests for SearchResult."""

    def test_aliases(self):
        """Test camelCase fields map to snake_case attributes."""
        result = SearchResult.model_validate(
            {
                "title": "T",
                "htmlTitle": "<b>T</b>",
                "displayLink": "example.com",
                "htmlSnippet": "<i>s</i>",
                "formattedUrl": "https://example.com",
                "fileFormat": "PDF/Adobe Acrobat",
            }
        )
        assert result.html_title == "<b>T</b>"
        assert result.display_link == "example.com"
        assert result.html_snippet == "<i>s</i>"
        assert result.formatted_url == "https://example.com"
        assert result.file_format == "PDF/Adobe Acrobat"

    def test_all_fields_optional(self):
        """Test an empty record is accepted."""
        result = SearchResult.model_validate({})
        assert result.title is None
        assert result.link is None

    def test_unknown_fields_kept(self):
        """Test undocumented fields survive validation."""
        result = SearchResult.model_validate({"title": "T", "cacheId": "abc"})
        assert result.model_extra == {"cacheId": "abc"}
        assert result.model_dump(by_alias=True)["cacheId"] == "abc"


class TestSearchInformation:
    """Tests for SearchInformation."""

    def test_numeric_total_results_coerced(self):
        """Test a numeric totalResults is stored as a string."""
        info = SearchInformation.model_validate({"totalResults": 42})
        assert info.total_results == "42"

    def test_populate_by_name(self):
        """Test construction with attribute names."""
        info = SearchInformation(total_results="7", search_time=0.5)
        assert info.total_results == "7"
        assert info.search_time == 0.5


class TestSearchResponse:
    """Tests for SearchResponse."""

    def test_full_response(self):
        """Test parsing a complete response."""
        response = SearchResponse.model_validate(MockSearchResponses.one_item())
        assert len(response.items) == 1
        assert response.items[0].title == "A"
        assert response.items[0].pagemap == {"metatags": [{"og:type": "website"}]}
        assert response.search_information.formatted_total_results == "1"

    def test_no_items(self):
        """Test missing items default to an empty list."""
        response = SearchResponse.model_validate(MockSearchResponses.no_items())
        assert response.items == []
        assert response.search_information.total_results == "0"

    def test_empty(self):
        """Test the empty response."""
        response = SearchResponse()
        assert response.items == []
        assert response.search_information is None
