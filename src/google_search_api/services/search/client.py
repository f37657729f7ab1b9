"""Synchronous client for the Google Custom Search JSON API."""

from typing import TYPE_CHECKING, Any, Mapping, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from ...config import DEFAULT_API_URL
from ...core.exceptions import ConfigurationError, InvalidStateError, RequestError
from ...core.schemas.search import SearchInformation, SearchResponse
from ...observability.logger import get_logger, redact_api_key
from .query import build_query, merge_parameters

if TYPE_CHECKING:
    from ...config import Settings

logger = get_logger(__name__)


class GoogleSearchClient:
    """Client for the Custom Search ``cse.list`` endpoint.

    Every ``search`` call opens its own httpx.Client and closes it when the
    request is done. The last successful response is kept on the instance
    and backs the accessor methods, so one instance must not be shared
    between concurrent callers.

    Reference: https://developers.google.com/custom-search/v1/reference/rest/v1/cse/list
    """

    def __init__(
        self,
        engine_id: str = "",
        api_key: str = "",
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the search client.

        Args:
            engine_id: Programmable Search Engine id (``cx``)
            api_key: Google Cloud console API key
            api_url: Custom Search JSON API URL
            timeout: Request timeout in seconds
            verify_ssl: Verify TLS certificates; disable only for debugging
            transport: Optional httpx transport (used by tests)
        """
        self._engine_id = engine_id
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._transport = transport
        self._raw_result: Optional[dict[str, Any]] = None

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "GoogleSearchClient":
        """Create a client from application settings."""
        return cls(
            engine_id=settings.google_search_engine_id,
            api_key=settings.google_search_api_key,
            api_url=settings.google_search_api_url,
            timeout=settings.google_search_timeout,
            verify_ssl=settings.google_search_verify_ssl,
            transport=transport,
        )

    @property
    def engine_id(self) -> str:
        return self._engine_id

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def api_url(self) -> str:
        return self._api_url

    def set_engine_id(self, engine_id: str) -> None:
        """Override the engine id given at construction."""
        self._engine_id = engine_id

    def set_api_key(self, api_key: str) -> None:
        """Override the API key given at construction."""
        self._api_key = api_key

    def set_api_url(self, api_url: str) -> None:
        """Override the API URL given at construction."""
        self._api_url = api_url

    def _make_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._timeout,
            verify=self._verify_ssl,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    def _fetch(
        self, phrase: str, parameters: Optional[Mapping[str, Any]]
    ) -> dict[str, Any]:
        """Run one request and return the decoded body without storing it.

        Raises:
            ConfigurationError: Engine id or API key not set.
            RequestError: Transport error, non-200 status or invalid body.
        """
        if not self._engine_id:
            raise ConfigurationError("You must specify an engine id")
        if not self._api_key:
            raise ConfigurationError("You must specify an API key")

        query = build_query(
            self._engine_id, merge_parameters(self._api_key, phrase, parameters)
        )
        url = self._api_url + query

        logger.info(
            "Custom search request",
            url=redact_api_key(url),
            verify_ssl=self._verify_ssl,
        )

        try:
            with self._make_client() as client:
                response = client.get(url)
        except httpx.HTTPError as e:
            raise RequestError(
                f"No data returned: {e}",
                details={"error": str(e)},
            ) from e

        logger.debug(
            "Custom search response",
            status_code=response.status_code,
            body_preview=response.text[:500] if response.text else "",
        )

        if response.status_code != 200:
            raise RequestError(
                f"No data returned, code [{response.status_code}]",
                status_code=response.status_code,
                details={"body": response.text[:500]},
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RequestError(
                f"Search response parse error: {e}",
                status_code=response.status_code,
                details={"body": response.text[:500]},
            ) from e

        if not isinstance(data, dict):
            raise RequestError(
                "Search response is not a JSON object",
                status_code=response.status_code,
                details={"body": response.text[:500]},
            )

        return data

    def search(
        self, phrase: str, parameters: Optional[Mapping[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """
        Search and return the result items.

        Each item is the decoded JSON record as sent by Google; the most
        useful keys are ``title``, ``htmlTitle``, ``link``, ``displayLink``,
        ``snippet`` and ``htmlSnippet``.

        Args:
            phrase: Search phrase; an empty phrase returns [] without a request
            parameters: Extra ``cse.list`` parameters (``num``, ``start``,
                ``lr``, ...). They may override ``key`` and ``q``.

        Returns:
            Result items, or [] when the response has none

        Raises:
            ConfigurationError: Engine id or API key not set.
            RequestError: Transport error, non-200 status or invalid body.
        """
        if not phrase:
            return []

        data = self._fetch(phrase, parameters)
        self._raw_result = data
        return list(data.get("items") or [])

    def query(
        self, phrase: str, parameters: Optional[Mapping[str, Any]] = None
    ) -> SearchResponse:
        """Search and return the whole response as a typed model.

        Same request, errors and stored state as ``search``.
        """
        if not phrase:
            return SearchResponse()

        data = self._fetch(phrase, parameters)
        try:
            response = SearchResponse.model_validate(data)
        except PydanticValidationError as e:
            raise RequestError(
                f"Unexpected search response shape: {e}",
                status_code=200,
            ) from e

        self._raw_result = data
        return response

    def get_raw_result(self) -> Optional[dict[str, Any]]:
        """Return the last decoded response, or None before any search."""
        return self._raw_result

    def get_search_information(self) -> SearchInformation:
        """Return ``searchInformation`` of the last response.

        Raises:
            InvalidStateError: No response stored, or it has no search information.
        """
        if self._raw_result is None:
            raise InvalidStateError("No search has been performed yet")

        info = self._raw_result.get("searchInformation")
        if not isinstance(info, dict):
            raise InvalidStateError("Response has no searchInformation")
        try:
            return SearchInformation.model_validate(info)
        except PydanticValidationError as e:
            raise InvalidStateError(
                f"Invalid searchInformation: {e}",
                {"search_information": info},
            ) from e

    def get_total_number_of_results(self) -> int:
        """Return ``searchInformation.totalResults`` as an int."""
        total = self.get_search_information().total_results
        try:
            return int(total)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise InvalidStateError(
                f"Invalid totalResults value: {total!r}",
                {"total_results": total},
            )
