"""Synchronous Semantic Scholar API client.

Every operation is one request/response round trip:
- build the URL from a path template and the shared query builder
- send through the injected HTTPClient
- reject any status other than 200
- decode the body into a pydantic model

Base URL: https://api.semanticscholar.org/graph/v1
Docs: https://api.semanticscholar.org/api-docs
"""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from semscholar.config import GRAPH_API_URL, S2Settings
from semscholar.errors import (
    S2APIError,
    S2ConfigError,
    S2DecodeError,
    S2NotFoundError,
    S2RateLimitError,
)
from semscholar.logging_config import get_logger
from semscholar.models import (
    S2Author,
    S2AuthorSearchResult,
    S2BatchRequest,
    S2DatasetDiffList,
    S2DatasetMetadata,
    S2Paper,
    S2PaperSearchResult,
    S2RecommendationRequest,
    S2RecommendationResult,
    S2Release,
)
from semscholar.query import QueryPairs, build_params, escape_path
from semscholar.transport import DEFAULT_TIMEOUT_SECONDS, HTTPClient, default_http_client

logger = get_logger(__name__)

T = TypeVar("T")

_AUTHOR = TypeAdapter(S2Author)
_AUTHOR_BATCH = TypeAdapter(list[S2Author | None])
_AUTHOR_SEARCH = TypeAdapter(S2AuthorSearchResult)
_PAPER_LIST = TypeAdapter(list[S2Paper])
_PAPER_BATCH = TypeAdapter(list[S2Paper | None])
_PAPER_SEARCH = TypeAdapter(S2PaperSearchResult)
_RECOMMENDATIONS = TypeAdapter(S2RecommendationResult)
_RELEASE_IDS = TypeAdapter(list[str])
_RELEASE = TypeAdapter(S2Release)
_DATASET = TypeAdapter(S2DatasetMetadata)
_DATASET_DIFFS = TypeAdapter(S2DatasetDiffList)


class S2Client:
    """Synchronous Semantic Scholar API client.

    Provides methods for:
    - Author lookup, batch lookup, search and papers
    - Paper autocomplete, batch lookup, relevance/bulk/match search
    - Recommendations
    - Dataset releases and diffs

    The client holds no mutable state, so one instance can be shared
    across threads as long as the HTTP client is thread-safe.

    Example:
        >>> with S2Client() as client:
        ...     result = client.search_authors("Turing", 0, 10, "name,hIndex")
        ...     for author in result.data:
        ...         print(f"{author.name} (h-index {author.h_index})")

    Attributes:
        base_url: API root every operation path is appended to
    """

    def __init__(
        self,
        base_url: str = GRAPH_API_URL,
        http_client: HTTPClient | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize client.

        Args:
            base_url: API base URL (graph, recommendations or datasets root)
            http_client: Transport to send requests through. When omitted, a
                new httpx.Client is created and closed by ``close()``
            timeout_seconds: Request timeout for the default transport only
        """
        if not base_url:
            raise S2ConfigError("base_url must not be empty")

        self.base_url = base_url.rstrip("/")
        self._owned_client: httpx.Client | None = (
            default_http_client(timeout_seconds) if http_client is None else None
        )
        self._http: HTTPClient = http_client or self._owned_client

    @classmethod
    def from_settings(
        cls, settings: S2Settings, http_client: HTTPClient | None = None
    ) -> "S2Client":
        """Build a client from loaded settings."""
        return cls(
            base_url=settings.base_url,
            http_client=http_client,
            timeout_seconds=settings.timeout_seconds,
        )

    def __enter__(self) -> "S2Client":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owned_client is not None:
            self._owned_client.close()

    # -------------------------------------------------------------------------
    # Author Methods
    # -------------------------------------------------------------------------

    def get_author(self, author_id: str, fields: str = "") -> S2Author:
        """Get author by ID.

        Args:
            author_id: S2 author ID (e.g., "1741101")
            fields: Comma-separated fields to return (server default if empty)

        Returns:
            S2Author with requested fields
        """
        return self._request(
            "get_author",
            "GET",
            f"/author/{escape_path(author_id)}",
            _AUTHOR,
            params=build_params(optional=[("fields", fields)]),
        )

    def get_authors_batch(
        self, author_ids: Sequence[str], fields: str = ""
    ) -> list[S2Author | None]:
        """Get multiple authors in one request.

        Args:
            author_ids: S2 author IDs
            fields: Comma-separated fields to return

        Returns:
            Authors in the order of ``author_ids``; None where the ID is unknown

        Raises:
            S2APIError: On non-200 status, with the response body attached
        """
        return self._request(
            "get_authors_batch",
            "POST",
            "/author/batch",
            _AUTHOR_BATCH,
            params=build_params(optional=[("fields", fields)]),
            body=S2BatchRequest(ids=list(author_ids)),
            capture_error_body=True,
        )

    def search_authors(
        self,
        query: str,
        offset: int = 0,
        limit: int = 100,
        fields: str = "",
    ) -> S2AuthorSearchResult:
        """Search for authors by name.

        Args:
            query: Plain-text name query
            offset: Pagination offset
            limit: Maximum results to return
            fields: Comma-separated fields to return

        Returns:
            S2AuthorSearchResult with authors and pagination info

        Example:
            >>> result = client.search_authors("Turing", 0, 10, "name,hIndex")
            >>> result.total
            1
        """
        params = build_params(
            required=[("query", query), ("offset", offset), ("limit", limit)],
            optional=[("fields", fields)],
        )
        return self._request(
            "search_authors", "GET", "/author/search", _AUTHOR_SEARCH, params=params
        )

    def get_author_papers(
        self,
        author_id: str,
        offset: int = 0,
        limit: int = 100,
        fields: str = "",
    ) -> S2PaperSearchResult:
        """Get papers by author.

        Args:
            author_id: S2 author ID
            offset: Pagination offset
            limit: Maximum papers to return
            fields: Paper fields to return

        Returns:
            S2PaperSearchResult with papers and pagination
        """
        params = build_params(
            required=[("offset", offset), ("limit", limit)],
            optional=[("fields", fields)],
        )
        return self._request(
            "get_author_papers",
            "GET",
            f"/author/{escape_path(author_id)}/papers",
            _PAPER_SEARCH,
            params=params,
        )

    # -------------------------------------------------------------------------
    # Paper Methods
    # -------------------------------------------------------------------------

    def autocomplete_paper(self, query: str) -> list[S2Paper]:
        """Suggest papers for a partial title query.

        The endpoint returns minimal records (paper ID and title at most).
        """
        return self._request(
            "autocomplete_paper",
            "GET",
            "/paper/autocomplete",
            _PAPER_LIST,
            params=build_params(required=[("query", query)]),
        )

    def get_papers_batch(
        self, paper_ids: Sequence[str], fields: str = ""
    ) -> list[S2Paper | None]:
        """Get multiple papers in one request.

        Args:
            paper_ids: Paper IDs (S2 SHA, "CorpusId:...", "DOI:...", "ARXIV:...")
            fields: Comma-separated fields to return

        Returns:
            Papers in the order of ``paper_ids``; None where the ID is unknown

        Raises:
            S2APIError: On non-200 status, with the response body attached
        """
        return self._request(
            "get_papers_batch",
            "POST",
            "/paper/batch",
            _PAPER_BATCH,
            params=build_params(optional=[("fields", fields)]),
            body=S2BatchRequest(ids=list(paper_ids)),
            capture_error_body=True,
        )

    def search_papers(
        self,
        query: str,
        offset: int = 0,
        limit: int = 100,
        fields: str = "",
        filters: Mapping[str, str] | None = None,
    ) -> S2PaperSearchResult:
        """Relevance-ranked paper search.

        Args:
            query: Plain-text search query
            offset: Pagination offset
            limit: Maximum results to return
            fields: Comma-separated fields to return
            filters: Extra query parameters sent verbatim
                (e.g., {"year": "2018-", "minCitationCount": "50"})

        Returns:
            S2PaperSearchResult with papers and pagination info
        """
        params = build_params(
            required=[("query", query), ("offset", offset), ("limit", limit)],
            optional=[("fields", fields)],
            filters=filters,
        )
        return self._request(
            "search_papers", "GET", "/paper/search", _PAPER_SEARCH, params=params
        )

    def bulk_search_papers(
        self,
        query: str = "",
        token: str = "",
        fields: str = "",
        sort: str = "",
        publication_types: str = "",
        filters: Mapping[str, str] | None = None,
    ) -> S2PaperSearchResult:
        """Bulk paper search without relevance ranking.

        Pass the ``token`` of the previous page to continue; the last page
        has no token.

        Args:
            query: Boolean text query
            token: Continuation token from a previous page
            fields: Comma-separated fields to return
            sort: Sort spec (e.g., "citationCount:desc")
            publication_types: Comma-separated publication types
            filters: Extra query parameters sent verbatim

        Returns:
            S2PaperSearchResult whose ``token`` continues the listing
        """
        params = build_params(
            optional=[
                ("query", query),
                ("token", token),
                ("fields", fields),
                ("sort", sort),
                ("publicationTypes", publication_types),
            ],
            filters=filters,
        )
        return self._request(
            "bulk_search_papers", "GET", "/paper/search/bulk", _PAPER_SEARCH, params=params
        )

    def match_search_papers(
        self,
        query: str,
        fields: str = "",
        publication_types: str = "",
        filters: Mapping[str, str] | None = None,
    ) -> S2PaperSearchResult:
        """Find the single paper whose title best matches ``query``."""
        params = build_params(
            required=[("query", query)],
            optional=[("fields", fields), ("publicationTypes", publication_types)],
            filters=filters,
        )
        return self._request(
            "match_search_papers", "GET", "/paper/search/match", _PAPER_SEARCH, params=params
        )

    # -------------------------------------------------------------------------
    # Recommendations (base_url should point at the recommendations root)
    # -------------------------------------------------------------------------

    def get_recommendations(
        self,
        positive_paper_ids: Sequence[str] | S2RecommendationRequest,
        negative_paper_ids: Sequence[str] | None = None,
        limit: int = 100,
        fields: str = "",
    ) -> list[S2Paper]:
        """Get paper recommendations based on positive/negative examples.

        Args:
            positive_paper_ids: Papers to find similar papers for, or a
                prebuilt S2RecommendationRequest
            negative_paper_ids: Papers to steer away from
            limit: Maximum recommendations
            fields: Fields to return

        Returns:
            Recommended papers in server order
        """
        if isinstance(positive_paper_ids, S2RecommendationRequest):
            request = positive_paper_ids
        else:
            request = S2RecommendationRequest(
                positive=list(positive_paper_ids),
                negative=list(negative_paper_ids or []),
            )

        params = build_params(required=[("limit", limit)], optional=[("fields", fields)])
        result = self._request(
            "get_recommendations",
            "POST",
            "/papers",
            _RECOMMENDATIONS,
            params=params,
            body=request,
        )
        return list(result.recommended_papers)

    def get_recommendations_for_paper(
        self,
        paper_id: str,
        from_pool: str = "",
        limit: int = 100,
        fields: str = "",
    ) -> list[S2Paper]:
        """Get recommendations for a single paper.

        Args:
            paper_id: Seed paper ID
            from_pool: Candidate pool ("recent" or "all-cs"); server default if empty
            limit: Maximum recommendations
            fields: Fields to return
        """
        params = build_params(
            required=[("limit", limit)],
            optional=[("from", from_pool), ("fields", fields)],
        )
        result = self._request(
            "get_recommendations_for_paper",
            "GET",
            f"/papers/forpaper/{escape_path(paper_id)}",
            _RECOMMENDATIONS,
            params=params,
        )
        return list(result.recommended_papers)

    # -------------------------------------------------------------------------
    # Datasets (base_url should point at the datasets root)
    # -------------------------------------------------------------------------

    def get_releases(self) -> list[str]:
        """List available release IDs, oldest first."""
        return self._request("get_releases", "GET", "/release/", _RELEASE_IDS)

    def get_release(self, release_id: str) -> S2Release:
        """Get the datasets contained in one release ("latest" is accepted)."""
        return self._request(
            "get_release", "GET", f"/release/{escape_path(release_id)}", _RELEASE
        )

    def get_dataset(self, release_id: str, dataset_name: str) -> S2DatasetMetadata:
        """Get metadata and download links for one dataset within a release."""
        path = f"/release/{escape_path(release_id)}/dataset/{escape_path(dataset_name)}"
        return self._request("get_dataset", "GET", path, _DATASET)

    def get_dataset_diffs(
        self, start_release_id: str, end_release_id: str, dataset_name: str
    ) -> S2DatasetDiffList:
        """Get the incremental diffs that move a dataset between two releases.

        Args:
            start_release_id: Release the caller currently has
            end_release_id: Release to update to
            dataset_name: Dataset name (e.g., "papers", "s2orc")

        Returns:
            S2DatasetDiffList with diffs in the order they must be applied
        """
        path = (
            f"/diffs/{escape_path(start_release_id)}"
            f"/to/{escape_path(end_release_id)}"
            f"/{escape_path(dataset_name)}"
        )
        return self._request("get_dataset_diffs", "GET", path, _DATASET_DIFFS)

    # -------------------------------------------------------------------------
    # Internal Methods
    # -------------------------------------------------------------------------

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        adapter: TypeAdapter[T],
        params: QueryPairs | None = None,
        body: BaseModel | None = None,
        capture_error_body: bool = False,
    ) -> T:
        """Send one request and decode the response.

        Args:
            operation: Name used in logs and error messages
            method: HTTP method
            path: Endpoint path, already escaped
            adapter: TypeAdapter for the result shape
            params: Query pairs from build_params
            body: Request model serialized as the JSON body (POST only)
            capture_error_body: Attach the response body to status errors

        Returns:
            Decoded result

        Raises:
            httpx.HTTPError: Request could not be sent or the body not read
            S2APIError: Status other than 200 (S2NotFoundError, S2RateLimitError
                for 404 and 429)
            S2DecodeError: Body is not valid JSON for the result shape
        """
        json_body: dict[str, Any] | None = None
        if body is not None:
            # Empty optional lists (e.g. negative examples) stay off the wire
            json_body = body.model_dump(exclude_defaults=True)

        request = httpx.Request(
            method,
            f"{self.base_url}{path}",
            params=params or None,
            json=json_body,
        )

        logger.debug("API request", operation=operation, method=method, url=str(request.url))

        response = self._http.send(request, stream=True)
        try:
            if response.status_code != httpx.codes.OK:
                raise self._status_error(operation, response, capture_error_body)

            try:
                return adapter.validate_json(response.read())
            except ValidationError as exc:
                raise S2DecodeError(operation, exc) from exc
        finally:
            response.close()

    @staticmethod
    def _status_error(
        operation: str, response: httpx.Response, capture_body: bool
    ) -> S2APIError:
        status_code = response.status_code
        message = f"unexpected status code {status_code}"
        body = None
        if capture_body:
            response.read()
            body = response.text
            message = f"{message}, body: {body}"

        logger.warning("API request failed", operation=operation, status_code=status_code)

        if status_code == httpx.codes.NOT_FOUND:
            return S2NotFoundError(message, operation, body)
        if status_code == httpx.codes.TOO_MANY_REQUESTS:
            return S2RateLimitError(
                message,
                operation,
                body,
                retry_after=_parse_retry_after(response.headers.get("Retry-After")),
            )
        return S2APIError(status_code, message, operation, body)


def _parse_retry_after(value: str | None) -> float | None:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        # HTTP-date form; not interpreted
        return None
