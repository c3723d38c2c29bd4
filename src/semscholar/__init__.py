"""Semantic Scholar API Client.

Version: 1.0.0

A synchronous Python client for the Semantic Scholar Graph, Recommendations
and Datasets APIs with:
- Pluggable HTTP transport (any httpx-compatible client)
- Pydantic models for type safety
- Distinct transport, status and decode errors

Usage:
    >>> from semscholar import S2Client
    >>> with S2Client() as client:
    ...     result = client.search_papers("causal forest", limit=10)
    ...     for paper in result.data:
    ...         print(f"{paper.title} ({paper.year}) - {paper.citation_count} citations")
"""

from semscholar.client import S2Client
from semscholar.config import (
    DATASETS_API_URL,
    GRAPH_API_URL,
    RECOMMENDATIONS_API_URL,
    S2Settings,
    get_settings,
)
from semscholar.errors import (
    S2APIError,
    S2ConfigError,
    S2DecodeError,
    S2Error,
    S2NotFoundError,
    S2RateLimitError,
)
from semscholar.logging_config import configure_logging, get_logger
from semscholar.models import (
    S2Author,
    S2AuthorSearchResult,
    S2BatchRequest,
    S2DatasetDiff,
    S2DatasetDiffList,
    S2DatasetMetadata,
    S2DatasetSummary,
    S2Paper,
    S2PaperSearchResult,
    S2RecommendationRequest,
    S2RecommendationResult,
    S2Release,
)
from semscholar.query import build_params, escape_path
from semscholar.transport import HTTPClient, default_http_client

__version__ = "1.0.0"

__all__ = [
    # Client
    "S2Client",
    "HTTPClient",
    "default_http_client",
    # Models
    "S2Author",
    "S2Paper",
    "S2AuthorSearchResult",
    "S2PaperSearchResult",
    "S2BatchRequest",
    "S2RecommendationRequest",
    "S2RecommendationResult",
    "S2Release",
    "S2DatasetSummary",
    "S2DatasetMetadata",
    "S2DatasetDiff",
    "S2DatasetDiffList",
    # Query helpers
    "build_params",
    "escape_path",
    # Config & logging
    "S2Settings",
    "get_settings",
    "GRAPH_API_URL",
    "RECOMMENDATIONS_API_URL",
    "DATASETS_API_URL",
    "configure_logging",
    "get_logger",
    # Errors
    "S2Error",
    "S2APIError",
    "S2NotFoundError",
    "S2RateLimitError",
    "S2DecodeError",
    "S2ConfigError",
]
