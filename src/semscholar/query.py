"""Query-string and path helpers shared by every client operation.

Parameters come in three groups, assembled in this order:
- required: always sent (query text, offset, limit)
- optional: sent only when non-empty (fields, sort, token, ...)
- filters: caller-supplied mapping appended verbatim

Query values are percent-encoded by httpx when the request is built.
"""

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

QueryPairs = list[tuple[str, str]]


def escape_path(segment: str) -> str:
    """Percent-escape a single path segment, slashes included.

    Example:
        >>> escape_path("2023-01-03")
        '2023-01-03'
        >>> escape_path("s2orc v2")
        's2orc%20v2'
    """
    return quote(str(segment), safe="")


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == 0


def build_params(
    required: Iterable[tuple[str, Any]] = (),
    optional: Iterable[tuple[str, Any]] = (),
    filters: Mapping[str, str] | None = None,
) -> QueryPairs:
    """Assemble ordered query pairs.

    Args:
        required: Pairs always included, even when the value is 0 or ""
        optional: Pairs dropped when the value is None, "" or 0
        filters: Extra key/value pairs appended in insertion order; keys that
            repeat a reserved name are appended, not replaced

    Returns:
        List of (key, value) string pairs, suitable for ``httpx.Request(params=...)``

    Example:
        >>> build_params(
        ...     required=[("query", "Turing"), ("offset", 0)],
        ...     optional=[("fields", ""), ("sort", "citationCount:desc")],
        ...     filters={"year": "2020-"},
        ... )
        [('query', 'Turing'), ('offset', '0'), ('sort', 'citationCount:desc'), ('year', '2020-')]
    """
    params: QueryPairs = [(key, _render(value)) for key, value in required]
    params.extend((key, _render(value)) for key, value in optional if not _is_empty(value))
    if filters:
        params.extend((str(key), str(value)) for key, value in filters.items())
    return params
