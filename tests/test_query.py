"""Tests for the shared query/path helpers."""

from semscholar.query import build_params, escape_path


class TestBuildParams:
    def test_required_always_present(self):
        """Required pairs are kept even when zero or empty."""
        params = build_params(required=[("query", ""), ("offset", 0), ("limit", 10)])
        assert params == [("query", ""), ("offset", "0"), ("limit", "10")]

    def test_optional_omitted_when_empty(self):
        params = build_params(
            optional=[("fields", ""), ("token", None), ("limit", 0), ("sort", "year:asc")]
        )
        assert params == [("sort", "year:asc")]

    def test_filters_appended_in_order(self):
        params = build_params(
            required=[("query", "x")],
            filters={"year": "2020-", "venue": "Nature", "openAccessPdf": ""},
        )
        assert params == [
            ("query", "x"),
            ("year", "2020-"),
            ("venue", "Nature"),
            ("openAccessPdf", ""),
        ]

    def test_filter_repeating_reserved_key_is_appended(self):
        params = build_params(optional=[("fields", "title")], filters={"fields": "year"})
        assert params == [("fields", "title"), ("fields", "year")]

    def test_no_input(self):
        assert build_params() == []
        assert build_params(filters=None) == []

    def test_bool_rendering(self):
        assert build_params(required=[("flag", True)]) == [("flag", "true")]


class TestEscapePath:
    def test_plain_segment_unchanged(self):
        assert escape_path("2023-01-03") == "2023-01-03"

    def test_reserved_characters_escaped(self):
        assert escape_path("s2orc v2") == "s2orc%20v2"
        assert escape_path("a/b") == "a%2Fb"
        assert escape_path("q?x#y") == "q%3Fx%23y"
