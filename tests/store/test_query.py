"""Unit tests for exact-match query filtering."""

import pytest

from crud_mcp.store.query import filter_records, matches_query, strict_equals

RECORDS = [
    {"id": "1", "name": "Alice", "age": 25, "active": True},
    {"id": "2", "name": "Bob", "age": 30, "active": False},
    {"id": "3", "name": "Charlie", "age": 25},
]


class TestStrictEquals:
    """Test equality without type coercion."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "left,right",
        [
            (True, 1),
            (False, 0),
            (1, "1"),
            (None, 0),
            (None, False),
            ("", None),
            ([1, 2], [1, 2, 3]),
            ({"a": 1}, {"a": True}),
            ({"a": 1}, {"a": 1, "b": 2}),
        ],
    )
    def test_not_equal(self, left, right):
        """Values of different JSON types never compare equal."""
        assert strict_equals(left, right) is False
        assert strict_equals(right, left) is False

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "left,right",
        [
            (25, 25),
            (25, 25.0),
            ("x", "x"),
            (None, None),
            (True, True),
            ([1, "a"], [1, "a"]),
            ({"city": "Paris"}, {"city": "Paris"}),
        ],
    )
    def test_equal(self, left, right):
        """Same-typed equal values match; ints and floats are both numbers."""
        assert strict_equals(left, right) is True


class TestMatchesQuery:
    """Test single-record matching."""

    @pytest.mark.unit
    def test_all_fields_must_match(self):
        """Every query field must be equal."""
        record = RECORDS[0]

        assert matches_query(record, {"name": "Alice", "age": 25})
        assert not matches_query(record, {"name": "Alice", "age": 30})

    @pytest.mark.unit
    def test_missing_field_is_no_match(self):
        """A query field absent from the record is a non-match, not an error."""
        assert not matches_query(RECORDS[2], {"active": True})

    @pytest.mark.unit
    def test_explicit_none_requires_presence(self):
        """Querying for None does not match a missing key."""
        assert not matches_query({"id": "1"}, {"deleted_at": None})
        assert matches_query({"id": "1", "deleted_at": None}, {"deleted_at": None})

    @pytest.mark.unit
    @pytest.mark.parametrize("query", [None, {}])
    def test_empty_query_matches(self, query):
        """An empty or absent query matches everything."""
        assert matches_query(RECORDS[1], query)


class TestFilterRecords:
    """Test filtering sequences of records."""

    @pytest.mark.unit
    def test_preserves_order(self):
        """Matching records keep their input order."""
        result = filter_records(RECORDS, {"age": 25})

        assert [r["id"] for r in result] == ["1", "3"]

    @pytest.mark.unit
    def test_boolean_not_coerced(self):
        """True does not match 1 and False does not match 0."""
        assert filter_records(RECORDS, {"active": 1}) == []
        assert [r["id"] for r in filter_records(RECORDS, {"active": False})] == ["2"]

    @pytest.mark.unit
    def test_identity_for_empty_query(self):
        """An empty query returns every record unchanged."""
        assert filter_records(RECORDS, {}) == RECORDS
        assert filter_records(iter(RECORDS), None) == RECORDS

    @pytest.mark.unit
    def test_no_partial_matching(self):
        """Substrings are not matches."""
        assert filter_records(RECORDS, {"name": "Ali"}) == []
