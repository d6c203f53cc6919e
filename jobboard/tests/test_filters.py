"""Tests for job role filter parsing and description."""

from datetime import date

import pytest

from jobboard.domain.filters import JobFilters, describe_filters, parse_job_filters
from jobboard.domain.jobs import Band, Capability, JobStatus, SortBy, SortOrder


class TestParseJobFilters:
    """Tests for parse_job_filters."""

    def test_parses_all_valid_parameters(self):
        result = parse_job_filters(
            {
                "capability": "DATA",
                "band": "E3",
                "status": "open",
                "location": "London",
                "search": "engineer",
                "closingDateFrom": "2024-10-01",
                "closingDateTo": "2024-12-31",
                "minPositions": "2",
                "maxPositions": "10",
                "page": "2",
                "limit": "5",
                "sortBy": "jobRoleName",
                "sortOrder": "desc",
            }
        )

        assert result == JobFilters(
            capability=Capability.DATA,
            band=Band.E3,
            status=JobStatus.OPEN,
            location="London",
            search="engineer",
            closing_date_from=date(2024, 10, 1),
            closing_date_to=date(2024, 12, 31),
            min_positions=2,
            max_positions=10,
            page=2,
            limit=5,
            sort_by=SortBy.ROLE_NAME,
            sort_order=SortOrder.DESC,
        )

    def test_case_insensitive_scenario(self):
        result = parse_job_filters(
            {
                "capability": "data",
                "band": "e3",
                "page": "2",
                "limit": "5",
                "sortBy": "jobRoleName",
                "sortOrder": "desc",
            }
        )

        assert result.capability is Capability.DATA
        assert result.band is Band.E3
        assert result.page == 2
        assert result.limit == 5
        assert result.sort_by is SortBy.ROLE_NAME
        assert result.sort_order is SortOrder.DESC

    def test_defaults_for_empty_input(self):
        result = parse_job_filters({})

        assert result.page == 1
        assert result.limit == 10
        assert result.sort_order is SortOrder.ASC
        assert result.sort_by is None
        assert not result.has_filters

    def test_invalid_enum_values_are_dropped(self):
        result = parse_job_filters(
            {
                "capability": "INVALID_CAPABILITY",
                "band": "E9",
                "status": "archived",
                "sortBy": "salary",
                "sortOrder": "sideways",
            }
        )

        assert result.capability is None
        assert result.band is None
        assert result.status is None
        assert result.sort_by is None
        assert result.sort_order is SortOrder.ASC

    def test_mixed_case_sort_values(self):
        result = parse_job_filters({"sortBy": "CLOSINGDATE", "sortOrder": "DESC"})

        assert result.sort_by is SortBy.CLOSING_DATE
        assert result.sort_order is SortOrder.DESC

    def test_sort_by_with_underscore_is_not_recognised(self):
        assert parse_job_filters({"sortBy": "JOBROLE_NAME"}).sort_by is None

    def test_string_fields_are_trimmed(self):
        result = parse_job_filters({"location": "  London  ", "search": "\tengineer\n"})

        assert result.location == "London"
        assert result.search == "engineer"

    def test_whitespace_only_string_is_present_but_empty(self):
        result = parse_job_filters({"location": "   "})

        assert result.location == ""
        assert result.has_filters

    def test_empty_string_is_absent(self):
        assert parse_job_filters({"location": ""}).location is None

    @pytest.mark.parametrize("limit", ["200", "101", "0", "-5", "abc", ""])
    def test_limit_falls_back_to_default(self, limit):
        assert parse_job_filters({"limit": limit}).limit == 10

    @pytest.mark.parametrize("limit,expected", [("1", 1), ("100", 100), ("25", 25)])
    def test_limit_in_range_is_kept(self, limit, expected):
        assert parse_job_filters({"limit": limit}).limit == expected

    @pytest.mark.parametrize("page", ["0", "-1", "abc", "", "   "])
    def test_page_falls_back_to_first(self, page):
        assert parse_job_filters({"page": page}).page == 1

    def test_integer_prefix_is_used(self):
        assert parse_job_filters({"page": "3rd"}).page == 3

    @pytest.mark.parametrize("value", ["５", "٣", "２0"])
    def test_non_ascii_digits_are_not_numbers(self, value):
        result = parse_job_filters({"page": value, "limit": value, "minPositions": value})

        assert result.page == 1
        assert result.limit == 10
        assert result.min_positions is None

    def test_invalid_dates_are_dropped(self):
        result = parse_job_filters(
            {"closingDateFrom": "not-a-date", "closingDateTo": "2024-13-45"}
        )

        assert result.closing_date_from is None
        assert result.closing_date_to is None

    def test_datetime_strings_are_truncated_to_dates(self):
        result = parse_job_filters({"closingDateFrom": "2024-10-01T10:30:00Z"})

        assert result.closing_date_from == date(2024, 10, 1)

    def test_negative_or_non_numeric_positions_are_dropped(self):
        result = parse_job_filters({"minPositions": "-1", "maxPositions": "many"})

        assert result.min_positions is None
        assert result.max_positions is None

    def test_zero_positions_are_kept(self):
        assert parse_job_filters({"minPositions": "0"}).min_positions == 0

    def test_non_string_values_are_ignored(self):
        result = parse_job_filters({"capability": ["Data", "Workday"], "page": 3})

        assert result.capability is None
        assert result.page == 1

    def test_unrecognised_keys_are_ignored(self):
        assert parse_job_filters({"salary": "100000"}) == JobFilters()

    @pytest.mark.parametrize(
        "query",
        [
            {},
            {"page": "-10", "limit": "1000"},
            {"page": "99999", "limit": "100"},
            {"page": "x", "limit": "y"},
            {"page": "1.5", "limit": "0.5"},
        ],
    )
    def test_page_and_limit_always_valid(self, query):
        result = parse_job_filters(query)

        assert result.page >= 1
        assert 1 <= result.limit <= 100

    def test_parsing_is_deterministic(self):
        query = {"capability": "workday", "closingDateTo": "2025-01-31", "limit": "7"}

        assert parse_job_filters(query) == parse_job_filters(dict(query))


class TestDescribeFilters:
    """Tests for describe_filters."""

    def test_no_filters_yields_empty_description(self):
        assert describe_filters(parse_job_filters({"page": "2", "sortBy": "band"})) == ""

    def test_describes_active_filters(self):
        description = describe_filters(
            parse_job_filters(
                {"capability": "data", "band": "E1", "location": "Leeds", "search": "sql"}
            )
        )

        assert description == (
            'Active filters: capability: Data, band: E1, location: "Leeds", search: "sql"'
        )

    def test_describes_ranges(self):
        description = describe_filters(
            parse_job_filters({"closingDateFrom": "2025-01-01", "maxPositions": "3"})
        )

        assert "closing from: 2025-01-01" in description
        assert "max positions: 3" in description

    @pytest.mark.parametrize(
        "query,expect_description",
        [
            ({}, False),
            ({"capability": "nope"}, False),
            ({"limit": "5", "sortOrder": "desc"}, False),
            ({"status": "DRAFT"}, True),
            ({"search": "  "}, True),
            ({"minPositions": "0"}, True),
            ({"closingDateTo": "2025-02-28"}, True),
        ],
    )
    def test_description_present_iff_filter_recognised(self, query, expect_description):
        assert bool(describe_filters(parse_job_filters(query))) is expect_description


class TestJobFiltersEcho:
    def test_to_dict_uses_query_names_and_omits_absent_fields(self):
        filters = parse_job_filters(
            {"capability": "data", "closingDateFrom": "2025-01-01", "sortBy": "band"}
        )

        assert filters.to_dict() == {
            "capability": "Data",
            "closingDateFrom": "2025-01-01",
            "page": 1,
            "limit": 10,
            "sortBy": "band",
            "sortOrder": "asc",
        }
