import pytest

from f1api.errors import InvalidParameterError, NotFoundError
from f1api.services.query_service import get_record, list_records

GRID = {
    "teams": [],
    "drivers": [
        {"id": 1, "name": "Max Verstappen", "team": "Red Bull Racing"},
        {"id": 2, "name": "Charles Leclerc", "team": "Ferrari"},
        {"id": 3, "name": "Sergio Perez", "team": "Red Bull Racing"},
        {"id": 4, "name": "Carlos Sainz", "team": "Ferrari"},
        {"id": 5, "name": "Lando Norris", "team": "McLaren"},
    ],
}


@pytest.fixture
def grid(make_store):
    return make_store(GRID, check_references=False)


def ids(records):
    return [r.id for r in records]


class TestListing:
    def test_no_filters_returns_everything_in_order(self, store):
        records, total = list_records(store, "teams")
        assert total == 10
        assert ids(records) == list(range(1, 11))

    def test_unknown_collection(self, store):
        with pytest.raises(NotFoundError):
            list_records(store, "seasons")

    def test_repeated_calls_identical(self, grid):
        first = list_records(grid, "drivers", {"team": "Ferrari"}, "name")
        second = list_records(grid, "drivers", {"team": "Ferrari"}, "name")
        assert first == second


class TestFilters:
    def test_exact_match(self, grid):
        records, total = list_records(grid, "drivers", {"team": "Red Bull Racing"})
        assert total == 2
        assert ids(records) == [1, 3]
        assert all(r.team == "Red Bull Racing" for r in records)

    def test_match_is_exact(self, grid):
        records, total = list_records(grid, "drivers", {"team": "red bull racing"})
        assert records == []
        assert total == 0

    def test_filters_combine_with_and(self, grid):
        records, _ = list_records(grid, "drivers", {"team": "Ferrari", "name": "Carlos Sainz"})
        assert ids(records) == [4]

        records, _ = list_records(grid, "drivers", {"team": "Ferrari", "name": "Lando Norris"})
        assert records == []

    def test_integer_field_coerced_from_string(self, grid):
        records, _ = list_records(grid, "drivers", {"id": "3"})
        assert ids(records) == [3]

    @pytest.mark.parametrize("value", ["three", "1_0", " 3 ", "٣", "3.0", ""])
    def test_integer_field_rejects_text(self, grid, value):
        with pytest.raises(InvalidParameterError) as exc_info:
            list_records(grid, "drivers", {"id": value})
        assert exc_info.value.parameter == "id"

    def test_negative_integer_filter_matches_nothing(self, grid):
        assert list_records(grid, "drivers", {"id": "-1"}) == ([], 0)

    def test_repeated_field_requires_every_value(self, grid):
        records, total = list_records(grid, "drivers", [("team", "Ferrari"), ("team", "McLaren")])
        assert records == []
        assert total == 0

        records, _ = list_records(grid, "drivers", [("team", "Ferrari"), ("name", "Carlos Sainz")])
        assert ids(records) == [4]

    def test_unknown_field(self, grid):
        with pytest.raises(InvalidParameterError) as exc_info:
            list_records(grid, "drivers", {"nationality": "British"})
        assert exc_info.value.parameter == "nationality"
        assert exc_info.value.http_status == 400
        assert "nationality" in exc_info.value.message


class TestSort:
    def test_ascending(self, grid):
        records, _ = list_records(grid, "drivers", sort_key="name")
        assert [r.name for r in records] == [
            "Carlos Sainz", "Charles Leclerc", "Lando Norris", "Max Verstappen", "Sergio Perez",
        ]

    def test_descending(self, grid):
        records, _ = list_records(grid, "drivers", sort_key="-id")
        assert ids(records) == [5, 4, 3, 2, 1]

    def test_ties_keep_collection_order(self, grid):
        records, _ = list_records(grid, "drivers", sort_key="team")
        assert ids(records) == [2, 4, 5, 1, 3]

        records, _ = list_records(grid, "drivers", sort_key="-team")
        assert ids(records) == [1, 3, 5, 2, 4]

    def test_unknown_sort_field(self, grid):
        with pytest.raises(InvalidParameterError) as exc_info:
            list_records(grid, "drivers", sort_key="points")
        assert exc_info.value.parameter == "sort"


class TestPagination:
    def test_limit_and_offset(self, store):
        records, total = list_records(store, "teams", limit=3, offset=2)
        assert ids(records) == [3, 4, 5]
        assert total == 10

    @pytest.mark.parametrize("offset", [None, 0, 4, 50])
    def test_limit_zero_is_empty(self, store, offset):
        records, total = list_records(store, "teams", limit=0, offset=offset)
        assert records == []
        assert total == 10

    @pytest.mark.parametrize("offset", [10, 11, 1000])
    def test_offset_past_end_is_empty(self, store, offset):
        records, total = list_records(store, "teams", offset=offset)
        assert records == []
        assert total == 10

    def test_total_counts_filtered_records(self, grid):
        records, total = list_records(grid, "drivers", {"team": "Ferrari"}, limit=1)
        assert ids(records) == [2]
        assert total == 2

    def test_pagination_applies_after_sort(self, grid):
        records, _ = list_records(grid, "drivers", sort_key="-id", limit=2, offset=1)
        assert ids(records) == [4, 3]

    @pytest.mark.parametrize("param", ["limit", "offset"])
    def test_negative_values_rejected(self, store, param):
        with pytest.raises(InvalidParameterError) as exc_info:
            list_records(store, "teams", **{param: -1})
        assert exc_info.value.parameter == param


def test_get_record(store):
    assert get_record(store, "teams", 4).name == "Ferrari"
    with pytest.raises(NotFoundError, match="team not found"):
        get_record(store, "teams", 11)
