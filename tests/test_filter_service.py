import pytest

from app.domain.models import RequestStatus
from app.services import filter_service

from conftest import make_request


@pytest.fixture
def collection():
    return [
        make_request("1", "Asha", "pending"),
        make_request("2", "Bala", "approved"),
        make_request("3", "asha K", "rejected"),
        make_request("4", "Deepak", "pending"),
    ]


def ids(requests):
    return [r.id for r in requests]


def test_search_is_case_insensitive_substring_on_name(collection):
    flt = filter_service.build_filter("asha", "all")
    assert ids(filter_service.filter_requests(collection, flt)) == ["1", "3"]


def test_search_upper_case_term(collection):
    flt = filter_service.build_filter("ASHA K", "all")
    assert ids(filter_service.filter_requests(collection, flt)) == ["3"]


def test_empty_term_and_all_returns_everything_in_order(collection):
    flt = filter_service.build_filter("", "all")
    assert ids(filter_service.filter_requests(collection, flt)) == ["1", "2", "3", "4"]


@pytest.mark.parametrize(
    "status,expected",
    [("pending", ["1", "4"]), ("approved", ["2"]), ("rejected", ["3"])],
)
def test_status_filter(collection, status, expected):
    flt = filter_service.build_filter("", status)
    assert ids(filter_service.filter_requests(collection, flt)) == expected


def test_search_and_status_combine(collection):
    flt = filter_service.build_filter("a", "pending")
    assert ids(filter_service.filter_requests(collection, flt)) == ["1", "4"]


def test_unknown_status_token_behaves_as_all(collection):
    flt = filter_service.build_filter("", "archived")
    assert flt.status == "archived"
    assert ids(filter_service.filter_requests(collection, flt)) == ["1", "2", "3", "4"]


def test_build_filter_normalizes_none():
    flt = filter_service.build_filter(None, None)
    assert flt.search_term == ""
    assert flt.status == "all"


def test_matches_against_every_combination(collection):
    terms = ["", "a", "ASHA", "zzz", "k"]
    statuses = ["all", "pending", "approved", "rejected"]
    for term in terms:
        for status in statuses:
            flt = filter_service.build_filter(term, status)
            result = ids(filter_service.filter_requests(collection, flt))
            expected = [
                r.id
                for r in collection
                if term.lower() in r.name.lower() and (status == "all" or r.status == status)
            ]
            assert result == expected, (term, status)


def test_partition_by_status_is_stable(collection):
    parts = filter_service.partition_by_status(collection)
    assert ids(parts[RequestStatus.PENDING]) == ["1", "4"]
    assert ids(parts[RequestStatus.APPROVED]) == ["2"]
    assert ids(parts[RequestStatus.REJECTED]) == ["3"]


def test_partition_of_empty_sequence_has_all_keys():
    parts = filter_service.partition_by_status([])
    assert set(parts) == set(RequestStatus)
    assert all(items == [] for items in parts.values())


def test_count_by_status(collection):
    counts = filter_service.count_by_status(collection)
    assert counts == {
        RequestStatus.PENDING: 2,
        RequestStatus.APPROVED: 1,
        RequestStatus.REJECTED: 1,
    }
