"""
Tests for record filtering.
"""

from hello_plugin.core.dataset import sample_products, sample_users
from hello_plugin.core.filtering import (
    Comparator,
    FilterSpec,
    all_of,
    contains,
    equals,
    filter_records,
)


def test_equality_filter_keeps_seed_order():
    users = sample_users()
    active = filter_records(users, equals("active", True))

    assert [u["id"] for u in active] == ["1", "3"]
    assert len(active) <= len(users)


def test_equality_filter_inactive():
    inactive = filter_records(sample_users(), equals("active", False))
    assert [u["name"] for u in inactive] == ["Jane Smith"]


def test_equality_filter_missing_field_never_matches():
    records = [{"id": "1"}, {"id": "2", "active": None}]
    assert filter_records(records, equals("active", None)) == [{"id": "2", "active": None}]


def test_membership_filter_selects_category():
    electronics = filter_records(sample_products(), contains("categories", "electronics"))
    assert [p["id"] for p in electronics] == ["1"]


def test_membership_filter_empty_value_is_identity():
    products = sample_products()
    assert filter_records(products, contains("categories", "")) == products
    assert filter_records(products, contains("categories", None)) == products


def test_membership_filter_ignores_non_array_fields():
    records = [{"categories": "electronics"}, {"categories": ["electronics"]}]
    assert filter_records(records, contains("categories", "electronics")) == [records[1]]


def test_all_of_is_conjunction():
    records = [
        {"id": "1", "active": True, "tags": ["a"]},
        {"id": "2", "active": True, "tags": ["b"]},
        {"id": "3", "active": False, "tags": ["a"]},
    ]
    predicate = all_of(equals("active", True), contains("tags", "a"))
    assert [r["id"] for r in filter_records(records, predicate)] == ["1"]


def test_empty_filter_spec_matches_everything():
    users = sample_users()
    assert FilterSpec().apply(users) == users


def test_filter_spec_combines_conditions():
    spec = (
        FilterSpec()
        .where("categories", Comparator.CONTAINS, "kitchen")
        .where("stock", Comparator.EQ, 50)
    )
    assert [p["name"] for p in spec.apply(sample_products())] == ["Coffee Mug"]

    no_match = spec.where("stock", Comparator.EQ, 1)
    assert no_match.apply(sample_products()) == []
    # where() returns a new spec
    assert len(spec.conditions) == 2
