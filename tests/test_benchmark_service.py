"""
Tests for BenchmarkService: payload parsing, per-item validation and the
row-by-row insert loop.
"""

import json
from unittest.mock import Mock

import pytest

from adapters.sql_adapter import QueryGate
from app.exceptions import ServiceValidationError
from services.benchmark_service import BenchmarkService
from test_fixtures import (
    FaultyGate,
    add_category,
    add_day,
    add_food,
    add_meal,
    add_template,
    count_meal_items,
    gate,
)


def _body(payload) -> bytes:
    return json.dumps(payload).encode()


def _seed_meal(gate, meal_id=1):
    add_category(gate, 1)
    for food_id, name in ((1, "Oatmeal"), (2, "Greek yogurt"), (3, "Banana")):
        add_food(gate, food_id, name)
    add_template(gate, 1)
    add_day(gate, 1, 1, day_number=1)
    add_meal(gate, meal_id, 1)


def _stored_items(gate, meal_id=1):
    return gate.query(
        "SELECT food_item_id, portion_grams_min, portion_grams_max, sort_order "
        "FROM diet_meal_items WHERE meal_id = :mid ORDER BY id",
        {"mid": meal_id},
    )


# =============================================================================
# REQUEST PARSING
# =============================================================================


@pytest.mark.parametrize(
    "body, message",
    [
        (b"", "Missing request body"),
        (None, "Missing request body"),
        (b"{not json", "Invalid JSON"),
        (b"\xff\xfe\x00", "Invalid JSON"),
        (b"[1, 2]", "Invalid request format"),
        (b'{"items": []}', "Invalid request format"),
        (b'{"meal_id": "1", "items": []}', "Invalid request format"),
        (b'{"meal_id": true, "items": []}', "Invalid request format"),
        (b'{"meal_id": 1, "items": {}}', "Invalid request format"),
        (b'{"meal_id": 1}', "Invalid request format"),
    ],
)
def test_parse_request_rejects(body, message):
    with pytest.raises(ServiceValidationError) as exc_info:
        BenchmarkService.parse_request(body)

    assert str(exc_info.value) == message


def test_parse_request_accepts_valid_payload():
    request = BenchmarkService.parse_request(
        _body({"meal_id": 4.0, "items": [{"food_item_id": 1}, "junk"]})
    )

    assert request.meal_id == 4
    assert request.items == [{"food_item_id": 1}, "junk"]


def test_invalid_body_never_touches_the_gate():
    store = Mock(spec=QueryGate)
    service = BenchmarkService(store)

    with pytest.raises(ServiceValidationError):
        service.bulk_insert_body(b"definitely not json")
    with pytest.raises(ServiceValidationError):
        service.bulk_insert_body(_body({"meal_id": "x", "items": []}))

    assert store.query.call_count == 0
    assert store.execute.call_count == 0


# =============================================================================
# ITEM VALIDATION
# =============================================================================


def test_validate_item_defaults_sort_order_to_position():
    item = BenchmarkService.validate_item(
        {"food_item_id": 1, "portion_grams_min": 10, "portion_grams_max": 20}, 3
    )

    assert item.sort_order == 3


@pytest.mark.parametrize(
    "raw",
    [
        {"food_item_id": 1, "portion_grams_min": 10},
        {"food_item_id": "1", "portion_grams_min": 10, "portion_grams_max": 20},
        {"food_item_id": 1, "portion_grams_min": None, "portion_grams_max": 20},
        {"food_item_id": True, "portion_grams_min": 10, "portion_grams_max": 20},
        [1, 10, 20],
        "item",
        None,
    ],
)
def test_validate_item_rejects_bad_shapes(raw):
    assert BenchmarkService.validate_item(raw, 0) is None


def test_validate_item_non_numeric_sort_order_falls_back():
    item = BenchmarkService.validate_item(
        {"food_item_id": 1, "portion_grams_min": 10, "portion_grams_max": 20, "sort_order": "first"},
        5,
    )

    assert item.sort_order == 5


# =============================================================================
# INSERT LOOP
# =============================================================================


def test_malformed_row_is_skipped_not_fatal(gate):
    _seed_meal(gate)
    items = [
        {"food_item_id": 1, "portion_grams_min": 40, "portion_grams_max": 60},
        {"food_item_id": 2, "portion_grams_min": 150},
    ]

    inserted = BenchmarkService(gate).bulk_insert(1, items)

    assert inserted == 1
    assert _stored_items(gate) == [(1, 40, 60, 0)]


def test_sort_order_explicit_and_default(gate):
    _seed_meal(gate)
    items = [
        {"food_item_id": 1, "portion_grams_min": 40, "portion_grams_max": 60, "sort_order": 9},
        {"food_item_id": 2, "portion_grams_min": 150, "portion_grams_max": 200},
        {"food_item_id": 3, "portion_grams_min": 100.9, "portion_grams_max": 120.2},
    ]

    inserted = BenchmarkService(gate).bulk_insert(1, items)

    assert inserted == 3
    assert _stored_items(gate) == [(1, 40, 60, 9), (2, 150, 200, 1), (3, 100, 120, 2)]


def test_failing_row_does_not_stop_the_batch(gate):
    """Rows before and after a rejected row stay inserted; the batch is not atomic"""
    _seed_meal(gate)
    faulty = FaultyGate(gate, "INSERT INTO diet_meal_items", fid=2)
    items = [
        {"food_item_id": 1, "portion_grams_min": 40, "portion_grams_max": 60},
        {"food_item_id": 2, "portion_grams_min": 150, "portion_grams_max": 200},
        {"food_item_id": 3, "portion_grams_min": 100, "portion_grams_max": 120},
    ]

    inserted = BenchmarkService(faulty).bulk_insert(1, items)

    assert inserted == 2
    assert faulty.failures == 1
    assert [row[0] for row in _stored_items(gate)] == [1, 3]


def test_no_valid_rows_returns_zero(gate):
    _seed_meal(gate)

    inserted = BenchmarkService(gate).bulk_insert(1, ["a", {"food_item_id": 1}, None])

    assert inserted == 0
    assert count_meal_items(gate, 1) == 0


def test_empty_batch_returns_zero(gate):
    assert BenchmarkService(gate).bulk_insert(1, []) == 0


def test_disconnected_gate_counts_nothing(gate):
    gate.close()
    items = [{"food_item_id": 1, "portion_grams_min": 40, "portion_grams_max": 60}]

    assert BenchmarkService(gate).bulk_insert(1, items) == 0


def test_bulk_insert_body_end_to_end(gate):
    _seed_meal(gate)
    body = _body(
        {
            "meal_id": 1,
            "items": [
                {"food_item_id": 1, "portion_grams_min": 40, "portion_grams_max": 60},
                {"food_item_id": 2, "portion_grams_min": 150, "portion_grams_max": 200},
            ],
        }
    )

    assert BenchmarkService(gate).bulk_insert_body(body) == 2
    assert count_meal_items(gate, 1) == 2


def test_oversized_id_fails_only_its_row(gate):
    """A value the driver cannot bind is counted as a failed row"""
    _seed_meal(gate)
    items = [
        {"food_item_id": 1, "portion_grams_min": 40, "portion_grams_max": 60},
        {"food_item_id": 1e20, "portion_grams_min": 150, "portion_grams_max": 200},
        {"food_item_id": 3, "portion_grams_min": 100, "portion_grams_max": 120},
    ]

    inserted = BenchmarkService(gate).bulk_insert(1, items)

    assert inserted == 2
    assert [row[0] for row in _stored_items(gate)] == [1, 3]
