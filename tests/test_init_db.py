"""Demo data seeding used by scripts/init_db.py"""

from scripts.init_db import seed_sample_data
from services import BenchmarkService, TemplateService
from test_fixtures import count_meal_items, gate


def test_seed_builds_a_complete_template(gate):
    seed_sample_data(gate, days=2)

    template = TemplateService(gate).get_template_full(1)

    assert template.code == "WL-1500"
    assert template.duration_days == 2
    assert [d.day_number for d in template.days] == [1, 2]
    breakfast = template.days[0].meals[0]
    assert breakfast.meal_type == "breakfast"
    assert [i.food_name for i in breakfast.items] == ["Oatmeal", "Greek yogurt"]


def test_seed_is_idempotent(gate):
    seed_sample_data(gate, days=1)
    seed_sample_data(gate, days=1)

    assert gate.query("SELECT COUNT(*) FROM diet_templates") == [(1,)]
    assert count_meal_items(gate, 1) == 2


def test_benchmark_inserts_after_seed(gate):
    """Seeded items leave the id sequence alone, so later inserts still succeed"""
    seed_sample_data(gate, days=1)
    items = [{"food_item_id": 6, "portion_grams_min": 30, "portion_grams_max": 50}]

    assert BenchmarkService(gate).bulk_insert(1, items) == 1
    assert count_meal_items(gate, 1) == 3
