#!/usr/bin/env python3
"""
Initialize the Diet API database.
Creates the tables and, with --sample, loads a small demo data set.
"""

import argparse
import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters.sql_adapter import QueryGate  # noqa: E402
from app.config import settings  # noqa: E402
from app.exceptions import DatabaseError  # noqa: E402

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")

SAMPLE_CATEGORIES = [
    (1, "Vegetables", "carrot", "#4CAF50", 1),
    (2, "Proteins", "drumstick", "#F44336", 2),
    (3, "Grains", "wheat", "#FFC107", 3),
    (4, "Dairy", "cheese", "#2196F3", 4),
]

# (id, name, category_id, kcal, protein, carbs, fat) per 100g
SAMPLE_FOODS = [
    (1, "Broccoli", 1, 34, 2.8, 6.6, 0.4),
    (2, "Spinach", 1, 23, 2.9, 3.6, 0.4),
    (3, "Chicken breast", 2, 165, 31.0, 0.0, 3.6),
    (4, "Eggs", 2, 155, 13.0, 1.1, 11.0),
    (5, "Brown rice", 3, 111, 2.6, 23.0, 0.9),
    (6, "Oatmeal", 3, 68, 2.4, 12.0, 1.4),
    (7, "Greek yogurt", 4, 59, 10.0, 3.6, 0.4),
]

# meal_type, time_suggestion, [(food_item_id, min_g, max_g)]
SAMPLE_DAY = [
    ("breakfast", "08:00", [(6, 40, 60), (7, 150, 200)]),
    ("lunch", "13:00", [(3, 120, 150), (5, 100, 150), (1, 100, 150)]),
    ("dinner", "19:00", [(4, 100, 120), (2, 80, 100)]),
]


def init_schema(gate: QueryGate) -> None:
    logger.info("=" * 60)
    logger.info("Creating tables...")
    logger.info("=" * 60)
    gate.create_schema()


def seed_sample_data(gate: QueryGate, days: int = 3) -> None:
    """Load demo categories, foods and one template; skipped if the template exists"""
    if gate.query("SELECT id FROM diet_templates WHERE code = :code", {"code": "WL-1500"}):
        logger.info("Sample template already present, skipping seed")
        return

    for row in SAMPLE_CATEGORIES:
        gate.execute(
            "INSERT INTO food_categories (id, name, icon, color, sort_order) "
            "VALUES (:id, :name, :icon, :color, :sort)",
            dict(zip(("id", "name", "icon", "color", "sort"), row)),
        )
    for row in SAMPLE_FOODS:
        gate.execute(
            "INSERT INTO food_items (id, name, category_id, calories_per_100g, "
            "protein_per_100g, carbs_per_100g, fat_per_100g) "
            "VALUES (:id, :name, :cid, :kcal, :protein, :carbs, :fat)",
            dict(zip(("id", "name", "cid", "kcal", "protein", "carbs", "fat"), row)),
        )

    gate.execute(
        "INSERT INTO diet_templates (id, code, name, description, segment, type, "
        "duration_days, calories_target) "
        "VALUES (1, 'WL-1500', 'Weight loss 1500', 'Balanced low-calorie plan', "
        "'adult', 'weight_loss', :days, 1500)",
        {"days": days},
    )

    meal_id = item_count = 0
    for day_number in range(1, days + 1):
        gate.execute(
            "INSERT INTO diet_days (id, template_id, day_number, day_name) "
            "VALUES (:id, 1, :num, :name)",
            {"id": day_number, "num": day_number, "name": f"Day {day_number}"},
        )
        for order, (meal_type, time_suggestion, items) in enumerate(SAMPLE_DAY, start=1):
            meal_id += 1
            gate.execute(
                "INSERT INTO diet_meals (id, day_id, meal_type, meal_order, time_suggestion) "
                "VALUES (:id, :day, :type, :ord, :time)",
                {"id": meal_id, "day": day_number, "type": meal_type, "ord": order, "time": time_suggestion},
            )
            for sort_order, (food_id, grams_min, grams_max) in enumerate(items):
                # meal item ids come from the sequence; the benchmark inserts more later
                item_count += 1
                gate.execute(
                    "INSERT INTO diet_meal_items (meal_id, food_item_id, "
                    "portion_grams_min, portion_grams_max, sort_order) "
                    "VALUES (:meal, :food, :pmin, :pmax, :sort)",
                    {"meal": meal_id, "food": food_id,
                     "pmin": grams_min, "pmax": grams_max, "sort": sort_order},
                )

    logger.info("✓ Sample data loaded: %d days, %d meals, %d items", days, meal_id, item_count)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--sample", action="store_true", help="load demo data")
    parser.add_argument("--days", type=int, default=3, help="days in the demo template")
    args = parser.parse_args(argv)

    gate = QueryGate.from_url(settings.sqlalchemy_url, echo=settings.db_echo)
    try:
        gate.connect()
        init_schema(gate)
        if args.sample:
            seed_sample_data(gate, days=args.days)
    except DatabaseError as e:
        logger.error(f"✗ Database initialization failed: {e}")
        return 1
    finally:
        gate.close()

    logger.info("✓ Database ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
