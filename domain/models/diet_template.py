"""
Diet template hierarchy: template -> days -> meals -> meal items.
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from domain.models.database import Base


class DietTemplate(Base):
    """Named multi-day diet plan"""

    __tablename__ = "diet_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(50), unique=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    segment = Column(String(50))
    type = Column(String(50))
    duration_days = Column(Integer)
    calories_target = Column(Integer)

    days = relationship(
        "DietDay", back_populates="template", cascade="all, delete-orphan"
    )


class DietDay(Base):
    """One day of a template"""

    __tablename__ = "diet_days"

    id = Column(Integer, primary_key=True, autoincrement=True)
    template_id = Column(
        Integer, ForeignKey("diet_templates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    day_number = Column(Integer, nullable=False)
    day_name = Column(String(50))

    template = relationship("DietTemplate", back_populates="days")
    meals = relationship("DietMeal", back_populates="day", cascade="all, delete-orphan")


class DietMeal(Base):
    """A meal slot within a day (breakfast, lunch, ...)"""

    __tablename__ = "diet_meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    day_id = Column(
        Integer, ForeignKey("diet_days.id", ondelete="CASCADE"), nullable=False, index=True
    )
    meal_type = Column(String(50))
    meal_order = Column(Integer, default=0)
    time_suggestion = Column(String(20))

    day = relationship("DietDay", back_populates="meals")
    items = relationship(
        "DietMealItem", back_populates="meal", cascade="all, delete-orphan"
    )


class DietMealItem(Base):
    """Food portion inside a meal; portion_grams_min <= max is not enforced"""

    __tablename__ = "diet_meal_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    meal_id = Column(
        Integer, ForeignKey("diet_meals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    food_item_id = Column(Integer, ForeignKey("food_items.id"), nullable=False)
    portion_grams_min = Column(Integer)
    portion_grams_max = Column(Integer)
    sort_order = Column(Integer, default=0)

    meal = relationship("DietMeal", back_populates="items")
