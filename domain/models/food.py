"""
Food catalogue models.
"""

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from domain.models.database import Base


class FoodCategory(Base):
    """Groups of food items (vegetables, dairy, ...)"""

    __tablename__ = "food_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    icon = Column(String(50))
    color = Column(String(20))
    sort_order = Column(Integer, default=0)

    foods = relationship("FoodItem", back_populates="category")


class FoodItem(Base):
    """Food with nutrition values per 100g"""

    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("food_categories.id"))
    calories_per_100g = Column(Numeric(8, 2))
    protein_per_100g = Column(Numeric(8, 2))
    carbs_per_100g = Column(Numeric(8, 2))
    fat_per_100g = Column(Numeric(8, 2))

    category = relationship("FoodCategory", back_populates="foods")
