"""
Domain objects for KitchenOPS.

The domain layer holds the dish records served by the kitchen: the
common ``Dish`` base, its three variants (appetizer, main course,
dessert) and the enums / dietary request they share. These classes are
pydantic models so that every record is validated on construction.
"""

from .types import (
    CookingMethod,
    CuisineType,
    DietaryRequest,
    FlavorProfile,
    ServingStyle,
    SideDishCategory,
)
from .dish import Dish
from .appetizer import Appetizer
from .main_course import MainCourse, SideDish
from .dessert import Dessert

__all__ = [
    "Dish",
    "Appetizer",
    "MainCourse",
    "SideDish",
    "Dessert",
    "CuisineType",
    "ServingStyle",
    "CookingMethod",
    "SideDishCategory",
    "FlavorProfile",
    "DietaryRequest",
]
