import pytest

from KitchenOPS.core.kitchen import Kitchen
from KitchenOPS.domain import (
    Appetizer,
    CookingMethod,
    CuisineType,
    Dessert,
    FlavorProfile,
    MainCourse,
    ServingStyle,
    SideDish,
    SideDishCategory,
)


def make_dish(name="Test Dish", prep_time=30, ingredients=None, cuisine=CuisineType.OTHER, price=10.0):
    """Plat générique (Appetizer) pour les tests d'agrégats."""
    return Appetizer(
        name=name,
        ingredients=list(ingredients) if ingredients is not None else ["Salt"],
        prep_time=prep_time,
        price=price,
        cuisine_type=cuisine,
    )


@pytest.fixture
def bruschetta():
    return Appetizer(
        name="Bruschetta",
        ingredients=["Bread", "Tomato", "Basil", "Garlic", "Olive Oil"],
        prep_time=15,
        price=7.5,
        cuisine_type=CuisineType.ITALIAN,
        serving_style=ServingStyle.PLATED,
        spiciness_level=1,
        vegetarian=True,
    )


@pytest.fixture
def lasagna():
    return MainCourse(
        name="Lasagna",
        ingredients=["Pasta", "Meat", "Cheese", "Tomato", "Milk", "Eggs"],
        prep_time=90,
        price=19.99,
        cuisine_type=CuisineType.ITALIAN,
        cooking_method=CookingMethod.BAKED,
        protein_type="Beef",
        side_dishes=[
            SideDish(name="Garlic Bread", category=SideDishCategory.BREAD),
            SideDish(name="Caesar Salad", category=SideDishCategory.SALAD),
        ],
        gluten_free=False,
    )


@pytest.fixture
def baklava():
    return Dessert(
        name="Baklava",
        ingredients=["Walnuts", "Pistachios", "Honey", "Butter", "Flour"],
        prep_time=120,
        price=7.25,
        cuisine_type=CuisineType.OTHER,
        flavor_profile=FlavorProfile.SWEET,
        sweetness_level=9,
        contains_nuts=True,
    )


@pytest.fixture
def kitchen():
    return Kitchen()
