import pytest
from pydantic import ValidationError

from KitchenOPS.domain import (
    Appetizer,
    CuisineType,
    Dessert,
    Dish,
    FlavorProfile,
    MainCourse,
    SideDish,
    SideDishCategory,
)
from KitchenOPS.domain.types import CookingMethod, ServingStyle, parse_enum


def test_equality_uses_base_fields_only():
    base = dict(name="Soup", ingredients=["Water", "Salt"], prep_time=20, price=4.0)
    appetizer = Appetizer(**base, spiciness_level=3)
    dessert = Dessert(**base, sweetness_level=7)
    assert appetizer == dessert
    assert Appetizer(**base, spiciness_level=0) == appetizer


def test_inequality_on_any_base_field():
    dish = Appetizer(name="Soup", ingredients=["Water"], prep_time=20, price=4.0)
    assert dish != Appetizer(name="Soup", ingredients=["Water"], prep_time=21, price=4.0)
    assert dish != Appetizer(name="Soup", ingredients=["Water", "Salt"], prep_time=20, price=4.0)
    assert dish != Appetizer(
        name="Soup", ingredients=["Water"], prep_time=20, price=4.0, cuisine_type=CuisineType.FRENCH
    )
    assert dish != "Soup"


def test_dishes_are_unhashable():
    with pytest.raises(TypeError):
        hash(Appetizer(name="Soup"))


def test_defaults():
    dish = MainCourse()
    assert dish.name == "UNKNOWN"
    assert dish.ingredients == []
    assert dish.prep_time == 0
    assert dish.cuisine_type == CuisineType.OTHER
    assert dish.cooking_method == CookingMethod.GRILLED
    assert dish.protein_type == "UNKNOWN"
    assert Appetizer().serving_style == ServingStyle.PLATED
    assert Dessert().flavor_profile == FlavorProfile.SWEET


@pytest.mark.parametrize("field", ["prep_time", "price"])
def test_negative_values_are_rejected(field):
    with pytest.raises(ValidationError):
        Appetizer(name="Bad", **{field: -1})


def test_negative_level_rejected_on_assignment(bruschetta):
    with pytest.raises(ValidationError):
        bruschetta.spiciness_level = -1


@pytest.mark.parametrize(
    "n_ingredients, prep_time, expected",
    [(5, 60, True), (4, 60, False), (5, 59, False), (8, 240, True)],
)
def test_is_elaborate(n_ingredients, prep_time, expected):
    dish = Appetizer(ingredients=[f"I{i}" for i in range(n_ingredients)], prep_time=prep_time)
    assert dish.is_elaborate() is expected


def test_base_dish_accommodation_is_noop():
    dish = Dish(name="Plain", ingredients=["Meat"])
    dish.apply_dietary_accommodations(None)
    assert dish.ingredients == ["Meat"]


def test_appetizer_display(bruschetta):
    assert bruschetta.display_text() == (
        "Dish Name: Bruschetta\n"
        "Ingredients: Bread, Tomato, Basil, Garlic, Olive Oil\n"
        "Preparation Time: 15 minutes\n"
        "Price: $7.50\n"
        "Cuisine Type: ITALIAN\n"
        "Serving Style: Plated\n"
        "Spiciness Level: 1\n"
        "Vegetarian: Yes\n"
    )


def test_main_course_display(lasagna):
    assert lasagna.display_lines()[5:] == [
        "Cooking Method: Baked",
        "Protein Type: Beef",
        "Side Dishes: Garlic Bread (Category: Bread), Caesar Salad (Category: Salad)",
        "Gluten-Free: No",
    ]


@pytest.mark.parametrize(
    "flavor, label",
    [
        (FlavorProfile.SWEET, "Sweet"),
        (FlavorProfile.BITTER, "Bitter"),
        (FlavorProfile.SOUR, "Sour"),
        (FlavorProfile.SALTY, "Salty"),
        (FlavorProfile.UMAMI, "Umami"),
    ],
)
def test_dessert_flavor_labels_are_one_to_one(baklava, flavor, label):
    baklava.flavor_profile = flavor
    assert f"Flavor Profile: {label}" in baklava.display_lines()


def test_dessert_display_tail(baklava):
    assert baklava.display_lines()[-2:] == ["Sweetness Level: 9", "Contains Nuts: Yes"]


def test_add_side_dish(lasagna):
    lasagna.add_side_dish(SideDish(name="Soup of the day", category=SideDishCategory.SOUP))
    assert [side.name for side in lasagna.side_dishes][-1] == "Soup of the day"
    assert len(lasagna.side_dishes) == 3


def test_parse_enum_is_exact_match():
    assert parse_enum(CuisineType, "FRENCH", CuisineType.OTHER) == CuisineType.FRENCH
    assert parse_enum(CuisineType, "french", CuisineType.OTHER) == CuisineType.OTHER
    assert parse_enum(CuisineType, None, CuisineType.OTHER) == CuisineType.OTHER


@pytest.mark.parametrize("price", [float("inf"), float("nan")])
def test_non_finite_price_is_rejected(price):
    with pytest.raises(ValidationError):
        Appetizer(name="Bad", price=price)
