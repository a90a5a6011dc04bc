"""
Règles d'adaptation diététique partagées par les variantes de plats.

Each variant decides *which* rules apply for a given ``DietaryRequest``;
this module only knows *how* to rewrite an ingredient or side-dish list.
"""

from typing import Iterable, List, Sequence

from KitchenOPS.domain.types import SideDishCategory


NON_VEGETARIAN_INGREDIENTS = frozenset(
    {"Meat", "Chicken", "Fish", "Beef", "Pork", "Lamb", "Shrimp", "Bacon"}
)
GLUTEN_INGREDIENTS = frozenset(
    {"Wheat", "Flour", "Bread", "Pasta", "Barley", "Rye", "Oats", "Crust"}
)
DAIRY_EGG_INGREDIENTS = frozenset(
    {"Milk", "Eggs", "Cheese", "Butter", "Cream", "Yogurt"}
)
NUT_INGREDIENTS = frozenset(
    {"Almonds", "Walnuts", "Pecans", "Hazelnuts", "Peanuts", "Cashews", "Pistachios"}
)
GLUTEN_SIDE_DISH_CATEGORIES = frozenset(
    {
        SideDishCategory.GRAIN,
        SideDishCategory.PASTA,
        SideDishCategory.BREAD,
        SideDishCategory.STARCHES,
    }
)

# Remplacements positionnels : 1er match -> Beans, 2e -> Mushrooms, ensuite suppression
VEGETARIAN_SUBSTITUTES = ("Beans", "Mushrooms")

# Adjustment steps applied to bounded levels
LOW_SODIUM_SPICINESS_STEP = 2
LOW_SUGAR_SWEETNESS_STEP = 3


def substitute_non_vegetarian(
    ingredients: Sequence[str],
    substitutes: Sequence[str] = VEGETARIAN_SUBSTITUTES,
) -> List[str]:
    """Remplace les ingrédients non végétariens selon leur rang d'apparition.

    The match counter is global to the list: the first non-vegetarian
    ingredient found (whatever it is) takes ``substitutes[0]``, the second
    takes ``substitutes[1]``, every later match is dropped.

    Exemple
    -------
    >>> substitute_non_vegetarian(["Meat", "Fish", "Chicken", "Rice"])
    ['Beans', 'Mushrooms', 'Rice']
    >>> substitute_non_vegetarian(["Rice", "Bacon", "Bacon"])
    ['Rice', 'Beans', 'Mushrooms']
    """
    result: List[str] = []
    matches = 0
    for ingredient in ingredients:
        if ingredient not in NON_VEGETARIAN_INGREDIENTS:
            result.append(ingredient)
            continue
        if matches < len(substitutes):
            result.append(substitutes[matches])
        matches += 1
    return result


def remove_ingredients(ingredients: Iterable[str], banned: Iterable[str]) -> List[str]:
    """Retire toutes les occurrences des ingrédients interdits (ordre conservé).

    >>> remove_ingredients(["Milk", "Milk", "Sugar", "Eggs"], DAIRY_EGG_INGREDIENTS)
    ['Sugar']
    """
    banned = frozenset(banned)
    return [ingredient for ingredient in ingredients if ingredient not in banned]


def remove_side_dishes_by_category(side_dishes, categories=GLUTEN_SIDE_DISH_CATEGORIES):
    """Drop every side dish whose category is in ``categories``."""
    return [side for side in side_dishes if side.category not in categories]


def lower_level(level: int, step: int) -> int:
    """Baisse un niveau (épices, sucre) sans descendre sous 0."""
    return max(0, level - step)
