# kitchenops/domain/types.py
from enum import Enum
from typing import Optional, Type, TypeVar

from pydantic import BaseModel

E = TypeVar("E", bound=Enum)


class CuisineType(str, Enum):
    # Values aligned with the CSV literals and the report lines
    ITALIAN = "ITALIAN"
    MEXICAN = "MEXICAN"
    CHINESE = "CHINESE"
    INDIAN = "INDIAN"
    AMERICAN = "AMERICAN"
    FRENCH = "FRENCH"
    OTHER = "OTHER"


class ServingStyle(str, Enum):
    PLATED = "Plated"
    FAMILY_STYLE = "Family Style"
    BUFFET = "Buffet"


class CookingMethod(str, Enum):
    GRILLED = "Grilled"
    BAKED = "Baked"
    BOILED = "Boiled"
    FRIED = "Fried"
    STEAMED = "Steamed"
    RAW = "Raw"


class SideDishCategory(str, Enum):
    GRAIN = "Grain"
    PASTA = "Pasta"
    LEGUME = "Legume"
    BREAD = "Bread"
    SALAD = "Salad"
    SOUP = "Soup"
    STARCHES = "Starches"
    VEGETABLE = "Vegetable"


class FlavorProfile(str, Enum):
    SWEET = "Sweet"
    BITTER = "Bitter"
    SOUR = "Sour"
    SALTY = "Salty"
    UMAMI = "Umami"


def parse_enum(enum_cls: Type[E], token: Optional[str], default: E) -> E:
    """Map an uppercase CSV token to an enum member by *name*.

    Only exact matches are accepted ("ITALIAN" yes, "italian" no); anything
    else falls back to ``default``.

    Exemple
    -------
    >>> parse_enum(CookingMethod, "BAKED", CookingMethod.GRILLED)
    <CookingMethod.BAKED: 'Baked'>
    >>> parse_enum(CookingMethod, "SMOKED", CookingMethod.GRILLED)
    <CookingMethod.GRILLED: 'Grilled'>
    """
    if token is None:
        return default
    return enum_cls.__members__.get(token, default)


# ---------- DietaryRequest ----------


class DietaryRequest(BaseModel):
    """Flags de régime demandés par le client. Non exclusifs entre eux."""

    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    nut_free: bool = False
    low_sodium: bool = False
    low_sugar: bool = False

    def any(self) -> bool:
        return any(
            (
                self.vegetarian,
                self.vegan,
                self.gluten_free,
                self.nut_free,
                self.low_sodium,
                self.low_sugar,
            )
        )
