from typing import List

from pydantic import Field

from KitchenOPS.domain.dish import Dish, yes_no
from KitchenOPS.domain.types import DietaryRequest, ServingStyle
from KitchenOPS.rules import dietary


class Appetizer(Dish):
    """Entrée : style de service, niveau d'épices, végétarienne ou non."""

    serving_style: ServingStyle = ServingStyle.PLATED
    spiciness_level: int = Field(default=0, ge=0)
    vegetarian: bool = False

    def display_lines(self) -> List[str]:
        return super().display_lines() + [
            f"Serving Style: {self.serving_style.value}",
            f"Spiciness Level: {self.spiciness_level}",
            f"Vegetarian: {yes_no(self.vegetarian)}",
        ]

    def apply_dietary_accommodations(self, request: DietaryRequest) -> None:
        """
        - vegetarian : marque l'entrée végétarienne et substitue les viandes/poissons
        - low_sodium : spiciness_level - 2 (plancher 0)
        - gluten_free : retire les ingrédients à gluten
        """
        if request.vegetarian:
            self.vegetarian = True
            self.ingredients = dietary.substitute_non_vegetarian(self.ingredients)

        if request.low_sodium:
            self.spiciness_level = dietary.lower_level(
                self.spiciness_level, dietary.LOW_SODIUM_SPICINESS_STEP
            )

        if request.gluten_free:
            self.ingredients = dietary.remove_ingredients(
                self.ingredients, dietary.GLUTEN_INGREDIENTS
            )
