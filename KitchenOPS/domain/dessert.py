from typing import List

from pydantic import Field

from KitchenOPS.domain.dish import Dish, yes_no
from KitchenOPS.domain.types import DietaryRequest, FlavorProfile
from KitchenOPS.rules import dietary


class Dessert(Dish):
    """Dessert : profil de saveur, niveau de sucre, présence de fruits à coque."""

    flavor_profile: FlavorProfile = FlavorProfile.SWEET
    sweetness_level: int = Field(default=0, ge=0)
    contains_nuts: bool = False

    def display_lines(self) -> List[str]:
        return super().display_lines() + [
            f"Flavor Profile: {self.flavor_profile.value}",
            f"Sweetness Level: {self.sweetness_level}",
            f"Contains Nuts: {yes_no(self.contains_nuts)}",
        ]

    def apply_dietary_accommodations(self, request: DietaryRequest) -> None:
        if request.nut_free:
            self.contains_nuts = False
            self.ingredients = dietary.remove_ingredients(
                self.ingredients, dietary.NUT_INGREDIENTS
            )

        if request.low_sugar:
            self.sweetness_level = dietary.lower_level(
                self.sweetness_level, dietary.LOW_SUGAR_SWEETNESS_STEP
            )

        if request.vegan:
            self.ingredients = dietary.remove_ingredients(
                self.ingredients, dietary.DAIRY_EGG_INGREDIENTS
            )
