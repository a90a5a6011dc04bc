from typing import List

from pydantic import BaseModel, ConfigDict, Field

from KitchenOPS.domain.types import CuisineType, DietaryRequest

# Seuils « plat élaboré » (cf. config.KitchenConfig pour les surcharger)
ELABORATE_MIN_INGREDIENTS = 5
ELABORATE_MIN_PREP_TIME = 60

BASE_FIELDS = ("name", "ingredients", "prep_time", "price", "cuisine_type")


class Dish(BaseModel):
    """
    Plat de la carte, commun aux trois variantes (entrée, plat, dessert).

    Two dishes are equal when their base fields match exactly; variant
    fields (serving style, side dishes, ...) are ignored, so an appetizer
    and a dessert sharing the same base fields are the same dish for the
    kitchen.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = "UNKNOWN"
    ingredients: List[str] = Field(default_factory=list)
    prep_time: int = Field(default=0, ge=0, description="Minutes")
    price: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    cuisine_type: CuisineType = CuisineType.OTHER

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dish):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in BASE_FIELDS)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def is_elaborate(
        self,
        min_ingredients: int = ELABORATE_MIN_INGREDIENTS,
        min_prep_time: int = ELABORATE_MIN_PREP_TIME,
    ) -> bool:
        return len(self.ingredients) >= min_ingredients and self.prep_time >= min_prep_time

    # --------- AFFICHAGE ---------
    def display_lines(self) -> List[str]:
        return [
            f"Dish Name: {self.name}",
            f"Ingredients: {', '.join(self.ingredients)}",
            f"Preparation Time: {self.prep_time} minutes",
            f"Price: ${self.price:.2f}",
            f"Cuisine Type: {self.cuisine_type.value}",
        ]

    def display_text(self) -> str:
        """Fiche du plat, un champ par ligne (terminée par un saut de ligne)."""
        return "\n".join(self.display_lines()) + "\n"

    # --------- RÉGIMES ---------
    def apply_dietary_accommodations(self, request: DietaryRequest) -> None:
        """Adapte le plat à la demande. Surchargé par chaque variante."""
        return None


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"
