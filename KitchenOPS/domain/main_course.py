from typing import List

from pydantic import BaseModel, Field

from KitchenOPS.domain.dish import Dish, yes_no
from KitchenOPS.domain.types import CookingMethod, DietaryRequest, SideDishCategory
from KitchenOPS.rules import dietary

VEGETARIAN_PROTEIN = "Tofu"


class SideDish(BaseModel):
    name: str
    category: SideDishCategory = SideDishCategory.GRAIN

    def label(self) -> str:
        return f"{self.name} (Category: {self.category.value})"


class MainCourse(Dish):
    """Plat principal : cuisson, protéine, accompagnements, sans gluten ou non."""

    cooking_method: CookingMethod = CookingMethod.GRILLED
    protein_type: str = "UNKNOWN"
    side_dishes: List[SideDish] = Field(default_factory=list)
    gluten_free: bool = False

    def add_side_dish(self, side_dish: SideDish) -> None:
        self.side_dishes = [*self.side_dishes, side_dish]

    def display_lines(self) -> List[str]:
        sides = ", ".join(side.label() for side in self.side_dishes)
        return super().display_lines() + [
            f"Cooking Method: {self.cooking_method.value}",
            f"Protein Type: {self.protein_type}",
            f"Side Dishes: {sides}",
            f"Gluten-Free: {yes_no(self.gluten_free)}",
        ]

    def apply_dietary_accommodations(self, request: DietaryRequest) -> None:
        """
        Règles appliquées dans l'ordre, cumulables :

        - vegetarian : protéine -> Tofu, substitution des viandes/poissons
        - vegan : protéine -> Tofu, retrait laitages et oeufs
        - gluten_free : marque sans gluten, retire les accompagnements
          GRAIN / PASTA / BREAD / STARCHES
        """
        if request.vegetarian:
            self.protein_type = VEGETARIAN_PROTEIN
            self.ingredients = dietary.substitute_non_vegetarian(self.ingredients)

        if request.vegan:
            self.protein_type = VEGETARIAN_PROTEIN
            self.ingredients = dietary.remove_ingredients(
                self.ingredients, dietary.DAIRY_EGG_INGREDIENTS
            )

        if request.gluten_free:
            self.gluten_free = True
            self.side_dishes = dietary.remove_side_dishes_by_category(self.side_dishes)
