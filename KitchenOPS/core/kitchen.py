import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

import numpy as np

from KitchenOPS.config import DEFAULT_CAPACITY, KitchenConfig
from KitchenOPS.domain.dish import (
    ELABORATE_MIN_INGREDIENTS,
    ELABORATE_MIN_PREP_TIME,
    Dish,
)
from KitchenOPS.domain.types import CuisineType, DietaryRequest
from KitchenOPS.utils import round_half_up, round_percentage

logger = logging.getLogger(__name__)

CuisineLike = Union[CuisineType, str]


def match_cuisine(cuisine: CuisineLike) -> Optional[CuisineType]:
    """CuisineType for an enum or an exact uppercase literal, None otherwise."""
    if isinstance(cuisine, CuisineType):
        return cuisine
    if isinstance(cuisine, str):
        return CuisineType.__members__.get(cuisine)
    return None


# -------------------- Kitchen principale --------------------


@dataclass
class Kitchen:
    """
    Cuisine du bistro : ensemble non ordonné de plats + agrégats tenus à jour.

      - dishes            -> plats présents (uniques par égalité des champs de base)
      - capacity          -> nombre max de plats (None = illimité)
      - total_prep_time   -> somme des prep_time des plats présents
      - elaborate_count   -> nombre de plats « élaborés »

    Both aggregates are updated incrementally by ``new_order`` /
    ``serve_dish``; ``resync_aggregates`` rebuilds them from the members.
    """

    capacity: Optional[int] = DEFAULT_CAPACITY
    elaborate_min_ingredients: int = ELABORATE_MIN_INGREDIENTS
    elaborate_min_prep_time: int = ELABORATE_MIN_PREP_TIME
    dishes: List[Dish] = field(default_factory=list)
    total_prep_time: int = field(default=0, init=False)
    elaborate_count: int = field(default=0, init=False)

    def __post_init__(self):
        if self.capacity is not None and self.capacity < 1:
            raise ValueError(f"Kitchen capacity must be >= 1, got {self.capacity}")
        # plats passés au constructeur : on repasse par new_order pour les agrégats
        initial_dishes, self.dishes = self.dishes, []
        for dish in initial_dishes:
            self.new_order(dish)

    @classmethod
    def from_config(cls, config: KitchenConfig) -> "Kitchen":
        return cls(
            capacity=config.capacity,
            elaborate_min_ingredients=config.elaborate_min_ingredients,
            elaborate_min_prep_time=config.elaborate_min_prep_time,
        )

    # -------- Conteneur --------

    @property
    def size(self) -> int:
        return len(self.dishes)

    def __len__(self) -> int:
        return len(self.dishes)

    def __iter__(self) -> Iterator[Dish]:
        return iter(list(self.dishes))

    def __contains__(self, dish: object) -> bool:
        return self.contains(dish)

    def is_empty(self) -> bool:
        return not self.dishes

    def is_full(self) -> bool:
        return self.capacity is not None and len(self.dishes) >= self.capacity

    def contains(self, dish: object) -> bool:
        return self._index_of(dish) is not None

    def _index_of(self, dish: object) -> Optional[int]:
        for index, member in enumerate(self.dishes):
            if member == dish:
                return index
        return None

    def _is_elaborate(self, dish: Dish) -> bool:
        return dish.is_elaborate(
            self.elaborate_min_ingredients, self.elaborate_min_prep_time
        )

    # -------- Entrées / sorties de plats --------

    def new_order(self, dish: Dish) -> bool:
        """
        Ajoute un plat s'il n'est pas déjà présent et s'il reste de la place.
        Met à jour la somme des temps de préparation et le compteur d'élaborés.
        """
        if self.contains(dish):
            logger.debug(f"Dish already in kitchen: {dish.name}")
            return False
        if self.is_full():
            logger.warning(
                f"Kitchen full ({self.capacity} dishes), refusing {dish.name}"
            )
            return False

        self.dishes.append(dish)
        self.total_prep_time += dish.prep_time
        if self._is_elaborate(dish):
            self.elaborate_count += 1
        logger.debug(f"Dish added: {dish.name} ({dish.kind})")
        return True

    def serve_dish(self, dish: Dish) -> bool:
        """Retire le plat égal à ``dish``. False si absent ou cuisine vide."""
        if not self.dishes:
            return False
        index = self._index_of(dish)
        if index is None:
            return False
        self._remove_at(index)
        return True

    def _remove_at(self, index: int) -> Dish:
        member = self.dishes.pop(index)
        self.total_prep_time -= member.prep_time
        if self._is_elaborate(member):
            self.elaborate_count -= 1
        logger.debug(f"Dish served: {member.name}")
        return member

    def _discard(self, member: Dish) -> None:
        # par identité : deux plats peuvent devenir égaux après une adaptation
        for index, candidate in enumerate(self.dishes):
            if candidate is member:
                self._remove_at(index)
                return

    def clear(self) -> None:
        self.dishes = []
        self.total_prep_time = 0
        self.elaborate_count = 0

    # -------- Agrégats --------

    def prep_time_sum(self) -> int:
        if not self.dishes:
            return 0
        return max(0, self.total_prep_time)

    def average_prep_time(self) -> int:
        """
        Temps moyen de préparation, arrondi à l'entier le plus proche.
        Recalculé sur les plats présents (pas sur le cache).
        """
        if not self.dishes:
            return 0
        mean = np.mean([dish.prep_time for dish in self.dishes])
        return round_half_up(float(mean))

    def elaborate_dish_count(self) -> int:
        if not self.dishes or self.elaborate_count == 0:
            return 0
        return self.elaborate_count

    def elaborate_percentage(self) -> float:
        """Part des plats élaborés, en %, arrondie à 2 décimales (0 si aucun)."""
        if not self.dishes or self.elaborate_count == 0:
            return 0.0
        return round_percentage(self.elaborate_count, len(self.dishes))

    def resync_aggregates(self) -> None:
        """Recalcule les agrégats à partir des plats présents."""
        self.total_prep_time = sum(dish.prep_time for dish in self.dishes)
        self.elaborate_count = sum(1 for dish in self.dishes if self._is_elaborate(dish))

    # -------- Requêtes par cuisine --------

    def tally_cuisine_types(self, cuisine_type: CuisineLike) -> int:
        """
        Nombre de plats de la cuisine donnée. Seuls les littéraux exacts en
        majuscules ("ITALIAN") sont reconnus ; tout autre texte donne 0.
        """
        cuisine = match_cuisine(cuisine_type)
        if cuisine is None:
            return 0
        return sum(1 for dish in self.dishes if dish.cuisine_type == cuisine)

    # -------- Retraits en masse --------

    def release_dishes_below_prep_time(self, prep_time: int) -> int:
        """Retire tous les plats dont prep_time < seuil. Retourne le nombre retiré."""
        to_release = [dish for dish in self.dishes if dish.prep_time < prep_time]
        for dish in to_release:
            self._discard(dish)
        if to_release:
            logger.info(
                f"Released {len(to_release)} dishes below {prep_time} minutes"
            )
        return len(to_release)

    def release_dishes_of_cuisine_type(self, cuisine_type: CuisineLike) -> int:
        """Retire tous les plats de la cuisine donnée (aucun si cuisine inconnue)."""
        cuisine = match_cuisine(cuisine_type)
        if cuisine is None:
            logger.debug(f"Unknown cuisine type: {cuisine_type!r}, nothing released")
            return 0
        to_release = [dish for dish in self.dishes if dish.cuisine_type == cuisine]
        for dish in to_release:
            self._discard(dish)
        if to_release:
            logger.info(f"Released {len(to_release)} {cuisine.value} dishes")
        return len(to_release)

    # -------- Régimes --------

    def dietary_adjustment(self, request: DietaryRequest) -> None:
        """
        Applique la demande de régime à chaque plat (sur place).

        Les règles ne touchent jamais prep_time, mais elles retirent des
        ingrédients : un plat peut cesser d'être « élaboré ». Les agrégats
        sont donc resynchronisés après coup.
        """
        for dish in self.dishes:
            dish.apply_dietary_accommodations(request)
        self.resync_aggregates()
        logger.info(f"Dietary adjustment applied to {len(self.dishes)} dishes")

    # -------- Affichage --------

    def display_menu(self) -> str:
        return "".join(dish.display_text() for dish in self.dishes)

    def kitchen_report(self) -> str:
        from KitchenOPS.ui.affichage import format_kitchen_report

        return format_kitchen_report(self)
