"""
Chargement de la carte depuis un CSV.

Format d'une ligne (en-tête ignoré) :

    DISHTYPE,NAME,INGREDIENTS,PREP_TIME,PRICE,CUISINE,ADDITIONAL_ATTRS

- INGREDIENTS : liste séparée par des ``;``
- ADDITIONAL_ATTRS (séparés par des ``;``) selon DISHTYPE :
    APPETIZER  -> servingStyle;spicinessLevel;vegetarian
    MAINCOURSE -> cookingMethod;proteinType;sideDishes;glutenFree
                  (sideDishes = ``name:CATEGORY`` séparés par des ``|``)
    DESSERT    -> flavorProfile;sweetnessLevel;containsNuts

Unknown dish types are skipped and unknown enum tokens fall back to a
default value. Malformed, negative or non-finite numbers and lines that are
not valid UTF-8 raise ``RecordParseError``.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from KitchenOPS.config import (
    FIELD_SEPARATOR,
    LIST_SEPARATOR,
    SIDE_DISH_CATEGORY_SEPARATOR,
    SIDE_DISH_SEPARATOR,
    KitchenConfig,
)
from KitchenOPS.core.kitchen import Kitchen
from KitchenOPS.domain.appetizer import Appetizer
from KitchenOPS.domain.dessert import Dessert
from KitchenOPS.domain.dish import Dish
from KitchenOPS.domain.main_course import MainCourse, SideDish
from KitchenOPS.domain.types import (
    CookingMethod,
    CuisineType,
    FlavorProfile,
    ServingStyle,
    SideDishCategory,
    parse_enum,
)

logger = logging.getLogger(__name__)

RECORD_FIELDS = 7


class RecordParseError(ValueError):
    """Enregistrement mal formé : nombre absent ou invalide, ligne non UTF-8."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


# ---------- Helpers de parsing ----------


def split_list(text: str, separator: str = LIST_SEPARATOR) -> List[str]:
    """Découpe une liste ``a;b;c``. Chaîne vide -> [], séparateur final ignoré.

    >>> split_list("Bread;Tomato;")
    ['Bread', 'Tomato']
    >>> split_list("")
    []
    """
    if not text:
        return []
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def _field(parts: List[str], index: int) -> str:
    return parts[index] if index < len(parts) else ""


def _parse_int(text: str, label: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise RecordParseError(f"invalid {label}: {text!r}") from None


def _parse_float(text: str, label: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise RecordParseError(f"invalid {label}: {text!r}") from None


def _parse_bool(text: str) -> bool:
    return text == "true"


def parse_side_dishes(text: str) -> List[SideDish]:
    """``Rice:GRAIN|Naan:BREAD`` -> [SideDish, ...]. Catégorie inconnue -> GRAIN."""
    side_dishes = []
    for chunk in split_list(text, SIDE_DISH_SEPARATOR):
        name, _, category = chunk.partition(SIDE_DISH_CATEGORY_SEPARATOR)
        side_dishes.append(
            SideDish(
                name=name,
                category=parse_enum(SideDishCategory, category, SideDishCategory.GRAIN),
            )
        )
    return side_dishes


# ---------- Constructeurs par type de plat ----------


def _build_appetizer(base: Dict, attrs: List[str]) -> Appetizer:
    return Appetizer(
        **base,
        serving_style=parse_enum(ServingStyle, _field(attrs, 0), ServingStyle.PLATED),
        spiciness_level=_parse_int(_field(attrs, 1), "spiciness level"),
        vegetarian=_parse_bool(_field(attrs, 2)),
    )


def _build_main_course(base: Dict, attrs: List[str]) -> MainCourse:
    return MainCourse(
        **base,
        cooking_method=parse_enum(
            CookingMethod, _field(attrs, 0), CookingMethod.GRILLED
        ),
        protein_type=_field(attrs, 1),
        side_dishes=parse_side_dishes(_field(attrs, 2)),
        gluten_free=_parse_bool(_field(attrs, 3)),
    )


def _build_dessert(base: Dict, attrs: List[str]) -> Dessert:
    return Dessert(
        **base,
        flavor_profile=parse_enum(FlavorProfile, _field(attrs, 0), FlavorProfile.SWEET),
        sweetness_level=_parse_int(_field(attrs, 1), "sweetness level"),
        contains_nuts=_parse_bool(_field(attrs, 2)),
    )


DISH_BUILDERS: Dict[str, Callable[[Dict, List[str]], Dish]] = {
    "APPETIZER": _build_appetizer,
    "MAINCOURSE": _build_main_course,
    "DESSERT": _build_dessert,
}


def parse_record(line: str, line_number: Optional[int] = None) -> Optional[Dish]:
    """Construit le plat décrit par une ligne CSV.

    Paramètres
    ----------
    line : str
        Une ligne du fichier, sans l'en-tête.
    line_number : int, optional
        Numéro de ligne, repris dans le message d'erreur.

    Retour
    ------
    Dish | None
        Le plat de la bonne variante, ou None si DISHTYPE est inconnu.

    Exemple
    -------
    >>> dish = parse_record("DESSERT,Flan,Milk;Eggs;Sugar,45,5.5,MEXICAN,SWEET;8;false")
    >>> dish.kind, dish.sweetness_level, dish.cuisine_type.value
    ('Dessert', 8, 'MEXICAN')
    >>> parse_record("DRINK,Lemonade,Lemon;Sugar,5,3,OTHER,") is None
    True

    Lève
    ----
    RecordParseError
        Si prep time, prix, niveau d'épices ou de sucre n'est pas un nombre
        valide (négatif, ou prix infini / NaN).
    """
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    dish_type = _field(parts, 0)
    builder = DISH_BUILDERS.get(dish_type)
    if builder is None:
        logger.debug(f"Unknown dish type {dish_type!r}, record skipped")
        return None

    try:
        base = {
            "name": _field(parts, 1),
            "ingredients": split_list(_field(parts, 2)),
            "prep_time": _parse_int(_field(parts, 3), "prep time"),
            "price": _parse_float(_field(parts, 4), "price"),
            "cuisine_type": parse_enum(CuisineType, _field(parts, 5), CuisineType.OTHER),
        }
        attrs = split_list(_field(parts, 6))
        return builder(base, attrs)
    except ValidationError as e:
        # ex : prep time négatif
        raise RecordParseError(
            f"invalid {dish_type} record: {e.errors()[0]['msg']}", line_number
        ) from e
    except RecordParseError as e:
        if line_number is None or e.line_number is not None:
            raise
        raise RecordParseError(str(e), line_number) from None


# ---------- Lecture du fichier ----------


def _iter_raw_lines(path: Union[Path, str]) -> Iterator[Tuple[int, bytes]]:
    # lecture binaire : le décodage se fait ligne par ligne
    with Path(path).open("rb") as f:
        next(f, None)  # en-tête
        for line_number, raw in enumerate(f, start=2):
            raw = raw.rstrip(b"\r\n")
            if raw.strip():
                yield line_number, raw


def decode_line(raw: bytes, line_number: Optional[int] = None) -> str:
    """Décode une ligne UTF-8 ; octets invalides -> ``RecordParseError``."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RecordParseError(
            f"not valid UTF-8 at byte {e.start}", line_number
        ) from None


def iter_records(path: Union[Path, str]) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, line)`` for every non-blank line after the header."""
    for line_number, raw in _iter_raw_lines(path):
        yield line_number, decode_line(raw, line_number)


def load_kitchen(
    path: Union[Path, str],
    kitchen: Optional[Kitchen] = None,
    strict: Optional[bool] = None,
    config: Optional[KitchenConfig] = None,
) -> Kitchen:
    """Remplit une cuisine à partir d'un fichier CSV.

    - fichier introuvable / illisible : erreur loggée, cuisine vide retournée
    - enregistrement mal formé (nombre invalide, ligne non UTF-8) : ``strict``
      (défaut : config.strict_loading) relance l'erreur, sinon la ligne est
      ignorée avec un warning
    """
    config = config or KitchenConfig()
    if kitchen is None:
        kitchen = Kitchen.from_config(config)
    if strict is None:
        strict = config.strict_loading

    added = skipped = 0
    try:
        for line_number, raw in _iter_raw_lines(path):
            try:
                dish = parse_record(decode_line(raw, line_number), line_number)
            except RecordParseError as e:
                if strict:
                    raise
                logger.warning(f"Skipping malformed record: {e}")
                skipped += 1
                continue
            if dish is not None and kitchen.new_order(dish):
                added += 1
    except OSError as e:
        logger.error(f"Failed to open file: {path} ({e})")
        return kitchen

    logger.info(f"Loaded {added} dishes from {path} ({skipped} skipped)")
    return kitchen
