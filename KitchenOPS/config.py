"""Configuration globale de KitchenOPS."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from KitchenOPS.domain.dish import ELABORATE_MIN_INGREDIENTS, ELABORATE_MIN_PREP_TIME
from KitchenOPS.utils import load_and_validate

# Directory
PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_DISHES_PATH = DATA_DIR / "dishes.csv"
DEFAULT_CONFIG_PATH = DATA_DIR / "kitchen_config.json"

# Kitchen
DEFAULT_CAPACITY = 100

# CSV
FIELD_SEPARATOR = ","
LIST_SEPARATOR = ";"
SIDE_DISH_SEPARATOR = "|"
SIDE_DISH_CATEGORY_SEPARATOR = ":"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class KitchenConfig(BaseModel):
    """Paramètres de la cuisine, chargés depuis un JSON et validés par Pydantic.

    Exemple de fichier:
    {
        "capacity": 100,
        "elaborate_min_ingredients": 5,
        "elaborate_min_prep_time": 60,
        "strict_loading": true,
        "log_level": "INFO"
    }

    ``capacity`` à null = cuisine sans limite de plats.
    """

    capacity: Optional[int] = Field(default=DEFAULT_CAPACITY, ge=1)
    elaborate_min_ingredients: int = Field(default=ELABORATE_MIN_INGREDIENTS, ge=1)
    elaborate_min_prep_time: int = Field(default=ELABORATE_MIN_PREP_TIME, ge=0)
    strict_loading: bool = Field(
        default=True,
        description="Abort the whole load on a malformed record instead of skipping it",
    )
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_config(path: Optional[Union[Path, str]] = None) -> KitchenConfig:
    """Charge la configuration (fichier par défaut : data/kitchen_config.json)."""
    return load_and_validate(Path(path or DEFAULT_CONFIG_PATH), KitchenConfig)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the root logger (stdout handler).

    Args:
        level: logging level (default: INFO)

    Returns:
        The package logger
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    return logging.getLogger("KitchenOPS")
