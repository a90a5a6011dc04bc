import json
import math
from pathlib import Path
from typing import Type, TypeVar, Union

from pydantic import BaseModel, RootModel, ValidationError

M = TypeVar("M", bound=Union[BaseModel, RootModel])


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
    the kitchen figures expect ``2.5 -> 3`` and ``-2.5 -> -3``.

    >>> round_half_up(64.5), round_half_up(64.49), round_half_up(-2.5)
    (65, 64, -3)
    """
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def round_percentage(numerator: int, denominator: int) -> float:
    """Percentage rounded to 2 decimals (scaled by 10000, rounded, divided by 100).

    Returns 0.0 when ``denominator`` <= 0.

    >>> round_percentage(3, 7)
    42.86
    """
    if denominator <= 0:
        return 0.0
    return round_half_up(numerator / denominator * 10000) / 100


def load_and_validate(data_path: Path, model: Type[M]) -> M:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    data_path = Path(data_path)
    if not data_path.exists():
        raise FileNotFoundError(f"Config data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
    try:
        return model.model_validate(raw_data)
    except ValidationError as e:
        raise ValueError(f"Validation error for {data_path.name}: {e}") from e
