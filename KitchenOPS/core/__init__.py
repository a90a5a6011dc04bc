"""
Kitchen engine for KitchenOPS.

``Kitchen`` owns the dishes and their running aggregates; ``loader``
turns CSV menu records into dishes and feeds them to a kitchen.
"""

from .kitchen import Kitchen
from .loader import RecordParseError, load_kitchen, parse_record

__all__ = ["Kitchen", "RecordParseError", "load_kitchen", "parse_record"]
