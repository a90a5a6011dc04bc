"""
KitchenOPS package

This package models the kitchen of a small bistro: a catalog of dishes
loaded from a CSV menu, aggregate statistics on that catalog and bulk
dietary adjustments. It separates the domain records, the dietary
rules, the kitchen engine, the configuration and the text reports into
distinct subpackages.
"""

__all__ = ["core", "domain", "rules", "ui"]
