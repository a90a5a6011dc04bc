"""Dietary rules shared by the dish variants."""
