"""Bundled sample data: dishes.csv (menu) and kitchen_config.json."""
