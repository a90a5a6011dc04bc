"""Text rendering of the kitchen: menu, report, summary."""
