from typing import List

from KitchenOPS.console_style import bold, cyan, yellow
from KitchenOPS.core.kitchen import Kitchen
from KitchenOPS.domain.types import CuisineType

SEPARATOR = "-------------------"


def _pct(part: int, total: int) -> str:
    """Part ``part / total`` en %, bornée à [0, 100] ; "—" si total nul."""
    if total <= 0:
        return "—"
    return f"{min(100.0, max(0.0, 100.0 * part / total)):5.1f}%"


def _bar(filled: int, total: int, width: int = 24) -> str:
    # total nul : barre vide
    n = 0 if total <= 0 else round(width * min(1.0, max(0.0, filled / total)))
    return "█" * n + " " * (width - n)


# ---------- Rapport cuisine ----------


def report_lines(kitchen: Kitchen) -> List[str]:
    lines = [
        f"{cuisine.value}: {kitchen.tally_cuisine_types(cuisine)}"
        for cuisine in CuisineType
    ]
    lines.append("")
    lines.append(f"AVERAGE PREP TIME: {kitchen.average_prep_time()}")
    lines.append(f"ELABORATE DISHES: {kitchen.elaborate_percentage():.2f}%")
    return lines


def format_kitchen_report(kitchen: Kitchen) -> str:
    """Rapport texte de la cuisine (format stable, une ligne par cuisine).

    Exemple de sortie:
    ITALIAN: 2
    MEXICAN: 3
    CHINESE: 2
    INDIAN: 1
    AMERICAN: 1
    FRENCH: 2
    OTHER: 2

    AVERAGE PREP TIME: 62
    ELABORATE DISHES: 53.85%
    """
    return "\n".join(report_lines(kitchen)) + "\n"


def print_kitchen_report(kitchen: Kitchen) -> None:
    print(bold("\n📋 Kitchen report"))
    print(format_kitchen_report(kitchen), end="")


# ---------- Carte ----------


def print_menu(kitchen: Kitchen, title: str) -> None:
    """Affiche la carte encadrée par des séparateurs, une fiche par plat."""
    print(cyan(title))
    print(SEPARATOR)
    if kitchen.is_empty():
        print(yellow("(no dish in the kitchen)"))
    else:
        print(kitchen.display_menu(), end="")
    print(SEPARATOR)


def print_kitchen_summary(kitchen: Kitchen) -> None:
    """
    Synthèse compacte : remplissage de la cuisine et part des plats élaborés.
    """
    size = len(kitchen)
    elaborate = kitchen.elaborate_dish_count()
    print(bold("\n🍽️  Kitchen summary"))
    if kitchen.capacity is not None:
        print(
            f"[{_bar(size, kitchen.capacity)}] {size}/{kitchen.capacity} dishes ({_pct(size, kitchen.capacity)})"
        )
    else:
        print(f"{size} dishes (no capacity limit)")
    print(f"[{_bar(elaborate, size)}] {elaborate} elaborate ({_pct(elaborate, size)})")
    print(f"Total prep time   : {kitchen.prep_time_sum()} minutes")
