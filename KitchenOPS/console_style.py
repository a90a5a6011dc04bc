# KitchenOPS/console_style.py
RESET = "\033[0m"
STYLES = {"bold": "1", "red": "91", "yellow": "93", "cyan": "96"}


def _styled(text: str, style: str) -> str:
    return f"\033[{STYLES[style]}m{text}{RESET}"


def bold(text: str) -> str:
    return _styled(text, "bold")


def cyan(text: str) -> str:
    return _styled(text, "cyan")


def red(text: str) -> str:
    return _styled(text, "red")


def yellow(text: str) -> str:
    return _styled(text, "yellow")
