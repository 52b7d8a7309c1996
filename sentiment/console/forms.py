"""Input forms. Each returns plain values or raises FormError; none touch a store."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

import config
from sentiment.errors import FormError
from sentiment.console.render import parse_choice, print_menu


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def login_form() -> Tuple[str, str]:
    username = _ask("Username: ")
    password = _ask("Password: ")
    if not username or not password:
        raise FormError("Username and password must not be empty")
    return username, password


def register_form() -> Tuple[str, str, str]:
    """Returns (username, password, confirmation). Matching is checked by ``session.register``."""
    username = _ask("Username: ")
    password = _ask("Password: ")
    confirm = _ask("Confirm password: ")
    return username, password, confirm


def confirm_form(title: str) -> bool:
    """Yes/no question. Re-asks until the answer is 1 or 2."""
    while True:
        raw = _ask(f"{title} (1. Yes, 2. No): ")
        try:
            return parse_choice(raw, 2) == 1
        except FormError:
            print("Invalid choice, pick 1 or 2.")


def category_form(categories: Optional[Sequence[str]] = None) -> str:
    categories = list(config.CATEGORIES if categories is None else categories)
    choice = print_menu("Category", [c.capitalize() for c in categories])
    return categories[choice - 1]


def comment_form(categories: Optional[Sequence[str]] = None) -> Tuple[str, str]:
    text = _ask("Comment: ")
    if not text:
        raise FormError("Comment must not be empty")
    return text, category_form(categories)


def id_form(label: str) -> int:
    raw = _ask(f"{label} id: ")
    try:
        return int(raw)
    except ValueError:
        raise FormError(f"'{raw}' is not a valid id") from None


def edit_user_form() -> Tuple[str, str]:
    """Blank answers keep the current values."""
    username = _ask("New username (blank to keep): ")
    password = _ask("New password (blank to keep): ")
    return username, password


def edit_comment_form(categories: Optional[Sequence[str]] = None) -> Tuple[str, str]:
    """Blank answers keep the current values. Category is typed, not picked, and not validated."""
    text = _ask("New comment (blank to keep): ")
    options = "/".join(config.CATEGORIES if categories is None else categories)
    category = _ask(f"New category [{options}] (blank to keep): ")
    return text, category


def search_form() -> str:
    return _ask("Search for: ")


def sort_form() -> str:
    """Returns ``"asc"`` or ``"desc"``."""
    choice = print_menu("Sort by id", ["Ascending", "Descending"])
    return "asc" if choice == 1 else "desc"
