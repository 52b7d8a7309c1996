"""Terminal rendering: title boxes, breadcrumbs, numbered menus and record tables."""
from __future__ import annotations

import textwrap
from typing import Iterable, List, Sequence

from sentiment.errors import FormError
from sentiment.models import Comment, User

TITLE_WIDTH = 38
BORDER = "=" * (TITLE_WIDTH + 4)


def wrap_title(title: str, width: int = TITLE_WIDTH) -> List[str]:
    """Split a title into lines of at most ``width`` characters, breaking at spaces.

    Titles that need wrapping lose the spaces at each line break, so a run of
    spaces there does not carry over to the next line. Titles that fit on one
    line are printed as given.
    """
    if len(title) <= width:
        return [title]
    return textwrap.wrap(title, width=width, break_long_words=True, break_on_hyphens=False)


def centered_line(text: str, width: int = TITLE_WIDTH) -> str:
    """``= text =`` padded to ``width``. Odd-length text gets the extra space on the right."""
    left = (width - len(text)) // 2
    right = width - len(text) - left
    return f"= {' ' * left}{text}{' ' * right} ="


def print_title(title: str) -> None:
    print(BORDER)
    for line in wrap_title(title):
        print(centered_line(line))
    print(BORDER)


def print_breadcrumbs(links: Sequence[str]) -> None:
    print(" > ".join(["Main Menu", *links]))


def parse_choice(raw: str, n: int) -> int:
    """Parse a 1-based menu choice."""
    try:
        choice = int(raw.strip())
    except ValueError:
        raise FormError(f"Invalid choice, pick a number between 1 and {n}") from None
    if choice < 1 or choice > n:
        raise FormError(f"Invalid choice, pick a number between 1 and {n}")
    return choice


def print_menu(menu_title: str, options: Sequence[str]) -> int:
    """Print numbered options and read a choice until it is valid. EOFError propagates."""
    for i, option in enumerate(options, start=1):
        print(f"{i}. {option}")
    while True:
        raw = input(f"{menu_title} (1-{len(options)}): ")
        try:
            return parse_choice(raw, len(options))
        except FormError as e:
            print(e)


def print_users(users: Iterable[User]) -> None:
    users = list(users)
    if not users:
        print("No users.")
        return
    print(f"{'ID':>4}  {'Username':<24}")
    for u in users:
        print(f"{u.id:>4}  {u.username:<24}")


def print_comments(comments: Iterable[Comment]) -> None:
    comments = list(comments)
    if not comments:
        print("No comments.")
        return
    print(f"{'ID':>4}  {'Author':>6}  {'Category':<9}  Comment")
    for c in comments:
        print(f"{c.id:>4}  {c.author_id:>6}  {c.category:<9}  {c.text}")


def print_category_counts(counts: dict) -> None:
    for category, count in counts.items():
        print(f"{category.capitalize():<9}: {count}")
