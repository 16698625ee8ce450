"""
Panes — Synthetic Data Provider

Produces the candidate lists every pane is built from:
1. Service lists per category (`{prefix}-Service-{i}`)
2. Owner combo items (`Owner-{i}`)
3. History combo items (`{year}-{month}-{day}` buckets)

Labels are generated lazily and filtered while streaming, so a large
category is never materialized twice.
"""
from typing import Iterable, Iterator, Optional

from panes.models import Category, ComboName


# (label prefix, list size) per category
CATEGORY_SPECS: dict[Category, tuple[str, int]] = {
    Category.OWNER: ("Genutzter", 21845),
    Category.USER: ("Eigener", 20),
    Category.VISIBLE: ("Nutzbarer", 0),
    Category.SEARCH: ("Gesuchter", 5),
}


def matching(labels: Iterable[str], search: str = "") -> Iterator[str]:
    """Keep labels containing `search`, case-insensitively, in order."""
    needle = search.lower()
    for label in labels:
        if needle in label.lower():
            yield label


def iter_service_labels(category: Optional[Category], limit: Optional[int] = None) -> Iterator[str]:
    if category is None:
        return iter(())
    prefix, size = CATEGORY_SPECS[category]
    if limit is not None:
        size = max(limit, 0)
    return (f"{prefix}-Service-{i}" for i in range(1, size + 1))


def category_size(category: Optional[Category]) -> int:
    if category is None:
        return 0
    return CATEGORY_SPECS[category][1]


def list_for(category: Optional[Category], search: str = "", limit: Optional[int] = None) -> tuple[str, ...]:
    """Service identifiers for a category, optionally filtered by search text.

    `limit` replaces the category's configured size. An unknown category
    (None) yields an empty list.
    """
    return tuple(matching(iter_service_labels(category, limit), search))


def owner_list(n: int, search: str = "") -> tuple[str, ...]:
    return tuple(matching((f"Owner-{i}" for i in range(1, n + 1)), search))


def history_list(n: int, search: str = "", base_year: int = 2025) -> tuple[str, ...]:
    labels = (
        f"{base_year - i}-{(i % 12) + 1}-{(i % 30) + 1}"
        for i in range(n)
    )
    return tuple(matching(labels, search))


def combo_items(name: Optional[ComboName], search: str, settings) -> tuple[str, ...]:
    """Candidate list for a combo widget; unknown widgets have none."""
    if name is ComboName.OWNER:
        return owner_list(settings.OWNER_COMBO_SIZE, search)
    if name is ComboName.HISTORY:
        return history_list(settings.HISTORY_COMBO_SIZE, search, settings.HISTORY_BASE_YEAR)
    return ()
