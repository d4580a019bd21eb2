from __future__ import annotations

from collections.abc import Sequence

from smartmenu.menu.models import Menu


def name_matches(candidate: str, query: str, exact_match: bool) -> bool:
    candidate = candidate.lower()
    query = query.lower()
    if exact_match:
        return candidate == query
    return query in candidate


def find_menu_by_name(menus: Sequence[Menu], name: str, exact_match: bool = False) -> Menu | None:
    """Return the first menu whose name matches ``name`` case-insensitively."""
    for menu in menus:
        if name_matches(menu.name, name, exact_match):
            return menu
    return None


def find_menu_by_id(menus: Sequence[Menu], menu_id: int) -> Menu | None:
    for menu in menus:
        if menu.id == menu_id:
            return menu
    return None
