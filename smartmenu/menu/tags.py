from __future__ import annotations

from collections.abc import Iterable, Sequence

from smartmenu.menu.lookup import find_menu_by_id
from smartmenu.menu.models import Menu

TAG_CATEGORIES: tuple[str, ...] = ("dietary", "allergens", "course", "special")

# Lowercase tag -> bucket; anything missing lands in "special"
TAG_CATEGORY_BY_TAG: dict[str, str] = {
    "vegetarian": "dietary",
    "vegan": "dietary",
    "gluten-free": "dietary",
    "seafood": "allergens",
    "starter": "course",
    "dessert": "course",
}


def get_all_tags(menus: Sequence[Menu], menu_id: int | None = None) -> list[str]:
    """Collect the unique tags of one menu, or of every menu, sorted."""
    if menu_id is not None:
        menu = find_menu_by_id(menus, menu_id)
        scope = [menu] if menu is not None else []
    else:
        scope = list(menus)

    tags: set[str] = set()
    for menu in scope:
        for category in menu.categories:
            for item in category.items:
                tags.update(item.tags)
    return sorted(tags)


def tag_category(tag: str) -> str:
    return TAG_CATEGORY_BY_TAG.get(tag.lower(), "special")


def categorize_tags(tags: Iterable[str]) -> dict[str, list[str]]:
    categorized: dict[str, list[str]] = {name: [] for name in TAG_CATEGORIES}
    for tag in tags:
        categorized[tag_category(tag)].append(tag)
    return categorized
