from __future__ import annotations

from collections.abc import Iterator, Sequence

from smartmenu.menu.lookup import find_menu_by_id, name_matches
from smartmenu.menu.models import FilterOptions, Item, Menu


def iter_items(menus: Sequence[Menu]) -> Iterator[Item]:
    for menu in menus:
        for category in menu.categories:
            yield from category.items


def find_item_by_identifier(
    menus: Sequence[Menu],
    identifier: int | str,
    exact_match: bool = False,
) -> Item | None:
    """
    Find a single item across all menus.

    An integer identifier is compared against item ids; a string is compared
    against item names, case-insensitively, either for equality or for
    containment. The first item in menu, category, item order wins.
    """
    for item in iter_items(menus):
        if isinstance(identifier, int):
            if item.id == identifier:
                return item
        elif name_matches(item.name, identifier, exact_match):
            return item
    return None


def _matches(item: Item, options: FilterOptions) -> bool:
    if options.min_price is not None and item.price < options.min_price:
        return False
    if options.max_price is not None and item.price > options.max_price:
        return False
    if options.age_group is not None and item.age_group != options.age_group:
        return False
    tags = set(item.tags)
    if options.include_tags and not tags.issuperset(options.include_tags):
        return False
    if options.exclude_tags and not tags.isdisjoint(options.exclude_tags):
        return False
    return True


def filter_items(menus: Sequence[Menu], options: FilterOptions | None = None) -> list[Item]:
    options = options or FilterOptions()
    if options.menu_id is not None:
        menu = find_menu_by_id(menus, options.menu_id)
        menus = [menu] if menu is not None else []
    return [item for item in iter_items(menus) if _matches(item, options)]
