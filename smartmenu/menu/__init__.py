from smartmenu.menu.fetcher import fetch_all_menus
from smartmenu.menu.items import filter_items, find_item_by_identifier, iter_items
from smartmenu.menu.lookup import find_menu_by_id, find_menu_by_name
from smartmenu.menu.models import Category, FilterOptions, Item, Menu
from smartmenu.menu.tags import categorize_tags, get_all_tags

__all__ = [
    "Category",
    "FilterOptions",
    "Item",
    "Menu",
    "categorize_tags",
    "fetch_all_menus",
    "filter_items",
    "find_item_by_identifier",
    "find_menu_by_id",
    "find_menu_by_name",
    "get_all_tags",
    "iter_items",
]
