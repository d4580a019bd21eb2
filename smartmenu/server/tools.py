import functools
import uuid
from collections.abc import Awaitable, Callable, Sequence
from typing import Annotated, Any

import anyio
import structlog
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import EmbeddedResource, TextContent
from pydantic import Field

from smartmenu.core.errors import (
    ExternalAPIError,
    InvariantError,
    ItemNotFoundError,
    MenuNotFoundError,
    invariant,
)
from smartmenu.core.logging import request_id_ctx, tool_name_ctx
from smartmenu.menu import items as menu_items
from smartmenu.menu import lookup
from smartmenu.menu.fetcher import fetch_all_menus
from smartmenu.menu.models import FilterOptions, Menu
from smartmenu.menu.tags import categorize_tags, get_all_tags
from smartmenu.server.formatting import (
    get_error_message,
    item_details,
    item_line,
    item_resource,
    json_resource,
    menu_overview,
    menu_resource,
    menu_summary,
    resource_uri,
    text_content,
)

logger = structlog.get_logger(__name__)

ToolContent = list[TextContent | EmbeddedResource]

MenuId = Annotated[int, Field(description="Numeric identifier of the menu")]
OptionalMenuId = Annotated[
    int | None,
    Field(description="Restrict to this menu; omit to use every menu"),
]
ExactMatch = Annotated[
    bool,
    Field(description="Require the whole name to match instead of a substring"),
]


def tool_boundary(
    func: Callable[..., Awaitable[ToolContent]],
) -> Callable[..., Awaitable[ToolContent]]:
    """Bind logging context for a tool call and turn failures into tool errors."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> ToolContent:
        request_token = request_id_ctx.set(uuid.uuid4().hex)
        tool_token = tool_name_ctx.set(func.__name__)
        logger.info("tool_call", arguments=kwargs)
        try:
            result = await func(*args, **kwargs)
        except (ExternalAPIError, MenuNotFoundError, ItemNotFoundError, InvariantError) as exc:
            logger.warning("tool_failed", error=str(exc), error_type=type(exc).__name__)
            raise ToolError(get_error_message(exc)) from exc
        except Exception as exc:
            logger.exception("tool_error", error_type=type(exc).__name__)
            raise ToolError(get_error_message(exc)) from exc
        else:
            logger.info("tool_succeeded", blocks=len(result))
            return result
        finally:
            tool_name_ctx.reset(tool_token)
            request_id_ctx.reset(request_token)

    return wrapper


async def _fetch_menus() -> list[Menu]:
    # requests blocks; keep the event loop free for other calls and pings
    return await anyio.to_thread.run_sync(fetch_all_menus)


def _require_menu(menus: Sequence[Menu], menu_id: int) -> Menu:
    menu = lookup.find_menu_by_id(menus, menu_id)
    if menu is None:
        raise MenuNotFoundError(f"Menu with ID {menu_id} not found")
    return menu


@tool_boundary
async def list_menus() -> ToolContent:
    menus = await _fetch_menus()
    if not menus:
        return [text_content("No menus available"), json_resource(resource_uri("menus"), [])]
    lines = [f"Found {len(menus)} menus:"]
    lines.extend(f"- {menu_summary(menu)}" for menu in menus)
    return [
        text_content("\n".join(lines)),
        json_resource(resource_uri("menus"), [menu_overview(menu) for menu in menus]),
    ]


@tool_boundary
async def get_menu_by_id(menu_id: MenuId) -> ToolContent:
    menu = _require_menu(await _fetch_menus(), menu_id)
    return [text_content(menu_summary(menu)), menu_resource(menu)]


@tool_boundary
async def find_menu_by_name(
    name: Annotated[str, Field(description="Menu name or part of it, case-insensitive")],
    exact_match: ExactMatch = False,
) -> ToolContent:
    menu = lookup.find_menu_by_name(await _fetch_menus(), name, exact_match)
    if menu is None:
        raise MenuNotFoundError(f"No menu found matching name '{name}'")
    return [text_content(menu_summary(menu)), menu_resource(menu)]


@tool_boundary
async def list_tags(
    menu_id: OptionalMenuId = None,
    categorized: Annotated[
        bool,
        Field(description="Group tags into dietary, allergens, course and special"),
    ] = False,
) -> ToolContent:
    menus = await _fetch_menus()
    if menu_id is not None:
        _require_menu(menus, menu_id)
        uri = resource_uri("menus", menu_id, "tags")
    else:
        uri = resource_uri("tags")
    tags = get_all_tags(menus, menu_id)

    if not categorized:
        text = f"Found {len(tags)} tags: {', '.join(tags)}" if tags else "No tags found"
        return [text_content(text), json_resource(uri, tags)]

    buckets = categorize_tags(tags)
    lines = [f"Found {len(tags)} tags:"]
    lines.extend(
        f"- {bucket}: {', '.join(values) if values else 'none'}"
        for bucket, values in buckets.items()
    )
    return [text_content("\n".join(lines)), json_resource(uri, buckets)]


@tool_boundary
async def get_dietary_options(menu_id: OptionalMenuId = None) -> ToolContent:
    menus = await _fetch_menus()
    if menu_id is not None:
        _require_menu(menus, menu_id)
    buckets = categorize_tags(get_all_tags(menus, menu_id))

    payload: dict[str, dict[str, list[dict[str, Any]]]] = {}
    lines: list[str] = []
    for bucket, title in (("dietary", "Dietary options"), ("allergens", "Allergens")):
        payload[bucket] = {}
        lines.append(f"{title}:")
        if not buckets[bucket]:
            lines.append("- none")
        for tag in buckets[bucket]:
            items = menu_items.filter_items(
                menus, FilterOptions(include_tags=[tag], menu_id=menu_id)
            )
            payload[bucket][tag] = [item.model_dump(by_alias=True) for item in items]
            names = ", ".join(item.name for item in items)
            lines.append(f"- {tag}: {len(items)} items ({names})")

    return [
        text_content("\n".join(lines)),
        json_resource(resource_uri("dietary-options"), payload),
    ]


@tool_boundary
async def get_item_details(
    identifier: Annotated[
        int | str,
        Field(
            description=(
                "Item id as a number (an all-digit string is also read as an id), "
                "or item name (or part of it) to search for"
            )
        ),
    ],
    exact_match: ExactMatch = False,
) -> ToolContent:
    if isinstance(identifier, str) and identifier.strip().isdecimal():
        identifier = int(identifier)
    item = menu_items.find_item_by_identifier(await _fetch_menus(), identifier, exact_match)
    if item is None:
        if isinstance(identifier, int):
            raise ItemNotFoundError(f"Item with ID {identifier} not found")
        raise ItemNotFoundError(f"No item found matching '{identifier}'")
    return [text_content(item_details(item)), item_resource(item)]


@tool_boundary
async def filter_items(
    include_tags: Annotated[
        list[str] | None,
        Field(description="Items must carry every one of these tags"),
    ] = None,
    exclude_tags: Annotated[
        list[str] | None,
        Field(description="Items must carry none of these tags"),
    ] = None,
    min_price: Annotated[float | None, Field(description="Minimum price, inclusive")] = None,
    max_price: Annotated[float | None, Field(description="Maximum price, inclusive")] = None,
    menu_id: OptionalMenuId = None,
    age_group: Annotated[
        str | None,
        Field(description="Exact age group, e.g. Adults or Kids"),
    ] = None,
) -> ToolContent:
    invariant(
        min_price is None or max_price is None or min_price <= max_price,
        lambda: f"min_price ({min_price}) cannot be greater than max_price ({max_price})",
    )
    options = FilterOptions(
        include_tags=include_tags,
        exclude_tags=exclude_tags,
        min_price=min_price,
        max_price=max_price,
        menu_id=menu_id,
        age_group=age_group,
    )
    menus = await _fetch_menus()
    if menu_id is not None:
        _require_menu(menus, menu_id)
    items = menu_items.filter_items(menus, options)

    if not items:
        return [text_content("No items match the given filters")]
    lines = [f"Found {len(items)} items:"]
    lines.extend(f"- {item_line(item)}" for item in items)
    return [text_content("\n".join(lines)), *(item_resource(item) for item in items)]


TOOLS: dict[str, tuple[Callable[..., Awaitable[ToolContent]], str]] = {
    "list_menus": (
        list_menus,
        "List every available restaurant menu with cuisine, rating and availability",
    ),
    "get_menu_by_id": (
        get_menu_by_id,
        "Get a complete menu, including categories and items, by its numeric id",
    ),
    "find_menu_by_name": (
        find_menu_by_name,
        "Find a menu by name, either an exact or a partial case-insensitive match",
    ),
    "list_tags": (
        list_tags,
        "List the unique item tags of one menu or of all menus, optionally grouped",
    ),
    "get_dietary_options": (
        get_dietary_options,
        "List dietary and allergen tags together with the items carrying each tag",
    ),
    "get_item_details": (
        get_item_details,
        "Get the details of a single menu item by id or by name",
    ),
    "filter_items": (
        filter_items,
        "Filter menu items by required tags, excluded tags, price range, age group or menu",
    ),
}


def register_tools(mcp: FastMCP) -> None:
    for name, (func, description) in TOOLS.items():
        mcp.tool(name=name, description=description, structured_output=False)(func)
