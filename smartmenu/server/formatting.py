from __future__ import annotations

import json
from typing import Any

import structlog
from mcp.types import EmbeddedResource, TextContent, TextResourceContents

from smartmenu.menu.models import Item, Menu

logger = structlog.get_logger(__name__)

RESOURCE_SCHEME = "smartmenu"
JSON_MIME_TYPE = "application/json"
DEFAULT_ERROR_MESSAGE = "Unknown Error"


def resource_uri(*parts: object) -> str:
    return f"{RESOURCE_SCHEME}://" + "/".join(str(part) for part in parts)


def text_content(text: str) -> TextContent:
    return TextContent(type="text", text=text)


def json_resource(uri: str, payload: Any) -> EmbeddedResource:
    return EmbeddedResource(
        type="resource",
        resource=TextResourceContents(
            uri=uri,
            mimeType=JSON_MIME_TYPE,
            text=json.dumps(payload, ensure_ascii=False, indent=2),
        ),
    )


def menu_overview(menu: Menu) -> dict[str, Any]:
    overview = menu.model_dump(by_alias=True, exclude={"categories"})
    overview["categories"] = [category.name for category in menu.categories]
    return overview


def menu_resource(menu: Menu) -> EmbeddedResource:
    return json_resource(resource_uri("menus", menu.id), menu.model_dump(by_alias=True))


def item_resource(item: Item) -> EmbeddedResource:
    return json_resource(resource_uri("items", item.id), item.model_dump(by_alias=True))


def menu_summary(menu: Menu) -> str:
    item_count = sum(len(category.items) for category in menu.categories)
    summary = (
        f"{menu.name} (id {menu.id}): {menu.cuisine}, rated {menu.rating} "
        f"from {menu.num_ratings} ratings, {item_count} items "
        f"in {len(menu.categories)} categories"
    )
    if menu.available_times:
        summary += f", available {', '.join(menu.available_times)}"
    return summary


def item_line(item: Item) -> str:
    line = f"{item.name} (id {item.id}): ${item.price:.2f}, {item.age_group}"
    if item.tags:
        line += f" [{', '.join(item.tags)}]"
    return line


def item_details(item: Item) -> str:
    lines = [
        item_line(item),
        f"Rating: {item.rating}",
    ]
    if item.description:
        lines.append(item.description)
    return "\n".join(lines)


def get_error_message(error: BaseException | str, default: str = DEFAULT_ERROR_MESSAGE) -> str:
    """Return a user-facing message for ``error``, or ``default`` when it has none."""
    if isinstance(error, str):
        return error or default
    message = str(error)
    if message:
        return message
    logger.debug("error_without_message", error_type=type(error).__name__)
    return default
