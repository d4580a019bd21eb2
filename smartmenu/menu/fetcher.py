from __future__ import annotations

import requests
import structlog
from pydantic import TypeAdapter, ValidationError

from smartmenu.core.config import settings
from smartmenu.core.errors import FetchError
from smartmenu.core.retry import retryable
from smartmenu.menu.models import Menu

logger = structlog.get_logger(__name__)

_MENU_LIST = TypeAdapter(list[Menu])


@retryable("menu_api")
def _get_menus_response(url: str, timeout: float) -> requests.Response:
    response = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout)
    if not 200 <= response.status_code < 300:
        raise FetchError(
            f"Menu API error {response.status_code}: {response.text}",
            status_code=response.status_code,
        )
    return response


def fetch_all_menus(
    url: str | None = None,
    *,
    timeout: float | None = None,
) -> list[Menu]:
    """
    Fetch the complete menu dataset from the remote menu API.

    Args:
        url: Endpoint returning a JSON array of menus (default: settings.menu_api_url)
        timeout: Request timeout in seconds (default: settings.menu_api_timeout)

    Returns:
        Menus in the order the endpoint returned them

    Raises:
        FetchError: If the request fails, the status is not 2xx, or the body
            is not a JSON array of menu records
    """
    url = url or settings.menu_api_url
    timeout = timeout if timeout is not None else settings.menu_api_timeout

    logger.debug("menu_fetch_started", url=url)
    try:
        response = _get_menus_response(url, timeout)
    except FetchError as exc:
        logger.warning("menu_fetch_failed", url=url, status_code=exc.status_code)
        raise
    except requests.RequestException as exc:
        logger.warning("menu_fetch_failed", url=url, reason=str(exc))
        raise FetchError(f"Failed to fetch menus: {exc}") from exc

    try:
        data = response.json()
    except ValueError as exc:
        logger.warning("menu_fetch_invalid_json", url=url)
        raise FetchError("Menu API returned invalid JSON") from exc

    try:
        menus = _MENU_LIST.validate_python(data)
    except ValidationError as exc:
        logger.warning("menu_fetch_invalid_shape", url=url, errors=exc.error_count())
        raise FetchError(f"Menu API returned malformed menu data: {exc}") from exc

    logger.debug("menu_fetch_succeeded", url=url, menus=len(menus))
    return menus
