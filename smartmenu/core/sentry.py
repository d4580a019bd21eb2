from __future__ import annotations

from typing import Any

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from smartmenu.core.config import settings
from smartmenu.core.logging import request_id_ctx, tool_name_ctx


def before_send(event: dict[str, Any], hint: dict[str, Any]) -> dict[str, Any] | None:
    """Tag Sentry events with the tool call they were raised from."""
    tool_name = tool_name_ctx.get()
    request_id = request_id_ctx.get()
    if tool_name:
        event.setdefault("tags", {})["tool"] = tool_name
    if request_id:
        event.setdefault("tags", {})["request_id"] = request_id
    return event


def init_sentry() -> None:
    """Initialize Sentry error tracking when a DSN is configured."""
    if not settings.sentry_dsn:
        return

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment or settings.environment,
        integrations=[
            LoggingIntegration(
                level=None,  # Capture all log levels
                event_level=None,  # Don't create events from logs
            ),
        ],
        traces_sample_rate=0.0,
        before_send=before_send,
        send_default_pii=False,
        attach_stacktrace=True,
        max_breadcrumbs=50,
    )

    sentry_sdk.set_tag("service", settings.app_name)
    sentry_sdk.set_tag("environment", settings.environment)
