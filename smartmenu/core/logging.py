from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
tool_name_ctx: ContextVar[str | None] = ContextVar("tool_name", default=None)


def _add_context_fields(_: Any, __: str, event_dict: EventDict) -> EventDict:
    event_dict["request_id"] = request_id_ctx.get()
    event_dict["tool"] = tool_name_ctx.get()
    return event_dict


def _rename_event_to_message(_: Any, __: str, event_dict: EventDict) -> EventDict:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def _render_json(_: Any, __: str, event_dict: EventDict) -> str:
    return json.dumps(event_dict, ensure_ascii=False, default=str)


def _processors() -> list[Processor]:
    return [
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.processors.add_log_level,
        _add_context_fields,
        _rename_event_to_message,
        structlog.processors.format_exc_info,
        _render_json,
    ]


def configure_logging(level: str = "INFO") -> None:
    """Emit one JSON object per line on stderr.

    stdout is reserved for the MCP stdio stream, so nothing may log there.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    structlog.configure(
        processors=_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
