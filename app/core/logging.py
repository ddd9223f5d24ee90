from __future__ import annotations

import json
import logging
import sys
from contextlib import AbstractContextManager
from typing import Any

import structlog
from structlog.contextvars import bound_contextvars, get_contextvars, merge_contextvars

# Raw (non-JSON) bodies are cut to this many characters in request logs
MAX_LOGGED_TEXT = 1000


def _add_service(service: str) -> structlog.typing.Processor:
    def processor(_: logging.Logger, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service)
        return event_dict

    return processor


def _rename_event_to_message(_: logging.Logger, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_logging(level: str = "INFO", service: str = "menu-api") -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.add_log_level,
            _add_service(service),
            _rename_event_to_message,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def request_context(request_id: str, method: str, path: str) -> AbstractContextManager:
    """Bind the request's id, method and path to every event logged inside it."""
    return bound_contextvars(request_id=request_id, method=method, path=path)


def current_request_id() -> str | None:
    return get_contextvars().get("request_id")


def body_for_log(body: bytes) -> Any:
    """Decode a request body for logging: parsed JSON, else (truncated) text."""
    if not body:
        return None
    text = body.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text[:MAX_LOGGED_TEXT]
