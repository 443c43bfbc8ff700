import json
import logging
import uuid
from fastapi import Request

from foodlink.core.config import settings

logger = logging.getLogger("foodlink.api")


def configure_logging() -> None:
	logger.setLevel(settings.LOG_LEVEL)
	if logger.handlers:
		return
	handler = logging.StreamHandler()
	handler.setFormatter(logging.Formatter("%(message)s"))
	logger.addHandler(handler)


async def request_id_middleware(request: Request, call_next):
	request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
	request.state.request_id = request_id
	response = await call_next(request)
	response.headers["X-Request-Id"] = request_id
	return response


def log_event(event: str, **kwargs):
	"""Emit one JSON line per domain event; None values are dropped."""
	payload = {"event": event, **{k: v for k, v in kwargs.items() if v is not None}}
	logger.info(json.dumps(payload, ensure_ascii=False, default=str))
