import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette import status

from foodlink.core.logging import log_event

logger = logging.getLogger("foodlink.api")


class AppError(Exception):
	status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

	def __init__(self, message: str, status_code: int | None = None, details=None):
		super().__init__(message)
		self.message = message
		self.details = details
		if status_code is not None:
			self.status_code = status_code


class ValidationError(AppError):
	status_code = status.HTTP_400_BAD_REQUEST


class NotFound(AppError):
	status_code = status.HTTP_404_NOT_FOUND


class Conflict(AppError):
	# Duplicate registrations and writes against claimed donations.
	status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(AppError):
	status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentials(AppError):
	status_code = status.HTTP_403_FORBIDDEN


def error_response(request: Request, status_code: int, message: str, details=None):
	# Ensure details is serializable
	if isinstance(details, Exception):
		details = str(details)
	return JSONResponse(
		status_code=status_code,
		content={
			"error": {
				"message": message,
				"details": jsonable_encoder(details),
				"request_id": getattr(request.state, "request_id", None),
			}
		},
	)

async def app_error_handler(request: Request, exc: AppError):
	return error_response(request, exc.status_code, exc.message, details=exc.details)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
	return error_response(
		request,
		status.HTTP_400_BAD_REQUEST,
		"Validation error",
		details=exc.errors(),
	)

async def unhandled_exception_handler(request: Request, exc: Exception):
	request_id = getattr(request.state, "request_id", None)
	logger.exception("Unhandled error on %s %s", request.method, request.url.path)
	log_event("unhandled_error", path=request.url.path, error=type(exc).__name__, request_id=request_id)
	response = error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
	# Runs outside request_id_middleware, so the header is not added there.
	if request_id:
		response.headers["X-Request-Id"] = request_id
	return response
