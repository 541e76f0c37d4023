import logging
import re
from collections.abc import Awaitable, Callable

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from travel_booking.api.schemas import ErrorResponseDTO
from travel_booking.domain.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_EMAIL = re.compile(r"([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*@([A-Za-z0-9.-]+\.[A-Za-z]{2,})")
_CARD_NUMBER = re.compile(r"\b\d{12,19}\b")
# "<card>|<MM/YY>|<cvv>" as accepted in payment_details.
_CARD_DETAILS = re.compile(r"\b\d{12,19}\|\d{2}/\d{2}\|\d{3,4}\b")
_SECRET_ASSIGNMENT = re.compile(r"(?i)(cvv|password|token|secret|payment_details)\s*[:=]\s*[^,\s]+")


def mask_error_detail(text: str) -> str:
    """Strip card data, emails and secrets from a message before it leaves the process."""
    masked = _CARD_DETAILS.sub("****MASKED_CARD****", text)
    masked = _CARD_NUMBER.sub("****MASKED_CARD****", masked)
    masked = _EMAIL.sub(r"\1***@\2", masked)
    return _SECRET_ASSIGNMENT.sub(r"\1=***", masked)


def error_response(status_code: int, *, error: str, message: str, code: str) -> JSONResponse:
    body = ErrorResponseDTO(error=error, message=message, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def validation_error_response(exc: RequestValidationError) -> JSONResponse:
    fields = sorted(
        {".".join(str(part) for part in error.get("loc", ())[1:]) for error in exc.errors()} - {""}
    )
    message = "Request validation failed"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return error_response(422, error="Validation error", message=message, code="VALIDATION_ERROR")


def _log_api_error(kind: str, request: Request, exc: Exception) -> None:
    logger.exception(
        "api_error type=%s method=%s path=%s detail=%s",
        kind,
        request.method,
        request.url.path,
        mask_error_detail(str(exc)),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn uncaught exceptions into `ErrorResponseDTO` bodies.

    `InvalidArgumentError` and other `ValueError`s raised by the booking and
    payment services become 400 with the (masked) reason; anything else is a
    500 without details.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except ValueError as exc:
            kind = "invalid_argument" if isinstance(exc, InvalidArgumentError) else "business_error"
            _log_api_error(kind, request, exc)
            return error_response(
                400,
                error="Bad request",
                message=mask_error_detail(str(exc)) or "Business rule validation failed",
                code="BUSINESS_LOGIC_ERROR",
            )
        except Exception as exc:
            _log_api_error("unexpected_error", request, exc)
            return error_response(
                500,
                error="Internal server error",
                message="Unable to process request. Please try again later.",
                code="INTERNAL_ERROR",
            )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    _log_api_error("validation_error", request, exc)
    return validation_error_response(exc)
