"""
Centralized Error Handling and Logging System
Sole translation point from internal error kinds to HTTP responses, plus
one structured log line per request.
"""

import json
import logging
import time
import traceback
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from contextvars import ContextVar

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from users_api.utils.errors import NotFoundError, StoreError, UsersServiceError, ValidationError

# Context variable for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("users_api.access")


class ErrorHandlingConfig:
    """Centralized configuration for error handling behavior"""

    # Security settings
    SANITIZE_SENSITIVE_FIELDS = True
    SENSITIVE_FIELD_PATTERNS = [
        'password', 'token', 'key', 'secret', 'authorization',
        'auth', 'bearer', 'credential', 'cookie'
    ]

    # Logging settings
    LOG_REQUEST_BODIES = True
    LOG_HEADERS = True
    MAX_BODY_LOG_SIZE = 5000

    # Error response settings
    INCLUDE_TRACE_ID = True
    INCLUDE_TIMESTAMP = True

    @classmethod
    def is_sensitive_field(cls, field_name: str) -> bool:
        """Check if a field contains sensitive data"""
        field_lower = field_name.lower()
        return any(pattern in field_lower for pattern in cls.SENSITIVE_FIELD_PATTERNS)

    @classmethod
    def sanitize_data(cls, data: Union[Dict, str, Any]) -> Any:
        """Recursively sanitize sensitive data from logs"""
        if not cls.SANITIZE_SENSITIVE_FIELDS:
            return data

        if isinstance(data, dict):
            return {
                key: "***REDACTED***" if cls.is_sensitive_field(key) else cls.sanitize_data(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [cls.sanitize_data(item) for item in data]
        elif isinstance(data, str) and len(data) > cls.MAX_BODY_LOG_SIZE:
            return data[:cls.MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
        else:
            return data


def _current_trace_id(request: Optional[Request] = None) -> str:
    if request is not None:
        trace_id = getattr(request.state, 'trace_id', None)
        if trace_id:
            return trace_id
    return request_id_var.get('') or str(uuid.uuid4())[:8]


def _captured_body(request: Request) -> Optional[str]:
    body = getattr(request.state, 'captured_body', None)
    if not body:
        return None
    try:
        return ErrorHandlingConfig.sanitize_data(body.decode('utf-8'))
    except UnicodeDecodeError:
        return "DECODE_ERROR"


class StructuredLogger:
    """Structured logging with consistent format and context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[BaseException] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True,
        level: int = logging.ERROR
    ) -> str:
        """Log structured error with full context"""
        trace_id = _current_trace_id(request)

        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": logging.getLevelName(level)
        }

        if request:
            headers = dict(request.headers)
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "headers": ErrorHandlingConfig.sanitize_data(headers) if ErrorHandlingConfig.LOG_HEADERS else {},
                "client_ip": request.client.host if request.client else None
            }
            if ErrorHandlingConfig.LOG_REQUEST_BODIES:
                log_entry["request"]["body"] = _captured_body(request)

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
                "module": getattr(exception, '__module__', 'unknown')
            }
            if exception.__cause__ is not None:
                log_entry["exception"]["cause"] = repr(exception.__cause__)
            if include_traceback:
                log_entry["exception"]["traceback"] = "".join(
                    traceback.format_exception(type(exception), exception, exception.__traceback__)
                )

        if extra_context:
            log_entry["context"] = ErrorHandlingConfig.sanitize_data(extra_context)

        logger.log(level, json.dumps(log_entry, default=str))
        return trace_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a trace id and writes one access log line per request"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)
        request.state.trace_id = trace_id

        body = None
        if ErrorHandlingConfig.LOG_REQUEST_BODIES and request.method in ("POST", "PUT"):
            body = await request.body()
        request.state.captured_body = body

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Trace-ID"] = trace_id
            return response
        except Exception as e:
            StructuredLogger.log_error(
                "unhandled_exception",
                f"Unhandled exception in request processing: {str(e)}",
                request=request,
                exception=e
            )
            raise
        finally:
            access_logger.info(json.dumps({
                "trace_id": trace_id,
                "method": request.method,
                "path": request.url.path,
                "status": status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2)
            }))


def _error_response(status_code: int, error: str, message: str, trace_id: str,
                    detail: Optional[List[Dict[str, Any]]] = None) -> JSONResponse:
    content = {
        "error": error,
        "message": message,
    }
    if detail is not None:
        content["detail"] = detail
    if ErrorHandlingConfig.INCLUDE_TRACE_ID:
        content["trace_id"] = trace_id
    if ErrorHandlingConfig.INCLUDE_TIMESTAMP:
        content["timestamp"] = datetime.utcnow().isoformat()
    return JSONResponse(status_code=status_code, content=content)


# Global Exception Handlers
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation failures as 400 with field detail"""
    validation_details = []
    for error in exc.errors():
        validation_details.append({
            "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "unknown")
        })

    trace_id = StructuredLogger.log_error(
        "validation_error_400",
        f"Request validation failed: {len(validation_details)} validation errors",
        request=request,
        extra_context={"validation_errors": validation_details},
        include_traceback=False,
        level=logging.WARNING
    )

    return _error_response(400, "Validation Error", "Request validation failed", trace_id, validation_details)


async def users_service_exception_handler(request: Request, exc: UsersServiceError) -> JSONResponse:
    """Map the internal error taxonomy to HTTP status codes"""
    if isinstance(exc, ValidationError):
        trace_id = StructuredLogger.log_error(
            "validation_error_400", exc.message, request=request,
            include_traceback=False, level=logging.WARNING
        )
        return _error_response(400, "Validation Error", exc.message, trace_id, exc.details)

    if isinstance(exc, NotFoundError):
        trace_id = StructuredLogger.log_error(
            "not_found_404", str(exc), request=request,
            include_traceback=False, level=logging.INFO
        )
        return _error_response(404, "Not Found", str(exc), trace_id)

    # StoreError and anything else below the HTTP layer: log everything, leak nothing
    error_type = "store_error" if isinstance(exc, StoreError) else "service_error"
    trace_id = StructuredLogger.log_error(error_type, str(exc), request=request, exception=exc)
    return _error_response(500, "Internal Server Error", "An unexpected error occurred", trace_id)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions raised by routes or the framework"""
    trace_id = _current_trace_id(request)
    if exc.status_code >= 500:
        trace_id = StructuredLogger.log_error(
            f"http_{exc.status_code}", f"HTTP {exc.status_code}: {exc.detail}",
            request=request, exception=exc, include_traceback=False
        )

    response = _error_response(exc.status_code, f"HTTP {exc.status_code}", str(exc.detail), trace_id)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions"""
    trace_id = StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {str(exc)}",
        request=request,
        exception=exc
    )
    return _error_response(500, "Internal Server Error", "An unexpected error occurred", trace_id)


def setup_error_handling(app):
    """Setup error handling and request logging for the FastAPI app"""
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(UsersServiceError, users_service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling system initialized")
