"""
Error and response helpers shared by the movie handlers
"""
import functools
import json
import logging
import os
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional


def log_level(name):
    level = logging.getLevelName((name or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger()
logger.setLevel(log_level(os.environ.get("LOG_LEVEL")))

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
}


class ErrorKind(str, Enum):
    VALIDATION = "ValidationError"
    # Never surfaced to callers: absence is reported as an empty result
    NOT_FOUND = "NotFound"
    BACKEND = "BackendError"


class APIError(Exception):
    """Base exception for errors that become a structured response"""

    def __init__(self, kind: ErrorKind, message: str, status_code: int):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(APIError):
    """Raised when a request parameter is missing or malformed"""

    def __init__(self, message: str):
        super().__init__(ErrorKind.VALIDATION, message, 400)


class BackendError(APIError):
    """Raised when the table store cannot serve the request"""

    def __init__(self, message: str = "Internal backend error"):
        super().__init__(ErrorKind.BACKEND, message, 500)


def to_json_safe(obj):
    # boto3's resource layer hands back every number as a Decimal
    if isinstance(obj, list):
        return [to_json_safe(v) for v in obj]
    if isinstance(obj, dict):
        return {k: to_json_safe(v) for k, v in obj.items()}
    if isinstance(obj, Decimal):
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    if isinstance(obj, set):
        return [to_json_safe(v) for v in sorted(obj)]
    return obj


def respond(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(to_json_safe(body)),
    }


def success_response(data: Any) -> Dict[str, Any]:
    return respond(200, {"data": data})


def expose_error_details() -> bool:
    return os.environ.get("EXPOSE_ERROR_DETAILS", "false").lower() in ("1", "true", "yes")


def error_response(error: APIError, detail: Optional[str] = None) -> Dict[str, Any]:
    payload = {"kind": error.kind.value, "message": error.message}
    if detail and expose_error_details():
        payload["detail"] = detail
    return respond(error.status_code, {"error": payload})


def handle_errors(func):
    """
    Decorator for Lambda handlers.

    APIError subclasses become their own status code. Anything else,
    botocore ClientError included, is logged in full and reported as a
    redacted BackendError.
    """

    @functools.wraps(func)
    def wrapper(event, context, *args, **kwargs):
        try:
            return func(event, context, *args, **kwargs)
        except ValidationError as e:
            logger.info("Rejected request: %s", e.message)
            return error_response(e)
        except APIError as e:
            logger.error("Request failed: %s", e.message)
            return error_response(e)
        except Exception as e:
            logger.exception("Backend failure")
            return error_response(BackendError(), detail=str(e))

    return wrapper
