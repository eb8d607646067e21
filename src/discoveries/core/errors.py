"""Structured request errors and their HTTP translation."""

import logging
from enum import Enum

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """Error codes surfaced to API callers."""

    INVALID_INPUT = "INVALID_INPUT"
    OPERATION_FORBIDDEN = "OPERATION_FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


ERROR_STATUS_CODES = {
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.OPERATION_FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.UNKNOWN_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class FailedRequestError(Exception):
    """Raised when a request cannot be fulfilled, carrying a code and a user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def status_code(self) -> int:
        return ERROR_STATUS_CODES[self.code]

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


async def failed_request_handler(request: Request, exc: FailedRequestError) -> JSONResponse:
    if exc.code is ErrorCode.UNKNOWN_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"errorCode": exc.code.value, "message": exc.message},
    )
