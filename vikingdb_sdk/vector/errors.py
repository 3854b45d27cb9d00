# vikingdb_sdk/vector/errors.py
# SPDX-License-Identifier: Apache-2.0
"""
Normalized VikingDB error type.

Every failure that leaves the SDK is a `VikingDBError`: construction-time
validation, request serialization, network failures, non-2xx responses and
JSON decoding problems alike. Callers branch on `code` (an `ErrorCode`, or the
raw string when the service returns a code this SDK does not know yet) and
`status_code`.

    try:
        await collection.upsert(req)
    except VikingDBError as exc:
        if exc.code is ErrorCode.COLLECTION_NOT_EXISTS:
            ...
        elif is_retryable_error(exc):
            ...
"""
from __future__ import annotations

import enum
from typing import Any, Dict, Optional, Union


class ErrorCode(str, enum.Enum):
    """Error codes shared with the VikingDB service."""

    # HTTP layer
    HTTP_REQUEST_FAILED = "HTTPRequestFailed"

    # Generic
    UNKNOWN = "Unknown"
    INVALID_PARAMETER = "InvalidParameter"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    TIMEOUT = "Timeout"
    REQUEST_LIMIT_EXCEEDED = "RequestLimitExceeded"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"

    # Client side: the caller's deadline expired before the call finished.
    DEADLINE_EXCEEDED = "DeadlineExceeded"

    # Collection
    COLLECTION_NOT_EXISTS = "CollectionNotExists"
    COLLECTION_ALREADY_EXISTS = "CollectionAlreadyExists"
    COLLECTION_CREATE_FAILED = "CollectionCreateFailed"
    COLLECTION_UPDATE_FAILED = "CollectionUpdateFailed"
    COLLECTION_DELETE_FAILED = "CollectionDeleteFailed"

    # Data
    DATA_INSERT_FAILED = "DataInsertFailed"
    DATA_UPDATE_FAILED = "DataUpdateFailed"
    DATA_DELETE_FAILED = "DataDeleteFailed"
    DATA_NOT_FOUND = "DataNotFound"

    # Search
    SEARCH_FAILED = "SearchFailed"
    INDEX_NOT_EXISTS = "IndexNotExists"

    # Embedding
    EMBEDDING_FAILED = "EmbeddingFailed"
    MODEL_NOT_FOUND = "ModelNotFound"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: Union["ErrorCode", str, None]) -> Union["ErrorCode", str]:
        """Map a wire code onto the enum, keeping unknown codes verbatim."""
        if isinstance(raw, ErrorCode):
            return raw
        if not raw:
            return cls.UNKNOWN
        try:
            return cls(raw)
        except ValueError:
            return raw


# Status used for client-side deadline expiry ("client closed request").
STATUS_CLIENT_CLOSED_REQUEST = 499

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})
RETRYABLE_ERROR_CODES = frozenset(
    {
        ErrorCode.SERVICE_UNAVAILABLE,
        ErrorCode.TIMEOUT,
        ErrorCode.REQUEST_LIMIT_EXCEEDED,
    }
)


class VikingDBError(Exception):
    """
    The single error type surfaced by the SDK.

    Attributes:
        code:        ErrorCode (or raw service code string)
        message:     Human-readable description
        status_code: HTTP status returned by the service, or the status the
                     SDK assigns to client-side failures
        request_id:  Server-side request identifier, when known
        cause:       Lower-level exception that triggered this error, if any
    """

    def __init__(
        self,
        code: Union[ErrorCode, str, None],
        message: str = "",
        *,
        status_code: int = 500,
        request_id: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.code = ErrorCode.parse(code)
        self.message = message
        self.status_code = status_code
        self.request_id = request_id or None
        self.cause = cause
        super().__init__(self._render())
        if cause is not None:
            self.__cause__ = cause

    def _render(self) -> str:
        parts = [
            f"code={self.code}",
            f"message={self.message}",
            f"status_code={self.status_code}",
        ]
        if self.cause is not None:
            parts.append(f"err={self.cause}")
        if self.request_id:
            parts.append(f"request_id={self.request_id}")
        return "vikingdb error: " + ", ".join(parts)

    @property
    def retryable(self) -> bool:
        return is_retryable_error(self)

    def asdict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization and logging."""
        return {
            "code": str(self.code),
            "message": self.message,
            "status_code": self.status_code,
            "request_id": self.request_id,
            "cause": repr(self.cause) if self.cause is not None else None,
        }


def is_retryable_error(exc: Optional[BaseException]) -> bool:
    """
    Transient failures: a retryable HTTP status, or a transient service code
    regardless of status. Anything that is not a VikingDBError is permanent.
    """
    if not isinstance(exc, VikingDBError):
        return False
    if exc.status_code in RETRYABLE_STATUS_CODES:
        return True
    return exc.code in RETRYABLE_ERROR_CODES


# ---------------------------------------------------------------------------
# Convenience constructors
# ---------------------------------------------------------------------------

def invalid_parameter_error(message: str, *, cause: Optional[BaseException] = None) -> VikingDBError:
    return VikingDBError(ErrorCode.INVALID_PARAMETER, message, status_code=400, cause=cause)


def unauthorized_error(message: str) -> VikingDBError:
    return VikingDBError(ErrorCode.UNAUTHORIZED, message, status_code=401)


def forbidden_error(message: str) -> VikingDBError:
    return VikingDBError(ErrorCode.FORBIDDEN, message, status_code=403)


def not_found_error(message: str) -> VikingDBError:
    return VikingDBError(ErrorCode.NOT_FOUND, message, status_code=404)


def service_unavailable_error(message: str) -> VikingDBError:
    return VikingDBError(ErrorCode.SERVICE_UNAVAILABLE, message, status_code=503)


def timeout_error(message: str) -> VikingDBError:
    return VikingDBError(ErrorCode.TIMEOUT, message, status_code=504)


def request_limit_exceeded_error(message: str) -> VikingDBError:
    return VikingDBError(ErrorCode.REQUEST_LIMIT_EXCEEDED, message, status_code=429)


def deadline_exceeded_error(message: str, *, cause: Optional[BaseException] = None) -> VikingDBError:
    return VikingDBError(
        ErrorCode.DEADLINE_EXCEEDED,
        message,
        status_code=STATUS_CLIENT_CLOSED_REQUEST,
        cause=cause,
    )


__all__ = [
    "ErrorCode",
    "VikingDBError",
    "RETRYABLE_STATUS_CODES",
    "RETRYABLE_ERROR_CODES",
    "STATUS_CLIENT_CLOSED_REQUEST",
    "is_retryable_error",
    "invalid_parameter_error",
    "unauthorized_error",
    "forbidden_error",
    "not_found_error",
    "service_unavailable_error",
    "timeout_error",
    "request_limit_exceeded_error",
    "deadline_exceeded_error",
]
