"""Error taxonomy for brizo.

Every SDK failure is a single ``BrizoError`` carrying a ``kind`` discriminant,
so callers can match on ``err.kind`` instead of on exception subclasses.
``classify`` maps an HTTP failure (status, body, headers) onto that taxonomy.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# =============================================================================
# Error Kinds
# =============================================================================


class ErrorKind(Enum):
    """Semantic failure kinds."""

    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    LIMIT_EXCEEDED = "limit_exceeded"
    UPLOAD = "upload"
    NETWORK = "network"
    TIMEOUT = "timeout"
    GENERIC = "generic"


# Fixed machine-readable codes per kind (GENERIC has none)
ERROR_CODES: dict[ErrorKind, str] = {
    ErrorKind.AUTHENTICATION: "AUTH_ERROR",
    ErrorKind.NOT_FOUND: "NOT_FOUND",
    ErrorKind.VALIDATION: "VALIDATION_ERROR",
    ErrorKind.RATE_LIMIT: "RATE_LIMIT",
    ErrorKind.LIMIT_EXCEEDED: "LIMIT_EXCEEDED",
    ErrorKind.UPLOAD: "UPLOAD_ERROR",
    ErrorKind.NETWORK: "NETWORK_ERROR",
    ErrorKind.TIMEOUT: "TIMEOUT",
}

FORBIDDEN_CODE = "FORBIDDEN"

RETRYABLE_KINDS = frozenset(
    {ErrorKind.RATE_LIMIT, ErrorKind.NETWORK, ErrorKind.TIMEOUT, ErrorKind.UPLOAD}
)


# =============================================================================
# BrizoError
# =============================================================================


class BrizoError(Exception):
    """Base exception for all brizo SDK errors.

    Attributes:
        kind: Semantic failure kind.
        message: Human-readable message.
        status_code: HTTP status, or None when no response was received.
        code: Machine-readable code string.
        details: Structured details (validation fields, in-flight upload info).
        retry_after: Seconds until retry is permitted (RATE_LIMIT only).
        limit_type: Which quota was exceeded (LIMIT_EXCEEDED only).
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        retry_after: int | None = None,
        limit_type: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details
        self.retry_after = retry_after
        self.limit_type = limit_type

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"BrizoError(kind={self.kind.name}, message={self.message!r}, "
            f"status_code={self.status_code!r}, code={self.code!r})"
        )

    def _key(self) -> tuple[Any, ...]:
        return (
            self.kind,
            self.message,
            self.status_code,
            self.code,
            self.details,
            self.retry_after,
            self.limit_type,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BrizoError):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_retryable(self) -> bool:
        """Whether resubmitting the same operation may succeed."""
        return self.kind in RETRYABLE_KINDS

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
            "code": self.code,
        }
        if self.details:
            data["details"] = self.details
        if self.kind is ErrorKind.RATE_LIMIT:
            data["retry_after"] = self.retry_after
        if self.kind is ErrorKind.LIMIT_EXCEEDED:
            data["limit_type"] = self.limit_type
        return data


# =============================================================================
# Constructors
# =============================================================================


def validation_error(message: str, details: dict[str, Any] | None = None) -> BrizoError:
    """Local input validation failure (no request was made)."""
    return BrizoError(
        ErrorKind.VALIDATION,
        message,
        code=ERROR_CODES[ErrorKind.VALIDATION],
        details=details,
    )


def network_error(message: str) -> BrizoError:
    """Connection-level failure with no HTTP status."""
    return BrizoError(ErrorKind.NETWORK, message, code=ERROR_CODES[ErrorKind.NETWORK])


def timeout_error(message: str) -> BrizoError:
    """Request exceeded its timeout."""
    return BrizoError(ErrorKind.TIMEOUT, message, code=ERROR_CODES[ErrorKind.TIMEOUT])


def upload_error(
    message: str,
    *,
    filename: str,
    size: int,
    transfer_key: str,
    status_code: int | None = None,
) -> BrizoError:
    """Byte-transfer failure for an in-flight object."""
    return BrizoError(
        ErrorKind.UPLOAD,
        message,
        status_code=status_code,
        code=ERROR_CODES[ErrorKind.UPLOAD],
        details={"filename": filename, "size": size, "transfer_key": transfer_key},
    )


# =============================================================================
# Status Classification
# =============================================================================


def _extract_message(status_code: int, body: Any) -> str:
    if isinstance(body, Mapping):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"Request failed with status {status_code}"


def _header(headers: Mapping[str, str] | None, name: str) -> str | None:
    if not headers:
        return None
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, val in headers.items():
        if key.lower() == lowered:
            return val
    return None


def parse_retry_after(value: str | None) -> int | None:
    """Parse a ``retry-after`` header as whole seconds."""
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _limit_type(message: str) -> str | None:
    lowered = message.lower()
    for candidate in ("storage", "bandwidth"):
        if candidate in lowered:
            return candidate
    return None


def classify(
    status_code: int,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
) -> BrizoError:
    """Map an HTTP failure onto a ``BrizoError``.

    Pure and total: never raises, and every status maps to exactly one kind.

    Args:
        status_code: HTTP status code.
        body: Parsed JSON body (any shape) or None.
        headers: Response headers.

    Returns:
        Classified error (not raised).
    """
    message = _extract_message(status_code, body)
    details = body.get("details") if isinstance(body, Mapping) else None

    if status_code == 401:
        return BrizoError(
            ErrorKind.AUTHENTICATION,
            message,
            status_code=status_code,
            code=ERROR_CODES[ErrorKind.AUTHENTICATION],
        )
    if status_code == 404:
        return BrizoError(
            ErrorKind.NOT_FOUND,
            message,
            status_code=status_code,
            code=ERROR_CODES[ErrorKind.NOT_FOUND],
        )
    if status_code == 400:
        return BrizoError(
            ErrorKind.VALIDATION,
            message,
            status_code=status_code,
            code=ERROR_CODES[ErrorKind.VALIDATION],
            details=details if isinstance(details, dict) else None,
        )
    if status_code == 429:
        return BrizoError(
            ErrorKind.RATE_LIMIT,
            message,
            status_code=status_code,
            code=ERROR_CODES[ErrorKind.RATE_LIMIT],
            retry_after=parse_retry_after(_header(headers, "retry-after")),
        )
    if status_code == 403:
        if "limit" in message.lower():
            return BrizoError(
                ErrorKind.LIMIT_EXCEEDED,
                message,
                status_code=status_code,
                code=ERROR_CODES[ErrorKind.LIMIT_EXCEEDED],
                limit_type=_limit_type(message),
            )
        return BrizoError(
            ErrorKind.GENERIC,
            message,
            status_code=status_code,
            code=FORBIDDEN_CODE,
        )
    return BrizoError(ErrorKind.GENERIC, message, status_code=status_code)


# =============================================================================
# CLI Configuration Errors
# =============================================================================


class ConfigurationError(Exception):
    """Error in CLI configuration (missing, invalid, or malformed)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (field={self.field})"
        return self.message


class ProfileNotFoundError(ConfigurationError):
    """Requested profile does not exist."""

    def __init__(self, profile: str):
        super().__init__(f"Profile not found: {profile}", field="profile", value=profile)
        self.profile = profile
