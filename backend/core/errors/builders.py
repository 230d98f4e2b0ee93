"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder returns Err(AppError)
with the appropriate code and context.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Upstream/Network Errors (E1xxx)
# =============================================================================

def network_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E1000_NETWORK_GENERIC,
    url: str | None = None,
    status_code: int | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create network/upstream source error."""
    meta = {"url": url, "status_code": status_code, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def timeout_error(
    operation: str, timeout_seconds: float, origin: str = ""
) -> Err[AppError]:
    return network_error(
        f"Operation '{operation}' timed out after {timeout_seconds}s",
        code=ErrorCode.E1002_TIMEOUT,
        origin=origin,
        operation=operation,
        timeout_seconds=timeout_seconds,
    )


def http_status_error(url: str, status_code: int, origin: str = "") -> Err[AppError]:
    code = (
        ErrorCode.E1021_HTTP_SERVER_ERROR if status_code >= 500
        else ErrorCode.E1020_HTTP_CLIENT_ERROR
    )
    return network_error(
        f"HTTP {status_code} from upstream",
        code=code,
        url=url,
        status_code=status_code,
        origin=origin,
    )


def source_unavailable(
    source: str, reason: str = "", origin: str = "", cause: Exception | None = None
) -> Err[AppError]:
    msg = f"Source '{source}' unavailable"
    if reason:
        msg += f": {reason}"
    return network_error(
        msg,
        code=ErrorCode.E1010_SOURCE_UNAVAILABLE,
        origin=origin,
        cause=cause,
        source=source,
    )


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def required_field(field: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Required field '{field}' is missing",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
    )


def out_of_range(
    field: str, value: int, *, max_value: int, origin: str = ""
) -> Err[AppError]:
    return validation_error(
        f"'{field}' must be at most {max_value}, got {value}",
        code=ErrorCode.E2003_OUT_OF_RANGE,
        field=field,
        origin=origin,
        max=max_value,
        got=value,
    )


# =============================================================================
# Parse Errors (E7xxx)
# =============================================================================

def parse_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E7000_PARSE_GENERIC,
    word: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create markup parsing error."""
    meta = {"word": word, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def markup_not_found(word: str, what: str, origin: str = "") -> Err[AppError]:
    return parse_error(
        f"No {what} found for '{word}'",
        code=ErrorCode.E7001_MARKUP_NOT_FOUND,
        word=word,
        origin=origin,
    )

