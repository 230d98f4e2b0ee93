"""Monadic Error Handling

Result[T, E] with Ok/Err variants, AppError with a typed ErrorCode, and
builders for the failure modes of the declension pipeline.

Usage:
    from core.errors import Ok, Err, Result, AppError, timeout_error

    async def fetch(word: str) -> Result[str, AppError]:
        ...

    match await fetch("стол"):
        case Ok(html):
            parse(html)
        case Err(error):
            log.info("source_failed", code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    from_exception,
    try_result,
)

from .builders import (
    # Network (E1xxx)
    network_error,
    timeout_error,
    http_status_error,
    source_unavailable,
    # Validation (E2xxx)
    validation_error,
    required_field,
    out_of_range,
    # Parse (E7xxx)
    parse_error,
    markup_not_found,
)

from .handlers import (
    AppErrorException,
    register_error_handlers,
    result_to_response,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    "try_result",
    "network_error",
    "timeout_error",
    "http_status_error",
    "source_unavailable",
    "validation_error",
    "required_field",
    "out_of_range",
    "parse_error",
    "markup_not_found",
    "AppErrorException",
    "register_error_handlers",
    "result_to_response",
    "raise_result",
]
