"""Result and AppError types

Upstream fetches and markup parsing return Result values instead of raising,
so the resolver can fall through to the next source without try/except
ladders. Pattern matching on Ok/Err is the expected way to consume them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Error code taxonomy.

    E1xxx: Upstream source / network failures
    E2xxx: Input validation errors
    E7xxx: Markup parsing and declension trust errors
    E9xxx: Internal/Unknown errors
    """
    # Upstream/Network (E1xxx)
    E1000_NETWORK_GENERIC = 1000
    E1002_TIMEOUT = 1002
    E1010_SOURCE_UNAVAILABLE = 1010
    E1020_HTTP_CLIENT_ERROR = 1020
    E1021_HTTP_SERVER_ERROR = 1021

    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2003_OUT_OF_RANGE = 2003

    # Parsing (E7xxx)
    E7000_PARSE_GENERIC = 7000
    E7001_MARKUP_NOT_FOUND = 7001

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def http_status(self) -> int:
        """Map error code to an HTTP status for the API boundary."""
        code = self.value
        if 1000 <= code < 2000:
            return 502 if code in (1010, 1021) else 504 if code == 1002 else 503
        if 2000 <= code < 3000:
            return 400
        if 7000 <= code < 8000:
            return 422
        return 500

    @property
    def category(self) -> str:
        code = self.value
        if 1000 <= code < 2000:
            return "network"
        if 2000 <= code < 3000:
            return "validation"
        if 7000 <= code < 8000:
            return "parse"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for error tracing."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""
    request_id: str | None = None


@dataclass(frozen=True, slots=True)
class AppError:
    """Application error carrying a typed code, message, metadata and cause."""
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_context(self, **kwargs) -> AppError:
        """Create new error with updated context."""
        new_ctx = ErrorContext(
            correlation_id=kwargs.get("correlation_id") or self.context.correlation_id,
            timestamp=self.context.timestamp,
            origin=kwargs.get("origin", self.context.origin),
            request_id=kwargs.get("request_id", self.context.request_id),
        )
        return AppError(
            code=self.code,
            message=self.message,
            context=new_ctx,
            metadata=self.metadata,
            cause=self.cause,
        )

    def to_dict(self) -> dict:
        """Serialize error for API responses."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, AppError]:
        return Ok(f(self.value))


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore


Result = Union[Ok[T], Err[E]]


def from_exception(
    exc: Exception,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    message: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Convert exception to Err with full context."""
    return Err(AppError(
        code=code,
        message=message or str(exc) or type(exc).__name__,
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=exc,
    ))


def try_result(
    f: Callable[[], T],
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
) -> Result[T, AppError]:
    """Run f and wrap its return value, converting exceptions to Err."""
    try:
        return Ok(f())
    except Exception as e:
        return from_exception(e, code=code, origin=origin)

