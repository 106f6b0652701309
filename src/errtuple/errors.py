"""Exception hierarchy for errtuple."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, NoReturn

if TYPE_CHECKING:
    from collections.abc import Iterator

#: How a non-exception failure payload was turned into a message.
ErrorKind = Literal["pattern", "structural", "serialization", "primitive"]


class ErrtupleError(Exception):
    """Base exception for all errtuple errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class NormalizedError(ErrtupleError):
    """Canonical error built from a failure payload that was not an exception.

    ``raw`` keeps the original payload so structured failures remain
    inspectable after normalization.
    """

    def __init__(self, message: str, *, raw: object, kind: ErrorKind) -> None:
        super().__init__(message)
        self.raw = raw
        self.kind = kind

    def __repr__(self) -> str:
        return f"NormalizedError({self.message!r}, kind={self.kind!r})"


class Thrown(ErrtupleError):
    """Carrier for raising an arbitrary, non-exception failure payload.

    Python only raises exceptions; wrap any other value in ``Thrown`` (or call
    :func:`throw`) and the wrappers classify ``value`` instead of the carrier.
    """

    def __init__(self, value: object) -> None:
        try:
            text = str(value)
        except Exception as exc:
            text = str(exc)
        super().__init__(text)
        self.value = value


class InvariantViolationError(ErrtupleError):
    """Raised when a Result would hold an impossible state."""


class ConfigurationError(ErrtupleError):
    """Configuration or option validation failed."""


class FetchError(ErrtupleError):
    """HTTP request made through ``fetch_json`` failed."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code
        self.url = url


_HTTP_ERROR_HINTS = {
    401: "Check the credentials sent with the request.",
    403: "The server refused the request; check permissions.",
    404: "Resource not found; verify the URL.",
    429: "Rate limit exceeded; wait and retry.",
    500: "Server internal error; retry later.",
    503: "Service unavailable; the server might be overloaded.",
}


def get_http_error_hint(status_code: int) -> str | None:
    """Return an actionable hint for a given HTTP status code."""
    return _HTTP_ERROR_HINTS.get(status_code)


def throw(value: object) -> NoReturn:
    """Raise *value* as a failure, wrapping non-exceptions in :class:`Thrown`."""
    if isinstance(value, BaseException):
        raise value
    raise Thrown(value)


def walk_error_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its ``__cause__``/``__context__`` chain, with cycle protection."""
    seen: set[int] = set()
    stack: list[BaseException] = [exc]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur

        # Pushed in reverse so the explicit cause is visited before the context.
        context = cur.__context__
        if isinstance(context, BaseException):
            stack.append(context)
        cause = cur.__cause__
        if isinstance(cause, BaseException):
            stack.append(cause)
