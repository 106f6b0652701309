"""HTTP convenience wrapper: JSON requests that return a Result."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

import httpx

from errtuple.config import FetchConfig
from errtuple.errors import FetchError, Thrown, get_http_error_hint
from errtuple.options import FetchOptions
from errtuple.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

_DEFAULT_ERROR_MESSAGE = "Failed to fetch data"


async def fetch_json[T = Any, E = str](
    url: str,
    request: Mapping[str, Any] | None = None,
    options: FetchOptions[T, E] | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    config: FetchConfig | None = None,
) -> Result[T, E]:
    """Request *url* and decode its JSON body into a Result.

    Args:
        url: The resource to request.
        request: Request options: ``method`` (default ``"GET"``) plus any
            ``httpx`` request keyword such as ``headers``, ``params`` or ``json``.
        options: Optional response/error transformers.
        client: Reuse an existing client. When omitted, one is built from
            *config* (or ``FetchConfig.from_env()``) and closed afterwards.
        config: Settings for the client built when *client* is omitted.

    Returns:
        ``Success(data)`` with the (transformed) JSON body, or ``Failure`` whose
        error is the ``error_transformer`` output, the failure's message, or
        ``"Failed to fetch data"`` for non-exception failures.

    Raises:
        ConfigurationError: If *client* and *config* are omitted and the
            ``ERRTUPLE_FETCH_*`` environment variables are invalid.
        InvariantViolationError: If ``error_transformer`` returns ``None``,
            since a ``Failure`` cannot hold an empty error.
        Exception: Whatever ``error_transformer`` itself raises.

    Example:
        user, err = await fetch_json("https://api.example.com/users/1")
        if err is not None:
            print(err)  # e.g. "HTTP error! status: 404"
    """
    opts: FetchOptions[T, E] = options or FetchOptions()
    request_kwargs = dict(request or {})
    method = str(request_kwargs.pop("method", "GET")).upper()
    settings = None
    if client is None:
        settings = config if config is not None else FetchConfig.from_env()

    try:
        if settings is not None:
            async with httpx.AsyncClient(
                timeout=settings.timeout_s,
                follow_redirects=settings.follow_redirects,
                headers=dict(settings.headers),
            ) as owned:
                data = await _request_json(owned, method, url, request_kwargs)
        else:
            data = await _request_json(client, method, url, request_kwargs)
        value = (
            opts.response_transformer(data)
            if opts.response_transformer is not None
            else cast("T", data)
        )
    except Exception as exc:
        raw: object = exc.value if isinstance(exc, Thrown) else exc
        logger.debug("fetch_json %s %s failed: %s", method, url, exc)
        if opts.error_transformer is not None:
            return Failure(opts.error_transformer(raw))
        message = str(raw) if isinstance(raw, BaseException) else _DEFAULT_ERROR_MESSAGE
        return Failure(cast("E", message))
    return Success(value)


async def _request_json(
    client: httpx.AsyncClient, method: str, url: str, kwargs: dict[str, Any]
) -> Any:
    response = await client.request(method, url, **kwargs)
    if not response.is_success:
        raise FetchError(
            f"HTTP error! status: {response.status_code}",
            hint=get_http_error_hint(response.status_code),
            status_code=response.status_code,
            url=url,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise FetchError(
            "Failed to parse JSON", status_code=response.status_code, url=url
        ) from exc
