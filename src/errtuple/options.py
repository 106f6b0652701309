"""Per-call options for ``fetch_json``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from errtuple.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class FetchOptions[T = Any, E = str]:
    """Optional transformers applied by ``fetch_json``."""

    #: Maps the raw failure (exception, or the payload of a ``Thrown``) to ``E``.
    error_transformer: Callable[[object], E] | None = None
    #: Maps the decoded JSON body to ``T`` before it is wrapped as a success.
    response_transformer: Callable[[object], T] | None = None

    def __post_init__(self) -> None:
        """Validate option shapes early for clear errors."""
        for name in ("error_transformer", "response_transformer"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ConfigurationError(
                    f"{name} must be callable, got {type(value).__name__}",
                    hint=f"Pass FetchOptions({name}=lambda raw: ...).",
                )
