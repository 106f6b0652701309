"""Configuration: frozen HTTP settings for ``fetch_json``."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

from errtuple.errors import ConfigurationError

load_dotenv()

_TIMEOUT_ENV_VAR = "ERRTUPLE_FETCH_TIMEOUT_S"
_FOLLOW_REDIRECTS_ENV_VAR = "ERRTUPLE_FETCH_FOLLOW_REDIRECTS"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class FetchConfig:
    """Immutable client settings used when ``fetch_json`` builds its own client.

    Example:
        config = FetchConfig(timeout_s=2.5, headers={"Accept": "application/json"})
        # or resolved from ERRTUPLE_FETCH_* environment variables
        config = FetchConfig.from_env()
    """

    #: ``None`` disables the client timeout.
    timeout_s: float | None = 10.0
    follow_redirects: bool = True
    #: Compared for equality but left out of the hash.
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.timeout_s is not None and self.timeout_s < 0:
            raise ConfigurationError(
                f"timeout_s must be ≥ 0, got {self.timeout_s}",
                hint="Use None to disable the timeout.",
            )

    @classmethod
    def from_env(cls) -> FetchConfig:
        """Build a config from ``ERRTUPLE_FETCH_*`` environment variables."""
        kwargs: dict[str, object] = {}

        raw_timeout = os.environ.get(_TIMEOUT_ENV_VAR)
        if raw_timeout is not None and raw_timeout.strip():
            value = raw_timeout.strip().lower()
            if value == "none":
                kwargs["timeout_s"] = None
            else:
                try:
                    kwargs["timeout_s"] = float(value)
                except ValueError:
                    raise ConfigurationError(
                        f"{_TIMEOUT_ENV_VAR} must be a number, got {raw_timeout!r}",
                        hint="Set it to seconds (e.g. 10) or 'none'.",
                    ) from None

        raw_redirects = os.environ.get(_FOLLOW_REDIRECTS_ENV_VAR)
        if raw_redirects is not None and raw_redirects.strip():
            value = raw_redirects.strip().lower()
            if value in _TRUE_VALUES:
                kwargs["follow_redirects"] = True
            elif value in _FALSE_VALUES:
                kwargs["follow_redirects"] = False
            else:
                raise ConfigurationError(
                    f"{_FOLLOW_REDIRECTS_ENV_VAR} must be a boolean, got {raw_redirects!r}",
                    hint="Use one of: true, false, 1, 0.",
                )

        return cls(**kwargs)  # type: ignore[arg-type]
