from __future__ import annotations

import pytest

from errtuple.config import FetchConfig
from errtuple.errors import ConfigurationError
from errtuple.options import FetchOptions

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    config = FetchConfig()

    assert config.timeout_s == 10.0
    assert config.follow_redirects is True
    assert dict(config.headers) == {}


def test_negative_timeout_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        FetchConfig(timeout_s=-1)
    assert exc_info.value.hint is not None


def test_config_is_frozen() -> None:
    config = FetchConfig()
    with pytest.raises(AttributeError):
        config.timeout_s = 1.0  # type: ignore[misc]


def test_from_env_without_variables_uses_defaults() -> None:
    assert FetchConfig.from_env() == FetchConfig()


def test_from_env_reads_timeout_and_redirects(monkeypatch) -> None:
    monkeypatch.setenv("ERRTUPLE_FETCH_TIMEOUT_S", "2.5")
    monkeypatch.setenv("ERRTUPLE_FETCH_FOLLOW_REDIRECTS", "off")

    config = FetchConfig.from_env()

    assert config.timeout_s == 2.5
    assert config.follow_redirects is False


def test_from_env_none_disables_timeout(monkeypatch) -> None:
    monkeypatch.setenv("ERRTUPLE_FETCH_TIMEOUT_S", "None")
    assert FetchConfig.from_env().timeout_s is None


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("ERRTUPLE_FETCH_TIMEOUT_S", "soon"),
        ("ERRTUPLE_FETCH_TIMEOUT_S", "-3"),
        ("ERRTUPLE_FETCH_FOLLOW_REDIRECTS", "maybe"),
    ],
)
def test_from_env_rejects_invalid_values(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        FetchConfig.from_env()


def test_options_accept_callables() -> None:
    options = FetchOptions(error_transformer=str, response_transformer=list)

    assert options.error_transformer is str
    assert options.response_transformer is list


@pytest.mark.parametrize("field_name", ["error_transformer", "response_transformer"])
def test_options_reject_non_callables(field_name: str) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        FetchOptions(**{field_name: "not callable"})

    assert field_name in str(exc_info.value)
    assert exc_info.value.hint is not None


def test_config_is_hashable_with_headers() -> None:
    first = FetchConfig(headers={"Accept": "application/json"})
    second = FetchConfig(headers={"Accept": "application/json"})

    assert first == second
    assert hash(first) == hash(second)
    assert FetchConfig(headers={"A": "b"}) != FetchConfig(headers={"A": "c"})
