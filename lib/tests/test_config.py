from __future__ import annotations

import pytest

from carapi_client import ClientConfig, ConfigError


@pytest.mark.parametrize(
    "options",
    [
        {},
        {"token": "123"},
        {"secret": "123"},
        {"token": "", "secret": "123"},
    ],
)
def test_build_errors_with_missing_options(options) -> None:
    with pytest.raises(ConfigError):
        ClientConfig.build(options)


def test_blank_credentials_rejected() -> None:
    with pytest.raises(ConfigError):
        ClientConfig(token="  ", secret="1")


def test_build_defaults() -> None:
    cfg = ClientConfig.build({"token": "t", "secret": "s"})
    assert cfg.host is None
    assert cfg.http_version == "1.1"
    assert cfg.encoding == frozenset()
    assert cfg.api_version == "v1"
    assert cfg.api_prefix == ""
    assert cfg.compression_enabled is False


def test_build_ignores_unknown_options() -> None:
    cfg = ClientConfig.build({"token": "t", "secret": "s", "colour": "red"})
    assert cfg.token == "t"


def test_normalizes_values() -> None:
    cfg = ClientConfig(
        token=" t ",
        secret="s",
        host="http://localhost:8080/",
        http_version="2.0",
        encoding=["GZIP"],
        api_version="V2",
    )
    assert cfg.token == "t"
    assert cfg.host == "http://localhost:8080"
    assert cfg.http_version == "2"
    assert cfg.encoding == frozenset({"gzip"})
    assert cfg.api_version == "v2"
    assert cfg.api_prefix == "/v2"
    assert cfg.compression_enabled is True


def test_encoding_accepts_header_style_string() -> None:
    cfg = ClientConfig(token="t", secret="s", encoding="gzip, deflate")
    assert cfg.encoding == frozenset({"gzip", "deflate"})


@pytest.mark.parametrize(
    "overrides",
    [
        {"api_version": "v3"},
        {"http_version": "3"},
        {"encoding": ["br"]},
    ],
)
def test_invalid_values_rejected(overrides) -> None:
    with pytest.raises(ConfigError):
        ClientConfig(token="t", secret="s", **overrides)


def test_config_is_immutable() -> None:
    cfg = ClientConfig(token="t", secret="s")
    with pytest.raises(AttributeError):
        cfg.token = "other"
