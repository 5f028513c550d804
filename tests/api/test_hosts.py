from __future__ import annotations

import pytest

from gh_app_token.api.hosts import DEFAULT_API_URL, api_base_url


@pytest.mark.parametrize("host", [None, "", "  ", "github.com", "GitHub.com", "api.github.com", "https://github.com/"])
def test_public_github(host: str | None) -> None:
    assert api_base_url(host) == DEFAULT_API_URL


def test_ghe_com_tenant() -> None:
    assert api_base_url("octocorp.ghe.com") == "https://api.octocorp.ghe.com/"
    assert api_base_url("api.octocorp.ghe.com") == "https://api.octocorp.ghe.com/"


def test_enterprise_server() -> None:
    assert api_base_url("github.example.com") == "https://github.example.com/api/v3/"
    assert api_base_url("http://ghes.internal:8080") == "http://ghes.internal:8080/api/v3/"
    assert api_base_url("https://github.example.com/api/v3/") == "https://github.example.com/api/v3/"


def test_enterprise_server_keeps_path_prefix() -> None:
    assert api_base_url("https://example.com/ghe/") == "https://example.com/ghe/api/v3/"
    assert api_base_url("example.com/ghe/api/v3") == "https://example.com/ghe/api/v3/"
    assert api_base_url("example.com/myapi/v3") == "https://example.com/myapi/v3/api/v3/"
