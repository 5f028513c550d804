from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from gh_app_token._version import __version__
from gh_app_token.errors import ExchangeError, InstallationLookupError, RemoteCallError
from gh_app_token.util.redaction import redact_text

from .hosts import api_base_url
from .models import Installation, InstallationAccessToken

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 30.0
API_VERSION = "2022-11-28"
USER_AGENT = f"gh-app-token/{__version__}"


def _segment(value: str) -> str:
    return quote(value, safe="")


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        detail = payload["message"]
    else:
        detail = response.text.strip()[:200] or response.reason_phrase
    return redact_text(detail)


class GitHubAppClient:
    """REST calls made while authenticated as the App itself (bearer JWT)."""

    def __init__(
        self,
        jwt_token: str,
        *,
        host: str | None = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = api_base_url(host)
        self._timeout_s = timeout_s
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {jwt_token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": USER_AGENT,
            },
            timeout=httpx.Timeout(timeout_s),
            transport=transport,
        )

    def __enter__(self) -> "GitHubAppClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def find_org_installation(self, org: str) -> Installation:
        return self._get_installation(f"orgs/{_segment(org)}/installation")

    def find_repo_installation(self, owner: str, repo: str) -> Installation:
        return self._get_installation(f"repos/{_segment(owner)}/{_segment(repo)}/installation")

    def find_user_installation(self, user: str) -> Installation:
        return self._get_installation(f"users/{_segment(user)}/installation")

    def create_installation_token(self, installation_id: int) -> InstallationAccessToken:
        endpoint = f"app/installations/{installation_id}/access_tokens"
        payload = self._request(
            "POST",
            endpoint,
            operation="failed to create installation token",
            error_cls=ExchangeError,
        )
        try:
            return InstallationAccessToken.model_validate(payload)
        except ValidationError as exc:
            raise ExchangeError(
                operation="failed to create installation token",
                endpoint=endpoint,
                detail=f"unexpected response body: {exc.error_count()} validation error(s)",
            ) from exc

    def _get_installation(self, endpoint: str) -> Installation:
        payload = self._request(
            "GET",
            endpoint,
            operation="failed to get installation ID",
            error_cls=InstallationLookupError,
        )
        try:
            return Installation.model_validate(payload)
        except ValidationError as exc:
            raise InstallationLookupError(
                operation="failed to get installation ID",
                endpoint=endpoint,
                detail="response does not contain an integer installation id",
            ) from exc

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        operation: str,
        error_cls: type[RemoteCallError],
    ) -> Any:
        logger.debug("%s %s%s", method, self.base_url, endpoint)
        try:
            response = self._client.request(method, endpoint)
        except httpx.TimeoutException as exc:
            raise error_cls(
                operation=operation,
                endpoint=endpoint,
                detail=f"request timed out after {self._timeout_s:g}s",
            ) from exc
        except httpx.HTTPError as exc:
            raise error_cls(
                operation=operation,
                endpoint=endpoint,
                detail=redact_text(str(exc)) or type(exc).__name__,
            ) from exc

        if not response.is_success:
            raise error_cls(
                operation=operation,
                endpoint=endpoint,
                detail=_error_detail(response),
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise error_cls(
                operation=operation,
                endpoint=endpoint,
                detail="response is not valid JSON",
                status_code=response.status_code,
            ) from exc
