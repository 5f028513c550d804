from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gh_app_token.api.client import DEFAULT_TIMEOUT_S
from gh_app_token.selector import TargetSelector, build_selector


class ConfigFile(BaseModel):
    app_id: int | None = Field(default=None, gt=0)
    private_key: str | None = None
    host: str | None = None
    timeout_s: float | None = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


class AppTokenConfig(BaseModel):
    """Everything one token-issuance run needs, resolved once by the front-end."""

    app_id: int = Field(gt=0)
    private_key_path: str = Field(min_length=1)
    installation_id: int | None = None
    org: str | None = None
    repo: str | None = None
    user: str | None = None
    host: str | None = None
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def selector(self) -> TargetSelector:
        return build_selector(
            installation_id=self.installation_id,
            org=self.org,
            repo=self.repo,
            user=self.user,
        )
