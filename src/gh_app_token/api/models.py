from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Installation(BaseModel):
    id: int

    model_config = ConfigDict(extra="ignore")


class InstallationAccessToken(BaseModel):
    token: str | None = None
    expires_at: datetime | None = None

    model_config = ConfigDict(extra="ignore")
