"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator

LIVE_API_URL = "https://api.openstreetmap.org/api/0.6"
DEV_API_URL = "https://api06.dev.openstreetmap.org/api/0.6"


class SyncConfig(BaseModel):
    gpx_file: Path | None = None
    comment: str = "Added hydrants from GPX file"
    match_range: int = Field(default=20, ge=0)
    match_policy: Literal["last", "nearest"] = "last"
    pressure: int = 4
    auth: Literal["env", "static"] = "env"
    osm_user: str | None = None
    osm_password: str | None = None
    api_url: str = LIVE_API_URL
    max_retries: int = Field(default=3, ge=0, le=10)
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_credentials(self) -> SyncConfig:
        user = (self.osm_user or "").strip()
        password = self.osm_password or ""
        if self.auth == "static":
            if not user or not password:
                raise ValueError("static auth requires osm_user and osm_password")
            return self
        if user or password:
            raise ValueError("osm_user/osm_password must be unset when auth is 'env'")
        return self
