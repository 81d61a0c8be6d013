"""Credential resolver interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    username: str
    password: str = Field(repr=False)

    model_config = {"frozen": True}


class CredentialsResolver(ABC):
    @abstractmethod
    def resolve(self) -> Credentials:
        """Resolve and return OSM credentials."""
