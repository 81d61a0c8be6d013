"""OpenStreetMap entity contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class Tag(BaseModel):
    key: str
    value: str

    model_config = {"frozen": True}


class User(BaseModel):
    id: int
    display_name: str = ""
    account_created: datetime | None = None
    description: str = ""


class Changeset(BaseModel):
    id: int = 0
    user: str = ""
    uid: int = 0
    created_at: datetime | None = None
    closed_at: datetime | None = None
    open: bool = False
    comments_count: int = 0
    tags: list[Tag] = Field(default_factory=list)

    def tag_value(self, key: str) -> str | None:
        value: str | None = None
        for tag in self.tags:
            if tag.key == key:
                value = tag.value
        return value


class Node(BaseModel):
    id: int = 0
    version: int = 0
    changeset: int = 0
    user: str = ""
    uid: int = 0
    latitude: float
    longitude: float
    tags: list[Tag] = Field(default_factory=list)
