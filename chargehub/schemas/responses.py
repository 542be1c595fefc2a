from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class Alert(BaseModel):
    title: str
    message: str


class ScreenResponse(BaseModel):
    screen: str
    next_screen: str | None = None
    params: dict[str, Any] = {}
    data: Any = None
    alert: Alert | None = None


class ActivityTile(BaseModel):
    key: str
    label: str
    value: str


class NavigationResponse(BaseModel):
    role: str | None
    home_screen: str
    screens: list[str]


class LanguageResponse(BaseModel):
    language: str
    is_rtl: bool
