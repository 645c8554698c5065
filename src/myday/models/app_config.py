"""
Application configuration model for MyDay.

This module provides the AppConfig model persisted as ``config.json``
next to the monthly data files.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UIConfig(BaseModel):
    """User interface state remembered between sessions."""

    model_config = ConfigDict(populate_by_name=True)

    theme: str = Field(default="light", pattern="^(light|dark)$")
    view_mode: str = Field(
        default="incomplete",
        alias="viewMode",
        pattern="^(all|incomplete|complete|starred)$",
    )
    current_date: datetime = Field(default_factory=datetime.now, alias="currentDate")
    window_width: float = Field(default=420, alias="windowWidth", gt=0)
    window_height: float = Field(default=800, alias="windowHeight", gt=0)

    @field_validator("theme", "view_mode", mode="before")
    @classmethod
    def lower_case(cls, v):
        return v.lower() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Top level application configuration."""

    version: str = "1.0"
    ui: UIConfig = Field(default_factory=UIConfig)

    def toggle_theme(self) -> str:
        self.ui.theme = "dark" if self.ui.theme == "light" else "light"
        return self.ui.theme
