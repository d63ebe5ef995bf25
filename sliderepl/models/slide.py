"""Slide-related Pydantic models."""
from pydantic import BaseModel, ConfigDict, Field


class Slide(BaseModel):
    """One slide of the deck, in document order."""

    model_config = ConfigDict(frozen=True)

    contents: str = Field(default="", description="Source shown in the editor")
    notes: str = Field(default="", description="Speaker notes")


class PageData(BaseModel):
    """Values rendered into the editor front page."""

    contents: str = Field(default="", description="Editor text area contents")
    notes: str = Field(default="", description="Speaker notes for the slide")
    prev_slide: int = Field(default=0, ge=0, description="Index of the previous slide")
    next_slide: int = Field(default=0, ge=0, description="Index of the next slide")
