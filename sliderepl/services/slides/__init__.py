"""
Slide Deck Service
Parses the slide source file and serves slides with prev/next navigation.
"""

from .service import SlideDeckService, get_slide_deck_service, set_slide_deck_service
from .parser import parse, parse_slide
from .navigation import clamp
from .export import export_static, render_static_page

__all__ = [
    "SlideDeckService",
    "get_slide_deck_service",
    "set_slide_deck_service",
    "parse",
    "parse_slide",
    "clamp",
    "export_static",
    "render_static_page",
]
