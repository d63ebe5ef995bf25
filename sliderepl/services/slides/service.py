"""
Slide Deck Service

Reads the configured slide file once and serves its slides by index.
The deck is read-only after loading, so it is shared across requests
without locking.
"""
import logging
from pathlib import Path
from typing import Optional

from sliderepl.core import get_settings
from sliderepl.models import PageData, Slide
from .navigation import clamp
from .parser import parse

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM = """package main

import "fmt"

func main() {
	fmt.Println("hello, world")
}
"""


class SlideDeckService:
    """Holds the parsed slide deck for the lifetime of the process."""

    def __init__(self, slides: tuple[Slide, ...] = ()):
        self._slides = tuple(slides)

    @classmethod
    def from_file(cls, path: Path) -> "SlideDeckService":
        """
        Load and parse a slide file.

        Raises:
            OSError: If the file cannot be read. There is no deck to serve
                without it, so callers treat this as fatal.
        """
        try:
            document = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read slides file {path}: {e}")
            raise
        slides = parse(document)
        logger.info(f"Loaded {len(slides)} slides from {path}")
        return cls(slides)

    @property
    def slides(self) -> tuple[Slide, ...]:
        return self._slides

    def __len__(self) -> int:
        return len(self._slides)

    def get_slide(self, index: int) -> Optional[Slide]:
        """Get a slide by index, or None when the index is out of range."""
        if 0 <= index < len(self._slides):
            return self._slides[index]
        return None

    def page_data(self, index: int, contents: Optional[str] = None) -> Optional[PageData]:
        """
        Build the editor page for a slide.

        ``contents`` replaces the slide when a file was opened by path; such
        pages have no notes and any index is accepted, with the neighbour
        links kept inside the deck. An empty deck shows a hello-world program.
        Returns None when a slide is requested outside the deck.
        """
        if not self._slides:
            return PageData(contents=contents if contents is not None else DEFAULT_PROGRAM)

        prev_slide, next_slide = clamp(index, len(self._slides))
        if contents is not None:
            last = len(self._slides) - 1
            return PageData(
                contents=contents,
                prev_slide=min(max(prev_slide, 0), last),
                next_slide=min(max(next_slide, 0), last),
            )

        slide = self.get_slide(index)
        if slide is None:
            return None
        return PageData(
            contents=slide.contents,
            notes=slide.notes,
            prev_slide=prev_slide,
            next_slide=next_slide,
        )


_slide_deck_service: Optional[SlideDeckService] = None


def get_slide_deck_service() -> SlideDeckService:
    """Get or load the slide deck service singleton."""
    global _slide_deck_service
    if _slide_deck_service is None:
        _slide_deck_service = SlideDeckService.from_file(get_settings().slides_file)
    return _slide_deck_service


def set_slide_deck_service(service: Optional[SlideDeckService]) -> None:
    """Replace the singleton, e.g. with a deck loaded at startup."""
    global _slide_deck_service
    _slide_deck_service = service
