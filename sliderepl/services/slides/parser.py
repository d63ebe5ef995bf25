"""Slide deck parser for flat slide source files."""
from sliderepl.models import Slide

SLIDE_DELIMITER = "//!"
NOTES_OPEN = "/*--"
NOTES_CLOSE = "*/"


def parse_slide(section: str) -> Slide:
    """
    Split one trimmed section into contents and speaker notes.

    Notes start at the first ``/*--`` and end at the first ``*/`` after it,
    or at the end of the section when it is never closed.
    """
    start = section.find(NOTES_OPEN)
    if start == -1:
        return Slide(contents=section, notes="")

    notes = section[start + len(NOTES_OPEN):]
    end = notes.find(NOTES_CLOSE)
    if end != -1:
        notes = notes[:end]
    return Slide(contents=section[:start], notes=notes)


def parse(document: str) -> tuple[Slide, ...]:
    """
    Parse a slide document into slides, in document order.

    Sections are separated by ``//!``; sections that are blank once
    trimmed do not produce a slide.
    """
    slides = []
    for section in document.split(SLIDE_DELIMITER):
        trimmed = section.strip()
        if not trimmed:
            continue
        slides.append(parse_slide(trimmed))
    return tuple(slides)
