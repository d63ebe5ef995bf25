"""Previous/next slide index arithmetic."""


def clamp(requested: int, total: int) -> tuple[int, int]:
    """
    Get the (previous, next) neighbours of a slide index.

    Neither neighbour moves past the ends of the deck. ``requested`` itself is
    not validated; callers must range-check it before indexing.
    """
    prev_slide = max(requested - 1, 0)
    next_slide = requested + 1 if requested + 1 < total else requested
    return prev_slide, next_slide
