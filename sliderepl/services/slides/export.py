"""Static export of a slide deck to a single HTML file."""
import logging
from pathlib import Path
from typing import Iterable

from sliderepl.core import get_settings
from sliderepl.models import Slide
from sliderepl.web import get_templates

logger = logging.getLogger(__name__)


def render_static_page(slides: Iterable[Slide]) -> str:
    """Render every slide and its notes into one standalone page."""
    template = get_templates().get_template("static_page.html")
    return template.render(slides=list(slides), app_name=get_settings().app_name)


def export_static(slides: Iterable[Slide], path: Path) -> Path:
    """
    Write the static slide page to ``path``.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    html = render_static_page(slides)
    path.write_text(html, encoding="utf-8")
    logger.info(f"Wrote static slides to {path}")
    return path
