"""Template management for the SlideREPL frontend."""
from functools import lru_cache
from pathlib import Path

from fastapi.templating import Jinja2Templates

# HTML Template path
TEMPLATES_DIR = Path(__file__).parent / "templates"


@lru_cache()
def get_templates() -> Jinja2Templates:
    """Get the shared Jinja2 template set (HTML autoescaping is on)."""
    return Jinja2Templates(directory=TEMPLATES_DIR)


def render_output(output: str) -> str:
    """Render captured program output as an escaped <pre> block."""
    return get_templates().get_template("output.html").render(output=output)
