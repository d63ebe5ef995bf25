"""
Pytest configuration and fixtures.
"""
import pytest

from sliderepl.core import Settings
from sliderepl.models import Slide
from sliderepl.services.slides import SlideDeckService, set_slide_deck_service
from sliderepl.services.compiler import service as compiler_service_module


SAMPLE_DOCUMENT = """//!
package main

import "fmt"

func main() {
	fmt.Println("first")
}
/*--
Say hello first.
*/
//!
fmt.Println("<second>")
//!

//!
x := 3
fmt.Println(x)
"""


@pytest.fixture
def clean_environment(monkeypatch):
    """Provide a clean environment for tests."""
    env_vars = [
        "APP_NAME",
        "DEBUG",
        "HOST",
        "PORT",
        "SLIDES_FILE",
        "STATIC_HTML",
        "SNIPPET_DIR",
        "HTML_OUTPUT",
        "GO_BINARY",
        "BUILD_TIMEOUT",
        "RUN_TIMEOUT",
        "TEMP_DIR",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings(tmp_path, clean_environment):
    """Settings with artifacts going to a per-test directory."""
    build_dir = tmp_path / "build"
    build_dir.mkdir()
    return Settings(temp_dir=build_dir, slides_file=tmp_path / "slides.go")


@pytest.fixture
def slides_file(tmp_path):
    """Write the sample slide document to disk."""
    path = tmp_path / "slides.go"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def deck():
    """A small in-memory deck installed as the process-wide deck."""
    service = SlideDeckService((
        Slide(contents="package main\n", notes="intro notes"),
        Slide(contents='fmt.Println("<b>")', notes=""),
        Slide(contents="x := 1", notes="last"),
    ))
    set_slide_deck_service(service)
    yield service
    set_slide_deck_service(None)


@pytest.fixture(autouse=True)
def reset_compiler_service():
    """Drop any compiler service singleton created by a test."""
    yield
    compiler_service_module._compiler_service = None
