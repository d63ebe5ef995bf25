"""
Application settings using Pydantic for validation and type safety.
All values can be overridden from the environment or a local .env file.
"""
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration."""

    # Application
    app_name: str = Field(default="SlideREPL", description="Application name")
    debug: bool = Field(default=False, description="Debug mode flag")

    # Server
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=3999, ge=1, le=65535, description="Server port")

    # Slides
    slides_file: Path = Field(
        default=Path("slides.go"),
        description="Slides file to read in at startup"
    )
    static_html: Optional[Path] = Field(
        default=None,
        description="Write slides to this static HTML file instead of serving"
    )
    snippet_dir: Optional[Path] = Field(
        default=None,
        description="Directory of source files that may be opened in the editor by path"
    )

    # Compile output
    html_output: bool = Field(
        default=False,
        description="Send program output as raw HTML instead of escaped text"
    )

    # Toolchain
    go_binary: str = Field(default="go", description="Go toolchain executable")
    build_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds before a build is killed (unbounded when unset)"
    )
    run_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds before a program run is killed (unbounded when unset)"
    )
    temp_dir: Optional[Path] = Field(
        default=None,
        description="Directory for build artifacts (system temp dir when unset)"
    )

    # CORS Configuration; cross-origin access is off unless origins are listed
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Origins allowed to call the API from other sites"
    )

    @property
    def http_listen(self) -> str:
        """Get the host:port address the server binds to."""
        return f"{self.host}:{self.port}"

    @property
    def artifact_root(self) -> Path:
        """Get the configured artifact directory, before symlink resolution."""
        if self.temp_dir is not None:
            return self.temp_dir
        return Path(tempfile.gettempdir())

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_prefix = ""
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Using lru_cache ensures settings are loaded once and reused.
    """
    return Settings()
