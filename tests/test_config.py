"""
Unit tests for configuration module.
"""
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from sliderepl.core import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self, clean_environment):
        """Test that default values are set correctly."""
        settings = Settings()

        assert settings.app_name == "SlideREPL"
        assert settings.host == "127.0.0.1"
        assert settings.port == 3999
        assert settings.debug is False
        assert settings.slides_file == Path("slides.go")
        assert settings.html_output is False
        assert settings.static_html is None
        assert settings.go_binary == "go"
        assert settings.build_timeout is None
        assert settings.run_timeout is None
        assert settings.cors_origins == []

    def test_port_validation(self, clean_environment):
        """Test that port validation works."""
        with pytest.raises(ValueError):
            Settings(port=0)

        with pytest.raises(ValueError):
            Settings(port=70000)

        settings = Settings(port=8080)
        assert settings.port == 8080

    def test_timeout_validation(self, clean_environment):
        """Timeouts must be positive when given."""
        with pytest.raises(ValueError):
            Settings(build_timeout=0)

        with pytest.raises(ValueError):
            Settings(run_timeout=-1)

        settings = Settings(build_timeout=10, run_timeout=2.5)
        assert settings.build_timeout == 10
        assert settings.run_timeout == 2.5

    def test_http_listen(self, clean_environment):
        """Test the host:port property."""
        settings = Settings(host="0.0.0.0", port=8000)

        assert settings.http_listen == "0.0.0.0:8000"

    def test_artifact_root_defaults_to_system_temp(self, clean_environment):
        settings = Settings()

        assert settings.artifact_root == Path(tempfile.gettempdir())

    def test_artifact_root_override(self, clean_environment, tmp_path):
        settings = Settings(temp_dir=tmp_path)

        assert settings.artifact_root == tmp_path

    @patch.dict(os.environ, {
        "SLIDES_FILE": "talk.go",
        "HTML_OUTPUT": "true",
        "PORT": "4000",
    })
    def test_reads_environment(self):
        """Test environment variable overrides."""
        settings = Settings()

        assert settings.slides_file == Path("talk.go")
        assert settings.html_output is True
        assert settings.port == 4000


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self):
        """Test that get_settings returns a Settings instance."""
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_cached_instance(self):
        """Test that get_settings returns the same cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
