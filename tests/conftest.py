"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest


SAMPLE_CONFIG = """\
# Sample server configuration
user www-data;

http {
    server {
        listen 80;
        server_name example.com www.example.com;

        location / {
            index index.html;
            allowed_methods GET POST;
        }
    }
}
"""


@pytest.fixture
def sample_source() -> str:
    """Well-formed configuration text."""
    return SAMPLE_CONFIG


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path to a well-formed configuration file."""
    path = tmp_path / "nginx.conf"
    path.write_text(SAMPLE_CONFIG)
    return path


@pytest.fixture
def broken_config_path(tmp_path: Path) -> Path:
    """Path to a configuration file with an unclosed block."""
    path = tmp_path / "broken.conf"
    path.write_text("server {\n    listen 80\n")
    return path
