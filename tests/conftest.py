"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sjbuild import config as sjbuild_config


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from ~/.sjbuild and SJBUILD_* variables."""
    monkeypatch.setattr(sjbuild_config, "CONFIG_SEARCH_PATHS", [tmp_path / "missing.yaml"])
    for var in (
        "SJBUILD_SERVER_FLAG_PREFIX",
        "SJBUILD_ARCHIVE_MARKER",
        "SJBUILD_LOG_LEVEL",
        "SJBUILD_SJAVAC",
    ):
        monkeypatch.delenv(var, raising=False)
    sjbuild_config.reset_config()
    yield
    sjbuild_config.reset_config()


@pytest.fixture
def config_file(tmp_path):
    """Factory writing a YAML config file and returning its path."""
    def _write(content: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


# =============================================================================
# SAMPLE DATA
# =============================================================================

@pytest.fixture
def server_option():
    """A realistic --server: argument."""
    return "--server:portfile=/tmp/javac.port,sjavac=/opt/bin/sjavac,id=build42,poolsize=4,keepalive=30,background=false"
