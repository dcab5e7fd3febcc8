"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

STORE_ENV_VARS = (
    "CONFSTORE_DEFAULT_PATH",
    "CONFSTORE_HEADER",
    "CONFSTORE_ENCODING",
    "CONFSTORE_WRITE_TIMESTAMP",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Clear store environment variables."""
    for name in STORE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store_env(monkeypatch, tmp_path):
    """Point the store at a temporary default file."""
    default_path = tmp_path / "default.properties"
    monkeypatch.setenv("CONFSTORE_DEFAULT_PATH", str(default_path))
    monkeypatch.setenv("CONFSTORE_HEADER", "Test Configuration")
    monkeypatch.setenv("CONFSTORE_ENCODING", "utf-8")
    monkeypatch.setenv("CONFSTORE_WRITE_TIMESTAMP", "true")
    return default_path


# =============================================================================
# Singleton Reset
# =============================================================================

@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the store singleton and cached config before and after each test."""
    from confstore.store.config import reset_store_config
    from confstore.store.manager import ConfigurationManager

    ConfigurationManager.reset_instance()
    reset_store_config()

    yield

    ConfigurationManager.reset_instance()
    reset_store_config()


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def manager(clean_env):
    """A fresh ConfigurationManager instance."""
    from confstore.store.manager import ConfigurationManager
    return ConfigurationManager.get_instance()


@pytest.fixture
def properties_file(tmp_path):
    """Path for a temporary properties file."""
    return tmp_path / "app.properties"
