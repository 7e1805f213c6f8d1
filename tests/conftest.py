"""Root pytest configuration for test discovery and auto-skip behavior.

All tests stay visible in the test explorer; tests that need a
PostgreSQL container are skipped unless explicitly enabled.

Test Structure:
    tests/
    ├── paddock_auth/          # Hashing and token services
    ├── paddock_config/        # Settings
    ├── paddock_identity/      # Identity domain, application, infrastructure
    │   ├── unit/
    │   └── integration/       # Testcontainers PostgreSQL
    ├── paddock/               # HTTP API and CLI
    └── shared/                # Shared fixtures and fakes

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from paddock_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load a test env file if present (never required)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a PostgreSQL container (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def _flag_enabled(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    if config.getoption("--run-all") or _flag_enabled("RUN_ALL_TESTS"):
        return

    run_integration = config.getoption("--run-integration") or _flag_enabled(
        "RUN_INTEGRATION",
    )
    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def _fresh_settings_cache():
    """Tests that build Settings from the environment start from scratch."""
    clear_settings_cache()
    yield
    clear_settings_cache()
