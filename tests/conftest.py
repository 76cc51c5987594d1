"""
Pytest configuration and fixtures for league stats engine tests.

This file provides test isolation and shared fixtures.
"""
import asyncio
import os
import pytest

# Ensure environment is set up before any imports happen
os.environ.setdefault("TESTING", "true")


@pytest.fixture(autouse=True)
def reset_singleton_state():
    """
    Reset any singleton/global state between tests.

    This prevents test pollution from global state in config and logging.
    """
    yield  # Run test

    # Reset config singleton to ensure clean state
    try:
        import config as cfg
        cfg._config = None
    except (ImportError, AttributeError):
        pass

    try:
        from utils.logging import clear_context
        clear_context()
    except ImportError:
        pass


@pytest.fixture(scope="session")
def event_loop_policy():
    """Use default event loop policy."""
    return asyncio.DefaultEventLoopPolicy()
