"""
Global pytest configuration and fixtures for all tests.

This file provides fixtures available to all test modules.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from adsapi.core.config import reset_config  # noqa: E402
from tests.fixtures import (  # noqa: E402
    MockTransport,
    build_campaign_registry,
    build_campaign_service_description,
)


@pytest.fixture
def campaign_registry():
    """TypeRegistry with the CampaignService schema types."""
    return build_campaign_registry()


@pytest.fixture
def campaign_service_description():
    return build_campaign_service_description()


@pytest.fixture
def mock_transport(campaign_registry):
    """Transport double sharing the campaign registry."""
    return MockTransport(campaign_registry)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests away from the user's config file and ADSAPI_* variables."""
    for name in list(os.environ):
        if name.startswith("ADSAPI_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("adsapi.core.config.DEFAULT_CONFIG_FILE", tmp_path / "missing-adsapi.json")
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def restore_library_logger():
    """setup_logging replaces handlers on the adsapi logger; undo it after each test."""
    library_logger = logging.getLogger("adsapi")
    handlers = library_logger.handlers[:]
    level = library_logger.level
    propagate = library_logger.propagate
    yield
    library_logger.handlers = handlers
    library_logger.setLevel(level)
    library_logger.propagate = propagate
