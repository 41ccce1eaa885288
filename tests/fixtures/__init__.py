"""
Test fixtures for the adsapi library.

This module provides reusable registries, service descriptions and mock objects.
"""

from .builders import *
from .mocks import *

__all__ = [
    # Builders
    "CM_NAMESPACE",
    "RegistryBuilder",
    "build_campaign_registry",
    "build_campaign_service_description",
    "element",
    # Mocks
    "MockTransport",
    "build_fault",
    "build_fault_detail",
    # Data files
    "fixture_path",
]

from pathlib import Path


def fixture_path(filename: str) -> Path:
    """Path of a file in the fixtures data directory."""
    return Path(__file__).parent / "data" / filename
