"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fresh in-memory store per test
- A registry over that store, administered by ADMIN
"""

import pytest

from provider_registry.adapters.repository.memory import InMemoryRegistryStore
from provider_registry.domain.registry import ProviderRegistry

ADMIN = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


@pytest.fixture
def store() -> InMemoryRegistryStore:
    """Empty in-memory store."""
    return InMemoryRegistryStore()


@pytest.fixture
def registry(store: InMemoryRegistryStore) -> ProviderRegistry:
    """Registry with the well-known admin over an empty store."""
    return ProviderRegistry(admin=ADMIN, store=store)
