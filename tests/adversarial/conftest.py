"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition and probing tests.
"""

import pytest

from provider_registry.adapters.repository.memory import InMemoryRegistryStore
from provider_registry.domain.registry import ProviderRegistry

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial

ADMIN = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
VERIFIER = "ST3PF13W7Z0RRM42A8VZRVFQ75SV1K26RXEP8YGKJ"


@pytest.fixture
def registry() -> ProviderRegistry:
    """Registry with one granted verifier and no providers."""
    registry = ProviderRegistry(admin=ADMIN, store=InMemoryRegistryStore())
    registry.add_verifier(VERIFIER, ADMIN)
    return registry
