"""
In-memory repository adapter - Implements RegistryStore protocol.

Process-local storage for the four registry maps. This is the default
backend and the one used by unit tests; state lives only as long as the
instance.
"""

from dataclasses import replace

from provider_registry.domain.ports import Provider, VerificationStatus


class InMemoryRegistryStore:
    """
    Implements RegistryStore protocol with dicts and a set.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Not thread-safe on its own; ProviderRegistry serializes writers.
    """

    def __init__(self) -> None:
        self._provider_count = 0
        self._providers: dict[int, Provider] = {}
        self._principal_to_provider: dict[str, int] = {}
        self._verifiers: set[str] = set()

    def claim_principal(self, principal: str, name: str, credentials: str) -> int | None:
        if principal in self._principal_to_provider:
            return None

        provider_id = self._provider_count + 1
        self._providers[provider_id] = Provider(id=provider_id, name=name, credentials=credentials)
        self._principal_to_provider[principal] = provider_id
        self._provider_count = provider_id
        return provider_id

    def add_verifier(self, principal: str) -> None:
        self._verifiers.add(principal)

    def is_verifier(self, principal: str) -> bool:
        return principal in self._verifiers

    def list_verifiers(self) -> frozenset[str]:
        return frozenset(self._verifiers)

    def update_verification(
        self, provider_id: int, background_check_passed: bool, status: VerificationStatus
    ) -> bool:
        provider = self._providers.get(provider_id)
        if provider is None:
            return False

        # Swap in a new record so concurrent readers never see a half-applied update
        self._providers[provider_id] = replace(
            provider,
            background_check_passed=background_check_passed,
            verification_status=status,
        )
        return True

    def get_provider(self, provider_id: int) -> Provider | None:
        return self._providers.get(provider_id)

    def get_provider_id(self, principal: str) -> int | None:
        return self._principal_to_provider.get(principal)

    def provider_count(self) -> int:
        return self._provider_count
