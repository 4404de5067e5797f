"""Application services keeping the credential cache and store in step."""

from __future__ import annotations

from typing import Optional

from ...errors import ConfigurationMissingError
from ...models.credentials import CredentialRecord
from .ports import CredentialCache, CredentialStorePort


class CredentialRegistry:
    """Runtime view of credentials backed by durable storage.

    The cache holds the live record. The store is consulted only when the
    cache has nothing for an identity, so a rotation that reached the cache
    but failed to reach the file is still used by the next invocation.
    """

    def __init__(self, store: CredentialStorePort, cache: CredentialCache) -> None:
        self._store = store
        self._cache = cache

    def prime(self, identity: str) -> Optional[CredentialRecord]:
        """Copy stored credentials into the cache, if there are any."""
        record = self._store.load(identity)
        if record is not None:
            self._cache.add(identity, record)
        return record

    def load(self, identity: str) -> CredentialRecord:
        record = self._cache.get(identity) or self.prime(identity)
        if record is None:
            raise ConfigurationMissingError(f"No credentials configured for {identity}")
        return record

    def update(self, identity: str, record: CredentialRecord) -> None:
        """Publish ``record`` to the cache, then persist it."""
        self._cache.add(identity, record)
        self._store.save(identity, record)


__all__ = ["CredentialRegistry"]
