"""Ports for credential persistence and the runtime credential cache."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from ...models.credentials import CredentialRecord

IDENTITY_LENGTH = 16


def identity_from_config_id(config_id: str) -> str:
    """Derive the store key from an opaque configuration identifier."""
    return config_id[-IDENTITY_LENGTH:]


class CredentialStorePort(ABC):
    """Durable per-identity credential storage."""

    @abstractmethod
    def load(self, identity: str) -> Optional[CredentialRecord]:
        """Return the stored record or ``None`` when nothing is stored."""

    @abstractmethod
    def save(self, identity: str, record: CredentialRecord) -> None:
        """Persist ``record`` for ``identity`` without touching other identities."""


@runtime_checkable
class CredentialCache(Protocol):
    """Process-wide credential registry visible to the runtime."""

    def add(self, identity: str, record: CredentialRecord) -> None:
        ...

    def get(self, identity: str) -> Optional[CredentialRecord]:
        ...


__all__ = [
    "IDENTITY_LENGTH",
    "identity_from_config_id",
    "CredentialStorePort",
    "CredentialCache",
]
