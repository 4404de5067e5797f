from __future__ import annotations

from typing import Dict, Optional

from ...models.credentials import CredentialRecord
from ..application.ports import CredentialCache


class InMemoryCredentialCache(CredentialCache):
    """Dictionary-backed credential registry shared by all requests."""

    def __init__(self) -> None:
        self._records: Dict[str, CredentialRecord] = {}

    def add(self, identity: str, record: CredentialRecord) -> None:
        self._records[identity] = record

    def get(self, identity: str) -> Optional[CredentialRecord]:
        return self._records.get(identity)
