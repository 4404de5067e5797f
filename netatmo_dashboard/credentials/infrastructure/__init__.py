"""Infrastructure helpers for credential handling."""

from .json_store import JsonCredentialStore, create_json_credential_store
from .memory_cache import InMemoryCredentialCache

__all__ = [
    "JsonCredentialStore",
    "create_json_credential_store",
    "InMemoryCredentialCache",
]
