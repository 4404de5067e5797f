"""Credential storage modules."""

from .application import (
    CredentialCache,
    CredentialRegistry,
    CredentialStorePort,
    identity_from_config_id,
)
from .infrastructure import (
    InMemoryCredentialCache,
    JsonCredentialStore,
    create_json_credential_store,
)

__all__ = [
    "CredentialCache",
    "CredentialRegistry",
    "CredentialStorePort",
    "identity_from_config_id",
    "InMemoryCredentialCache",
    "JsonCredentialStore",
    "create_json_credential_store",
]
