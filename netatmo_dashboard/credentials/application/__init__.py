"""Application layer helpers for credential handling."""

from .ports import (
    CredentialCache,
    CredentialStorePort,
    identity_from_config_id,
)
from .services import CredentialRegistry

__all__ = [
    "CredentialCache",
    "CredentialStorePort",
    "CredentialRegistry",
    "identity_from_config_id",
]
