"""Infrastructure helpers for the Netatmo integration."""

from .client import NetatmoClientAdapter, create_netatmo_client_adapter

__all__ = ["NetatmoClientAdapter", "create_netatmo_client_adapter"]
