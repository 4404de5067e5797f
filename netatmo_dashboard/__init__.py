"""Source package for the Netatmo dashboard service."""

__version__ = "1.0.0"
