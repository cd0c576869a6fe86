"""Service layer for loading profile data handed over by the provider."""

from . import profiles

__all__ = [
    "profiles",
]
