"""Validated DTOs used at the registry / factory boundary."""

from .adapter_params import AdapterParams

__all__ = [
    "AdapterParams",
]
