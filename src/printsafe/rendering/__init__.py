"""Filter descriptors for the external renderer."""

from .filters import FilterDescriptor, IDENTITY_FILTER, compose_filter, noise_opacity

__all__ = [
    "FilterDescriptor",
    "IDENTITY_FILTER",
    "compose_filter",
    "noise_opacity",
]
