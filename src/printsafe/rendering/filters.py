"""Visual filter descriptors handed to the external renderer."""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any

@dataclass(frozen=True)
class FilterDescriptor:
    """
    Parameters of the simulated print degradation.

    ``noise_overlay_opacity`` is 0 whenever there is no noise; the renderer
    should then omit the overlay layer altogether (see ``has_noise_overlay``).
    """
    blur_px: float = 0.0
    contrast_percent: float = 100.0
    noise_overlay_opacity: float = 0.0

    @property
    def is_identity(self) -> bool:
        return self == IDENTITY_FILTER

    @property
    def has_noise_overlay(self) -> bool:
        return self.noise_overlay_opacity > 0

    def css_filter(self) -> str:
        """CSS ``filter`` value, ``"none"`` for the undistorted view."""
        if self.is_identity:
            return "none"
        return f"blur({self.blur_px:g}px) contrast({self.contrast_percent:g}%)"

    def noise_overlay_css(self) -> str:
        """CSS background for the noise layer, empty when there is no overlay."""
        if not self.has_noise_overlay:
            return ""
        o = f"{self.noise_overlay_opacity:g}"
        return f"linear-gradient(rgba(0,0,0,{o}), rgba(0,0,0,{o}))"

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


IDENTITY_FILTER = FilterDescriptor()

def noise_opacity(noise: float) -> float:
    """Overlay opacity for a noise percentage; 0 means no overlay."""
    if noise <= 0:
        return 0.0
    return min(1.0, noise / 100)

def compose_filter(state, before_mode: bool = False) -> FilterDescriptor:
    """
    Map control values to a filter descriptor.

    In before mode the original, undistorted view is shown, so the identity
    descriptor is returned whatever the state holds.
    """
    if before_mode:
        return IDENTITY_FILTER
    return FilterDescriptor(
        blur_px=state.blur,
        contrast_percent=state.contrast,
        noise_overlay_opacity=noise_opacity(state.noise),
    )
