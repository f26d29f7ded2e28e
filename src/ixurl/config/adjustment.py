"""Color and tone adjustment configuration.

Most adjustments are signed percentages in [-100, 100] with 0 meaning no
change. A few are one-sided (highlights, shadows, sharpen) and hue is an
angle in degrees.
"""

from __future__ import annotations

from dataclasses import dataclass

from ixurl.config.operations import OperationSpec


@dataclass(frozen=True)
class AdjustmentConfig:
    """Ranges for all adjustment parameters."""

    brightness: OperationSpec = OperationSpec(
        name="brightness",
        key="bri",
        min_value=-100,
        max_value=100,
        default=0,
        description="Brightness: -100=black, 0=no change, 100=white",
    )

    contrast: OperationSpec = OperationSpec(
        name="contrast",
        key="con",
        min_value=-100,
        max_value=100,
        default=0,
        description="Contrast: -100=flat gray, 0=no change",
    )

    exposure: OperationSpec = OperationSpec(
        name="exposure",
        key="exp",
        min_value=-100,
        max_value=100,
        default=0,
        description="Exposure in relative stops",
    )

    gamma: OperationSpec = OperationSpec(
        name="gamma",
        key="gam",
        min_value=-100,
        max_value=100,
        default=0,
        description="Gamma: negative=darker midtones, positive=brighter",
    )

    highlights: OperationSpec = OperationSpec(
        name="highlights",
        key="high",
        min_value=-100,
        max_value=0,
        default=0,
        description="Highlight recovery: -100=strongest, 0=no change",
    )

    hue_shift: OperationSpec = OperationSpec(
        name="hue_shift",
        key="hue",
        min_value=0,
        max_value=359,
        default=0,
        description="Hue rotation in degrees",
    )

    saturation: OperationSpec = OperationSpec(
        name="saturation",
        key="sat",
        min_value=-100,
        max_value=100,
        default=0,
        description="Saturation: -100=grayscale, 0=no change",
    )

    shadows: OperationSpec = OperationSpec(
        name="shadows",
        key="shad",
        min_value=0,
        max_value=100,
        default=0,
        description="Shadow lift: 0=no change, 100=strongest",
    )

    sharpen: OperationSpec = OperationSpec(
        name="sharpen",
        key="sharp",
        min_value=0,
        max_value=100,
        default=0,
        description="Sharpening strength",
    )

    vibrance: OperationSpec = OperationSpec(
        name="vibrance",
        key="vib",
        min_value=-100,
        max_value=100,
        default=0,
        description="Smart saturation of muted colors",
    )

    unsharp_mask: OperationSpec = OperationSpec(
        name="unsharp_mask",
        key="usm",
        min_value=-100,
        max_value=100,
        default=0,
        description="Unsharp mask amount",
    )

    unsharp_radius: OperationSpec = OperationSpec(
        name="unsharp_radius",
        key="usmrad",
        min_value=0,
        max_value=500,
        default=2.5,
        description="Unsharp mask radius in pixels",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get adjustment spec by name.

        :param name: Adjustment name
        :return: OperationSpec for the adjustment
        :raises AttributeError: If adjustment not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all adjustment specs as a dictionary.

        :return: Dictionary mapping adjustment names to specs
        """
        return {
            "brightness": self.brightness,
            "contrast": self.contrast,
            "exposure": self.exposure,
            "gamma": self.gamma,
            "highlights": self.highlights,
            "hue_shift": self.hue_shift,
            "saturation": self.saturation,
            "shadows": self.shadows,
            "sharpen": self.sharpen,
            "vibrance": self.vibrance,
            "unsharp_mask": self.unsharp_mask,
            "unsharp_radius": self.unsharp_radius,
        }
