"""Stylize effect configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ixurl.config.operations import OperationSpec


@dataclass(frozen=True)
class StylizeConfig:
    """Ranges for stylize effect intensities."""

    duotone_alpha: OperationSpec = OperationSpec(
        name="duotone_alpha",
        key="duotone-alpha",
        min_value=0.0,
        max_value=1.0,
        default=1.0,
        description="Duotone blend with the original: 0=original, 1=full duotone",
    )

    blur: OperationSpec = OperationSpec(
        name="blur",
        key="blur",
        min_value=0,
        max_value=2000,
        default=0,
        description="Gaussian blur radius",
    )

    halftone: OperationSpec = OperationSpec(
        name="halftone",
        key="htn",
        min_value=0,
        max_value=100,
        default=0,
        description="Halftone dot size",
    )

    pixelate: OperationSpec = OperationSpec(
        name="pixelate",
        key="px",
        min_value=0,
        max_value=100,
        default=0,
        description="Pixel block size",
    )

    sepia: OperationSpec = OperationSpec(
        name="sepia",
        key="sepia",
        min_value=0,
        max_value=100,
        default=0,
        description="Sepia toning strength",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get effect spec by name.

        :param name: Effect name
        :return: OperationSpec for the effect
        :raises AttributeError: If effect not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all effect specs as a dictionary.

        :return: Dictionary mapping effect names to specs
        """
        return {
            "duotone_alpha": self.duotone_alpha,
            "blur": self.blur,
            "halftone": self.halftone,
            "pixelate": self.pixelate,
            "sepia": self.sepia,
        }
