"""Size and crop parameter configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ixurl.config.operations import OperationSpec

MAX_DIMENSION = 8192


@dataclass(frozen=True)
class SizeConfig:
    """Ranges for size, crop and focal-point parameters.

    Absolute dimensions are pixels; relative dimensions are fractions of the
    source image.
    """

    width: OperationSpec = OperationSpec(
        name="width",
        key="w",
        min_value=0,
        max_value=MAX_DIMENSION,
        default=0,
        description="Output width in pixels",
    )

    height: OperationSpec = OperationSpec(
        name="height",
        key="h",
        min_value=0,
        max_value=MAX_DIMENSION,
        default=0,
        description="Output height in pixels",
    )

    relative_width: OperationSpec = OperationSpec(
        name="relative_width",
        key="w",
        min_value=0.0,
        max_value=1.0,
        default=1.0,
        description="Output width as a fraction of the source width",
    )

    relative_height: OperationSpec = OperationSpec(
        name="relative_height",
        key="h",
        min_value=0.0,
        max_value=1.0,
        default=1.0,
        description="Output height as a fraction of the source height",
    )

    max_width: OperationSpec = OperationSpec(
        name="max_width",
        key="max-w",
        min_value=0,
        max_value=MAX_DIMENSION,
        default=MAX_DIMENSION,
        description="Upper bound on output width",
    )

    max_height: OperationSpec = OperationSpec(
        name="max_height",
        key="max-h",
        min_value=0,
        max_value=MAX_DIMENSION,
        default=MAX_DIMENSION,
        description="Upper bound on output height",
    )

    min_width: OperationSpec = OperationSpec(
        name="min_width",
        key="min-w",
        min_value=0,
        max_value=MAX_DIMENSION,
        default=0,
        description="Lower bound on output width",
    )

    min_height: OperationSpec = OperationSpec(
        name="min_height",
        key="min-h",
        min_value=0,
        max_value=MAX_DIMENSION,
        default=0,
        description="Lower bound on output height",
    )

    focal_x: OperationSpec = OperationSpec(
        name="focal_x",
        key="fp-x",
        min_value=0.0,
        max_value=1.0,
        default=0.5,
        description="Horizontal focal point: 0=left edge, 1=right edge",
    )

    focal_y: OperationSpec = OperationSpec(
        name="focal_y",
        key="fp-y",
        min_value=0.0,
        max_value=1.0,
        default=0.5,
        description="Vertical focal point: 0=top edge, 1=bottom edge",
    )

    focal_zoom: OperationSpec = OperationSpec(
        name="focal_zoom",
        key="fp-z",
        min_value=1,
        max_value=100,
        default=1,
        description="Zoom factor around the focal point",
    )

    def get_spec(self, name: str) -> OperationSpec:
        """Get parameter spec by name.

        :param name: Parameter name
        :return: OperationSpec for the parameter
        :raises AttributeError: If parameter not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all parameter specs as a dictionary.

        :return: Dictionary mapping parameter names to specs
        """
        return {
            "width": self.width,
            "height": self.height,
            "relative_width": self.relative_width,
            "relative_height": self.relative_height,
            "max_width": self.max_width,
            "max_height": self.max_height,
            "min_width": self.min_width,
            "min_height": self.min_height,
            "focal_x": self.focal_x,
            "focal_y": self.focal_y,
            "focal_zoom": self.focal_zoom,
        }
