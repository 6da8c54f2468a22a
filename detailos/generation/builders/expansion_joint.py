"""ExpansionJointBuilder — two wall ends bridged by membrane, backer rod and sealant."""

from __future__ import annotations

import math

from detailos.generation.appearance import AppearanceLibrary
from detailos.generation.builders.base import DetailBuilder
from detailos.generation.primitives import (
    BoxPrimitive,
    CylinderPrimitive,
    ExtrudedProfile,
    quadratic_curve,
)
from detailos.generation.scene import PlacedPrimitive
from detailos.models.detail import SemanticDetail, Viewport

MEMBRANE_THICKNESS = 1.5
SEALANT_HEIGHT = 20.0


class ExpansionJointBuilder(DetailBuilder):
    """Builder for expansion-joint details."""

    @property
    def name(self) -> str:
        return "expansion-joint"

    def build(
        self,
        detail: SemanticDetail,
        viewport: Viewport,
        appearances: AppearanceLibrary,
    ) -> list[PlacedPrimitive]:
        joint_width = self._param(detail, "jointWidth", 25.0)
        wall_thickness = self._param(detail, "wallThickness", 300.0)
        overlap = self._param(detail, "membraneOverlap", 150.0)
        backer_diameter = self._param(detail, "backerRodDiameter", 32.0)

        height = viewport.height
        depth = viewport.depth
        wall_x = wall_thickness / 2 + joint_width / 2

        placed = []
        for layer_id, x in (("substrate-left", -wall_x), ("substrate-right", wall_x)):
            wall = BoxPrimitive(
                width=wall_thickness, height=height, depth=depth,
                position=(x, height / 2, 0.0),
            )
            placed.append(self._place(detail, appearances, layer_id, wall, "concrete"))

        membrane = ExtrudedProfile(
            outline=self._membrane_outline(wall_thickness + joint_width + 2 * overlap, joint_width),
            depth=depth,
            position=(0.0, height * 0.4, -depth / 2),
            rotation_x=math.pi / 2,
        )
        placed.append(self._place(detail, appearances, "membrane", membrane, "membrane"))

        # Lies along the joint, so the cylinder axis is turned onto Z
        backer = CylinderPrimitive(
            radius_top=backer_diameter / 2,
            radius_bottom=backer_diameter / 2,
            height=depth,
            position=(0.0, height * 0.4 - joint_width * 0.4, 0.0),
            rotation_x=math.pi / 2,
        )
        placed.append(self._place(detail, appearances, "backer-rod", backer, "backer-rod"))

        half = joint_width / 2
        sealant_outline = [(-half, 0.0)]
        sealant_outline += quadratic_curve((-half, 0.0), (0.0, -15.0), (half, 0.0))
        sealant_outline += [(half, SEALANT_HEIGHT), (-half, SEALANT_HEIGHT)]
        sealant = ExtrudedProfile(
            outline=sealant_outline,
            depth=depth,
            position=(0.0, height * 0.4 - joint_width * 0.2, -depth / 2),
            rotation_x=math.pi / 2,
        )
        placed.append(self._place(detail, appearances, "sealant", sealant, "sealant"))

        return placed

    @staticmethod
    def _membrane_outline(span: float, joint_width: float) -> list[tuple[float, float]]:
        """Flat strip with a downward loop over the joint."""
        edge = joint_width / 2 + 10
        sag = -joint_width * 0.8
        t = MEMBRANE_THICKNESS
        outline = [(-span / 2, 0.0), (-edge, 0.0)]
        outline += quadratic_curve((-edge, 0.0), (0.0, sag), (edge, 0.0))
        outline += [(span / 2, 0.0), (span / 2, t), (edge, t)]
        outline += quadratic_curve((edge, t), (0.0, sag + t), (-edge, t))
        outline.append((-span / 2, t))
        return outline
