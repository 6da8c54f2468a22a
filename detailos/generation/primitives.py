"""Geometric primitives emitted by the detail builders.

All dimensions are millimetres.  Primitives are plain data: a renderer
turns them into meshes.  Each primitive carries a position and an
optional rotation about the X axis (radians), the only rotation the
builders use.
"""

from __future__ import annotations

import math
from typing import Literal, Union

from pydantic import BaseModel, Field

Vec3 = tuple[float, float, float]
Point2 = tuple[float, float]
Axis = Literal["x", "y", "z"]


class _Primitive(BaseModel):
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation_x: float = 0.0

    def local_extent(self) -> tuple[Vec3, Vec3]:
        raise NotImplementedError

    def world_bounds(self) -> tuple[Vec3, Vec3]:
        """Axis-aligned bounds after rotation and translation."""
        (x0, y0, z0), (x1, y1, z1) = self.local_extent()
        cos_a = math.cos(self.rotation_x)
        sin_a = math.sin(self.rotation_x)
        px, py, pz = self.position

        ys: list[float] = []
        zs: list[float] = []
        for y in (y0, y1):
            for z in (z0, z1):
                ys.append(y * cos_a - z * sin_a)
                zs.append(y * sin_a + z * cos_a)

        return (
            (x0 + px, min(ys) + py, min(zs) + pz),
            (x1 + px, max(ys) + py, max(zs) + pz),
        )


class BoxPrimitive(_Primitive):
    """Axis-aligned box centred on its position."""

    kind: Literal["box"] = "box"
    width: float
    height: float
    depth: float

    def local_extent(self) -> tuple[Vec3, Vec3]:
        w, h, d = self.width / 2, self.height / 2, self.depth / 2
        return (-w, -h, -d), (w, h, d)


class CircularHole(BaseModel):
    center: Point2 = (0.0, 0.0)
    radius: float


class ExtrudedProfile(_Primitive):
    """A closed 2D outline extruded along local +Z by ``depth``."""

    kind: Literal["extrusion"] = "extrusion"
    outline: list[Point2]
    holes: list[CircularHole] = Field(default_factory=list)
    depth: float

    def local_extent(self) -> tuple[Vec3, Vec3]:
        xs = [p[0] for p in self.outline] or [0.0]
        ys = [p[1] for p in self.outline] or [0.0]
        return (min(xs), min(ys), 0.0), (max(xs), max(ys), self.depth)


class CylinderPrimitive(_Primitive):
    """Cylinder or truncated cone centred on its position.

    The axis runs along local Y unless *axis* says otherwise; the top
    radius is at the positive end.
    """

    kind: Literal["cylinder"] = "cylinder"
    radius_top: float
    radius_bottom: float
    height: float
    open_ended: bool = False
    axis: Axis = "y"

    def local_extent(self) -> tuple[Vec3, Vec3]:
        r = max(self.radius_top, self.radius_bottom)
        h = self.height / 2
        if self.axis == "x":
            return (-h, -r, -r), (h, r, r)
        if self.axis == "z":
            return (-r, -r, -h), (r, r, h)
        return (-r, -h, -r), (r, h, r)


class TorusPrimitive(_Primitive):
    """Ring in the local XY plane."""

    kind: Literal["torus"] = "torus"
    radius: float
    tube: float

    def local_extent(self) -> tuple[Vec3, Vec3]:
        r = self.radius + self.tube
        return (-r, -r, -self.tube), (r, r, self.tube)


Primitive = Union[BoxPrimitive, ExtrudedProfile, CylinderPrimitive, TorusPrimitive]


def quadratic_curve(
    start: Point2,
    control: Point2,
    end: Point2,
    segments: int = 8,
) -> list[Point2]:
    """Sample a quadratic Bezier curve, excluding *start*."""
    points: list[Point2] = []
    for i in range(1, segments + 1):
        t = i / segments
        u = 1 - t
        x = u * u * start[0] + 2 * u * t * control[0] + t * t * end[0]
        y = u * u * start[1] + 2 * u * t * control[1] + t * t * end[1]
        points.append((x, y))
    return points


def rectangle(width: float, height: float) -> list[Point2]:
    """Outline of a rectangle centred on the origin."""
    w, h = width / 2, height / 2
    return [(-w, -h), (w, -h), (w, h), (-w, h)]
