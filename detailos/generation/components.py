"""Parametric detail components — fasteners, laps, sealant beads and bars.

Components follow the builders' section convention: the profile lies in
the XY plane and the run extends along +Z from the origin for *length*
mm.  "up" parts sit on a surface facing +Y; "side" parts are fixed to a
vertical surface facing +X.

Each function returns plain primitives or :class:`Part` lists; a builder
assigns them to layers and resolves their appearances.
"""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, Field

from detailos.generation.primitives import (
    BoxPrimitive,
    CylinderPrimitive,
    ExtrudedProfile,
    Point2,
    Primitive,
    Vec3,
    quadratic_curve,
)

FastenerType = Literal["screw-hex", "screw-pan", "screw-flat", "nail-round", "rivet-dome", "expansion-anchor"]
SealantProfile = Literal["concave", "flat", "convex", "v-groove"]
Facing = Literal["up", "side"]
PartRole = Literal["membrane", "lap", "bar", "fastener", "sealant", "plate"]

# Top radius of the head as a fraction of the bearing radius
_HEAD_TAPER: dict[str, float] = {
    "screw-pan": 0.8,
    "rivet-dome": 0.4,
}

# Floor division on mm values that are exact multiples of the spacing
_EPSILON = 1e-9


class Part(BaseModel):
    """A named primitive produced by a component function."""

    name: str
    role: PartRole
    tag: str
    primitive: Primitive = Field(discriminator="kind")


# ---------------------------------------------------------------------------
# Fasteners
# ---------------------------------------------------------------------------


def fastener_count(length: float, spacing: float, edge_distance: float) -> int:
    """Fasteners in a row of *length* with *edge_distance* kept at each end.

    ``floor((length - 2 * edge_distance) / spacing) + 1``.  A run shorter
    than both edge distances holds none; a non-positive spacing holds one.
    """
    usable = length - 2 * edge_distance
    if usable < 0:
        return 0
    if spacing <= 0:
        return 1
    return math.floor(usable / spacing + _EPSILON) + 1


def fastener_positions(length: float, spacing: float, edge_distance: float) -> list[float]:
    """Offsets along the run, starting at *edge_distance*."""
    return [
        edge_distance + i * spacing
        for i in range(fastener_count(length, spacing, edge_distance))
    ]


def fastener(
    kind: FastenerType = "screw-pan",
    head_diameter: float = 8.0,
    head_height: float = 3.0,
    position: Vec3 = (0.0, 0.0, 0.0),
    axis: Literal["x", "y"] = "y",
) -> CylinderPrimitive:
    """Fastener head as a cylinder or cone along *axis*."""
    radius = head_diameter / 2
    return CylinderPrimitive(
        radius_top=radius * _HEAD_TAPER.get(kind, 1.0),
        radius_bottom=radius,
        height=head_height,
        position=position,
        axis=axis,
    )


def fastener_pattern(
    length: float,
    spacing: float,
    edge_distance: float,
    *,
    kind: FastenerType = "screw-pan",
    head_diameter: float = 8.0,
    head_height: float = 3.0,
    origin: Vec3 = (0.0, 0.0, 0.0),
    facing: Facing = "up",
    name: str = "fastener",
) -> list[Part]:
    """A row of fastener heads along the run, seated on the surface at *origin*."""
    ox, oy, oz = origin
    parts: list[Part] = []
    for i, offset in enumerate(fastener_positions(length, spacing, edge_distance), start=1):
        if facing == "side":
            position = (ox + head_height / 2, oy, oz + offset)
        else:
            position = (ox, oy + head_height / 2, oz + offset)
        parts.append(Part(
            name=f"{name}-{i}",
            role="fastener",
            tag="steel",
            primitive=fastener(
                kind, head_diameter, head_height, position,
                axis="x" if facing == "side" else "y",
            ),
        ))
    return parts


def stress_plate(diameter: float = 75.0, position: Vec3 = (0.0, 0.0, 0.0)) -> list[Part]:
    """Round insulation plate with its screw, seated at *position*."""
    x, y, z = position
    return [
        Part(
            name="stress-plate",
            role="plate",
            tag="steel",
            primitive=CylinderPrimitive(
                radius_top=diameter / 2, radius_bottom=diameter / 2, height=1.0,
                position=(x, y + 0.5, z),
            ),
        ),
        Part(
            name="stress-plate-fastener",
            role="fastener",
            tag="steel",
            primitive=fastener("screw-pan", 10.0, 4.0, (x, y + 1.0 + 2.0, z)),
        ),
    ]


# ---------------------------------------------------------------------------
# Membranes and sealants
# ---------------------------------------------------------------------------


def membrane_lap(
    width: float,
    length: float,
    thickness: float,
    rollover_radius: float | None = None,
    position: Vec3 = (0.0, 0.0, 0.0),
) -> ExtrudedProfile:
    """Overlapping sheet edge with a rolled-over leading edge."""
    rollover = rollover_radius or thickness * 0.5
    top = thickness + rollover * 0.1
    outline: list[Point2] = [(0.0, 0.0), (width, 0.0), (width, thickness)]
    outline += quadratic_curve(
        (width, thickness),
        (width + rollover * 0.5, thickness + rollover * 0.3),
        (width - rollover, top),
    )
    outline.append((0.0, top))
    return ExtrudedProfile(outline=outline, depth=length, position=position)


def sealant_bead(
    length: float,
    joint_width: float,
    joint_depth: float,
    profile: SealantProfile = "concave",
    position: Vec3 = (0.0, 0.0, 0.0),
) -> ExtrudedProfile:
    """Sealant filling a joint, its exposed face at y=0 tooled to *profile*.

    The bead fills the joint down to ``-joint_depth``.  Concave and
    v-groove faces dip below the joint edges, convex faces crown above.
    """
    hw = joint_width / 2
    sag = joint_depth * 0.25
    outline: list[Point2] = [(-hw, -joint_depth), (hw, -joint_depth), (hw, 0.0)]
    if profile == "concave":
        outline += quadratic_curve((hw, 0.0), (0.0, -2 * sag), (-hw, 0.0))
    elif profile == "convex":
        outline += quadratic_curve((hw, 0.0), (0.0, 2 * sag), (-hw, 0.0))
    elif profile == "v-groove":
        outline += [(0.0, -sag), (-hw, 0.0)]
    else:
        outline.append((-hw, 0.0))
    return ExtrudedProfile(outline=outline, depth=length, position=position)


# ---------------------------------------------------------------------------
# Assemblies
# ---------------------------------------------------------------------------


def termination_bar(
    length: float,
    *,
    width: float = 25.0,
    thickness: float = 3.0,
    fastener_spacing: float = 150.0,
    origin: Vec3 = (0.0, 0.0, 0.0),
    facing: Facing = "up",
) -> list[Part]:
    """Metal bar with pan-head screws at *fastener_spacing*.

    *origin* is the start of the bar's centreline on the mounting surface.
    The first screw sits half a spacing in from the end of the bar.
    """
    ox, oy, oz = origin
    if facing == "side":
        bar = BoxPrimitive(
            width=thickness, height=width, depth=length,
            position=(ox + thickness / 2, oy, oz + length / 2),
        )
        seat = (ox + thickness, oy, oz)
    else:
        bar = BoxPrimitive(
            width=width, height=thickness, depth=length,
            position=(ox, oy + thickness / 2, oz + length / 2),
        )
        seat = (ox, oy + thickness, oz)

    parts = [Part(name="termination-bar", role="bar", tag="termination-bar", primitive=bar)]
    parts += fastener_pattern(
        length, fastener_spacing, fastener_spacing / 2,
        kind="screw-pan", origin=seat, facing=facing, name="termination-bar-fastener",
    )
    return parts


def base_flashing(
    height: float,
    length: float,
    *,
    thickness: float = 1.5,
    lap_width: float = 75.0,
    fastener_spacing: float = 150.0,
    origin: Vec3 = (0.0, 0.0, 0.0),
) -> list[Part]:
    """Flashing sheet turned up a wall face at *origin*.

    The sheet rises *height* mm up the face, laps *lap_width* mm onto the
    field at its foot and is held at the top by a termination bar capped
    with a sealant bead.
    """
    ox, oy, oz = origin
    bar_width = 25.0
    bar_thickness = 3.0
    parts = [
        Part(
            name="base-flashing",
            role="membrane",
            tag="membrane",
            primitive=BoxPrimitive(
                width=thickness, height=height, depth=length,
                position=(ox + thickness / 2, oy + height / 2, oz + length / 2),
            ),
        ),
        Part(
            name="base-flashing-lap",
            role="lap",
            tag="membrane",
            primitive=membrane_lap(lap_width, length, thickness, position=(ox + thickness, oy, oz)),
        ),
    ]
    parts += termination_bar(
        length,
        width=bar_width,
        thickness=bar_thickness,
        fastener_spacing=fastener_spacing,
        origin=(ox + thickness, oy + height - bar_width / 2 - 2.5, oz),
        facing="side",
    )
    parts.append(Part(
        name="termination-sealant",
        role="sealant",
        tag="sealant",
        primitive=sealant_bead(
            length, 10.0, 10.0, "concave",
            position=(ox + thickness + bar_thickness / 2, oy + height, oz),
        ),
    ))
    return parts
