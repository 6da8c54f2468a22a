"""Tests for geometry reconstruction: builders, appearances and the scene."""

from __future__ import annotations

import json

import pytest

from detailos.catalog.sample_details import SAMPLE_DETAILS, get_detail_by_id
from detailos.generation import (
    AppearanceLibrary,
    CylinderPrimitive,
    ExtrudedProfile,
    GeometryReconstructor,
    base_flashing,
    calculate_compression_ratio,
    fastener,
    fastener_count,
    fastener_pattern,
    fastener_positions,
    get_builder,
    membrane_lap,
    sealant_bead,
    stress_plate,
    termination_bar,
)
from detailos.generation.builders import GenericStackBuilder, WallAssemblyBuilder
from detailos.generation.primitives import BoxPrimitive, quadratic_curve
from detailos.models.detail import SemanticDetail, Viewport


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _stack(category: str = "waterproofing", **overrides) -> SemanticDetail:
    doc = {
        "id": "G-001",
        "category": category,
        "name": "Generic Stack",
        "layers": [
            {"id": "deck", "material": "concrete", "thickness": 150},
            {"id": "insulation", "material": "insulation-rigid", "thickness": 75.5},
            {"id": "membrane", "material": "membrane-sheet", "thickness": 1.5},
            {"id": "ballast", "material": "gravel-mix", "thickness": 50},
        ],
    }
    doc.update(overrides)
    return SemanticDetail.from_document(doc)


@pytest.fixture
def reconstructor() -> GeometryReconstructor:
    return GeometryReconstructor()


# ---------------------------------------------------------------------------
# Builder selection
# ---------------------------------------------------------------------------

class TestBuilderRegistry:
    def test_known_categories(self):
        assert get_builder("roofing").name == "roofing"
        assert get_builder("expansion-joint").name == "expansion-joint"
        assert isinstance(get_builder("air-barrier"), WallAssemblyBuilder)
        assert isinstance(get_builder("wall-assembly"), WallAssemblyBuilder)

    def test_fallback_is_generic(self):
        assert isinstance(get_builder("flashing"), GenericStackBuilder)
        assert isinstance(get_builder("waterproofing"), GenericStackBuilder)


# ---------------------------------------------------------------------------
# Generic stack
# ---------------------------------------------------------------------------

class TestGenericStack:
    def test_stack_height_equals_total_thickness(self, reconstructor):
        detail = _stack()
        scene = reconstructor.reconstruct(detail)
        assert scene.builder == "generic"
        assert scene.stack_height == pytest.approx(detail.total_thickness)

    def test_placement_follows_layer_order(self, reconstructor):
        detail = _stack()
        scene = reconstructor.reconstruct(detail)
        assert [p.layer_id for p in scene.primitives] == detail.layer_ids()
        bottoms = [p.primitive.world_bounds()[0][1] for p in scene.primitives]
        assert bottoms == sorted(bottoms)
        assert bottoms[0] == pytest.approx(0.0)

    def test_layer_thickness_preserved(self, reconstructor):
        scene = reconstructor.reconstruct(_stack())
        heights = [p.primitive.height for p in scene.primitives]
        assert heights == pytest.approx([150, 75.5, 1.5, 50])

    def test_empty_detail(self, reconstructor):
        scene = reconstructor.reconstruct(_stack(layers=[]))
        assert len(scene) == 0
        assert scene.bounds() is None
        assert scene.stack_height == 0.0


# ---------------------------------------------------------------------------
# Category builders
# ---------------------------------------------------------------------------

class TestCategoryBuilders:
    def test_every_sample_reconstructs(self, reconstructor):
        for detail in SAMPLE_DETAILS:
            scene = reconstructor.reconstruct(detail)
            assert len(scene) > 0, detail.id
            assert scene.builder != "generic", detail.id

    def test_viewport_precedence(self, reconstructor):
        detail = get_detail_by_id("RF-002")
        assert reconstructor.reconstruct(detail).viewport == detail.viewport
        override = Viewport(width=800, height=600, depth=100)
        assert reconstructor.reconstruct(detail, override).viewport == override
        detail.viewport = None
        assert reconstructor.reconstruct(detail).viewport.width == 400.0

    def test_expansion_joint_layers(self, reconstructor):
        scene = reconstructor.reconstruct(get_detail_by_id("WP-003"))
        ids = scene.layer_ids()
        for layer_id in ("substrate-left", "substrate-right", "membrane", "backer-rod", "sealant"):
            assert layer_id in ids

    def test_studs_follow_spacing(self, reconstructor):
        detail = get_detail_by_id("AB-001")
        detail.parameters["studsSpacing"] = 100
        scene = reconstructor.reconstruct(detail)
        studs = scene.for_layer("stud")
        assert len(studs) == 4
        assert len({p.name for p in studs}) == 4

    def test_non_positive_spacing_terminates(self, reconstructor):
        detail = get_detail_by_id("AB-001")
        detail.parameters["studsSpacing"] = 0
        scene = reconstructor.reconstruct(detail)
        assert len(scene.for_layer("stud")) == 1

    def test_non_numeric_parameter_uses_default(self, reconstructor):
        detail = get_detail_by_id("AB-001")
        detail.parameters["studsSpacing"] = "wide"
        scene = reconstructor.reconstruct(detail)
        assert len(scene.for_layer("stud")) == 1

    def test_roof_uses_layer_appearance(self, reconstructor):
        scene = reconstructor.reconstruct(get_detail_by_id("RF-002"))
        membrane = scene.for_layer("roof-membrane")[0]
        assert membrane.appearance.color == "#1a1a1a"
        coping = scene.for_layer("metal-coping")[0]
        assert coping.primitive.kind == "extrusion"

    def test_penetration_primitives(self, reconstructor):
        scene = reconstructor.reconstruct(get_detail_by_id("PN-001"))
        kinds = {p.primitive.kind for p in scene.primitives}
        assert {"extrusion", "cylinder", "torus"} <= kinds
        substrate = scene.for_layer("substrate")[0].primitive
        assert substrate.holes

    def test_foundation_parts(self, reconstructor):
        scene = reconstructor.reconstruct(get_detail_by_id("FD-001"))
        assert "drainage-mat" in scene.layer_ids()
        assert "footing" in scene.layer_ids()

    def test_scene_serialises(self, reconstructor):
        scene = reconstructor.reconstruct(get_detail_by_id("PN-001"))
        data = json.loads(scene.to_json())
        assert data["detail_id"] == "PN-001"
        assert len(data["primitives"]) == len(scene)

    def test_input_not_modified(self, reconstructor):
        detail = get_detail_by_id("WP-003")
        before = detail.model_dump()
        reconstructor.reconstruct(detail)
        assert detail.model_dump() == before


# ---------------------------------------------------------------------------
# Appearances
# ---------------------------------------------------------------------------

class TestAppearanceLibrary:
    def test_known_tag(self):
        appearance = AppearanceLibrary().get("concrete")
        assert appearance.color == "#808080"
        assert appearance.roughness == pytest.approx(0.85)

    def test_authored_color_overrides(self):
        appearance = AppearanceLibrary().get("concrete", color="#123456", roughness=0.1)
        assert appearance.color == "#123456"
        assert appearance.roughness == pytest.approx(0.85)

    def test_unknown_tag_neutral(self):
        appearance = AppearanceLibrary().get("unobtainium", roughness=0.2)
        assert appearance.color == "#808080"
        assert appearance.roughness == pytest.approx(0.2)
        assert appearance.metalness == 0.0

    def test_emissive_intensity(self):
        appearance = AppearanceLibrary().get("air-barrier", emissive="#ff6b00")
        assert appearance.emissive_intensity == pytest.approx(0.15)
        assert AppearanceLibrary().get("air-barrier").emissive_intensity == 0.0

    def test_cached(self):
        library = AppearanceLibrary()
        first = library.get("steel", color="#333333")
        assert library.get("steel", color="#333333") is first
        assert len(library) == 1
        library.clear()
        assert len(library) == 0

    def test_overrides_are_local(self):
        library = AppearanceLibrary(overrides={"glass": ("#aaddff", 0.05, 0.0)})
        assert library.get("glass").color == "#aaddff"
        assert AppearanceLibrary().get("glass").color == "#808080"

    def test_reconstructor_uses_given_library(self):
        # A fresh library has an empty cache and must still be kept
        library = AppearanceLibrary(overrides={"concrete": ("#ff0000", 0.1, 0.0)})
        reconstructor = GeometryReconstructor(library)
        assert reconstructor.appearances is library

        scene = reconstructor.reconstruct(_stack(layers=[
            {"id": "deck", "material": "concrete", "thickness": 150},
        ]))
        appearance = scene.primitives[0].appearance
        assert appearance.color == "#ff0000"
        assert appearance.roughness == pytest.approx(0.1)
        assert len(library) == 1


# ---------------------------------------------------------------------------
# Primitives and compression
# ---------------------------------------------------------------------------

class TestPrimitives:
    def test_box_bounds(self):
        box = BoxPrimitive(width=10, height=4, depth=2, position=(0.0, 2.0, 0.0))
        low, high = box.world_bounds()
        assert low == pytest.approx((-5, 0, -1))
        assert high == pytest.approx((5, 4, 1))

    def test_quadratic_curve_excludes_start(self):
        points = quadratic_curve((0.0, 0.0), (5.0, -10.0), (10.0, 0.0), segments=4)
        assert len(points) == 4
        assert points[-1] == pytest.approx((10.0, 0.0))
        assert points[1] == pytest.approx((5.0, -5.0))


class TestCompressionRatio:
    def test_ratio(self):
        result = calculate_compression_ratio(get_detail_by_id("RF-002"))
        assert result["semantic_bytes"] > 0
        assert result["estimated_mesh_bytes"] == 500_000 + (10 * 2 + 7) * 200_000
        assert result["ratio"] > 100


# ---------------------------------------------------------------------------
# Parametric components
# ---------------------------------------------------------------------------

class TestFastenerLayout:
    def test_count(self):
        assert fastener_count(1000, 150, 75) == 6
        assert fastener_count(300, 150, 75) == 2
        assert fastener_count(150, 150, 75) == 1

    def test_short_run_holds_none(self):
        assert fastener_count(100, 150, 75) == 0
        assert fastener_positions(100, 150, 75) == []

    def test_non_positive_spacing_holds_one(self):
        assert fastener_count(500, 0, 50) == 1
        assert fastener_count(500, -10, 50) == 1

    def test_exact_multiple_with_float_error(self):
        # 0.3 / 0.1 evaluates just below 3
        assert fastener_count(0.3, 0.1, 0.0) == 4

    def test_positions_start_at_edge_distance(self):
        assert fastener_positions(600, 150, 75) == pytest.approx([75, 225, 375, 525])

    def test_pattern_seated_on_surface(self):
        parts = fastener_pattern(600, 150, 75, origin=(10.0, 20.0, -300.0), head_height=3.0)
        assert [p.name for p in parts] == ["fastener-1", "fastener-2", "fastener-3", "fastener-4"]
        assert all(p.role == "fastener" for p in parts)
        zs = [p.primitive.position[2] for p in parts]
        assert zs == pytest.approx([-225, -75, 75, 225])
        for part in parts:
            assert part.primitive.kind == "cylinder"
            assert part.primitive.axis == "y"
            assert part.primitive.position[:2] == pytest.approx((10.0, 21.5))

    def test_pattern_on_vertical_face(self):
        parts = fastener_pattern(300, 150, 75, origin=(10.0, 20.0, 0.0), facing="side")
        assert len(parts) == 2
        head = parts[0].primitive
        assert head.axis == "x"
        assert head.position == pytest.approx((11.5, 20.0, 75.0))
        low, high = head.world_bounds()
        assert low[0] == pytest.approx(10.0)
        assert high[0] == pytest.approx(13.0)

    def test_head_shapes(self):
        assert fastener("screw-hex").radius_top == pytest.approx(4.0)
        assert fastener("screw-pan").radius_top == pytest.approx(3.2)
        assert fastener("rivet-dome", head_diameter=10).radius_top == pytest.approx(2.0)


class TestProfiles:
    @staticmethod
    def _face_centre(bead: ExtrudedProfile) -> tuple[float, float]:
        return next(p for p in bead.outline if p[0] == pytest.approx(0.0))

    def test_concave_bead_dips(self):
        bead = sealant_bead(500, joint_width=20, joint_depth=20, profile="concave")
        assert bead.depth == 500
        assert self._face_centre(bead) == pytest.approx((0.0, -5.0))
        low, high = bead.local_extent()
        assert low[1] == pytest.approx(-20.0)
        assert high[1] == pytest.approx(0.0)

    def test_convex_bead_crowns(self):
        bead = sealant_bead(500, joint_width=20, joint_depth=20, profile="convex")
        assert self._face_centre(bead) == pytest.approx((0.0, 5.0))
        assert bead.local_extent()[1][1] == pytest.approx(5.0)

    def test_flat_and_v_groove(self):
        flat = sealant_bead(100, joint_width=10, joint_depth=8, profile="flat")
        assert len(flat.outline) == 4
        assert flat.local_extent()[1][1] == pytest.approx(0.0)
        groove = sealant_bead(100, joint_width=10, joint_depth=8, profile="v-groove")
        assert self._face_centre(groove) == pytest.approx((0.0, -2.0))

    def test_membrane_lap(self):
        lap = membrane_lap(75, 500, 1.5)
        assert lap.depth == 500
        assert lap.outline[0] == (0.0, 0.0)
        assert lap.outline[-1] == pytest.approx((0.0, 1.575))
        # Rolled edge ends one rollover radius back from the lap width
        assert lap.outline[-2] == pytest.approx((74.25, 1.575))
        assert membrane_lap(75, 500, 1.5, rollover_radius=3.0).outline[-2][0] == pytest.approx(72.0)


class TestAssemblies:
    def test_termination_bar(self):
        parts = termination_bar(300, fastener_spacing=100)
        bar, *fasteners = parts
        assert bar.role == "bar"
        assert bar.primitive.depth == 300
        assert bar.primitive.position == pytest.approx((0.0, 1.5, 150.0))
        assert [f.primitive.position[2] for f in fasteners] == pytest.approx([50, 150, 250])
        assert all(f.primitive.position[1] == pytest.approx(4.5) for f in fasteners)

    def test_stress_plate(self):
        plate, screw = stress_plate(100, position=(0.0, 10.0, 0.0))
        assert plate.primitive.radius_bottom == pytest.approx(50.0)
        assert plate.primitive.position[1] == pytest.approx(10.5)
        assert screw.role == "fastener"
        assert screw.primitive.position[1] == pytest.approx(13.0)

    def test_base_flashing(self):
        parts = base_flashing(200, 300, fastener_spacing=100, origin=(-50.0, 100.0, 0.0))
        roles = [p.role for p in parts]
        assert roles == ["membrane", "lap", "bar", "fastener", "fastener", "fastener", "sealant"]
        sheet = parts[0].primitive
        low, high = sheet.world_bounds()
        assert (low[1], high[1]) == pytest.approx((100.0, 300.0))
        assert low[0] == pytest.approx(-50.0)
        sealant = parts[-1].primitive
        assert sealant.position[1] == pytest.approx(300.0)

    def test_cylinder_axis_extent(self):
        low, high = CylinderPrimitive(radius_top=2, radius_bottom=2, height=10, axis="x").local_extent()
        assert low == pytest.approx((-5, -2, -2))
        assert high == pytest.approx((5, 2, 2))


class TestRoofFlashing:
    def test_flashing_and_bar_layers(self, reconstructor):
        detail = get_detail_by_id("RF-002")
        detail.parameters["fastenerSpacing"] = 50
        scene = reconstructor.reconstruct(detail)
        assert len(scene.for_layer("base-flashing")) == 2
        bar_parts = scene.for_layer("termination-bar")
        assert len([p for p in bar_parts if p.name.startswith("termination-bar-fastener")]) == 4
        assert "termination-sealant" in [p.name for p in bar_parts]

    def test_default_spacing(self, reconstructor):
        scene = reconstructor.reconstruct(get_detail_by_id("RF-002"))
        names = [p.name for p in scene.for_layer("termination-bar")]
        assert names.count("termination-bar-fastener-1") == 1
        assert "termination-bar-fastener-2" not in names

    def test_flashing_stays_below_parapet_top(self, reconstructor):
        detail = get_detail_by_id("RF-002")
        detail.parameters["flashingHeight"] = 10_000
        scene = reconstructor.reconstruct(detail)
        sheet = next(p for p in scene.for_layer("base-flashing") if p.name == "base-flashing")
        assert sheet.primitive.world_bounds()[1][1] == pytest.approx(150 + 450)
