"""
Tests for the pedigree layout engine.
"""

import pytest

from pedigree_layout import (
    ARROW_SIZE,
    BoxDimensions,
    ChartGeometry,
    EventType,
    GenerationsClampedWarning,
    InvalidArgumentError,
    InvalidBoxDimensionsError,
    InvalidGenerationsError,
    InvalidOrientationError,
    InvalidSpacingError,
    LayoutNotComputedError,
    Orientation,
    OrientationClampedWarning,
    PedigreeLayout,
    Person,
    layout_pedigree,
)
from pedigree_layout.tree import generation_of, parent_index

# =============================================================================
# Test Fixtures
# =============================================================================

BOX = BoxDimensions(100, 50)


def create_pedigree(depth, missing=(), spouse=False):
    """Create a root whose ancestors are known for ``depth`` generations."""

    def build(sosa, generation):
        if generation > depth or sosa in missing:
            return None
        return Person(
            f"I{sosa}",
            f"Person {sosa}",
            father=build(2 * sosa, generation + 1),
            mother=build(2 * sosa + 1, generation + 1),
        )

    root = build(1, 1)
    root.has_spouse_family = spouse
    return root


def run_layout(root, generations, orientation, **kwargs):
    """Lay out with the small test box and 10px spacing."""
    return layout_pedigree(
        root, generations, orientation, box=BOX, spacing_x=10, spacing_y=10, **kwargs
    )


# =============================================================================
# Concrete Charts
# =============================================================================


class TestTwoGenerationCharts:
    """Exact coordinates for the smallest charts."""

    def test_landscape(self):
        """Root left, parents one column to the right."""
        geometry = run_layout(create_pedigree(2), 2, Orientation.LANDSCAPE)
        assert geometry.coordinates() == [(0, 30), (120, 0), (120, 60)]
        assert (geometry.width, geometry.height) == (230, 120)

    def test_landscape_with_ancestors_beyond(self):
        """Arrow margin is reserved to the right."""
        geometry = run_layout(create_pedigree(3), 2, Orientation.LANDSCAPE)
        assert geometry.has_ancestors_beyond_chart
        assert geometry.width == 230 + ARROW_SIZE
        assert geometry.height == 120

    def test_portrait(self):
        """Parents sit 1/1.8 of a column out."""
        geometry = run_layout(create_pedigree(2), 2, Orientation.PORTRAIT)
        assert geometry.coordinates() == [(0, 60), (61, 0), (61, 120)]
        assert (geometry.width, geometry.height) == (171, 180)

    def test_portrait_with_spouse_family(self):
        """Root's child-menu arrow widens the gap to the parents."""
        geometry = run_layout(create_pedigree(2, spouse=True), 2, Orientation.PORTRAIT)
        assert geometry.coordinates() == [(0, 60), (83, 0), (83, 120)]

    def test_oldest_at_top(self):
        """Parents on the first row, root centered below."""
        geometry = run_layout(create_pedigree(2), 2, Orientation.OLDEST_AT_TOP)
        assert geometry.coordinates() == [(55, 90), (0, 0), (110, 0)]
        assert (geometry.width, geometry.height) == (220, 150)

    def test_oldest_at_top_with_spouse_family(self):
        """Vertical margin for the child-menu arrow."""
        geometry = run_layout(create_pedigree(2, spouse=True), 2, Orientation.OLDEST_AT_TOP)
        assert geometry.height == 150 + ARROW_SIZE

    def test_oldest_at_bottom(self):
        """Root on the first row, parents below."""
        geometry = run_layout(create_pedigree(2), 2, Orientation.OLDEST_AT_BOTTOM)
        assert geometry.coordinates() == [(55, 0), (0, 70), (110, 70)]
        assert (geometry.width, geometry.height) == (220, 130)

    def test_oldest_at_bottom_with_spouse_family(self):
        """Older rows move down by one arrow."""
        geometry = run_layout(create_pedigree(2, spouse=True), 2, Orientation.OLDEST_AT_BOTTOM)
        assert geometry.coordinates() == [(55, 0), (0, 92), (110, 92)]


class TestPortraitCompaction:
    """Tests for the compacted portrait chart."""

    def test_three_generations(self):
        """Exact compacted offsets."""
        geometry = run_layout(create_pedigree(3), 3, Orientation.PORTRAIT)
        assert [slot.y for slot in geometry.nodes] == [150, 60, 240, 0, 120, 180, 300]
        assert (geometry.width, geometry.height) == (232, 360)

    @pytest.mark.parametrize("generations", [2, 3, 4, 5])
    def test_child_centered_between_parents(self, generations):
        """Every box is vertically centered between its two parents."""
        geometry = run_layout(create_pedigree(generations), generations, Orientation.PORTRAIT)
        nodes = geometry.nodes
        for index in range(len(nodes) // 2):
            father, mother = nodes[2 * index + 1], nodes[2 * index + 2]
            assert 2 * nodes[index].y == father.y + mother.y, f"slot {index}"


# =============================================================================
# Properties
# =============================================================================


class TestLayoutProperties:
    """Invariants that hold for every chart."""

    @pytest.mark.parametrize("generations", range(2, 9))
    def test_node_count(self, generations):
        """Chart always has 2^g - 1 slots."""
        geometry = run_layout(create_pedigree(2), generations, Orientation.LANDSCAPE)
        assert len(geometry.nodes) == 2**generations - 1
        assert geometry.treesize == 2**generations - 1

    @pytest.mark.parametrize("orientation", list(Orientation))
    @pytest.mark.parametrize("generations", range(2, 9))
    def test_normalized_to_origin(self, orientation, generations):
        """Smallest x and y are zero."""
        geometry = run_layout(create_pedigree(generations), generations, orientation)
        assert min(slot.x for slot in geometry.nodes) == 0
        assert min(slot.y for slot in geometry.nodes) == 0

    @pytest.mark.parametrize("orientation", list(Orientation))
    def test_boxes_fit_canvas(self, orientation):
        """Canvas covers every box."""
        geometry = run_layout(create_pedigree(5), 5, orientation)
        for slot in geometry.nodes:
            assert slot.x + BOX.width <= geometry.width
            assert slot.y + BOX.height <= geometry.height

    @pytest.mark.parametrize("orientation", list(Orientation))
    def test_deterministic(self, orientation):
        """Same input, same output."""
        root = create_pedigree(4, missing={5})
        first = run_layout(root, 6, orientation)
        second = run_layout(root, 6, orientation)
        assert first.coordinates() == second.coordinates()
        assert (first.width, first.height) == (second.width, second.height)

    def test_missing_ancestors_still_positioned(self):
        """Blank slots get coordinates like known ones."""
        full = run_layout(create_pedigree(4), 4, Orientation.LANDSCAPE)
        sparse = run_layout(create_pedigree(4, missing={2, 7}), 4, Orientation.LANDSCAPE)
        assert sparse.coordinates() == full.coordinates()
        assert sparse.nodes[1].is_empty
        assert sparse.nodes[3].is_empty

    @pytest.mark.parametrize("generations", range(2, 7))
    def test_landscape_symmetric_about_root(self, generations):
        """Fully populated landscape chart mirrors around the root row."""
        geometry = run_layout(create_pedigree(generations), generations, Orientation.LANDSCAPE)
        root_y = geometry.root.y
        ys = sorted(slot.y for slot in geometry.nodes)
        mirrored = sorted(2 * root_y - y for y in ys)
        assert ys == mirrored

    @pytest.mark.parametrize("generations", range(2, 7))
    def test_landscape_generations_separate_along_x(self, generations):
        """Each older generation lies entirely to the right."""
        geometry = run_layout(create_pedigree(generations), generations, Orientation.LANDSCAPE)
        for gen in range(1, generations):
            younger = geometry.slots_in_generation(gen)
            older = geometry.slots_in_generation(gen + 1)
            assert max(s.x for s in younger) + BOX.width < min(s.x for s in older)

    @pytest.mark.parametrize("generations", range(2, 7))
    def test_oldest_at_top_generations_rise(self, generations):
        """Each older generation lies entirely above."""
        geometry = run_layout(create_pedigree(generations), generations, Orientation.OLDEST_AT_TOP)
        for gen in range(1, generations):
            younger = geometry.slots_in_generation(gen)
            older = geometry.slots_in_generation(gen + 1)
            assert max(s.y for s in older) + BOX.height < min(s.y for s in younger)

    @pytest.mark.parametrize("generations", range(2, 7))
    def test_oldest_at_bottom_generations_descend(self, generations):
        """Each older generation lies entirely below."""
        geometry = run_layout(
            create_pedigree(generations, spouse=True), generations, Orientation.OLDEST_AT_BOTTOM
        )
        for gen in range(1, generations):
            younger = geometry.slots_in_generation(gen)
            older = geometry.slots_in_generation(gen + 1)
            assert max(s.y for s in younger) + BOX.height < min(s.y for s in older)

    def test_slots_know_their_generation(self):
        """Slot generation matches index arithmetic."""
        geometry = run_layout(create_pedigree(3), 4, Orientation.PORTRAIT)
        for slot in geometry.nodes:
            assert slot.generation == generation_of(slot.index)
            if slot.index:
                assert geometry.nodes[parent_index(slot.index)].generation == slot.generation - 1


# =============================================================================
# Configuration and Validation
# =============================================================================


class TestConfiguration:
    """Tests for constructor parameters and properties."""

    def test_defaults(self):
        """Default chart is four landscape generations."""
        layout = PedigreeLayout(root=Person("I1"))
        assert layout.generations == 4
        assert layout.orientation == Orientation.LANDSCAPE
        assert layout.box == BoxDimensions(250, 80)
        assert layout.spacing_x == 5
        assert layout.spacing_y == 10
        assert layout.strict is True
        assert layout.treesize == 15

    def test_configuration_properties(self):
        """Test configuration via constructor and properties."""
        layout = PedigreeLayout(
            generations=3,
            orientation=2,
            box=(120, 40),
            spacing_x=8,
            spacing_y=12,
        )
        assert layout.generations == 3
        assert layout.orientation is Orientation.OLDEST_AT_TOP
        assert layout.box == BoxDimensions(120, 40)
        assert layout.spacing_x == 8
        assert layout.spacing_y == 12

        layout.generations = 5
        layout.orientation = Orientation.PORTRAIT
        assert layout.treesize == 31
        assert layout.orientation is Orientation.PORTRAIT

    def test_geometry_before_run_raises(self):
        """Reading geometry early fails."""
        layout = PedigreeLayout(root=Person("I1"))
        with pytest.raises(LayoutNotComputedError):
            _ = layout.geometry

    def test_run_returns_self(self):
        """run() chains."""
        layout = PedigreeLayout(root=create_pedigree(2), generations=2)
        assert layout.run() is layout
        assert isinstance(layout.geometry, ChartGeometry)
        assert layout.policy.extra_offset_x == 0

    def test_geometry_carries_inputs(self):
        """Geometry records what produced it."""
        geometry = run_layout(create_pedigree(2), 3, Orientation.OLDEST_AT_TOP)
        assert geometry.generations == 3
        assert geometry.orientation is Orientation.OLDEST_AT_TOP
        assert geometry.box == BOX
        assert geometry.policy is not None

    def test_blank_root(self):
        """A chart without a root is all blank boxes."""
        geometry = run_layout(None, 3, Orientation.LANDSCAPE)
        assert all(slot.is_empty for slot in geometry.nodes)
        assert min(slot.x for slot in geometry.nodes) == 0

    def test_invalid_box_raises(self):
        """Box must have positive size."""
        with pytest.raises(InvalidBoxDimensionsError):
            PedigreeLayout(box=(0, 50))

    def test_negative_spacing_raises(self):
        """Spacing must not be negative."""
        with pytest.raises(InvalidSpacingError):
            PedigreeLayout(spacing_y=-1)


class TestStrictMode:
    """Out-of-range parameters fail fast by default."""

    @pytest.mark.parametrize("generations", [0, 1, 9, 20])
    def test_generations_out_of_range(self, generations):
        """Generation count outside [2, 8] raises."""
        with pytest.raises(InvalidGenerationsError):
            PedigreeLayout(generations=generations)

    def test_generation_error_is_invalid_argument(self):
        """Errors share the InvalidArgumentError base."""
        with pytest.raises(InvalidArgumentError):
            layout_pedigree(Person("I1"), 9)

    @pytest.mark.parametrize("orientation", [-1, 4])
    def test_orientation_out_of_range(self, orientation):
        """Orientation outside [0, 3] raises."""
        with pytest.raises(InvalidOrientationError):
            PedigreeLayout(orientation=orientation)

    def test_max_generations_lowers_bound(self):
        """A lower configured maximum is enforced."""
        with pytest.raises(InvalidGenerationsError, match=r"\[2, 5\]"):
            PedigreeLayout(generations=6, max_generations=5)

    def test_max_generations_capped_at_eight(self):
        """The maximum itself cannot exceed 8."""
        with pytest.raises(InvalidGenerationsError):
            PedigreeLayout(generations=4, max_generations=10)


class TestPermissiveMode:
    """Out-of-range parameters are clamped with strict=False."""

    def test_generations_clamped_high(self):
        """Requests above 8 generations get 8."""
        with pytest.warns(GenerationsClampedWarning):
            layout = PedigreeLayout(root=Person("I1"), generations=12, strict=False)
        assert layout.generations == 8
        assert len(layout.run().geometry.nodes) == 255

    def test_generations_clamped_low(self):
        """Requests below 2 generations get 2."""
        with pytest.warns(GenerationsClampedWarning):
            geometry = layout_pedigree(Person("I1"), 1, strict=False)
        assert geometry.generations == 2

    def test_generations_clamped_to_configured_max(self):
        """Clamping respects max_generations."""
        with pytest.warns(GenerationsClampedWarning):
            layout = PedigreeLayout(generations=7, max_generations=5, strict=False)
        assert layout.generations == 5

    def test_orientation_clamped(self):
        """Unknown codes clamp to the nearest orientation."""
        with pytest.warns(OrientationClampedWarning):
            layout = PedigreeLayout(orientation=7, strict=False)
        assert layout.orientation is Orientation.OLDEST_AT_BOTTOM

        with pytest.warns(OrientationClampedWarning):
            layout.orientation = -3
        assert layout.orientation is Orientation.PORTRAIT


# =============================================================================
# Events and Navigation
# =============================================================================


class TestEvents:
    """Tests for the start/end events."""

    def test_events_fire_in_order(self):
        """Start fires before end; end carries the geometry."""
        seen = []
        layout = PedigreeLayout(
            root=create_pedigree(2),
            generations=2,
            on_start=lambda e: seen.append(e),
            on_end=lambda e: seen.append(e),
        )
        layout.run()

        assert [e["type"] for e in seen] == [EventType.start, EventType.end]
        assert seen[0]["generations"] == 2
        assert seen[1]["geometry"] is layout.geometry

    def test_subscribe_by_name(self):
        """on() accepts event names and chains."""
        seen = []
        layout = PedigreeLayout(root=Person("I1"), generations=2)
        assert layout.on("end", lambda e: seen.append(e["orientation"])) is layout
        layout.run()
        assert seen == [Orientation.LANDSCAPE]


class TestPreviousGeneration:
    """Tests for previous-generation navigation."""

    def test_arrow_targets(self):
        """Paternal half leads to the father, maternal half to the mother."""
        root = create_pedigree(4)
        layout = PedigreeLayout(root=root, generations=3).run()

        assert layout.previous_generation(3) is root.father
        assert layout.previous_generation(4) is root.father
        assert layout.previous_generation(5) is root.mother
        assert layout.previous_generation(6) is root.mother

    def test_no_arrow_without_parents(self):
        """Slots whose individual has no parents get no arrow."""
        root = create_pedigree(4, missing={12, 13})
        layout = PedigreeLayout(root=root, generations=3).run()
        assert layout.previous_generation(5) is None
        assert layout.previous_generation(6) is root.mother

    def test_no_arrow_for_blank_slot(self):
        """Unknown ancestors get no arrow."""
        root = create_pedigree(4, missing={4})
        layout = PedigreeLayout(root=root, generations=3).run()
        assert layout.previous_generation(3) is None

    def test_no_arrows_when_chart_is_exhausted(self):
        """Without ancestors beyond the chart there are no arrows."""
        layout = PedigreeLayout(root=create_pedigree(3), generations=3).run()
        assert not layout.geometry.has_ancestors_beyond_chart
        assert all(layout.previous_generation(i) is None for i in range(3, 7))

    @pytest.mark.parametrize("index", [-1, -4, 7, 100])
    def test_index_outside_chart_raises(self, index):
        """Indices outside the arena are rejected instead of wrapping around."""
        layout = PedigreeLayout(root=create_pedigree(4), generations=3).run()
        with pytest.raises(InvalidArgumentError, match=f"got {index}"):
            layout.previous_generation(index)
