"""
Tests for the split view engine.
"""

import logging

import pytest

from splitpane.exceptions import (
    InvalidIndexError,
    LastVisiblePaneError,
    NotSnappableError,
    SizeMismatchError,
    SizeSumMismatchError,
    SplitPaneError,
)
from splitpane.layout import (
    LayoutPriority,
    Orientation,
    Pane,
    Sizing,
    SplitView,
    SplitViewDescriptor,
    ViewDescriptor,
)
from splitpane.layout.context import LayoutContext


class TestLayout:
    """Test laying panes out in a container."""

    def test_even_distribution(self, three_panes):
        """Test that three default panes share 300 evenly."""
        assert three_panes.get_sizes() == [100, 100, 100]

    def test_distribution_respects_maximum(self, make_split_view):
        """Test that a capped pane is pinned and the others share the rest."""
        split_view = make_split_view(300, {"maximum_size": 50}, {}, {})
        assert split_view.get_sizes() == [50, 125, 125]

    def test_proportional_growth(self, make_split_view):
        """Test that panes keep their share when the container grows."""
        split_view = make_split_view(100, {}, {})
        assert split_view.get_sizes() == [50, 50]

        split_view.layout(200)

        assert split_view.get_sizes() == [100, 100]

    def test_proportional_layout_keeps_ratio_after_drag(self, make_split_view):
        split_view = make_split_view(400, {}, {})
        split_view.move_sash(0, -100)
        assert split_view.get_sizes() == [100, 300]

        split_view.layout(800)

        assert split_view.get_sizes() == [200, 600]

    def test_non_proportional_growth_goes_to_last_pane(self, make_split_view):
        split_view = make_split_view(100, {}, {}, proportional_layout=False)

        split_view.layout(200)

        assert split_view.get_sizes() == [50, 150]

    def test_non_proportional_growth_prefers_high_priority(self, make_split_view):
        """Test that a HIGH priority pane absorbs container changes first."""
        split_view = make_split_view(
            100, {"priority": LayoutPriority.HIGH}, {}, proportional_layout=False
        )

        split_view.layout(200)

        assert split_view.get_sizes() == [150, 50]

    def test_layout_is_idempotent(self, three_panes):
        """Test that laying out twice at the same size changes nothing."""
        changes = []
        three_panes.on_did_change.subscribe(changes.append)

        three_panes.layout(300)
        three_panes.layout(300)

        assert three_panes.get_sizes() == [100, 100, 100]
        assert changes == []

    def test_layout_updates_context(self, three_panes):
        three_panes.layout(450)
        assert three_panes.layout_context.get_size() == 450

    def test_layout_assigns_offsets(self, three_panes):
        """Test that panes receive consecutive offsets."""
        panes = three_panes.panes
        assert [pane.offset for pane in panes] == [0, 100, 200]
        assert [pane.size for pane in panes] == [100, 100, 100]

    def test_layout_without_size_relayouts_current(self, three_panes):
        three_panes.layout()
        assert three_panes.size == 300
        assert three_panes.get_sizes() == [100, 100, 100]


class TestResizeView:
    """Test resizing a single pane."""

    def test_resize_takes_from_both_neighbours(self, three_panes):
        three_panes.resize_view(1, 160)
        assert three_panes.get_sizes() == [70, 160, 70]

    def test_cascade_past_minimum(self, make_split_view):
        """Test that a neighbour at its minimum passes the rest along."""
        split_view = make_split_view(300, {"minimum_size": 80}, {}, {})

        split_view.resize_view(1, 150)

        assert split_view.get_sizes() == [80, 150, 70]

    def test_resize_clamps_to_bounds(self, make_split_view):
        split_view = make_split_view(300, {}, {"maximum_size": 120}, {})

        split_view.resize_view(1, 500)

        assert split_view.get_sizes()[1] == 120
        assert sum(split_view.get_sizes()) == 300

    def test_resize_rounds_request(self, three_panes):
        three_panes.resize_view(0, 120.4)
        assert three_panes.get_sizes()[0] == 120

    def test_resize_invalid_index(self, three_panes):
        with pytest.raises(InvalidIndexError):
            three_panes.resize_view(3, 100)

    def test_resize_fires_change(self, three_panes):
        changes = []
        three_panes.on_did_change.subscribe(changes.append)

        three_panes.resize_view(0, 150)

        assert changes == [three_panes.get_sizes()]


class TestResizeViews:
    """Test overwriting all sizes at once."""

    def test_round_trip(self, three_panes):
        """Test that writing back the current sizes changes nothing."""
        three_panes.resize_view(0, 140)
        sizes = three_panes.get_sizes()

        three_panes.resize_views(sizes)

        assert three_panes.get_sizes() == sizes

    def test_sets_sizes(self, three_panes):
        three_panes.resize_views([50, 150, 100])
        assert three_panes.get_sizes() == [50, 150, 100]

    def test_wrong_count_raises(self, three_panes):
        with pytest.raises(SizeMismatchError):
            three_panes.resize_views([150, 150])

    def test_wrong_sum_raises(self, three_panes):
        with pytest.raises(SizeSumMismatchError):
            three_panes.resize_views([100, 100, 50])
        assert three_panes.get_sizes() == [100, 100, 100]

    def test_rounding_tolerance(self, three_panes):
        """Test that sums within one unit per pane are accepted."""
        three_panes.resize_views([100, 100, 102])
        assert three_panes.get_sizes() == [100, 100, 102]

    def test_sizes_below_minimum_are_clamped(self, make_split_view):
        """Test that a non-snap pane never ends up below its minimum."""
        split_view = make_split_view(300, {"minimum_size": 50}, {"minimum_size": 50}, {"minimum_size": 50})

        split_view.resize_views([0, 150, 150])
        assert split_view.get_sizes() == [50, 150, 100]

        split_view.resize_views([-20, 170, 150])
        assert split_view.get_sizes() == [50, 170, 80]

    def test_sizes_above_maximum_are_clamped(self, make_split_view):
        split_view = make_split_view(300, {"maximum_size": 120}, {}, {})

        split_view.resize_views([200, 50, 50])

        assert split_view.get_sizes() == [120, 50, 130]

    def test_zero_collapses_snap_pane(self, make_split_view):
        split_view = make_split_view(300, {}, {"snap": True}, {})
        events = []
        split_view.on_did_visibility_change.subscribe(lambda i, v: events.append((i, v)))

        split_view.resize_views([150, 0, 150])

        assert not split_view.is_view_visible(1)
        assert events == [(1, False)]


class TestStructure:
    """Test adding, removing and moving panes."""

    def test_add_split(self, make_split_view):
        """Test that a split pane takes half of its neighbour."""
        split_view = make_split_view(300, {}, {})

        split_view.add_view(Pane("new"), Sizing.split(0), 2)

        assert split_view.get_sizes() == [75, 150, 75]

    def test_added_pane_reads_container_size(self):
        """Test that a percentage preference follows the split view's container."""
        split_view = SplitView()
        split_view.layout(300)
        pane = Pane("a", preferred_size="50%")

        split_view.add_view(pane)
        split_view.layout(400)

        assert pane.preferred_size == 200

    def test_added_pane_keeps_own_context(self):
        context = LayoutContext(1000)
        split_view = SplitView()
        split_view.layout(400)
        pane = Pane("a", layout_context=context, preferred_size="50%")

        split_view.add_view(pane)

        assert pane.layout_context is context
        assert pane.preferred_size == 500

    def test_add_split_before_neighbour(self, make_split_view):
        split_view = make_split_view(300, {}, {})

        split_view.add_view(Pane("new"), Sizing.split(0), 0)

        assert split_view.get_sizes() == [75, 75, 150]
        assert split_view.get_view(0).content == "new"

    def test_add_fixed(self, make_split_view):
        """Test that a fixed size is taken from the other panes."""
        split_view = make_split_view(300, {}, {})

        split_view.add_view(Pane("new"), Sizing.fixed(60))

        assert split_view.get_sizes() == [150, 90, 60]

    def test_add_invisible(self, make_split_view):
        split_view = make_split_view(300, {}, {})

        split_view.add_view(Pane("new", snap=True), Sizing.invisible(80))

        assert split_view.get_sizes() == [150, 150, 0]
        assert not split_view.is_view_visible(2)
        assert split_view.get_view_cached_visible_size(2) == 80

    def test_add_invalid_index(self, three_panes):
        with pytest.raises(InvalidIndexError):
            three_panes.add_view(Pane(), index=5)
        assert len(three_panes) == 3

    def test_add_invalid_split_neighbour(self, three_panes):
        with pytest.raises(InvalidIndexError):
            three_panes.add_view(Pane(), Sizing.split(3))

    def test_remove_absorbs_proportionally(self, three_panes):
        """Test that the removed pane's space is shared by size."""
        three_panes.resize_views([50, 100, 150])

        pane = three_panes.remove_view(0)

        assert pane.content == "pane-0"
        assert three_panes.get_sizes() == [120, 180]

    def test_remove_overflow_goes_to_rightmost(self, make_split_view, caplog):
        """Test that space nobody can take goes to the last visible pane."""
        split_view = make_split_view(300, {"maximum_size": 100}, {"maximum_size": 100}, {})

        with caplog.at_level(logging.WARNING, logger="splitpane"):
            split_view.remove_view(2)

        assert split_view.get_sizes() == [100, 200]
        assert "takes the remainder" in caplog.text

    def test_remove_with_distribute(self, three_panes):
        three_panes.resize_views([50, 100, 150])
        three_panes.remove_view(0, Sizing.distribute())
        assert three_panes.get_sizes() == [150, 150]

    def test_remove_invalid_index(self, three_panes):
        with pytest.raises(InvalidIndexError):
            three_panes.remove_view(-1)

    def test_move_keeps_sizes(self, three_panes):
        """Test that moving a pane reorders without resizing."""
        three_panes.resize_views([50, 100, 150])

        three_panes.move_view(0, 2)

        assert three_panes.get_sizes() == [100, 150, 50]
        assert [pane.content for pane in three_panes.panes] == ["pane-1", "pane-2", "pane-0"]

    def test_structure_events(self, three_panes):
        changes = []
        three_panes.on_did_structure_change.subscribe(changes.append)

        three_panes.move_view(0, 1)
        three_panes.remove_view(2)

        assert [(c.kind, c.index, c.to_index) for c in changes] == [
            ("move", 0, 1),
            ("remove", 2, None),
        ]


class TestVisibility:
    """Test collapsing and restoring snap panes."""

    def test_hide_gives_space_to_neighbours(self, make_split_view):
        split_view = make_split_view(300, {}, {"snap": True}, {})

        split_view.set_view_visible(1, False)

        assert split_view.get_sizes() == [150, 0, 150]
        assert split_view.get_view_cached_visible_size(1) == 100

    def test_show_restores_cached_size(self, make_split_view):
        split_view = make_split_view(300, {}, {"snap": True}, {})
        split_view.set_view_visible(1, False)

        split_view.set_view_visible(1, True)

        assert split_view.get_sizes() == [100, 100, 100]
        assert split_view.is_view_visible(1)

    def test_visibility_events(self, make_split_view):
        split_view = make_split_view(300, {}, {"snap": True}, {})
        events = []
        split_view.on_did_visibility_change.subscribe(lambda i, v: events.append((i, v)))

        split_view.set_view_visible(1, False)
        split_view.set_view_visible(1, False)
        split_view.set_view_visible(1, True)

        assert events == [(1, False), (1, True)]

    def test_non_snap_pane_raises(self, three_panes):
        with pytest.raises(NotSnappableError):
            three_panes.set_view_visible(0, False)
        assert three_panes.get_sizes() == [100, 100, 100]

    def test_last_visible_pane_cannot_hide(self, make_split_view):
        """Test that the container is never left without a visible pane."""
        split_view = make_split_view(300, {"snap": True}, {"snap": True})
        split_view.set_view_visible(0, False)
        assert split_view.get_sizes() == [0, 300]

        with pytest.raises(LastVisiblePaneError):
            split_view.set_view_visible(1, False)

        assert split_view.get_sizes() == [0, 300]
        assert split_view.is_view_visible(1)

    def test_restore_takes_empty_space(self):
        """Test that a restored pane fills a container no other pane holds."""
        descriptor = SplitViewDescriptor(
            size=300,
            views=[
                ViewDescriptor(Pane("a", snap=True), 120, visible=False),
                ViewDescriptor(Pane("b", snap=True), 180, visible=False),
            ],
        )
        split_view = SplitView(descriptor=descriptor)

        split_view.set_view_visible(0, True)

        assert split_view.get_sizes() == [300, 0]
        assert split_view.is_view_visible(0)


class TestSumInvariant:
    """Test that sizes always fill the container."""

    def test_operations_keep_total(self, make_split_view):
        split_view = make_split_view(
            400,
            {},
            {"minimum_size": 50, "maximum_size": 120},
            {"minimum_size": 40, "snap": True},
            {"priority": "high"},
        )
        assert split_view.get_sizes() == [100, 100, 100, 100]

        split_view.resize_view(0, 250)
        assert split_view.get_sizes() == [250, 50, 40, 60]

        split_view.move_sash(2, -100)
        assert sum(split_view.get_sizes()) == 400

        split_view.set_view_visible(2, False)
        assert sum(split_view.get_sizes()) == 400

        split_view.layout(500)
        assert sum(split_view.get_sizes()) == pytest.approx(500)

        split_view.remove_view(1)
        assert sum(split_view.get_sizes()) == pytest.approx(500)

        split_view.distribute_view_sizes()
        assert sum(split_view.get_sizes()) == pytest.approx(500)

    def test_sizes_stay_within_bounds(self, make_split_view):
        split_view = make_split_view(600, {"minimum_size": 100}, {"maximum_size": 150}, {})

        split_view.move_sash(0, -300)
        split_view.move_sash(1, 400)

        for pane, size in zip(split_view.panes, split_view.get_sizes()):
            assert pane.minimum_size <= size <= pane.maximum_size


class TestDescriptor:
    """Test seeding a split view without a layout pass."""

    def test_descriptor_seeds_sizes(self):
        descriptor = SplitViewDescriptor(
            size=600,
            views=[
                ViewDescriptor(Pane("a"), 450),
                ViewDescriptor(Pane("b", snap=True), 150, visible=False),
            ],
        )

        split_view = SplitView(Orientation.VERTICAL, descriptor=descriptor)

        assert split_view.size == 600
        assert split_view.get_sizes() == [450, 0]
        assert split_view.get_view_cached_visible_size(1) == 150
        assert split_view.orientation is Orientation.VERTICAL


class TestListeners:
    """Test notification delivery."""

    def test_constructor_listener(self):
        changes = []
        split_view = SplitView(on_did_change=changes.append)
        split_view.layout(200)
        split_view.add_view(Pane())

        assert changes == [[200]]

    def test_failing_listener_does_not_abort(self, three_panes, caplog):
        """Test that a raising listener is logged and the operation completes."""
        received = []

        def broken(sizes):
            raise RuntimeError("listener failed")

        three_panes.on_did_change.subscribe(broken)
        three_panes.on_did_change.subscribe(received.append)

        with caplog.at_level(logging.ERROR, logger="splitpane"):
            three_panes.resize_view(0, 150)

        assert three_panes.get_sizes()[0] == 150
        assert received == [three_panes.get_sizes()]
        assert "listener failed" in caplog.text

    def test_dispose(self, three_panes):
        three_panes.dispose()

        assert len(three_panes) == 0
        assert len(three_panes.on_did_change) == 0
        with pytest.raises(SplitPaneError):
            three_panes.layout(100)
