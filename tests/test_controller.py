"""
Tests for the headless split controller.
"""

import logging

import pytest

from splitpane.exceptions import NotSnappableError, PaneNotFoundError
from splitpane.layout import LayoutManager, PaneSpec, SplitController, SplitLayoutSpec


@pytest.fixture
def editor():
    """Editor layout laid out at 1200: sidebar 240, editor 960, auxiliary hidden."""
    controller = SplitController(LayoutManager().load_layout("editor"))
    controller.layout(1200)
    return controller


@pytest.fixture
def columns():
    """Three columns laid out at 300."""
    controller = SplitController(LayoutManager().load_layout("columns"))
    controller.layout(300)
    return controller


class TestInitialLayout:
    """Test how declared panes enter the split view."""

    def test_panes_wait_for_first_layout(self):
        controller = SplitController(LayoutManager().load_layout("columns"))

        assert not controller.initialized
        assert controller.sizes() == []

        controller.layout(0)
        assert controller.sizes() == []

    def test_preferred_sizes_and_visibility(self, editor):
        """Test that preferred sizes are applied and hidden panes collapsed."""
        assert editor.pane_ids == ["sidebar", "editor", "auxiliary"]
        assert editor.sizes() == [240, 960, 0]
        assert not editor.split_view.is_view_visible(2)

    def test_pane_sizes_by_id(self, editor):
        assert editor.pane_sizes() == {"sidebar": 240, "editor": 960, "auxiliary": 0}

    def test_even_columns(self, columns):
        assert columns.sizes() == [100, 100, 100]

    def test_proportional_relayout(self, columns):
        columns.layout(600)
        assert columns.sizes() == [200, 200, 200]

    def test_visibility_callback(self):
        changes = []
        controller = SplitController(
            LayoutManager().load_layout("editor"),
            on_visible_change=lambda index, visible: changes.append((index, visible)),
        )

        controller.layout(1200)

        assert changes == [(2, False)]

    def test_change_callback(self):
        changes = []
        controller = SplitController(LayoutManager().load_layout("columns"), on_change=changes.append)

        controller.layout(300)

        assert changes[-1] == [100, 100, 100]

    def test_default_sizes_seed_view(self):
        """Test that matching default sizes are used without a layout pass."""
        controller = SplitController(LayoutManager().load_layout("terminal"))

        assert controller.initialized
        assert controller.sizes() == [450, 150]

        controller.layout(900)

        assert controller.sizes() == [675, 225]

    def test_default_sizes_mismatch_is_ignored(self, caplog):
        spec = SplitLayoutSpec.from_dict(
            "mismatch", {"default_sizes": [100], "panes": [{"id": "a"}, {"id": "b"}]}
        )

        with caplog.at_level(logging.WARNING, logger="splitpane"):
            controller = SplitController(spec)

        assert "default_sizes" in caplog.text
        controller.layout(300)
        assert controller.sizes() == [150, 150]

    def test_only_pane_declared_hidden_stays_visible(self, caplog):
        spec = SplitLayoutSpec.from_dict(
            "single", {"panes": [{"id": "only", "snap": True, "visible": False}]}
        )
        controller = SplitController(spec)

        with caplog.at_level(logging.WARNING, logger="splitpane"):
            controller.layout(300)

        assert controller.sizes() == [300]
        assert controller.split_view.is_view_visible(0)
        assert "last visible pane" in caplog.text

    def test_hidden_seeded_snap_pane(self):
        spec = SplitLayoutSpec.from_dict(
            "seeded",
            {
                "default_sizes": [300, 100],
                "panes": [{"id": "main"}, {"id": "panel", "snap": True, "visible": False}],
            },
        )

        controller = SplitController(spec)

        assert controller.sizes() == [300, 0]
        assert controller.split_view.get_view_cached_visible_size(1) == 100


class TestReset:
    """Test reset behaviour."""

    def test_reset_restores_preferred_sizes(self, editor):
        editor.split_view.move_sash(0, 100)
        assert editor.sizes() == [340, 860, 0]

        editor.reset()

        assert editor.sizes() == [240, 960, 0]

    def test_reset_callback_replaces_default(self):
        resets = []
        controller = SplitController(LayoutManager().load_layout("columns"), on_reset=lambda: resets.append(True))
        controller.layout(300)
        controller.split_view.move_sash(0, 50)

        controller.reset()
        controller.split_view.reset_sash(0)

        assert resets == [True, True]
        assert controller.sizes() == [150, 50, 100]

    def test_sash_reset_uses_preferred_size(self, editor):
        editor.split_view.move_sash(0, 100)

        editor.split_view.reset_sash(0)

        assert editor.sizes() == [240, 960, 0]

    def test_sash_reset_without_preference_distributes(self, columns):
        columns.split_view.move_sash(0, 50)
        assert columns.sizes() == [150, 50, 100]

        columns.split_view.reset_sash(0)

        assert columns.sizes() == [100, 100, 100]


class TestPaneOperations:
    """Test operations addressed by pane id."""

    def test_set_visible(self, editor):
        editor.set_visible("auxiliary", True)
        assert editor.sizes() == [240, 660, 300]

    def test_set_visible_non_snap(self, editor):
        with pytest.raises(NotSnappableError):
            editor.set_visible("editor", False)

    def test_unknown_pane(self, editor):
        with pytest.raises(PaneNotFoundError) as exc_info:
            editor.set_visible("terminal", True)
        assert "terminal" in str(exc_info.value)

    def test_unknown_pane_is_key_error(self, editor):
        with pytest.raises(KeyError):
            editor.index_of("terminal")

    def test_resize(self, columns):
        columns.resize([60, 120, 120])
        assert columns.sizes() == [60, 120, 120]

    def test_update_bounds_relayouts(self, columns):
        """Test that raising a minimum re-runs the layout."""
        columns.update_pane("left", min_size=150)

        assert columns.sizes()[0] == 150
        assert sum(columns.sizes()) == 300
        assert columns.get_pane("left").minimum_size == 150

    def test_update_preferred_size(self, columns):
        columns.update_pane("middle", preferred_size="50%")
        columns.split_view.move_sash(0, 50)

        columns.split_view.reset_sash(0)

        assert columns.sizes()[1] == 150

    def test_add_pane(self, columns):
        columns.add_pane(PaneSpec("extra"))

        assert columns.pane_ids == ["left", "middle", "right", "extra"]
        assert columns.sizes() == [75, 75, 75, 75]

    def test_add_pane_before_layout(self):
        controller = SplitController(LayoutManager().load_layout("columns"))
        controller.add_pane(PaneSpec("first"), 0)

        controller.layout(400)

        assert controller.pane_ids == ["first", "left", "middle", "right"]
        assert controller.sizes() == [100, 100, 100, 100]

    def test_remove_pane(self, columns):
        pane = columns.remove_pane("middle")

        assert pane.content == "middle"
        assert columns.pane_ids == ["left", "right"]
        assert columns.sizes() == [150, 150]

    def test_move_pane(self, columns):
        columns.resize([60, 120, 120])

        columns.move_pane("left", 2)

        assert columns.pane_ids == ["middle", "right", "left"]
        assert columns.sizes() == [120, 120, 60]

    def test_dispose(self, columns):
        columns.dispose()
        assert columns.pane_ids == []
