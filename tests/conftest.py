"""Shared pytest fixtures for splitpane tests."""

import pytest

from splitpane.config.constants import DEFAULT_SASH_SIZE
from splitpane.layout import Pane, Sizing, SplitView
from splitpane.layout.sash import set_sash_size


@pytest.fixture(autouse=True)
def isolated_layouts_dir(tmp_path, monkeypatch):
    """Point the user layouts directory at a temporary location."""
    layouts_dir = tmp_path / "layouts"
    monkeypatch.setenv("SPLITPANE_LAYOUTS_DIR", str(layouts_dir))
    return layouts_dir


@pytest.fixture(autouse=True)
def reset_sash_size():
    """Restore the process-wide sash size after each test."""
    yield
    set_sash_size(DEFAULT_SASH_SIZE)


@pytest.fixture
def make_split_view():
    """Build a split view laid out at ``size`` with one pane per kwargs dict.

    Panes are added with even distribution, the way a host adds them after
    the first layout.
    """

    def _make(size, *pane_options, **view_options):
        split_view = SplitView(**view_options)
        split_view.layout(size)
        for number, options in enumerate(pane_options):
            split_view.add_view(Pane(f"pane-{number}", **options), Sizing.distribute())
        return split_view

    return _make


@pytest.fixture
def three_panes(make_split_view):
    """Three default panes in a 300 wide container: [100, 100, 100]."""
    return make_split_view(300, {}, {}, {})
