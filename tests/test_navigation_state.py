"""
Unit tests: navigation state and viewport classification
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eleccalc.domain.navigation import NavigationState, ViewportClass, classify_viewport
from eleccalc.domain.panels import DEFAULT_REGISTRY
from eleccalc.infra.exceptions import ConfigError


class TestClassifyViewport:

    @pytest.mark.parametrize("width,expected", [
        (320, ViewportClass.NARROW),
        (899, ViewportClass.NARROW),
        (900, ViewportClass.WIDE),
        (1920, ViewportClass.WIDE),
    ])
    def test_default_breakpoint(self, width, expected):
        assert classify_viewport(width) is expected

    def test_custom_breakpoint(self):
        assert classify_viewport(1000, breakpoint=1200) is ViewportClass.NARROW
        assert classify_viewport(1200, breakpoint=1200) is ViewportClass.WIDE


class TestNavigationState:

    @pytest.fixture
    def state(self):
        return NavigationState.create("wire-calc", DEFAULT_REGISTRY)

    def test_create(self, state):
        assert state.active_id == "wire-calc"
        assert state.drawer_open is False

    def test_create_unknown_default(self):
        with pytest.raises(ConfigError):
            NavigationState.create("reference-charts", DEFAULT_REGISTRY)

    def test_select_known(self, state):
        state.drawer_open = True
        assert state.select("dc-calc", DEFAULT_REGISTRY) is True
        assert state.active_id == "dc-calc"
        assert state.drawer_open is False

    def test_select_unknown_is_noop(self, state):
        state.drawer_open = True
        assert state.select("missing", DEFAULT_REGISTRY) is False
        assert state.active_id == "wire-calc"
        assert state.drawer_open is True

    def test_toggle_drawer(self, state):
        assert state.toggle_drawer() is True
        assert state.toggle_drawer() is False

    def test_entering_narrow_closes_drawer(self, state):
        state.on_viewport_change(1280)
        state.drawer_open = True
        assert state.on_viewport_change(600) is ViewportClass.NARROW
        assert state.drawer_open is False

    def test_staying_narrow_keeps_drawer(self, state):
        state.on_viewport_change(600)
        state.toggle_drawer()
        state.on_viewport_change(700)
        assert state.drawer_open is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
