"""
Unit tests: panel router and the Streamlit entry script
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from streamlit.testing.v1 import AppTest

from eleccalc.domain.panels import DEFAULT_REGISTRY
from eleccalc.web import router
from eleccalc.web.framework.state import parse_viewport_width

PROJECT_ROOT = Path(__file__).parent.parent


def _panel_script(panel_id):
    from eleccalc.web.router import render_panel

    render_panel(panel_id)


class TestRouter:

    def test_every_panel_has_renderer(self):
        assert set(router.PANEL_RENDERERS) == set(DEFAULT_REGISTRY.ids())

    @pytest.mark.parametrize("panel_id,shown", [
        ("wire-calc", True),
        ("voltage-drop", True),
        ("conduit-fill", True),
        ("dc-calc", False),
        ("dc-breaker-calc", False),
        ("iec-ref-charts", False),
        ("nec-ref-charts", False),
        ("bs7671-ref-charts", False),
    ])
    def test_standard_selector_only_for_ac_panels(self, panel_id, shown):
        assert router.shows_standard_selector(panel_id) is shown

    @pytest.mark.parametrize("panel_id", list(DEFAULT_REGISTRY.ids()))
    def test_panels_render(self, panel_id):
        at = AppTest.from_function(_panel_script, args=(panel_id,), default_timeout=60)
        at.run()
        assert not at.exception
        assert not at.error

    def test_error_boundary(self, monkeypatch):
        def boom():
            raise RuntimeError("renderer exploded")

        monkeypatch.setitem(router.PANEL_RENDERERS, "dc-calc", boom)
        at = AppTest.from_function(_panel_script, args=("dc-calc",), default_timeout=60)
        at.run()
        assert not at.exception
        assert len(at.error) == 1
        assert "renderer exploded" in at.error[0].value


class TestDCPanels:

    @staticmethod
    def _labelled(elements, label):
        return next(e for e in elements if e.label == label)

    def test_wire_voltage_follows_application(self):
        at = AppTest.from_function(_panel_script, args=("dc-calc",), default_timeout=60)
        at.run()
        assert self._labelled(at.selectbox, "System voltage (V)").options == ["12", "24"]

        at.selectbox(key="dc_wire_app").set_value("marine").run()
        assert self._labelled(at.selectbox, "System voltage (V)").options == ["12", "24", "48"]

    def test_wire_iec_reports_metric_size(self):
        at = AppTest.from_function(_panel_script, args=("dc-calc",), default_timeout=60)
        at.run()
        at.radio(key="dc_wire_standard").set_value("IEC").run()
        assert any(n.label == "One-way length (m)" for n in at.number_input)

        self._labelled(at.button, "Calculate").click().run()
        assert not at.exception
        headline = (at.success or at.warning)[0].value
        assert "mm²" in headline

    def test_breaker_shows_fuse_for_automotive(self):
        at = AppTest.from_function(_panel_script, args=("dc-breaker-calc",), default_timeout=60)
        at.run()
        self._labelled(at.button, "Size breaker").click().run()
        assert not at.exception
        assert "Recommended fuse" in at.success[0].value

    def test_breaker_iec_standard(self):
        at = AppTest.from_function(_panel_script, args=("dc-breaker-calc",), default_timeout=60)
        at.run()
        at.selectbox(key="dc_breaker_app").set_value("industrial").run()
        at.radio(key="dc_breaker_standard").set_value("IEC").run()
        self._labelled(at.button, "Size breaker").click().run()
        assert not at.exception
        assert "IEC 60947" in at.success[0].value


class TestApp:

    def test_app_starts_on_default_panel(self):
        at = AppTest.from_file(str(PROJECT_ROOT / "app.py"), default_timeout=60)
        at.run()
        assert not at.exception
        assert at.button(key="nav-wire-calc") is not None

    def test_menu_click_switches_panel(self):
        at = AppTest.from_file(str(PROJECT_ROOT / "app.py"), default_timeout=60)
        at.run()
        at.button(key="nav-dc-calc").click().run()
        assert not at.exception
        assert at.session_state["nav_state"].active_id == "dc-calc"
        assert any("DC Wire Calculator" in h.value for h in at.subheader)

    def test_narrow_viewport_uses_overlay_menu(self):
        at = AppTest.from_file(str(PROJECT_ROOT / "app.py"), default_timeout=60)
        at.query_params["vw"] = "600"
        at.run()
        assert not at.exception
        assert not any(b.key == "nav-dc-calc" for b in at.button)

        at.button(key="nav-drawer-toggle").click().run()
        assert at.sidebar.button(key="nav-dc-calc") is not None
        at.button(key="nav-dc-calc").click().run()
        assert at.session_state["nav_state"].active_id == "dc-calc"
        assert at.session_state["nav_state"].drawer_open is False

    @pytest.mark.parametrize("raw", ["inf", "-inf", "nan", "1e400", "abc", "0", "-5"])
    def test_unusable_viewport_width_falls_back_to_wide(self, raw):
        at = AppTest.from_file(str(PROJECT_ROOT / "app.py"), default_timeout=60)
        at.query_params["vw"] = raw
        at.run()
        assert not at.exception
        assert not at.error
        assert not any(b.key == "nav-drawer-toggle" for b in at.button)
        assert at.sidebar.button(key="nav-dc-calc") is not None


class TestViewportParam:

    @pytest.mark.parametrize("raw,expected", [
        ("600", 600),
        ("1280.7", 1280),
        (None, None),
        ("", None),
        ("abc", None),
        ("0", None),
        ("-1", None),
        ("inf", None),
        ("nan", None),
        ("1e400", None),
    ])
    def test_parse_viewport_width(self, raw, expected):
        assert parse_viewport_width(raw) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
