"""
Unit tests: panel registry
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eleccalc.domain.panels import DEFAULT_REGISTRY, PANELS, IconKey, PanelDescriptor, PanelRegistry


class TestPanelRegistry:
    """Panel registry tests"""

    def test_default_registry_order(self):
        assert DEFAULT_REGISTRY.ids() == (
            "wire-calc",
            "voltage-drop",
            "conduit-fill",
            "dc-calc",
            "dc-breaker-calc",
            "iec-ref-charts",
            "nec-ref-charts",
            "bs7671-ref-charts",
        )

    def test_every_label_non_empty(self):
        for panel in DEFAULT_REGISTRY.list():
            assert panel.label.strip()

    def test_icons_are_symbolic_keys(self):
        assert all(isinstance(p.icon, IconKey) for p in PANELS)

    def test_find(self):
        panel = DEFAULT_REGISTRY.find("voltage-drop")
        assert panel is not None
        assert panel.label == "Voltage Drop Calculator"
        assert DEFAULT_REGISTRY.find("reference-charts") is None

    def test_container_protocol(self):
        assert "dc-calc" in DEFAULT_REGISTRY
        assert "nope" not in DEFAULT_REGISTRY
        assert len(DEFAULT_REGISTRY) == 8
        assert [p.id for p in DEFAULT_REGISTRY] == list(DEFAULT_REGISTRY.ids())

    def test_empty_registry_rejected(self):
        with pytest.raises(ValueError):
            PanelRegistry([])

    def test_duplicate_id_rejected(self):
        with pytest.raises(ValueError, match="duplicate"):
            PanelRegistry([
                PanelDescriptor("a", "A", IconKey.CABLE),
                PanelDescriptor("a", "Another", IconKey.BATTERY),
            ])

    def test_blank_label_rejected(self):
        with pytest.raises(ValueError):
            PanelRegistry([PanelDescriptor("a", "  ", IconKey.CABLE)])

    def test_descriptor_is_immutable(self):
        panel = DEFAULT_REGISTRY.find("wire-calc")
        with pytest.raises(AttributeError):
            panel.label = "changed"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
