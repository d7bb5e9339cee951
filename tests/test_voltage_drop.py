"""
Unit tests: voltage drop analysis
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eleccalc.calculations import analyze_voltage_drop, voltage_drop_curve
from eleccalc.infra.exceptions import CalculationError, ValidationError
from eleccalc.standards.nec import NEC_WIRES


@pytest.fixture
def nec_circuit():
    return {
        "standard": "NEC",
        "current": 20,
        "length": 100,
        "voltage": 120,
        "voltage_system": "single",
    }


class TestAnalyzeVoltageDrop:

    def test_rows_cover_table(self, nec_circuit):
        analysis = analyze_voltage_drop(nec_circuit)
        assert [r.size for r in analysis.rows] == [w.size for w in NEC_WIRES]
        assert analysis.voltage_drop_limit == 3.0

    def test_recommended_smallest_compliant(self, nec_circuit):
        analysis = analyze_voltage_drop(nec_circuit)
        assert analysis.recommended.size == "8"
        assert analysis.recommended.voltage_drop_percent == pytest.approx(3.056 / 120 * 100)

    def test_custom_limit(self, nec_circuit):
        analysis = analyze_voltage_drop({**nec_circuit, "limit_percent": 5})
        assert analysis.recommended.size == "10"

    def test_drop_decreases_with_size(self, nec_circuit):
        drops = [r.voltage_drop_percent for r in analyze_voltage_drop(nec_circuit).rows]
        assert drops == sorted(drops, reverse=True)

    def test_capacity_required_for_compliance(self):
        analysis = analyze_voltage_drop({"standard": "NEC", "current": 30, "length": 1, "voltage": 240})
        row_14 = analysis.rows[0]
        assert row_14.size == "14"
        assert row_14.is_compliant is False
        assert analysis.recommended.size == "10"

    def test_no_compliant_size(self, nec_circuit):
        analysis = analyze_voltage_drop({**nec_circuit, "length": 100000})
        assert analysis.recommended is None

    def test_metric_standard(self):
        analysis = analyze_voltage_drop({"standard": "IEC", "current": 40, "length": 50, "voltage": 230})
        assert analysis.voltage_drop_limit == 4.0
        assert analysis.recommended.size == "10"

    def test_invalid_input(self, nec_circuit):
        with pytest.raises(ValidationError):
            analyze_voltage_drop({**nec_circuit, "voltage": 0})


class TestVoltageDropCurve:

    def test_points(self, nec_circuit):
        curve = voltage_drop_curve(nec_circuit, "8", points=5, max_length=200)
        assert [p.distance for p in curve] == [0, 50, 100, 150, 200]
        assert curve[0].voltage_drop_volts == 0
        assert curve[2].voltage_drop_percent == pytest.approx(3.056 / 120 * 100)

    def test_default_span_is_twice_length(self, nec_circuit):
        curve = voltage_drop_curve(nec_circuit, "8")
        assert len(curve) == 20
        assert curve[-1].distance == pytest.approx(200)

    def test_unknown_size(self, nec_circuit):
        with pytest.raises(CalculationError):
            voltage_drop_curve(nec_circuit, "7")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
