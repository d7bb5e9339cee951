"""
Unit tests: AC wire sizing (NEC, IEC, BS7671)
"""
import math

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eleccalc.calculations import calculate_wire_size
from eleccalc.calculations.wire import conductor_voltage_drop, resistance_for
from eleccalc.infra.exceptions import CalculationError, ValidationError
from eleccalc.standards.iec import get_cable
from eleccalc.standards.nec import get_nec_wire


def nec_input(**overrides):
    data = {
        "standard": "NEC",
        "load_current": 20,
        "circuit_length": 100,
        "voltage": 120,
        "voltage_system": "single",
        "conductor_material": "copper",
        "installation_method": "conduit",
        "ambient_temperature": 30,
        "number_of_conductors": 3,
        "power_factor": 1.0,
        "temperature_rating": 75,
        "continuous_load": True,
    }
    data.update(overrides)
    return data


def metric_input(standard, **overrides):
    data = {
        "standard": standard,
        "load_current": 40,
        "circuit_length": 50,
        "voltage": 230,
        "voltage_system": "single",
        "installation_method": "C",
        "ambient_temperature": 30,
        "number_of_conductors": 1,
        "power_factor": 1.0,
    }
    data.update(overrides)
    return data


class TestNECWireSize:

    def test_upsizes_for_voltage_drop(self):
        result = calculate_wire_size(nec_input())
        # 12 AWG carries 25 A but drops 6.4%; 8 AWG is the first under 3%
        assert result.recommended_size == "8"
        assert result.design_current == pytest.approx(25.0)
        assert result.required_ampacity == pytest.approx(25.0)
        assert result.current_capacity == 50
        assert result.voltage_drop_volts == pytest.approx(3.056)
        assert result.voltage_drop_percent == pytest.approx(3.056 / 120 * 100)
        assert result.power_loss_watts == pytest.approx(30.56)
        assert result.efficiency_percent == pytest.approx((120 - 3.056) / 120 * 100)
        assert result.compliance.overall

    def test_result_serializes(self):
        payload = calculate_wire_size(nec_input()).to_dict()
        assert payload["recommended_size"] == "8"
        assert payload["compliance"]["voltage_drop"] is True
        assert payload["correction_factors"]["temperature"] == 1.0

    def test_alternatives(self):
        result = calculate_wire_size(nec_input())
        assert [a.size for a in result.alternatives] == ["12", "10", "8", "6", "4"]
        assert [a.is_compliant for a in result.alternatives] == [False, False, True, True, True]

    def test_short_run_uses_ampacity_size(self):
        result = calculate_wire_size(nec_input(circuit_length=10, voltage=240))
        assert result.recommended_size == "12"

    def test_non_continuous_load(self):
        result = calculate_wire_size(nec_input(circuit_length=10, voltage=240, continuous_load=False))
        assert result.design_current == pytest.approx(20.0)
        assert result.recommended_size == "14"

    def test_temperature_correction(self):
        result = calculate_wire_size(nec_input(load_current=30, circuit_length=10, voltage=240,
                                               ambient_temperature=40))
        assert result.correction_factors.temperature == pytest.approx(0.91)
        assert result.required_ampacity == pytest.approx(37.5 / 0.91)
        assert result.recommended_size == "8"

    def test_conductor_adjustment(self):
        result = calculate_wire_size(nec_input(number_of_conductors=7))
        assert result.correction_factors.grouping == pytest.approx(0.7)

    def test_voltage_drop_never_met(self):
        result = calculate_wire_size(nec_input(circuit_length=10000))
        assert result.recommended_size == "12"
        assert result.compliance.voltage_drop is False
        assert result.warnings

    def test_no_size_large_enough(self):
        with pytest.raises(CalculationError):
            calculate_wire_size(nec_input(load_current=1000))

    def test_invalid_current(self):
        with pytest.raises(ValidationError):
            calculate_wire_size(nec_input(load_current=-5))

    def test_invalid_temperature_rating(self):
        with pytest.raises(ValidationError):
            calculate_wire_size(nec_input(temperature_rating=80))

    def test_unknown_installation_method_flagged(self):
        result = calculate_wire_size(nec_input(installation_method="underwater"))
        assert result.compliance.installation is False
        assert result.correction_factors.installation == 1.0

    def test_three_phase_voltage_drop(self):
        spec = get_nec_wire("12")
        volts, _ = conductor_voltage_drop(spec, "NEC", 20, 100, 208, "three", "copper", 1.0)
        assert volts == pytest.approx(math.sqrt(3) * 20 * 100 * 1.93 / 1000)

    def test_aluminum_resistance(self):
        spec = get_nec_wire("10")
        assert resistance_for(spec, "NEC", "aluminum") == pytest.approx(1.21 * 1.63)
        assert resistance_for(spec, "NEC", "copper") == pytest.approx(1.21)


class TestMetricWireSize:

    def test_iec_uses_90c_column(self):
        result = calculate_wire_size(metric_input("IEC"))
        assert result.recommended_size == "10"
        assert result.current_capacity == 75
        assert result.voltage_drop_limit == 4.0
        assert result.size_unit == "mm²"

    def test_bs7671_uses_70c_column(self):
        result = calculate_wire_size(metric_input("BS7671"))
        assert result.recommended_size == "10"
        assert result.current_capacity == 57

    def test_short_run_sizes_differ(self):
        iec = calculate_wire_size(metric_input("IEC", circuit_length=5))
        bs = calculate_wire_size(metric_input("BS7671", circuit_length=5))
        assert iec.recommended_size == "4"
        assert bs.recommended_size == "6"

    def test_no_continuous_multiplier(self):
        result = calculate_wire_size(metric_input("IEC"))
        assert result.design_current == pytest.approx(40)

    def test_default_installation_method(self):
        result = calculate_wire_size(metric_input("IEC", installation_method=None))
        assert result.compliance.installation is True

    def test_soil_resistivity_derating(self):
        result = calculate_wire_size(metric_input("IEC", installation_method="D2", soil_resistivity=5.0))
        assert result.correction_factors.thermal == pytest.approx(0.5)

    def test_reactance_term(self):
        spec = get_cable("IEC", "10")
        volts, _ = conductor_voltage_drop(spec, "IEC", 40, 50, 230, "single", "copper", 0.8)
        assert volts == pytest.approx(2 * 40 * 0.05 * (1.83 * 0.8 + 0.075 * 0.6))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
