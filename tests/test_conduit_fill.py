"""
Unit tests: NEC conduit fill
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eleccalc.calculations import calculate_conduit_fill
from eleccalc.infra.exceptions import CalculationError, ValidationError
from eleccalc.standards.nec import nec_fill_limit


class TestFillLimits:

    @pytest.mark.parametrize("count,limit", [(1, 53.0), (2, 31.0), (3, 40.0), (12, 40.0)])
    def test_nec_chapter_9(self, count, limit):
        assert nec_fill_limit(count) == limit


class TestConduitFill:

    def test_smallest_compliant_conduit(self):
        result = calculate_conduit_fill({"conduit_type": "EMT", "wires": [{"gauge": "12", "quantity": 3}]})
        assert result.conduit_size == "1/2"
        assert result.wire_count == 3
        assert result.total_wire_area == pytest.approx(0.0399)
        assert result.fill_percent == pytest.approx(0.0399 / 0.304 * 100)
        assert result.max_fill_percent == 40.0
        assert result.is_compliant

    def test_single_conductor_rule(self):
        result = calculate_conduit_fill({"conduit_type": "EMT", "wires": [{"gauge": "4/0", "quantity": 1}]})
        assert result.max_fill_percent == 53.0
        assert result.conduit_size == "1"

    def test_requested_size(self):
        result = calculate_conduit_fill({
            "conduit_type": "EMT",
            "wires": [{"gauge": "12", "quantity": 3}],
            "conduit_size": "3/4",
        })
        assert result.conduit_size == "3/4"
        assert result.fill_percent == pytest.approx(0.0399 / 0.533 * 100)

    def test_unknown_requested_size(self):
        with pytest.raises(CalculationError):
            calculate_conduit_fill({
                "conduit_type": "PVC",
                "wires": [{"gauge": "12", "quantity": 3}],
                "conduit_size": "5",
            })

    def test_unknown_gauge(self):
        with pytest.raises(ValidationError):
            calculate_conduit_fill({"conduit_type": "EMT", "wires": [{"gauge": "13", "quantity": 1}]})

    def test_empty_wire_list(self):
        with pytest.raises(ValidationError):
            calculate_conduit_fill({"conduit_type": "EMT", "wires": []})

    def test_future_reserve(self):
        result = calculate_conduit_fill({
            "conduit_type": "EMT",
            "wires": [{"gauge": "12", "quantity": 3}],
            "future_fill_reserve": 25,
        })
        assert result.total_wire_area == pytest.approx(0.0399 * 1.25)

    def test_nothing_fits_uses_largest(self):
        result = calculate_conduit_fill({"conduit_type": "EMT", "wires": [{"gauge": "1000", "quantity": 40}]})
        assert result.conduit_size == "4"
        assert result.is_compliant is False
        assert result.alternatives == []

    def test_breakdown_shares(self):
        result = calculate_conduit_fill({
            "conduit_type": "IMC",
            "wires": [{"gauge": "12", "quantity": 3}, {"gauge": "8", "quantity": 1}],
        })
        assert len(result.wire_breakdown) == 2
        assert sum(line.share_percent for line in result.wire_breakdown) == pytest.approx(100)
        assert all(o.is_compliant for o in result.alternatives)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
