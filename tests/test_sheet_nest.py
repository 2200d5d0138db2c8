"""
Sheet nesting tests: aluminum, ACM, HDPE, corrugated.

Tests:
1-4.  Aluminum sign (reference case, gauges, weight)
5-6.  Corrugated
7-8.  ACM sheet sizes
9-10. HDPE sheet sizes
11-13. Yield invariants (orientation, waste, no-yield)
"""

import pytest

from estimator.calculators.sheet_nest import (
    AcmSignCalculator,
    AluminumSignCalculator,
    CorrugatedCalculator,
    HdpeSignCalculator,
)
from estimator.engine import calculate, run_calculation
from estimator.errors import NoYield
from estimator.schemas import AcmSignJob, AluminumSignJob, CorrugatedJob, HdpeSignJob


# ============================================================
# Aluminum
# ============================================================

def test_aluminum_reference_sign(make_request):
    """48 x 24 on a 96 x 48 sheet at .024: 4 up either way."""
    result = calculate(make_request("aluminum_sign", "48", "24", al_gauge=".024"))

    assert result["qty"]["value"] == 4
    assert result["percentWaste"]["value"] == 0.25
    assert result["weight"]["value"] == pytest.approx(48 * 24 * 0.024 * 0.097)
    assert result["weight"]["value"] == pytest.approx(2.681856)


def test_aluminum_result_order_and_labels(make_request):
    result = calculate(make_request("aluminum_sign"))
    assert list(result) == ["qty", "percentWaste", "weight"]
    assert result["qty"]["label"] == "# Up / Inverse Qty:"
    assert result["percentWaste"]["label"] == "% Out of Material:"
    assert result["weight"]["label"] == "Aluminum Weight:"


def test_aluminum_gauge_is_thickness():
    calc = AluminumSignCalculator()
    thin = calc.calculate(AluminumSignJob(width=12, height=18, al_gauge=".040"))
    thick = calc.calculate(AluminumSignJob(width=12, height=18, al_gauge=".125"))
    assert thin["weight"]["value"] == pytest.approx(12 * 18 * 0.040 * 0.097)
    assert thick["weight"]["value"] == pytest.approx(12 * 18 * 0.125 * 0.097)
    assert thin["qty"]["value"] == thick["qty"]["value"] == 20  # 5 x 4 turned


def test_aluminum_default_gauge(make_request):
    result = calculate(make_request("aluminum_sign", "12", "12"))
    assert result["weight"]["value"] == pytest.approx(12 * 12 * 0.024 * 0.097)


# ============================================================
# Corrugated
# ============================================================

def test_corrugated_picks_rotated_layout():
    """24 x 18: 4x2=8 as drawn, 5x2=10 turned: turned wins."""
    result = CorrugatedCalculator().calculate(CorrugatedJob(width=24, height=18))
    assert result["qty"]["value"] == 10
    assert result["percentWaste"]["value"] == pytest.approx(0.1)


def test_corrugated_weight_uses_fixed_stock():
    result = CorrugatedCalculator().calculate(CorrugatedJob(width=24, height=18))
    assert result["weight"]["value"] == pytest.approx(24 * 18 * 0.15748 * 0.0066522)
    assert result["weight"]["label"] == "Corrugated Weight:"


# ============================================================
# ACM
# ============================================================

def test_acm_large_sheet():
    result = AcmSignCalculator().calculate(AcmSignJob(width=60, height=30, acm_sheet_size="120"))
    assert result["qty"]["value"] == 4
    assert result["weight"]["value"] == pytest.approx(60 * 30 * 0.118 * 0.0484)
    assert result["weight"]["label"] == "ACM Weight:"


def test_acm_standard_sheet():
    result = AcmSignCalculator().calculate(AcmSignJob(width=60, height=30, acm_sheet_size="96"))
    assert result["qty"]["value"] == 1
    assert result["percentWaste"]["value"] == 1.0


# ============================================================
# HDPE
# ============================================================

def test_hdpe_023_uses_thin_gauge_and_density():
    result = HdpeSignCalculator().calculate(HdpeSignJob(width=12, height=12, hdpe_sheet_size=".023"))
    assert result["qty"]["value"] == 6  # 45 x 24 sheet: 3 x 2
    assert result["weight"]["value"] == pytest.approx(12 * 12 * 0.023 * 0.068)
    assert result["weight"]["label"] == "HDPE Weight:"


@pytest.mark.parametrize("size,expected_qty", [
    (".110_96", 8),   # 48 x 96
    (".110_40", 2),   # 48 x 40
    (".110_24", 2),   # 48 x 24
])
def test_hdpe_110_sheets(size, expected_qty):
    result = HdpeSignCalculator().calculate(HdpeSignJob(width=24, height=24, hdpe_sheet_size=size))
    assert result["qty"]["value"] == expected_qty
    assert result["weight"]["value"] == pytest.approx(24 * 24 * 0.110 * 0.0348011)


# ============================================================
# Invariants
# ============================================================

@pytest.mark.parametrize("part_type", ["aluminum_sign", "acm_sign", "hdpe_sign", "corrugated"])
@pytest.mark.parametrize("width,height", [("24", "12"), ("17", "11"), ("30", "7.5"), ("45", "23")])
def test_orientation_invariance(make_request, part_type, width, height):
    """Swapping width and height never changes the yield."""
    as_drawn = calculate(make_request(part_type, width, height))
    turned = calculate(make_request(part_type, height, width))
    assert as_drawn["qty"] == turned["qty"]
    assert as_drawn["percentWaste"] == turned["percentWaste"]


@pytest.mark.parametrize("width,height", [("10", "10"), ("47", "95"), ("96", "48"), ("5.5", "3.25")])
def test_waste_is_inverse_of_qty(make_request, width, height):
    result = calculate(make_request("aluminum_sign", width, height))
    assert result["qty"]["value"] >= 1
    assert result["percentWaste"]["value"] == 1 / result["qty"]["value"]


def test_oversize_item_has_no_yield(make_request):
    """Bigger than the sheet both ways: explicit error instead of an infinite %."""
    with pytest.raises(NoYield) as exc:
        calculate(make_request("aluminum_sign", "100", "50"))
    assert exc.value.message == 'Item does not fit on a 96" x 48" sheet in either orientation.'

    outcome = run_calculation(make_request("corrugated", "100", "100"))
    assert outcome.results is None
    assert outcome.error_code == "no_yield"
