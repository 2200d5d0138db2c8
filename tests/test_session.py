"""
Calculator form session and result display tests.
"""

import pytest

from estimator.display import format_value, render_results
from estimator.models import PartGroup, PartType
from estimator.session import CalculatorSession


# ============================================================
# Session state
# ============================================================

def test_session_opens_on_bullet_markers():
    session = CalculatorSession()
    assert session.part_group == PartGroup.LINE_MARKERS
    assert session.part_type == PartType.BULLET
    assert session.results is None
    assert session.error == ""


def test_bullet_defaults_from_fresh_session():
    session = CalculatorSession()
    results = session.calculate()
    assert results["weight"]["value"] == pytest.approx(3.5614)
    assert session.error == ""


@pytest.mark.parametrize("group,first", [
    ("signs", PartType.ALUMINUM_SIGN),
    ("decals", PartType.DIGITAL_PRINT),
    ("lineMarkers", PartType.BULLET),
    ("other", PartType.VHB_TAPE),
])
def test_selecting_group_resets_part_type(group, first):
    session = CalculatorSession()
    session.calculate()
    session.select_group(group)
    assert session.part_type == first
    assert session.results is None
    assert session.error == ""


def test_selecting_part_type_clears_result():
    session = CalculatorSession("signs")
    session.calculate()
    assert session.results is not None
    session.select_part_type("corrugated")
    assert session.part_type == PartType.CORRUGATED
    assert session.results is None


def test_part_type_must_belong_to_group():
    session = CalculatorSession("signs")
    with pytest.raises(ValueError):
        session.select_part_type("bullet")
    assert session.part_type == PartType.ALUMINUM_SIGN


def test_failure_clears_result_and_success_clears_error():
    session = CalculatorSession("signs")
    session.calculate()
    assert session.results["qty"]["value"] == 4

    session.set_size(width="abc")
    assert session.calculate() is None
    assert session.results is None
    assert session.error == "Please enter valid numbers for width and height."

    session.set_size(width="48")
    session.calculate()
    assert session.error == ""
    assert session.results["qty"]["value"] == 4


def test_options_flow_into_calculation():
    session = CalculatorSession("signs")
    session.select_part_type("acm_sign")
    session.set_size("60", "30")
    session.set_option("acm_sheet_size", "120")
    assert session.calculate()["qty"]["value"] == 4


def test_unknown_option_name():
    session = CalculatorSession()
    with pytest.raises(KeyError):
        session.set_option("paint_color", "red")


def test_unsupported_option_value_becomes_error():
    session = CalculatorSession()
    assert session.calculate() is not None

    session.set_option("custom_tube_length", None)
    assert session.calculate() is None
    assert session.results is None
    assert "custom_tube_length" in session.error

    session.set_option("custom_tube_length", "")
    assert session.calculate()["weight"]["value"] == pytest.approx(3.5614)
    assert session.error == ""


def test_session_rows_in_display_order():
    session = CalculatorSession("signs")
    assert session.rows() == []
    session.calculate()
    labels = [label for label, _ in session.rows()]
    assert labels == ["# Up / Inverse Qty:", "% Out of Material:", "Aluminum Weight:"]


# ============================================================
# Display
# ============================================================

@pytest.mark.parametrize("value,expected", [
    (4, "4"),
    (0.25, "0.25"),
    (2.681856, "2.681856"),
    (3.5614000000000003, "3.5614"),
    (1234.5, "1,234.5"),
    (1 / 3, "0.333333"),
    (0, "0"),
    ("n/a", "n/a"),
])
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_format_value_digits():
    assert format_value(2.681856, max_fraction_digits=2) == "2.68"


def test_render_results():
    rows = render_results({
        "qty": {"value": 10, "label": "# Up / Inverse Qty:"},
        "percentWaste": {"value": 0.1, "label": "% Out of Material:"},
    })
    assert rows == [("# Up / Inverse Qty:", "10"), ("% Out of Material:", "0.1")]
