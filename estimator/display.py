"""Result formatting for the estimate sheet."""

from typing import Optional

from .config import settings


def format_value(value, max_fraction_digits: Optional[int] = None) -> str:
    """
    Render a result value: thousands separators, at most N decimals,
    no trailing zeros (2681.856 -> "2,681.856", 4 -> "4"). Text passes through.
    """
    if isinstance(value, str):
        return value
    if max_fraction_digits is None:
        max_fraction_digits = settings.DISPLAY_MAX_FRACTION_DIGITS
    text = "{:,.{}f}".format(value, max_fraction_digits)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def render_results(results: dict, max_fraction_digits: Optional[int] = None) -> list:
    """Ordered (label, text) rows for display."""
    return [
        (entry["label"], format_value(entry["value"], max_fraction_digits))
        for entry in results.values()
    ]
