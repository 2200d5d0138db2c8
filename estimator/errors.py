"""
Estimator error hierarchy.

Every failure the engine reports is an EstimatorError carrying a stable
`code` for API clients and a message fit to show the estimator verbatim.
"""


class EstimatorError(ValueError):
    code = "estimator_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDimensions(EstimatorError):
    code = "invalid_dimensions"

    def __init__(self, message: str = "Please enter valid numbers for width and height."):
        super().__init__(message)


class InvalidOption(EstimatorError):
    code = "invalid_option"

    def __init__(self, option: str, value=None, reason: str = None):
        message = f"Invalid value for {option}: {value!r}."
        if reason:
            message += f" {reason.rstrip('.')}."
        super().__init__(message)
        self.option = option
        self.value = value


class InfeasibleLayout(EstimatorError):
    code = "infeasible_layout"

    def __init__(self, message: str = "Error: Both dimensions exceed the roll width."):
        super().__init__(message)


class NoYield(EstimatorError):
    """Item is larger than the stock sheet in both orientations."""

    code = "no_yield"

    def __init__(self, sheet_width: float, sheet_height: float):
        super().__init__(
            f'Item does not fit on a {sheet_width:g}" x {sheet_height:g}" sheet in either orientation.'
        )
        self.sheet_width = sheet_width
        self.sheet_height = sheet_height


class UnknownPartType(EstimatorError):
    code = "unknown_part_type"

    def __init__(self, part_type: str, available=None):
        message = f"Unknown part type: {part_type}."
        if available:
            message += f" Available: {', '.join(available)}"
        super().__init__(message)
        self.part_type = part_type
