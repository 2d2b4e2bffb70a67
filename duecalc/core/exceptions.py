"""Calculator exceptions"""


class CalculatorError(Exception):
    """Base exception for the calculator core"""

    pass


class InvalidInputError(CalculatorError, ValueError):
    """A validated input record was built from values that break its constraints"""

    pass
