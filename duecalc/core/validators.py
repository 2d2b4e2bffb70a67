"""Field parsers and WTForms validators for calculator inputs

Every validator raises ``StopValidation`` so a field reports only the first
rule it breaks. Parsers return ``None`` instead of raising, whatever they are
given.
"""
import re
from wtforms.validators import StopValidation

# Largest integer a double holds exactly
MAX_SAFE_INTEGER = 2 ** 53 - 1

_INTEGER = re.compile(r'[+-]?[0-9]+')
_DIGITS = re.compile(r'[0-9]+')
_DECIMAL = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')


def _to_int(text):
    try:
        number = int(text, 10)
    except ValueError:
        return None
    if abs(number) > MAX_SAFE_INTEGER:
        return None
    return number


def parse_amount(value):
    """Parse a grouped amount such as '1,000,000' into an int"""
    if not isinstance(value, str):
        return None
    cleaned = value.replace(',', '')
    if not _INTEGER.fullmatch(cleaned):
        return None
    return _to_int(cleaned)


def parse_day_count(value):
    """Parse a plain run of digits into an int"""
    if not isinstance(value, str) or not _DIGITS.fullmatch(value):
        return None
    return _to_int(value)


def parse_percentage(value):
    """Parse a decimal number with at most one decimal point into a float"""
    if not isinstance(value, str) or not _DECIMAL.fullmatch(value):
        return None
    return float(value)


class Parses:
    """Reject a field whose data the parser cannot read.

    :param parser:
        Callable returning the parsed value, or ``None`` when unreadable.
    :param message:
        Error message to raise in case of a validation error.
    """

    def __init__(self, parser, message=None):
        self.parser = parser
        self.message = message

    def __call__(self, form, field):
        if self.parser(field.data) is None:
            message = self.message or field.gettext('Invalid value.')
            raise StopValidation(message)


class ParsedRange:
    """Check the parsed value against an exclusive lower bound and an
    inclusive upper bound, ``above < value <= at_most``. Either bound may be
    left out.
    """

    def __init__(self, parser, above=None, at_most=None, message=None):
        self.parser = parser
        self.above = above
        self.at_most = at_most
        self.message = message

    def __call__(self, form, field):
        value = self.parser(field.data)
        if value is None:
            raise StopValidation(self.message)
        if self.above is not None and not value > self.above:
            raise StopValidation(self.message)
        if self.at_most is not None and not value <= self.at_most:
            raise StopValidation(self.message)
