"""Helper functions"""
from flask import current_app, has_app_context

from duecalc.core.engine import round_half_up
from duecalc.core.normalizers import group_digits

DEFAULT_CURRENCY_SYMBOL = '₫'


def format_number(value):
    """Format an integer with en-US grouping, e.g. 1,000,000"""
    value = int(value)
    sign = '-' if value < 0 else ''
    return sign + group_digits(str(abs(value)), ',')


def format_currency(amount, currency_symbol=None):
    """Format amount as vi-VN currency, e.g. 1.000.000 ₫

    Display only: the amount is rounded for the text, never changed.
    """
    if currency_symbol is None:
        currency_symbol = (current_app.config.get('CURRENCY_SYMBOL', DEFAULT_CURRENCY_SYMBOL)
                           if has_app_context() else DEFAULT_CURRENCY_SYMBOL)
    if amount is None:
        amount = 0
    value = round_half_up(amount)
    sign = '-' if value < 0 else ''
    return f"{sign}{group_digits(str(abs(value)), '.')}\u00a0{currency_symbol}"


def format_result(spec, result):
    """Currency strings for every row of a calculator result"""
    return {row.attribute: format_currency(getattr(result, row.attribute))
            for row in spec.result_rows}
