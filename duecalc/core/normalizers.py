"""Input normalizers

Turn free text typed into a calculator field into the canonical string that is
both re-displayed in the input and handed to the validators. Normalizing never
fails: input without digits becomes the empty string and the validators report
it.
"""
import re

_NON_DIGITS = re.compile(r'[^0-9]')
_NON_DECIMAL = re.compile(r'[^0-9.]')


def group_digits(digits, separator=','):
    """Insert a separator every three digits from the right: '1000000' -> '1,000,000'"""
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def normalize_amount(raw):
    """Keep the digits of a money amount and re-group them.

    Separators already present are stripped along with any other stray
    character before grouping is re-applied, so ``"abc1,0a00"`` becomes
    ``"1,000"``. Leading zeros are dropped as a base-10 parse would.
    """
    digits = _NON_DIGITS.sub('', raw or '')
    if not digits:
        return ''
    return group_digits(digits.lstrip('0') or '0')


def normalize_day_count(raw):
    """Keep the digits of a day count, without grouping"""
    return _NON_DIGITS.sub('', raw or '')


def normalize_percentage(raw):
    """Keep digits and decimal points.

    Several decimal points may survive (``"1.2.3"``); the percentage
    validator rejects them.
    """
    return _NON_DECIMAL.sub('', raw or '')
