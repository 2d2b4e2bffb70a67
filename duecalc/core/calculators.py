"""The overdue and settlement calculators"""
from wtforms.validators import DataRequired

from duecalc.core.engine import (
    OverdueInput, OverdueResult, SettlementInput, SettlementResult,
    compute_overdue, compute_settlement,
)
from duecalc.core.normalizers import normalize_amount, normalize_day_count, normalize_percentage
from duecalc.core.pipeline import CalculatorSpec, FieldSpec, ResultRow
from duecalc.core.validators import Parses, ParsedRange, parse_amount, parse_day_count, parse_percentage

AMOUNT_REQUIRED = 'Vui lòng nhập số tiền.'
AMOUNT_INVALID = 'Số tiền không hợp lệ.'
AMOUNT_NOT_POSITIVE = 'Số tiền phải lớn hơn 0.'
DAYS_REQUIRED = 'Vui lòng nhập số ngày.'
DAYS_INVALID = 'Số ngày phải là một số nguyên.'
DAYS_NOT_POSITIVE = 'Số ngày phải lớn hơn 0.'
PERCENTAGE_REQUIRED = 'Vui lòng nhập phần trăm.'
PERCENTAGE_INVALID = 'Phần trăm không hợp lệ.'
PERCENTAGE_OUT_OF_RANGE = 'Phần trăm phải từ 0 đến 100.'


def amount_field(name, label, placeholder, icon):
    return FieldSpec(
        name=name,
        label=label,
        normalizer=normalize_amount,
        parser=parse_amount,
        validators=(
            DataRequired(message=AMOUNT_REQUIRED),
            Parses(parse_amount, message=AMOUNT_INVALID),
            ParsedRange(parse_amount, above=0, message=AMOUNT_NOT_POSITIVE),
        ),
        placeholder=placeholder,
        icon=icon,
    )


OVERDUE = CalculatorSpec(
    name='overdue',
    title='Tính Tiền Quá Hạn',
    description='Nhập số tiền và ngày quá hạn để xem chi tiết.',
    nav_label='Quá hạn',
    fields=(
        amount_field('due_amount', 'Số tiền đến hạn hàng tháng', 'ví dụ: 1,000,000', 'coins'),
        FieldSpec(
            name='overdue_days',
            label='Số ngày quá hạn',
            normalizer=normalize_day_count,
            parser=parse_day_count,
            validators=(
                DataRequired(message=DAYS_REQUIRED),
                Parses(parse_day_count, message=DAYS_INVALID),
                ParsedRange(parse_day_count, above=0, message=DAYS_NOT_POSITIVE),
            ),
            placeholder='ví dụ: 5',
            icon='calendar',
        ),
    ),
    input_type=OverdueInput,
    result_type=OverdueResult,
    compute=compute_overdue,
    result_rows=(
        ResultRow('Số tiền trung bình 1 ngày', 'average_daily_amount', icon='trending-up'),
        ResultRow('Số tiền quá hạn 1 ngày', 'overdue_per_day', icon='wallet'),
        ResultRow('Số tiền quá hạn', 'total_overdue', highlight=True),
    ),
)

SETTLEMENT = CalculatorSpec(
    name='settlement',
    title='Tính Tiền Tất Toán',
    description='Nhập số tiền gốc và phần trăm tất toán để xem chi tiết.',
    nav_label='Tất toán',
    fields=(
        amount_field('principal_amount', 'Số tiền gốc', 'ví dụ: 10,000,000', 'landmark'),
        FieldSpec(
            name='settlement_percentage',
            label='% Tất toán',
            normalizer=normalize_percentage,
            parser=parse_percentage,
            validators=(
                DataRequired(message=PERCENTAGE_REQUIRED),
                Parses(parse_percentage, message=PERCENTAGE_INVALID),
                ParsedRange(parse_percentage, above=0, at_most=100, message=PERCENTAGE_OUT_OF_RANGE),
            ),
            placeholder='ví dụ: 30',
            input_mode='decimal',
            icon='percent',
        ),
    ),
    input_type=SettlementInput,
    result_type=SettlementResult,
    compute=compute_settlement,
    result_rows=(
        ResultRow('Số tiền cần tất toán', 'settlement_amount', highlight=True),
    ),
)

CALCULATORS = {spec.name: spec for spec in (OVERDUE, SETTLEMENT)}


def get_calculator(name):
    """Look up a calculator by name; raises KeyError for unknown names"""
    return CALCULATORS[name]
