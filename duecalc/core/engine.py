"""Calculation engine for the overdue and settlement calculators"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext

from duecalc.core.exceptions import InvalidInputError

AVERAGE_RATE = 1.099 / 100
OVERDUE_MULTIPLIER = 1.5


def round_half_up(value):
    """Round to the nearest integer, halves away from zero.

    Exact for any int or float, whatever the number of digits.
    """
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def _require_positive_int(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInputError(f'{name} must be a positive integer, got {value!r}')


@dataclass(frozen=True)
class OverdueInput:
    """Validated overdue calculator input"""
    due_amount: int
    overdue_days: int

    def __post_init__(self):
        _require_positive_int('due_amount', self.due_amount)
        _require_positive_int('overdue_days', self.overdue_days)


@dataclass(frozen=True)
class SettlementInput:
    """Validated settlement calculator input"""
    principal_amount: int
    settlement_percentage: float

    def __post_init__(self):
        _require_positive_int('principal_amount', self.principal_amount)
        percentage = self.settlement_percentage
        if isinstance(percentage, bool) or not isinstance(percentage, (int, float)) \
                or not 0 < percentage <= 100:
            raise InvalidInputError(
                f'settlement_percentage must be in (0, 100], got {percentage!r}'
            )


@dataclass(frozen=True)
class OverdueResult:
    average_daily_amount: int
    overdue_per_day: int
    total_overdue: int


@dataclass(frozen=True)
class SettlementResult:
    settlement_amount: int


def compute_overdue(due_amount, overdue_days):
    """Compute the overdue penalty for a monthly due amount.

    Each stage is rounded before it feeds the next one, so the daily figures
    shown to the user multiply out exactly to the total.

    Args:
        due_amount: Monthly amount due, a positive integer
        overdue_days: Number of days the amount is overdue, a positive integer

    Returns:
        OverdueResult with the average daily amount, the overdue amount per
        day and the total overdue amount
    """
    average_daily_amount = round_half_up(due_amount * AVERAGE_RATE)
    overdue_per_day = round_half_up(average_daily_amount * OVERDUE_MULTIPLIER)
    total_overdue = round_half_up(overdue_per_day * overdue_days)
    return OverdueResult(
        average_daily_amount=average_daily_amount,
        overdue_per_day=overdue_per_day,
        total_overdue=total_overdue,
    )


def compute_settlement(principal_amount, settlement_percentage):
    """Compute the amount needed to settle a principal at a percentage.

    The product is taken in decimal arithmetic, so 100% always gives back the
    principal.
    """
    with localcontext() as ctx:
        ctx.prec = 80
        amount = Decimal(principal_amount) * Decimal(settlement_percentage) / 100
    return SettlementResult(settlement_amount=round_half_up(amount))
