"""Calculator core: normalizers, validators, calculation engine and pipeline"""
from duecalc.core.calculators import CALCULATORS, OVERDUE, SETTLEMENT, get_calculator
from duecalc.core.engine import compute_overdue, compute_settlement
from duecalc.core.normalizers import normalize_amount, normalize_day_count, normalize_percentage
from duecalc.core.pipeline import CalculatorState, calculate, validate
