"""Calculator modules for average cost and profit computations."""

from .average_cost import AverageCostCalculator
from .profit_calculator import ProfitCalculator, DEFAULT_PROFIT_PERCENTAGES
from .fees import FeeConfig, make_fee_config, no_fees, fee_title, DEFAULT_FEE_PERCENT
from .numbers import parse_number, to_fixed, format_fixed

__all__ = [
    "AverageCostCalculator",
    "ProfitCalculator",
    "DEFAULT_PROFIT_PERCENTAGES",
    "FeeConfig",
    "make_fee_config",
    "no_fees",
    "fee_title",
    "DEFAULT_FEE_PERCENT",
    "parse_number",
    "to_fixed",
    "format_fixed",
]
