"""UI components for the stock calculator."""

from .stock_calculator import compute_positions

__all__ = ["compute_positions"]
