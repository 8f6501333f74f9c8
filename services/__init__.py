# services/__init__.py
"""Services package for the stock calculator"""

from . import config
from . import state_store

__all__ = ['config', 'state_store']
