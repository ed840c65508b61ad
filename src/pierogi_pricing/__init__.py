"""
PierogiGo Pricing - deterministic order pricing

Computes the integer-cent total owed for a pierogi delivery order from its
items, customer tier, delivery details and an optional coupon.
"""

__version__ = "0.1.0"

from . import pricing
from . import utils

__all__ = ["pricing", "utils"]
