"""
Math primitives для cantor.

Сравнение скаляров с учётом толерантности.
"""

from src.cantor.math.tolerance import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ToleranceConfig,
    is_close,
    is_valid_float,
)

__all__ = [
    # Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Config
    "ToleranceConfig",
    # Functions
    "is_close",
    "is_valid_float",
]
