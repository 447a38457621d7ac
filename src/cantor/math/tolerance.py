"""
Tolerance — Сравнение элементов с учётом машинной точности

Точное равенство (==) корректно для int/Fraction, но не для float:
(A·B)·C и A·(B·C) совпадают только в пределах погрешности округления.
Модуль даёт поэлементное сравнение с настраиваемой толерантностью.

Алгоритм (как math.isclose):
    abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
"""

import math
from dataclasses import dataclass
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность сравнения float (для значений около нуля)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """
    Толерантности для приближённого сравнения матриц и векторов.

    Обе толерантности конечны и неотрицательны.
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        for name, value in (("rel_tol", self.rel_tol), ("abs_tol", self.abs_tol)):
            if not is_valid_float(value):
                raise ValueError(f"{name} must be finite, got {value}")
        if self.rel_tol < 0:
            raise ValueError(f"rel_tol must be non-negative, got {self.rel_tol}")
        if self.abs_tol < 0:
            raise ValueError(f"abs_tol must be non-negative, got {self.abs_tol}")


# =============================================================================
# COMPARISONS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечно, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение двух скаляров с учётом толерантности.

    Элементы приводятся к complex, поэтому поддерживаются int, float,
    complex, Fraction и Decimal. Для прочих типов используется точное ==.

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(1 + 1j, 1 + 1j)
        True
    """
    if a == b:
        return True
    try:
        ca = complex(a)
        cb = complex(b)
    except (TypeError, ValueError):
        return False
    return abs(ca - cb) <= max(rel_tol * max(abs(ca), abs(cb)), abs_tol)
