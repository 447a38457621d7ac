"""
Domain value objects.

Shape — размерность матрицы и проверки совместимости операндов.
"""

from src.cantor.domain.shape import (
    NotSquareError,
    Shape,
    ShapeMismatchError,
    ensure_inner_dimension,
    ensure_length,
    ensure_same_shape,
    ensure_square,
)

__all__ = [
    # Exceptions
    "ShapeMismatchError",
    "NotSquareError",
    # Model
    "Shape",
    # Guards
    "ensure_length",
    "ensure_same_shape",
    "ensure_inner_dimension",
    "ensure_square",
]
