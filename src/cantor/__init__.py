"""
cantor — примитивы линейной алгебры фиксированной размерности.

Плотные матрицы и векторы над произвольным скалярным типом:
арифметические операторы, транспонирование, конструкторы
zeroes/ones/identity/fill, индексация и текстовое представление.

Подпакеты:
- traits: контракты способностей типа элементов (Zero/One, операторы)
- domain: Shape и проверки совместимости размерностей
- math: сравнение с толерантностью
- linalg: Matrix и Vector
"""

import logging

from src.cantor.domain import NotSquareError, Shape, ShapeMismatchError
from src.cantor.linalg import Matrix, Vector
from src.cantor.math import ToleranceConfig
from src.cantor.traits import (
    CapabilityError,
    One,
    Zero,
    additive_identity,
    multiplicative_identity,
    register_identities,
)

__version__ = "0.1.0"

# Библиотека не настраивает логирование за приложение
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Containers
    "Matrix",
    "Vector",
    # Shape
    "Shape",
    "ShapeMismatchError",
    "NotSquareError",
    # Traits
    "CapabilityError",
    "Zero",
    "One",
    "additive_identity",
    "multiplicative_identity",
    "register_identities",
    # Config
    "ToleranceConfig",
]
