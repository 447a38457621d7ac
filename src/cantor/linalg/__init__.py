"""
Linear algebra containers: Matrix и Vector фиксированной размерности.
"""

from src.cantor.linalg.matrix import Matrix
from src.cantor.linalg.vector import Vector

__all__ = [
    "Matrix",
    "Vector",
]
