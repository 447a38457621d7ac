"""Демонстрация: печать целочисленной матрицы 4×4 (python -m src.cantor)."""

from src.cantor.linalg.matrix import Matrix


def main() -> None:
    x = Matrix(
        [
            2, 3, 4, 5,
            6, 7, 8, 9,
            10, 12, 13, 14,
            15, 16, 12, 13,
        ],
        rows=4,
        columns=4,
    )
    print(x)


if __name__ == "__main__":
    main()
