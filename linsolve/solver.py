"""Solvers for systems of linear equations, with a readable trace of every step."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence

EPSILON = 1e-10

Matrix = Sequence[Sequence[float]]
Vector = Sequence[float]


class Method(IntEnum):
    """Available solving methods."""

    GAUSS = 0
    JORDAN_GAUSS = 1
    CRAMER = 2
    INVERSE_MATRIX = 3
    LEAST_SQUARES = 4


@dataclass
class Solution:
    """The values of the unknowns and the steps taken to find them."""

    values: list[float]
    steps: list[str] = field(default_factory=list)


class SolveError(Exception):
    """Raised when a system cannot be solved; carries the steps recorded so far."""

    def __init__(self, message: str, steps: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.steps = list(steps)


def _num(value: float) -> str:
    return f"{value:.4f}"


def _fail(steps: list[str], message: str, record: bool = True) -> SolveError:
    if record:
        steps.append(message)
    return SolveError(message, steps)


def _copy_matrix(matrix: Matrix) -> list[list[float]]:
    return [[float(v) for v in row] for row in matrix]


def _check_square_system(matrix: Matrix, free_terms: Vector, steps: list[str]) -> None:
    n = len(matrix)
    if n == 0 or n != len(free_terms):
        raise _fail(steps, "Matrix and free terms must be non-empty and of equal length", record=False)
    if any(len(row) < n for row in matrix):
        raise _fail(steps, "Every row must have at least as many entries as there are equations", record=False)


def _pivot_row(matrix: list[list[float]], col: int) -> int:
    return max(range(col, len(matrix)), key=lambda k: abs(matrix[k][col]))


def format_matrix(matrix: Matrix, free_terms: Vector) -> str:
    """Render an augmented matrix as text, one row per line."""
    if not matrix or not free_terms or len(matrix) != len(free_terms):
        return "Invalid matrix format"
    lines = []
    for row, term in zip(matrix, free_terms):
        if not row:
            continue
        cells = "".join(_num(v) + "\t" for v in row)
        lines.append(f"| {cells}| \t{_num(term)} |\n")
    return "".join(lines)


def format_vector(vec: Vector) -> str:
    """Render a vector as a bracketed, comma-separated list."""
    if not vec:
        return "[]"
    return "[ " + ", ".join(_num(v) for v in vec) + " ]"


def determinant(matrix: Matrix) -> float:
    """Determinant by elimination with partial pivoting; 0.0 for singular or empty input."""
    a = _copy_matrix(matrix)
    n = len(a)
    if n == 0:
        return 0.0
    det = 1.0
    for i in range(n):
        p = _pivot_row(a, i)
        if p != i:
            a[i], a[p] = a[p], a[i]
            det *= -1
        if abs(a[i][i]) < EPSILON:
            return 0.0
        for k in range(i + 1, n):
            factor = a[k][i] / a[i][i]
            for j in range(i, n):
                a[k][j] -= factor * a[i][j]
        det *= a[i][i]
    return det


def inverse_matrix(matrix: Matrix) -> list[list[float]]:
    """Inverse by Gauss-Jordan elimination; [] for empty input.

    Raises ValueError when the matrix is singular.
    """
    a = _copy_matrix(matrix)
    n = len(a)
    if n == 0:
        return []
    inverse = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    for i in range(n):
        p = _pivot_row(a, i)
        if p != i:
            a[i], a[p] = a[p], a[i]
            inverse[i], inverse[p] = inverse[p], inverse[i]
        if abs(a[i][i]) < EPSILON:
            raise ValueError("matrix is singular")
        divisor = a[i][i]
        for j in range(n):
            a[i][j] /= divisor
            inverse[i][j] /= divisor
        for k in range(n):
            if k == i:
                continue
            factor = a[k][i]
            for j in range(n):
                a[k][j] -= factor * a[i][j]
                inverse[k][j] -= factor * inverse[i][j]
    return inverse


def transpose_matrix(matrix: Matrix) -> list[list[float]]:
    """Transpose; rows whose length differs from the first row contribute zeros."""
    if not matrix:
        return []
    cols = len(matrix[0])
    return [
        [float(row[j]) if len(row) == cols else 0.0 for row in matrix]
        for j in range(cols)
    ]


def multiply_matrices(a: Matrix, b: Matrix) -> list[list[float]]:
    """Matrix product; [] if either factor is empty.

    Raises ValueError when the inner dimensions differ.
    """
    if not a or not b:
        return []
    cols_a = len(a[0])
    rows_b = len(b)
    cols_b = len(b[0])
    if cols_a != rows_b:
        raise ValueError(f"cannot multiply: {cols_a} columns against {rows_b} rows")
    result = [[0.0] * cols_b for _ in a]
    for out_row, row in zip(result, a):
        if len(row) != cols_a:
            continue
        for j in range(cols_b):
            for k in range(cols_a):
                if j >= len(b[k]):
                    continue
                out_row[j] += row[k] * b[k][j]
    return result


def _gauss(matrix: Matrix, free_terms: Vector, steps: list[str]) -> list[float]:
    _check_square_system(matrix, free_terms, steps)
    a = _copy_matrix(matrix)
    b = [float(v) for v in free_terms]
    n = len(a)

    steps.extend(["Метод Гаусса:", "Начальная система:", format_matrix(a, b)])

    for i in range(n):
        p = _pivot_row(a, i)
        if p != i:
            a[i], a[p] = a[p], a[i]
            b[i], b[p] = b[p], b[i]
            steps.append(f"Перестановка строк {i + 1} и {p + 1}:")
            steps.append(format_matrix(a, b))

        if abs(a[i][i]) < EPSILON:
            raise _fail(steps, "Система вырождена!")

        divisor = a[i][i]
        steps.append(f"Нормировка строки {i + 1} (деление на {_num(divisor)}):")
        for j in range(i, n):
            a[i][j] /= divisor
        b[i] /= divisor
        steps.append(format_matrix(a, b))

        for k in range(i + 1, n):
            factor = a[k][i]
            steps.append(
                f"Исключение в строке {k + 1} (коэффициент {_num(factor)} * строка {i + 1}):"
            )
            for j in range(i, n):
                a[k][j] -= factor * a[i][j]
            b[k] -= factor * b[i]
            steps.append(format_matrix(a, b))

    steps.append("Обратный ход:")
    results = [0.0] * n
    for i in reversed(range(n)):
        value = b[i]
        for j in range(i + 1, n):
            value -= a[i][j] * results[j]
        results[i] = value
        steps.append(f"x{i + 1} = {_num(value)}")
    return results


def solve_gauss(matrix: Matrix, free_terms: Vector) -> Solution:
    """Gaussian elimination with partial pivoting and back substitution."""
    steps: list[str] = []
    return Solution(_gauss(matrix, free_terms, steps), steps)


def solve_jordan_gauss(matrix: Matrix, free_terms: Vector) -> Solution:
    """Gauss-Jordan elimination down to the identity matrix."""
    steps: list[str] = []
    _check_square_system(matrix, free_terms, steps)
    a = _copy_matrix(matrix)
    b = [float(v) for v in free_terms]
    n = len(a)

    steps.extend(["Метод Жордана-Гаусса:", "Начальная система:", format_matrix(a, b)])

    for i in range(n):
        p = _pivot_row(a, i)
        if p != i:
            a[i], a[p] = a[p], a[i]
            b[i], b[p] = b[p], b[i]
            steps.append(f"Перестановка строк {i + 1} и {p + 1}:")
            steps.append(format_matrix(a, b))

        if abs(a[i][i]) < EPSILON:
            raise _fail(steps, "Система вырождена!")

        divisor = a[i][i]
        steps.append(f"Нормировка строки {i + 1} (деление на {_num(divisor)}):")
        for j in range(n):
            a[i][j] /= divisor
        b[i] /= divisor
        steps.append(format_matrix(a, b))

        for k in range(n):
            if k == i:
                continue
            factor = a[k][i]
            if abs(factor) > EPSILON:
                steps.append(
                    f"Исключение в строке {k + 1} (коэффициент {_num(factor)} * строка {i + 1}):"
                )
                for j in range(n):
                    a[k][j] -= factor * a[i][j]
                b[k] -= factor * b[i]
                steps.append(format_matrix(a, b))

    steps.append("Результат:")
    steps.extend(f"x{i + 1} = {_num(v)}" for i, v in enumerate(b))
    return Solution(b, steps)


def solve_cramer(matrix: Matrix, free_terms: Vector) -> Solution:
    """Cramer's rule: each unknown is a ratio of determinants."""
    steps: list[str] = []
    _check_square_system(matrix, free_terms, steps)
    n = len(matrix)
    steps.append("Метод Крамера:")

    main_det = determinant(matrix)
    steps.append(f"Определитель основной матрицы: {_num(main_det)}")
    if abs(main_det) < EPSILON:
        raise _fail(steps, "Система вырождена!")

    modified = _copy_matrix(matrix)
    results = []
    for i in range(n):
        for j in range(n):
            modified[j][i] = float(free_terms[j])
        steps.append(f"Матрица для x{i + 1}:")
        steps.append(format_matrix(modified, free_terms))

        mod_det = determinant(modified)
        steps.append(f"Определитель: {_num(mod_det)}")
        value = mod_det / main_det
        results.append(value)
        steps.append(
            f"x{i + 1} = {_num(mod_det)} / {_num(main_det)} = {_num(value)}"
        )

        for j in range(n):
            modified[j][i] = float(matrix[j][i])
    return Solution(results, steps)


def solve_inverse_matrix(matrix: Matrix, free_terms: Vector) -> Solution:
    """Solve by multiplying the inverse matrix with the free terms."""
    steps: list[str] = []
    _check_square_system(matrix, free_terms, steps)
    steps.append("Метод обратной матрицы:")

    det = determinant(matrix)
    steps.append(f"Определитель матрицы: {_num(det)}")
    if abs(det) < EPSILON:
        raise _fail(steps, "Матрица вырождена, обратной матрицы не существует!")

    try:
        inverse = inverse_matrix(matrix)
    except ValueError:
        raise _fail(steps, "Ошибка при вычислении обратной матрицы") from None

    steps.append("Обратная матрица:")
    steps.extend("".join(_num(v) + "\t" for v in row) for row in inverse)

    results = []
    for i, row in enumerate(inverse):
        value = 0.0
        for coefficient, term in zip(row, free_terms):
            value += coefficient * term
        results.append(value)
        steps.append(f"x{i + 1} = {_num(value)}")
    return Solution(results, steps)


def solve_least_squares(matrix: Matrix, free_terms: Vector) -> Solution:
    """Least-squares solution via the normal equations A^T A x = A^T b."""
    steps: list[str] = []
    m = len(matrix)
    if m == 0:
        raise _fail(steps, "The system has no equations", record=False)
    n = len(matrix[0])
    if n == 0:
        raise _fail(steps, "The system has no variables", record=False)
    if len(free_terms) != m:
        raise _fail(steps, "Matrix and free terms must be of equal length", record=False)

    steps.append("Метод наименьших квадратов:")

    a_t = transpose_matrix(matrix)
    if len(a_t) != n:
        raise _fail(steps, "Ошибка транспонирования матрицы")
    steps.append("Транспонированная матрица A^T:")
    steps.extend(format_vector(row) for row in a_t)

    try:
        ata = multiply_matrices(a_t, matrix)
    except ValueError:
        ata = []
    if len(ata) != n or len(ata[0]) != n:
        raise _fail(steps, "Ошибка при вычислении A^T * A")
    steps.append("Матрица A^T * A:")
    steps.extend(format_vector(row) for row in ata)

    atb = [0.0] * n
    for i, row in enumerate(a_t):
        if len(row) != m:
            continue
        for coefficient, term in zip(row, free_terms):
            atb[i] += coefficient * term
    steps.append("Вектор A^T * b:")
    steps.append(format_vector(atb))

    return Solution(_gauss(ata, atb, steps), steps)


_SOLVERS = {
    Method.GAUSS: solve_gauss,
    Method.JORDAN_GAUSS: solve_jordan_gauss,
    Method.CRAMER: solve_cramer,
    Method.INVERSE_MATRIX: solve_inverse_matrix,
    Method.LEAST_SQUARES: solve_least_squares,
}


def solve_system(method: Method | int, matrix: Matrix, free_terms: Vector) -> Solution:
    """Solve the system with the chosen method; raises SolveError on failure."""
    if not matrix or not free_terms or len(matrix) != len(free_terms):
        message = "Invalid input: matrix or free terms are empty or sizes mismatch"
        raise SolveError(message, [message])
    try:
        chosen = Method(method)
    except ValueError:
        raise SolveError("Unknown solving method", ["Unknown solving method"]) from None
    return _SOLVERS[chosen](matrix, free_terms)