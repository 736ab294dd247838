"""Command-line front end: read an augmented matrix, solve it, print an HTML report."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from linsolve.solver import Method, Solution, SolveError, solve_system

METHOD_LABELS = {
    Method.GAUSS: "Метод Гаусса",
    Method.JORDAN_GAUSS: "Метод Жордана-Гаусса",
    Method.CRAMER: "Метод Крамера",
    Method.INVERSE_MATRIX: "Метод обратной матрицы",
    Method.LEAST_SQUARES: "Метод наименьших квадратов",
}

_METHOD_NAMES = {m.name.lower().replace("_", "-"): m for m in Method}

INVALID_INPUT_MESSAGE = "Недопустимые входные данные"


class InvalidInputError(ValueError):
    """Raised when the table of coefficients cannot be read as numbers."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(message)


def column_headers(cols: int) -> list[str]:
    """Header labels for a table with `cols` unknowns plus the free-term column."""
    return [f"x{i + 1}" for i in range(cols)] + ["="]


def blank_table(rows: int, cols: int) -> list[list[str]]:
    """A table of `rows` equations in `cols` unknowns, every cell set to "0"."""
    return [["0"] * (cols + 1) for _ in range(rows)]


def _parse_cell(text: Optional[str]) -> float:
    if text is None or "_" in text:
        raise InvalidInputError()
    try:
        return float(text.strip())
    except ValueError:
        raise InvalidInputError() from None


def parse_table(cells: Sequence[Sequence[Optional[str]]]) -> tuple[list[list[float]], list[float]]:
    """Split a table of text cells into a coefficient matrix and free terms.

    The last column holds the free terms. Missing or non-numeric cells,
    or a table without rows or unknowns, raise InvalidInputError.
    """
    if not cells:
        raise InvalidInputError()
    cols = len(cells[0]) - 1
    if cols <= 0:
        raise InvalidInputError()

    matrix: list[list[float]] = []
    free_terms: list[float] = []
    for row in cells:
        if len(row) != cols + 1:
            raise InvalidInputError()
        *coefficients, free = row
        matrix.append([_parse_cell(c) for c in coefficients])
        free_terms.append(_parse_cell(free))
    return matrix, free_terms


def _steps_html(steps: Sequence[str]) -> str:
    if not steps:
        return ""
    return "<h2>Ход решения:</h2><pre>" + "\n".join(steps) + "</pre>"


def render_solution_html(solution: Solution) -> str:
    """HTML report listing the unknowns and the steps of the solution."""
    rows = "".join(
        f"<tr><td>x<sub>{i}</sub> = {value:.4f}</td></tr>"
        for i, value in enumerate(solution.values, start=1)
    )
    return "<h2>Решение:</h2><table>" + rows + "</table>" + _steps_html(solution.steps)


def render_failure_html(steps: Sequence[str]) -> str:
    """HTML report for a system that has no solution, with any steps recorded."""
    return "<b>Решение не найдено!</b>" + _steps_html(steps)


def solve_table(method: Method | int, cells: Sequence[Sequence[Optional[str]]]) -> str:
    """Parse the table, solve it with `method` and return the HTML report."""
    matrix, free_terms = parse_table(cells)
    try:
        solution = solve_system(method, matrix, free_terms)
    except SolveError as error:
        return render_failure_html(error.steps)
    return render_solution_html(solution)


def _read_cells(text: str) -> list[list[str]]:
    return [line.split() for line in text.splitlines() if line.strip()]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read an augmented matrix (one equation per line) and print the report."""
    parser = argparse.ArgumentParser(
        prog="linsolve",
        description="Solve a system of linear equations. Each input line is one "
        "equation: the coefficients followed by the free term.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="file with the augmented matrix, '-' for standard input",
    )
    parser.add_argument(
        "-m",
        "--method",
        choices=sorted(_METHOD_NAMES),
        default="gauss",
        help="solving method (default: gauss)",
    )
    parser.add_argument(
        "--blank",
        nargs=2,
        type=int,
        metavar=("ROWS", "COLS"),
        help="print a zero-filled table of the given size and exit",
    )
    args = parser.parse_args(argv)

    if args.blank is not None:
        rows, cols = args.blank
        print("\t".join(column_headers(cols)))
        for row in blank_table(rows, cols):
            print("\t".join(row))
        return 0

    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    method = _METHOD_NAMES[args.method]
    try:
        matrix, free_terms = parse_table(_read_cells(text))
    except InvalidInputError as error:
        print(f"Ошибка: {error}", file=sys.stderr)
        return 1

    try:
        solution = solve_system(method, matrix, free_terms)
    except SolveError as error:
        print(render_failure_html(error.steps))
        return 2
    print(render_solution_html(solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())