import pytest

from linsolve.solver import (
    Method,
    Solution,
    SolveError,
    determinant,
    format_matrix,
    format_vector,
    inverse_matrix,
    multiply_matrices,
    solve_cramer,
    solve_gauss,
    solve_inverse_matrix,
    solve_jordan_gauss,
    solve_least_squares,
    solve_system,
    transpose_matrix,
)

A = [[2.0, 1.0, -1.0], [-3.0, -1.0, 2.0], [-2.0, 1.0, 2.0]]
B = [8.0, -11.0, -3.0]
SINGULAR = [[1.0, 2.0], [2.0, 4.0]]


def _residual(matrix, values, free_terms):
    return max(
        abs(sum(a * x for a, x in zip(row, values)) - b)
        for row, b in zip(matrix, free_terms)
    )


def test_format_vector_empty():
    assert format_vector([]) == "[]"


def test_format_vector_values():
    assert format_vector([1, 2.5]) == "[ 1.0000, 2.5000 ]"


def test_format_matrix_row():
    assert format_matrix([[1, 2]], [3]) == "| 1.0000\t2.0000\t| \t3.0000 |\n"


@pytest.mark.parametrize("matrix,terms", [([], []), ([[1]], []), ([[1], [2]], [1])])
def test_format_matrix_invalid(matrix, terms):
    assert format_matrix(matrix, terms) == "Invalid matrix format"


def test_format_matrix_skips_empty_rows():
    text = format_matrix([[], [1]], [0, 2])
    assert text.count("\n") == 1


@pytest.mark.parametrize(
    "solver",
    [solve_gauss, solve_jordan_gauss, solve_cramer, solve_inverse_matrix, solve_least_squares],
)
def test_solvers_satisfy_system(solver):
    solution = solver(A, B)
    assert len(solution.values) == 3
    assert _residual(A, solution.values, B) < 1e-9


def test_all_methods_agree():
    reference = solve_gauss(A, B).values
    for method in Method:
        values = solve_system(method, A, B).values
        assert values == pytest.approx(reference, abs=1e-9)


def test_gauss_known_solution():
    assert solve_gauss(A, B).values == pytest.approx([2.0, 3.0, -1.0])


def test_gauss_steps_structure():
    steps = solve_gauss(A, B).steps
    assert steps[0] == "Метод Гаусса:"
    assert steps[1] == "Начальная система:"
    assert "Обратный ход:" in steps
    assert steps[-1].startswith("x1 = ")


def test_gauss_records_row_swap():
    steps = solve_gauss([[0.0, 1.0], [1.0, 0.0]], [1.0, 2.0]).steps
    assert "Перестановка строк 1 и 2:" in steps


def test_jordan_steps_end_with_results():
    steps = solve_jordan_gauss(A, B).steps
    assert steps[0] == "Метод Жордана-Гаусса:"
    assert steps[-4] == "Результат:"
    assert steps[-3].startswith("x1 = ")


@pytest.mark.parametrize("solver", [solve_gauss, solve_jordan_gauss, solve_cramer])
def test_singular_system_raises(solver):
    with pytest.raises(SolveError) as info:
        solver(SINGULAR, [1.0, 2.0])
    assert info.value.steps[-1] == "Система вырождена!"


def test_inverse_method_singular():
    with pytest.raises(SolveError) as info:
        solve_inverse_matrix(SINGULAR, [1.0, 2.0])
    assert info.value.steps[-1] == "Матрица вырождена, обратной матрицы не существует!"


def test_determinant_of_singular_is_zero():
    assert determinant(SINGULAR) == 0.0


def test_determinant_empty():
    assert determinant([]) == 0.0


def test_determinant_row_swap_negates():
    swapped = [A[1], A[0], A[2]]
    assert determinant(swapped) == pytest.approx(-determinant(A))


def test_determinant_is_multiplicative():
    other = [[1.0, 2.0, 0.0], [0.0, 1.0, 3.0], [4.0, 0.0, 1.0]]
    product = multiply_matrices(A, other)
    assert determinant(product) == pytest.approx(determinant(A) * determinant(other))


def test_determinant_does_not_modify_input():
    matrix = [row[:] for row in A]
    determinant(matrix)
    assert matrix == A


def test_inverse_times_matrix_is_identity():
    product = multiply_matrices(A, inverse_matrix(A))
    for i, row in enumerate(product):
        for j, value in enumerate(row):
            assert value == pytest.approx(1.0 if i == j else 0.0, abs=1e-12)


def test_inverse_singular_raises():
    with pytest.raises(ValueError):
        inverse_matrix(SINGULAR)


def test_inverse_empty():
    assert inverse_matrix([]) == []


def test_transpose_round_trip():
    matrix = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    transposed = transpose_matrix(matrix)
    assert len(transposed) == 3
    assert transpose_matrix(transposed) == matrix


def test_transpose_ragged_row_gives_zeros():
    assert transpose_matrix([[1.0, 2.0], [3.0]]) == [[1.0, 0.0], [2.0, 0.0]]


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply_matrices([[1.0, 2.0]], [[1.0, 2.0]])


def test_multiply_empty():
    assert multiply_matrices([], [[1.0]]) == []


def test_least_squares_overdetermined_consistent():
    matrix = [[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]]
    terms = [1.0, 2.0, 3.0]
    solution = solve_least_squares(matrix, terms)
    assert solution.values == pytest.approx([1.0, 2.0])
    assert solution.steps[0] == "Метод наименьших квадратов:"
    assert "Метод Гаусса:" in solution.steps


def test_least_squares_satisfies_normal_equations():
    matrix = [[1.0, 1.0], [1.0, 2.0], [1.0, 3.0], [1.0, 4.0]]
    terms = [6.0, 5.0, 7.0, 10.0]
    values = solve_least_squares(matrix, terms).values
    residuals = [sum(a * x for a, x in zip(row, values)) - b for row, b in zip(matrix, terms)]
    for col in range(2):
        assert sum(row[col] * r for row, r in zip(matrix, residuals)) == pytest.approx(0.0, abs=1e-9)


def test_solve_system_invalid_input():
    with pytest.raises(SolveError) as info:
        solve_system(Method.GAUSS, [[1.0], [2.0]], [1.0])
    assert info.value.steps == ["Invalid input: matrix or free terms are empty or sizes mismatch"]


def test_solve_system_unknown_method():
    with pytest.raises(SolveError) as info:
        solve_system(99, A, B)
    assert info.value.steps == ["Unknown solving method"]


def test_solve_system_accepts_int_method():
    solution = solve_system(2, A, B)
    assert isinstance(solution, Solution)
    assert solution.steps[0] == "Метод Крамера:"


def test_gauss_non_square_raises():
    with pytest.raises(SolveError):
        solve_gauss([[1.0], [2.0]], [1.0, 2.0])


def test_solver_does_not_modify_input():
    matrix = [row[:] for row in A]
    terms = B[:]
    solve_jordan_gauss(matrix, terms)
    assert matrix == A
    assert terms == B