# linsolve

Solve systems of linear equations and see how the answer was reached.
Each solver records its working as a list of text steps: row swaps,
normalisations, eliminations, determinants, inverse matrices and the final
values of the unknowns. The step texts are in Russian.

Five methods are available in `linsolve.solver.Method`:

| `Method`         | Approach                                         |
|------------------|--------------------------------------------------|
| `GAUSS`          | Gaussian elimination with partial pivoting       |
| `JORDAN_GAUSS`   | Gauss-Jordan elimination                         |
| `CRAMER`         | Cramer's rule                                    |
| `INVERSE_MATRIX` | Multiplying by the inverse matrix                |
| `LEAST_SQUARES`  | Normal equations `AᵀA x = Aᵀb`, then Gauss       |

Only least squares accepts non-square (over-determined) systems. The other
methods need every row of an *n*-equation system to have at least *n*
coefficients, and they solve for *n* unknowns. A pivot or determinant whose
absolute value is below `1e-10` makes the system count as singular.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from linsolve.solver import Method, SolveError, solve_system

matrix = [
    [2.0, 1.0, -1.0],
    [-3.0, -1.0, 2.0],
    [-2.0, 1.0, 2.0],
]
free_terms = [8.0, -11.0, -3.0]

solution = solve_system(Method.GAUSS, matrix, free_terms)
print(solution.values)            # approximately [2.0, 3.0, -1.0]
print("\n".join(solution.steps))  # the full working
```

`solve_system` returns a `Solution` with `values` and `steps`. If the system
cannot be solved, it raises `SolveError`. This happens when the input is empty
or the sizes do not match, when the method is unknown, or when the system is
singular. The error's `steps` attribute holds the working up to the point of
failure:

```python
try:
    solve_system(Method.CRAMER, [[1.0, 2.0], [2.0, 4.0]], [3.0, 6.0])
except SolveError as err:
    print("\n".join(err.steps))
```

Each solver can also be called on its own: `solve_gauss`,
`solve_jordan_gauss`, `solve_cramer`, `solve_inverse_matrix` and
`solve_least_squares`. The helpers they are built from are available too:

- `determinant(matrix)` returns `0.0` for an empty or singular matrix.
- `inverse_matrix(matrix)` returns `[]` for an empty matrix and raises
  `ValueError` if the matrix is singular.
- `transpose_matrix(matrix)`.
- `multiply_matrices(a, b)` returns `[]` if either factor is empty and raises
  `ValueError` if the inner dimensions differ.
- `format_matrix(matrix, free_terms)` and `format_vector(vec)` render values
  with four decimal places.

## Working from a table of text cells

`linsolve.app` treats a system as a table of text cells. Each row is one
equation, and its last cell holds the free term:

```python
from linsolve.app import blank_table, column_headers, parse_table, solve_table
from linsolve.solver import Method

column_headers(2)      # ['x1', 'x2', '=']
blank_table(2, 2)      # [['0', '0', '0'], ['0', '0', '0']]

matrix, free_terms = parse_table([["1", "1", "3"], ["1", "-1", "1"]])
html = solve_table(Method.JORDAN_GAUSS, [["1", "1", "3"], ["1", "-1", "1"]])
```

`parse_table` raises `InvalidInputError` in these cases:

- the table is empty;
- it has no coefficient columns;
- its rows differ in length;
- a cell is missing or is not a number.

`solve_table` returns an HTML fragment, as do `render_solution_html(solution)`
and `render_failure_html(steps)`. The fragment lists each unknown to four
decimal places and then the working. An unsolvable system gives a "no
solution" fragment that still includes the working.

## Command line

```
linsolve system.txt --method cramer
```

The command reads an augmented matrix from a file, or from standard input
when the file is `-` or is left out. Each non-blank line is one equation:
whitespace-separated coefficients followed by the free term. The HTML report
is printed to standard output.

Options:

- `-m`, `--method`: one of `gauss` (the default), `jordan-gauss`, `cramer`,
  `inverse-matrix` or `least-squares`.
- `--blank ROWS COLS`: print a tab-separated header and a zero-filled table of
  the given size, then exit.

Exit status:

- `0` on success.
- `1` if the input cannot be read as numbers. An error message goes to
  standard error.
- `2` if the system has no solution. The failure report is still printed.

## What it does not do

There is no graphical window or table editor. Systems are entered as text,
either through the library or as a file or standard input for the command.
Results come back as `Solution` objects or as HTML text.