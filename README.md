# quadsolve

quadsolve solves quadratic equations of the form `a·x² + b·x + c = 0` with real coefficients.
Two values whose difference is below `1e-8` count as equal.

## Command line

```
quadsolve
```

The only option is `--help`. When the program starts, it asks for a mode. Type `u` or `t` alone on a line. If you type anything else, the program prints `Invalid input format` and asks again.

### User mode (`u`)

Enter `a b c` on one line, or spread the three numbers over several lines. The third number must end its line. If the input is invalid, the program discards the numbers read so far and asks again.

The program then prints two things:

- the discriminant, worked out step by step, for example `D = b^2 - 4*a*c = -3^2 - 4*1*2 = 1 > 0`
- the result: `No roots`, `One root`, `Two roots` (larger first), `Only imaginary roots`, or `Infinite number of roots`

### Tester mode (`t`)

The program reads `tests/tests.txt` relative to the current directory. It runs every case in that file. For each case it prints `OK`, or an `ERROR IN TEST` report that shows both the computed answer and the expected one.

If input ends before a mode or the coefficients have been read, the program raises `EOFError`.

## Cases file format

Each case is eight numbers, usually one case per line:

```
a b c x1 x2 expected_x1 expected_x2 expected_root_count
```

- **`x1` and `x2`** are starting values. The solver replaces them with the roots it finds. A root the solver does not set keeps its starting value. The usual choice is `nan`.
- **Expected roots.** Use `nan` for an expected root that does not exist.
- **End of reading.** Reading stops at the first group that does not make up eight numbers. It also stops once the number of cases equals the number of lines.

The root count uses these codes, the values of `quadsolve.solver.RootCount`:

| Code | `RootCount` | Meaning |
|------|-------------|---------|
| -1 | `INFINITE` | infinitely many roots |
| 0 | `NONE` | no roots |
| 1 | `ONE` | one root |
| 2 | `TWO` | two roots |
| 3 | `IMAGINARY` | only imaginary roots |

## Library

```python
from quadsolve.solver import solve, RootCount

sol = solve(1, -3, 2)
assert sol.count is RootCount.TWO
assert (sol.x1, sol.x2) == (2.0, 1.0)   # larger root first
assert sol.roots == (2.0, 1.0)
```

### `quadsolve.solver`

- `solve(a, b, c)` returns a `Solution` with `count`, `x1` and `x2`. A root that does not exist is `None`. The `roots` property gives the roots that were found.
- `discriminant(a, b, c)` returns `b² - 4ac`.
- `is_zero(x)` is true when `abs(x) < 1e-8`.

### `quadsolve.checker`

- `TestCase` holds the eight fields of one line.
- `parse_cases(text)` reads cases from a string.
- `load_cases(path)` reads cases from a file.
- `run_case(case)` solves one case and returns the solution and a `Verdict` (`OK` or `WARNING`).
- `compare(solution, case)` compares a solution with a case's expected answer and returns the `Verdict`.
- `format_warning(solution, case)` returns the text of an error report.
- `run_tests(path, out)` runs every case in a file, writes a report for each to `out` (standard output by default), and returns the list of verdicts.

### `quadsolve.console`

- `choose_mode(stdin, stdout)`, `read_coefficients(stdin, stdout)`, `describe_discriminant(a, b, c)` and `format_solution(solution)` are the pieces of the interactive program.
- `main(argv)` is the program itself.

## What it does not do

- It does not compute complex roots. When the discriminant is negative, the program only reports `Only imaginary roots`.
- It ships no cases file. For tester mode you must provide `tests/tests.txt` yourself. If the file is missing, `FileNotFoundError` is raised.