# katas

A collection of small programming exercises. Each module covers one theme
and exposes plain functions that return values rather than printing them.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Two exercises can be run from the command line:

```
katas-matrix     # prints two fixed 3x3 matrices and their sum, difference and product
katas-fractal    # draws the Mandelbrot set as 80x24 ASCII characters ('*' inside, ' ' outside)
```

## Modules

| Module              | What it holds                                                        |
|---------------------|----------------------------------------------------------------------|
| `katas.matrix`      | `add_matrix`, `sub_matrix`, `multiply_matrix`, `format_matrix`, `main` |
| `katas.parity`      | `describe_parity`, `parity_report`, `odd`, `sum_by_parity`           |
| `katas.conversions` | `cost_per_item`, `convert_distance`, `fahrenheit_to_celsius`, `rectangle`, `circle`, `town_census`, `swap`; result types `DistanceConversion`, `Shape`, `TownCensus` |
| `katas.dates`       | `is_leap_year`, `first_weekday`, `day_number`, `days_between`        |
| `katas.series`      | `factorial`, `factorial_series`, `alternating_factorial_series`      |
| `katas.fractal`     | `mandelbrot`, `render`, `main`                                       |
| `katas.recursion`   | `add`, `count_digits`, `factorial`, `fibonacci`, `sum_values`, `sum_natural` |
| `katas.search`      | `selection_sort`, `bubble_sort`, `least_value`, `binary_search`, `linear_search`, `reverse_pairs` |
| `katas.doorlock`    | `DoorLock` with `set_password`, `unlock`, `attempts_left`, `locked_out`; `AccessDenied` |
| `katas.digits`      | `reverse_digits`, `sum_of_squares`, `square_of_sum`, `square_difference` |
| `katas.patterns`    | `descending_counts`, `zero_padded_countdown`                         |
| `katas.grains`      | `square`, `total`                                                    |
| `katas.resistor`    | `ResistorBand`, `color_to_string`, `color_value`, `list_colors`      |

Some behaviour worth knowing:

- Matrix functions accept any rectangular sequences of sequences and raise
  `ValueError` when the shapes do not fit.
- `binary_search` expects an ascending sequence and returns the index of the
  key, or `None` when it is absent.
- `reverse_digits` returns `0` when the reversed number falls outside the
  signed 32-bit range.
- `grains.square` raises `ValueError` for squares outside 1 to 64, and
  `resistor.color_value` raises `ValueError` for values with no band, while
  `color_to_string` returns `"Unknown"` for them.
- `DoorLock.unlock` returns `True` for the right password and `False` for a
  wrong one, and raises `AccessDenied` when the last allowed attempt (three by
  default) fails and on every call after that.

## Examples

```python
from katas.grains import square, total
from katas.recursion import fibonacci
from katas.dates import first_weekday, is_leap_year

square(64)          # 9223372036854775808
total()             # 18446744073709551615
fibonacci(10)       # 55
is_leap_year(1900)  # False
is_leap_year(2000)  # True
first_weekday(2024) # 'Monday'
```

```python
from katas.doorlock import AccessDenied, DoorLock

password = "password"
lock = DoorLock()
lock.set_password(password)
try:
    opened = lock.unlock(password)
except AccessDenied:
    print("locked out")
```

## What it does not do

Apart from `katas-matrix` and `katas-fractal`, the exercises have no
commands: there are no interactive prompts that read numbers, dates or
passwords from the keyboard. Call the functions from Python instead. The
door lock keeps its password in memory only; nothing is stored between runs.