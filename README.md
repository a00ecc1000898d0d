# editdist

Computes the edit distance between two texts. Only insertions and deletions
count as edits, and each one costs 1. Substitutions are not allowed, so the
distance between `a` and `b` is `len(a) + len(b) - 2 * LCS(a, b)`.

The package offers four interchangeable algorithms in `editdist.algorithms`:

| name        | function                      | approach                                        |
|-------------|-------------------------------|-------------------------------------------------|
| `recursive` | `edit_distance_recursive`     | plain recursion, exponential time               |
| `memo`      | `edit_distance_memo`          | memoized top-down search with an explicit stack |
| `dp`        | `edit_distance_dp`            | bottom-up table, O(n·m) space                   |
| `dpopt`     | `edit_distance_dp_optimized`  | bottom-up with two rows, O(m) space             |

All four take two sequences (usually strings) and return the same integer.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Library use

```python
from editdist.algorithms import ALGORITHMS, edit_distance_dp, get_algorithm

edit_distance_dp("gato", "perro")        # 7
get_algorithm("dpopt")("gato", "patito")
sorted(ALGORITHMS)                       # ['dp', 'dpopt', 'memo', 'recursive']
```

`get_algorithm(name)` raises `ValueError` for a name that is not registered.

`editdist.stats` holds the helpers used by the benchmark:

- `quartiles(data)` returns `(min, Q1, median, Q3, max)` of at least four
  values and raises `ValueError` for fewer.
- `mean_and_stdev(samples)` returns the mean and the sample standard
  deviation (divided by `n - 1`; `0.0` for a single sample).
- `validate_input(argv)` parses `<filename> <RUNS> <LOWER> <UPPER> <STEP>`
  into a `BenchmarkArgs` and raises `ValueError` when they are invalid.
- `progress_bar(done, total)` returns a 70-cell terminal progress bar string.

## Comparing two files

```
editdist -a dp -s1 first.txt -s2 second.txt
```

The options may come in any order. The command reads both files whole, as
UTF-8 text with line endings kept unchanged, and compares them character by
character. It prints their contents separated by a space, then prints the
distance on the next line. `-a` takes one of `recursive`, `memo`, `dp` or
`dpopt`. Wrong arguments, an unknown algorithm or a file that cannot be read
give an error message on stderr and exit status 1.

The same command can be run as `python -m editdist.cli`.

## Benchmarking

```
editdist-bench results.csv RUNS LOWER UPPER STEP
```

The benchmark reads `archivo1.txt` to `archivo4.txt` from the current
directory. It takes every pair of these files (six pairs) and times each of
the four algorithms `RUNS` times on each pair, printing which pair and
algorithm it is working on to stdout and drawing a progress bar on stderr.
Note that `recursive` takes exponential time, so keep these files short.

`RUNS` must be at least 4. `LOWER`, `UPPER` and `STEP` must be positive
integers and `LOWER` may not exceed `UPPER`; they are checked but do not
change what is run. Invalid arguments, or an input file that cannot be read,
give a message on stderr and exit status 1.

Results are written to the CSV file, with this header:

```
n,str1,str2,str1_len,str2_len,t_mean,t_stdev,t_Q0,t_Q1,t_Q2,t_Q3,t_Q4
```

The first column holds the algorithm name. All times are in nanoseconds;
`t_Q0` to `t_Q4` are the minimum, lower quartile, median, upper quartile and
maximum.

From Python, `editdist.benchmark.run_benchmarks(args, out, file_names,
progress)` does the same work on any list of files, writes the CSV to `out`
and returns the rows as `BenchmarkRow` objects.

## Tests

```
pip install ".[test]"
pytest
```