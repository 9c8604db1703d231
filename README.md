# stringsorts

A small benchmark for string sorting algorithms. Every algorithm sorts a list of strings in place while a shared `CharCompareCounter` tallies the characters it inspects. This lets you compare algorithms by the work they do as well as by time.

The package has six algorithms, all in `stringsorts.sorts`:

- `merge_sort`: top-down merge sort using three-way whole-string comparison
- `quick_sort`: Lomuto-partition quicksort with the last element as pivot
- `radix_sort`: most-significant-digit radix sort over character codes
- `quick_radix_sort`: MSD radix sort that switches to three-way string quicksort on ranges of fewer than 74 strings
- `str_merge_sort`: merge sort driven by a strict "less than" comparison
- `str_quick_sort`: three-way (multikey) string quicksort

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running the benchmark

```
stringsorts
```

The command works in two stages.

1. **Generate data.** It creates 3000 random strings of 10 to 200 characters. It saves them as three variants: `random`, `reverse_sort` and `almost_sort`. The `almost_sort` variant is the sorted data disturbed by 30 random swaps. Each variant is written as files holding the first 100, 200, ... 3000 strings. Each file starts with a line giving its size.
2. **Benchmark.** It runs every algorithm on every file, repeating each run and averaging the time. It writes one result file per algorithm and variant, for example `results/random/merge_sort_result.txt`.

Each result line holds three values:
- the input size
- the average time in milliseconds
- the number of characters inspected in the last run

A data file that cannot be read is reported on stderr. It is then treated as empty.

Options:

- `--data-dir DIR`: where data is written and read (default `../data`, relative to the current directory)
- `--results-dir DIR`: where results are written (default `../results`)
- `--seed N`: seed for data generation, for reproducible data
- `--repetitions N`: runs averaged per measurement (default 5, must be at least 1)
- `--skip-generate`: use existing data files instead of generating new ones
- `--generate-only`: only generate data, do not run the benchmark

## Using the library

```python
from stringsorts.counter import CharCompareCounter
from stringsorts.sorts import str_quick_sort

words = ["banana", "apple", "cherry", "apricot"]
counter = CharCompareCounter()
str_quick_sort(words, counter)

print(words)          # ['apple', 'apricot', 'banana', 'cherry']
print(counter.count)  # characters inspected
```

Each sort function sorts the list in place and adds to the counter it is given. Call `counter.reset()` to start a new tally.

`CharCompareCounter` offers these methods:
- `compare(a, b)`: returns -1, 0 or 1
- `less(a, b)`: returns whether `a` sorts before `b`
- `char_at(s, d)`: returns the character code at position `d`, or -1 past the end

Each of these adds to `count`.

You can also generate data and run the benchmark from code:

```python
from pathlib import Path
from stringsorts.generator import StringGenerator
from stringsorts.tester import StringSortTester, load_data

StringGenerator(seed=42).generate_all(Path("data"))
StringSortTester(Path("data"), Path("results"), 5).run_tests()
```

`StringGenerator` offers these methods:
- `random_string`
- `random_strings`
- `reverse_sorted`
- `almost_sorted`
- `save_variants`

`save_variants` needs at least 3000 strings and returns the paths it wrote.

`StringSortTester.measure(data, sort_function)` times one sort function on one list and returns a `SortResult` with `size`, `average_ms` and `comparisons`. `run_tests` returns the paths of the result files. `load_data(path)` reads one data file.

## What it does not do

Results are written as plain text files only. The package does not plot, tabulate or otherwise summarise them.