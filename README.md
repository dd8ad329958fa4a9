# dsakit

Small, dependency-free implementations of the exercises met when learning
data structures and algorithms: array manipulation, frequency counting,
sorting, binary search, elementary number theory, string palindromes,
printed star/number/letter patterns and a greedy scheduler.

Every function takes ordinary lists, strings and integers and returns new
Python values; inputs are never modified.

## Installation

```
pip install .
```

With the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `alternate_signs`, `check_subarray`, `check_subset`, `left_rotate`, `right_rotate`, `left_rotate_by`, `average`, `second_largest`, `remove_sorted_duplicates`, `remove_duplicates_set`, `unique_in_order`, `union_set`, `union_sorted`, `longest_subarray_with_sum`, `longest_subarray_with_sum_prefix`, `next_permutation`, `rotate_clockwise`, `rotate_anticlockwise`, `format_matrix` |
| `dsakit.counting` | `count_values`, `count_characters`, `frequency_pairs` |
| `dsakit.sorting` | `merge_sort`, `quick_sort`, `selection_sort`, `bubble_sort`, `insertion_sort` |
| `dsakit.search` | `lower_bound`, `upper_bound`, `isqrt_linear`, `isqrt_binary` |
| `dsakit.numtheory` | `digits`, `count_digits`, `reverse_number`, `is_palindrome_number`, `is_armstrong`, `divisors`, `is_prime`, `prime_sum`, `gcd_brute`, `gcd`, `ncr`, `factorial`, `sum_of_cubes` |
| `dsakit.textutil` | `is_palindrome`, `clean_string`, `is_clean_palindrome` |
| `dsakit.patterns` | twenty pattern functions such as `square`, `pyramid`, `diamond`, `floyd_triangle`, `letter_pyramid` and `hollow_square`, each returning the pattern as a string of lines |
| `dsakit.scheduling` | `max_non_overlapping` |

A few behaviours worth knowing:

- `alternate_signs` interleaves non-negative and negative values; the larger
  group leads (negatives lead on a tie) and leftovers go at the end.
- `check_subarray` compares `first` with the start of `second`, element by
  element; `check_subset` only asks that every value of `first` occurs in
  `second`. Both are false when `first` is longer.
- `second_largest` returns `-1` when no value qualifies and raises
  `ValueError` on an empty input; `average` also raises on an empty input.
- `next_permutation` wraps round to the smallest permutation after the last.
- `isqrt_linear` and `isqrt_binary` give the floor square root of a positive
  integer and raise `ValueError` otherwise.
- `digits`, `count_digits` and `reverse_number` treat a value that is not
  positive as having no digits.
- `ncr` returns `0` when `r > n`; `is_armstrong`, `divisors`, `gcd_brute`,
  `ncr` and `factorial` raise `ValueError` on arguments out of range.
- `clean_string` keeps ASCII letters and digits only, lower-cased.
- `max_non_overlapping` picks processes by earliest end; a process may start
  at the moment the previous one ends.

## Examples

```python
from dsakit.search import lower_bound
from dsakit.numtheory import gcd
from dsakit.textutil import is_clean_palindrome
from dsakit.scheduling import max_non_overlapping

lower_bound([1, 2, 3, 3, 5, 8, 8, 10, 11], 3)    # 2
gcd(12, 18)                                       # 6
is_clean_palindrome("A man, a plan, a canal: Panama")  # True
max_non_overlapping([(1, 2), (3, 4), (6, 7), (5, 8), (4, 5)])  # 4
```

```python
from dsakit.sorting import merge_sort
from dsakit.arrays import rotate_clockwise, format_matrix
from dsakit.patterns import pyramid

merge_sort([2, 1, 4, 3, 7, 5, 8, 6, 0, 5])   # [0, 1, 2, 3, 4, 5, 5, 6, 7, 8]
print(format_matrix(rotate_clockwise([[1, 2], [3, 4]])), end="")
print(pyramid(3), end="")
```

## Command-line tools

### `dsakit-count [numbers|chars|freq]`

Reads whitespace-separated input from standard input and prints one answer
per line. The default mode is `numbers`.

- `numbers`: a count N, N integers, a count Q, then Q integers; prints how
  often each queried integer occurs.
- `chars`: a word, a count Q, then Q characters; prints how often each
  character occurs in the word.
- `freq`: a count N and N integers; prints `value -> count` lines in order of
  first appearance.

```
echo "5 1 2 2 3 2  3 2 4 1" | dsakit-count
```

### `dsakit-num <command> ...`

Evaluates one integer calculation:

- `dsakit-num sum A B` prints `The sum of A & B is: ...`
- `dsakit-num gcd A B` prints `The GCD is ...`
- `dsakit-num ncr N R` prints `The ans is : ...`
- `dsakit-num prime N` says whether N is prime and prints the sum of primes up to N
- `dsakit-num digits N` prints the number of digits of N

### `dsakit-pattern [--pattern NAME] [SIZE ...]`

Prints a pattern, followed by a blank line, for each size. Sizes come from
the command line, or, when none are given, from standard input as a number
of cases followed by that many sizes. `--pattern` takes the name of any
pattern function in `dsakit.patterns` and defaults to `hollow_square`.

```
dsakit-pattern --pattern diamond 3
echo "2 3 4" | dsakit-pattern
```