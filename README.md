# puzzlekit

Compact implementations of well-known algorithm puzzles. Each one is a plain
function that takes ordinary Python values and returns a plain result.

## Installation

```
pip install puzzlekit
```

To run the test suite, install the test extra and run pytest:

```
pip install "puzzlekit[test]"
pytest
```

## What is inside

### `puzzlekit.integers`

- `reverse_integer(x)` reverses the decimal digits of `x` and keeps its sign.
  It returns `0` when the result does not fit in a signed 32-bit integer.
- `is_palindrome(x)` checks whether an integer reads the same in both directions
  in base 10. Negative numbers are never palindromes.

### `puzzlekit.strings`

- `make_fancy_string(s)` removes characters so that no three consecutive
  characters are equal.
- `is_valid_word(word)` returns `True` for a word of at least three characters.
  The word may contain only ASCII letters and digits, and it must hold at least
  one vowel and at least one consonant.
- `first_unique_char(s)` returns the index of the first character that occurs
  only once, or `-1` when there is none.

### `puzzlekit.arrays`

- `two_sum(nums, target)` returns a tuple `(i, j)` with `i < j` and
  `nums[i] + nums[j] == target`, or `None` when no such pair exists. When several
  pairs qualify, it returns the first one completed in a left-to-right scan.
- `single_number(nums)` returns the value that appears an odd number of times
  when every other value appears in pairs. It computes the XOR of all values.
- `missing_number(nums)` returns the one value from `0..len(nums)` that is
  absent from `nums`.
- `minimum_difference(nums)` takes `3k` numbers and removes `k` of them so that
  the sum of the first half minus the sum of the second half is as small as
  possible, then returns that difference. It raises `ValueError` unless the
  length is a positive multiple of three.
- `maximum_valid_subsequence_length(nums, k)` returns the length of the longest
  subsequence in which every adjacent pair sum has the same remainder modulo
  `k`. It raises `ValueError` when `k` is not positive.
- `max_unique_sum(nums)` returns the largest sum of distinct values that can
  remain after deleting elements. That is the sum of the distinct positive
  values, or the largest value when none is positive. It raises `ValueError`
  for an empty list.
- `sort_array(nums)` returns a new list holding the values in ascending order,
  sorted by merge sort.

### `puzzlekit.folders`

- `remove_subfolders(folders)` drops every folder that lies inside another
  folder in the list and keeps the input order. Every folder must start with
  `/`; otherwise it raises `ValueError`.
- `delete_duplicate_folders(paths)` takes folder paths as lists of names. It
  deletes every folder whose non-empty subfolder structure occurs more than
  once, together with its contents. It returns the remaining paths in
  depth-first order, with siblings sorted by name.

### `puzzlekit.trees`

- `minimum_score(nums, edges)` cuts two edges of a tree whose node values are
  given in `nums`. It returns the smallest possible difference between the
  largest and the smallest XOR of the three components that result. It raises
  `ValueError` in three cases: the tree has fewer than three nodes, the number
  of edges is not `len(nums) - 1`, or the edges do not connect all nodes.

## Example

```python
from puzzlekit.arrays import two_sum, sort_array
from puzzlekit.strings import first_unique_char
from puzzlekit.folders import remove_subfolders

two_sum([2, 7, 11, 15], 9)            # (0, 1)
sort_array([5, 2, 3, 1])              # [1, 2, 3, 5]
first_unique_char("leetcode")         # 0
remove_subfolders(["/a", "/a/b", "/c/d", "/c/d/e", "/c/f"])
# ['/a', '/c/d', '/c/f']
```

## What it does not do

puzzlekit is a library of functions only. It has no command-line program, and it
does not read input files or store any results.