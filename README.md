# kata

Small, self-contained algorithms on integer sequences, strings and numbers,
written as plain functions. The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `kata.arrays`

Functions on lists of integers. Those marked *in place* change the list they
are given and return `None`.

- `two_sum(nums, target)`: every pair of indices `i < j` with `nums[i] + nums[j] == target`, flattened into one list in scan order (`[i, j]` for a single match, `[]` for none)
- `single_number(nums)`: the XOR of all values, i.e. the value that occurs once when every other value occurs twice
- `find_lucky(arr)`: the largest value whose count equals the value, or `-1`
- `majority_element(nums)`: the value that occurs more than `len(nums) // 2` times, or `-1`
- `rotate(nums, k)`: rotates the list `k` steps to the right, in place
- `max_subsequence(nums, k)`: `k` values with the largest sum, kept in their original order
- `find_k_distant_indices(nums, key, k)`: ascending indices within `k` of an occurrence of `key`
- `partition_array(nums, k)`: the fewest groups whose maximum minus minimum is at most `k`
- `remove_duplicates(nums)`: moves the distinct values of a sorted list to its front, in place, and returns how many there are
- `missing_number(nums)`: the number of `0..len(nums)` that is absent
- `move_zeroes(nums)`: moves the zeroes to the end, keeping the order of the rest, in place
- `find_max_consecutive_ones(nums)`: the length of the longest run of `1`s
- `max_subarray(nums)`: the largest sum of a non-empty contiguous run; raises `ValueError` for an empty list
- `find_lhs(nums)`: the length of the longest subsequence whose maximum and minimum differ by exactly one
- `sort_colors(nums)`: sorts a list of `0`, `1` and `2` in place

### `kata.search`

Functions on sorted lists of integers.

- `search_insert(nums, target)`: the index of `target`, or where it would be inserted
- `binary_search(nums, target)`: the index of `target`, or `-1`
- `count_products_at_most(nums1, nums2, target)`: how many pairs `(a, b)` have `a * b <= target`
- `kth_smallest_product(nums1, nums2, k)`: the `k`-th smallest (1-based) product of a pair from the two lists

### `kata.strings`

- `is_repeated_subsequence(sub, text, k)`: whether `sub` repeated `k` times is a subsequence of `text` (always `False` for an empty `sub`)
- `longest_subsequence_repeated_k(s, k)`: the longest lowercase string whose `k`-fold repetition is a subsequence of `s`; ties go to the lexicographically largest, and `""` means there is none
- `divide_string(s, k, fill)`: splits `s` into pieces of length `k`, padding the last with `fill`; raises `ValueError` if `k` is not positive
- `longest_binary_subsequence(s, k)`: the length of the longest subsequence of a binary string whose value is at most `k`
- `minimum_deletions(word, k)`: the fewest deletions that make all letter frequencies differ by at most `k`
- `kth_character(k)`: the `k`-th (1-based) letter of the word that starts as `"a"` and keeps appending a copy of itself with every letter advanced by one; raises `ValueError` if `k < 1`
- `kth_character_with_operations(k, operations)`: the `k`-th letter after a series of doublings, where operation `0` appends a plain copy and operation `1` a copy advanced by one letter
- `possible_string_count(word)`: how many original strings could have produced `word` if at most one key was held too long
- `possible_string_count_at_least(word, k)`: how many originals of length at least `k` could have produced `word`, modulo 10^9 + 7
- `max_manhattan_distance(s, k)`: the largest distance from the origin reached along a walk of `N`/`S`/`E`/`W` moves when up to `k` moves may be changed

### `kata.numbers`

- `fib(n)`: the `n`-th Fibonacci number (values below 2 are returned as given)
- `create_palindrome(num, odd)`: mirrors the decimal digits of `num`; with `odd` the middle digit is shared
- `is_palindrome(num, base)`: whether `num` reads the same both ways in `base`
- `k_mirror(k, n)`: the sum of the `n` smallest numbers that are palindromes in base 10 and in base `k`
- `num_subseq(nums, target)`: counts non-empty subsequences whose minimum plus maximum is at most `target`, modulo 10^9 + 7

## Example

```python
from kata.arrays import two_sum, rotate
from kata.search import kth_smallest_product
from kata.strings import divide_string
from kata.numbers import k_mirror

two_sum([2, 7, 11, 15], 9)            # [0, 1]

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)                       # nums is now [5, 6, 7, 1, 2, 3, 4]

kth_smallest_product([2, 5], [3, 4], 2)   # 8
divide_string("abcdefghij", 3, "x")       # ['abc', 'def', 'ghi', 'jxx']
k_mirror(2, 5)                            # 25
```

## What it does not do

`kata` is a library only: it has no command-line program, and its functions
do not read input files or print results. Call them from your own code.