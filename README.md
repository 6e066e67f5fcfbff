# algobox

Pure-Python solutions to well-known algorithm problems, grouped by technique.
The package has no third-party dependencies.

## Installation

```
pip install .
```

## Modules

### `algobox.arrays`

- `three_sum(nums)`: every distinct triple summing to zero, each ascending.
- `contains_nearby_duplicate(nums, k)`: whether two equal values are at most
  `k` positions apart.
- `divide_players(skill)`: total chemistry of equal-skill pairs, or `-1`.
- `longest_common_digit_prefix(arr1, arr2)`: longest shared decimal prefix.
- `largest_number(nums)`: the largest number formed by concatenation, as text.
- `find_min_difference(time_points)`: smallest gap in minutes between `HH:MM`
  times, counting the wrap past midnight.
- `trap(height)`: rain water held by an elevation map.
- `two_sum(nums, target)`: indices of two values adding to `target`, or
  `[-1, -1]`.
- `search_rotated(nums, target)`: index in a rotated ascending sequence, or
  `-1`.
- `top_k_frequent(nums, k)`: the `k` most frequent values; ties favour the
  larger value.

### `algobox.calendar`

- `MyCalendar.book(start, end)`: books the half-open interval `[start, end)`
  and returns `True`, or returns `False` if it overlaps a booking.

### `algobox.linked`

- `ListNode(val, next)`: a singly linked node; iterating over it yields the
  values from that node onward.
- `linked_list_from(values)` / `linked_list_values(head)`: build a list from
  values and read it back (`None` stands for the empty list).
- `merge_two_lists(l1, l2)`, `merge_k_lists(lists)`: merge ascending lists,
  reusing their nodes.
- `spiral_matrix(m, n, head)`: fill an `m` by `n` grid clockwise with the
  list's values; unfilled cells hold `-1`.

### `algobox.maths`

- `count_primes(n)`: primes strictly below `n`.
- `my_pow(x, n)`: `x` to an integer power by repeated squaring.

### `algobox.bits`

- `divide(dividend, divisor)`: quotient truncated toward zero using shifts,
  clamped to the signed 32-bit range.
- `longest_max_and_subarray(nums)`: longest run of the maximum value.
- `minimum_subarray_length(nums, k)`: shortest subarray whose OR is at least
  `k`, or `-1`.
- `single_number_ii(nums)`, `single_number_iii(nums)`: values occurring once
  among triples or pairs.
- `subsets(nums)`: all subsets, ordered by selecting bit mask.
- `xor_queries(arr, queries)`: XOR of each inclusive `[start, end]` range.

### `algobox.strings`

- `min_length(s)`: length after repeatedly removing `AB` and `CD`.
- `count_consistent_strings(allowed, words)`: words using only allowed
  characters.
- `letter_combinations(digits)`: phone keypad spellings.
- `lexical_order(n)`: `1..n` in dictionary order.
- `longest_common_prefix(words)`: prefix shared by all words.
- `shortest_palindrome(s)`: shortest palindrome made by prepending characters.
- `compressed_string(word)`: run-length encoding with runs capped at nine.
- `uncommon_from_sentences(s1, s2)`: words occurring exactly once overall.
- `minimum_steps(s)`: adjacent swaps to move all `1`s right of all `0`s.

### `algobox.stacks`

- `asteroid_collision(asteroids)`, `sum_subarray_mins(arr)` (modulo
  `10**9 + 7`), `precedence(op)`, `infix_to_postfix(expression)`,
  `largest_rectangle_area(heights)`, `next_greater_element(nums1, nums2)`,
  `next_greater_elements(nums)` (circular), `is_valid(s)` (bracket matching).

### `algobox.structures`

- `StockSpanner.next(price)`: span of consecutive days up to today with a
  price not above today's.
- `MyCircularDeque(k)`: bounded deque with `insert_front`, `insert_last`,
  `delete_front`, `delete_last` (returning `False` when full or empty),
  `get_front`, `get_rear` (returning `-1` when empty), `is_empty`, `is_full`
  and `len()`.
- `MyQueue`: FIFO queue with `push`, `pop`, `peek`, `empty`.
- `MyStack`: LIFO stack with `push`, `pop`, `top`, `empty`.
- `MinStack`: stack with `push`, `pop`, `top` and constant-time `get_min`.

## Errors

Where a result cannot be defined, functions raise rather than return a
sentinel:

- `ValueError` for empty input to `divide_players`, `largest_number`,
  `find_min_difference`, `longest_max_and_subarray` and
  `longest_common_prefix`; for negative numbers in `minimum_subarray_length`;
  for non-digit text in `letter_combinations`; for an unmatched `)` in
  `infix_to_postfix`; and for a negative `MyCircularDeque` capacity.
- `ZeroDivisionError` from `divide` with a zero divisor.
- `IndexError` from `MyQueue.pop`/`peek`, `MyStack.pop`/`top` and
  `MinStack.get_min` on an empty container. `MinStack.pop` on an empty stack
  does nothing, and `MinStack.top` returns `-1`.

## Examples

```python
from algobox.arrays import three_sum, trap
from algobox.stacks import infix_to_postfix
from algobox.structures import MinStack

three_sum([-1, 0, 1, 2, -1, -4])            # [[-1, -1, 2], [-1, 0, 1]]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
infix_to_postfix("a+b*(c^d-e)")             # "abcd^e-*+"

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()  # -3
```

```python
from algobox.linked import linked_list_from, linked_list_values, merge_k_lists

merged = merge_k_lists([linked_list_from([1, 4, 5]), linked_list_from([1, 3, 4])])
linked_list_values(merged)  # [1, 1, 3, 4, 4, 5]
```

## Scope

algobox is a library only: it has no command-line interface, and it reads
and writes no files.

## Running the tests

```
pip install ".[test]"
pytest
```