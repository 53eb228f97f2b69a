# dsakit

A collection of classic data-structure and algorithm routines in plain Python. Each one is a small function that takes ordinary lists, strings or linked-list nodes. There are no dependencies beyond the standard library.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.search` | `binary_search`, `first_occurrence`, `last_occurrence`, `first_and_last_position`, `floor_and_ceil`, `floor_sqrt`, `peak_index_in_mountain`, `search_insert`, `search_range`, `search_rotated`, `search_rotated_with_duplicates` |
| `dsakit.minimize` | Binary search over the answer: `find_pages`, `ship_within_days`, `min_eating_speed`, `min_days` |
| `dsakit.sorting` | `merge_sort`, `quick_sort`, `count_inversions`, `reverse_pairs`, `sort_colors`, `merge_intervals` |
| `dsakit.sums` | `pair_sum`, `three_sum`, `three_sum_hashing`, `four_sum`, `sum_of_three` |
| `dsakit.subarrays` | `longest_subarray_with_sum_k`, `longest_subarray_with_sum_k_signed`, `max_subarray_sum`, `total_fruit`, `max_profit`, `pivot_index`, `pivot_index_prefix` |
| `dsakit.arrays` | `sorted_union`, `majority_elements`, `longest_consecutive`, `pascals_triangle`, `rearrange_by_sign`, `product_except_self`, `rotate`, `single_number` |
| `dsakit.strings` | `is_anagram`, `is_isomorphic`, `longest_common_prefix`, `character_replacement`, `largest_odd_number`, `remove_outer_parentheses`, `reverse_words`, `rotate_string`, `number_of_substrings` |
| `dsakit.singly` | `ListNode` with `from_values` / `to_values`, plus `has_cycle`, `detect_cycle`, `loop_length`, `middle_node`, `delete_middle`, `remove_nth_from_end`, `delete_node`, `odd_even_list`, `is_palindrome`, `reverse_list` |
| `dsakit.doubly` | `DNode` with `from_values` / `to_values`, plus `delete_last_node`, `reverse_dll`, `add_node` |
| `dsakit.linked_list` | `LinkedList`, a singly linked list addressed by zero-based position, which supports `len()`, iteration and `str()` |

## Examples

```python
from dsakit.search import first_and_last_position
from dsakit.sorting import merge_intervals
from dsakit.singly import from_values, to_values, reverse_list
from dsakit.linked_list import LinkedList

first_and_last_position([1, 2, 2, 2, 3, 4, 4], 4)   # (5, 6)
merge_intervals([[1, 4], [2, 3]])                   # [[1, 4]]

head = from_values([1, 2, 3])
to_values(reverse_list(head))                       # [3, 2, 1]

items = LinkedList()
for value in (10, 20, 30):
    items.insert_at_end(value)
print(items)                                        # 10 -> 20 -> 30 -> null
len(items)                                          # 3
```

## Behaviour worth knowing

- `sort_colors` and `rotate` change the list they are given and return `None`. The other array, string, search and sum functions leave their input alone and return new values.
- The functions in `dsakit.singly` and `dsakit.doubly` relink the nodes they are given and return the (possibly new) head. `is_palindrome` restores the list before returning. `delete_node` rewrites the given node in place and raises `ValueError` for a tail node.
- Nodes (`ListNode`, `DNode`) compare by identity, so `detect_cycle` and `middle_node` return the node object itself.
- Some "not found" results are plain values rather than exceptions: `-1` from `binary_search`, `search_rotated`, `find_pages` (more students than books), `min_days` (too few flowers) and `single_number`; `(-1, -1)` or `[-1, -1]` from the range searches; `[]` from `sum_of_three`. `min_eating_speed` returns one more than the largest pile when no speed up to it is enough.
- Invalid arguments raise `ValueError` or `IndexError`, for example a negative `floor_sqrt` argument, an out-of-range position on `LinkedList`, or `remove_nth_from_end` with `n` outside `1..len`.
- `max_subarray_sum` counts the empty run, so its result is never below 0.

## What it does not do

`dsakit` is a library only: it has no command-line tool and prints nothing. Each routine works on in-memory values; nothing is read from or written to files.