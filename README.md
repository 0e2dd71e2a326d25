# kelib

A set of small, dependency-free building blocks:

- `kelib.bits` – bit scanning (`log2`, `find_leftmost_bit32`, `find_leftmost_bit64`,
  `find_rightmost_bit`), power-of-two and alignment helpers (`is_power_of_two`, `align`,
  `is_aligned`, `aligned_base`), low-bit tagging of addresses (`set_pointer_bits`,
  `get_pointer_bits`, `clear_pointer_bits`) and overflow-checked unsigned arithmetic
  (`try_uint32_add`, `try_uint64_add`, `try_uint64_multiply`,
  `is_uint32_multiply_safe`, `is_uint64_add_safe`, ...). The `try_*` functions return
  `None` when the result would overflow and raise `ValueError` for operands that do not
  fit the width.
- `kelib.floats` – `is_nan`, `is_infinite` and `float_modulo`, a modulus that returns
  NaN for NaN operands, an infinite left side or a zero right side, and returns the left
  side unchanged for an infinite right side or a signed-zero left side.
- `kelib.seq` – list and deque helpers: `pop_back`, `pop_front`, `insert_at`,
  `remove_at`, `erase_if` (returns how many items were removed) and `move_extend`.
  Out-of-range indexes and pops from empty sequences raise `IndexError`.
- `kelib.priority_queue` – `PriorityQueue`, a binary heap with `add`, `peek`, `pop`,
  `empty` and `len()`. By default the smallest item comes out first; pass
  `is_higher_priority(a, b)` to choose another order.
- `kelib.refcounting` – `Refcounted` and `VirtualRefcounted` base classes, the
  `IRefcounted` interface, and the owning references `RefPtr`, `AlreadyRefed` and
  `adopt_ref`. A `Refcounted` object starts with a count of zero and its `destroy()`
  runs when the last reference is released.
- `kelib.strings` – C-style formatting (`sprintf`, accepting length modifiers such as
  `l`, `ll` and `z`), bounded formatting and copying (`safe_sprintf`, `safe_strcpy`,
  `safe_strcpy_n`, `safe_strcat`), `split`/`join` that round-trip, ASCII-only
  `uppercase`, `lowercase` and `str_case_cmp`, and `starts_with`/`ends_with`.
- `kelib.mutex` – `Mutex`, a non-reentrant lock that records the owning thread, works as a
  context manager and offers `assert_current_thread_owns()`.
- `kelib.timeutil` – `timespec_to_duration` (nanoseconds), `timespec_to_time_point` and
  `epoch_value_to_time_point` (UTC `datetime` values, with units from `TimeUnit`), and
  `format_time` for `struct_time`, time tuples and `datetime` values.
- `kelib.osutil` – `path_exists`, `is_file`, `is_directory`, `create_directory`,
  `format_path` (formats a path and normalises its separators for the platform) and
  `format_system_error_code` / `format_system_error` for system error messages.

## Installing

```
pip install .
```

## Examples

```python
from kelib.bits import try_uint32_add, find_leftmost_bit32

find_leftmost_bit32(0x7F)          # 6
try_uint32_add(0xFFFFFFFF, 1)      # None: the sum would overflow
```

```python
from kelib.priority_queue import PriorityQueue

pq = PriorityQueue()
for n in (16, 9, 77, 3):
    pq.add(n)
pq.pop()   # 3
```

```python
from kelib.refcounting import Refcounted, RefPtr

class Node(Refcounted):
    pass

node = Node()
with RefPtr(node):
    node.refcount   # 1
node.destroyed      # True: the last reference was released
```

```python
from kelib.strings import split, join, safe_strcpy

join(split("a,,b", ","), ","),   # "a,,b"
safe_strcpy(4, "abcdef")          # "abc"
```

## What it does not include

There are no hash table, hash map or fixed-length array containers and no custom
allocation policies; use Python's `dict` and `list` for those. The package is a library
only and installs no commands.

## Running the tests

```
pip install .[test]
pytest
```