# ekit

A small toolkit of building blocks for everyday Python code. It is a
library only: it has no command-line program.

## Modules

- **`ekit.sliceops`**: aggregation, lookup, mapping and reversal over
  sequences.
  - `max_of` and `min_of` raise `ValueError` on an empty input.
  - `sum_of` returns 0 on an empty input.
  - `find` returns the first match or `None`; `find_all` returns every match.
  - `index`, `last_index` and `index_all` each have a `*_func` form that
    takes a predicate. The index functions return -1 when nothing matches.
  - `filter_map` and `map_items` pass `(index, element)` to the callback.
  - `to_map` and `to_map_v` build a dict; later elements win when keys clash.
  - `filter_delete` removes matching elements in place.
  - `reverse` returns a new list; `reverse_self` reverses in place.
- **`ekit.sliceset`**: set-like operations on lists.
  - `contains`, `contains_any`, `contains_all`, `diff_set`,
    `intersect_set`, `symmetric_diff_set` and `union_set` work on hashable
    elements.
  - Each has a `*_func` form that takes an equality function, so it also
    works on values that cannot be hashed.
  - Set results hold no duplicates. The order of the plain forms' results is
    not guaranteed.
  - `None` counts as an empty sequence.
- **`ekit.sqlcolumns`**: column types with `value()` (what is written to
  the database) and `scan(src)` (load what was read back). Both can be passed
  directly as `sqlite3` query parameters.
  - `JsonColumn(val, valid)` stores a value as compact JSON. An invalid
    column is written as `None`.
  - `EncryptColumn(key, val, valid, kind)` encrypts with AES-GCM under a
    16, 24 or 32 byte key. The stored value is a random 12-byte nonce
    followed by the ciphertext. Encoding by type:
    - strings as UTF-8;
    - bytes as they are;
    - integers as 8-byte big-endian signed values;
    - floats as 8-byte big-endian doubles;
    - anything else, booleans included, as JSON.

    `kind` chooses how `scan` decodes. When `kind` is not given, it is taken
    from the type of `val`.
  - Errors derive from `ColumnError`: `InvalidColumnError`,
    `KeyLengthError` and `UnsupportedSourceError`.
- **`ekit.sqlnull`**: `new_null_string`, `new_null_int64`,
  `new_null_float64`, `new_null_bool`, `new_null_time` and `new_null_bytes`
  each return a `NullValue(value, valid)`. `valid` is false for the zero
  value: `""`, `0`, `False`, empty bytes, and for times `None` or
  0001-01-01 00:00:00.
- **`ekit.sqlscan`**: `RowsScanner` wraps a DB-API cursor, matching the
  `Rows` protocol (`description` and `fetchone`).
  - `scan()` returns the next row as a list and raises `NoMoreRowsError`
    when the rows run out.
  - `scan_all()` returns every remaining row, and iterating the scanner
    yields rows.
  - `next_result_set()` calls the cursor's `nextset()` if it has one.
  - Building a scanner from `None`, or from a cursor without column
    information, raises `InvalidArgumentError`.
  - The scanner never closes the cursor.
- **`ekit.syncpool`**:
  - `Pool(factory)` reuses returned objects.
  - `LimitPool(max_tokens, factory)` hands out at most `max_tokens` objects
    at a time. Its `get()` returns `(item, True)`, or `(None, False)` when no
    token is left.
- **`ekit.syncmap`**: `SyncMap` is a thread-safe dict.
  - Methods: `load`, `store`, `load_or_store`, `load_or_store_func`,
    `load_and_delete`, `delete` and `range`.
  - The lookups return `(value, found)`, so a stored `None` can be told
    apart from a missing key.
- **`ekit.keylock`**:
  - `RWLock` is a writer-preferring reader-writer lock.
  - `SegmentKeysLock(size)` maps each key by FNV-1a hash onto one of `size`
    `RWLock`s. Its methods are `lock`, `try_lock`, `unlock`, `rlock`,
    `try_rlock` and `runlock`.
- **`ekit.atomic`**: `AtomicValue` holds one value, with `load`, `store`,
  `swap` and `compare_and_swap`.
- **`ekit.cond`**: `Cond(lock)` is a condition variable.
  - Waiters are woken in FIFO order.
  - `wait(timeout)` raises `TimeoutError` when the timeout expires. A
    wake-up that races with the timeout is passed on to the next waiter.
  - `signal` and `broadcast` wake waiters, and the condition can be used as
    a context manager for its lock.

## Install

```
pip install .
```

## Examples

```python
from ekit.sliceset import union_set, diff_set_func
from ekit.sliceops import filter_map, max_of

sorted(union_set([1, 3, 4, 5], [1, 4, 7]))                          # [1, 3, 4, 5, 7]
diff_set_func([1, 3, 2, 2, 4], [3, 4, 5, 6], lambda a, b: a == b)   # [1, 2]
filter_map([1, -2, 3], lambda i, v: (str(v), v >= 0))                # ['1', '3']
max_of([2, 3, 1])                                                    # 3
```

```python
import secrets
from ekit.sqlcolumns import JsonColumn, EncryptColumn

col = JsonColumn(val={"Name": "Tom"}, valid=True)
col.value()                      # b'{"Name":"Tom"}'

key = secrets.token_hex(8)       # 16 characters
stored = EncryptColumn(key=key, val="hello", valid=True).value()
out = EncryptColumn(key=key, kind=str)
out.scan(stored)
out.val                          # 'hello'
```

```python
from ekit.syncpool import LimitPool
from ekit.keylock import SegmentKeysLock

pool = LimitPool(1, lambda: 123)
pool.get()      # (123, True)
pool.get()      # (None, False)

locks = SegmentKeysLock(100)
locks.lock("key1")
try:
    ...
finally:
    locks.unlock("key1")
```

## What it does not include

- There are no functions to insert into or delete from a list at a given
  index.
- There are no tree or ordered-map containers.
- There is no plugin loading and no database driver. `RowsScanner` and the
  column types work with a cursor or connection that you supply.

## Tests

```
pip install .[test]
pytest
```