# aockit

Small building blocks for puzzle solutions that read a text input and walk
over it. The package uses only the standard library.

## Install

```
pip install .
```

## Modules

- `aockit.incache.InputCache` holds the raw bytes of an input.
  `InputCache.from_file(path)` reads a whole file and raises `OSError` if the
  read fails. You can index it, iterate it, take `len()` of it, or convert it with
  `bytes()`. `get(idx)` returns the byte value at `idx`, or `None` when the index
  is out of range.
- `aockit.lncache.LineCache` splits text (a `str`, or `bytes` decoded as UTF-8)
  on newline characters and drops empty lines. `LineCache.from_file(path)`
  loads a file. You can index it, iterate it, or take `len()` of it. `print(file)`
  writes each line followed by a newline to `file`. With no file given it
  writes to standard output.
- `aockit.mapcache.MapCache` handles a rectangular grid of characters. The
  length of the first line sets the row width. The object keeps a cursor,
  which starts on the first tile. `tile()` returns the character under the
  cursor, and `tile_id()` returns an integer that identifies that tile.
  - `step_up`, `step_down`, `step_left` and `step_right` move the cursor one
    tile. Left and right stay within the current row.
  - `walk_forward` and `walk_backward` move through the tiles in order and
    wrap onto the next or previous row.
  - The `peek_*` methods return a neighbouring tile without moving the
    cursor.
  - Any move or peek that would leave the map returns `None`, and the cursor
    stays where it is.
  - `set_start` remembers the current tile, and `reset` moves the cursor back
    to it.
- `aockit.lut.LookupTable(shift, data_size=0, hashfn=None)` is a chained hash
  table with `2 ** shift` buckets, keyed by integers taken modulo 2**64.
  - `add(key)` returns the `LutNode` for the key and creates it if it is
    missing. A new node gets a zeroed `bytearray` of `data_size` bytes.
  - `lookup(key)` returns the node, or `None` if there is none.
  - `remove(node)` takes a node out of the table.
  - `slot(key)` gives the bucket index for a key, and `bucket(i)` lists the
    nodes in bucket `i`.
  - You can take `len()` of the table and iterate over every node.
  - Keys are hashed as 8 little-endian bytes, by default with `fnv1a`
    (64-bit FNV-1a). The function is also exported.
- `aockit.stack.Stack` is a last-in, first-out stack. It provides `push`, `pop`
  (which raises `IndexError` when the stack is empty), `clear`, `len()` and
  truth testing.
- `aockit.dlist.DListNode(value)` is a node of a circular doubly linked list.
  Any node can act as the head.
  - `append(node)` inserts after this node, and `prepend(node)` inserts before
    it.
  - `remove()` unlinks the node. After that, `append`, `prepend` and `remove`
    on it raise `ValueError`.
  - `is_linked()` reports whether the node shares a list with another node.
  - Iterating a node yields the values of the other nodes in the list.
- `aockit.die.die(status, fmt, *args)` writes `fmt % args` to standard error
  and raises `SystemExit(status)`.

## Example

```python
from aockit.mapcache import MapCache

grid = MapCache("ab\ncd\n")
grid.tile()        # 'a'
grid.step_right()  # 'b'
grid.step_down()   # 'd'
grid.peek_left()   # 'c'
grid.step_right()  # None, off the edge; cursor stays on 'd'
```

## What it does not do

This is a library only. It installs no command and does not solve any puzzle
by itself.

## Tests

```
pip install .[test]
pytest
```