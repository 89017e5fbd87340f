# heaplayers

Small, composable pieces for experimenting with memory-allocator designs
in Python. Nothing here touches real memory: addresses are plain integers
handed out by `heaplayers.heapsim.SimulatedHeap`, so layouts, size classes
and region behaviour can be studied and tested deterministically.

## Installation

```
pip install .
```

For running the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `heaplayers.mathutil` | `align`, `ilog2` (ceiling of log base two), `gcd`, `lcm`, `is_power_of_two`, `check_power_of_two`, `modulo`, `hash_key` |
| `heaplayers.bins` | Size-class tables `PowerOfTwoBins`, `Bins4K`, `Bins64K` and `BinsPow2`; each maps a request size to a class with `size_class` and a class to its size with `class_size` |
| `heaplayers.lists` | Intrusive lists: `DLList` of `DLEntry`, `SLList` of `SLEntry`, and `FreeSLList` |
| `heaplayers.dynarray` | `DynamicArray`, which grows to fit any index written and shrinks on `trim` |
| `heaplayers.timer` | `Timer` with `start`, `stop`, `elapsed`, use as a context manager, and `Timer.current_time()` |
| `heaplayers.tprintf` | `itoa`, `ftoa`, `format_template` and `tprintf`, a printf where `@` stands for the next argument |
| `heaplayers.threads` | `num_processors`, `thread_id`, the `Fred` thread wrapper, `distribution_check` and the `main` command |
| `heaplayers.singleton` | `get_instance` and `ExactlyOne`, for one shared instance per class |
| `heaplayers.heapsim` | `SimulatedHeap` with `malloc`, `free`, `get_size`, `read`, `write`, `live_count`; bad addresses raise `InvalidAddressError` |
| `heaplayers.regionsimulator` | `MallocStack` and `RegionSimulator`, a region / obstack emulation over a heap |
| `heaplayers.reaplayers` | Heap layers for reaps: `AddHeader`, `ClearOptimizeHeap`, `RegionHeap` |

## Examples

Rounding and logarithms:

```python
from heaplayers.mathutil import align, ilog2, lcm, is_power_of_two

align(13, 8)          # 16
ilog2(5)              # 3, the ceiling of log2(5)
lcm(4, 6)             # 12
is_power_of_two(64)   # True
```

Size classes:

```python
from heaplayers.bins import Bins4K, BinsPow2

bins = BinsPow2(4096)     # classes of 32, 64, 128, ... bytes
bins.size_class(100)      # 2
bins.class_size(2)        # 128

Bins4K().size_class(130)  # 16, the class of 152-byte objects
```

Template printing, where `@` takes the next argument and, while arguments
remain, `@@` gives a literal `@`:

```python
from heaplayers.tprintf import format_template, ftoa, tprintf

format_template("@ of @ done", 3, 10)     # "3 of 10 done"
format_template("user@@host is @", 1)     # "user@host is 1"
ftoa(3.25)                                # "3.2500"
tprintf("@ items\n", 4)                   # writes "4 items", returns 8
```

Once the arguments are used up the rest of the template is copied as it
stands, so `@@` with no arguments left stays `@@`.

Timing a piece of work:

```python
from heaplayers.timer import Timer

with Timer() as timer:
    sum(range(1_000_000))
print(f"took {timer.elapsed():.4f} s")
```

A growable array:

```python
from heaplayers.dynarray import DynamicArray

array = DynamicArray()
array[10] = "x"       # grows to hold index 10
array.capacity()      # 21
```

A region over the simulated heap; leaving the `with` block frees every
object in it:

```python
from heaplayers.heapsim import SimulatedHeap
from heaplayers.reaplayers import RegionHeap

heap = SimulatedHeap()
with RegionHeap(heap) as region:
    address = region.malloc(100)
    region.find(address + 50)   # True
heap.live_count()               # 0
```

An obstack-style region with a child region:

```python
from heaplayers.regionsimulator import RegionSimulator

region = RegionSimulator()
block = region.malloc(32)
region.grow(5)                  # extend the object being built
built = region.object_base()
region.finalize()               # record it and start a new object
child = RegionSimulator(parent=region)
region.free_all()               # frees everything and destroys the child
```

## Composing layers

The layers in `heaplayers.reaplayers` wrap a super heap passed to them:

- `RegionHeap` needs `malloc` and `free`; `SimulatedHeap` serves.
- `AddHeader` needs `malloc`, `write` and `clear`.
- `ClearOptimizeHeap` takes two heaps: fresh memory comes from the first,
  recycled memory from the second once something has been freed.

## Command line

`heaplayers-threads` starts a batch of threads, records the id each one
sees, and prints the fullest bucket count; it should be close to 1.

```
heaplayers-threads --threads 256
```

## What it does not do

- It does not allocate or manage real memory, and cannot stand in for a
  process's allocator.
- It has no coalescing or free-list heap of its own: a complete reap
  needs the recycling heap for `ClearOptimizeHeap` to be supplied by the
  caller.