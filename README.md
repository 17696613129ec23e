# vmsim

`vmsim` simulates a word-addressed virtual memory. Address translation goes
through a tree of page tables that live in a small simulated RAM. When RAM
runs out, pages are swapped out to a simulated backing store.

## How it works

- **Configuration** (`vmsim.config.MemoryConfig`) is a frozen dataclass that
  holds the bit widths of the offset, the physical addresses and the virtual
  addresses, along with the eviction weights (`weight_even`, `weight_odd`) and
  the word width. The properties `page_size`, `ram_size`,
  `virtual_memory_size`, `num_frames`, `num_pages` and `tables_depth` are
  derived from those widths. Widths that cannot form a valid layout raise
  `ValueError`. `vmsim.config.preset(name)` returns one of the bundled layouts:

  | name      | offset bits | physical bits | virtual bits |
  |-----------|-------------|---------------|--------------|
  | `default` | 4           | 10            | 20           |
  | `small`   | 2           | 5             | 12           |
  | `tiny`    | 1           | 4             | 5            |

  If you ask for any other name, `preset` raises `ValueError`.
  `vmsim.config.PRESET_NAMES` lists the names.

- **Physical memory** (`vmsim.physical.PhysicalMemory`) is a RAM of
  fixed-size frames together with a swap area keyed by page number.
  - `read(address)` and `write(address, value)` work on single words. Stored
    values wrap to the configured signed word width.
  - `evict(frame_index, page_index)` copies a frame into swap.
    `restore(frame_index, page_index)` moves a swapped page back into a frame
    and does nothing for a page that was never swapped out.
  - An address, frame or page that is out of range raises `IndexError`.
    Evicting a page that is already in swap raises `ValueError`.
  - `dump()` yields `(address, value)` for every word of RAM.
  - The `eviction_count` property counts the evictions so far.

- **Virtual memory** (`vmsim.virtual.VirtualMemory`) translates addresses
  through the table tree. Frame 0 holds the root table. `initialize()` clears
  the root table. Missing tables and pages are allocated on demand, and a
  frame is chosen in this order:
  1. a frame holding an empty table that is not on the current path, which is
     then unlinked from its parent;
  2. otherwise, the unused frame just after the highest frame in use;
  3. otherwise, the page whose path through the tree carries the greatest
     weight is evicted to swap. Even entries and indices weigh `weight_even`,
     odd ones weigh `weight_odd`.

  `read` and `write` raise `vmsim.virtual.AddressOutOfRangeError`, a subclass
  of `IndexError`, for an address outside the virtual address space.

## Library use

```python
from vmsim.config import MemoryConfig, preset
from vmsim.physical import PhysicalMemory
from vmsim.virtual import VirtualMemory, AddressOutOfRangeError

ram = PhysicalMemory(MemoryConfig())      # or PhysicalMemory(preset("small"))
vm = VirtualMemory(ram)
vm.initialize()

vm.write(1234, 42)
assert vm.read(1234) == 42

try:
    vm.read(10**12)
except AddressOutOfRangeError:
    print("address outside the virtual address space")

print("evictions so far:", ram.eviction_count)
```

## Command line

Installing the package provides the `vmsim` command. It runs one scenario
against a freshly initialised memory:

```
vmsim {simple,fill-all,page-twice} [--preset {default,small,tiny}]
```

- `simple` (`vmsim.cli.run_simple`) writes `i` to address
  `5 * i * page_size` for twice as many pages as there are frames. It then
  reads each value back, checks it and prints `success`.
- `fill-all` (`vmsim.cli.run_fill_all`) writes every virtual address with its
  own index and then reads every address back, printing each step. On the
  `default` preset that is over a million writes and reads, so it takes a
  while.
- `page-twice` (`vmsim.cli.run_page_twice`) fills the first page twice and
  checks that the second round of values is the one read back. It then prints
  every RAM word as `address: value`, followed by the eviction count.

The exit status is 0 on success. If a check fails or an address is out of
range, the command prints `error: ...` to standard error and exits with 1.

## Limitations

Everything is held in memory. The swap area is a dictionary inside
`PhysicalMemory`, so nothing is written to disk and nothing persists between
runs. The command line only runs the three fixed scenarios. It has no
interactive mode and no way to enter your own reads and writes.

## Running the tests

```
pip install -e .[test]
pytest
```