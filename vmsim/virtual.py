"""Virtual memory on top of physical memory using hierarchical page tables."""

from __future__ import annotations

from dataclasses import dataclass

from vmsim.physical import PhysicalMemory


class AddressOutOfRangeError(IndexError):
    """Raised when a virtual address lies outside virtual memory."""


@dataclass
class _Search:
    keep: int
    empty_frame: bool = False
    highest_frame: int = 0
    max_path: int = 0
    max_weight: int = 0
    victim_frame: int = 0
    victim_entry: int = 0


class VirtualMemory:
    """Translates virtual addresses, allocating tables and swapping pages on demand."""

    def __init__(self, physical: PhysicalMemory) -> None:
        self.physical = physical
        self.config = physical.config

    def initialize(self) -> None:
        """Clear the root table."""
        self._clear_table(0)

    def read(self, address: int) -> int:
        """Return the word at a virtual address."""
        return self.physical.read(self._translate(address))

    def write(self, address: int, value: int) -> None:
        """Store a word at a virtual address."""
        self.physical.write(self._translate(address), value)

    def _clear_table(self, frame: int) -> None:
        size = self.config.page_size
        for offset in range(size):
            self.physical.write(frame * size + offset, 0)

    def _weight(self, number: int) -> int:
        return self.config.weight_even if number % 2 == 0 else self.config.weight_odd

    def _translate(self, address: int) -> int:
        cfg = self.config
        if not 0 <= address < cfg.virtual_memory_size:
            raise AddressOutOfRangeError(f"virtual address {address} out of range")
        size = cfg.page_size
        depth = cfg.tables_depth
        frame = 0
        keep = 0
        for level in range(depth):
            index = (address >> ((depth - level) * cfg.offset_width)) % size
            entry = frame * size + index
            child = self.physical.read(entry)
            if child == 0:
                child = self._allocate(keep)
                if level == depth - 1:
                    self.physical.restore(child, address >> cfg.offset_width)
                else:
                    self._clear_table(child)
                self.physical.write(entry, child)
            keep = child
            frame = child
        return frame * size + address % size

    def _allocate(self, keep: int) -> int:
        search = _Search(keep=keep)
        found = self._search(search, 0, 0, 0, self.config.weight_even)
        if found:
            return found
        if search.highest_frame + 1 < self.config.num_frames:
            return search.highest_frame + 1
        self.physical.evict(search.victim_frame, search.max_path)
        self.physical.write(search.victim_entry, 0)
        return search.victim_frame

    def _search(self, s: _Search, depth: int, base: int, path: int, weight: int) -> int:
        """Walk the table tree: find an empty table, track the highest frame and the heaviest page."""
        cfg = self.config
        s.highest_frame = max(s.highest_frame, base)
        if depth == cfg.tables_depth:
            return 0
        size = cfg.page_size
        found = 0
        has_entries = False
        previous = 0
        for index in range(size):
            if previous > 0:
                weight -= self._weight(previous)
            entry = base * size + index
            value = self.physical.read(entry)
            if value != 0:
                weight += self._weight(value)
                child_path = (path << cfg.offset_width) + index
                has_entries = True
                if depth == cfg.tables_depth - 1:
                    weight += self._weight(child_path)
                    if weight > s.max_weight:
                        s.max_path = child_path
                        s.max_weight = weight
                        s.victim_frame = value
                        s.victim_entry = entry
                result = self._search(s, depth + 1, value, child_path, weight)
                if result and not found:
                    if s.empty_frame:
                        self.physical.write(entry, 0)
                        s.empty_frame = False
                    found = result
            previous = value
        if base != s.keep and base != 0 and not has_entries:
            s.empty_frame = True
            return base
        return found