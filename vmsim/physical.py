"""Simulated physical memory with a swap area."""

from __future__ import annotations

from collections.abc import Iterator

from vmsim.config import MemoryConfig


class PhysicalMemory:
    """RAM split into frames, plus a swap store keyed by page index."""

    def __init__(self, config: MemoryConfig | None = None) -> None:
        self.config = config if config is not None else MemoryConfig()
        size = self.config.page_size
        self._frames = [[0] * size for _ in range(self.config.num_frames)]
        self._swap: dict[int, list[int]] = {}
        self._evictions = 0

    def _locate(self, address: int) -> tuple[int, int]:
        if not 0 <= address < self.config.ram_size:
            raise IndexError(f"physical address {address} out of range")
        return divmod(address, self.config.page_size)

    def _check_frame(self, frame_index: int) -> None:
        if not 0 <= frame_index < self.config.num_frames:
            raise IndexError(f"frame {frame_index} out of range")

    def _to_word(self, value: int) -> int:
        span = 1 << self.config.word_width
        value %= span
        return value - span if value >= span >> 1 else value

    def read(self, address: int) -> int:
        """Return the word stored at a physical address."""
        frame, offset = self._locate(address)
        return self._frames[frame][offset]

    def write(self, address: int, value: int) -> None:
        """Store a word, wrapped to the configured word width."""
        frame, offset = self._locate(address)
        self._frames[frame][offset] = self._to_word(value)

    def evict(self, frame_index: int, page_index: int) -> None:
        """Copy a frame's contents to swap under the given page index."""
        self._check_frame(frame_index)
        if not 0 <= page_index < self.config.num_pages:
            raise IndexError(f"page {page_index} out of range")
        if page_index in self._swap:
            raise ValueError(f"page {page_index} is already swapped out")
        self._swap[page_index] = list(self._frames[frame_index])
        self._evictions += 1

    def restore(self, frame_index: int, page_index: int) -> None:
        """Move a swapped page into a frame; a page never swapped out is left as is."""
        self._check_frame(frame_index)
        page = self._swap.pop(page_index, None)
        if page is not None:
            self._frames[frame_index] = page

    def dump(self) -> Iterator[tuple[int, int]]:
        """Yield (address, value) for every word of RAM."""
        for address in range(self.config.ram_size):
            yield address, self.read(address)

    @property
    def eviction_count(self) -> int:
        """Number of evictions performed so far."""
        return self._evictions