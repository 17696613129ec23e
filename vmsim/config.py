"""Sizes and weights that describe a simulated memory layout."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MemoryConfig:
    """Bit widths of a paged memory system and the eviction weights."""

    offset_width: int = 4
    physical_address_width: int = 10
    virtual_address_width: int = 20
    weight_even: int = 4
    weight_odd: int = 2
    word_width: int = 32

    def __post_init__(self) -> None:
        if self.offset_width <= 0:
            raise ValueError("offset_width must be positive")
        if self.physical_address_width < self.offset_width:
            raise ValueError("physical_address_width must be at least offset_width")
        if self.virtual_address_width <= self.offset_width:
            raise ValueError("virtual_address_width must exceed offset_width")
        if self.word_width <= 0:
            raise ValueError("word_width must be positive")

    @property
    def page_size(self) -> int:
        """Words in a page or frame; also the number of entries in a table."""
        return 1 << self.offset_width

    @property
    def ram_size(self) -> int:
        """Words of physical memory."""
        return 1 << self.physical_address_width

    @property
    def virtual_memory_size(self) -> int:
        """Words of virtual memory."""
        return 1 << self.virtual_address_width

    @property
    def num_frames(self) -> int:
        """Frames in physical memory."""
        return self.ram_size // self.page_size

    @property
    def num_pages(self) -> int:
        """Pages in virtual memory."""
        return self.virtual_memory_size // self.page_size

    @property
    def tables_depth(self) -> int:
        """Levels of page tables needed to translate an address."""
        bits = self.virtual_address_width - self.offset_width
        return -(-bits // self.offset_width)


_PRESETS = {
    "default": MemoryConfig(offset_width=4, physical_address_width=10, virtual_address_width=20),
    "tiny": MemoryConfig(offset_width=1, physical_address_width=4, virtual_address_width=5),
    "small": MemoryConfig(offset_width=2, physical_address_width=5, virtual_address_width=12),
}


def preset(name: str) -> MemoryConfig:
    """Return one of the named layouts: 'default', 'tiny' or 'small'."""
    try:
        return _PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(_PRESETS))
        raise ValueError(f"unknown preset {name!r}; choose one of: {known}") from None


PRESET_NAMES = tuple(_PRESETS)