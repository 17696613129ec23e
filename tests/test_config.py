import pytest

from vmsim.config import MemoryConfig, preset


def test_default_layout_sizes():
    cfg = preset("default")
    assert cfg.page_size == 1 << 4
    assert cfg.ram_size == 1 << 10
    assert cfg.virtual_memory_size == 1 << 20
    assert cfg.num_frames == cfg.ram_size // cfg.page_size
    assert cfg.num_pages == cfg.virtual_memory_size // cfg.page_size


def test_default_tables_depth():
    assert preset("default").tables_depth == 4


@pytest.mark.parametrize("name", ["default", "tiny", "small"])
def test_tables_depth_covers_page_number_bits(name):
    cfg = preset(name)
    bits = cfg.virtual_address_width - cfg.offset_width
    assert cfg.tables_depth * cfg.offset_width >= bits
    assert (cfg.tables_depth - 1) * cfg.offset_width < bits


@pytest.mark.parametrize("name", ["default", "tiny", "small"])
def test_frames_times_page_size_is_ram(name):
    cfg = preset(name)
    assert cfg.num_frames * cfg.page_size == cfg.ram_size
    assert cfg.num_pages * cfg.page_size == cfg.virtual_memory_size


def test_tiny_preset_widths():
    cfg = preset("tiny")
    assert (cfg.offset_width, cfg.physical_address_width, cfg.virtual_address_width) == (1, 4, 5)


def test_weights_default():
    cfg = MemoryConfig()
    assert (cfg.weight_even, cfg.weight_odd) == (4, 2)


def test_unknown_preset():
    with pytest.raises(ValueError):
        preset("huge")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"offset_width": 0},
        {"offset_width": 4, "physical_address_width": 3},
        {"offset_width": 4, "virtual_address_width": 4},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        MemoryConfig(**kwargs)