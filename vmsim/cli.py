"""Command-line scenarios that exercise the virtual memory simulator."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from vmsim.config import PRESET_NAMES, preset
from vmsim.physical import PhysicalMemory
from vmsim.virtual import AddressOutOfRangeError, VirtualMemory


def _expect(actual: int, expected: int, address: int) -> None:
    if actual != expected:
        raise AssertionError(f"address {address}: read {actual}, expected {expected}")


def run_simple(vm: VirtualMemory, out: TextIO) -> None:
    """Write to widely spaced pages, then read each back and check it."""
    cfg = vm.config
    count = 2 * cfg.num_frames
    vm.initialize()
    for i in range(count):
        print(f"writing to {i}", file=out)
        vm.write(5 * i * cfg.page_size, i)
    for i in range(count):
        value = vm.read(5 * i * cfg.page_size)
        print(f"reading from {i} {value}", file=out)
        _expect(value, i, 5 * i * cfg.page_size)
    print("success", file=out)


def run_fill_all(vm: VirtualMemory, out: TextIO) -> None:
    """Write every virtual address with its own index, then read all back."""
    size = vm.config.virtual_memory_size
    vm.initialize()
    for i in range(size):
        vm.write(i, i)
        print(f"writing to {i} value: {i}", file=out)
    for i in range(size):
        value = vm.read(i)
        print(f"reading from {i} value: {value}", file=out)
    print("success", file=out)


def run_page_twice(vm: VirtualMemory, out: TextIO) -> None:
    """Fill one page twice, check the second values, then dump RAM and evictions."""
    ps = vm.config.page_size
    vm.initialize()
    for i in range(2 * ps):
        vm.write(i % ps, i)
    for i in range(ps):
        _expect(vm.read(i), i + ps, i)
    for address, value in vm.physical.dump():
        print(f"{address}: {value}", file=out)
    print(vm.physical.eviction_count, file=out)


_SCENARIOS = {
    "simple": run_simple,
    "fill-all": run_fill_all,
    "page-twice": run_page_twice,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="vmsim", description="Run a virtual memory scenario.")
    parser.add_argument("scenario", choices=sorted(_SCENARIOS))
    parser.add_argument("--preset", choices=sorted(PRESET_NAMES), default="default")
    args = parser.parse_args(argv)

    vm = VirtualMemory(PhysicalMemory(preset(args.preset)))
    try:
        _SCENARIOS[args.scenario](vm, sys.stdout)
    except (AssertionError, AddressOutOfRangeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())