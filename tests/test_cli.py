import io

import pytest

from vmsim.cli import main, run_fill_all, run_page_twice, run_simple
from vmsim.config import preset
from vmsim.physical import PhysicalMemory
from vmsim.virtual import AddressOutOfRangeError, VirtualMemory


def make_vm(name):
    return VirtualMemory(PhysicalMemory(preset(name)))


def test_run_simple_reads_back_indices():
    vm = make_vm("default")
    out = io.StringIO()
    run_simple(vm, out)
    lines = out.getvalue().splitlines()
    assert lines[-1] == "success"
    reads = [line.split() for line in lines if line.startswith("reading from")]
    assert len(reads) == 2 * vm.config.num_frames
    assert all(parts[2] == parts[3] for parts in reads)


def test_run_simple_out_of_range_on_tiny():
    with pytest.raises(AddressOutOfRangeError):
        run_simple(make_vm("tiny"), io.StringIO())


def test_run_fill_all_line_counts():
    vm = make_vm("tiny")
    out = io.StringIO()
    run_fill_all(vm, out)
    lines = out.getvalue().splitlines()
    size = vm.config.virtual_memory_size
    assert sum(line.startswith("writing to") for line in lines) == size
    assert sum(line.startswith("reading from") for line in lines) == size
    assert lines[-1] == "success"
    assert vm.physical.eviction_count > 0


def test_run_page_twice_dump():
    vm = make_vm("tiny")
    out = io.StringIO()
    run_page_twice(vm, out)
    lines = out.getvalue().splitlines()
    assert len(lines) == vm.config.ram_size + 1
    assert lines[0].startswith("0: ")
    assert lines[-1] == "0"
    values = [int(line.split(": ")[1]) for line in lines[:-1]]
    ps = vm.config.page_size
    assert all(i + ps in values for i in range(ps))


def test_main_page_twice_exit_code(capsys):
    assert main(["page-twice", "--preset", "tiny"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "0"


def test_main_simple_fails_on_tiny(capsys):
    assert main(["simple", "--preset", "tiny"]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_unknown_scenario():
    with pytest.raises(SystemExit):
        main(["bogus"])