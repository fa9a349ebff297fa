import pytest

from slbar.memory import (
    parse_meminfo,
    ram_free,
    ram_perc,
    ram_total,
    ram_used,
    swap_free,
    swap_perc,
    swap_total,
    swap_used,
)
from slbar.util import fmt_human

GIB = 1024 * 1024


def _meminfo(total, free, available, buffers, cached, swap_total_kb, swap_free_kb, swap_cached):
    return (
        f"MemTotal:       {total} kB\n"
        f"MemFree:        {free} kB\n"
        f"MemAvailable:   {available} kB\n"
        f"Buffers:        {buffers} kB\n"
        f"Cached:         {cached} kB\n"
        f"SwapCached:     {swap_cached} kB\n"
        f"Active:         12345 kB\n"
        f"SwapTotal:      {swap_total_kb} kB\n"
        f"SwapFree:       {swap_free_kb} kB\n"
        f"HugePages_Total:       0\n"
    )


def _write(tmp_path, **kwargs):
    defaults = dict(
        total=16 * GIB,
        free=2 * GIB,
        available=8 * GIB,
        buffers=GIB,
        cached=4 * GIB,
        swap_total_kb=2 * GIB,
        swap_free_kb=GIB,
        swap_cached=0,
    )
    defaults.update(kwargs)
    path = tmp_path / "meminfo"
    path.write_text(_meminfo(**defaults))
    return str(path)


def test_parse_meminfo_fields():
    info = parse_meminfo(_meminfo(100, 20, 50, 5, 10, 30, 25, 1))
    assert info["MemTotal"] == 100
    assert info["MemAvailable"] == 50
    assert info["SwapFree"] == 25
    assert info["HugePages_Total"] == 0


def test_parse_meminfo_skips_malformed_lines():
    info = parse_meminfo("garbage line\nMemTotal: 42 kB\nEmpty:\n")
    assert info == {"MemTotal": 42}


def test_ram_free_uses_available(tmp_path):
    path = _write(tmp_path, available=3 * GIB)
    assert ram_free(None, path) == fmt_human(3 * GIB * 1024, 1024)


@pytest.mark.parametrize("gib", [1, 7, 64])
def test_ram_total_whole_gib(tmp_path, gib):
    path = _write(tmp_path, total=gib * GIB + 1000, free=0, buffers=0, cached=0)
    assert ram_total(None, path) == f"{gib}G"


@pytest.mark.parametrize("used", [0, 3, 9])
def test_ram_used_whole_gib(tmp_path, used):
    free, buffers, cached = 2 * GIB, GIB, 4 * GIB
    path = _write(
        tmp_path,
        total=used * GIB + free + buffers + cached,
        free=free,
        buffers=buffers,
        cached=cached,
    )
    assert ram_used(None, path) == f"{used}G"


@pytest.mark.parametrize("percent", [0, 25, 99])
def test_ram_perc(tmp_path, percent):
    unit = 1000
    path = _write(
        tmp_path,
        total=100 * unit,
        free=(100 - percent) * unit // 2,
        buffers=(100 - percent) * unit // 4,
        cached=(100 - percent) * unit // 4,
    )
    assert ram_perc(None, path) == str(percent)


def test_ram_perc_zero_total(tmp_path):
    path = _write(tmp_path, total=0, free=0, buffers=0, cached=0)
    assert ram_perc(None, path) is None


def test_swap_free_and_total(tmp_path):
    path = _write(tmp_path, swap_total_kb=4 * GIB, swap_free_kb=GIB)
    assert swap_total(None, path) == fmt_human(4 * GIB * 1024, 1024)
    assert swap_free(None, path) == fmt_human(GIB * 1024, 1024)


def test_swap_used_when_nothing_used(tmp_path):
    path = _write(tmp_path, swap_total_kb=GIB, swap_free_kb=GIB, swap_cached=0)
    assert swap_used(None, path) == fmt_human(0, 1024)


def test_swap_used_equals_total_when_nothing_free(tmp_path):
    path = _write(tmp_path, swap_total_kb=2 * GIB, swap_free_kb=0, swap_cached=0)
    assert swap_used(None, path) == swap_total(None, path)


@pytest.mark.parametrize("percent", [0, 40, 100])
def test_swap_perc(tmp_path, percent):
    unit = 1024
    path = _write(
        tmp_path,
        swap_total_kb=100 * unit,
        swap_free_kb=(100 - percent) * unit,
        swap_cached=0,
    )
    assert swap_perc(None, path) == str(percent)


def test_swap_perc_without_swap(tmp_path):
    path = _write(tmp_path, swap_total_kb=0, swap_free_kb=0, swap_cached=0)
    assert swap_perc(None, path) is None


@pytest.mark.parametrize(
    "component",
    [ram_free, ram_perc, ram_total, ram_used, swap_free, swap_perc, swap_total, swap_used],
)
def test_missing_file(tmp_path, component):
    assert component(None, str(tmp_path / "absent")) is None


@pytest.mark.parametrize(
    "component",
    [ram_free, ram_perc, ram_total, ram_used, swap_free, swap_perc, swap_total, swap_used],
)
def test_missing_fields(tmp_path, component):
    path = tmp_path / "meminfo"
    path.write_text("Active: 5 kB\n")
    assert component(None, str(path)) is None