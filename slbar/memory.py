"""Memory and swap components reading /proc/meminfo."""

from slbar.util import fmt_human, read_text

MEMINFO = "/proc/meminfo"

_GIB_IN_KB = 1024 * 1024


def parse_meminfo(text):
    """Return a mapping of /proc/meminfo field names to their values in kB."""
    fields = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _trunc_div(num, den):
    """Integer division rounding toward zero."""
    quotient = abs(num) // abs(den)
    return quotient if (num >= 0) == (den >= 0) else -quotient


def _fields(path, *names):
    text = read_text(path)
    if text is None:
        return None
    info = parse_meminfo(text)
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def ram_free(unused=None, path=MEMINFO):
    """Return the available memory."""
    values = _fields(path, "MemAvailable")
    if values is None:
        return None
    (available,) = values
    return fmt_human(available * 1024, 1024)


def ram_perc(unused=None, path=MEMINFO):
    """Return memory usage in percent, excluding buffers and page cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * ((total - free) - (buffers + cached)), total))


def ram_total(unused=None, path=MEMINFO):
    """Return total memory in whole GiB."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    (total,) = values
    return f"{total // _GIB_IN_KB}G"


def ram_used(unused=None, path=MEMINFO):
    """Return used memory in whole GiB, excluding buffers and page cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return f"{(total - free - buffers - cached) // _GIB_IN_KB}G"


def swap_free(unused=None, path=MEMINFO):
    """Return free swap space."""
    values = _fields(path, "SwapFree")
    if values is None:
        return None
    (free,) = values
    return fmt_human(free * 1024, 1024)


def swap_perc(unused=None, path=MEMINFO):
    """Return swap usage in percent."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(unused=None, path=MEMINFO):
    """Return total swap space."""
    values = _fields(path, "SwapTotal")
    if values is None:
        return None
    (total,) = values
    return fmt_human(total * 1024, 1024)


def swap_used(unused=None, path=MEMINFO):
    """Return used swap space, excluding cached pages."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)