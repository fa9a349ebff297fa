"""CPU components: clock frequency and utilisation."""

import re

from slbar.util import fmt_human, read_text

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

_UINT = re.compile(r"\s*\+?(\d+)")
# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def cpu_freq(unused=None, path=CPU_FREQ):
    """Return the current frequency of the first CPU, read in kHz."""
    text = read_text(path)
    if text is None:
        return None
    match = _UINT.match(text)
    if not match:
        return None
    return fmt_human(int(match.group(1)) * 1000, 1000)


def _parse_stat(text):
    """Return the seven aggregate counters of the first /proc/stat line."""
    tokens = text.split()[1 : 1 + _FIELDS]
    if len(tokens) != _FIELDS:
        return None
    try:
        return tuple(float(token) for token in tokens)
    except ValueError:
        return None


class CpuMonitor:
    """Computes CPU usage from the difference between successive samples."""

    def __init__(self, stat_path=PROC_STAT):
        self.stat_path = stat_path
        self._sample = (0.0,) * _FIELDS

    def perc(self, unused=None):
        """Return CPU usage in percent since the previous call, or None on the first."""
        previous = self._sample
        text = read_text(self.stat_path)
        if text is None:
            return None
        current = _parse_stat(text)
        if current is None:
            return None
        self._sample = current

        if previous[0] == 0:
            return None

        total = sum(previous) - sum(current)
        if total == 0:
            return None

        busy = sum(previous[i] for i in _BUSY) - sum(current[i] for i in _BUSY)
        return str(int(100 * busy / total))


_monitor = CpuMonitor()


def cpu_perc(unused=None):
    """Return system-wide CPU usage in percent since the previous call."""
    return _monitor.perc(unused)