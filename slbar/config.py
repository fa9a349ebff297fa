"""Status line layout: the segments shown, the refresh interval and limits."""

from dataclasses import dataclass
from typing import Callable, Optional

from slbar.cpu import cpu_perc
from slbar.memory import ram_total, ram_used
from slbar.system import date_time

INTERVAL = 1000
"""Milliseconds between status updates."""

UNKNOWN_STR = "n/a"
"""Text shown for a component that yields no value."""

MAXLEN = 2048
"""Maximum length of the status line in bytes, terminator included."""


@dataclass(frozen=True)
class Segment:
    """One part of the status line: a component, its format and its argument."""

    func: Callable[[Optional[str]], Optional[str]]
    fmt: str
    arg: Optional[str] = None

    def render(self, unknown):
        """Return the formatted component value, using unknown when it has none."""
        value = self.func(self.arg)
        if value is None:
            value = unknown
        return self.fmt % value


DEFAULT_SEGMENTS = (Segment(date_time, "%s", "%F %T"),)

SEGMENTS = (
    Segment(cpu_perc, "  %s%%"),
    Segment(ram_used, " | %s"),
    Segment(ram_total, "/%s"),
    Segment(date_time, "  %s", "%Y-%m-%d %I:%M:%S %p "),
)