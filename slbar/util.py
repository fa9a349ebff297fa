"""Shared helpers for status components: warnings, file reading and size formatting."""

import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}


class StatusError(Exception):
    """Raised when the status line cannot be produced or delivered."""


def warn(message):
    """Write a diagnostic message to standard error."""
    print(message, file=sys.stderr, flush=True)


def fmt_human(num, base):
    """Format a byte count with a decimal (1000) or binary (1024) unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None

    scaled = float(num)
    for prefix in prefixes[:-1]:
        if scaled < base:
            break
        scaled /= base
    else:
        prefix = prefixes[-1]

    return f"{scaled:.1f} {prefix}"


def read_text(path):
    """Return the contents of a text file, or None after a warning if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None