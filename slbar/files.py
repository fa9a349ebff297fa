"""Components reading files, directories, commands and temperature sensors."""

import os
import re
import subprocess

from slbar.util import read_text, warn

_LINE_MAX = 1022
_UINT = re.compile(r"\s*\+?(\d+)")


def _first_line(stream):
    """Read one line from a binary stream, without its newline; None if empty."""
    line = stream.readline(_LINE_MAX).decode("utf-8", errors="replace")
    line = line.removesuffix("\n")
    return line or None


def cat(path):
    """Return the first line of a file."""
    try:
        with open(path, "rb") as handle:
            return _first_line(handle)
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None


def num_files(path):
    """Return the number of entries in a directory."""
    try:
        entries = os.listdir(path)
    except OSError as exc:
        warn(f"opendir '{path}': {exc.strerror or exc}")
        return None
    return str(len(entries))


def run_command(cmd):
    """Run a shell command and return the first line of its output."""
    try:
        proc = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror or exc}")
        return None
    with proc:
        return _first_line(proc.stdout)


def temp(file):
    """Return the temperature in degrees Celsius from a millidegree sensor file."""
    text = read_text(file)
    if text is None:
        return None
    match = _UINT.match(text)
    if not match:
        return None
    return str(int(match.group(1)) // 1000)