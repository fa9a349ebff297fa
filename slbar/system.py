"""Components describing the running system and the current user."""

import os
import pwd
import re
import socket
import sys
import time

from slbar.util import read_text, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_BUFSIZE = 1024
_UINT = re.compile(r"\s*\+?(\d+)")
_UPTIME_CLOCK = next(
    getattr(time, name)
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC")
    if hasattr(time, name)
)


def date_time(fmt):
    """Return the local date and time formatted with strftime."""
    try:
        text = time.strftime(fmt, time.localtime())
    except ValueError as exc:
        warn(f"strftime: {exc}")
        return None
    if not text or len(text) >= _BUFSIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return text


def hostname(unused=None):
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostname: {exc}")
        return None


def kernel_release(unused=None):
    """Return the kernel release, as `uname -r` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        warn(f"uname: {exc}")
        return None


def load_avg(unused=None):
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def uptime(unused=None):
    """Return the system uptime as hours and minutes."""
    try:
        seconds = int(time.clock_gettime(_UPTIME_CLOCK))
    except OSError:
        warn(f"clock_gettime {_UPTIME_CLOCK}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(unused=None):
    """Return the real group id of the current user."""
    return str(os.getgid())


def uid(unused=None):
    """Return the effective user id of the current user."""
    return str(os.geteuid())


def username(unused=None):
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def entropy(unused=None, path=ENTROPY_AVAIL):
    """Return the available kernel entropy."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    text = read_text(path)
    if text is None:
        return None
    match = _UINT.match(text)
    return match.group(1).lstrip("0") or "0" if match else None