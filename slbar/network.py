"""Network components: addresses, transfer rates and wireless link details."""

import array
import fcntl
import os
import re
import socket
import struct

import psutil

from slbar.util import fmt_human, read_text, warn

NET_ROOT = "/sys/class/net"
DEFAULT_INTERVAL = 1000

_UINT = re.compile(r"\s*\+?(\d+)")
_UINTMAX_MASK = (1 << 64) - 1
_LINE_MAX = 1022
_WIRELESS_LINK = re.compile(r"\s*[+-]?\d+(?!\d)\s*([+-]?\d+)")

_IFNAMSIZ = 16
_IW_ESSID_MAX_SIZE = 32
_SIOCGIWESSID = 0x8B1B
_IWREQ_SIZE = 32


def _ip(interface, family):
    try:
        addresses = psutil.net_if_addrs()
    except OSError as exc:
        warn(f"getifaddrs: {exc}")
        return None
    for address in addresses.get(interface, ()):
        if address.family == family:
            return address.address
    return None


def ipv4(interface):
    """Return the IPv4 address of an interface."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface):
    """Return the IPv6 address of an interface."""
    return _ip(interface, socket.AF_INET6)


class NetSpeed:
    """Reports the transfer rate of an interface from successive byte counters."""

    def __init__(self, direction, interval=DEFAULT_INTERVAL, root=NET_ROOT):
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def __call__(self, interface):
        """Return bytes per second since the previous call, or None on the first."""
        previous = self._bytes
        path = os.path.join(
            self.root, interface, "statistics", f"{self.direction}_bytes"
        )
        text = read_text(path)
        if text is None:
            return None
        match = _UINT.match(text)
        if not match:
            return None
        self._bytes = int(match.group(1))
        if previous == 0:
            return None
        delta = (self._bytes - previous) & _UINTMAX_MASK
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface):
    """Return the receive rate of an interface."""
    return _rx(interface)


def netspeed_tx(interface):
    """Return the transmit rate of an interface."""
    return _tx(interface)


def rssi_to_perc(rssi):
    """Map a signal strength in dBm to a percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def wifi_perc(interface, root="/"):
    """Return the wireless link quality of an interface in percent."""
    operstate = os.path.join(root, "sys", "class", "net", interface, "operstate")
    try:
        with open(operstate, "rb") as handle:
            status = handle.readline(4)
    except OSError as exc:
        warn(f"fopen '{operstate}': {exc.strerror or exc}")
        return None
    if status != b"up\n":
        return None

    wireless = os.path.join(root, "proc", "net", "wireless")
    try:
        with open(wireless, "rb") as handle:
            lines = [handle.readline(_LINE_MAX) for _ in range(3)]
    except OSError as exc:
        warn(f"fopen '{wireless}': {exc.strerror or exc}")
        return None
    if not all(lines):
        return None

    line = lines[2].decode("utf-8", errors="replace")
    position = line.find(interface)
    if position < 0:
        return None
    match = _WIRELESS_LINK.match(line[position + len(interface) + 2 :])
    if not match:
        return None
    # 70 is the maximum link quality reported by the kernel
    return str(int(int(match.group(1)) / 70 * 100))


def wifi_essid(interface):
    """Return the ESSID the wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("snprintf: Output truncated")
        return None

    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, length = essid.buffer_info()
    request = struct.pack("16sPHH", name, address, length, 0).ljust(
        _IWREQ_SIZE, b"\0"
    )

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror or exc}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError as exc:
            warn(f"ioctl 'SIOCGIWESSID': {exc.strerror or exc}")
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    return value.decode("utf-8", errors="replace") or None