"""Volume component reading the master level of an OSS mixer device."""

import array
import fcntl
import os

from slbar.util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3",
    "dig1", "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)
_SOUND_MIXER_DEVMASK = 0xFE


def _mixer_read(device):
    """Return the ioctl request that reads one int from a mixer channel."""
    return (2 << 30) | (4 << 16) | (ord("M") << 8) | device


def _ioctl_int(fd, request, label):
    value = array.array("i", [0])
    try:
        fcntl.ioctl(fd, request, value, True)
    except OSError as exc:
        warn(f"ioctl '{label}': {exc.strerror or exc}")
        return None
    return value[0]


def vol_perc(card):
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror or exc}")
        return None

    try:
        devmask = _ioctl_int(
            fd, _mixer_read(_SOUND_MIXER_DEVMASK), "SOUND_MIXER_READ_DEVMASK"
        )
        if devmask is None:
            return None
        level = None
        for index, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                level = _ioctl_int(fd, _mixer_read(index), f"MIXER_READ({index})")
                if level is None:
                    return None
    finally:
        os.close(fd)

    if level is None:
        warn(f"'{card}': no master volume channel")
        return None
    return str(level & 0xFF)