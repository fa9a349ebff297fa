"""Battery components reading the Linux power-supply class in sysfs."""

import os
import re

from slbar.util import read_text

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}
_STATE = re.compile(r"[a-zA-Z ]{1,12}")
_INT = re.compile(r"\s*([+-]?\d+)")
_UINT = re.compile(r"\s*\+?(\d+)")


def _read_number(path, pattern):
    text = read_text(path)
    if text is None:
        return None
    match = pattern.match(text)
    return int(match.group(1)) if match else None


def _read_state(bat, root):
    text = read_text(os.path.join(root, bat, "status"))
    if text is None:
        return None
    match = _STATE.match(text)
    return match.group(0) if match else None


def _pick(bat, root, *names):
    """Return the first readable attribute file among names."""
    for name in names:
        path = os.path.join(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat, root=POWER_SUPPLY):
    """Return the battery charge in percent."""
    capacity = _read_number(os.path.join(root, bat, "capacity"), _INT)
    return None if capacity is None else str(capacity)


def battery_state(bat, root=POWER_SUPPLY):
    """Return '+' when charging, '-' when discharging, 'o' when full, '?' otherwise."""
    state = _read_state(bat, root)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat, root=POWER_SUPPLY):
    """Return the remaining time while discharging, an empty string otherwise."""
    state = _read_state(bat, root)
    if state is None:
        return None

    charge_path = _pick(bat, root, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = _read_number(charge_path, _UINT)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, root, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = _read_number(current_path, _UINT)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"