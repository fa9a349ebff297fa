"""Keyboard helpers: lock indicator formatting and xkb layout selection."""

import re

_INVALID_SYMBOLS = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:]")


def format_indicators(fmt, led_mask):
    """Render caps ('c') and num ('n') lock states following fmt.

    A letter followed by '?' is shown, case kept, only while its indicator is
    on; otherwise it is always shown, upper case when on and lower case when
    off. Only the first four characters of fmt are used.
    """
    fmt = fmt[:4]
    out = []
    for i, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        togglecase = i + 1 >= len(fmt) or fmt[i + 1] != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def valid_layout_or_variant(sym):
    """Return False for xkb rule symbols that name no layout."""
    return not sym.startswith(_INVALID_SYMBOLS)


def get_layout(symbols, group):
    """Return the layout of the given group from an xkb symbols name."""
    layout = None
    current = 0
    for token in filter(None, _SEPARATORS.split(symbols)):
        if current > group:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            # :2, :3, :4 mark additional layout groups
            continue
        layout = token
        current += 1
    return layout