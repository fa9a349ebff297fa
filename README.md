# slbar

`slbar` is a small status monitor. It collects pieces of system information
(time, CPU load, memory and more) and joins them into one status line that is
refreshed at a fixed interval. The line either goes to standard output, for
bars that read lines from a pipe, or becomes the name of the X root window,
which is where many tiling window managers take their status text from.

It is written for Linux: most components read `/proc` and `/sys`.

## Installation

```
pip install .
```

Python 3.10 or newer is required. `psutil` is installed along with it.

## Usage

```
slbar -s
```

| Option | Meaning                                            |
|--------|----------------------------------------------------|
| `-s`   | write the status line to standard output           |
| `-1`   | write the status line once, then exit (implies -s) |
| `-v`   | write the version to standard error and exit with status 1 |

Options may be combined (`-s1`), and `--` ends the options. Any other option
or a stray operand writes a usage message to standard error and exits with
status 1.

Without `-s` or `-1`, `slbar` sets the X root window name by running
`xsetroot -name`. This needs `DISPLAY` to be set and `xsetroot` to be on the
`PATH`; otherwise it stops with `XOpenDisplay: Failed to open display`. When
it stops, it sets the root window name back to an empty string.

Without `-1`, the line is refreshed every 1000 ms until `SIGINT` or `SIGTERM`
arrives. `SIGUSR1` makes it refresh straight away.

If a component yields no value, its place shows `n/a`. The line is kept
within 2048 bytes; a segment that does not fit is cut short, a warning is
written and the segments after it are left out.

## What the line shows

The command shows the segments in `slbar.config.SEGMENTS`: CPU usage, used
and total memory, and the local date and time. There is no configuration
file; `slbar.config` also holds `DEFAULT_SEGMENTS` (the date and time alone),
`INTERVAL`, `UNKNOWN_STR` and `MAXLEN`.

To show something else, build your own segments and call the loop directly:

```python
from slbar.config import Segment
from slbar.battery import battery_perc
from slbar.system import date_time
from slbar.status import build_status, run

segments = [
    Segment(battery_perc, "bat %s%% | ", "BAT0"),
    Segment(date_time, "%s", "%F %T"),
]

print(build_status(segments, "n/a", 2048))
run(segments, 1000, False, print)
```

A `Segment` holds a component, a format with a single `%s`, and the argument
passed to the component. `Segment.render(unknown)` returns the formatted value,
using `unknown` when the component returns `None`. `run(segments, interval,
once, sink)` hands a fresh line to `sink` every `interval` milliseconds, or
once when `once` is true.

## Components

Each component takes one argument and returns a string, or `None` when the
value is not available. Problems are reported as warnings on standard error.

- `slbar.files`: `cat` (first line of a file), `num_files` (entries in a
  directory), `run_command` (first line of a shell command's output), `temp`
  (degrees Celsius from a millidegree sensor file)
- `slbar.system`: `date_time` (strftime format), `hostname`,
  `kernel_release`, `load_avg`, `uptime`, `gid`, `uid`, `username`, `entropy`
- `slbar.battery`: `battery_perc`, `battery_state` (`+`, `-`, `o` or `?`),
  `battery_remaining`, each taking a battery name such as `BAT0`
- `slbar.cpu`: `cpu_freq`, `cpu_perc`; `CpuMonitor` keeps its own samples
  for `/proc/stat`-style files
- `slbar.memory`: `ram_free`, `ram_perc`, `ram_total`, `ram_used`,
  `swap_free`, `swap_perc`, `swap_total`, `swap_used`, and `parse_meminfo`
- `slbar.disk`: `disk_free`, `disk_perc`, `disk_total`, `disk_used`, each
  taking a mount point
- `slbar.network`: `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx`,
  `wifi_perc`, `wifi_essid`, each taking an interface name; `NetSpeed` keeps
  its own byte counter, and `rssi_to_perc` maps dBm to a percentage
- `slbar.volume`: `vol_perc`, taking an OSS mixer device such as `/dev/mixer`

`cpu_perc`, `CpuMonitor.perc`, `netspeed_rx`, `netspeed_tx` and `NetSpeed`
compare against the previous call, so the first call returns `None`.

Sizes come out in human-readable form through `slbar.util.fmt_human`, for
example `1.5 Gi` (base 1024) or `2.0 k` (base 1000).

## What it does not do

`slbar` does not talk to the X server itself. It has no component that reads
the caps/num lock state or the current keyboard layout from X;
`slbar.keyboard` only formats values obtained elsewhere:
`format_indicators(fmt, led_mask)` renders lock indicators and
`get_layout(symbols, group)` picks a layout out of an xkb symbols name.
Volume is read from OSS mixer devices only, and the battery, CPU, memory and
wireless components read Linux interfaces only.