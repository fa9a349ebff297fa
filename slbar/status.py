"""The status line loop and its command-line entry point."""

import argparse
import contextlib
import os
import shutil
import signal
import subprocess
import sys
import threading
import time

from slbar.config import INTERVAL, MAXLEN, SEGMENTS, UNKNOWN_STR
from slbar.util import StatusError, warn

VERSION = "1.0"
PROG = "slbar"


def _usage():
    return StatusError(f"usage: {PROG} [-v] [-s] [-1]")


def parse_args(argv):
    """Parse the options -v, -s and -1; return a namespace with stdout and once.

    Raises StatusError with the version text for -v and with the usage text
    for unknown options or stray operands.
    """
    args = list(argv)
    stdout = False
    once = False
    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                raise StatusError(f"{PROG}-{VERSION}")
            if flag == "1":
                once = True
                stdout = True
            elif flag == "s":
                stdout = True
            else:
                raise _usage()
    if args:
        raise _usage()
    return argparse.Namespace(stdout=stdout, once=once)


def build_status(segments, unknown, maxlen):
    """Concatenate the rendered segments, keeping within maxlen bytes.

    When a segment does not fit, as much of it as fits is kept, a warning is
    written and the remaining segments are skipped.
    """
    parts = []
    used = 0
    for segment in segments:
        piece = segment.render(unknown).encode("utf-8")
        room = maxlen - used
        if len(piece) >= room:
            if room > 1:
                parts.append(piece[: room - 1])
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        used += len(piece)
    return b"".join(parts).decode("utf-8", errors="ignore")


class _Wake(Exception):
    """Cuts a sleep short when a signal arrives."""


class _LoopState:
    def __init__(self, done):
        self.done = done
        self.sleeping = False

    def on_signal(self, signo, frame):
        if signo != signal.SIGUSR1:
            self.done = True
        if self.sleeping:
            self.sleeping = False
            raise _Wake

    def sleep(self, seconds):
        try:
            self.sleeping = True
            time.sleep(seconds)
        except _Wake:
            pass
        finally:
            self.sleeping = False


@contextlib.contextmanager
def _signal_handlers(handler):
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    signums = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)
    previous = {signum: signal.signal(signum, handler) for signum in signums}
    try:
        yield
    finally:
        for signum, old in previous.items():
            signal.signal(signum, old)


def run(segments, interval, once, sink):
    """Hand a fresh status line to sink every interval milliseconds.

    SIGINT and SIGTERM end the loop after the current update; SIGUSR1 forces
    an immediate update. With once set, a single line is produced.
    """
    state = _LoopState(done=once)
    with _signal_handlers(state.on_signal):
        while True:
            start = time.monotonic()
            sink(build_status(segments, UNKNOWN_STR, MAXLEN))
            if state.done:
                break
            remaining = interval / 1000 - (time.monotonic() - start)
            if remaining >= 0:
                state.sleep(remaining)
            if state.done:
                break


def _print_status(status):
    try:
        print(status, flush=True)
    except OSError as exc:
        raise StatusError(f"puts: {exc}") from exc


class _RootWindowSink:
    """Publishes the status line as the name of the X root window."""

    def __init__(self):
        self._command = shutil.which("xsetroot")
        if not os.environ.get("DISPLAY") or self._command is None:
            raise StatusError("XOpenDisplay: Failed to open display")

    def _store(self, name):
        try:
            subprocess.run([self._command, "-name", name], check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise StatusError(f"XStoreName: {exc}") from exc

    def __call__(self, status):
        self._store(status)

    def clear(self):
        self._store("")


def main(argv=None):
    """Run the status monitor; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
        if options.stdout:
            run(SEGMENTS, INTERVAL, options.once, _print_status)
        else:
            sink = _RootWindowSink()
            try:
                run(SEGMENTS, INTERVAL, options.once, sink)
            finally:
                sink.clear()
    except StatusError as exc:
        warn(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())