import os
import signal
import threading
import time

import pytest

from slbar.config import Segment
from slbar.status import build_status, main, parse_args, run
from slbar.util import StatusError


def _const(value):
    return Segment(lambda arg: value, "%s")


class _Recorder(list):
    """Sink that records every status line and reacts to the count so far."""

    def __init__(self, react):
        super().__init__()
        self._react = react

    def __call__(self, status):
        self.append(status)
        self._react(len(self))


def test_parse_args_defaults():
    options = parse_args([])
    assert (options.stdout, options.once) == (False, False)


def test_parse_args_stdout():
    options = parse_args(["-s"])
    assert (options.stdout, options.once) == (True, False)


def test_parse_args_once_implies_stdout():
    options = parse_args(["-1"])
    assert (options.stdout, options.once) == (True, True)


def test_parse_args_clustered_flags():
    options = parse_args(["-s1"])
    assert (options.stdout, options.once) == (True, True)


def test_parse_args_double_dash_ends_options():
    options = parse_args(["-s", "--"])
    assert options.stdout is True


def test_parse_args_version():
    with pytest.raises(StatusError, match="-1.0"):
        parse_args(["-v"])


@pytest.mark.parametrize(
    "argv", [["-x"], ["extra"], ["--", "extra"], ["-"], ["-s", "operand"]]
)
def test_parse_args_usage(argv):
    with pytest.raises(StatusError, match="usage:"):
        parse_args(argv)


def test_build_status_concatenates():
    segments = [_const("abc"), Segment(lambda a: "1", " [%s]")]
    assert build_status(segments, "?", 2048) == "abc [1]"


def test_build_status_unknown():
    segments = [Segment(lambda a: None, "cpu %s")]
    assert build_status(segments, "n/a", 2048) == "cpu n/a"


def test_build_status_truncates_and_stops(capsys):
    calls = []

    def later(arg):
        calls.append(arg)
        return "zzz"

    segments = [_const("abc"), _const("def"), Segment(later, "%s")]
    status = build_status(segments, "?", 5)
    assert status == "abcd"
    assert calls == []
    assert "truncated" in capsys.readouterr().err


def test_build_status_respects_byte_limit():
    segments = [_const("\u00e9" * 10)]
    status = build_status(segments, "?", 8)
    assert len(status.encode("utf-8")) < 8
    assert set(status) == {"\u00e9"}


def test_run_once_calls_sink_once():
    lines = []
    run([_const("hello")], 1000, True, lines.append)
    assert lines == ["hello"]


def test_run_stops_on_sigint():
    def react(count):
        if count == 3:
            signal.raise_signal(signal.SIGINT)

    lines = _Recorder(react)
    run([_const("tick")], 5, False, lines)
    assert list(lines) == ["tick"] * 3


def test_run_sigusr1_forces_update():
    timer = threading.Timer(0.1, os.kill, (os.getpid(), signal.SIGUSR1))

    def react(count):
        if count == 1:
            timer.start()
        else:
            signal.raise_signal(signal.SIGINT)

    lines = _Recorder(react)
    start = time.monotonic()
    run([_const("x")], 60000, False, lines)
    timer.join()
    assert list(lines) == ["x", "x"]
    assert time.monotonic() - start < 10


def test_run_restores_signal_handlers():
    before = signal.getsignal(signal.SIGINT)
    lines = []
    run([_const("x")], 1000, True, lines.append)
    assert lines == ["x"]
    assert signal.getsignal(signal.SIGINT) == before


def test_main_once_prints_one_line(capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert "/" in out


def test_main_version(capsys):
    assert main(["-v"]) == 1
    assert "slbar-1.0" in capsys.readouterr().err


def test_main_usage(capsys):
    assert main(["-q"]) == 1
    assert "usage:" in capsys.readouterr().err


def test_main_without_display(monkeypatch, capsys):
    monkeypatch.delenv("DISPLAY", raising=False)
    assert main([]) == 1
    assert "XOpenDisplay" in capsys.readouterr().err