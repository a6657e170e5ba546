import logging
import subprocess
import sys
from unittest import mock

import pytest

from tilekit.data_types import PenroseError
from tilekit.helpers import (
    keycodes_from_xmodmap,
    logging_error_handler,
    parse_xmodmap_output,
    spawn,
    spawn_for_output,
    spawn_for_output_lines,
    spawn_for_output_with_args,
    spawn_with_args,
)

MISSING = "definitely-not-a-real-program-xyz"

XMODMAP_SAMPLE = (
    "keycode   9 = Escape NoSymbol Escape\n"
    "keycode  10 = 1 exclam 1 exclam\n"
    "keycode  36 = Return NoSymbol Return\n"
    "keycode 255 =\n"
)


def test_spawn_with_args_runs_process(tmp_path):
    target = tmp_path / "out.txt"
    proc = spawn_with_args(
        sys.executable, ["-c", f"open({str(target)!r}, 'w').write('done')"]
    )
    assert proc.wait(timeout=30) == 0
    assert target.read_text() == "done"


def test_spawn_splits_on_whitespace():
    proc = spawn(f"{sys.executable} -c pass")
    assert proc.wait(timeout=30) == 0


def test_spawn_missing_program_raises():
    with pytest.raises(PenroseError):
        spawn(MISSING)


def test_spawn_with_args_missing_program_raises():
    with pytest.raises(PenroseError):
        spawn_with_args(MISSING, ["a"])


def test_spawn_empty_command_raises():
    with pytest.raises(PenroseError):
        spawn("   ")


def test_spawn_for_output():
    assert spawn_for_output(f"{sys.executable} -c print(42)") == "42\n"


def test_spawn_for_output_with_args():
    out = spawn_for_output_with_args(sys.executable, ["-c", "print('a b')"])
    assert out == "a b\n"


def test_spawn_for_output_missing_program_raises():
    with pytest.raises(PenroseError):
        spawn_for_output(MISSING)


def test_spawn_for_output_invalid_utf8_raises():
    with pytest.raises(PenroseError):
        spawn_for_output_with_args(
            sys.executable, ["-c", "import sys; sys.stdout.buffer.write(b'\\xff\\xfe')"]
        )


def test_spawn_for_output_lines_with_args():
    lines = spawn_for_output_lines(sys.executable, "-c", "print('one'); print('two')")
    assert lines == ["one", "two"]


def test_spawn_for_output_lines_trims():
    lines = spawn_for_output_lines(f"{sys.executable} -c print(7)")
    assert lines == ["7"]


def test_parse_xmodmap_output():
    codes = parse_xmodmap_output(XMODMAP_SAMPLE)
    assert codes["Escape"] == 9
    assert codes["exclam"] == 10
    assert codes["1"] == 10
    assert codes["Return"] == 36
    assert codes["NoSymbol"] == 36
    assert 255 not in codes.values()


def test_parse_xmodmap_later_lines_win():
    codes = parse_xmodmap_output("keycode 1 = a\nkeycode 2 = a\n")
    assert codes == {"a": 2}


@pytest.mark.parametrize(
    "text",
    ["keycode\n", "keycode abc = a\n", "keycode 256 = a\n", "keycode -1 = a\n"],
)
def test_parse_xmodmap_invalid(text):
    with pytest.raises(PenroseError):
        parse_xmodmap_output(text)


def test_keycodes_from_xmodmap_uses_command_output():
    completed = subprocess.CompletedProcess(
        ["xmodmap", "-pke"], 0, stdout=XMODMAP_SAMPLE.encode()
    )
    with mock.patch("tilekit.helpers.subprocess.run", return_value=completed) as run:
        codes = keycodes_from_xmodmap()
    assert run.call_args.args[0] == ["xmodmap", "-pke"]
    assert codes == parse_xmodmap_output(XMODMAP_SAMPLE)


def test_keycodes_from_xmodmap_missing_binary():
    with mock.patch(
        "tilekit.helpers.subprocess.run", side_effect=FileNotFoundError("xmodmap")
    ):
        with pytest.raises(PenroseError):
            keycodes_from_xmodmap()


def test_keycodes_from_xmodmap_invalid_utf8():
    completed = subprocess.CompletedProcess(["xmodmap", "-pke"], 0, stdout=b"\xff")
    with mock.patch("tilekit.helpers.subprocess.run", return_value=completed):
        with pytest.raises(PenroseError):
            keycodes_from_xmodmap()


def test_logging_error_handler_logs(caplog):
    handler = logging_error_handler()
    with caplog.at_level(logging.ERROR, logger="tilekit"):
        handler(PenroseError("something broke"))
    assert "something broke" in caplog.text
    assert caplog.records[-1].levelno == logging.ERROR