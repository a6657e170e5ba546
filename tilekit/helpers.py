"""Helpers for starting external programs and reading the system keymap."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence

from tilekit.data_types import PenroseError

log = logging.getLogger("tilekit")

ErrorHandler = Callable[[Exception], None]
CodeMap = dict[str, int]

_KEYCODE_MAX = 255


def _split_command(cmd: str) -> list[str]:
    parts = cmd.split()
    if not parts:
        raise PenroseError(f"unable to spawn an empty command: {cmd!r}")
    return parts


def _start(argv: list[str], **kwargs) -> subprocess.Popen:
    try:
        return subprocess.Popen(argv, **kwargs)
    except OSError as exc:
        raise PenroseError(f"unable to spawn {argv[0]!r}: {exc}") from exc


def _read_output(argv: list[str]) -> str:
    log.info("spawning subprocess for output: %s", argv)
    try:
        result = subprocess.run(argv, stdout=subprocess.PIPE, check=False)
    except OSError as exc:
        raise PenroseError(f"unable to spawn {argv[0]!r}: {exc}") from exc
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PenroseError(f"invalid utf-8 output from {argv[0]!r}: {exc}") from exc


def spawn(cmd: str) -> subprocess.Popen:
    """Start ``cmd`` (split on whitespace) with stdout and stderr discarded.

    Returns the started process. Raises PenroseError if it can not be started.
    """
    return _start(
        _split_command(cmd),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


def spawn_with_args(cmd: str, args: Sequence[str]) -> subprocess.Popen:
    """Start ``cmd`` with explicit ``args``, discarding stdout and stderr.

    Returns the started process. Raises PenroseError if it can not be started.
    """
    return _start(
        [cmd, *args],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


def spawn_for_output(cmd: str) -> str:
    """Run ``cmd`` (split on whitespace) and return everything it wrote to stdout."""
    return _read_output(_split_command(cmd))


def spawn_for_output_with_args(cmd: str, args: Sequence[str]) -> str:
    """Run ``cmd`` with explicit ``args`` and return everything it wrote to stdout."""
    return _read_output([cmd, *args])


def spawn_for_output_lines(cmd: str, *args: str) -> list[str]:
    """Run a command and return its trimmed output split into lines.

    With no ``args`` the command string is split on whitespace; otherwise
    ``args`` are passed to ``cmd`` as given.
    """
    output = spawn_for_output_with_args(cmd, args) if args else spawn_for_output(cmd)
    return output.strip().split("\n")


def parse_xmodmap_output(text: str) -> CodeMap:
    """Build a key name to key code map from the output of ``xmodmap -pke``.

    Each line has the form ``keycode <code> = <names ...>``. Raises PenroseError
    if a line does not follow that form.
    """
    codes: CodeMap = {}
    for line in text.splitlines():
        words = line.split()
        if len(words) < 2:
            raise PenroseError("unexpected output format from xmodmap -pke")
        try:
            code = int(words[1])
        except ValueError as exc:
            raise PenroseError(f"invalid key code in xmodmap output: {words[1]!r}") from exc
        if not 0 <= code <= _KEYCODE_MAX:
            raise PenroseError(f"key code out of range in xmodmap output: {code}")
        codes.update((name, code) for name in words[3:])
    return codes


def keycodes_from_xmodmap() -> CodeMap:
    """Dump the system keymap with ``xmodmap -pke`` and parse it.

    Raises PenroseError if xmodmap can not be run or its output is invalid.
    """
    try:
        result = subprocess.run(["xmodmap", "-pke"], stdout=subprocess.PIPE, check=False)
    except OSError as exc:
        raise PenroseError(f"unable to fetch keycodes via xmodmap: {exc}") from exc
    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PenroseError(f"invalid utf8 from xmodmap: {exc}") from exc
    return parse_xmodmap_output(text)


def logging_error_handler() -> ErrorHandler:
    """Return an error handler that writes each error to the log."""

    def handle(error: Exception) -> None:
        log.error("%s", error)

    return handle