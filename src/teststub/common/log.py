# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Activity log for stubs, written to stderr and/or a file.

Records routinely include repr() of stubbed call arguments, which is arbitrary
code under test. Hence a record is only formatted when some sink takes its
level, and logging never raises into the stub operation that logs.
"""

import functools
import io
import os
import sys
import threading
import traceback

import teststub
from teststub.common import options, timestamp


LEVELS = ("debug", "info")
"""Logging levels, lowest to highest importance.
"""

stderr = sys.__stderr__

stderr_levels = {
    level.strip() for level in options.log_stderr.split(",") if level.strip()
}
"""What should be logged to stderr.
"""

file_levels = set(LEVELS)
"""What should be logged to file, when it is not None.
"""

file = None
"""If not None, which file to log to. Set by to_file().
"""

timestamp_format = "09.3f"
"""Format spec used for timestamps. Can be changed to dial precision up or down.
"""


_lock = threading.Lock()


def is_enabled(level):
    return level in stderr_levels or (file is not None and level in file_levels)


def _render(level, text):
    prefix = "{0}+{1:{2}}: ".format(level[0].upper(), timestamp.current(), timestamp_format)
    lines = text.split("\n")
    return prefix + ("\n" + " " * len(prefix)).join(lines) + "\n\n"


def write(level, text):
    assert level in LEVELS
    if not is_enabled(level):
        return

    output = _render(level, text)
    with _lock:
        sinks = []
        if level in stderr_levels:
            sinks.append(stderr)
        if file is not None and level in file_levels:
            sinks.append(file)
        for sink in sinks:
            try:
                sink.write(output)
                sink.flush()
            except Exception:
                pass


def write_format(level, format_string, *args, **kwargs):
    if not is_enabled(level):
        return
    try:
        text = format_string.format(*args, **kwargs)
    except Exception as exc:
        text = "{0}\n(record could not be formatted: {1})".format(
            format_string, type(exc).__name__
        )
    write(level, text)


debug = functools.partial(write_format, "debug")
info = functools.partial(write_format, "info")


def exception(what):
    """Logs the exception being handled, with traceback, at debug level.

    Returns the exception object, so that a failed check can be logged and
    re-raised in one go::

        except AssertionError:
            raise log.exception("Bound check failed.")
    """

    exc = sys.exc_info()[1]
    if is_enabled("debug"):
        try:
            details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        except Exception:
            details = "(traceback unavailable)"
        write("debug", what + "\n\n" + details)
    return exc


def to_file(filename=None):
    """Starts logging all levels in file_levels to the specified file.

    If filename is None, the file is named teststub-<pid>.log and placed in
    options.log_dir; if that is not set either, nothing happens.
    """

    global file
    if file is not None:
        return

    if filename is None:
        if options.log_dir is None:
            return
        filename = os.path.join(options.log_dir, "teststub-{0}.log".format(os.getpid()))

    file = io.open(filename, "w", encoding="utf-8")
    info("teststub {0} on Python {1}", teststub.__version__, sys.version.split()[0])


def close():
    global file
    with _lock:
        if file is None:
            return
        try:
            file.close()
        finally:
            file = None
