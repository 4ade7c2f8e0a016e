# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import io
import pytest

import teststub
from teststub import Stub
from teststub.common import log, options, timestamp


class BadRepr(object):
    def __repr__(self):
        raise RuntimeError("no repr")


class CountingRepr(object):
    count = 0

    def __repr__(self):
        type(self).count += 1
        return "CountingRepr()"


@pytest.fixture
def stderr(monkeypatch):
    output = io.StringIO()
    monkeypatch.setattr(log, "stderr", output)
    monkeypatch.setattr(log, "stderr_levels", {"debug"})
    monkeypatch.setattr(log, "file", None)
    return output


@pytest.fixture
def log_file(monkeypatch, tmp_path):
    monkeypatch.setattr(log, "file", None)
    monkeypatch.setattr(log, "stderr_levels", set())
    filename = tmp_path / "teststub.log"
    log.to_file(str(filename))
    try:
        yield filename
    finally:
        log.close()


def test_levels_to_stderr(stderr):
    log.info("hidden {0}", 1)
    log.debug("shown {0}", 2)

    output = stderr.getvalue()
    assert "hidden" not in output
    assert output.startswith("D+")
    assert "shown 2" in output


def test_multiline_indent(stderr):
    log.debug("first\nsecond")

    first, second = stderr.getvalue().split("\n")[:2]
    prefix = first[: first.index("first")]
    assert second == " " * len(prefix) + "second"


def test_disabled_level_is_not_formatted(monkeypatch):
    monkeypatch.setattr(log, "stderr_levels", set())
    monkeypatch.setattr(log, "file", None)
    CountingRepr.count = 0

    log.debug("{0!r}", CountingRepr())

    assert CountingRepr.count == 0


def test_unformattable_record(stderr):
    log.debug("value is {0!r}", BadRepr())

    output = stderr.getvalue()
    assert "value is {0!r}" in output
    assert "could not be formatted: RuntimeError" in output


def test_exception_returns_exception(stderr):
    try:
        raise ValueError("oops")
    except ValueError:
        exc = log.exception("Handling request")

    assert isinstance(exc, ValueError)
    output = stderr.getvalue()
    assert "Handling request" in output
    assert "Traceback" in output
    assert "ValueError: oops" in output


def test_to_file(log_file):
    stub = Stub()
    stub.add_call("send", "x")
    log.close()

    text = log_file.read_text(encoding="utf-8")
    assert "teststub " + teststub.__version__ in text
    assert "send('x')" in text


def test_to_file_without_log_dir(monkeypatch):
    monkeypatch.setattr(log, "file", None)
    monkeypatch.setattr(options, "log_dir", None)

    log.to_file()

    assert log.file is None


def test_to_file_log_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(log, "file", None)
    monkeypatch.setattr(options, "log_dir", str(tmp_path))

    log.to_file()
    try:
        assert log.file is not None
    finally:
        log.close()

    assert len(list(tmp_path.glob("teststub-*.log"))) == 1


def test_close_is_idempotent(log_file):
    log.close()
    log.close()

    assert log.file is None


def test_timestamp_reset():
    timestamp.reset()
    t = timestamp.current()

    assert 0 <= t < 5
