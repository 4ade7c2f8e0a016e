# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import collections

from teststub import asserts
from teststub.common import log


class StubCall(collections.namedtuple("StubCall", "func_name args kwargs")):
    """The name of a called function, and the arguments passed to it.

    args are in the same order as the function's positional parameters.
    Two calls are equal if their names and arguments are equal; a StubCall
    is also equal to the plain (func_name, args, kwargs) tuple.
    """

    __slots__ = ()

    def __new__(cls, func_name, args=(), kwargs=None):
        return super(StubCall, cls).__new__(
            cls, func_name, tuple(args), dict(kwargs or {})
        )

    def __repr__(self):
        params = [repr(arg) for arg in self.args]
        params += ["{0}={1!r}".format(k, v) for k, v in self.kwargs.items()]
        return "{0}({1})".format(self.func_name, ", ".join(params))


class Stub(object):
    """A testing double that records calls to stubbed methods, and raises
    the errors that the test sets up for them.

    A Stub is meant to be an attribute of a fake, which defines the methods
    to track::

        class FakeConnection(object):
            def __init__(self, stub=None):
                self.stub = stub or Stub()
                self.response = None

            def send(self, request):
                self.stub.add_call("send", request)
                self.stub.maybe_err()
                return self.response

    By accepting a stub argument, several fakes can share one Stub, which
    then captures the calls made on all of them in absolute order.

    Errors are set via set_errors(). Each stubbed method that can fail
    calls maybe_err(), which raises the next error in sequence, if any.
    Methods that must never fail call pop_no_err() instead.

    After the code under test has run, the calls are validated with
    check_calls(), check_call(), check_call_names(), check_no_calls(),
    and check_errors().
    """

    def __init__(self):
        self._calls = []
        self._errors = []
        self._returns = {}

    def __repr__(self):
        return "Stub(calls={0!r}, errors={1!r})".format(self._calls, self._errors)

    @property
    def calls(self):
        """The calls recorded so far, in the order in which they were made.
        """
        return list(self._calls)

    @property
    def errors(self):
        """The errors that have not been consumed yet.
        """
        return list(self._errors)

    # Before execution.

    def set_errors(self, *errors):
        """Sets the sequence of errors for successive calls.

        Each call to maybe_err() or pop_no_err() - thus each stubbed
        method call - pops an error off the front. A None in the sequence
        lets the corresponding call succeed, so leading Nones allow some
        calls to pass before a failure.
        """
        self._errors = list(errors)
        log.debug("Stub errors set to {0!r}", self._errors)

    def set_return(self, name, value):
        """Sets the value returned by functions made with func(name).
        """
        self._returns[name] = value

    # During execution.

    def add_call(self, name, *args, **kwargs):
        """Records a call to a stubbed function. All stubbed functions
        should call add_call() before anything else.
        """
        self.add_call_exact(name, args, kwargs)

    def add_call_exact(self, name, args, kwargs):
        call = StubCall(name, args, kwargs)
        self._calls.append(call)
        log.debug("Stub call #{0}: {1!r}", len(self._calls) - 1, call)

    def reset_calls(self):
        log.debug("Stub calls reset.")
        self._calls = []

    def _pop_error(self):
        if not self._errors:
            return None
        return self._errors.pop(0)

    def maybe_err(self):
        """Raises the next error in sequence, unless it is None or there
        are no errors left.
        """
        exc = self._pop_error()
        if exc is None:
            return
        log.debug("Stub raising {0!r}", exc)
        raise exc

    def pop_no_err(self):
        """Pops off the next error without raising it. Fails the test if
        that error is not None.

        For stubbed methods that cannot fail.
        """
        exc = self._pop_error()
        if exc is not None:
            asserts.fail("the next error was unexpectedly not None: {0!r}".format(exc))

    def func(self, name):
        """Returns a function that records its calls as name, raises the
        next error via maybe_err(), and otherwise returns the value set
        by set_return(name).

        The function can be injected wherever a callable is expected, or
        patched over a module attribute.
        """

        def stubbed(*args, **kwargs):
            self.add_call_exact(name, args, kwargs)
            self.maybe_err()
            return self._returns.get(name)

        stubbed.__name__ = stubbed.__qualname__ = name
        return stubbed

    # After execution.

    def check_calls(self, expected):
        """Checks that the history of calls on the stub matches expected.
        """
        expected = [StubCall(*call) for call in expected]
        asserts.deep_equal(self._calls, expected)

    def check_call(self, index, func_name, *args, **kwargs):
        """Checks the call recorded at index against the given values.
        Fails if index is out of bounds, which includes any negative index.
        """
        asserts.not_below(index, 0)
        asserts.below(index, len(self._calls))
        asserts.deep_equal(self._calls[index], StubCall(func_name, args, kwargs))

    def check_call_names(self, *expected):
        names = [call.func_name for call in self._calls]
        asserts.deep_equal(names, list(expected))

    def check_no_calls(self):
        asserts.equal(len(self._calls), 0, "unexpected calls: {0!r}".format(self._calls))

    def check_errors(self):
        """Checks that all errors set via set_errors() have been consumed.
        """
        asserts.equal(
            len(self._errors), 0, "unconsumed errors: {0!r}".format(self._errors)
        )
