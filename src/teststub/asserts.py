# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Assertion primitives used by Stub to check recorded history.

These delegate to the stock unittest.TestCase assertion methods, so failures
are plain AssertionError instances with unittest's structural diffs, which
any test runner reports as a test failure. A message, when given, replaces
the default one.

Deep equality is Python equality: it recurses through tuples, lists and dicts,
and relies on __eq__ for everything else. Functions, opaque handles and cyclic
structures are not supported as compared values.
"""

import unittest

from teststub.common import log


class _Checker(unittest.TestCase):
    maxDiff = None
    longMessage = False

    def runTest(self):
        pass


_checker = _Checker()


def deep_equal(actual, expected, message=None):
    try:
        _checker.assertEqual(actual, expected, message)
    except AssertionError:
        raise log.exception("Deep equality check failed.")


def equal(actual, expected, message=None):
    try:
        _checker.assertEqual(actual, expected, message)
    except AssertionError:
        raise log.exception("Equality check failed.")


def below(value, bound, message=None):
    try:
        _checker.assertLess(value, bound, message)
    except AssertionError:
        raise log.exception("Bound check failed.")


def not_below(value, bound, message=None):
    try:
        _checker.assertGreaterEqual(value, bound, message)
    except AssertionError:
        raise log.exception("Bound check failed.")


def fail(message):
    try:
        _checker.fail(message)
    except AssertionError:
        raise log.exception("Check failed.")
