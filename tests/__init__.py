# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""teststub tests
"""

import os
import pkgutil
import pytest

# Do not import anything from teststub until assert rewriting is enabled below!

root = os.path.dirname(os.path.abspath(__file__))


# This is only imported to ensure that the module is actually installed and the
# timeout setting in pytest.ini is active.
import pytest_timeout  # noqa


# We want pytest to rewrite asserts (for better error messages) in the test
# helpers, and in the fakes that the tests define.


def _register_assert_rewrite(modname):
    modname = str(modname)
    pytest.register_assert_rewrite(modname)


tests_submodules = pkgutil.iter_modules([root])
for _, submodule, _ in tests_submodules:
    submodule = str("{0}.{1}".format(__name__, submodule))
    _register_assert_rewrite(submodule)


# Now we can import these, and pytest will rewrite asserts in them.
from teststub.common import log  # noqa

# Shorter timestamps to match maximum test run time better.
log.timestamp_format = "06.3f"
