# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""A call-recording test double for verifying interactions with collaborators.

Typical use is as an attribute of a fake that stands in for a real object::

    from teststub import Stub, StubCall

    class FakeConnection(object):
        def __init__(self, stub=None):
            self.stub = stub or Stub()
            self.response = None

        def send(self, request):
            self.stub.add_call("send", request)
            self.stub.maybe_err()
            return self.response
"""

__all__ = ["__version__", "Stub", "StubCall"]

__version__ = "1.0.0"

# Docstrings for public API members must be formatted according to PEP 8 - no more
# than 72 characters per line! - and must be readable when retrieved via help().

from teststub.stub import Stub, StubCall  # noqa
