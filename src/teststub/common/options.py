# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import os


log_dir = os.getenv("TESTSTUB_LOG_DIR")
"""If not None, stub activity is logged to a file named teststub-<pid>.log in
the specified directory, where <pid> is the return value of os.getpid().
"""

log_stderr = os.getenv("TESTSTUB_LOG_STDERR", "")
"""Comma-separated list of logging levels that are also written to stderr.
None by default.
"""
