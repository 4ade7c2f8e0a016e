#!/usr/bin/env python

# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

import os
import os.path
import setuptools
import sys


sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))
import teststub

del sys.path[0]


with open("DESCRIPTION.md", "r") as fh:
    long_description = fh.read()


if __name__ == "__main__":
    setuptools.setup(
        name="teststub",
        version=teststub.__version__,
        description="A call-recording, error-injecting test double for unit tests",  # noqa
        long_description=long_description,
        long_description_content_type="text/markdown",
        license="MIT",
        author="Microsoft Corporation",
        python_requires=">=3.8",
        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Topic :: Software Development :: Testing",
            "Operating System :: OS Independent",
            "License :: OSI Approved :: MIT License",
        ],
        package_dir={"": "src"},
        packages=setuptools.find_namespace_packages(where="src", include=["teststub*"]),
        extras_require={
            "tests": ["pytest", "pytest-timeout"],
        },
    )
