#!/usr/bin/python
# -*- coding: utf-8 -*-

# Hive Treeserve System
# Copyright (c) 2008-2020 Hive Solutions Lda.
#
# This file is part of Hive Treeserve System.
#
# Hive Treeserve System is free software: you can redistribute it and/or modify
# it under the terms of the Apache License as published by the Apache
# Foundation, either version 2.0 of the License, or (at your option) any
# later version.
#
# Hive Treeserve System is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# Apache License for more details.
#
# You should have received a copy of the Apache License along with
# Hive Treeserve System. If not, see <http://www.apache.org/licenses/>.

__author__ = "João Magalhães <joamag@hive.pt>"
""" The author(s) of the module """

__version__ = "1.0.0"
""" The version of the module """

__revision__ = "$LastChangedRevision$"
""" The revision number of the module """

__date__ = "$LastChangedDate$"
""" The last change date of the module """

__copyright__ = "Copyright (c) 2008-2020 Hive Solutions Lda."
""" The copyright for the module """

__license__ = "Apache License, Version 2.0"
""" The license for the module """

import os
import setuptools

setuptools.setup(
    name = "treeserve",
    version = "1.0.0",
    author = "Hive Solutions Lda.",
    author_email = "development@hive.pt",
    description = "Treeserve System",
    license = "Apache License, Version 2.0",
    keywords = "treeserve http file server directory listing",
    url = "http://treeserve.hive.pt",
    zip_safe = False,
    packages = [
        "treeserve",
        "treeserve.adapters",
        "treeserve.base",
        "treeserve.common",
        "treeserve.extra",
        "treeserve.servers",
        "treeserve.test",
        "treeserve.test.adapters",
        "treeserve.test.base",
        "treeserve.test.common",
        "treeserve.test.extra",
        "treeserve.test.servers"
    ],
    test_suite = "treeserve.test",
    package_dir = {
        "" : os.path.normpath("src")
    },
    python_requires = ">=3.7",
    classifiers = [
        "Development Status :: 5 - Production/Stable",
        "Topic :: Utilities",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12"
    ]
)
