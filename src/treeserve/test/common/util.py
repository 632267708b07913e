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

import unittest

import treeserve.common

class UtilTest(unittest.TestCase):

    def test_format_size(self):
        result = treeserve.common.format_size(0)
        self.assertEqual(result, "0B")

        result = treeserve.common.format_size(1)
        self.assertEqual(result, "1B")

        result = treeserve.common.format_size(1023)
        self.assertEqual(result, "1023B")

        result = treeserve.common.format_size(1024)
        self.assertEqual(result, "1.0k")

        result = treeserve.common.format_size(1536)
        self.assertEqual(result, "1.5k")

        result = treeserve.common.format_size(10752)
        self.assertEqual(result, "10.5k")

        result = treeserve.common.format_size(209715200)
        self.assertEqual(result, "200.0M")

        result = treeserve.common.format_size(1024 ** 3)
        self.assertEqual(result, "1.0G")

        result = treeserve.common.format_size(1024 ** 4)
        self.assertEqual(result, "1.0T")

        result = treeserve.common.format_size(1024 ** 5)
        self.assertEqual(result, "1.0P")

    def test_format_size_bytes(self):
        for value in range(0, 1024, 7):
            result = treeserve.common.format_size(value)
            self.assertEqual(result, "%dB" % value)

    def test_format_size_kilo(self):
        for value in range(1024, 1024 * 1024, 4099):
            result = treeserve.common.format_size(value)
            self.assertEqual(result.endswith("k"), True)
            self.assertEqual(result[:-1], "%.1f" % (value / 1024.0))

    def test_format_size_carry(self):
        result = treeserve.common.format_size(1024 * 1024 - 1)
        self.assertEqual(result, "1024.0k")

        result = treeserve.common.format_size(1024 ** 6)
        self.assertEqual(result, "1024.0P")

    def test_header_down(self):
        result = treeserve.common.header_down("Content-Type")
        self.assertEqual(result, "content-type")

    def test_header_up(self):
        result = treeserve.common.header_up("content-type")
        self.assertEqual(result, "Content-Type")
