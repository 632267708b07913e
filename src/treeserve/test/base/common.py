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
import logging
import tempfile
import unittest
import unittest.mock
import logging.handlers

import treeserve

class BaseTest(unittest.TestCase):

    def test_get_id(self):
        base = treeserve.Base(name = "FileServer")

        self.assertEqual(base.get_id(unique = False), "treeserve-file_server")
        self.assertEqual(base.get_id().startswith("treeserve-file_server-"), True)

    def test_level(self):
        base = treeserve.Base()

        self.assertEqual(base._level(logging.INFO), logging.INFO)
        self.assertEqual(base._level("DEBUG"), logging.DEBUG)
        self.assertEqual(base._level("SILENT"), treeserve.SILENT)
        self.assertEqual(base._level(None), None)

    def test_logging(self):
        base = treeserve.Base(name = "LoggingBase", level = logging.WARNING)
        base.load_logging(base.level)
        try:
            self.assertNotEqual(base.logger, None)
            self.assertEqual(base.logger.level, logging.WARNING)
            self.assertEqual(base.is_debug(), False)
            self.assertEqual(base.is_devel(), False)

            base.level_logging("DEBUG")

            self.assertEqual(base.logger.level, logging.DEBUG)
            self.assertEqual(base.is_debug(), True)
        finally:
            base.unload_logging()

    def test_extra_logging(self):
        with tempfile.TemporaryDirectory() as path:
            log_path = os.path.join(path, "treeserve.log")
            base = treeserve.Base(
                name = "ExtraBase",
                logging = [
                    dict(name = "rotating", path = log_path, delay = True),
                    dict(name = "unknown")
                ]
            )
            base.load_logging(logging.INFO)
            try:
                self.assertEqual(len(base.handlers), 2)
                self.assertEqual(
                    isinstance(base.handlers[1], logging.handlers.RotatingFileHandler),
                    True
                )
                base.info("Hello World")
            finally:
                base.unload_logging()

            with open(log_path, "r") as file: contents = file.read()

        self.assertEqual("[INFO] Hello World" in contents, True)

    def test_get_env(self):
        base = treeserve.Base()
        with unittest.mock.patch.dict(treeserve.base.config.CONFIGS, BASE_PORT = "9090"):
            self.assertEqual(base.get_env("BASE_PORT", cast = int), 9090)
            self.assertEqual(base.get_env("BASE_PORT"), "9090")
            self.assertEqual(base.get_env("BASE_MISSING", 10), 10)

    def test_state(self):
        base = treeserve.Base()

        self.assertEqual(base.get_state(), None)

        base.set_state(1)

        self.assertEqual(base.get_state(), 1)

class UtilTest(unittest.TestCase):

    def test_camel_to_underscore(self):
        result = treeserve.camel_to_underscore("FileServer")
        self.assertEqual(result, "file_server")

        result = treeserve.camel_to_underscore("HTTPServer")
        self.assertEqual(result, "http_server")

    def test_verify(self):
        treeserve.verify(True)
        self.assertRaises(treeserve.AssertionError, treeserve.verify, False)
        self.assertRaises(
            treeserve.ParserError,
            treeserve.verify,
            False,
            exception = treeserve.ParserError
        )
