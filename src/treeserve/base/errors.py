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

class TreeserveError(RuntimeError):
    """
    Root of the error hierarchy of the project, every
    error raised by treeserve is a runtime error.
    """

    pass

class ParserError(TreeserveError):
    """
    Raised by the HTTP head parser for malformed requests,
    carries the status code to be sent back to the client.
    """

    def __init__(self, message = "Parsing error", code = 400):
        TreeserveError.__init__(self, message)
        self.code = code

class NotImplemented(TreeserveError):
    """
    Raised by the abstract methods of the base classes
    (adapters and handles) that must be overridden.
    """

    pass

class AssertionError(TreeserveError):
    """
    Raised by `verify()` when a runtime condition does
    not hold.
    """

    pass
