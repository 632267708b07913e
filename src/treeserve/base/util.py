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

import re

from . import errors

CAMEL_REGEX = re.compile("(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
""" Matches the (empty) boundaries between the words of a
camel cased value, including the end of an acronym """

def camel_to_underscore(camel, separator = "_"):
    """
    Converts a camel cased value (eg: `HTTPServer`) into its
    lower cased and separated form (eg: `http_server`).

    :type camel: String
    :param camel: The camel cased value to be converted.
    :type separator: String
    :param separator: The token placed between the words.
    :rtype: String
    :return: The converted (lower cased) value.
    """

    return CAMEL_REGEX.sub(separator, camel).lower()

def verify(condition, message = None, exception = None):
    """
    Raises the provided exception class (or an assertion error)
    with the given message in case the condition does not hold.

    :type condition: bool
    :param condition: The condition that is expected to hold.
    :type message: String
    :param message: The message of the exception to be raised.
    :type exception: Class
    :param exception: The class of the exception to be raised,
    defaults to the assertion error of the project.
    """

    if condition: return
    exception = exception or errors.AssertionError
    raise exception(message or "Assertion Error")
