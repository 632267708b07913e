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

class Observable(object):
    """
    Minimal event registry that associates event names with
    the sequence of handlers to be called when the event is
    triggered, handlers are called in registration order.

    Used by the servers to notify the lifecycle transitions
    (eg: `enable` and `disable` of the file server).
    """

    def __init__(self, *args, **kwargs):
        self._handlers = dict()

    def bind(self, name, method):
        handlers = self._handlers.setdefault(name, [])
        handlers.append(method)

    def trigger(self, name, *args, **kwargs):
        for method in list(self._handlers.get(name, [])): method(*args, **kwargs)
