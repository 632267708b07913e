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

import asyncio
import functools

def async_test(function):
    """
    Decorator that turns a coroutine based test method into
    a plain callable that runs it until completion in a new
    event loop, so that it may be used by unittest.

    :type function: Function
    :param function: The coroutine function (test method)
    that is going to be executed in a fresh loop.
    :rtype: Function
    :return: The decorated (synchronous) function.
    """

    @functools.wraps(function)
    def decorator(*args, **kwargs):
        return asyncio.run(function(*args, **kwargs))

    return decorator

async def blocking(callable, *args, **kwargs):
    """
    Runs the provided (blocking) callable in the default executor
    of the current running loop, suspending the calling coroutine
    until the result is available.

    This is the primitive that should be used for every file
    system operation so that the loop is never stalled.

    :type callable: Function
    :param callable: The blocking callable to be executed.
    :rtype: Object
    :return: The result of the callable execution.
    """

    loop = asyncio.get_running_loop()
    partial = functools.partial(callable, *args, **kwargs)
    return await loop.run_in_executor(None, partial)
