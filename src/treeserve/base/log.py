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

import logging
import logging.handlers

SILENT = logging.CRITICAL + 1
""" Level above every standard one, used to mute the
logger of a server (eg: under the tests) """

def rotating_handler(
    path = "treeserve.log",
    max_bytes = 1048576,
    max_log = 5,
    encoding = None,
    delay = False
):
    return logging.handlers.RotatingFileHandler(
        path,
        maxBytes = max_bytes,
        backupCount = max_log,
        encoding = encoding,
        delay = delay
    )

def smtp_handler(
    host = "localhost",
    port = 25,
    sender = "no-reply@treeserve.local",
    receivers = [],
    subject = "Treeserve logging",
    username = None,
    password = None,
    stls = False
):
    """
    Builds an handler that sends the log records by email,
    meant to be used with an high level (eg: `ERROR`) so that
    only the problems of the server are notified.

    :type host: String
    :param host: The hostname of the SMTP server.
    :type port: int
    :param port: The port of the SMTP server.
    :type receivers: List
    :param receivers: The email addresses of the receivers.
    :type stls: bool
    :param stls: If the STARTTLS extension should be used.
    :rtype: SMTPHandler
    :return: The SMTP logging handler.
    """

    credentials = (username, password) if username and password else None
    return logging.handlers.SMTPHandler(
        (host, port),
        sender,
        receivers,
        subject,
        credentials = credentials,
        secure = () if stls else None
    )
