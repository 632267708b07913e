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

import treeserve

from . import util

HTTP_10 = "HTTP/1.0"
""" The version string value for the 1.0 version of
the HTTP protocol """

HTTP_11 = "HTTP/1.1"
""" The version string value for the 1.1 version of
the HTTP protocol (the default one) """

METHODS = ("GET", "HEAD")
""" The sequence of methods that are accepted for the
resolution of a request, no write operations exist """

CODE_STRINGS = {
    200 : "OK",
    206 : "Partial Content",
    302 : "Found",
    400 : "Bad Request",
    404 : "Not Found",
    405 : "Method Not Allowed",
    500 : "Internal Server Error",
    503 : "Service Unavailable"
}
""" Dictionary associating the error code as integers
with the official string representation for the error """

RANGE_REGEX = re.compile(r"bytes=(\d+)-(\d*)")
""" The regular expression used to match the (single) byte
range values, only the `begin-end` and `begin-` forms """

def parse_range(range_s, size):
    """
    Parses the provided range header value into a tuple with
    the begin (inclusive) and end (exclusive) offsets, note that
    the end offset of the header is inclusive (as in HTTP) and not
    exclusive, so that `bytes=10-19` spans ten bytes and not nine.

    A missing end value (or an end value of zero) means that the
    range spans until the end of the file, and the end offset is
    always clamped to the size of the file.

    :type range_s: String
    :param range_s: The value of the range header to be parsed.
    :type size: int
    :param size: The total size of the file in bytes.
    :rtype: Tuple
    :return: The begin and end offsets or an invalid value in
    case the range value is not valid (to be ignored).
    """

    if not range_s: return None
    match = RANGE_REGEX.search(range_s)
    if not match: return None
    begin_s, end_s = match.groups()
    begin = int(begin_s)
    end = int(end_s) + 1 if end_s and int(end_s) else size
    end = min(end, size)
    return (begin, end)

def content_range(begin, end, size):
    return "bytes %d-%d/%d" % (begin, end - 1, size)

def parse_request(data, encoding = "latin-1"):
    """
    Parses the head (request line plus headers) of an HTTP
    request returning the method, the path, the version and
    the dictionary of (lower cased) headers.

    :type data: String
    :param data: The bytes of the head of the request, may
    or may not include the final empty line.
    :rtype: Tuple
    :return: The method, path, version and headers.
    """

    try: data = data.decode(encoding)
    except UnicodeDecodeError: raise treeserve.ParserError("Invalid encoding")

    lines = data.rstrip("\r\n").split("\r\n")
    line = lines[0]

    values = line.split(" ")
    if not len(values) == 3:
        raise treeserve.ParserError("Invalid request line '%s'" % line)
    method, path, version = values
    if not version.startswith("HTTP/"):
        raise treeserve.ParserError("Invalid version '%s'" % version)

    headers = dict()
    for line in lines[1:]:
        if not line: continue
        if not ":" in line:
            raise treeserve.ParserError("Invalid header line '%s'" % line)
        name, value = line.split(":", 1)
        name = util.header_down(name.strip())
        value = value.strip()
        if name in headers: headers[name] += ", " + value
        else: headers[name] = value

    return (method.upper(), path, version.upper(), headers)

def build_head(code, headers, version = HTTP_11, encoding = "latin-1"):
    code_s = CODE_STRINGS.get(code, "Unknown")
    lines = ["%s %d %s" % (version, code, code_s)]
    for name, value in headers.items():
        lines.append("%s: %s" % (util.header_up(name), value))
    lines.append("")
    lines.append("")
    head = "\r\n".join(lines)
    return head.encode(encoding, "replace")

def is_keep_alive(version, headers):
    connection = headers.get("connection", "").lower()
    if connection == "close": return False
    if connection == "keep-alive": return True
    return version == HTTP_11
