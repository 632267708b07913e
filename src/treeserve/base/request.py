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

import time
import urllib.parse

NOT_FOUND_DATA = b"404 Not Found"
""" The body used for the not found responses for which
no custom (404 file based) contents have been found """

class Request(object):
    """
    Abstract request structure used to represent an incoming
    request (URL plus headers) that is going to be resolved
    against the served tree.

    The header names are lower cased on construction so that
    their retrieval is case insensitive.
    """

    IDENTIFIER = 0x0000
    """ The global class identifier value that is going to
    be used when assigning new values to the request """

    def __init__(
        self,
        url,
        headers = None,
        method = "GET",
        mode = None,
        origin = None
    ):
        headers = headers or dict()
        self.id = self.__class__._generate_id()
        self.time = time.time()
        self.url = url
        self.parts = urllib.parse.urlsplit(url)
        self.headers = dict((key.lower(), value) for key, value in headers.items())
        self.method = method.upper()
        self.mode = mode or self.headers.get("sec-fetch-mode", None)
        self.origin = origin

    @classmethod
    def _generate_id(cls):
        cls.IDENTIFIER = (cls.IDENTIFIER + 1) & 0xffff
        return cls.IDENTIFIER

    @property
    def query(self):
        return self.parts.query

    @property
    def search(self):
        return "?" + self.parts.query if self.parts.query else ""

    @property
    def range(self):
        return self.headers.get("range", None)

    def get_path(self, decode = True):
        path = self.parts.path or "/"
        if not decode: return path
        return urllib.parse.unquote(path)

    def get_origin(self):
        if not self.parts.netloc: return None
        return "%s://%s" % (self.parts.scheme, self.parts.netloc)

    def is_local(self):
        """
        Verifies if the request targets the origin of the host
        that is serving it, requests with a relative URL or for
        which no host origin is known are considered local.

        :rtype: bool
        :return: If the request should be handled by the host.
        """

        origin = self.get_origin()
        if not origin or not self.origin: return True
        return origin.lower() == self.origin.lower()

class Response(object):
    """
    Top level abstract representation of a response to
    be sent based on a previously resolved request, the
    concrete kind of response is defined by the sub class.

    Header names are always lower cased and the values are
    string based ones, ready to be sent to the client.
    """

    KIND = None
    """ The kind of response as a string, to be used for
    simple identification of the response descriptor """

    def __init__(self, code = 200, headers = None, data = None):
        self.code = code
        self.headers = headers or dict()
        self.data = data

    async def chunks(self):
        if not self.data: return
        yield self.data

    async def read(self):
        buffer = []
        async for chunk in self.chunks(): buffer.append(chunk)
        return b"".join(buffer)

    def get_kind(self):
        return self.__class__.KIND

    def get_length(self):
        length = self.headers.get("content-length", None)
        if not length == None: return int(length)
        return len(self.data) if self.data else 0

class FileResponse(Response):

    KIND = "file"

    def __init__(self, file, code = 200, headers = None):
        Response.__init__(self, code = code, headers = headers)
        self.file = file

    async def chunks(self):
        async for chunk in self.file.stream(): yield chunk

class RedirectResponse(Response):

    KIND = "redirect"

    def __init__(self, location, code = 302):
        Response.__init__(
            self,
            code = code,
            headers = {
                "location" : location,
                "content-length" : "0"
            }
        )
        self.location = location

class ListingResponse(Response):

    KIND = "listing"

    def __init__(self, html, encoding = "utf-8"):
        data = html.encode(encoding)
        Response.__init__(
            self,
            headers = {
                "content-type" : "text/html",
                "content-length" : "%d" % len(data)
            },
            data = data
        )
        self.html = html

class NotFoundResponse(Response):
    """
    Not found response that is either going to use the
    contents of a custom (file based) page or the default
    and minimal body in case no file is provided.
    """

    KIND = "not_found"

    def __init__(self, file = None):
        headers = dict()
        if file:
            if file.type: headers["content-type"] = file.type
            headers["content-length"] = "%d" % file.size
        else:
            headers["content-type"] = "text/plain"
            headers["content-length"] = "%d" % len(NOT_FOUND_DATA)
        Response.__init__(
            self,
            code = 404,
            headers = headers,
            data = None if file else NOT_FOUND_DATA
        )
        self.file = file

    async def chunks(self):
        if not self.file:
            yield self.data
            return
        async for chunk in self.file.stream(): yield chunk

    def is_custom(self):
        return True if self.file else False
