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

import json
import asyncio
import traceback

import treeserve
import treeserve.common

HOST = "127.0.0.1"
""" The default host (address) to which the server is
going to be bound in case no other is provided """

PORT = 8080
""" The default port to be used by the server in case
no other value is provided (or configured) """

HEAD_LIMIT = 65536
""" The maximum size in bytes of the head (request line plus
headers) of a request, bigger heads are considered invalid """

BODY_LIMIT = 65536
""" The maximum size in bytes of the payload accepted (and
discarded) for a read request, bigger ones are refused """

UNAVAILABLE_DATA = b"Service unavailable"
""" The body that is sent in case the request has not been
accepted (refused) by the current handler """

class HTTPServer(treeserve.Base):
    """
    Simple asyncio based HTTP/1.1 server implementation, that
    parses the incoming requests into request descriptors and
    writes back the response descriptors returned by the (to
    be overridden) request handler.

    Only the read oriented methods (GET and HEAD) are accepted
    and every response is sent with a proper content length so
    that keep alive connections are always possible.
    """

    def __init__(self, host = HOST, port = PORT, *args, **kwargs):
        treeserve.Base.__init__(self, *args, **kwargs)
        self.host = host
        self.port = port
        self.server = None

    def serve(self, host = None, port = None, env = False):
        # processes the various default values taking into account if
        # the environment variables are meant to be processed for the
        # current context (default values are processed accordingly)
        host = self.get_env("HOST", host) if env else host
        port = self.get_env("PORT", port, cast = int) if env else port
        if env: self.level = self.get_env("LEVEL", self.level)
        if env: self.logging = self.get_env(
            "LOGGING",
            self.logging,
            cast = lambda v: v if isinstance(v, list) else json.loads(v)
        )
        self.env = env

        # loads the logging infra-structure and then runs the main
        # (blocking) loop of the server until an interruption occurs
        self.load_logging(self.level)
        try: asyncio.run(self.main(host = host, port = port))
        except KeyboardInterrupt: self.info("Interrupted, finishing service ...")
        finally: self.unload_logging()

    async def main(self, host = None, port = None):
        server = await self.start(host = host, port = port)
        async with server: await server.serve_forever()

    async def start(self, host = None, port = None):
        if not self.logger: self.load_logging(self.level)
        self.host = host or self.host
        self.port = self.port if port == None else port
        self.on_serve()
        self.server = await asyncio.start_server(
            self.on_connection,
            self.host,
            self.port,
            limit = HEAD_LIMIT
        )
        socket = self.server.sockets[0]
        self.port = socket.getsockname()[1]
        self.info("Serving %s on %s:%d ..." % (self.name, self.host, self.port))
        return self.server

    async def close(self):
        if not self.server: return
        self.server.close()
        await self.server.wait_closed()
        self.server = None
        self.info("Finished serving %s" % self.name)

    def on_serve(self):
        pass

    async def on_request(self, request):
        return treeserve.NotFoundResponse()

    async def on_connection(self, reader, writer):
        address = writer.get_extra_info("peername")
        self.debug("Connection opened from %s" % (address,))
        try:
            while True:
                keep_alive = await self.on_data(reader, writer)
                if not keep_alive: break
        except (ConnectionError, asyncio.IncompleteReadError) as exception:
            self.debug("Connection from %s dropped - %s" % (address, exception))
        except Exception as exception:
            self.warning("Problem in connection from %s - %s" % (address, exception))
            self.log_stack(method = self.warning)
        finally:
            writer.close()
            await self._wait_closed(writer)
            self.debug("Connection closed from %s" % (address,))

    async def on_data(self, reader, writer):
        # reads the complete head of the request, in case the connection
        # has been closed before any data is received this is considered
        # to be a clean close of the (keep alive) connection
        try: data = await reader.readuntil(b"\r\n\r\n")
        except asyncio.IncompleteReadError as exception:
            if exception.partial: self.debug("Incomplete request head received")
            return False
        except asyncio.LimitOverrunError:
            await self.send_error(writer, 400, "Request head too large")
            return False

        # tries to parse the head of the request and in case there's an
        # error on such process sends the error back and closes
        try:
            method, path, version, headers = treeserve.common.parse_request(data)
            length = int(headers.get("content-length", "0") or "0")
            if length < 0: raise ValueError("Negative content length")
        except treeserve.ParserError as exception:
            await self.send_error(writer, exception.code, str(exception))
            return False
        except ValueError:
            await self.send_error(writer, 400, "Invalid content length")
            return False

        keep_alive = treeserve.common.is_keep_alive(version, headers)
        version = version if version == treeserve.common.HTTP_10 else\
            treeserve.common.HTTP_11

        # the method is verified before any payload is read, as the
        # payload of a refused request is never read the connection
        # can not be re-used and must be closed after the response
        if not method in treeserve.common.METHODS:
            response = treeserve.Response(
                code = 405,
                headers = {
                    "allow" : ", ".join(treeserve.common.METHODS),
                    "content-type" : "text/plain"
                },
                data = b"Method not allowed"
            )
            await self.send_response(
                writer,
                response,
                version = version,
                keep_alive = False
            )
            return False

        # discards the (bounded) payload sent with a read request so
        # that the next request of the connection is properly parsed
        if length > BODY_LIMIT:
            await self.send_error(writer, 400, "Request body too large")
            return False
        if length > 0: await reader.readexactly(length)

        request = self.build_request(method, path, headers)
        self.debug("Handling request #%d %s %s" % (request.id, method, path))

        try:
            response = await self.on_request(request)
        except Exception as exception:
            self.warning("Problem handling request - %s" % str(exception))
            self.log_stack(method = self.warning)
            response = self.build_exception(exception)

        if response == None:
            response = treeserve.Response(
                code = 503,
                headers = {"content-type" : "text/plain"},
                data = UNAVAILABLE_DATA
            )

        await self.send_response(
            writer,
            response,
            method = method,
            version = version,
            keep_alive = keep_alive
        )
        return keep_alive

    def build_request(self, method, path, headers):
        host = headers.get("host", None) or "%s:%d" % (self.host, self.port)
        origin = "http://" + host
        is_absolute = path.startswith(("http://", "https://"))
        url = path if is_absolute else origin + path
        return treeserve.Request(
            url,
            headers = headers,
            method = method,
            origin = origin
        )

    def build_exception(self, exception):
        lines = ["Problem handling request - %s" % str(exception)]
        if self.is_devel(): lines.extend(traceback.format_exc().splitlines())
        data = "\n".join(lines).encode("utf-8")
        return treeserve.Response(
            code = 500,
            headers = {"content-type" : "text/plain"},
            data = data
        )

    async def send_error(self, writer, code, message):
        response = treeserve.Response(
            code = code,
            headers = {"content-type" : "text/plain"},
            data = message.encode("utf-8")
        )
        await self.send_response(writer, response, keep_alive = False)

    async def send_response(
        self,
        writer,
        response,
        method = "GET",
        version = treeserve.common.HTTP_11,
        keep_alive = True
    ):
        # creates the map of headers to be sent to the client making
        # sure that the length of the contents is always defined so
        # that the connection may be re-used (keep alive)
        headers = dict(response.headers)
        headers["server"] = treeserve.IDENTIFIER
        headers["connection"] = "keep-alive" if keep_alive else "close"
        if not "content-length" in headers:
            headers["content-length"] = "%d" % response.get_length()

        head = treeserve.common.build_head(response.code, headers, version = version)
        writer.write(head)

        # streams the contents of the response to the client, taking
        # into account that HEAD requests never carry any payload
        if not method == "HEAD":
            async for chunk in response.chunks():
                writer.write(chunk)
                await writer.drain()
        await writer.drain()

    async def _wait_closed(self, writer):
        try: await writer.wait_closed()
        except ConnectionError as exception:
            self.debug("Problem closing connection - %s" % exception)
