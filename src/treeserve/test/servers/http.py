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
import unittest

import treeserve
import treeserve.extra
import treeserve.common
import treeserve.servers
import treeserve.adapters

class BrokenFileObject(treeserve.adapters.FileObject):

    async def stream(self, buffer_size = treeserve.adapters.BUFFER_SIZE):
        yield b"part"
        raise FileNotFoundError("File removed while streaming")

class HTTPServerTest(unittest.TestCase):

    async def start(self, map = None):
        map = map or {
            "hello.txt" : "hello world",
            "docs" : {"index.html" : ("<html></html>", "text/html")}
        }
        self.server = treeserve.extra.FileServer(
            host = "127.0.0.1",
            port = 0,
            level = treeserve.SILENT
        )
        self.server.enable(treeserve.adapters.MemoryAdapter(map).get_root())
        await self.server.start()
        return self.server

    async def stop(self):
        await self.server.close()
        self.server.unload_logging()

    async def connect(self):
        return await asyncio.open_connection("127.0.0.1", self.server.port)

    async def receive(self, reader, method = "GET"):
        data = await reader.readuntil(b"\r\n\r\n")
        lines = data.decode("latin-1").rstrip("\r\n").split("\r\n")
        _version, code, _message = lines[0].split(" ", 2)
        headers = dict()
        for line in lines[1:]:
            name, value = line.split(":", 1)
            headers[name.strip().lower()] = value.strip()
        length = int(headers.get("content-length", "0"))
        if method == "HEAD": length = 0
        body = await reader.readexactly(length) if length else b""
        return int(code), headers, body

    async def request(self, data, method = "GET"):
        reader, writer = await self.connect()
        try:
            writer.write(data)
            await writer.drain()
            return await self.receive(reader, method = method)
        finally:
            writer.close()

    @treeserve.async_test
    async def test_get(self):
        await self.start()
        try:
            code, headers, body = await self.request(
                b"GET /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n"
            )
        finally:
            await self.stop()

        self.assertEqual(code, 200)
        self.assertEqual(headers["content-type"], "text/plain")
        self.assertEqual(headers["content-length"], "11")
        self.assertEqual(headers["server"], treeserve.IDENTIFIER)
        self.assertEqual(headers["connection"], "keep-alive")
        self.assertEqual(body, b"hello world")

    @treeserve.async_test
    async def test_range(self):
        await self.start()
        try:
            code, headers, body = await self.request(
                b"GET /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\nRange: bytes=6-10\r\n\r\n"
            )
        finally:
            await self.stop()

        self.assertEqual(code, 206)
        self.assertEqual(headers["content-range"], "bytes 6-10/11")
        self.assertEqual(headers["content-length"], "5")
        self.assertEqual(body, b"world")

    @treeserve.async_test
    async def test_head(self):
        await self.start()
        try:
            reader, writer = await self.connect()
            writer.write(b"HEAD /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n")
            code, headers, body = await self.receive(reader, method = "HEAD")
            writer.write(b"GET /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n")
            _code, _headers, next = await self.receive(reader)
            writer.close()
        finally:
            await self.stop()

        self.assertEqual(code, 200)
        self.assertEqual(headers["content-length"], "11")
        self.assertEqual(body, b"")
        self.assertEqual(next, b"hello world")

    @treeserve.async_test
    async def test_redirect(self):
        await self.start()
        try:
            code, headers, body = await self.request(
                b"GET /docs HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n"
            )
        finally:
            await self.stop()

        self.assertEqual(code, 302)
        self.assertEqual(headers["location"], "/docs/")
        self.assertEqual(headers["content-length"], "0")
        self.assertEqual(body, b"")

    @treeserve.async_test
    async def test_not_found(self):
        await self.start()
        try:
            code, headers, body = await self.request(
                b"GET /missing.txt HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n"
            )
        finally:
            await self.stop()

        self.assertEqual(code, 404)
        self.assertEqual(headers["content-type"], "text/plain")
        self.assertEqual(body, treeserve.NOT_FOUND_DATA)

    @treeserve.async_test
    async def test_keep_alive(self):
        await self.start()
        try:
            reader, writer = await self.connect()
            results = []
            for path in (b"/hello.txt", b"/docs/", b"/missing.txt"):
                writer.write(b"GET " + path + b" HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n")
                await writer.drain()
                results.append(await self.receive(reader))
            writer.close()
        finally:
            await self.stop()

        codes = [code for code, _headers, _body in results]
        self.assertEqual(codes, [200, 200, 404])
        self.assertEqual(results[1][2], b"<html></html>")

    @treeserve.async_test
    async def test_close(self):
        await self.start()
        try:
            reader, writer = await self.connect()
            writer.write(b"GET /hello.txt HTTP/1.0\r\n\r\n")
            await writer.drain()
            code, headers, body = await self.receive(reader)
            remaining = await reader.read()
            writer.close()
        finally:
            await self.stop()

        self.assertEqual(code, 200)
        self.assertEqual(headers["connection"], "close")
        self.assertEqual(body, b"hello world")
        self.assertEqual(remaining, b"")

    @treeserve.async_test
    async def test_method(self):
        await self.start()
        try:
            reader, writer = await self.connect()
            writer.write(b"POST /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\nContent-Length: 4\r\n\r\n")
            await writer.drain()
            code, headers, _body = await self.receive(reader)
            remaining = await reader.read()
            writer.close()
        finally:
            await self.stop()

        self.assertEqual(code, 405)
        self.assertEqual(headers["allow"], "GET, HEAD")
        self.assertEqual(headers["connection"], "close")
        self.assertEqual(remaining, b"")

    @treeserve.async_test
    async def test_method_payload(self):
        await self.start()
        try:
            code, headers, body = await asyncio.wait_for(
                self.request(
                    b"POST /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\n\
Content-Length: 500000000\r\n\r\n" + b"x" * 1024
                ),
                5.0
            )
        finally:
            await self.stop()

        self.assertEqual(code, 405)
        self.assertEqual(headers["connection"], "close")
        self.assertEqual(body, b"Method not allowed")

    @treeserve.async_test
    async def test_payload(self):
        await self.start()
        try:
            reader, writer = await self.connect()
            writer.write(
                b"GET /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\nContent-Length: 4\r\n\r\ndata"
            )
            first = await self.receive(reader)
            writer.write(b"GET /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n")
            second = await self.receive(reader)
            writer.close()
        finally:
            await self.stop()

        self.assertEqual(first[0], 200)
        self.assertEqual(first[2], b"hello world")
        self.assertEqual(second[0], 200)
        self.assertEqual(second[2], b"hello world")

    @treeserve.async_test
    async def test_payload_limit(self):
        await self.start()
        try:
            code, headers, body = await asyncio.wait_for(
                self.request(
                    b"GET /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\n\
Content-Length: %d\r\n\r\n" % (treeserve.servers.BODY_LIMIT + 1)
                ),
                5.0
            )
        finally:
            await self.stop()

        self.assertEqual(code, 400)
        self.assertEqual(headers["connection"], "close")
        self.assertEqual(body, b"Request body too large")

        await self.start()
        try:
            code, _headers, body = await self.request(
                b"GET /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\nContent-Length: -1\r\n\r\n"
            )
        finally:
            await self.stop()

        self.assertEqual(code, 400)
        self.assertEqual(body, b"Invalid content length")

    @treeserve.async_test
    async def test_invalid(self):
        await self.start()
        try:
            code, headers, _body = await self.request(b"INVALID\r\n\r\n")
        finally:
            await self.stop()

        self.assertEqual(code, 400)
        self.assertEqual(headers["connection"], "close")

    @treeserve.async_test
    async def test_unavailable(self):
        await self.start()
        try:
            self.server.disable()
            code, _headers, body = await self.request(
                b"GET /hello.txt HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n"
            )
        finally:
            await self.stop()

        self.assertEqual(code, 503)
        self.assertEqual(body, treeserve.servers.UNAVAILABLE_DATA)

    @treeserve.async_test
    async def test_stop(self):
        await self.start()
        try:
            code, headers, _body = await self.request(
                b"GET /?stop HTTP/1.1\r\nHost: 127.0.0.1\r\nSec-Fetch-Mode: navigate\r\n\r\n"
            )
        finally:
            await self.stop()

        self.assertEqual(code, 302)
        self.assertEqual(headers["location"], "/")
        self.assertEqual(self.server.is_enabled(), False)

    @treeserve.async_test
    async def test_error(self):
        server = treeserve.servers.HTTPServer(
            host = "127.0.0.1",
            port = 0,
            level = treeserve.SILENT
        )

        async def on_request(request):
            raise treeserve.TreeserveError("Broken handler")

        server.on_request = on_request
        self.server = server
        await server.start()
        try:
            code, headers, body = await self.request(
                b"GET / HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n"
            )
        finally:
            await self.stop()

        self.assertEqual(code, 500)
        self.assertEqual(headers["content-type"], "text/plain")
        self.assertEqual(body.startswith(b"Problem handling request - Broken handler"), True)

    @treeserve.async_test
    async def test_stream_error(self):
        server = treeserve.servers.HTTPServer(
            host = "127.0.0.1",
            port = 0,
            level = treeserve.SILENT
        )
        stacks = []

        async def on_request(request):
            file = BrokenFileObject(10)
            return treeserve.FileResponse(file, headers = {"content-length" : "10"})

        server.on_request = on_request
        server.log_stack = lambda method = None: stacks.append(method)
        self.server = server
        await server.start()
        try:
            reader, writer = await self.connect()
            writer.write(b"GET / HTTP/1.1\r\nHost: 127.0.0.1\r\n\r\n")
            await writer.drain()
            head = await reader.readuntil(b"\r\n\r\n")
            remaining = await reader.read()
            writer.close()
        finally:
            await self.stop()

        self.assertEqual(head.startswith(b"HTTP/1.1 200 OK\r\n"), True)
        self.assertEqual(remaining, b"part")
        self.assertEqual(len(stacks), 1)

    def test_build_request(self):
        server = treeserve.servers.HTTPServer(host = "127.0.0.1", port = 8080)

        request = server.build_request("GET", "/a%20b?stop", {"host" : "localhost:9090"})

        self.assertEqual(request.origin, "http://localhost:9090")
        self.assertEqual(request.get_path(), "/a b")
        self.assertEqual(request.search, "?stop")
        self.assertEqual(request.is_local(), True)

        request = server.build_request("GET", "/", {})

        self.assertEqual(request.origin, "http://127.0.0.1:8080")

        request = server.build_request("GET", "http://remote/", {"host" : "localhost"})

        self.assertEqual(request.is_local(), False)
