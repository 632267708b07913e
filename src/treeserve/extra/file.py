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
import urllib.parse

import treeserve
import treeserve.common
import treeserve.servers
import treeserve.adapters

INDEX_FILE = "index.html"
""" The name of the file that is going to be served when
a directory is requested, if absent a listing is generated """

NOT_FOUND_FILE = "404.html"
""" The name of the file that is searched (from the deepest
directory up to the root) for custom not found pages """

STOP_SEARCH = "?stop"
""" The search (query) value of the navigation request that
disables the file server (stop signal) """

NAVIGATE_MODE = "navigate"
""" The request mode that identifies a top level navigation
(page load) request, the only one allowed to stop the server """

STATE_DISABLED = 1
""" The state in which the file server refuses every request,
either because no root has been provided or because it has
been stopped (by request or by permission loss) """

STATE_ENABLED = 2
""" The state in which the file server has a valid root and
is resolving the incoming requests against it """

STATE_STRINGS = (
    "DISABLED",
    "ENABLED"
)
""" Sequence that contains the various strings associated with
the various states of the file server """

SEPARATOR_REGEX = re.compile("/+")
""" Regular expression used to split the path into its various
segments, sequences of separators are considered one """

class FileServer(treeserve.servers.HTTPServer):
    """
    Simple implementation of a file server that resolves the
    requests against an (hierarchical) tree of directories whose
    root is provided by an external activation handshake.

    Directories without index file are listed, the not found
    pages are searched from the deepest directory of the request
    up to the root and byte ranges are supported so that partial
    retrieval of a file is possible.

    The server is only enabled while the read permission for the
    root is granted, once it's lost (or a stop request is received)
    the server is disabled until a new root is provided.
    """

    def __init__(
        self,
        base_path = None,
        index_file = INDEX_FILE,
        not_found_file = NOT_FOUND_FILE,
        *args,
        **kwargs
    ):
        treeserve.servers.HTTPServer.__init__(self, *args, **kwargs)
        self.base_path = base_path
        self.index_file = index_file
        self.not_found_file = not_found_file
        self.root = None
        self.set_state(STATE_DISABLED)

    def on_serve(self):
        treeserve.servers.HTTPServer.on_serve(self)
        if self.env: self.base_path = self.get_env("BASE_PATH", self.base_path)
        if self.env: self.index_file = self.get_env("INDEX_FILE", self.index_file)
        if self.env: self.not_found_file = self.get_env(
            "NOT_FOUND_FILE",
            self.not_found_file
        )
        if self.is_enabled(): return
        adapter = treeserve.adapters.FsAdapter(base_path = self.base_path)
        self.enable(adapter.get_root())

    def enable(self, root):
        """
        Runs the activation handshake providing the root directory
        handle from which the requests are going to be resolved.

        The handshake is only accepted while the server is disabled,
        any attempt while enabled is ignored.

        :type root: DirectoryHandle
        :param root: The handle to the root directory of the tree.
        :rtype: bool
        :return: If the activation has been acknowledged.
        """

        if self.is_enabled():
            self.debug("Ignoring activation as the server is already enabled")
            return False
        treeserve.verify(not root == None, message = "Root directory is required")
        self.root = root
        self.set_state(STATE_ENABLED)
        self.info("Defining '%s' as the root of the file server ..." % (root,))
        self.trigger("enable", self, root)
        return True

    def disable(self):
        if not self.is_enabled(): return False
        self.root = None
        self.set_state(STATE_DISABLED)
        self.info("File server disabled, waiting for a new root ...")
        self.trigger("disable", self)
        return True

    def is_enabled(self):
        return self.get_state() == STATE_ENABLED

    def get_state_s(self, lower = True):
        state_s = STATE_STRINGS[self.get_state() - 1]
        state_s = state_s.lower() if lower else state_s
        return state_s

    async def on_request(self, request):
        return await self.respond(request)

    async def respond(self, request):
        """
        Handles the provided request returning the proper response
        descriptor or an invalid value in case the request is not
        meant to be handled (server disabled or foreign origin).

        :type request: Request
        :param request: The request to be handled.
        :rtype: Response
        :return: The response descriptor for the request or an
        invalid value if the request has been refused.
        """

        if not self.is_enabled(): return None
        if not request.is_local(): return None

        if request.search == STOP_SEARCH and request.mode == NAVIGATE_MODE:
            self.info("Stopping file server on request")
            self.disable()
            return treeserve.RedirectResponse("/")

        # verifies that the read permission over the tree is still
        # granted, otherwise the server is disabled, notice that the
        # root is "captured" so that a concurrent disable is harmless
        root = self.root
        permission = await root.query_permission(mode = "read")
        if not permission == treeserve.adapters.GRANTED:
            self.info("Permission expired (%s), stopping file server" % permission)
            self.disable()
            return treeserve.RedirectResponse("/")

        return await self.resolve(request, root)

    async def resolve(self, request, root):
        # decodes the path of the request and splits it into the names
        # of the directories to be traversed and the name of the target,
        # that in case it's empty refers the index of the directory
        path = request.get_path()
        self.debug("Resolving '%s' for request #%d" % (path, request.id))
        names = SEPARATOR_REGEX.split(path.lstrip("/"))
        name = names.pop() or self.index_file

        # starts the ancestors sequence with the root directory and
        # then traverses the requested directories, in case one of
        # them is missing the not found cascade is used immediately
        directories = [root]
        directory = root
        path_v = "/"

        for directory_name in names:
            directory = await directory.get_directory(directory_name)
            if not directory:
                response = await self.find_404(directories)
                return response or self.make_404()
            directories.append(directory)
            path_v += directory_name + "/"

        # tries to find the target as either a file or a directory, in
        # case it's not found the not found cascade is used, falling
        # back to the listing of the directory for the index file
        handle = await directory.get_entry(name)
        if not handle:
            response = await self.find_404(directories)
            if response: return response
            if name == self.index_file: return await self.list_dir(directory, path_v)
            return self.make_404()

        # in case the target is a directory the client is redirected
        # to its canonical (slash terminated) path
        if handle.is_dir():
            location = urllib.parse.quote(path_v + name + "/")
            return treeserve.RedirectResponse(location)

        return await self.serve_file(handle, range_s = request.range)

    async def find_404(self, directories):
        for directory in reversed(directories):
            handle = await directory.get_file(self.not_found_file)
            if not handle: continue
            file = await handle.get_file()
            self.debug("Using not found page from '%s'" % (directory,))
            return treeserve.NotFoundResponse(file = file)
        return None

    async def list_dir(self, directory, path):
        self.debug("Listing directory '%s'" % path)
        html = await treeserve.common.list_dir(directory, path)
        return treeserve.ListingResponse(html)

    async def serve_file(self, handle, range_s = None):
        file = await handle.get_file()
        size = file.size
        self.debug("Serving file '%s' with %d bytes" % (handle.name, size))

        headers = dict()
        headers["content-type"] = file.type or "text/plain"
        code = 200

        # in case a valid range is provided the file is sliced into
        # the requested range and the response becomes partial, an
        # invalid range is ignored and the complete file is served
        range = treeserve.common.parse_range(range_s, size)
        if range:
            begin, end = range
            file = file.slice(begin, end)
            headers["content-range"] = treeserve.common.content_range(begin, end, size)
            code = 206

        headers["content-length"] = "%d" % file.size
        return treeserve.FileResponse(file, code = code, headers = headers)

    def make_404(self):
        return treeserve.NotFoundResponse()

if __name__ == "__main__":
    import logging

    server = FileServer(level = logging.INFO)
    server.serve(env = True)
