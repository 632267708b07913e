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

import copy

import treeserve

FILE = "file"
""" The kind value for the handles that represent a
plain file (leaf) in the served tree """

DIRECTORY = "directory"
""" The kind value for the handles that represent a
directory (container) in the served tree """

GRANTED = "granted"
""" The permission state for which the access to the
tree has been granted and is still valid """

DENIED = "denied"
""" The permission state for which the access to the
tree has been (explicitly) revoked """

PROMPT = "prompt"
""" The permission state for which access requires a new
confirmation, it is considered not granted """

BUFFER_SIZE = 32768
""" The size of the buffer that is going to be used when
streaming the file contents, this should not be neither
to big nor to small (as both situations would create problems) """

class BaseAdapter(object):
    """
    Top level abstract representation of a tree adapter.
    The adapter is responsible for the exposure of an
    hierarchical tree of directories and files (eg: a file
    system directory or an in memory structure) through
    a root directory handle.
    """

    def get_root(self):
        raise treeserve.NotImplemented("Missing implementation")

class Handle(object):
    """
    Opaque handle to an element of the served tree, the
    handle is borrowed by the resolution process and should
    never be mutated by it.
    """

    kind = None

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.name or "/")

    def is_file(self):
        return self.kind == FILE

    def is_dir(self):
        return self.kind == DIRECTORY

    async def query_permission(self, mode = "read"):
        return GRANTED

class DirectoryHandle(Handle):

    kind = DIRECTORY

    def entries(self):
        """
        Asynchronous iteration over the handles of the complete
        set of immediate children of the directory, the order
        of the iteration is not defined.

        :rtype: Generator
        :return: The asynchronous generator of child handles.
        """

        raise treeserve.NotImplemented("Missing implementation")

    async def get_directory(self, name):
        raise treeserve.NotImplemented("Missing implementation")

    async def get_file(self, name):
        raise treeserve.NotImplemented("Missing implementation")

    async def get_entry(self, name):
        handle = await self.get_file(name)
        if handle: return handle
        return await self.get_directory(name)

class FileHandle(Handle):

    kind = FILE

    async def get_file(self):
        raise treeserve.NotImplemented("Missing implementation")

class FileObject(object):
    """
    Representation of the contents of a file, exposing its size,
    its type and the streaming of its contents, a file object may
    be sliced into a view of a sub-range of its bytes.

    The slicing operation follows the semantics of a blob, meaning
    that offsets are clamped to the bounds of the object.
    """

    def __init__(self, size, type = "", begin = 0):
        self.size = size
        self.type = type or ""
        self.begin = begin

    def slice(self, begin = 0, end = None):
        end = self.size if end == None else end
        begin = max(0, min(begin, self.size))
        end = max(begin, min(end, self.size))
        file = copy.copy(self)
        file.begin = self.begin + begin
        file.size = end - begin
        return file

    def stream(self, buffer_size = BUFFER_SIZE):
        raise treeserve.NotImplemented("Missing implementation")

    async def read(self):
        buffer = []
        async for chunk in self.stream(): buffer.append(chunk)
        return b"".join(buffer)
