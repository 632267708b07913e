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

import treeserve

from . import base

class MemoryAdapter(base.BaseAdapter):
    """
    Adapter that builds an in memory tree out of a nested
    map structure, where the maps represent directories and
    the (bytes or string) values represent files.

    A tuple of data and type may be used as the value of a
    file so that a specific mime type is set for it.
    """

    def __init__(self, map = None, encoding = "utf-8"):
        base.BaseAdapter.__init__(self)
        self.map = map or dict()
        self.encoding = encoding
        self.root = None

    def get_root(self):
        if self.root: return self.root
        self.root = self._build(self.map)
        return self.root

    def _build(self, map, name = ""):
        directory = MemoryDirectory(name = name)
        for key, value in map.items():
            if isinstance(value, dict):
                directory.add(self._build(value, name = key))
                continue
            if isinstance(value, tuple): data, type = value
            else: data, type = value, ""
            if isinstance(data, str): data = data.encode(self.encoding)
            directory.add(MemoryFile(key, data, type = type))
        return directory

class MemoryDirectory(base.DirectoryHandle):

    def __init__(self, name = "", permission = base.GRANTED):
        base.DirectoryHandle.__init__(self, name)
        self.children = dict()
        self.permission = permission

    def add(self, handle):
        treeserve.verify(
            not handle.name in self.children,
            message = "Duplicated entry '%s'" % handle.name
        )
        self.children[handle.name] = handle
        return handle

    def grant(self):
        self.permission = base.GRANTED

    def revoke(self):
        self.permission = base.DENIED

    def prompt(self):
        self.permission = base.PROMPT

    async def query_permission(self, mode = "read"):
        return self.permission

    async def entries(self):
        for handle in list(self.children.values()): yield handle

    async def get_directory(self, name):
        handle = self.children.get(name, None)
        if not handle or not handle.is_dir(): return None
        return handle

    async def get_file(self, name):
        handle = self.children.get(name, None)
        if not handle or not handle.is_file(): return None
        return handle

class MemoryFile(base.FileHandle):

    def __init__(self, name, data, type = ""):
        base.FileHandle.__init__(self, name)
        self.data = data
        self.type = type

    async def get_file(self):
        return MemoryFileObject(self.data, type = self.type)

class MemoryFileObject(base.FileObject):

    def __init__(self, data, type = "", begin = 0):
        base.FileObject.__init__(self, len(data), type = type, begin = begin)
        self.data = data

    async def stream(self, buffer_size = base.BUFFER_SIZE):
        offset = self.begin
        end = self.begin + self.size
        while offset < end:
            count = min(end - offset, buffer_size)
            yield self.data[offset:offset + count]
            offset += count
