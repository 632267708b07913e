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

import os
import mimetypes

import treeserve

from . import base

class FsAdapter(base.BaseAdapter):
    """
    Adapter that exposes a directory of the local file system
    as the served tree, every blocking operation is executed
    in the default executor of the running loop.
    """

    def __init__(self, base_path = None):
        base.BaseAdapter.__init__(self)
        self.base_path = base_path or "."
        self.base_path = os.path.abspath(self.base_path)
        self.base_path = os.path.normpath(self.base_path)

    def get_root(self):
        treeserve.verify(
            os.path.isdir(self.base_path),
            message = "Base path '%s' is not a directory" % self.base_path
        )
        return FsDirectory(self.base_path)

class FsDirectory(base.DirectoryHandle):

    def __init__(self, path, name = ""):
        base.DirectoryHandle.__init__(self, name)
        self.path = path

    async def query_permission(self, mode = "read"):
        flags = os.R_OK | os.X_OK
        if mode == "readwrite": flags |= os.W_OK
        exists = await treeserve.blocking(os.path.isdir, self.path)
        if not exists: return base.DENIED
        allowed = await treeserve.blocking(os.access, self.path, flags)
        return base.GRANTED if allowed else base.DENIED

    async def entries(self):
        names = await treeserve.blocking(os.listdir, self.path)
        for name in names:
            path = os.path.join(self.path, name)
            if await treeserve.blocking(os.path.isdir, path):
                yield FsDirectory(path, name = name)
            elif await treeserve.blocking(os.path.isfile, path):
                yield FsFile(path, name = name)

    async def get_directory(self, name):
        path = self._path(name)
        if not path: return None
        is_dir = await treeserve.blocking(os.path.isdir, path)
        if not is_dir: return None
        return FsDirectory(path, name = name)

    async def get_file(self, name):
        path = self._path(name)
        if not path: return None
        is_file = await treeserve.blocking(os.path.isfile, path)
        if not is_file: return None
        return FsFile(path, name = name)

    def _path(self, name):
        # verifies that the name refers an immediate child of the
        # directory, any name that could escape the directory (or
        # that is considered invalid) is handled as not found
        if name in ("", ".", ".."): return None
        if "\0" in name: return None
        if "/" in name or os.sep in name: return None
        if os.altsep and os.altsep in name: return None
        return os.path.join(self.path, name)

class FsFile(base.FileHandle):

    def __init__(self, path, name = ""):
        base.FileHandle.__init__(self, name)
        self.path = path

    async def get_file(self):
        size = await treeserve.blocking(os.path.getsize, self.path)
        type, _encoding = mimetypes.guess_type(self.path, strict = True)
        return FsFileObject(self.path, size, type = type)

class FsFileObject(base.FileObject):

    def __init__(self, path, size, type = "", begin = 0):
        base.FileObject.__init__(self, size, type = type, begin = begin)
        self.path = path

    async def stream(self, buffer_size = base.BUFFER_SIZE):
        file = await treeserve.blocking(open, self.path, "rb")
        try:
            await treeserve.blocking(file.seek, self.begin)
            pending = self.size
            while pending > 0:
                count = min(pending, buffer_size)
                data = await treeserve.blocking(file.read, count)
                if not data: break
                pending -= len(data)
                yield data
        finally:
            file.close()
