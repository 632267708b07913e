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

import datetime
import urllib.parse

import treeserve

from . import html
from . import util

DIR_PREFIX = "\x00"
""" The prefix added to the sorting keys of the directories
so that they sort before any (printable) file name """

PARENT_KEY = DIR_PREFIX + DIR_PREFIX + ".."
""" The sorting key of the synthetic parent entry, that must
sort before the complete set of directories """

FOLDER_ICON = "\U0001F4C2"
""" The glyph to be used for the icon that represents
a folder under the directory listing """

FILE_ICON = "\U0001F4C4"
""" The glyph to be used for the icon that represents
a plain file under the directory listing """

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
""" The format used to render the local time of generation
of the listing in its footer """

async def list_dir(directory, path, now = None):
    """
    Generates the complete HTML document listing the contents
    of the provided directory handle, identified by the logical
    (slash terminated) path.

    :type directory: DirectoryHandle
    :param directory: The handle of the directory to be listed.
    :type path: String
    :param path: The logical and absolute path of the directory,
    must start and end with a slash (eg: `/a/b/`).
    :type now: datetime
    :param now: The local time to be rendered in the footer,
    defaults to the current local time.
    :rtype: String
    :return: The HTML document for the listing.
    """

    keys, sizes = await build_keys(directory, path)
    return "".join(gen_dir(keys, sizes, path, now = now))

async def build_keys(directory, path):
    keys = []
    sizes = dict()

    # in case the directory is not the root one the synthetic parent
    # entry is added so that it's possible to navigate upwards
    if not path == "/": keys.append(PARENT_KEY)

    # iterates over the complete set of children of the directory
    # gathering the size of the files and prefixing the directories
    # so that they are sorted before the files
    async for handle in directory.entries():
        if handle.is_file():
            file = await handle.get_file()
            keys.append(handle.name)
            sizes[handle.name] = file.size
        else:
            keys.append(DIR_PREFIX + handle.name)

    keys.sort()
    return keys, sizes

def gen_dir(keys, sizes, path, now = None):
    now = now or datetime.datetime.now()
    now_s = now.strftime(DATE_FORMAT)
    path_s = html.escape_html(path)

    yield "<!doctype html>\n"
    yield "<html>\n"
    yield "<head>\n"
    yield "  <title>Index of %s</title>\n" % path_s
    yield "  <meta charset=\"utf-8\">\n"
    yield "  <meta name=\"viewport\" content=\"width=device-width\">\n"
    yield "  <style>\n"
    yield "    td { font-family: monospace; }\n"
    yield "    td.size { text-align: right; width: 4em; }\n"
    yield "    td.name { padding-left: 1em; }\n"
    yield "  </style>\n"
    yield "</head>\n"
    yield "<body>\n"
    yield "  <h1>Index of %s</h1>\n" % path_s
    yield "  <table>\n"
    for key in keys: yield gen_row(key, sizes)
    yield "  </table>\n"
    yield "  <br>\n"
    yield "  <address>Powered by %s (%s)</address>\n" % (treeserve.IDENTIFIER_SHORT, now_s)
    yield "</body>\n"
    yield "</html>\n"

def gen_row(key, sizes):
    if key.startswith(DIR_PREFIX):
        icon = FOLDER_ICON
        size_s = ""
        name = key.lstrip(DIR_PREFIX) + "/"
    else:
        icon = FILE_ICON
        size_s = util.format_size(sizes[key])
        name = key
    return "    <tr>\n" +\
        "      <td class=\"icon\">%s</td>\n" % icon +\
        "      <td class=\"size\">%s</td>\n" % size_s +\
        "      <td class=\"name\"><a href=\"%s\">%s</a></td>\n" %\
        (html.escape_attr(urllib.parse.quote(name)), html.escape_html(name)) +\
        "    </tr>\n"
