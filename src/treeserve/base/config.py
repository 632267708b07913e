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
import json

FILE_NAME = "treeserve.json"
""" The default name of the file that is going to be
used for the loading of configuration values from json """

CASTS = {
    bool : lambda v: v if type(v) == bool else v in ("1", "true", "True"),
    list : lambda v: v if type(v) == list else v.split(";") if v else [],
    tuple : lambda v: v if type(v) == tuple else tuple(v.split(";") if v else []),
    dict : lambda v: v if type(v) == dict else json.loads(v),
    "bool" : lambda v: v if type(v) == bool else v in ("1", "true", "True"),
    "list" : lambda v: v if type(v) == list else v.split(";") if v else [],
    "int" : int,
    "float" : float,
    "str" : str,
    "dict" : lambda v: v if type(v) == dict else json.loads(v)
}
""" The map containing the various cast method operation
associated with the various data types, they provide a
different type of casting strategy (than the default one) """

CONFIGS = {}
""" The map that contains the key value association
for all the currently set global configurations """

CONFIG_F = []
""" The list of files that have been used for the loading
of the configuration through this session, every time a
loading of configuration from a file occurs the same path
is added to this global list """

def conf(name, default = None, cast = None, ctx = None):
    """
    Retrieves the configuration value for the provided value
    defaulting to the provided default value in case no value
    is found for the provided name.

    An optional cast operation may be performed on the value
    in case it's requested, either using a type or the name
    of the type (as a string).

    :type name: String
    :param name: The name of the configuration value to be
    retrieved.
    :type default: Object
    :param default: The default value to be retrieved in case
    no value was found for the provided name.
    :type cast: Type/String
    :param cast: The cast operation to be performed in the
    resolved value (optional).
    :type ctx: Dictionary
    :param ctx: The context dictionary to be used instead of
    the global configuration registry (optional).
    :rtype: Object
    :return: The value for the configuration with the requested
    name or the default value if no value was found.
    """

    configs = ctx["configs"] if ctx else CONFIGS
    cast = CASTS.get(cast, cast)
    value = configs.get(name, default)
    if cast and not value == None: value = cast(value)
    return value

def load(names = (FILE_NAME,), path = None, encoding = "utf-8", ctx = None):
    paths = []
    homes = get_homes()
    for home in homes: paths.append(home)
    paths.append(path or os.getcwd())
    for path in paths:
        for name in names:
            load_file(name = name, path = path, encoding = encoding, ctx = ctx)
    load_env(ctx = ctx)

def load_file(name = FILE_NAME, path = None, encoding = "utf-8", ctx = None):
    configs = ctx["configs"] if ctx else CONFIGS

    if path: path = os.path.normpath(path)
    if path: file_path = os.path.join(path, name)
    else: file_path = name

    file_path = os.path.abspath(file_path)
    file_path = os.path.normpath(file_path)

    exists = os.path.exists(file_path)
    if not exists: return

    exists = file_path in CONFIG_F
    if exists: CONFIG_F.remove(file_path)
    CONFIG_F.append(file_path)

    with open(file_path, "rb") as file:
        data = file.read()
    if not data: return

    data = data.decode(encoding)
    data_j = json.loads(data)

    for key, value in data_j.items():
        configs[key] = value

def load_env(ctx = None):
    configs = ctx["configs"] if ctx else CONFIGS

    # the include files of the home directories are loaded first
    # and then overridden by the values of the environment
    for home in get_homes(): _load_includes(home, configs)
    for key, value in os.environ.items(): configs[key] = value

def get_homes(home_path = "~"):
    home_path = os.path.expanduser(home_path)
    home_path = os.path.normpath(home_path)
    return [home_path] if os.path.isdir(home_path) else []

def _load_includes(base_path, configs, encoding = "utf-8"):
    # tries to find an environment style file under the
    # provided base path, that is going to be used as an
    # alternative source of values (lower precedence)
    file_path = os.path.join(base_path, ".treeserve")
    if not os.path.isfile(file_path): return

    with open(file_path, "rb") as file:
        data = file.read()
    data = data.decode(encoding)

    # iterates over the complete set of lines in the file
    # ignoring empty and comment lines and setting the value
    # only in case it has not been set by the environment
    for line in data.splitlines():
        line = line.strip()
        if not line or line.startswith("#"): continue
        if not "=" in line: continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip("\"")
        if key in os.environ: continue
        configs[key] = value

def _is_devel():
    """
    Simple debug/development level detection mechanism to be
    used at load time to determine if the system is running
    under a development (debug) environment.

    :rtype: bool
    :return: If the current environment is running under a
    development type level of traceability.
    """

    return conf("LEVEL", "INFO") in ("DEBUG",)

load()
