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

import sys
import uuid
import logging
import traceback

from . import log
from . import util
from . import config
from . import observer

NAME = "treeserve"
""" The name of the project, used as the prefix of the
logger names and in the server identification strings """

VERSION = "1.0.0"
""" The current version of the project, shared by the
complete set of servers """

PLATFORM = "%s %d.%d.%d %s" % (
    sys.implementation.name,
    sys.version_info.major,
    sys.version_info.minor,
    sys.version_info.micro,
    sys.platform
)
""" Description of the interpreter and operative system
running the server, only exposed in development mode """

IDENTIFIER_SHORT = "%s/%s" % (NAME, VERSION)
""" The short identifier of the server, used in the listing
footers and in production like environments """

IDENTIFIER_LONG = "%s/%s (%s)" % (NAME, VERSION, PLATFORM)
""" The long identifier of the server that includes the
platform details, for development environments """

IDENTIFIER = IDENTIFIER_LONG if config._is_devel() else IDENTIFIER_SHORT
""" The identifier sent in the server header of the responses,
depends on the (development) mode of the environment """

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
""" The format of the log records for the stream handler and
for the complete set of extra handlers """

REFERENCES = dict()
""" Map associating the logger identifier with the number of
servers currently using it, a logger is only configured for
the first of them and unconfigured by the last one """

class Base(observer.Observable):
    """
    Base class of the servers, holds the logging infra-structure
    (a logger per server name plus extra handlers), the access to
    the configuration registry and the current state.
    """

    def __init__(self, name = None, handlers = None, *args, **kwargs):
        observer.Observable.__init__(self, *args, **kwargs)
        self.name = name or self.__class__.__name__
        self.level = kwargs.get("level", logging.INFO)
        self.logging = kwargs.get("logging", None)
        self.handler_stream = logging.StreamHandler()
        self.handlers = tuple(handlers or (self.handler_stream,))
        self.logger = None
        self.env = False
        self._uuid = uuid.uuid4()
        self._state = None
        self._extra_handlers = []

    def load_logging(self, level = logging.DEBUG, format = LOG_FORMAT, unique = False):
        level = self._level(level)
        identifier = self.get_id(unique = unique)
        self.logger = logging.getLogger(identifier)

        # the logger may be shared by more than one server (same name)
        # in which case it's already configured and only referenced
        count = REFERENCES.get(identifier, 0)
        REFERENCES[identifier] = count + 1
        if count > 0: return

        formatter = logging.Formatter(format)
        self.extra_logging(level, formatter)
        self.handler_stream.setLevel(level)
        self.handler_stream.setFormatter(formatter)

        self.logger.propagate = False
        self.logger.setLevel(level)
        for handler in self.handlers: self.logger.addHandler(handler)

    def unload_logging(self):
        if not self.logger: return
        identifier = self.logger.name
        count = REFERENCES.get(identifier, 1) - 1
        REFERENCES[identifier] = count
        if count > 0: return

        for handler in self.handlers: self.logger.removeHandler(handler)
        for handler in self._extra_handlers: handler.close()
        self.handlers = tuple(
            handler for handler in self.handlers\
            if not handler in self._extra_handlers
        )
        self._extra_handlers = []

    def extra_logging(self, level, formatter):
        """
        Builds the extra handlers described by the logging definitions
        of the server, a sequence of maps where the `name` selects the
        builder in the log module (eg: `rotating` for `rotating_handler`)
        and the remaining values are passed as keyword arguments.

        Definitions without a known builder are ignored.

        :type level: int
        :param level: The level of the handlers that do not define
        their own `level` value.
        :type formatter: Formatter
        :param formatter: The formatter to be used by the handlers.
        """

        for definition in self.logging or []:
            definition = dict(definition)
            name = definition.pop("name", None)
            _level = self._level(definition.pop("level", level))

            builder = getattr(log, "%s_handler" % name, None) if name else None
            if not builder: continue

            handler = builder(**definition)
            handler.setLevel(_level)
            handler.setFormatter(formatter)
            self._extra_handlers.append(handler)

        self.handlers = self.handlers + tuple(self._extra_handlers)

    def level_logging(self, level):
        level = self._level(level)
        self.logger.setLevel(level)
        for handler in self.handlers: handler.setLevel(level)

    def get_id(self, unique = True):
        identifier = "%s-%s" % (NAME, util.camel_to_underscore(self.name))
        if unique: identifier += "-%s" % self._uuid
        return identifier

    def get_state(self):
        return self._state

    def set_state(self, state):
        self._state = state

    def get_env(self, name, default = None, cast = None):
        """
        Retrieves a value from the configuration registry (loaded from
        configuration files and from the environment) returning the
        default in case it's not defined.

        :type name: String
        :param name: The name of the configuration value (eg: `PORT`).
        :type default: Object
        :param default: The value to be returned when not defined.
        :type cast: Type/String
        :param cast: The type (or the name of the type) to which the
        value is converted, a callable may also be used.
        :rtype: Object
        :return: The (converted) configuration value.
        """

        if not name in config.CONFIGS: return default
        value = config.CONFIGS[name]
        cast = config.CASTS.get(cast, cast)
        if cast and not value == None: value = cast(value)
        return value

    def is_devel(self):
        return self.is_debug()

    def is_debug(self):
        if not self.logger: return False
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, object):
        self.log(object, level = logging.DEBUG)

    def info(self, object):
        self.log(object, level = logging.INFO)

    def warning(self, object):
        self.log(object, level = logging.WARNING)

    def error(self, object):
        self.log(object, level = logging.ERROR)

    def critical(self, object):
        self.log(object, level = logging.CRITICAL)

    def log_stack(self, method = None):
        method = method or self.info
        for line in traceback.format_exc().splitlines(): method(line)

    def log(self, object, level = logging.INFO):
        if not self.logger: return
        self.logger.log(level, object if isinstance(object, str) else str(object))

    def _level(self, level):
        """
        Normalizes the provided level, either an integer or a level
        name (including the `SILENT` one), into its integer value.

        :type level: String/int
        :param level: The level value to be normalized.
        :rtype: int
        :return: The integer level value.
        """

        if level == None or isinstance(level, int): return level
        level = level.upper()
        if level == "SILENT": return log.SILENT
        return logging.getLevelName(level)
