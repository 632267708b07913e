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

SIZE_UNITS = "kMGTP"
""" The sequence of unit letters indexed by the number of
divisions (minus one) applied to the byte count value """

SIZE_UNIT_COEFFICIENT = 1024
""" The size unit coefficient as an integer value, this is
going to be used in each of the size steps as divisor """

def header_down(name):
    values = name.split("-")
    values = [value.lower() for value in values]
    return "-".join(values)

def header_up(name):
    values = name.split("-")
    values = [value.title() for value in values]
    return "-".join(values)

def format_size(size):
    """
    Converts the provided byte count into a short human readable
    magnitude string (eg: 512B, 1.5k, 20.0M).

    Values under the coefficient are rendered as an integer with
    the byte suffix, otherwise the value is rendered with exactly
    one decimal place and the proper unit letter. Notice that no
    re-normalization is performed after the rounding so a value
    very close to the next unit may render as `1024.0k`.

    :type size: int/float
    :param size: The (non negative) size value in bytes.
    :rtype: String
    :return: The string representation of the size value.
    """

    index = 0
    while size >= SIZE_UNIT_COEFFICIENT and index < len(SIZE_UNITS):
        size /= SIZE_UNIT_COEFFICIENT
        index += 1
    if index == 0: return "%dB" % size
    return "%.1f%s" % (size, SIZE_UNITS[index - 1])
