#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2026 The rosettas authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
rosettas.utils
==============
**SVG and error handling utilities**

This module provides the small helpers shared by the curve generator, the SVG renderer and the command line interface.
"""

import math
import textwrap
from xml.sax.saxutils import quoteattr


class InvalidParameterError(ValueError):
    """ A curve was requested with parameters that do not describe a valid hypotrochoid, e.g. an inner circle that does
    not fit inside the outer circle. """
    pass


class RosettaWarning(UserWarning):
    """ A rosetta was rendered, but the result is probably not what the caller wanted (e.g. nothing visible). """
    pass


def prec(value):
    """ Format a float for SVG output with six significant digits. """
    return f'{float(value):.6}'


def check_finite(name, value):
    """ Raise :py:class:`.InvalidParameterError` if ``value`` is not a finite number. """
    try:
        if math.isfinite(value):
            return
    except TypeError:
        pass
    raise InvalidParameterError(f'{name} must be a finite number, not {value!r}')


def min_none(a, b):
    """ Like the ``min(..)`` builtin, but if either value is ``None``, returns the other. """
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)


def max_none(a, b):
    """ Like the ``max(..)`` builtin, but if either value is ``None``, returns the other. """
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)


def bounds_center(bounds):
    """ Return the center ``(x, y)`` of a ``((min_x, min_y), (max_x, max_y))`` bounding box. """
    (min_x, min_y), (max_x, max_y) = bounds
    return (max_x + min_x) / 2, (max_y + min_y) / 2


def _attr(value):
    # Always double-quoted, so plain values come out exactly as given.
    return quoteattr(str(value), {'"': '&quot;'})


class Tag:
    """ Helper class to ease creation of SVG. All API functions that create SVG allow you to substitute this with your
    own implementation by passing a ``tag`` parameter. Children may be other tags or plain strings, which are emitted
    verbatim as text content. Attribute values are escaped, text content is not. """

    def __init__(self, name, children=None, root=False, **attrs):
        self.name, self.attrs = name, attrs
        self.children = children or []
        self.root = root

    def __str__(self):
        prefix = '<?xml version="1.0" encoding="UTF-8"?>\n' if self.root else ''
        opening = ' '.join([self.name] + [f'{key.replace("__", ":").replace("_", "-")}={_attr(value)}' for key, value in self.attrs.items()])
        if self.children:
            children = '\n'.join(textwrap.indent(str(c), '  ') for c in self.children)
            return f'{prefix}<{opening}>\n{children}\n</{self.name}>'
        else:
            return f'{prefix}<{opening}/>'


def setup_svg(tags, width='100%', height='100%', tag=Tag):
    """ Wrap ``tags`` in a root ``<svg>`` element that fills the whole viewport. """
    return tag('svg', list(tags),
            xmlns='http://www.w3.org/2000/svg',
            version='1.1',
            width=width, height=height,
            root=True)
