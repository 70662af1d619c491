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

import json
import math
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .hypotrochoid import Hypotrochoid, REVOLUTIONS


@dataclass
class RosettaStyle:
    """ Visual style of a single animated rosetta. """
    #: Radius of the outer, fixed circle
    outer_radius : float
    #: Radius of the inner, rolling circle
    inner_radius : float
    #: Distance of the drawing pen from the center of the inner circle
    distance : float
    #: Stroke color. Any SVG color.
    color : str
    #: Duration of one full rotation of the rosetta as an SVG clock value, e.g. ``"6s"``
    duration : str
    #: Number of line segments used to approximate the curve
    steps : int = 3000
    #: Stroke width of the curve's path
    stroke_width : float = 2

    # input validation of the presentation attributes. Curve parameters are checked by Hypotrochoid.validate().
    def __setattr__(self, name, value):
        if name in ('color', 'duration'):
            _check_text(f'Rosetta {name}', value)
        elif name == 'stroke_width':
            _check_number('Rosetta stroke_width', value, minimum=0)
        super().__setattr__(name, value)

    def curve(self, revolutions=REVOLUTIONS):
        """ Return the :py:class:`~.hypotrochoid.Hypotrochoid` drawn by this style. """
        return Hypotrochoid(self.outer_radius, self.inner_radius, self.distance, self.steps, revolutions=revolutions)

    @classmethod
    def from_dict(kls, data):
        """ Create a style from a dict as found in a JSON style file. """
        return kls(**_check_keys(kls, data, 'rosetta'))


@dataclass
class GridStyle:
    """ Visual style of the background grid. """
    #: Spacing between grid lines
    step : float = 50
    #: Grid line color
    color : str = 'white'
    #: Grid line width
    stroke_width : float = 0.5
    #: Grid line opacity between 0 (invisible) and 1 (opaque)
    opacity : float = 0.2

    # input validation
    def __setattr__(self, name, value):
        if name == 'step':
            _check_number('Grid step', value)
            if not value > 0:
                raise ValueError(f'Grid step must be positive, not {value!r}')
        elif name == 'opacity':
            _check_number('Grid opacity', value, minimum=0, maximum=1)
        elif name == 'stroke_width':
            _check_number('Grid stroke_width', value, minimum=0)
        elif name == 'color':
            _check_text('Grid color', value)
        super().__setattr__(name, value)

    @classmethod
    def from_dict(kls, data):
        return kls(**_check_keys(kls, data, 'grid'))


def _check_number(what, value, minimum=None, maximum=None):
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f'{what} must be a finite number, not {value!r}')

    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        bounds = f'between {minimum} and {maximum}' if maximum is not None else f'at least {minimum}'
        raise ValueError(f'{what} must be {bounds}, not {value!r}')


def _check_text(what, value):
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f'{what} must be a non-empty string, not {value!r}')


def _check_keys(kls, data, what):
    if not isinstance(data, dict):
        raise ValueError(f'Each {what} entry must be a JSON object, not {data!r}')

    known = {f.name for f in fields(kls)}
    if (unknown := set(data) - known):
        raise ValueError(f'Unknown {what} style key(s): {", ".join(sorted(unknown))}. Known keys: {", ".join(sorted(known))}')

    return data


DEFAULT_STYLES = (
    RosettaStyle(outer_radius=150.0, inner_radius=52.5, distance=97.5, color='cyan', duration='6s'),
    RosettaStyle(outer_radius=160.0, inner_radius=110.0, distance=85.0, color='gold', duration='14s'),
    RosettaStyle(outer_radius=120.0, inner_radius=33.0, distance=66.0, color='orange', duration='4s'),
)


def parse_styles(data):
    """ Parse a style description. ``data`` is either a list of rosetta style dicts, or a dict with a ``"rosettas"``
    list and an optional ``"grid"`` dict.

    :returns: ``(rosetta_styles, grid_style)`` tuple
    """
    if isinstance(data, list):
        data = {'rosettas': data}

    if not isinstance(data, dict):
        raise ValueError('Style file must contain either a list of rosettas or an object with a "rosettas" list')

    if (unknown := set(data) - {'rosettas', 'grid'}):
        raise ValueError(f'Unknown top-level style key(s): {", ".join(sorted(unknown))}')

    rosettas = data.get('rosettas')
    if rosettas is None:
        rosettas = list(DEFAULT_STYLES)
    elif isinstance(rosettas, list):
        try:
            rosettas = [RosettaStyle.from_dict(entry) for entry in rosettas]
        except TypeError as e: # missing required fields
            raise ValueError(f'Invalid rosetta style: {e}') from e
    else:
        raise ValueError('"rosettas" must be a list')

    grid = GridStyle.from_dict(data.get('grid', {}))
    return rosettas, grid


def load_styles(path):
    """ Load rosetta and grid styles from a JSON file. See :py:func:`.parse_styles` for the format. """
    return parse_styles(json.loads(Path(path).read_text()))


def with_steps(styles, steps):
    """ Return copies of ``styles`` that all use the given number of steps. """
    return [replace(style, steps=steps) for style in styles]
