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

import math
from dataclasses import dataclass, KW_ONLY
from typing import NamedTuple

from .utils import InvalidParameterError, check_finite, min_none, max_none, bounds_center

#: Number of full 2π sweeps of the rolling circle's center. The curve closes after ``r / gcd(R, r)`` sweeps for integer
#: radii, but we simply use a fixed value that is large enough for all the rosettas we draw.
REVOLUTIONS = 16.0


class Coordinate(NamedTuple):
    """ A point in the cartesian plane. """
    x : float
    y : float


@dataclass(frozen=True)
class Hypotrochoid:
    """ A rosetta curve traced by a pen attached to a circle rolling inside another, fixed circle. """
    #: Radius of the fixed outer circle
    outer_radius : float
    #: Radius of the inner circle rolling inside the outer circle
    inner_radius : float
    #: Distance of the pen from the center of the inner circle. Negative values are fine, they just put the pen on the
    #: other side of the inner circle's center.
    pen_offset : float
    #: Number of line segments used to approximate the curve. The curve has ``steps + 1`` points.
    steps : int
    _ : KW_ONLY
    #: Number of full turns of the inner circle's center around the outer circle's center
    revolutions : float = REVOLUTIONS

    def validate(self):
        """ Check this curve's parameters, raising :py:class:`~.utils.InvalidParameterError` if they are degenerate. """
        for name in ('outer_radius', 'inner_radius', 'pen_offset', 'revolutions'):
            check_finite(name, getattr(self, name))

        if self.inner_radius <= 0:
            raise InvalidParameterError(f'inner_radius must be positive, not {self.inner_radius!r}')

        if self.outer_radius <= self.inner_radius:
            raise InvalidParameterError(f'outer_radius ({self.outer_radius!r}) must be larger than inner_radius '
                                        f'({self.inner_radius!r}) for the inner circle to fit inside the outer one')

        if isinstance(self.steps, bool) or not isinstance(self.steps, int) or self.steps < 0:
            raise InvalidParameterError(f'steps must be a non-negative integer, not {self.steps!r}')

        if self.revolutions <= 0:
            raise InvalidParameterError(f'revolutions must be positive, not {self.revolutions!r}')

        # Each parameter being finite is not enough, the intermediate values must not overflow either.
        r_diff = self.outer_radius - self.inner_radius
        ratio = r_diff / self.inner_radius
        max_theta = 2 * math.pi * self.revolutions
        if not math.isfinite(ratio) or not math.isfinite(max_theta * ratio):
            raise InvalidParameterError(f'outer_radius ({self.outer_radius!r}) is too large relative to inner_radius '
                                        f'({self.inner_radius!r}) for {self.revolutions!r} revolutions')

        # The bounding box center adds up two extremes of up to r_diff + |pen_offset| each.
        if not math.isfinite(2 * (abs(r_diff) + abs(self.pen_offset))):
            raise InvalidParameterError(f'outer_radius ({self.outer_radius!r}) and pen_offset '
                                        f'({self.pen_offset!r}) are too large')

    def generate_point(self, theta):
        """ Calculate the (not yet recentered) point on this curve at parameter angle ``theta``.

        :param float theta: Angle of the inner circle's center around the outer circle's center in radians.
        :rtype: :py:class:`.Coordinate`
        """
        r_diff = self.outer_radius - self.inner_radius
        ratio = r_diff / self.inner_radius

        # The minus in y makes the inner circle roll the right way round. Flipping it mirrors the curve.
        return Coordinate(
                r_diff * math.cos(theta) + self.pen_offset * math.cos(ratio * theta),
                r_diff * math.sin(theta) - self.pen_offset * math.sin(ratio * theta))

    def angles(self):
        """ Iterate over the ``steps + 1`` parameter angles this curve is sampled at, starting at 0. """
        if self.steps == 0:
            yield 0.0
            return

        for j in range(self.steps + 1):
            yield 2 * math.pi * (j / self.steps) * self.revolutions

    def compute_points(self):
        """ Compute all points of this curve, recentered such that the curve's bounding box is centered on the origin.

        :returns: list of ``steps + 1`` :py:class:`.Coordinate` s, in curve order.
        :rtype: list
        """
        self.validate()

        points = []
        min_x = min_y = max_x = max_y = None
        for theta in self.angles():
            p = self.generate_point(theta)
            points.append(p)

            min_x, min_y = min_none(min_x, p.x), min_none(min_y, p.y)
            max_x, max_y = max_none(max_x, p.x), max_none(max_y, p.y)

        offset_x, offset_y = bounds_center(((min_x, min_y), (max_x, max_y)))
        return [Coordinate(x - offset_x, y - offset_y) for x, y in points]

    def bounding_box(self):
        """ Return the axis-aligned bounding box of the recentered curve.

        :returns: ``((min_x, min_y), (max_x, max_y))``
        :rtype: tuple
        """
        return points_bounds(self.compute_points())

    def __str__(self):
        return (f'<Hypotrochoid R={self.outer_radius} r={self.inner_radius} d={self.pen_offset} steps={self.steps} '
                f'revolutions={self.revolutions}>')


def compute_points(curve):
    """ Functional alias for :py:meth:`.Hypotrochoid.compute_points`. """
    return curve.compute_points()


def points_bounds(points, *, default=None):
    """ Calculate the axis-aligned bounding box of a sequence of ``(x, y)`` points.

    :returns: ``((min_x, min_y), (max_x, max_y))``, or ``default`` if ``points`` is empty.
    :rtype: tuple
    """
    min_x = min_y = max_x = max_y = None
    for x, y in points:
        min_x, min_y = min_none(min_x, x), min_none(min_y, y)
        max_x, max_y = max_none(max_x, x), max_none(max_y, y)

    if min_x is None:
        return default

    return (min_x, min_y), (max_x, max_y)
