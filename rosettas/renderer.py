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
rosettas.renderer
=================
**Animated SVG output**

Renders a set of :py:class:`~.styles.RosettaStyle` s into a standalone SVG document. Each rosetta is drawn as a single
path that slowly rotates around the page center. The whole set cycles through the color wheel and fades in from black
when the document is opened.
"""

import warnings
from pathlib import Path

from .hypotrochoid import REVOLUTIONS
from .styles import DEFAULT_STYLES, GridStyle
from .utils import Tag, RosettaWarning, prec, setup_svg


GLOW_FILTER_ID = 'glow'
GRID_PATTERN_ID = 'grid_pattern'
BACKGROUND_COLOR = '#222'

CSS = '''\
@keyframes rainbow-cycle {
  0% { filter: hue-rotate(0deg); }
  100% { filter: hue-rotate(360deg); }
}

#rosettas {
  transform: translate(50%, 50%) scale(1.4);
  animation: rainbow-cycle 5s linear infinite;
}

path {
  filter: url(#glow);
}

@keyframes fadeFromBlack {
  from { opacity: 1; }
  to { opacity: 0; }
}

#black-overlay {
  animation: fadeFromBlack 5s ease-in forwards;
  pointer-events: none;
}'''


def path_commands(points):
    """ Iterate over SVG path commands tracing ``points`` in order: one move to the first point, then one straight line
    to each following point. """
    points = iter(points)
    for x, y in points:
        yield f'M {prec(x)},{prec(y)}'
        break

    for x, y in points:
        yield f'L {prec(x)},{prec(y)}'


def svg_path_data(points):
    """ Format a sequence of ``(x, y)`` points as the ``d`` attribute of an SVG path. Empty for no points.

    Coordinates are rounded to six significant digits (see :py:func:`~.utils.prec`), so the output is not exact for
    points that need more precision than that. Use :py:meth:`.Hypotrochoid.compute_points` for full precision.
    """
    return ' '.join(path_commands(points))


def svg_defs(tag=Tag):
    """ Page background, glow filter and the CSS animations shared by all rosettas. """
    glow = tag('filter', [
        tag('feGaussianBlur', stdDeviation='1.5', result='coloredBlur'),
        tag('feMerge', [
            tag('feMergeNode', **{'in': 'coloredBlur'}),
            tag('feMergeNode', **{'in': 'SourceGraphic'})])],
        id=GLOW_FILTER_ID)

    return [
        tag('rect', width='100%', height='100%', fill=BACKGROUND_COLOR),
        tag('defs', [glow]),
        tag('style', [CSS])]


def grid_to_svg(style=None, tag=Tag):
    """ Render the background grid as a pattern definition plus a page-filling rectangle using it. """
    style = style or GridStyle()
    step = prec(style.step)
    pattern = tag('pattern', [
        tag('path', d=f'M {step} 0 L 0 0 0 {step}', fill='none', stroke=style.color,
            stroke_width=prec(style.stroke_width), opacity=prec(style.opacity))],
        id=GRID_PATTERN_ID, width=step, height=step, patternUnits='userSpaceOnUse')

    return [
        tag('defs', [pattern]),
        tag('rect', width='100%', height='100%', fill=f'url(#{GRID_PATTERN_ID})')]


def rosetta_to_svg(style, revolutions=REVOLUTIONS, tag=Tag):
    """ Render a single rotating rosetta.

    :param style: :py:class:`~.styles.RosettaStyle` to draw
    :param float revolutions: Number of turns of the rolling circle to sample
    :param function tag: Tag constructor to use.

    :raises InvalidParameterError: if the style does not describe a valid curve.
    """
    points = style.curve(revolutions).compute_points()
    if len(points) < 2:
        warnings.warn(f'Rosetta {style} has only {len(points)} point(s) and will not be visible.', RosettaWarning)

    path = tag('path', fill='none', stroke_width=prec(style.stroke_width), stroke=style.color,
               d=svg_path_data(points))
    spin = tag('animateTransform', attributeName='transform', attributeType='XML', type='rotate',
               **{'from': '0'}, to='360', dur=style.duration, repeatCount='indefinite')

    return tag('g', [tag('g', [path, spin], transform='rotate(0)')], id='rosettas')


def svg_overlay(tag=Tag):
    """ Black rectangle covering the page that fades out after load. """
    return tag('rect', id='black-overlay', width='100%', height='100%', fill='black')


def rosettas_to_svg(styles=DEFAULT_STYLES, grid=None, revolutions=REVOLUTIONS, tag=Tag):
    """ Render a complete SVG document containing the given rosettas on top of a grid. """
    tags = [*svg_defs(tag=tag), *grid_to_svg(grid, tag=tag)]
    tags += [rosetta_to_svg(style, revolutions, tag=tag) for style in styles]
    tags.append(svg_overlay(tag=tag))
    return setup_svg(tags, tag=tag)


def create_svg_rosettas(out='rosettas.svg', styles=DEFAULT_STYLES, grid=None, revolutions=REVOLUTIONS):
    """ Render an animated SVG of the given rosettas and save it.

    :param out: Output path, or an open text file.
    :returns: ``out``
    """
    # Render fully before touching the output so a bad style does not leave a truncated file behind.
    svg = str(rosettas_to_svg(styles, grid, revolutions))

    if hasattr(out, 'write'):
        out.write(svg)
    else:
        Path(out).write_text(svg, encoding='utf-8')
    return out
