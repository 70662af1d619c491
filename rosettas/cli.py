#! /usr/bin/env python
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
import sys
import warnings
from pathlib import Path

import click

from .hypotrochoid import Hypotrochoid, REVOLUTIONS
from .styles import DEFAULT_STYLES, GridStyle, load_styles, with_steps
from .renderer import create_svg_rosettas, svg_path_data
from .utils import InvalidParameterError, RosettaWarning
from . import __version__


def _showwarning(message, category, filename, lineno, file=None, line=None):
    if file is None:
        file = sys.stderr

    filename = Path(filename)
    module_install_location = Path(__file__).parent.parent
    if filename.is_relative_to(module_install_location):
        filename = filename.relative_to(module_install_location)

    print(f'{filename}:{lineno}: {message}', file=file)
warnings.showwarning = _showwarning

def _print_version(ctx, param, value):
    if value and not ctx.resilient_parsing:
        click.echo(f'Version {__version__}')
        ctx.exit()


@click.group()
@click.option('--version', is_flag=True, callback=_print_version, expose_value=False, is_eager=True)
def cli():
    """ The rosettas CLI draws hypotrochoid "rosetta" curves and renders them into animated SVG files. """
    pass


@cli.command()
@click.option('--version', is_flag=True, callback=_print_version, expose_value=False, is_eager=True)
@click.option('--warnings', 'format_warnings', type=click.Choice(['default', 'ignore', 'once', 'error']),
              default='default', help='''Enable, disable or escalate warnings about rosettas that will not be visible
              (default: on)''')
@click.option('-s', '--styles', type=click.Path(exists=True, dir_okay=False, path_type=Path), help='''Load rosetta
              styles from given JSON file. The file must contain either a list of rosettas, or an object with a
              "rosettas" list and an optional "grid" object. Each rosetta needs the keys outer_radius, inner_radius,
              distance, color and duration, and may set steps and stroke_width. The grid object may set step, color,
              stroke_width and opacity.''')
@click.option('--steps', type=int, help='Override the number of line segments used for every rosetta.')
@click.option('--revolutions', type=float, default=REVOLUTIONS, show_default=True, help='''Number of turns of the
              rolling circle to sample. Curves that do not close within this number of turns are cut off.''')
@click.option('--grid-step', type=float, help='Override the spacing of the background grid.')
@click.argument('outfile', type=click.File('w'), default='rosettas.svg')
def render(outfile, format_warnings, styles, steps, revolutions, grid_step):
    """ Render a set of animated rosettas into an SVG file. Without --styles, renders the three built-in rosettas. """

    if styles:
        try:
            rosetta_styles, grid = load_styles(styles)
        except ValueError as e: # also covers json.JSONDecodeError
            raise click.BadParameter(str(e), param_hint='--styles')
    else:
        rosetta_styles, grid = list(DEFAULT_STYLES), None

    if steps is not None:
        rosetta_styles = with_steps(rosetta_styles, steps)

    try:
        if grid_step is not None:
            grid = grid or GridStyle()
            grid.step = grid_step

        with warnings.catch_warnings():
            warnings.simplefilter(format_warnings)
            create_svg_rosettas(outfile, rosetta_styles, grid, revolutions)

    except ValueError as e: # InvalidParameterError is a ValueError
        raise click.UsageError(str(e))

    except RosettaWarning as e: # --warnings=error
        raise click.ClickException(str(e))


@cli.command()
@click.option('--version', is_flag=True, callback=_print_version, expose_value=False, is_eager=True)
@click.option('--steps', type=int, default=3000, show_default=True, help='Number of line segments')
@click.option('--revolutions', type=float, default=REVOLUTIONS, show_default=True, help='''Number of turns of the
              rolling circle to sample''')
@click.option('-f', '--format', 'output_format', type=click.Choice(['json', 'svg']), default='json', help='''Output
              format: a JSON list of [x, y] pairs (default), or SVG path data''')
@click.argument('outer_radius', type=float)
@click.argument('inner_radius', type=float)
@click.argument('pen_offset', type=float)
@click.argument('outfile', type=click.File('w'), default='-')
def points(outer_radius, inner_radius, pen_offset, outfile, steps, revolutions, output_format):
    """ Print the recentered points of a single hypotrochoid. A negative pen offset must be preceded by "--". """

    curve = Hypotrochoid(outer_radius, inner_radius, pen_offset, steps, revolutions=revolutions)
    try:
        pts = curve.compute_points()
    except InvalidParameterError as e:
        raise click.UsageError(str(e))

    if output_format == 'json':
        outfile.write(json.dumps([[x, y] for x, y in pts]))
    else:
        outfile.write(svg_path_data(pts))
    outfile.write('\n')


if __name__ == '__main__':
    cli()
