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
Rosettas
========

rosettas draws hypotrochoids ("rosetta" curves, the ones you get from a spirograph) and renders them into animated SVG
files. The curve math lives in :py:mod:`.hypotrochoid`, the SVG output in :py:mod:`.renderer`.
"""

from .hypotrochoid import Coordinate, Hypotrochoid, compute_points, REVOLUTIONS
from .styles import RosettaStyle, GridStyle, DEFAULT_STYLES, load_styles
from .renderer import create_svg_rosettas, rosettas_to_svg, svg_path_data
from .utils import InvalidParameterError, RosettaWarning

__version__ = '1.0.0'
