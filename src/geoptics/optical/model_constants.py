#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" defaults and valid ranges for the optics model parameters

.. Created on Tue Mar 15 10:40:07 2022

.. codeauthor: Michael J. Hayford
"""

from collections import namedtuple


RangeWithValue = namedtuple('RangeWithValue', ['min', 'max', 'value'])
RangeWithValue.__doc__ = "slider range of a parameter along with its default"
RangeWithValue.min.__doc__ = "smallest value offered to the user"
RangeWithValue.max.__doc__ = "largest value offered to the user"
RangeWithValue.value.__doc__ = "initial value"

Bounds2 = namedtuple('Bounds2', ['min_x', 'min_y', 'max_x', 'max_y'])
Bounds2.__doc__ = "axis aligned rectangle in model coordinates"


LENS_RADIUS_OF_CURVATURE = RangeWithValue(30., 130., 80.)
LENS_INDEX_OF_REFRACTION = RangeWithValue(1.2, 1.9, 1.5)
LENS_DIAMETER = RangeWithValue(30., 130., 80.)

MIRROR_RADIUS_OF_CURVATURE = RangeWithValue(150., 300., 200.)
MIRROR_DIAMETER = RangeWithValue(30., 130., 80.)

#: smallest allowed magnitude of an arrow object
MIN_ARROW_MAGNITUDE = 20.

#: number of rays in a RaysMode.MANY fan
MANY_RAYS_COUNT = 15

#: visible region of the model, ray segments are clipped to it
SCENE_BOUNDS = Bounds2(-800., -400., 800., 400.)

#: offset added to R when exaggerating the drawn lens thickness
LENS_SHAPE_OFFSET_RADIUS = 100.

#: drawn thickness of the mirror backing
MIRROR_THICKNESS = 5.

#: line pieces used per curved outline section
SHAPE_CURVE_STEPS = 8

#: tolerance used to decide a point coincides with a jump point
JUMP_POINT_TOLERANCE = 1e-6

DEFAULT_OPTIC_POSITION = (0., 0.)

DEFAULT_SCREEN_POSITION = (200., 0.)

#: projection screen outline, drawn in perspective: width, and the heights
#: of the near (right) and far (left) edges
SCREEN_WIDTH = 42.
SCREEN_NEAR_HEIGHT = 134.
SCREEN_FAR_HEIGHT = 112.

#: light spots shorter than this are shown at full intensity
FULL_INTENSITY_LIGHT_SPOT_HEIGHT = 7.
