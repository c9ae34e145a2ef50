#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Light spot cast by a ray bundle on a projection screen

    The spot spans the points where the outermost rays of the bundle first
    cross the screen's bisector line. Trace the bundle in
    :attr:`~.RaysMode.MARGINAL` or :attr:`~.RaysMode.MANY` mode so that the
    rays through the edges of the aperture are included.

    The spot is drawn as an ellipse, half as wide as it is tall. Its
    intensity falls off as the light spreads over a taller spot.

.. Created on Mon Mar 28 11:02:17 2022

.. codeauthor: Michael J. Hayford
"""
import logging
from collections import namedtuple

import numpy as np

from geoptics.optical.model_constants import FULL_INTENSITY_LIGHT_SPOT_HEIGHT

logger = logging.getLogger(__name__)

LightSpot = namedtuple('LightSpot', ['position', 'radius_x', 'radius_y',
                                     'intensity', 'visible_range'])
LightSpot.__doc__ = "elliptical spot of light on a projection screen"
LightSpot.position.__doc__ = "center of the spot, a numpy array"
LightSpot.radius_x.__doc__ = "horizontal semi-axis of the drawn ellipse"
LightSpot.radius_y.__doc__ = "vertical semi-axis, half the spot height"
LightSpot.intensity.__doc__ = "relative brightness, in [0, 1]"
LightSpot.visible_range.__doc__ = ("(bottom, top) y of the part of the spot "
                                   "that falls on the screen")


def screen_crossing(ray, screen_x):
    """ returns the first point where ray reaches the line x = screen_x

    Virtual segments carry no light and are skipped.

    Returns:
        the crossing point as a numpy array, or None if the ray never
        reaches the line
    """
    for seg in ray:
        if seg.is_virtual:
            continue
        p0, p1 = seg.start_point, seg.end_point
        dx = p1[0] - p0[0]
        if dx == 0.0:
            continue
        t = (screen_x - p0[0])/dx
        if 0.0 <= t <= 1.0:
            return p0 + t*(p1 - p0)
    return None


def spot_intensity(spot_height):
    """ full intensity for a small spot, diluted over a taller one """
    if spot_height <= 0.0:
        return 1.0
    return min(max(FULL_INTENSITY_LIGHT_SPOT_HEIGHT/spot_height, 0.0), 1.0)


def compute_light_spot(rays, screen):
    """ returns the :class:`LightSpot` the rays cast on screen, or None

    Args:
        rays: list of traced rays, each a list of :class:`~.LightRaySegment`
        screen: the :class:`~.ProjectionScreen`

    None is returned if no ray reaches the screen or if the spot lies
    entirely above or below it.
    """
    screen_pos = screen.position
    hits = [pt for pt in (screen_crossing(ray, screen_pos[0]) for ray in rays)
            if pt is not None]
    if len(hits) == 0:
        return None

    ys = [pt[1] for pt in hits]
    top, bottom = max(ys), min(ys)
    h = screen.half_height
    visible_top = min(top, screen_pos[1] + h)
    visible_bottom = max(bottom, screen_pos[1] - h)
    if visible_top < visible_bottom:
        logger.debug("light spot %s-%s misses the screen", bottom, top)
        return None

    radius_y = (top - bottom)/2
    center = np.array([screen_pos[0], (top + bottom)/2])
    return LightSpot(center, radius_y/2, radius_y,
                     spot_intensity(top - bottom),
                     (visible_bottom, visible_top))
