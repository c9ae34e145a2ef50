#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Outline geometry of lenses and mirrors

    The shapes are closed 2d polylines in the optic's local coordinate
    system, with the origin at the center of the optic. Curved sections are
    quadratic bezier curves sampled with
    :func:`~geoptics.util.misc_math.sample_quadratic_bezier`.

    Lens thickness is exaggerated: the surfaces are parabolic and their width
    is computed from the radius of curvature plus an offset, so that lenses
    whose radius is smaller than their semi-diameter can still be drawn.

.. Created on Wed Mar 16 14:22:50 2022

.. codeauthor: Michael J. Hayford
"""
from collections import namedtuple
from math import sqrt, atan, cos, sin

import numpy as np

from geoptics.optical.model_enums import OpticShape
from geoptics.optical.model_constants import (Bounds2, MIRROR_THICKNESS,
                                              LENS_SHAPE_OFFSET_RADIUS,
                                              SHAPE_CURVE_STEPS)
from geoptics.util.misc_math import sample_quadratic_bezier, point_in_polygon


class OpticShapes(namedtuple('OpticShapes',
                             ['front', 'back', 'outline', 'fill'])):
    """ polylines describing an optic; each is an (N, 2) numpy array

    Attributes:
        front: the surface facing the objects
        back: the opposite surface, None for mirrors
        outline: the boundary drawn around the optic
        fill: the region filled in when drawing the optic
    """
    __slots__ = ()

    def bounds(self):
        """ returns the :class:`~.Bounds2` enclosing the fill shape """
        min_x, min_y = np.min(self.fill, axis=0)
        max_x, max_y = np.max(self.fill, axis=0)
        return Bounds2(min_x, min_y, max_x, max_y)

    def translated(self, pos):
        """ returns a copy of the shapes moved by the vector pos """
        offset = np.asarray(pos, dtype=float)
        return OpticShapes(*(None if s is None else s + offset
                             for s in self))

    def contains_point(self, pt):
        """ returns True if the local point pt lies inside the fill shape """
        return point_in_polygon(np.asarray(pt, dtype=float), self.fill)


class _PathBuilder:
    """ accumulates line and quadratic curve pieces into a polyline """
    def __init__(self, start, steps):
        self.pts = [np.asarray(start, dtype=float)]
        self.steps = steps

    def line_to(self, pt):
        self.pts.append(np.asarray(pt, dtype=float))
        return self

    def curve_to(self, ctrl, pt):
        curve = sample_quadratic_bezier(self.pts[-1], ctrl, pt, self.steps)
        self.pts.extend(curve[1:])
        return self

    def polyline(self):
        return np.array(self.pts)


def lens_shapes(optic_shape, radius_of_curvature, diameter,
                offset_radius=LENS_SHAPE_OFFSET_RADIUS,
                steps=SHAPE_CURVE_STEPS):
    """ returns the :class:`OpticShapes` of a lens

    Args:
        optic_shape: :class:`~.OpticShape` of the lens
        radius_of_curvature: radius of curvature magnitude
        diameter: height of the lens
        offset_radius: added to the radius when computing the lens width
        steps: line pieces per curved section
    """
    half_height = diameter/2
    half_width = 0.5*half_height**2/(radius_of_curvature + offset_radius)
    top = (0., half_height)
    bottom = (0., -half_height)

    if optic_shape == OpticShape.CONVEX:
        # the curves pass through (-half_width, 0) and (half_width, 0)
        left = (-2*half_width, 0.)
        right = (2*half_width, 0.)
        outline = (_PathBuilder(top, steps).curve_to(left, bottom)
                   .curve_to(right, top).polyline())
        front = _PathBuilder(top, steps).curve_to(left, bottom).polyline()
        back = _PathBuilder(top, steps).curve_to(right, bottom).polyline()
    else:
        top_left = (-half_width, half_height)
        top_right = (half_width, half_height)
        bottom_left = (-half_width, -half_height)
        bottom_right = (half_width, -half_height)
        if optic_shape == OpticShape.CONCAVE:
            mid_left = (half_width/2, 0.)
            mid_right = (-half_width/2, 0.)
        else:
            mid_left = (-half_width, 0.)
            mid_right = (half_width, 0.)
        outline = (_PathBuilder(top_left, steps).line_to(top_right)
                   .curve_to(mid_right, bottom_right).line_to(bottom_left)
                   .curve_to(mid_left, top_left).polyline())
        front = (_PathBuilder(top_left, steps)
                 .curve_to(mid_left, bottom_left).polyline())
        back = (_PathBuilder(top_right, steps)
                .curve_to(mid_right, bottom_right).polyline())

    return OpticShapes(front, back, outline, outline)


def mirror_shapes(optic_shape, radius_of_curvature, diameter,
                  thickness=MIRROR_THICKNESS, steps=SHAPE_CURVE_STEPS):
    """ returns the :class:`OpticShapes` of a first surface mirror

    The reflecting surface is at the left, the backing of width *thickness*
    is to its right.
    """
    half_height = diameter/2
    if optic_shape == OpticShape.FLAT:
        curve_sign = 0
        half_width = 0.
        angle = 0.
    else:
        curve_sign = 1 if optic_shape == OpticShape.CONVEX else -1
        half_width = radius_of_curvature - sqrt(
            max(radius_of_curvature**2 - half_height**2, 0.))
        angle = atan(half_height/radius_of_curvature)

    # tilt the top and bottom of the backing to give right angle corners
    offset_top = thickness*np.array([cos(-curve_sign*angle),
                                     sin(-curve_sign*angle)])
    offset_bottom = thickness*np.array([cos(curve_sign*angle),
                                        sin(curve_sign*angle)])

    top_left = np.array([curve_sign*half_width, half_height])
    top_right = top_left + offset_top
    bottom_left = np.array([curve_sign*half_width, -half_height])
    bottom_right = bottom_left + offset_bottom

    # the front curve passes through the origin
    mid_left = np.array([-curve_sign*half_width, 0.])
    mid_right = mid_left + np.array([thickness, 0.])

    front = _PathBuilder(top_left, steps).curve_to(mid_left,
                                                   bottom_left).polyline()
    fill = (_PathBuilder(top_left, steps).curve_to(mid_left, bottom_left)
            .line_to(bottom_right).curve_to(mid_right, top_right)
            .polyline())
    return OpticShapes(front, None, front, fill)
