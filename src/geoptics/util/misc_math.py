#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" miscellaneous functions for working with 2d numpy vectors

.. Created on Tue Mar 15 09:12:40 2022

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from numpy.linalg import norm
from math import atan2

from geoptics.coord_geometry_types import Poly2d
from geoptics.typing import SegmentEnds


def normalize(v):
    """ return normalized version of input vector v """
    length = norm(v)
    if length == 0.0:
        return v
    else:
        return v/length


def angle_of(v):
    """ return the angle of the 2d vector v wrt the +x axis, in radians """
    return atan2(v[1], v[0])


def reflect_x(d):
    """ reflect direction d in a plane normal to the x axis """
    return np.array([-d[0], d[1]])


def bounds_contains(bounds, pt):
    """ returns True if pt lies inside or on the edge of bounds """
    min_x, min_y, max_x, max_y = bounds
    return min_x <= pt[0] <= max_x and min_y <= pt[1] <= max_y


def clip_segment_to_bounds(p0, p1, bounds) -> SegmentEnds | None:
    """ clip the segment p0-p1 to a rectangle, Liang-Barsky style

    Args:
        p0: start point of the segment
        p1: end point of the segment
        bounds: (min_x, min_y, max_x, max_y) tuple

    Returns:
        the clipped (start, end) points as numpy arrays, or None if the
        segment lies completely outside of bounds
    """
    min_x, min_y, max_x, max_y = bounds
    dx = p1[0] - p0[0]
    dy = p1[1] - p0[1]
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, p0[0] - min_x), (dx, max_x - p0[0]),
                 (-dy, p0[1] - min_y), (dy, max_y - p0[1])):
        if p == 0.0:
            if q < 0.0:
                return None
        else:
            t = q/p
            if p < 0.0:
                if t > t1:
                    return None
                t0 = max(t0, t)
            else:
                if t < t0:
                    return None
                t1 = min(t1, t)
    start = np.array([p0[0] + t0*dx, p0[1] + t0*dy])
    end = np.array([p0[0] + t1*dx, p0[1] + t1*dy])
    return start, end


def far_point(pt, d, bounds):
    """ return a point along the ray pt + s*d guaranteed to lie past bounds

    The returned point is finite, so that clipping the segment from pt to it
    with :func:`clip_segment_to_bounds` gives the visible part of the ray.
    """
    min_x, min_y, max_x, max_y = bounds
    center = np.array([(min_x + max_x)/2, (min_y + max_y)/2])
    reach = 2*((max_x - min_x) + (max_y - min_y)) + norm(pt - center)
    return pt + reach*normalize(d)


def intersect_vertical_line(p0, d, x):
    """ intersect the ray p0 + s*d with the vertical line at x

    Returns:
        tuple: distance along the ray *s* and the intersection point, or
        None if the ray is parallel to the line or the line is behind p0
    """
    if d[0] == 0.0:
        return None
    s = (x - p0[0])/d[0]
    if s < 0.0:
        return None
    return s, np.array([x, p0[1] + s*d[1]])


def sample_quadratic_bezier(p0, c, p1, steps=6):
    """ return steps+1 points along the quadratic bezier from p0 to p1

    Args:
        p0: start point
        c: control point
        p1: end point
        steps: number of straight line pieces in the approximation
    """
    t = np.linspace(0.0, 1.0, steps + 1)[:, np.newaxis]
    p0, c, p1 = np.asarray(p0), np.asarray(c), np.asarray(p1)
    return (1 - t)**2*p0 + 2*(1 - t)*t*c + t**2*p1


def point_in_polygon(pt, poly: Poly2d) -> bool:
    """ even-odd test of pt against the closed polyline poly, shape (N, 2) """
    x, y = pt[0], pt[1]
    xs = poly[:, 0]
    ys = poly[:, 1]
    xj = np.roll(xs, 1)
    yj = np.roll(ys, 1)
    straddles = (ys > y) != (yj > y)
    with np.errstate(divide='ignore', invalid='ignore'):
        x_cross = (xj - xs)*(y - ys)/(yj - ys) + xs
    hits = np.logical_and(straddles, x < x_cross)
    return bool(np.count_nonzero(hits) % 2)


