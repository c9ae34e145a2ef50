#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Functions to trace light rays through a thin lens or mirror

    The optic acts at its vertical axis. A ray from the object is
    intersected with that axis; if it hits within the aperture it leaves
    the optic heading through the image point (real image) or away from it
    (virtual image). When the image is at infinity every outgoing ray is
    parallel to the chief ray, the ray through the center of the optic.

    All segments are clipped to the scene bounds.

.. Created on Fri Mar 18 09:40:51 2022

.. codeauthor: Michael J. Hayford
"""
import logging
import math
from itertools import chain

import numpy as np
from numpy.linalg import norm

from geoptics.optical import model_constants as mc
from geoptics.optical.model_enums import RaysMode, OpticType, to_enum
from geoptics.parax.imageformation import compute_image
from geoptics.raytr import LightRaySegment
from geoptics.raytr.traceerror import TraceError, TraceMissedOpticError
from geoptics.coord_geometry_types import V2d, Dir2d
from geoptics.typing import LightRay, RayFan, RaysModeName
from geoptics.util.misc_math import (normalize, reflect_x, far_point,
                                     clip_segment_to_bounds,
                                     intersect_vertical_line)

logger = logging.getLogger(__name__)

# segments shorter than this are dropped
_MIN_SEGMENT_LENGTH = 1e-9


def ray_directions(source: V2d, optic, rays_mode,
                   many_rays_count: int = mc.MANY_RAYS_COUNT) -> list[Dir2d]:
    """ returns the list of incident unit directions leaving source

    Args:
        source: the object point rays are traced from
        optic: the :class:`~.Optic`
        rays_mode: :class:`~.RaysMode`, or its string value
        many_rays_count: number of rays in a RaysMode.MANY fan

    Directions of zero length, which occur when source coincides with the
    ray target, are omitted.
    """
    rays_mode = to_enum(RaysMode, rays_mode)
    source = np.asarray(source, dtype=float)
    optic_pos = optic.position

    if rays_mode == RaysMode.NONE:
        targets_dirs = []
    elif rays_mode == RaysMode.MARGINAL:
        targets_dirs = [optic.top_point - source,
                        optic.bottom_point - source]
    elif rays_mode == RaysMode.PRINCIPAL:
        targets_dirs = [np.array([1., 0.]), optic_pos - source]
        f = optic.focal_length
        if not math.isinf(f):
            # through (or toward) the focal point on the object side
            v = optic_pos - np.array([f, 0.]) - source
            if v[0] < 0.0:
                v = -v
            targets_dirs.append(v)
    else:
        h = optic.diameter/2
        n = many_rays_count
        if n < 2:
            ys = [0.]
        else:
            ys = [h*(1 - 2*i/(n - 1)) for i in range(n)]
        targets_dirs = [optic_pos + np.array([0., y]) - source for y in ys]

    return [normalize(v) for v in targets_dirs if norm(v) > 0.0]


def _outgoing_direction(inc_pt, d_in, optic, image, chief_dir):
    """ returns the direction of a ray leaving the optic at inc_pt """
    if image.at_infinity:
        d_out = chief_dir
    elif norm(image.position - inc_pt) < _MIN_SEGMENT_LENGTH:
        # image on the optic, the ray isn't deviated
        d_out = d_in
    else:
        d_out = normalize(image.position - inc_pt)
        if d_out[0]*optic.sign < 0.0:
            d_out = -d_out
        return d_out
    if optic.optic_type == OpticType.MIRROR:
        d_out = reflect_x(d_out)
    return d_out


def _clipped(p0, p1, scene_bounds, is_virtual=False):
    clipped = clip_segment_to_bounds(p0, p1, scene_bounds)
    if clipped is None:
        return None
    start, end = clipped
    if norm(end - start) < _MIN_SEGMENT_LENGTH:
        return None
    return LightRaySegment(start, end, is_virtual)


def trace_ray(pt0: V2d, dir0: Dir2d, optic, image,
              scene_bounds=mc.SCENE_BOUNDS,
              chief_dir: Dir2d | None = None) -> LightRay:
    """ trace a ray starting at pt0 with direction dir0 through optic

    Args:
        pt0: start point, the object position
        dir0: unit direction of the incident ray
        optic: the :class:`~.Optic`
        image: the :class:`~.OpticalImage` of the object at pt0
        scene_bounds: :class:`~.Bounds2` the segments are clipped to
        chief_dir: direction of the chief ray, needed if the image is at
                   infinity

    Returns:
        list of :class:`~.LightRaySegment`: incident segment, segment from
        the optic to a real image, continuation to the scene boundary and
        back extension to a virtual image, omitting those that don't apply
        or lie outside of scene_bounds

    Raises:
        TraceMissedOpticError: if the ray doesn't hit the optic's aperture
    """
    pt0 = np.asarray(pt0, dtype=float)
    if dir0[0] <= 0.0:
        # light propagates in +x, toward the optic
        raise TraceMissedOpticError(optic, pt0, dir0)
    hit = intersect_vertical_line(pt0, dir0, optic.position[0])
    if hit is None:
        raise TraceMissedOpticError(optic, pt0, dir0)
    s, inc_pt = hit
    if not optic.in_aperture(inc_pt[1]):
        raise TraceMissedOpticError(optic, pt0, dir0, inc_pt)

    if chief_dir is None:
        chief_dir = normalize(optic.position - pt0)
    d_out = _outgoing_direction(inc_pt, dir0, optic, image, chief_dir)

    pieces = [(pt0, inc_pt, False)]
    if image.at_infinity:
        pieces.append((inc_pt, far_point(inc_pt, d_out, scene_bounds),
                       False))
    else:
        img_pt = image.position
        to_image = np.dot(img_pt - inc_pt, d_out)
        if to_image > _MIN_SEGMENT_LENGTH:
            pieces.append((inc_pt, img_pt, False))
            pieces.append((img_pt, far_point(img_pt, d_out, scene_bounds),
                           False))
        else:
            pieces.append((inc_pt, far_point(inc_pt, d_out, scene_bounds),
                           False))
            if to_image < -_MIN_SEGMENT_LENGTH:
                pieces.append((inc_pt, img_pt, True))

    segments = (_clipped(p0, p1, scene_bounds, is_virtual)
                for p0, p1, is_virtual in pieces)
    return [seg for seg in segments if seg is not None]


def trace_rays(obj, optic, image=None,
               rays_mode: RaysMode | RaysModeName = RaysMode.MARGINAL,
               scene_bounds=mc.SCENE_BOUNDS,
               many_rays_count: int = mc.MANY_RAYS_COUNT) -> RayFan:
    """ returns the list of rays traced from obj for rays_mode

    Each ray is a list of :class:`~.LightRaySegment`. Rays that miss the
    optic, or that lie entirely outside of scene_bounds, are omitted.

    Args:
        obj: the :class:`~.OpticalObject` emitting the rays
        optic: the :class:`~.Optic`
        image: the :class:`~.OpticalImage` of obj; computed if None
        rays_mode: :class:`~.RaysMode`, or its string value
        scene_bounds: :class:`~.Bounds2` the segments are clipped to
        many_rays_count: number of rays in a RaysMode.MANY fan
    """
    rays_mode = to_enum(RaysMode, rays_mode)
    if rays_mode == RaysMode.NONE:
        return []
    if image is None:
        image = compute_image(obj, optic)

    pt0 = obj.position
    chief_dir = normalize(optic.position - pt0)
    rays = []
    for dir0 in ray_directions(pt0, optic, rays_mode, many_rays_count):
        try:
            ray = trace_ray(pt0, dir0, optic, image, scene_bounds,
                            chief_dir=chief_dir)
        except TraceError as ray_error:
            logger.debug(f'ray_error: "{type(ray_error).__name__}", '
                         f'dir0={dir0}')
            continue
        if ray:
            rays.append(ray)
    return rays


def real_segments(rays):
    """ returns a flat list of the segments of rays that aren't virtual """
    return [seg for seg in chain.from_iterable(rays) if not seg.is_virtual]


def virtual_segments(rays):
    """ returns a flat list of the virtual segments of rays """
    return [seg for seg in chain.from_iterable(rays) if seg.is_virtual]
