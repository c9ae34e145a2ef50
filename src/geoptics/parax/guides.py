#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Guides, the rotating arms drawn at the top and bottom edge of a lens

    Each guide pivots at a fulcrum on the edge of the lens aperture. The
    incident arm points from the fulcrum toward the object and the
    transmitted arm points along the ray leaving the lens at the fulcrum:
    toward a real image, away from a virtual image, or parallel to the chief
    ray when the image is at infinity. Angles are in radians, measured from
    the +x axis.

.. Created on Fri Mar 18 14:55:09 2022

.. codeauthor: Michael J. Hayford
"""
import math
from collections import namedtuple

import numpy as np
from numpy.linalg import norm

from geoptics.optical.model_enums import (GuideLocation, OpticType,
                                          OpticalImageType)
from geoptics.optical.opticerror import UnsupportedOperationError
from geoptics.util.misc_math import angle_of

Guide = namedtuple('Guide', ['location', 'fulcrum_position', 'incident_angle',
                             'transmitted_angle'])
Guide.__doc__ = "guide arms pivoting at one edge of the lens"
Guide.location.__doc__ = ":class:`~.GuideLocation` of the fulcrum"
Guide.fulcrum_position.__doc__ = "pivot point on the edge of the aperture"
Guide.incident_angle.__doc__ = "angle of the arm pointing at the object"
Guide.transmitted_angle.__doc__ = "angle of the arm along the outgoing ray"

Guides = namedtuple('Guides', ['top_guide', 'bottom_guide'])
Guides.__doc__ = "the pair of guides of a lens"


def _transmitted_angle(fulcrum, obj_pos, optic_pos, image, incident_angle):
    if image.at_infinity:
        v = optic_pos - obj_pos
    elif image.image_type == OpticalImageType.REAL:
        v = image.position - fulcrum
    else:
        v = fulcrum - image.position
    if norm(v) == 0.0:
        # image on the fulcrum, continue straight through
        return incident_angle + math.pi
    return angle_of(v)


def compute_guide(location, obj, optic, image):
    """ returns the :class:`Guide` at location for obj and its image """
    location_sign = 1 if location == GuideLocation.TOP else -1
    optic_pos = optic.position
    fulcrum = optic_pos + np.array([0., location_sign*optic.diameter/2])
    obj_pos = obj.position
    incident_angle = angle_of(obj_pos - fulcrum)
    transmitted_angle = _transmitted_angle(fulcrum, obj_pos, optic_pos,
                                           image, incident_angle)
    return Guide(location, fulcrum, incident_angle, transmitted_angle)


def compute_guides(obj, optic, image):
    """ returns the top and bottom :class:`Guides` of a lens

    Raises:
        UnsupportedOperationError: if optic is a mirror
    """
    if optic.optic_type != OpticType.LENS:
        raise UnsupportedOperationError(
            f"guides are not available for a {optic.optic_type.value}",
            optic=optic)
    return Guides(compute_guide(GuideLocation.TOP, obj, optic, image),
                  compute_guide(GuideLocation.BOTTOM, obj, optic, image))
