#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Paraxial image formation by a thin lens or mirror

    The image distance :math:`d_i` follows from the object distance
    :math:`d_0` and the signed focal length :math:`f`:

    .. math::

        \\frac{1}{d_i} = \\frac{1}{f} - \\frac{1}{d_0} \\qquad m = -\\frac{d_i}{d_0}

    :math:`d_0` is positive for an object in front of (to the left of) the
    optic, for a lens as well as for a mirror.
    A positive :math:`d_i` gives a real image, located :math:`d_i` from the
    optic in the direction given by :attr:`~.Optic.sign`.

.. Created on Thu Mar 17 13:02:44 2022

.. codeauthor: Michael J. Hayford
"""
import logging
import math
from collections import namedtuple

import numpy as np

from geoptics.optical.model_enums import OpticalImageType
from geoptics.optical.opticerror import DegenerateGeometryError

logger = logging.getLogger(__name__)

OpticalImage = namedtuple('OpticalImage', ['position', 'magnification',
                                           'image_type', 'image_distance',
                                           'object_distance', 'at_infinity',
                                           'light_intensity', 'magnitude'])
OpticalImage.__doc__ = "image of an optical object formed by the optic"
OpticalImage.position.__doc__ = ("image point, a numpy array, or None if the "
                                 "image is at infinity")
OpticalImage.magnification.__doc__ = ("lateral magnification; inf at "
                                      "infinity")
OpticalImage.image_type.__doc__ = ":class:`~.OpticalImageType` of the image"
OpticalImage.image_distance.__doc__ = ("signed distance from the optic, "
                                       "positive for a real image")
OpticalImage.object_distance.__doc__ = "object distance used to form image"
OpticalImage.at_infinity.__doc__ = "True if the image distance diverges"
OpticalImage.light_intensity.__doc__ = "relative brightness, in [0, 1]"
OpticalImage.magnitude.__doc__ = ("signed size of an arrow image, None for a "
                                  "point object")


def object_distance(obj_pos, optic):
    """ returns the signed object distance of the point obj_pos

    The distance is positive for an object in front of (to the left of) the
    optic, for lenses and mirrors alike.

    Args:
        obj_pos: position of the object
        optic: the :class:`~.Optic` forming the image
    """
    return optic.position[0] - obj_pos[0]


def image_distance(d0, f):
    """ solve the thin lens equation for the image distance

    Args:
        d0: object distance
        f: signed focal length, math.inf for an optic with no power

    Returns:
        the image distance; 0 if d0 is 0

    Raises:
        DegenerateGeometryError: if the object is at the focal point
    """
    if d0 == 0.0:
        return 0.0
    inv_di = 1/f - 1/d0
    if inv_di == 0.0:
        raise DegenerateGeometryError(d0, f)
    return 1/inv_di


def light_intensity(optic, magnification):
    """ relative brightness of an image, in [0, 1]

    Brightness grows with the aperture and is diluted over the area of a
    magnified image.
    """
    if math.isinf(magnification):
        return 0.0
    aperture_ratio = optic.diameter/optic.diameter_range.max
    if magnification == 0.0:
        dilution = 1.0
    else:
        dilution = min(1.0, abs(1/magnification))
    return min(max(aperture_ratio*dilution, 0.0), 1.0)


def compute_image(obj, optic):
    """ returns the :class:`OpticalImage` of obj formed by optic

    The result depends only on the current state of obj and optic; an
    object at the focal point gives an image at infinity rather than an
    error.
    """
    obj_pos = obj.position
    optic_pos = optic.position
    obj_magnitude = getattr(obj, 'magnitude', None)
    d0 = object_distance(obj_pos, optic)
    f = optic.focal_length

    if d0 == 0.0:
        return OpticalImage(obj_pos, 1.0, OpticalImageType.REAL, 0.0, d0,
                            False, light_intensity(optic, 1.0),
                            obj_magnitude)

    try:
        di = image_distance(d0, f)
    except DegenerateGeometryError as dge:
        logger.info("image at infinity: %s", dge)
        return OpticalImage(None, math.inf, OpticalImageType.VIRTUAL,
                            math.inf, d0, True, 0.0,
                            None if obj_magnitude is None else math.inf)

    m = -di/d0
    position = optic_pos + np.array([optic.sign*di,
                                     m*(obj_pos[1] - optic_pos[1])])
    image_type = (OpticalImageType.REAL if di >= 0.0
                  else OpticalImageType.VIRTUAL)
    magnitude = None if obj_magnitude is None else m*obj_magnitude
    return OpticalImage(position, m, image_type, di, d0, False,
                        light_intensity(optic, m), magnitude)


def compute_images(objects, optic):
    """ returns the list of images of objects, in the same order """
    return [compute_image(obj, optic) for obj in objects]
