#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Module for the focal length models of lenses and mirrors

    A focal length model provides the magnitude of the focal length of an
    optic. :class:`~.DirectFocalLengthModel` lets the user set the focal
    length itself, while :class:`~.IndirectFocalLengthModel` derives it from
    the radius of curvature and index of refraction with the lensmaker's
    equation for a symmetric thin lens:

    .. math::

        f = \\frac{R}{2(n - 1)}

    Mirror models use ``index_of_refraction = None`` and :math:`f = R/2`.

.. Created on Tue Mar 15 11:05:31 2022

.. codeauthor: Michael J. Hayford
"""
import logging

from geoptics.optical.model_enums import FocalLengthControl
from geoptics.optical.opticerror import (check_positive,
                                         check_index_of_refraction,
                                         UnsupportedOperationError)
from geoptics.util.observable import Observable

logger = logging.getLogger(__name__)


def focal_length_from_radius(radius_of_curvature, index_of_refraction=None):
    """ return the focal length magnitude for R and n; n=None for a mirror """
    if index_of_refraction is None:
        return radius_of_curvature/2
    return radius_of_curvature/(2*(index_of_refraction - 1))


def radius_from_focal_length(focal_length, index_of_refraction=None):
    """ inverse of :func:`focal_length_from_radius` """
    if index_of_refraction is None:
        return 2*focal_length
    return 2*focal_length*(index_of_refraction - 1)


def _check_index(index_of_refraction):
    if index_of_refraction is None:
        return None
    return check_index_of_refraction(index_of_refraction)


class FocalLengthModel(Observable):
    """ Base class for the focal length models

    Attributes:
        control: the :class:`~.FocalLengthControl` this model implements
    """
    control = None

    def __init__(self):
        super().__init__()

    @property
    def focal_length_magnitude(self):
        raise NotImplementedError

    @property
    def radius_of_curvature_magnitude(self):
        raise NotImplementedError

    @property
    def index_of_refraction(self):
        raise NotImplementedError

    @property
    def is_mirror(self):
        return self.index_of_refraction is None

    def sync_to_model(self, other):
        """ solve this model's free parameters to match *other*'s focal length

        Used when the focal length control is switched, so that the focal
        length magnitude is preserved across the switch.
        """
        raise NotImplementedError

    def reset(self):
        raise NotImplementedError

    def listobj_str(self):
        o_str = f"{type(self).__name__}: control={self.control.value}\n"
        o_str += f"focal length: {self.focal_length_magnitude:.6g}\n"
        o_str += f"radius of curvature: "\
                 f"{self.radius_of_curvature_magnitude:.6g}\n"
        if not self.is_mirror:
            o_str += f"index of refraction: {self.index_of_refraction:.6g}\n"
        return o_str


class DirectFocalLengthModel(FocalLengthModel):
    """ focal length set directly; the index of refraction is fixed

    Args:
        focal_length_magnitude: positive focal length
        index_of_refraction: fixed index, > 1, or None for a mirror
    """
    control = FocalLengthControl.DIRECT

    def __init__(self, focal_length_magnitude, index_of_refraction=None):
        super().__init__()
        self._focal_length = check_positive('focal_length_magnitude',
                                            focal_length_magnitude)
        self._index = _check_index(index_of_refraction)
        self._defaults = (self._focal_length, self._index)

    def __repr__(self):
        return "{!s}({!r}, index_of_refraction={!r})".format(
            type(self).__name__, self._focal_length, self._index)

    @property
    def focal_length_magnitude(self):
        return self._focal_length

    @focal_length_magnitude.setter
    def focal_length_magnitude(self, value):
        f = check_positive('focal_length_magnitude', value)
        if f != self._focal_length:
            self._focal_length = f
            self.notify()

    @property
    def radius_of_curvature_magnitude(self):
        return radius_from_focal_length(self._focal_length, self._index)

    @property
    def index_of_refraction(self):
        return self._index

    def sync_to_model(self, other):
        self.focal_length_magnitude = other.focal_length_magnitude

    def reset(self):
        self._focal_length, self._index = self._defaults
        self.notify()


class IndirectFocalLengthModel(FocalLengthModel):
    """ focal length derived from the radius of curvature and index

    Args:
        radius_of_curvature_magnitude: positive radius of curvature
        index_of_refraction: index of refraction, > 1, or None for a mirror
    """
    control = FocalLengthControl.INDIRECT

    def __init__(self, radius_of_curvature_magnitude,
                 index_of_refraction=None):
        super().__init__()
        self._radius = check_positive('radius_of_curvature_magnitude',
                                      radius_of_curvature_magnitude)
        self._index = _check_index(index_of_refraction)
        self._defaults = (self._radius, self._index)

    def __repr__(self):
        return "{!s}({!r}, index_of_refraction={!r})".format(
            type(self).__name__, self._radius, self._index)

    @property
    def focal_length_magnitude(self):
        return focal_length_from_radius(self._radius, self._index)

    @property
    def radius_of_curvature_magnitude(self):
        return self._radius

    @radius_of_curvature_magnitude.setter
    def radius_of_curvature_magnitude(self, value):
        r = check_positive('radius_of_curvature_magnitude', value)
        if r != self._radius:
            self._radius = r
            self.notify()

    @property
    def index_of_refraction(self):
        return self._index

    @index_of_refraction.setter
    def index_of_refraction(self, value):
        if self._index is None:
            raise UnsupportedOperationError(
                "a mirror has no index of refraction")
        n = check_index_of_refraction(value)
        if n != self._index:
            self._index = n
            self.notify()

    def set_parameters(self, radius_of_curvature_magnitude,
                       index_of_refraction=None):
        """ set R and n together, notifying observers once """
        r = check_positive('radius_of_curvature_magnitude',
                           radius_of_curvature_magnitude)
        n = self._index
        if index_of_refraction is not None:
            if self._index is None:
                raise UnsupportedOperationError(
                    "a mirror has no index of refraction")
            n = check_index_of_refraction(index_of_refraction)
        if (r, n) != (self._radius, self._index):
            self._radius, self._index = r, n
            self.notify()

    def sync_to_model(self, other):
        # the index is kept; the radius absorbs the focal length
        r = radius_from_focal_length(other.focal_length_magnitude,
                                     self._index)
        logger.debug("sync radius of curvature to %s: %g", other, r)
        self.radius_of_curvature_magnitude = r

    def reset(self):
        self._radius, self._index = self._defaults
        self.notify()
