#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Optical objects, the light sources imaged by the optic

.. Created on Thu Mar 17 09:31:26 2022

.. codeauthor: Michael J. Hayford
"""
import math

import numpy as np

from geoptics.optical.model_constants import MIN_ARROW_MAGNITUDE
from geoptics.optical.opticerror import check_position, InvalidParameterError
from geoptics.util.observable import Observable


class OpticalObject(Observable):
    """ Base class for a light emitting or reflecting object

    Attributes:
        label: display name of the object
    """

    def __init__(self, position, label='', visible=True):
        super().__init__()
        self._position = check_position('position', position)
        self.label = label
        self._visible = bool(visible)
        self._defaults = (self._position.copy(), self._visible)

    def __repr__(self):
        return "{!s}({!r}, label={!r})".format(type(self).__name__,
                                               tuple(self._position),
                                               self.label)

    @property
    def position(self):
        """ the imaged point of the object """
        return self._position.copy()

    @position.setter
    def position(self, value):
        pos = check_position('position', value)
        if not np.array_equal(pos, self._position):
            self._position = pos
            self.notify()

    @property
    def visible(self):
        return self._visible

    @visible.setter
    def visible(self, value):
        value = bool(value)
        if value != self._visible:
            self._visible = value
            self.notify()

    def reset(self):
        pos, self._visible = self._defaults
        self._position = pos.copy()
        self.notify()

    def listobj_str(self):
        return f"{self.label or type(self).__name__}: "\
               f"{self._position[0]:.6g}, {self._position[1]:.6g}\n"


class PointObject(OpticalObject):
    """ point source of light """


def _check_magnitude(value):
    try:
        magnitude = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"magnitude must be a number, "
                                    f"got {value!r}",
                                    name='magnitude', value=value) from None
    if not math.isfinite(magnitude) or abs(magnitude) < MIN_ARROW_MAGNITUDE:
        raise InvalidParameterError(
            f"magnitude must be finite with |magnitude| >= "
            f"{MIN_ARROW_MAGNITUDE:g}, got {value!r}",
            name='magnitude', value=value)
    return magnitude


class ArrowObject(OpticalObject):
    """ vertical arrow; the position is the tip of the arrow

    The tail is *magnitude* below the tip. A negative magnitude gives an
    arrow pointing down.
    """

    def __init__(self, position, magnitude=2*MIN_ARROW_MAGNITUDE, **kwargs):
        self._magnitude = _check_magnitude(magnitude)
        super().__init__(position, **kwargs)
        self._default_magnitude = self._magnitude

    def __repr__(self):
        return "{!s}({!r}, magnitude={!r}, label={!r})".format(
            type(self).__name__, tuple(self._position), self._magnitude,
            self.label)

    @property
    def magnitude(self):
        return self._magnitude

    @magnitude.setter
    def magnitude(self, value):
        magnitude = _check_magnitude(value)
        if magnitude != self._magnitude:
            self._magnitude = magnitude
            self.notify()

    @property
    def tail_position(self):
        return self._position - np.array([0., self._magnitude])

    def reset(self):
        self._magnitude = self._default_magnitude
        super().reset()

    def listobj_str(self):
        o_str = super().listobj_str()
        return o_str[:-1] + f"   magnitude: {self._magnitude:.6g}\n"
