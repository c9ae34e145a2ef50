#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Module for the optic, a thin lens or mirror, of the optical scene

    An :class:`Optic` holds the shape, type, diameter and position of the
    optic, and delegates its focal length to one of two focal length models,
    selected by :attr:`Optic.focal_length_control`.

    The optic acts at its vertical axis, x = position[0]. Light propagates
    in the +x direction from the objects toward the optic. A :class:`Lens`
    forms images in the +x direction, a :class:`Mirror` in the -x direction;
    this direction is given by :attr:`Optic.sign`.

.. Created on Wed Mar 16 15:40:12 2022

.. codeauthor: Michael J. Hayford
"""
import logging
import math

import numpy as np

from geoptics.optical.model_enums import (OpticShape, OpticType,
                                          FocalLengthControl, to_enum)
from geoptics.optical import model_constants as mc
from geoptics.optical.opticerror import check_positive, check_position
from geoptics.elem.focallength import (DirectFocalLengthModel,
                                       IndirectFocalLengthModel,
                                       focal_length_from_radius)
from geoptics.elem.opticshapes import lens_shapes, mirror_shapes
from geoptics.typing import Z_DIR
from geoptics.util.observable import Observable

logger = logging.getLogger(__name__)


class Optic(Observable):
    """ Base class for a thin lens or mirror

    Attributes:
        optic_type: :class:`~.OpticType` of the optic
        sign: +1 if images form in the direction of propagation, else -1
        diameter_range: slider range of the diameter
        label: display name of the optic
    """
    optic_type = None
    diameter_range = None
    sign: Z_DIR = 1

    def __init__(self, optic_shape, diameter, radius_of_curvature,
                 index_of_refraction=None, position=mc.DEFAULT_OPTIC_POSITION,
                 focal_length_control=FocalLengthControl.INDIRECT,
                 label=None):
        super().__init__()
        self._optic_shape = to_enum(OpticShape, optic_shape)
        self._diameter = check_positive('diameter', diameter)
        self._position = check_position('position', position)
        self._control = to_enum(FocalLengthControl, focal_length_control)
        self.label = label if label is not None else self.optic_type.value

        indirect = IndirectFocalLengthModel(radius_of_curvature,
                                            index_of_refraction)
        direct = DirectFocalLengthModel(
            focal_length_from_radius(indirect.radius_of_curvature_magnitude,
                                     indirect.index_of_refraction),
            indirect.index_of_refraction)
        self._models = {FocalLengthControl.DIRECT: direct,
                        FocalLengthControl.INDIRECT: indirect}
        for model in self._models.values():
            model.add_observer(self._focal_length_model_changed)

        self._defaults = (self._diameter, self._position.copy(),
                          self._control)
        self._resetting = False

    def __repr__(self):
        return "{!s}({!r}, diameter={!r}, position={!r})".format(
            type(self).__name__, self._optic_shape.value, self._diameter,
            tuple(self._position))

    def _focal_length_model_changed(self, model):
        if model is self.focal_length_model and not self._resetting:
            self.notify()

    @property
    def optic_shape(self):
        return self._optic_shape

    @property
    def diameter(self):
        return self._diameter

    @diameter.setter
    def diameter(self, value):
        d = check_positive('diameter', value)
        if d != self._diameter:
            self._diameter = d
            self.notify()

    @property
    def position(self):
        """ center of the optic, a copy of the internal point """
        return self._position.copy()

    @position.setter
    def position(self, value):
        pos = check_position('position', value)
        if not np.array_equal(pos, self._position):
            self._position = pos
            self.notify()

    @property
    def focal_length_control(self):
        return self._control

    @focal_length_control.setter
    def focal_length_control(self, value):
        control = to_enum(FocalLengthControl, value)
        if control != self._control:
            current = self.focal_length_model
            self._models[control].sync_to_model(current)
            self._control = control
            logger.debug("%s focal length control: %s", self.label,
                         control.value)
            self.notify()

    @property
    def focal_length_model(self):
        """ the focal length model selected by focal_length_control """
        return self._models[self._control]

    def get_focal_length_model(self, control):
        return self._models[to_enum(FocalLengthControl, control)]

    def is_converging(self):
        raise NotImplementedError

    @property
    def focal_length(self):
        """ signed focal length, positive for a converging optic

        A flat optic has no optical power and returns ``math.inf``.
        """
        if self._optic_shape == OpticShape.FLAT:
            return math.inf
        magnitude = self.focal_length_model.focal_length_magnitude
        return magnitude if self.is_converging() else -magnitude

    @property
    def radius_of_curvature(self):
        return self.focal_length_model.radius_of_curvature_magnitude

    @property
    def index_of_refraction(self):
        return self.focal_length_model.index_of_refraction

    def _axis_point(self, multiple):
        f = self.focal_length
        if math.isinf(f):
            return None
        return self._position + np.array([multiple*abs(f), 0.])

    @property
    def left_focal_point(self):
        return self._axis_point(-1)

    @property
    def right_focal_point(self):
        return self._axis_point(1)

    @property
    def left_2f_point(self):
        return self._axis_point(-2)

    @property
    def right_2f_point(self):
        return self._axis_point(2)

    @property
    def top_point(self):
        """ upper edge of the aperture """
        return self._position + np.array([0., self._diameter/2])

    @property
    def bottom_point(self):
        """ lower edge of the aperture """
        return self._position - np.array([0., self._diameter/2])

    def in_aperture(self, y, eps=1e-9):
        """ returns True if height y on the optic plane is inside the aperture
        """
        return abs(y - self._position[1]) <= self._diameter/2 + eps

    def _local_shapes(self):
        raise NotImplementedError

    def shapes(self):
        """ returns the :class:`~.OpticShapes` at the optic's position """
        return self._local_shapes().translated(self._position)

    def contains_point(self, pt):
        """ hit test of the model point pt against the optic's fill shape """
        local_pt = np.asarray(pt, dtype=float) - self._position
        return self._local_shapes().contains_point(local_pt)

    def reset(self):
        """ restore the construction values of all parameters """
        self._resetting = True
        try:
            for model in self._models.values():
                model.reset()
        finally:
            self._resetting = False
        self._diameter, pos, self._control = self._defaults
        self._position = pos.copy()
        self.notify()

    def listobj_str(self):
        o_str = f"{self.label}: {self.optic_type.value} "\
                f"{self._optic_shape.value}\n"
        o_str += f"position: {self._position[0]:.6g}, "\
                 f"{self._position[1]:.6g}   diameter: {self._diameter:.6g}\n"
        o_str += f"focal length: {self.focal_length:.6g}\n"
        o_str += self.focal_length_model.listobj_str()
        return o_str


class Lens(Optic):
    """ thin symmetric lens, converging when convex """
    optic_type = OpticType.LENS
    diameter_range = mc.LENS_DIAMETER
    sign: Z_DIR = 1

    def __init__(self, optic_shape=OpticShape.CONVEX,
                 diameter=mc.LENS_DIAMETER.value,
                 radius_of_curvature=mc.LENS_RADIUS_OF_CURVATURE.value,
                 index_of_refraction=mc.LENS_INDEX_OF_REFRACTION.value,
                 **kwargs):
        super().__init__(optic_shape, diameter, radius_of_curvature,
                         index_of_refraction=index_of_refraction, **kwargs)

    def is_converging(self):
        return self._optic_shape == OpticShape.CONVEX

    def _local_shapes(self):
        return lens_shapes(self._optic_shape, self.radius_of_curvature,
                           self._diameter)


class Mirror(Optic):
    """ first surface mirror, converging when concave """
    optic_type = OpticType.MIRROR
    diameter_range = mc.MIRROR_DIAMETER
    sign: Z_DIR = -1

    def __init__(self, optic_shape=OpticShape.CONCAVE,
                 diameter=mc.MIRROR_DIAMETER.value,
                 radius_of_curvature=mc.MIRROR_RADIUS_OF_CURVATURE.value,
                 **kwargs):
        super().__init__(optic_shape, diameter, radius_of_curvature,
                         index_of_refraction=None, **kwargs)

    def is_converging(self):
        return self._optic_shape == OpticShape.CONCAVE

    def _local_shapes(self):
        return mirror_shapes(self._optic_shape, self.radius_of_curvature,
                             self._diameter)


def create_lens(**kwargs):
    """ returns a :class:`Lens`, convex with default parameters if no kwargs
    """
    return Lens(**kwargs)


def create_mirror(**kwargs):
    """ returns a :class:`Mirror`, concave with default parameters if no
    kwargs
    """
    return Mirror(**kwargs)
