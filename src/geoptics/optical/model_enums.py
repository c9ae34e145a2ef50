#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" optical model enums

    Each enumeration is defined once here. Members carry the string value
    used by consumers of the model, so that ``RaysMode('principal')`` and
    :func:`to_enum` can convert user input into members.

.. Created on Tue Mar 15 10:21:44 2022

.. codeauthor: Michael J. Hayford
"""

from enum import Enum

from geoptics.optical.opticerror import InvalidParameterError


class OpticShape(Enum):
    """ enum for the shape of the optic's surfaces """
    CONVEX = 'convex'    #: bulges toward the object
    CONCAVE = 'concave'  #: curves away from the object
    FLAT = 'flat'        #: planar, no optical power


class OpticType(Enum):
    """ enum for the kind of optic """
    LENS = 'lens'      #: transmits and refracts light
    MIRROR = 'mirror'  #: reflects light


class RaysMode(Enum):
    """ enum for the light rays traced from each optical object """
    MARGINAL = 'marginal'    #: rays through the top and bottom of the optic
    PRINCIPAL = 'principal'  #: parallel, central and focal rays
    MANY = 'many'            #: a fan of rays spanning the aperture
    NONE = 'none'            #: no rays


class FocalLengthControl(Enum):
    """ enum for how the focal length of the optic is set """
    DIRECT = 'direct'      #: focal length is set directly
    INDIRECT = 'indirect'  #: derived from radius of curvature and index


class OpticalImageType(Enum):
    """ enum for the kind of image formed by the optic """
    REAL = 'real'        #: light converges at the image
    VIRTUAL = 'virtual'  #: light appears to diverge from the image


class GuideLocation(Enum):
    """ enum for the position of a lens guide """
    TOP = 'top'
    BOTTOM = 'bottom'


def to_enum(enum_cls, value):
    """ return the member of enum_cls for value, a member or its string value

    Raises:
        InvalidParameterError: if value names no member of enum_cls
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = ', '.join(repr(m.value) for m in enum_cls)
        raise InvalidParameterError(
            f"{value!r} is not a valid {enum_cls.__name__}, use one of {valid}"
            ) from None
