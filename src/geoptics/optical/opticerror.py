#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Support for optical model exception handling

.. Created on Tue Mar 15 10:02:18 2022

.. codeauthor: Michael J. Hayford
"""
from math import isfinite

import numpy as np


class OpticsError(Exception):
    """ Base exception for the geometric optics model """


class InvalidParameterError(OpticsError, ValueError):
    """ Exception raised when a model parameter is out of its domain

    Raised by constructors and setters before any state is changed.
    """
    def __init__(self, msg, name=None, value=None):
        super().__init__(msg)
        self.name = name
        self.value = value


class DegenerateGeometryError(OpticsError):
    """ Exception raised when the image distance diverges

    The object sits at the focal point, so 1/di = 1/f - 1/do is zero.
    Handled inside image formation, never surfaced to a consumer.
    """
    def __init__(self, object_distance, focal_length):
        super().__init__(f"object distance {object_distance} equals "
                         f"focal length {focal_length}")
        self.object_distance = object_distance
        self.focal_length = focal_length


class UnsupportedOperationError(OpticsError):
    """ Exception raised when an operation doesn't apply to an optic """
    def __init__(self, msg, optic=None):
        super().__init__(msg)
        self.optic = optic


def check_positive(name, value):
    """ return value as a float if it is finite and > 0

    Raises:
        InvalidParameterError: otherwise
    """
    try:
        fvalue = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}",
                                    name=name, value=value) from None
    if not isfinite(fvalue) or fvalue <= 0.0:
        raise InvalidParameterError(
            f"{name} must be positive and finite, got {value!r}",
            name=name, value=value)
    return fvalue


def check_index_of_refraction(value, name='index_of_refraction'):
    """ return value as a float if it is finite and > 1

    Raises:
        InvalidParameterError: otherwise
    """
    n = check_positive(name, value)
    if n <= 1.0:
        raise InvalidParameterError(f"{name} must exceed 1, got {value!r}",
                                    name=name, value=value)
    return n


def check_position(name, value):
    """ return value as a 2d numpy point if both coordinates are finite

    Raises:
        InvalidParameterError: otherwise
    """
    try:
        pt = np.array(value, dtype=float).reshape(2)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be an (x, y) pair, "
                                    f"got {value!r}",
                                    name=name, value=value) from None
    if not np.all(np.isfinite(pt)):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}",
                                    name=name, value=value)
    return pt
