#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for 2d points, directions and polylines

These type hints are provided to ensure a consistent convention of
distinguishing between numpy arrays and array-like arrays.

Vec2d is used for coordinates
Dir2d is used for vector directions, unit length
Poly2d is an N x 2 array of points

Created on Tue Mar 15 09:02:11 2022

.. codeauthor: Michael J. Hayford
"""
import numpy.typing as npt

Vec2d = npt.NDArray
Dir2d = npt.NDArray
Poly2d = npt.NDArray

V2d = npt.ArrayLike
