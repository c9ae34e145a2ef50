#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Support for ray trace exception handling

.. Created on Fri Mar 18 09:14:27 2022

.. codeauthor: Michael J. Hayford
"""
from geoptics.optical.opticerror import OpticsError


class TraceError(OpticsError):
    """ Exception raised when ray tracing a scene """


class TraceMissedOpticError(TraceError):
    """ Exception raised when a ray misses the aperture of the optic """
    def __init__(self, optic=None, pt0=None, dir0=None, int_pt=None):
        super().__init__("ray missed the optic")
        self.optic = optic
        self.pt0 = pt0
        self.dir0 = dir0
        self.int_pt = int_pt
