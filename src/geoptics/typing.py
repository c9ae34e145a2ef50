#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for geoptics

Created on Tue Mar 22 15:10:37 2022

.. codeauthor: Michael J. Hayford
"""
from typing import Literal
from geoptics.coord_geometry_types import Vec2d

RaysModeName = Literal['marginal', 'principal', 'many', 'none']
RulerOrientation = Literal['horizontal', 'vertical']

Z_DIR = Literal[-1, 1]

LightRay = list['LightRaySegment']
RayFan = list[LightRay]
SegmentEnds = tuple[Vec2d, Vec2d]
