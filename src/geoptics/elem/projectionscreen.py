#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Projection screen that catches the light leaving a lens

    The screen is drawn in perspective, as a trapezoid whose near (right)
    edge is taller than its far (left) edge. Light is caught on the
    vertical bisector of the trapezoid, at x = position[0].

.. Created on Mon Mar 28 10:21:45 2022

.. codeauthor: Michael J. Hayford
"""
import numpy as np

from geoptics.optical import model_constants as mc
from geoptics.optical.opticerror import check_position
from geoptics.util.misc_math import point_in_polygon
from geoptics.util.observable import Observable


class ProjectionScreen(Observable):
    """ movable screen with a fixed outline

    Attributes:
        screen_shape: closed outline, (N, 2) array relative to position
        bisector_line: (2, 2) array, the top and bottom of the line that
                       catches the light, relative to position
    """

    def __init__(self, position=mc.DEFAULT_SCREEN_POSITION, label='screen'):
        super().__init__()
        self._position = check_position('position', position)
        self._default_position = self._position.copy()
        self.label = label

        w = mc.SCREEN_WIDTH/2
        near = mc.SCREEN_NEAR_HEIGHT/2
        far = mc.SCREEN_FAR_HEIGHT/2
        self.screen_shape = np.array([[-w, far], [w, near],
                                      [w, -near], [-w, -far]])
        h = (mc.SCREEN_NEAR_HEIGHT + mc.SCREEN_FAR_HEIGHT)/4
        self.bisector_line = np.array([[0., h], [0., -h]])

    def __repr__(self):
        return "{!s}({!r})".format(type(self).__name__, tuple(self._position))

    @property
    def position(self):
        return self._position.copy()

    @position.setter
    def position(self, value):
        pos = check_position('position', value)
        if not np.array_equal(pos, self._position):
            self._position = pos
            self.notify()

    @property
    def half_height(self):
        """ half the length of the bisector line """
        return self.bisector_line[0][1]

    def screen_shape_translated(self):
        return self.screen_shape + self._position

    def bisector_line_translated(self):
        return self.bisector_line + self._position

    def contains_point(self, pt):
        return point_in_polygon(pt, self.screen_shape_translated())

    def reset(self):
        self._position = self._default_position.copy()
        self.notify()

    def listobj_str(self):
        return f"{self.label}: "\
               f"{self._position[0]:.6g}, {self._position[1]:.6g}\n"
