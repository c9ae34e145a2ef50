#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2022 Michael J. Hayford
""" Jump points, the positions a measuring tool can be moved to by hotkey

    The points of interest of a scene are, in order: the optic, each
    object, each image, the left and right focal points and the left and
    right 2F points. :class:`JumpPointRegistry` keeps the points of each
    navigation context, typically one per scene, and finds the next point
    a tool should jump to.

.. Created on Mon Mar 21 10:12:38 2022

.. codeauthor: Michael J. Hayford
"""
import logging
from collections import namedtuple

import numpy as np

from geoptics.optical.model_constants import JUMP_POINT_TOLERANCE
from geoptics.optical.model_enums import OpticalImageType
from geoptics.optical.opticerror import InvalidParameterError
from geoptics.coord_geometry_types import V2d, Vec2d
from geoptics.typing import RulerOrientation
from geoptics.util.misc_math import bounds_contains

logger = logging.getLogger(__name__)

ToolJumpPoint = namedtuple('ToolJumpPoint', ['label', 'position', 'visible'])
ToolJumpPoint.__doc__ = "position a measuring tool can jump to"
ToolJumpPoint.label.__doc__ = "name of the entity the point belongs to"
ToolJumpPoint.position.__doc__ = "numpy point, or None if undefined"
ToolJumpPoint.visible.__doc__ = "True if the entity is shown in the scene"


def _jump_point(label, position, visible):
    return ToolJumpPoint(label, position, visible and position is not None)


def build_jump_points(optic, objects, images, visibility):
    """ returns the jump points of a scene, in navigation priority order

    Args:
        optic: the :class:`~.Optic`
        objects: list of :class:`~.OpticalObject`
        images: list of :class:`~.OpticalImage`, one per object
        visibility: the :class:`~.SceneVisibility` toggles
    """
    jump_points = [_jump_point(optic.label, optic.position,
                               visibility.optic)]

    for i, obj in enumerate(objects):
        label = obj.label or f"object {i+1}"
        jump_points.append(_jump_point(label, obj.position, obj.visible))

    for i, (obj, image) in enumerate(zip(objects, images)):
        label = f"image of {obj.label}" if obj.label else f"image {i+1}"
        visible = obj.visible and visibility.images
        if image.image_type == OpticalImageType.VIRTUAL:
            visible = visible and visibility.virtual_images
        jump_points.append(_jump_point(label, image.position, visible))

    jump_points.append(_jump_point('left focal point', optic.left_focal_point,
                                   visibility.focal_points))
    jump_points.append(_jump_point('right focal point',
                                   optic.right_focal_point,
                                   visibility.focal_points))
    jump_points.append(_jump_point('left 2F point', optic.left_2f_point,
                                   visibility.two_f_points))
    jump_points.append(_jump_point('right 2F point', optic.right_2f_point,
                                   visibility.two_f_points))
    return jump_points


def next_jump_point(points, tool_position, tol=JUMP_POINT_TOLERANCE):
    """ returns the point after tool_position, or None

    points must be sorted left to right. If the tool sits on one of the
    points the following one is returned, with wrap-around. Otherwise the
    first point to the right of the tool is returned, or the leftmost point
    if there is none.
    """
    if len(points) == 0:
        return None
    tool_position = np.asarray(tool_position, dtype=float)
    for i, pt in enumerate(points):
        if np.allclose(pt, tool_position, rtol=0., atol=tol):
            if len(points) > 1:
                return points[(i + 1) % len(points)]
            return None

    for pt in points:
        if pt[0] > tool_position[0]:
            return pt
    leftmost = points[0]
    if np.allclose(leftmost, tool_position, rtol=0., atol=tol):
        return None
    return leftmost


class JumpPointRegistry:
    """ Jump points for each navigation context

    Attributes:
        optic_positions: keys are contexts, values are the optic position,
                         used to place rulers on the optical axis
    """

    def __init__(self):
        self._jump_points = {}
        self.optic_positions = {}

    def __repr__(self):
        return "{!s}(contexts={!r})".format(type(self).__name__,
                                            self.contexts())

    def update(self, context, jump_points, optic_position=None):
        """ replace the jump points of context """
        self._jump_points[context] = tuple(jump_points)
        if optic_position is not None:
            self.optic_positions[context] = np.array(optic_position,
                                                     dtype=float)

    def remove(self, context):
        self._jump_points.pop(context, None)
        self.optic_positions.pop(context, None)

    def contexts(self):
        return list(self._jump_points.keys())

    def get_jump_points(self, context=None):
        """ returns the ordered jump points of context, or of all contexts """
        if context is not None:
            return list(self._jump_points.get(context, ()))
        return [jp for jps in self._jump_points.values() for jp in jps]

    def jump_to_point(self, current_position: V2d, context=None,
                      drag_bounds=None,
                      orientation: RulerOrientation | None = None
                      ) -> Vec2d | None:
        """ returns the position a tool at current_position should jump to

        Args:
            current_position: position of the tool
            context: the navigation context, all contexts if None
            drag_bounds: :class:`~.Bounds2` the tool is confined to
            orientation: None for a marker, or 'horizontal'/'vertical' for
                         a ruler

        Returns:
            the next position, or None if there is nowhere to jump to

        A horizontal ruler is placed on the optical axis and ignores points
        to the right of the optic. A vertical ruler ignores points on the
        optical axis and is placed to measure from the axis.
        """
        candidates = [jp.position for jp in self.get_jump_points(context)
                      if jp.visible and jp.position is not None]
        if drag_bounds is not None:
            candidates = [pt for pt in candidates
                          if bounds_contains(drag_bounds, pt)]

        if orientation is not None:
            optic_pos = self._optic_position(context)
            if orientation == 'horizontal':
                candidates = [pt for pt in candidates
                              if pt[0] <= optic_pos[0]]
            elif orientation == 'vertical':
                candidates = [pt for pt in candidates
                              if pt[1] != optic_pos[1]]
            else:
                raise InvalidParameterError(
                    f"unknown ruler orientation {orientation!r}",
                    name='orientation', value=orientation)

        candidates.sort(key=lambda pt: pt[0])
        if orientation == 'horizontal':
            candidates = [np.array([pt[0], optic_pos[1]])
                          for pt in candidates]
        elif orientation == 'vertical':
            candidates = [np.array([pt[0], min(pt[1], optic_pos[1])])
                          for pt in candidates]

        next_pt = next_jump_point(candidates, current_position)
        logger.debug("jump from %s to %s", current_position, next_pt)
        return None if next_pt is None else np.array(next_pt, dtype=float)

    def _optic_position(self, context):
        if context is None:
            if len(self.optic_positions) == 0:
                return np.zeros(2)
            return next(iter(self.optic_positions.values()))
        return self.optic_positions.get(context, np.zeros(2))
