#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for measuring tool jump points

.. Created on Mon Mar 21 11:52:06 2022

.. codeauthor: Michael J. Hayford
"""

import unittest
import pytest
import numpy as np
import numpy.testing as npt

from geoptics.elem.optic import create_lens
from geoptics.elem.opticalobject import PointObject
from geoptics.gui.jumppoints import (JumpPointRegistry, ToolJumpPoint,
                                     build_jump_points, next_jump_point)
from geoptics.optical.model_constants import Bounds2
from geoptics.optical.opticalmodel import SceneVisibility
from geoptics.optical.opticerror import InvalidParameterError
from geoptics.parax.imageformation import compute_images


def scene_jump_points(objects, lens=None, **visibility):
    lens = lens if lens is not None else create_lens()
    images = compute_images(objects, lens)
    return build_jump_points(lens, objects, images,
                             SceneVisibility(**visibility))


class BuildJumpPointsTestCase(unittest.TestCase):

    def test_priority_order(self):
        obj = PointObject((-200., 30.), label='lamp')
        jps = scene_jump_points([obj])
        assert [jp.label for jp in jps] == [
            'lens', 'lamp', 'image of lamp',
            'left focal point', 'right focal point',
            'left 2F point', 'right 2F point']
        visible = [jp.visible for jp in jps]
        assert visible == [True, True, True, True, True, False, False]
        npt.assert_allclose(jps[2].position, [400./3., -20.])

    def test_unlabeled_objects(self):
        jps = scene_jump_points([PointObject((-200., 30.)),
                                 PointObject((-250., -10.))])
        labels = [jp.label for jp in jps]
        assert labels[1:5] == ['object 1', 'object 2', 'image 1', 'image 2']

    def test_visibility_toggles(self):
        obj = PointObject((-200., 30.))
        jps = scene_jump_points([obj], focal_points=False, two_f_points=True,
                                optic=False)
        assert not jps[0].visible
        assert [jp.visible for jp in jps[3:]] == [False, False, True, True]

        obj.visible = False
        jps = scene_jump_points([obj])
        assert not jps[1].visible
        assert not jps[2].visible

    def test_virtual_image_toggle(self):
        obj = PointObject((-40., 30.))
        jps = scene_jump_points([obj])
        assert jps[2].visible
        jps = scene_jump_points([obj], virtual_images=False)
        assert not jps[2].visible

    def test_undefined_positions_are_invisible(self):
        lens = create_lens()
        # object at the focal point, image at infinity
        jps = scene_jump_points([PointObject((-80., 10.))], lens=lens)
        assert jps[2].position is None
        assert not jps[2].visible

        flat = create_lens(optic_shape='flat')
        jps = scene_jump_points([], lens=flat, two_f_points=True)
        assert all(jp.position is None and not jp.visible
                   for jp in jps[1:])


class NextJumpPointTestCase(unittest.TestCase):

    def setUp(self):
        self.points = [np.array([-200., 30.]), np.array([-80., 0.]),
                       np.array([0., 0.])]

    def test_empty(self):
        assert next_jump_point([], (0., 0.)) is None

    def test_from_a_jump_point(self):
        npt.assert_array_equal(next_jump_point(self.points, (-80., 0.)),
                               [0., 0.])
        # wrap-around
        npt.assert_array_equal(next_jump_point(self.points, (0., 0.)),
                               [-200., 30.])

    def test_from_elsewhere(self):
        npt.assert_array_equal(next_jump_point(self.points, (-100., 50.)),
                               [-80., 0.])
        npt.assert_array_equal(next_jump_point(self.points, (10., 0.)),
                               [-200., 30.])

    def test_single_point(self):
        assert next_jump_point(self.points[:1], (-200., 30.)) is None


class JumpPointRegistryTestCase(unittest.TestCase):

    def setUp(self):
        self.registry = JumpPointRegistry()
        obj = PointObject((-200., 30.))
        self.registry.update('arrow', scene_jump_points([obj]),
                             optic_position=(0., 0.))
        # visible points, left to right: object (-200, 30), F (-80, 0),
        # optic (0, 0), F' (80, 0), image (133.3, -20)

    def test_contexts(self):
        assert self.registry.contexts() == ['arrow']
        assert len(self.registry.get_jump_points('arrow')) == 7
        assert self.registry.get_jump_points('framed') == []

        self.registry.update('framed', [ToolJumpPoint('x', None, False)])
        assert len(self.registry.get_jump_points()) == 8
        self.registry.remove('framed')
        assert self.registry.contexts() == ['arrow']

    def test_jump_cycle(self):
        pos = np.array([-300., 0.])
        visited = []
        for i in range(6):
            pos = self.registry.jump_to_point(pos, 'arrow')
            visited.append(pos)
        npt.assert_allclose(visited[0], [-200., 30.])
        npt.assert_allclose(visited[1], [-80., 0.])
        npt.assert_allclose(visited[2], [0., 0.])
        npt.assert_allclose(visited[3], [80., 0.])
        npt.assert_allclose(visited[4], [400./3., -20.])
        npt.assert_allclose(visited[5], [-200., 30.])

    def test_past_the_last_point(self):
        npt.assert_allclose(self.registry.jump_to_point((500., 0.)),
                            [-200., 30.])

    def test_drag_bounds(self):
        bounds = Bounds2(-100., -50., 100., 50.)
        npt.assert_allclose(
            self.registry.jump_to_point((-300., 0.), drag_bounds=bounds),
            [-80., 0.])

    def test_horizontal_ruler(self):
        jump = self.registry.jump_to_point((-300., 0.),
                                           orientation='horizontal')
        npt.assert_allclose(jump, [-200., 0.])
        jump = self.registry.jump_to_point((0., 0.),
                                           orientation='horizontal')
        # points to the right of the optic are skipped
        npt.assert_allclose(jump, [-200., 0.])

    def test_vertical_ruler(self):
        jump = self.registry.jump_to_point((-300., 0.),
                                           orientation='vertical')
        npt.assert_allclose(jump, [-200., 0.])
        jump = self.registry.jump_to_point(jump, orientation='vertical')
        npt.assert_allclose(jump, [400./3., -20.])

    def test_invalid_orientation(self):
        with pytest.raises(InvalidParameterError):
            self.registry.jump_to_point((0., 0.), orientation='diagonal')

    def test_empty_registry(self):
        assert JumpPointRegistry().jump_to_point((0., 0.)) is None


if __name__ == '__main__':
    unittest.main(verbosity=2)
